"""
工具包

提供日志配置、输出格式化和命令输出解析器
"""
