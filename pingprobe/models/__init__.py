"""
数据模型包
提供所有核心数据结构的导入
"""
from .config import (
    DEFAULT_COUNT,
    DEFAULT_SIZE,
    IpVersion,
    OutputMode,
    ProbeConfigError,
    ProbeConfiguration,
    default_destination,
)
from .report import LatencyStats, PacketOutcome, ProbeReport
from .results import CommandResult

__all__ = [
    # 枚举类型
    "IpVersion",
    "OutputMode",
    "PacketOutcome",
    # 配置相关
    "ProbeConfiguration",
    "ProbeConfigError",
    "DEFAULT_COUNT",
    "DEFAULT_SIZE",
    "default_destination",
    # 结果相关
    "CommandResult",
    "LatencyStats",
    "ProbeReport",
]
