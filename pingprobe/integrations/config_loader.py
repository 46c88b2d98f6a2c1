"""
探测配置加载器

从YAML配置文件加载命名的探测配置
"""
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from ..models.config import ProbeConfigError, ProbeConfiguration


def _expand_env(value):
    """替换 ${VAR} 形式的环境变量引用"""
    if isinstance(value, str) and value.startswith('${') and value.endswith('}'):
        return os.getenv(value[2:-1], '')
    return value


def load_profile_params(config_path: Optional[str] = None) -> Dict[str, Dict[str, Any]]:
    """
    读取探测配置的原始参数（已替换环境变量，未校验）

    Args:
        config_path: 配置文件路径，如果为None则使用默认路径

    Returns:
        配置名称到参数字典的映射

    Raises:
        FileNotFoundError: 配置文件不存在
        yaml.YAMLError: 配置文件格式错误
        ProbeConfigError: 某个配置缺少name字段
    """
    if config_path is None:
        # 默认配置文件路径
        project_root = Path(__file__).parent.parent.parent
        config_path = project_root / "config" / "probe_profiles.yaml"

    # 检查配置文件是否存在
    if not Path(config_path).exists():
        raise FileNotFoundError(f"探测配置文件不存在: {config_path}")

    # 读取配置文件
    with open(config_path, 'r', encoding='utf-8') as f:
        config_data = yaml.safe_load(f) or {}

    profiles = {}
    for profile in config_data.get('profiles', []):
        name = profile.get('name')
        if not name:
            raise ProbeConfigError(f"探测配置缺少name字段: {profile}")
        profiles[name] = {key: _expand_env(value) for key, value in profile.items() if key != 'name'}

    return profiles


def load_probe_profiles(config_path: Optional[str] = None) -> Dict[str, ProbeConfiguration]:
    """
    加载并校验全部探测配置

    Raises:
        FileNotFoundError: 配置文件不存在
        ProbeConfigError: 某个配置的参数无效
    """
    profiles = {}
    for name, params in load_profile_params(config_path).items():
        try:
            profiles[name] = ProbeConfiguration.create(**params)
        except ProbeConfigError as e:
            raise ProbeConfigError(f"探测配置 {name} 无效: {e}", errors=e.errors) from e

    return profiles
