"""
命令构建器

根据探测配置生成外部ping工具的参数列表
"""
import os
from typing import List, Optional

from ..models.config import IpVersion, ProbeConfiguration

DEFAULT_PING_BIN = "ping"

# 参数顺序对外部工具有意义: [-a] -n <count> -l <size> [-f] -S <source> -4|-6 <destination>
RESOLVE_FLAG = "-a"
COUNT_FLAG = "-n"
SIZE_FLAG = "-l"
NO_FRAGMENT_FLAG = "-f"
SOURCE_FLAG = "-S"
VERSION_FLAGS = {
    IpVersion.V4: "-4",
    IpVersion.V6: "-6",
}


def build_ping_args(config: ProbeConfiguration) -> List[str]:
    """
    构建ping参数（不含可执行文件名）

    Args:
        config: 已校验的探测配置

    Returns:
        有序参数列表

    示例:
        source=10.0.0.5, destination=example.com, resolve_hostname=True
        → ["-a", "-n", "2", "-l", "32", "-S", "10.0.0.5", "-4", "example.com"]
    """
    args = [COUNT_FLAG, str(config.count), SIZE_FLAG, str(config.size)]

    if config.resolve_hostname:
        args.insert(0, RESOLVE_FLAG)

    # IPv6不提供不分片选项
    if config.no_fragment and not config.is_ipv6:
        args.append(NO_FRAGMENT_FLAG)

    args += [SOURCE_FLAG, config.source, VERSION_FLAGS[config.ip_version], config.destination]
    return args


def build_ping_command(config: ProbeConfiguration, ping_bin: Optional[str] = None) -> List[str]:
    """构建完整的argv，可执行文件默认取自 PINGPROBE_PING_BIN"""
    executable = ping_bin or os.getenv("PINGPROBE_PING_BIN", DEFAULT_PING_BIN)
    return [executable] + build_ping_args(config)
