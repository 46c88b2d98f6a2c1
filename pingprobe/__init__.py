"""
pingprobe - 绑定源地址的连通性探测

驱动外部ping工具，并把其文本输出解析为结构化的连通性报告
"""
from .engine import ReachabilityProber, build_ping_args, parse_probe_output
from .models import IpVersion, ProbeConfiguration, ProbeReport

__version__ = "1.0.0"

__all__ = [
    "IpVersion",
    "ProbeConfiguration",
    "ProbeReport",
    "ReachabilityProber",
    "build_ping_args",
    "parse_probe_output",
]
