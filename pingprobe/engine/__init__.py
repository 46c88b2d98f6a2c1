"""
探测引擎包

提供命令构建、统计聚合、报告组装和探测执行
"""
from .command_builder import build_ping_args, build_ping_command
from .prober import ReachabilityProber, resolve_output_mode
from .reporter import build_report, parse_probe_output
from .statistics import PacketStatistics, aggregate

__all__ = [
    "build_ping_args",
    "build_ping_command",
    "aggregate",
    "PacketStatistics",
    "build_report",
    "parse_probe_output",
    "ReachabilityProber",
    "resolve_output_mode",
]
