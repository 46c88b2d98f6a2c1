"""
外部服务集成包

提供进程执行服务和配置加载
"""
from .config_loader import load_probe_profiles, load_profile_params
from .process_runner import (
    MockDataNotFoundError,
    MockProcessRunner,
    ProbeLaunchError,
    ProbeTimeoutError,
    ProcessExecutionError,
    ProcessRunner,
)

__all__ = [
    "ProcessRunner",
    "MockProcessRunner",
    "ProcessExecutionError",
    "ProbeLaunchError",
    "ProbeTimeoutError",
    "MockDataNotFoundError",
    "load_probe_profiles",
    "load_profile_params",
]
