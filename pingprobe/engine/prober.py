"""
探测执行引擎

构建参数、调用外部进程并按输出模式返回结果
"""
import logging
import os
from typing import List, Optional, Union

from ..integrations.process_runner import ProcessRunner
from ..models.config import OutputMode, ProbeConfigError, ProbeConfiguration
from ..models.report import ProbeReport
from .command_builder import build_ping_command
from .reporter import parse_probe_output

logger = logging.getLogger(__name__)

ProbeOutput = Union[bool, ProbeReport, List[str]]


def resolve_output_mode(quiet: bool = False, detailed: bool = False) -> OutputMode:
    """
    根据两个互斥开关确定输出模式

    Raises:
        ProbeConfigError: 同时指定quiet和detailed
    """
    if quiet and detailed:
        raise ProbeConfigError("quiet与detailed不能同时指定")
    if quiet:
        return OutputMode.QUIET
    if detailed:
        return OutputMode.DETAILED
    return OutputMode.RAW


def _default_timeout() -> Optional[float]:
    value = os.getenv("PINGPROBE_TIMEOUT", "")
    if not value:
        return None
    try:
        timeout = float(value)
    except ValueError:
        raise ProbeConfigError(f"PINGPROBE_TIMEOUT 不是有效的数字: {value!r}")
    if timeout <= 0:
        raise ProbeConfigError(f"PINGPROBE_TIMEOUT 必须大于0: {value!r}")
    return timeout


class ReachabilityProber:
    """
    连通性探测器

    每次调用相互独立，不保存任何跨调用状态
    """

    def __init__(self, runner: Optional[ProcessRunner] = None, ping_bin: Optional[str] = None):
        """
        初始化探测器

        Args:
            runner: 进程执行服务，测试时可注入MockProcessRunner
            ping_bin: ping可执行文件路径，默认取自环境变量
        """
        self.runner = runner or ProcessRunner()
        self.ping_bin = ping_bin

    async def probe(
        self,
        config: ProbeConfiguration,
        quiet: bool = False,
        detailed: bool = False
    ) -> ProbeOutput:
        """
        执行一次探测

        Args:
            config: 探测配置
            quiet: 仅返回布尔结果
            detailed: 返回完整的ProbeReport

        Returns:
            quiet → bool；detailed → ProbeReport；都未指定 → 原始输出行列表

        Raises:
            ProbeConfigError: 输出模式冲突
            ProbeLaunchError: 外部工具无法启动
            ProbeTimeoutError: 外部工具超时
            ClassificationError: 回复行无法识别
        """
        mode = resolve_output_mode(quiet, detailed)
        timeout = config.timeout if config.timeout is not None else _default_timeout()

        argv = build_ping_command(config, self.ping_bin)
        logger.debug("执行探测: %s", " ".join(argv))

        result = await self.runner.execute(argv, timeout=timeout)

        if mode == OutputMode.RAW:
            return result.stdout.splitlines()

        report = parse_probe_output(config, result.stdout)
        logger.info("探测完成: %s", report)

        if mode == OutputMode.QUIET:
            return report.result
        return report
