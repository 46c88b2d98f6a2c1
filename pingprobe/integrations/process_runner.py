"""
进程执行服务

启动外部ping工具、等待其退出并捕获标准输出
"""
import asyncio
import json
import locale
import logging
import os
import time
from pathlib import Path
from typing import Dict, List, Optional, Sequence

from ..models.results import CommandResult

logger = logging.getLogger(__name__)


# 自定义异常类
class ProcessExecutionError(Exception):
    """进程执行服务错误基类"""
    pass


class ProbeLaunchError(ProcessExecutionError):
    """外部工具无法启动（可执行文件不存在、权限不足等）"""
    pass


class ProbeTimeoutError(ProcessExecutionError):
    """外部工具在超时时间内未退出"""
    def __init__(self, message: str, timeout: float):
        super().__init__(message)
        self.timeout = timeout


class MockDataNotFoundError(ProcessExecutionError):
    """Mock 数据不存在异常"""
    pass


def output_encoding() -> str:
    """外部工具输出使用的编码"""
    return os.getenv("PINGPROBE_OUTPUT_ENCODING") or locale.getpreferredencoding(False)


class ProcessRunner:
    """
    本地进程执行器

    给定参数列表，等待进程退出后返回捕获的输出
    """

    def __init__(self, encoding: Optional[str] = None):
        """
        初始化执行器

        Args:
            encoding: 解码输出使用的编码，默认取控制台编码
        """
        self.encoding = encoding or output_encoding()

    async def execute(self, argv: Sequence[str], timeout: Optional[float] = None) -> CommandResult:
        """
        执行命令

        Args:
            argv: 参数列表，第一个元素为可执行文件
            timeout: 超时时间（秒），None表示一直等待进程退出

        Returns:
            CommandResult: 命令执行结果

        Raises:
            ProbeLaunchError: 进程无法启动
            ProbeTimeoutError: 进程超时（已被终止）
        """
        argv = list(argv)
        started = time.monotonic()

        try:
            process = await asyncio.create_subprocess_exec(
                *argv,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE
            )
        except OSError as e:
            raise ProbeLaunchError(f"无法启动 {argv[0]}: {e}") from e

        try:
            stdout, stderr = await asyncio.wait_for(process.communicate(), timeout=timeout)
        except asyncio.TimeoutError:
            try:
                process.kill()
            except ProcessLookupError:
                # 进程恰好在超时后退出
                pass
            await process.wait()
            logger.warning("进程超时(%ss)，已终止: %s", timeout, " ".join(argv))
            raise ProbeTimeoutError(f"{argv[0]} 在 {timeout} 秒内未退出", timeout=timeout)

        elapsed = time.monotonic() - started
        result = CommandResult(
            argv=argv,
            stdout=stdout.decode(self.encoding, errors="replace"),
            stderr=stderr.decode(self.encoding, errors="replace"),
            exit_code=process.returncode,
            execution_time=elapsed
        )
        logger.debug("进程结束: %s", result)
        return result


class MockProcessRunner(ProcessRunner):
    """
    Mock进程执行器

    从JSON文件读取预定义的ping输出，不启动任何进程。
    执行过的参数列表记录在calls中
    """

    def __init__(
        self,
        scenario: Optional[str] = None,
        stdout: Optional[str] = None,
        mock_responses_path: Optional[str] = None
    ):
        """
        初始化Mock执行器

        Args:
            scenario: 场景名称
            stdout: 直接指定返回的输出（优先于scenario）
            mock_responses_path: Mock数据文件路径
        """
        super().__init__(encoding="utf-8")
        self.scenario = scenario
        self.stdout = stdout
        self.mock_responses_path = mock_responses_path or self._get_default_mock_path()
        self.calls: List[List[str]] = []

    def _get_default_mock_path(self) -> str:
        """获取默认Mock数据路径"""
        project_root = Path(__file__).parent.parent.parent
        return str(project_root / "tests" / "fixtures" / "mock_ping_outputs.json")

    def _load_mock_responses(self) -> Dict:
        """
        加载Mock数据

        Raises:
            MockDataNotFoundError: 文件不存在或格式错误
        """
        try:
            with open(self.mock_responses_path, 'r', encoding='utf-8') as f:
                return json.load(f)
        except FileNotFoundError as e:
            raise MockDataNotFoundError(f"Mock数据文件不存在: {self.mock_responses_path}") from e
        except json.JSONDecodeError as e:
            raise MockDataNotFoundError(f"Mock数据JSON格式错误: {e}") from e

    def list_scenarios(self) -> List[str]:
        """列出所有可用场景"""
        return sorted(self._load_mock_responses().get("scenarios", {}))

    async def execute(self, argv: Sequence[str], timeout: Optional[float] = None) -> CommandResult:
        self.calls.append(list(argv))

        if self.stdout is not None:
            return CommandResult(argv=list(argv), stdout=self.stdout, stderr="", exit_code=0, execution_time=0.0)

        scenarios = self._load_mock_responses().get("scenarios", {})
        if self.scenario not in scenarios:
            raise MockDataNotFoundError(f"Mock场景不存在: {self.scenario}")

        mock_data = scenarios[self.scenario]
        stdout = mock_data.get("stdout", "")
        if isinstance(stdout, list):
            stdout = "\n".join(stdout)

        return CommandResult(
            argv=list(argv),
            stdout=stdout,
            stderr=mock_data.get("stderr", ""),
            exit_code=mock_data.get("exit_code", 0),
            execution_time=mock_data.get("execution_time", 0.5)
        )
