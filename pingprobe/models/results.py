"""
执行结果相关数据模型
定义外部进程的执行结果
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List


@dataclass
class CommandResult:
    """
    命令执行结果

    记录外部探测工具单次运行的完整输出
    """
    argv: List[str]                     # 执行的参数列表（含可执行文件）
    stdout: str                         # 标准输出
    stderr: str                         # 标准错误输出
    exit_code: int                      # 退出码
    execution_time: float               # 执行耗时（秒）
    timestamp: datetime = field(default_factory=datetime.now)

    @property
    def command(self) -> str:
        return " ".join(self.argv)

    @property
    def success(self) -> bool:
        return self.exit_code == 0

    def __str__(self) -> str:
        status = "OK" if self.success else "FAIL"
        return (f"{status} {self.command} "
               f"(exit={self.exit_code}, time={self.execution_time:.2f}s)")

    def to_dict(self) -> Dict[str, Any]:
        """转换为字典格式"""
        return {
            "argv": list(self.argv),
            "stdout": self.stdout,
            "stderr": self.stderr,
            "exit_code": self.exit_code,
            "execution_time": self.execution_time,
            "timestamp": self.timestamp.isoformat()
        }
