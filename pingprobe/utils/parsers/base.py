"""
解析器基类和通用数据结构

定义所有解析器共用的数据结构和异常
"""
from dataclasses import dataclass, field
from typing import List, Optional


HEADER_MARKER = "bytes of data:"
SUMMARY_MARKER = "Average = "


@dataclass
class OutputWindow:
    """ping输出的分行结果及回复行窗口"""
    lines: List[str]                           # 全部输出行
    degenerate: bool                           # 输出过短，无法提取回复窗口
    header_index: Optional[int] = None         # 标题行下标（未找到时为None）
    reply_lines: List[str] = field(default_factory=list)  # 紧随标题行的count个候选回复行

    @property
    def header(self) -> Optional[str]:
        if self.header_index is None:
            return None
        return self.lines[self.header_index]


@dataclass(frozen=True)
class Endpoints:
    """从标题行解析出的端点信息"""
    source: str
    destination: str
    resolved: bool = False              # 是否来自输出而非输入配置


class ParseError(Exception):
    """解析错误异常"""
    def __init__(self, message: str, raw_output: str = ""):
        super().__init__(message)
        self.raw_output = raw_output


class ClassificationError(ParseError):
    """回复行既不匹配成功形态，也不匹配已知失败短语"""
    def __init__(self, packet_index: int, line: str):
        super().__init__(f"无法识别第{packet_index}个数据包的回复行: {line!r}", raw_output=line)
        self.packet_index = packet_index
        self.line = line
