"""
探测报告数据模型
定义单包判定结果、延迟统计和最终输出的连通性报告
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class PacketOutcome(str, Enum):
    """单个回显请求的判定结果"""
    SUCCESS = "success"
    FAILURE = "failure"


@dataclass(frozen=True)
class LatencyStats:
    """往返时延统计（毫秒）"""
    min_ms: int
    max_ms: int
    avg_ms: int


@dataclass
class ProbeReport:
    """
    连通性报告

    result为True当且仅当至少收到一个回复；
    latency仅在result为True且找到统计行时存在；
    IPv6模式下no_fragment恒为None
    """
    result: bool                        # 是否可达
    sent: int                           # 发送数（退化输出时为0）
    received: int                       # 成功回复数
    percent: int                        # 成功百分比（向下取整）
    source: str                         # 解析出的或输入的源地址
    destination: str                    # 解析出的 "hostname [ip]" 或输入的目标
    size: Optional[int] = None          # 负载字节数（退化输出时省略）
    no_fragment: Optional[bool] = None  # 不分片标志（IPv6时省略）
    latency: Optional[LatencyStats] = None
    raw_text: List[str] = field(default_factory=list)  # 完整原始输出，用于审计

    @property
    def min_latency_ms(self) -> Optional[int]:
        return self.latency.min_ms if self.latency else None

    @property
    def max_latency_ms(self) -> Optional[int]:
        return self.latency.max_ms if self.latency else None

    @property
    def avg_latency_ms(self) -> Optional[int]:
        return self.latency.avg_ms if self.latency else None

    def __str__(self) -> str:
        status = "可达" if self.result else "不可达"
        return (f"{self.source} → {self.destination}: {status} "
               f"({self.received}/{self.sent}, {self.percent}%)")

    def to_dict(self) -> Dict[str, Any]:
        """
        转换为调用方使用的字典格式

        缺失的可选字段直接省略，而不是输出None
        """
        data: Dict[str, Any] = {
            "result": self.result,
            "sent": self.sent,
            "received": self.received,
            "percent": self.percent,
        }
        if self.size is not None:
            data["size"] = self.size
        if self.no_fragment is not None:
            data["noFragment"] = self.no_fragment
        data["source"] = self.source
        data["destination"] = self.destination
        if self.latency is not None:
            data["minLatencyMs"] = self.latency.min_ms
            data["maxLatencyMs"] = self.latency.max_ms
            data["avgLatencyMs"] = self.latency.avg_ms
        data["rawText"] = list(self.raw_text)
        return data
