"""
逐包回复分类器

按顺序匹配规则，把每个回复行判定为成功或失败
"""
import logging
import re
from dataclasses import dataclass
from typing import List, Sequence

from ...models.report import PacketOutcome
from .base import ClassificationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PacketRule:
    """带标签的回复行匹配规则"""
    name: str
    outcome: PacketOutcome
    pattern: "re.Pattern[str]"

    def matches(self, line: str) -> bool:
        return self.pattern.search(line) is not None


# 规则按顺序匹配，首个命中的规则决定结果
PACKET_RULES = (
    # 规则1: 收到回复且带往返时间（含 time<1ms 形式，IPv6回复没有bytes/TTL字段）
    PacketRule(
        "reply",
        PacketOutcome.SUCCESS,
        re.compile(r"^\s*Reply from \S+: (?:bytes=\d+ )?time[=<]\s*\d+\s*ms", re.IGNORECASE),
    ),
    # 规则2: 已知失败短语
    PacketRule("timed_out", PacketOutcome.FAILURE, re.compile(r"Request timed out", re.IGNORECASE)),
    PacketRule(
        "unreachable",
        PacketOutcome.FAILURE,
        re.compile(r"Destination (?:host |net |port |protocol )?unreachable", re.IGNORECASE),
    ),
    PacketRule("transmit_failed", PacketOutcome.FAILURE, re.compile(r"transmit failed", re.IGNORECASE)),
    PacketRule("general_failure", PacketOutcome.FAILURE, re.compile(r"General failure", re.IGNORECASE)),
    PacketRule(
        "needs_fragmentation",
        PacketOutcome.FAILURE,
        re.compile(r"Packet needs to be fragmented but DF set", re.IGNORECASE),
    ),
)


def match_rules(line: str, rules: Sequence[PacketRule] = PACKET_RULES) -> List[PacketRule]:
    """返回所有命中该行的规则（用于校验规则集互斥）"""
    return [rule for rule in rules if rule.matches(line)]


def classify_packet(line: str, index: int) -> PacketOutcome:
    """
    判定单个回复行

    Args:
        line: 候选回复行
        index: 数据包序号（从1开始）

    Returns:
        PacketOutcome: SUCCESS 或 FAILURE

    Raises:
        ClassificationError: 该行既不是成功回复也不含已知失败短语

    示例:
        "Reply from 1.2.3.4: bytes=32 time=7ms TTL=60" → SUCCESS
        "Request timed out." → FAILURE
    """
    for rule in PACKET_RULES:
        if rule.matches(line):
            return rule.outcome

    logger.error("第%d个数据包的回复行无法识别: %r", index, line)
    raise ClassificationError(index, line)


def classify_packets(reply_lines: Sequence[str], count: int) -> List[PacketOutcome]:
    """
    判定回复窗口中的全部数据包

    Args:
        reply_lines: 标题行之后的候选回复行
        count: 期望的数据包数量

    Returns:
        按序号排列的判定结果列表

    Raises:
        ClassificationError: 任一行无法识别，或输出被截断不足count行
    """
    outcomes = [classify_packet(line, index) for index, line in enumerate(reply_lines[:count], 1)]

    if len(outcomes) < count:
        missing = len(outcomes) + 1
        logger.error("输出在第%d个数据包处被截断", missing)
        raise ClassificationError(missing, "")

    return outcomes
