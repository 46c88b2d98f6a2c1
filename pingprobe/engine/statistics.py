"""
统计聚合器

汇总逐包判定结果，计算发送数、接收数和成功百分比
"""
from dataclasses import dataclass
from typing import Sequence

from ..models.report import PacketOutcome


@dataclass(frozen=True)
class PacketStatistics:
    """逐包统计结果"""
    sent: int
    received: int
    percent: int
    result: bool


DEGENERATE_STATISTICS = PacketStatistics(sent=0, received=0, percent=0, result=False)


def aggregate(outcomes: Sequence[PacketOutcome], count: int, degenerate: bool = False) -> PacketStatistics:
    """
    聚合逐包结果

    Args:
        outcomes: 按序号排列的判定结果
        count: 配置的发送次数
        degenerate: 输出是否退化（退化时直接返回全零结果）

    Returns:
        PacketStatistics
    """
    if degenerate:
        return DEGENERATE_STATISTICS

    sent = count
    received = sum(1 for outcome in outcomes if outcome == PacketOutcome.SUCCESS)
    percent = received * 100 // sent if sent > 0 else 0

    return PacketStatistics(
        sent=sent,
        received=received,
        percent=percent,
        result=received > 0
    )
