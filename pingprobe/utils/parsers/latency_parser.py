"""
延迟统计解析器

从ping的统计块中提取最小/最大/平均往返时间
"""
import logging
import re
from typing import Optional, Sequence

from ...models.report import LatencyStats
from .base import SUMMARY_MARKER

logger = logging.getLogger(__name__)

_UNIT_PATTERN = re.compile(r"^(\d+)\s*ms$")


def find_summary_line(lines: Sequence[str]) -> Optional[str]:
    """返回包含 "Average = " 的统计行"""
    for line in lines:
        if SUMMARY_MARKER in line:
            return line
    return None


def parse_latency(lines: Sequence[str]) -> Optional[LatencyStats]:
    """
    解析往返时延统计

    Args:
        lines: 全部输出行

    Returns:
        LatencyStats，未找到统计行或格式异常时返回None

    示例输入:
        Approximate round trip times in milli-seconds:
            Minimum = 13ms, Maximum = 14ms, Average = 13ms
    """
    summary = find_summary_line(lines)
    if summary is None:
        return None

    fields = summary.split(",")
    if len(fields) != 3:
        logger.warning("统计行字段数异常，忽略延迟信息: %r", summary)
        return None

    values = []
    for item in fields:
        # "Minimum = 13ms" → "13ms"
        _, _, value = item.partition("=")
        match = _UNIT_PATTERN.match(value.strip())
        if not match:
            logger.warning("无法解析统计字段 %r，忽略延迟信息", item.strip())
            return None
        values.append(int(match.group(1)))

    minimum, maximum, average = values
    return LatencyStats(min_ms=minimum, max_ms=maximum, avg_ms=average)
