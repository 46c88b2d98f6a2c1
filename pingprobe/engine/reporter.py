"""
报告生成器

把各解析阶段的结果组装为最终的ProbeReport
"""
import logging
from typing import List, Optional

from ..models.config import ProbeConfiguration
from ..models.report import LatencyStats, PacketOutcome, ProbeReport
from ..utils.parsers import (
    Endpoints,
    OutputWindow,
    classify_packets,
    parse_endpoints,
    parse_latency,
    split_output,
)
from .statistics import PacketStatistics, aggregate

logger = logging.getLogger(__name__)


def build_report(
    config: ProbeConfiguration,
    window: OutputWindow,
    stats: PacketStatistics,
    latency: Optional[LatencyStats],
    endpoints: Endpoints
) -> ProbeReport:
    """
    组装连通性报告

    Args:
        config: 探测配置
        window: 分行结果
        stats: 逐包统计
        latency: 延迟统计（可能为None）
        endpoints: 端点信息

    Returns:
        ProbeReport
    """
    return ProbeReport(
        result=stats.result,
        sent=stats.sent,
        received=stats.received,
        percent=stats.percent,
        source=endpoints.source,
        destination=endpoints.destination,
        size=None if window.degenerate else config.size,
        no_fragment=None if config.is_ipv6 else config.no_fragment,
        latency=latency if stats.result else None,
        raw_text=list(window.lines)
    )


def parse_probe_output(config: ProbeConfiguration, text: str) -> ProbeReport:
    """
    对捕获的ping输出运行完整解析流程

    Args:
        config: 产生该输出的探测配置
        text: 外部进程的标准输出

    Returns:
        ProbeReport

    Raises:
        ClassificationError: 回复行无法识别
    """
    window = split_output(text, config.count)

    outcomes: List[PacketOutcome] = []
    if not window.degenerate:
        outcomes = classify_packets(window.reply_lines, config.count)

    stats = aggregate(outcomes, config.count, degenerate=window.degenerate)

    latency = None
    if stats.result:
        latency = parse_latency(window.lines)
        if latency is None:
            logger.info("未能提取延迟统计，报告中省略延迟字段")

    endpoints = parse_endpoints(window.header, config.source, config.destination)

    return build_report(config, window, stats, latency, endpoints)
