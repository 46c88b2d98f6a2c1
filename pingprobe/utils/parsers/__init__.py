"""
命令输出解析器包

提供ping输出的分行、逐包分类、延迟和端点解析
"""
from .base import (
    ClassificationError,
    Endpoints,
    OutputWindow,
    ParseError,
)
from .endpoint_parser import parse_endpoints
from .latency_parser import find_summary_line, parse_latency
from .packet_classifier import PACKET_RULES, PacketRule, classify_packet, classify_packets
from .tokenizer import split_output

__all__ = [
    # 数据结构
    "OutputWindow",
    "Endpoints",
    "PacketRule",
    "PACKET_RULES",
    "ParseError",
    "ClassificationError",
    # 解析器函数
    "split_output",
    "classify_packet",
    "classify_packets",
    "parse_latency",
    "find_summary_line",
    "parse_endpoints",
]
