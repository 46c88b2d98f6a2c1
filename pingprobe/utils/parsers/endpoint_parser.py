"""
端点解析器

从标题行中提取解析后的目标和确认的源地址
"""
from typing import Optional

from .base import Endpoints

HEADER_PREFIX = "Pinging "
SOURCE_SEPARATOR = " from "
SIZE_SEPARATOR = " with "


def parse_endpoints(header: Optional[str], source: str, destination: str) -> Endpoints:
    """
    解析标题行中的端点信息

    Args:
        header: 标题行，退化输出时为None
        source: 配置中的源地址（回退值）
        destination: 配置中的目标（回退值）

    Returns:
        Endpoints

    示例:
        "Pinging example.com [93.184.216.34] from 10.0.0.5 with 32 bytes of data:"
        → destination="example.com [93.184.216.34]", source="10.0.0.5"
    """
    if header is None:
        return Endpoints(source=source, destination=destination)

    text = header.strip()
    if SOURCE_SEPARATOR in text:
        left, _, right = text.partition(SOURCE_SEPARATOR)
        tokens = right.split()
        resolved_source = tokens[0] if tokens else source
    else:
        # 未绑定源地址时标题行没有 " from "
        left, _, _ = text.partition(SIZE_SEPARATOR)
        resolved_source = source

    if left.startswith(HEADER_PREFIX):
        left = left[len(HEADER_PREFIX):]
    resolved_destination = left.strip() or destination

    return Endpoints(source=resolved_source, destination=resolved_destination, resolved=True)
