"""
ping输出分行器

把捕获的原始文本切分为行，定位标题行和逐包回复行窗口
"""
import logging

from .base import HEADER_MARKER, OutputWindow

logger = logging.getLogger(__name__)

# 少于该行数的输出视为退化输出（主机名无法解析、源地址错误等）
MIN_USABLE_LINES = 3


def split_output(text: str, count: int) -> OutputWindow:
    """
    切分ping输出

    Args:
        text: 捕获的标准输出文本
        count: 配置的发送次数，即回复窗口的长度

    Returns:
        OutputWindow: 全部行、标题行位置和候选回复行

    示例输入:

        Pinging example.com [93.184.216.34] from 192.168.1.10 with 32 bytes of data:
        Reply from 93.184.216.34: bytes=32 time=13ms TTL=56
        Reply from 93.184.216.34: bytes=32 time=14ms TTL=56
    """
    lines = text.splitlines()

    if len(lines) < MIN_USABLE_LINES:
        logger.info("输出仅有%d行，按退化输出处理", len(lines))
        return OutputWindow(lines=lines, degenerate=True)

    header_index = None
    for index, line in enumerate(lines):
        if HEADER_MARKER in line:
            header_index = index
            break

    if header_index is not None:
        start = header_index + 1
    else:
        # 没有标题行时，从第一个非空行开始取窗口
        logger.warning("未找到标题行（%r），从首个非空行开始提取回复", HEADER_MARKER)
        start = next((i for i, line in enumerate(lines) if line.strip()), len(lines))

    # 输出被截断时窗口可能不足count行，由分类器报错
    reply_lines = lines[start:start + count]

    return OutputWindow(
        lines=lines,
        degenerate=False,
        header_index=header_index,
        reply_lines=reply_lines
    )
