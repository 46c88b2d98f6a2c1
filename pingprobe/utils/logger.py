"""
日志配置

使用rich的RichHandler输出日志
"""
import logging
import os
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

FORMAT = "%(message)s"


def setup_logging(level: Optional[str] = None, console: Optional[Console] = None) -> logging.Logger:
    """
    配置pingprobe包的日志输出

    Args:
        level: 日志级别，默认取 PINGPROBE_LOG_LEVEL，未设置时为WARNING
        console: 输出日志的Console，默认输出到stderr

    Returns:
        pingprobe包的根logger
    """
    level = (level or os.getenv("PINGPROBE_LOG_LEVEL", "WARNING")).upper()
    logger = logging.getLogger("pingprobe")
    logger.setLevel(level)

    # 重复调用时不重复添加handler
    if not any(isinstance(handler, RichHandler) for handler in logger.handlers):
        handler = RichHandler(
            console=console or Console(stderr=True),
            rich_tracebacks=True,
            markup=False,
            show_time=False,
        )
        handler.setFormatter(logging.Formatter(FORMAT, datefmt="[%X]"))
        logger.addHandler(handler)

    return logger
