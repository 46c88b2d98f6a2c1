"""
探测结果格式化器

提供美化的探测报告输出，支持表格和JSON两种形式
"""
import json
from typing import List, Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from ..models.report import ProbeReport


class ReportFormatter:
    """探测报告格式化器"""

    def __init__(self, console: Optional[Console] = None, verbose: bool = False):
        """
        初始化格式化器

        Args:
            console: 输出使用的Console
            verbose: 是否同时显示原始输出
        """
        self.console = console or Console(emoji=False, legacy_windows=False)
        self.verbose = verbose

    def print_raw(self, lines: List[str]):
        """按原样输出ping的输出行"""
        for line in lines:
            self.console.print(line, markup=False, highlight=False, soft_wrap=True)

    def print_json(self, report: ProbeReport):
        """以JSON形式输出报告"""
        text = json.dumps(report.to_dict(), ensure_ascii=False, indent=2)
        self.console.print(text, markup=False, highlight=False, soft_wrap=True)

    def print_report(self, report: ProbeReport):
        """以表格形式输出报告"""
        status_color = "green" if report.result else "red"
        status_text = "可达" if report.result else "不可达"

        table = Table(title="探测结果", show_header=False)
        table.add_column("字段", style="bold cyan")
        table.add_column("值")

        table.add_row("结果", f"[{status_color}]{status_text}[/{status_color}]")
        table.add_row("源地址", escape(report.source))
        table.add_row("目标", escape(report.destination))
        table.add_row("发送/接收", f"{report.sent}/{report.received}")
        table.add_row("成功率", f"{report.percent}%")
        if report.size is not None:
            table.add_row("负载大小", f"{report.size} bytes")
        if report.no_fragment is not None:
            table.add_row("不分片", "是" if report.no_fragment else "否")
        if report.latency is not None:
            table.add_row(
                "时延(min/max/avg)",
                f"{report.latency.min_ms}ms / {report.latency.max_ms}ms / {report.latency.avg_ms}ms"
            )

        self.console.print(table)

        if self.verbose and report.raw_text:
            self.console.print(Panel(escape("\n".join(report.raw_text)), border_style=status_color, title="stdout"))
