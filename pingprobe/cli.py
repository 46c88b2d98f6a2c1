"""
CLI命令行入口

使用Typer框架提供命令行接口
"""
import asyncio
from pathlib import Path
from typing import Any, Dict, Optional

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape

from . import __version__
from .engine import ReachabilityProber, parse_probe_output
from .integrations import (
    MockProcessRunner,
    ProbeLaunchError,
    ProbeTimeoutError,
    ProcessExecutionError,
    load_profile_params,
)
from .models import IpVersion, ProbeConfigError, ProbeConfiguration, ProbeReport
from .utils.logger import setup_logging
from .utils.output_formatter import ReportFormatter
from .utils.parsers import ClassificationError

# 加载环境变量
load_dotenv()

app = typer.Typer(
    name="pingprobe",
    help="绑定源地址的连通性探测工具",
    add_completion=False
)
console = Console()
err_console = Console(stderr=True)

# 退出码
EXIT_UNREACHABLE = 1
EXIT_CONFIG = 2
EXIT_CLASSIFICATION = 3
EXIT_LAUNCH = 4
EXIT_TIMEOUT = 5


def _fail(message: str, code: int):
    err_console.print(f"[red]{escape(message)}[/red]")
    raise typer.Exit(code)


def _build_config(
    params: Dict[str, Any],
    profile: Optional[str] = None,
    config_path: Optional[str] = None
) -> ProbeConfiguration:
    """合并命名配置和命令行参数，命令行参数优先"""
    merged: Dict[str, Any] = {}
    if profile:
        try:
            profiles = load_profile_params(config_path)
        except FileNotFoundError as e:
            raise ProbeConfigError(str(e)) from e
        if profile not in profiles:
            raise ProbeConfigError(f"探测配置不存在: {profile}")
        # 合并未校验的原始参数，只校验所选配置，且不带入默认目标
        merged.update(profiles[profile])

    merged.update({key: value for key, value in params.items() if value is not None})
    return ProbeConfiguration.create(**merged)


@app.command("probe")
def probe(
    source: Optional[str] = typer.Argument(None, help="绑定的本地源地址，例如: 192.168.1.10"),
    destination: Optional[str] = typer.Option(None, "--destination", "-d", help="目标主机名或IP"),
    count: Optional[int] = typer.Option(None, "--count", "-n", help="发送次数 (1-4294967295)"),
    size: Optional[int] = typer.Option(None, "--size", "-l", help="负载字节数 (0-65500)"),
    no_fragment: bool = typer.Option(False, "--no-fragment", "-f", help="设置不分片标志（仅IPv4）"),
    resolve: bool = typer.Option(False, "--resolve", "-a", help="反向解析目标地址"),
    ipv6: bool = typer.Option(False, "--ipv6", "-6", help="使用IPv6（必须指定--destination）"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="只输出True/False"),
    detailed: bool = typer.Option(False, "--detailed", help="输出结构化报告"),
    as_json: bool = typer.Option(False, "--json", help="以JSON输出结构化报告（隐含--detailed）"),
    timeout: Optional[float] = typer.Option(None, "--timeout", "-t", help="等待ping退出的超时（秒）"),
    profile: Optional[str] = typer.Option(None, "--profile", "-p", help="使用config/probe_profiles.yaml中的命名配置"),
    config_path: Optional[str] = typer.Option(None, "--config", help="探测配置文件路径"),
    scenario: Optional[str] = typer.Option(None, "--scenario", help="使用Mock场景而不启动ping（离线演示）"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="显示调试日志和原始输出")
):
    """
    执行一次连通性探测

    示例:
        # 原始输出
        pingprobe probe 192.168.1.10 -d example.com

        # 只判断是否可达
        pingprobe probe 192.168.1.10 -d example.com --quiet

        # IPv6 + 结构化报告
        pingprobe probe fe80::1 -d 2001:db8::1 --ipv6 --detailed
    """
    setup_logging("DEBUG" if verbose else None)

    params = {
        "source": source,
        "destination": destination,
        "count": count,
        "size": size,
        "timeout": timeout,
        "no_fragment": True if no_fragment else None,
        "resolve_hostname": True if resolve else None,
        "ip_version": IpVersion.V6 if ipv6 else None,
    }

    try:
        if source is None and profile is None:
            raise ProbeConfigError("必须指定源地址或--profile")
        config = _build_config(params, profile, config_path)

        runner = MockProcessRunner(scenario=scenario) if scenario else None
        prober = ReachabilityProber(runner=runner)
        output = asyncio.run(prober.probe(config, quiet=quiet, detailed=detailed or as_json))
    except ProbeConfigError as e:
        _fail(f"配置错误: {e}", EXIT_CONFIG)
    except ClassificationError as e:
        _fail(f"输出解析失败: {e}", EXIT_CLASSIFICATION)
    except ProbeTimeoutError as e:
        _fail(f"执行超时: {e}", EXIT_TIMEOUT)
    except (ProbeLaunchError, ProcessExecutionError) as e:
        _fail(f"无法执行ping: {e}", EXIT_LAUNCH)

    formatter = ReportFormatter(console=console, verbose=verbose)
    if isinstance(output, bool):
        console.print(str(output))
        raise typer.Exit(0 if output else EXIT_UNREACHABLE)
    if isinstance(output, ProbeReport):
        if as_json:
            formatter.print_json(output)
        else:
            formatter.print_report(output)
        return
    formatter.print_raw(output)


@app.command("parse")
def parse(
    output_file: Path = typer.Argument(..., exists=True, dir_okay=False, help="保存的ping输出文件"),
    source: str = typer.Option(..., "--source", "-s", help="运行时使用的源地址"),
    destination: Optional[str] = typer.Option(None, "--destination", "-d", help="运行时使用的目标"),
    count: int = typer.Option(2, "--count", "-n", help="运行时的发送次数"),
    size: int = typer.Option(32, "--size", "-l", help="运行时的负载字节数"),
    no_fragment: bool = typer.Option(False, "--no-fragment", "-f", help="运行时是否设置了不分片"),
    ipv6: bool = typer.Option(False, "--ipv6", help="运行时是否使用IPv6"),
    as_json: bool = typer.Option(False, "--json", help="以JSON输出")
):
    """
    解析已保存的ping输出，不启动任何进程
    """
    setup_logging()

    try:
        config = ProbeConfiguration.create(
            source=source,
            destination=destination,
            count=count,
            size=size,
            no_fragment=no_fragment,
            ip_version=IpVersion.V6 if ipv6 else IpVersion.V4
        )
        text = output_file.read_text(encoding="utf-8", errors="replace")
        report = parse_probe_output(config, text)
    except ProbeConfigError as e:
        _fail(f"配置错误: {e}", EXIT_CONFIG)
    except ClassificationError as e:
        _fail(f"输出解析失败: {e}", EXIT_CLASSIFICATION)

    formatter = ReportFormatter(console=console)
    if as_json:
        formatter.print_json(report)
    else:
        formatter.print_report(report)


@app.command("version")
def version():
    """显示版本信息"""
    console.print(f"[bold cyan]pingprobe[/bold cyan] v{__version__}")


def main():
    """主入口函数"""
    app()


if __name__ == "__main__":
    main()
