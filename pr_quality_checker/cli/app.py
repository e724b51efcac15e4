"""
CLI 入口模块 - 使用 Typer 构建命令行界面

检查流程：
1. 读取触发事件，取出 PR 描述
2. 提取并验证链接
3. 打印报告
4. 写出 comment 与 fail 两个输出

没有命令行参数，配置全部来自环境变量。
无论检查结果如何都以 0 退出，由 fail 输出决定 CI 是否失败。
"""

import logging

import typer
from rich.console import Console

from pr_quality_checker.config import Settings
from pr_quality_checker.event import publish, pull_request_body, read_event
from pr_quality_checker.logging_setup import configure_logging
from pr_quality_checker.reporters import JsonReporter, RichReporter
from pr_quality_checker.runner import run

logger = logging.getLogger(__name__)

# 创建 Typer 应用实例
app = typer.Typer(
    name="pr-quality-check",
    help="PR-Quality-Checker: validate the links in a pull request description. 🦄",
    add_completion=False,
)

# Rich Console 用于输出
console = Console()


@app.command()
def check() -> None:
    """
    Check the pull request described by the CI event payload.

    Environment:
        GITHUB_EVENT_PATH       event payload (JSON)
        GITHUB_OUTPUT           step output file
        GITHUB_TOKEN            optional forge API token
        RUNNER_DEBUG            verbose logging
        PR_QUALITY_JSON_REPORT  optional JSON report path
    """
    settings = Settings.from_env()
    configure_logging(settings.debug)

    # 1. 读取事件
    event = read_event(settings.event_path)
    body = pull_request_body(event.unwrap_or({}))
    if not body:
        logger.warning("PR description is empty")

    # 2. 执行检查
    report = run(body, settings)

    # 3. 打印报告
    RichReporter(console).report(report)

    if settings.json_report_path:
        try:
            with open(settings.json_report_path, "w", encoding="utf-8") as f:
                JsonReporter(f).report(report)
        except OSError as e:
            logger.error(f"Failed to write JSON report {settings.json_report_path}: {e}")

    # 4. 写出输出
    try:
        publish(report, settings)
    except OSError as e:
        logger.error(f"Failed to write step outputs to {settings.output_path}: {e}")

    if report.critical_failure:
        console.print("[red]Quality checks failed.[/red] See the report above.")
    raise typer.Exit(0)


@app.command()
def version() -> None:
    """Show the version of PR-Quality-Checker."""
    from pr_quality_checker import __version__
    console.print(f"[bold]PR-Quality-Checker[/bold] v{__version__}")
    console.print("[dim]Unicorn approved. 🦄[/dim]")


if __name__ == "__main__":
    app()
