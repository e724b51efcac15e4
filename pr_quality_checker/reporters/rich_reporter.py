"""
Rich 终端报告器 - 在 CI 日志中输出检查结果表格
"""

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from pr_quality_checker.core.models import CategoryResult, Report


class RichReporter:
    """Rich 终端报告器"""

    def __init__(self, console: Console | None = None):
        self.console = console or Console()

    def report(self, report: Report) -> None:
        """生成 Rich 格式报告"""
        self.console.print()
        self.console.print("─" * 80, style="dim")
        self.console.print(
            "🔍 PR 质量检查报告 🔍",
            style="bold cyan",
            justify="center",
        )
        self.console.print("─" * 80, style="dim")

        self._print_results(report.results)

        if report.novelty is not None:
            style = "magenta" if report.novelty.approved else "red"
            self.console.print(f"  [{style}]{report.novelty.message}[/{style}] [dim](仅供娱乐，不影响结果)[/dim]")

        self._print_conclusion(report)

    def _status(self, result: CategoryResult) -> str:
        if result.missing:
            return "[red]❌ missing[/red]"
        if result.verdict.passed:
            return "[green]✅ OK[/green]"
        return "[red]❌ FAIL[/red]"

    def _detail(self, result: CategoryResult) -> str:
        parts = []
        if result.verdict.reason and not result.missing:
            parts.append(result.verdict.reason)
        grade = result.verdict.grade
        if grade and f"grade {grade}" not in parts:
            parts.append(f"grade {grade}")
        return ", ".join(parts)

    def _print_results(self, results: list[CategoryResult]) -> None:
        """打印各类别结果"""
        self.console.print()
        table = Table(show_header=True, header_style="bold cyan", box=None)
        table.add_column("检查项", style="cyan", width=16)
        table.add_column("链接", overflow="fold")
        table.add_column("状态", width=14)
        table.add_column("详情")

        for result in results:
            table.add_row(
                result.category.label,
                result.link or "[dim]-[/dim]",
                self._status(result),
                self._detail(result),
            )

        self.console.print(table)
        self.console.print()

    def _print_conclusion(self, report: Report) -> None:
        """打印总结"""
        failed = [r for r in report.results if r.missing or not r.verdict.passed]
        self.console.print()
        if not failed:
            self.console.print(Panel(
                "[bold green]👍 所有检查通过，可以合并！[/bold green]",
                border_style="green",
            ))
        else:
            names = "、".join(r.category.label for r in failed)
            self.console.print(Panel(
                f"[bold red]发现 {len(failed)} 项未达标[/bold red]\n\n"
                f"[dim]需要修复：{names}[/dim]",
                border_style="red",
            ))
        self.console.print()
