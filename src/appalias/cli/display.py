"""终端展示组件."""

from pathlib import Path

from rich.console import Console
from rich.panel import Panel
from rich.prompt import Confirm
from rich.table import Table

from appalias.core.models import AliasRecord

console = Console()

# 列表中命令列的最大显示长度
COMMAND_PREVIEW_LEN = 47


def truncate(text: str, limit: int = COMMAND_PREVIEW_LEN) -> str:
    """截断过长文本."""
    if len(text) > limit:
        return text[:limit] + "..."
    return text


def render_alias_table(records: list[AliasRecord]) -> Table:
    """构建别名表格."""
    table = Table(border_style="cyan", header_style="bold cyan")
    table.add_column("№", justify="right")
    table.add_column("Alias Name", style="bold green")
    table.add_column("Command", style="dim")

    for i, record in enumerate(records, 1):
        table.add_row(str(i), record.name, truncate(record.command))

    return table


def display_aliases(records: list[AliasRecord]) -> None:
    """显示别名列表，为空时显示提示."""
    if not records:
        console.print(
            Panel(
                "📭 No aliases found yet!\n\n"
                "Create your first Electron app alias to get started.",
                border_style="yellow",
            )
        )
        return

    console.print(render_alias_table(records))


def display_created(name: str, target: str, alias_file: Path) -> None:
    """显示创建成功信息."""
    console.print(
        Panel(
            f"Alias: [bold green]{name}[/bold green]\n"
            f"URL: [blue]{target}[/blue]\n\n"
            f"[yellow]⚠️  Run: [bold]source {alias_file}[/bold] "
            "or open a new terminal to use it[/yellow]",
            title="[green]✅ Alias created[/green]",
            border_style="green",
        )
    )


def display_removed(names: list[str], count: int, alias_file: Path) -> None:
    """显示删除结果."""
    body = "\n".join(f"[red]  ✖ {name}[/red]" for name in names)
    console.print(
        Panel(
            f"Removed aliases:\n{body}\n\n"
            f"[yellow]⚠️  Run: [bold]source {alias_file}[/bold] to apply changes[/yellow]",
            title=f"[red]🗑️  Removed {count} alias(es)[/red]",
            border_style="red",
        )
    )


def confirm_action(message: str, default: bool = False) -> bool:
    """确认提示.

    Args:
        message: 提示信息（支持 Rich markup）
        default: 默认选择

    Returns:
        是否确认
    """
    return Confirm.ask(message, default=default)
