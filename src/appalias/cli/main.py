"""appalias CLI 入口."""

import typer
from rich.prompt import Prompt

from appalias import __version__
from appalias.cli.display import (
    confirm_action,
    console,
    display_aliases,
    display_created,
    display_removed,
)
from appalias.config.loader import ConfigLoader
from appalias.config.schema import AppAliasConfig
from appalias.core.exceptions import FileAccessError, ValidationError
from appalias.core.grammar import validate_name
from appalias.core.store import AliasStore
from appalias.utils.logging import get_logger

app = typer.Typer(
    name="appalias",
    help="Manage shell aliases that launch Electron apps",
    add_completion=False,
)

# 退出码
EXIT_FILE_ERROR = 1
EXIT_VALIDATION_ERROR = 2


def version_callback(value: bool) -> None:
    """显示版本信息."""
    if value:
        console.print(f"appalias version: {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    config_path: str = typer.Option(
        None,
        "--config",
        "-c",
        help="配置文件路径",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="显示版本信息",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """appalias - Manage your Electron app aliases."""
    ctx.obj = {"config_path": config_path}


def _load(ctx: typer.Context) -> tuple[AppAliasConfig, AliasStore]:
    """加载配置并创建存储."""
    config_path = (ctx.obj or {}).get("config_path")
    try:
        config = ConfigLoader(config_path).load()
    except ValueError as e:
        console.print(f"[red]❌ 配置加载失败: {e}[/red]")
        raise typer.Exit(EXIT_VALIDATION_ERROR)

    get_logger("appalias", level=config.log_level)
    return config, AliasStore.from_config(config)


def _require_target(target: str) -> str:
    if not target.strip():
        raise ValidationError("URL/path cannot be empty")
    return target.strip()


@app.command(name="list")
def list_aliases(ctx: typer.Context) -> None:
    """列出所有别名."""
    _, store = _load(ctx)
    try:
        records = store.list()
    except FileAccessError as e:
        console.print(f"[red]❌ {e}[/red]")
        raise typer.Exit(EXIT_FILE_ERROR)

    display_aliases(records)


@app.command()
def add(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="别名名称"),
    target: str = typer.Argument(..., help="应用 URL 或路径"),
    yes: bool = typer.Option(False, "--yes", "-y", help="跳过确认"),
) -> None:
    """创建或替换别名.

    Examples:
        appalias add chat https://chat.example.com
        appalias add notes ~/apps/notes --yes
    """
    config, store = _load(ctx)
    try:
        validate_name(name)
        target = _require_target(target)
    except ValidationError as e:
        console.print(f"[red]❌ {e}[/red]")
        raise typer.Exit(EXIT_VALIDATION_ERROR)

    if not yes and not confirm_action(
        f"[yellow]Create alias '[bold]{name}[/bold]' for '[bold]{target}[/bold]'?[/yellow]",
        default=True,
    ):
        console.print("[yellow]✖ Operation cancelled[/yellow]")
        return

    try:
        store.upsert(name, config.build_command(target))
    except FileAccessError as e:
        console.print(f"[red]❌ Failed to create alias: {e}[/red]")
        raise typer.Exit(EXIT_FILE_ERROR)

    display_created(name, target, store.alias_file)


@app.command()
def remove(
    ctx: typer.Context,
    names: list[str] = typer.Argument(..., help="要删除的别名名称"),
    yes: bool = typer.Option(False, "--yes", "-y", help="跳过确认"),
) -> None:
    """删除别名."""
    _, store = _load(ctx)
    try:
        for name in names:
            validate_name(name)
        existing = {record.name for record in store.list()}
    except ValidationError as e:
        console.print(f"[red]❌ {e}[/red]")
        raise typer.Exit(EXIT_VALIDATION_ERROR)
    except FileAccessError as e:
        console.print(f"[red]❌ {e}[/red]")
        raise typer.Exit(EXIT_FILE_ERROR)

    missing = [name for name in names if name not in existing]
    for name in missing:
        console.print(f"[yellow]⚠️  Alias not found: {name}[/yellow]")

    selected = [name for name in names if name in existing]
    if not selected:
        console.print("[yellow]No aliases to remove[/yellow]")
        return

    if not yes and not confirm_action(
        f"[red]Remove [bold]{len(selected)}[/bold] alias(es)?[/red]",
        default=False,
    ):
        console.print("[yellow]✖ Operation cancelled[/yellow]")
        return

    try:
        count = store.delete(selected)
    except FileAccessError as e:
        console.print(f"[red]❌ Failed to remove aliases: {e}[/red]")
        raise typer.Exit(EXIT_FILE_ERROR)

    display_removed(selected, count, store.alias_file)


@app.command()
def wire(ctx: typer.Context) -> None:
    """在 shell profile 中引入别名文件."""
    _, store = _load(ctx)
    try:
        store.wire()
    except FileAccessError as e:
        console.print(f"[red]❌ {e}[/red]")
        raise typer.Exit(EXIT_FILE_ERROR)

    console.print(f"[green]✅ {store.profile_file} sources {store.alias_file}[/green]")


@app.command()
def config(
    ctx: typer.Context,
    subcommand: str = typer.Argument("show", help="子命令: show | validate"),
) -> None:
    """管理配置.

    Examples:
        appalias config show
        appalias config validate
    """
    if subcommand == "show":
        _config_show(ctx)
    elif subcommand == "validate":
        _config_validate(ctx)
    else:
        console.print(f"[red]❌ 未知子命令: {subcommand}[/red]")
        console.print("可用命令: show, validate")
        raise typer.Exit(EXIT_VALIDATION_ERROR)


def _config_show(ctx: typer.Context) -> None:
    """显示生效的配置."""
    loader = ConfigLoader((ctx.obj or {}).get("config_path"))
    config, _ = _load(ctx)

    source = loader.config_path if loader.config_path.exists() else "(defaults)"
    console.print(f"\n[bold]配置文件: {source}[/bold]\n")
    for key, value in config.model_dump().items():
        console.print(f"  {key}: {value}", markup=False, highlight=False)
    console.print(f"  directive: {config.directive}", markup=False, highlight=False)


def _config_validate(ctx: typer.Context) -> None:
    """校验配置."""
    loader = ConfigLoader((ctx.obj or {}).get("config_path"))
    is_valid, message = loader.validate()

    if is_valid:
        console.print(f"[green]{message}[/green]")
    else:
        console.print(f"[red]{message}[/red]")
        raise typer.Exit(EXIT_VALIDATION_ERROR)


@app.command()
def menu(ctx: typer.Context) -> None:
    """交互式菜单."""
    config, store = _load(ctx)

    while True:
        action = Prompt.ask(
            "[bold cyan]What would you like to do?[/bold cyan]",
            choices=["list", "create", "remove", "exit"],
            default="list",
        )

        try:
            if action == "list":
                display_aliases(store.list())
            elif action == "create":
                _menu_create(config, store)
            elif action == "remove":
                _menu_remove(store)
            else:
                console.print("[magenta]👋 Thanks for using appalias! See you next time![/magenta]")
                return
        except ValidationError as e:
            console.print(f"[red]❌ {e}[/red]")
        except FileAccessError as e:
            console.print(f"[red]❌ {e}[/red]")


def _menu_create(config: AppAliasConfig, store: AliasStore) -> None:
    name = validate_name(Prompt.ask("[cyan]Enter alias name[/cyan]").strip())
    target = _require_target(Prompt.ask("[cyan]Enter application URL or path[/cyan]"))

    if not confirm_action(f"[yellow]Create alias '{name}' for '{target}'?[/yellow]", default=True):
        console.print("[yellow]✖ Operation cancelled[/yellow]")
        return

    store.upsert(name, config.build_command(target))
    display_created(name, target, store.alias_file)


def _menu_remove(store: AliasStore) -> None:
    records = store.list()
    if not records:
        console.print("[yellow]No aliases to remove[/yellow]")
        return

    display_aliases(records)
    answer = Prompt.ask("[cyan]Select aliases to remove (space separated)[/cyan]", default="")
    selected = answer.split()

    if selected and not confirm_action(
        f"[red]Remove {len(selected)} alias(es)?[/red]", default=False
    ):
        console.print("[yellow]✖ Operation cancelled[/yellow]")
        return

    count = store.delete(selected)
    display_removed(selected, count, store.alias_file)


if __name__ == "__main__":
    app()
