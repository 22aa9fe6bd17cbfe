"""config コマンド

現在有効な設定と各設定項目の説明を表示します。
"""

from __future__ import annotations

import click
from rich.console import Console
from rich.table import Table

from ..core.rule_engine import select_strategy
from ..utils.config import Config


@click.command(name="config")
@click.pass_context
def show_config(ctx: click.Context) -> None:
    """現在の設定を表示"""
    console: Console = (ctx.obj or {}).get("console") or Console()
    config: Config = (ctx.obj or {}).get("config") or Config()

    table = Table(title="unmovable 設定", show_header=True, header_style="bold cyan")
    table.add_column("Key", style="bold yellow", no_wrap=True)
    table.add_column("Name", style="bold white")
    table.add_column("Value", no_wrap=True)
    table.add_column("Description", style="dim")

    for key, value in config.as_dict().items():
        item = Config.CONFIG_ITEMS.get(key, {})
        table.add_row(item.get("key_name", key), item.get("name", key), str(value), item.get("description", ""))

    console.print(table)
    console.print(f"[dim]設定ファイル: {config.config_file}[/dim]")
    console.print(f"戦略: [bold]{select_strategy(config.get_bool('preserve_menu')).value}[/bold]")
