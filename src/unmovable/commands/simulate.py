"""simulate コマンド

メニュー項目を指定してルールエンジンの判定結果を表示します。
"""

from __future__ import annotations

import json
from typing import Any

import click
from rich.console import Console
from rich.table import Table

from ..core.error_handler import ErrorHandler
from ..core.exceptions import ValidationError
from ..core.models import DemotionPolicy, MenuAction, MenuEntry
from ..core.rule_engine import MenuRuleEngine
from ..utils.config import Config

LABEL_PREFIX = "label:"


def parse_entry(token: str) -> MenuEntry:
    """トークンからメニュー項目を作成

    Args:
        token: walk / cancel / アクション名 / label:<テキスト>

    Returns:
        メニュー項目

    Raises:
        ValidationError: 不明なトークンの場合
    """
    if token.lower().startswith(LABEL_PREFIX):
        return MenuEntry(option=token[len(LABEL_PREFIX) :])

    action = MenuAction.from_name(token)
    if action is None:
        raise ValidationError.unknown_action(token, [a.value for a in MenuAction])

    if action is MenuAction.WALK:
        return MenuEntry(option="Walk here", type=action)
    if action is MenuAction.CANCEL:
        return MenuEntry(option="Cancel", type=action)
    return MenuEntry(option=action.value.replace("_", " ").capitalize(), type=action)


def _entry_to_dict(entry: MenuEntry) -> dict[str, Any]:
    return {"option": entry.option, "type": entry.type.value if entry.type else None}


def _render_table(title: str, entries: list[MenuEntry]) -> Table:
    """メニューを表示順（最優先が一番上）のテーブルにする"""
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("#", style="dim", width=3)
    table.add_column("Option", style="bold white")
    table.add_column("Type", style="yellow")

    for index in range(len(entries) - 1, -1, -1):
        entry = entries[index]
        table.add_row(str(index), entry.option, entry.type.value if entry.type else "-")

    return table


@click.command()
@click.argument("tokens", nargs=-1)
@click.option(
    "--preserve/--filter",
    "preserve",
    default=None,
    help="'walk here' を残して降格する / 削除する（省略時は設定値）",
)
@click.option(
    "--policy",
    type=click.Choice([p.value for p in DemotionPolicy], case_sensitive=False),
    help="降格方法（省略時は設定値）",
)
@click.option("--shift", is_flag=True, help="Shiftキーが押されている状態で判定")
@click.option("--menu-open", is_flag=True, help="別のメニューが開いている状態で判定")
@click.option("--json", "as_json", is_flag=True, help="JSON形式で出力")
@click.pass_context
def simulate(
    ctx: click.Context,
    tokens: tuple[str, ...],
    preserve: bool | None,
    policy: str | None,
    shift: bool,
    menu_open: bool,
    as_json: bool,
) -> None:
    """メニュー構築をシミュレート

    TOKENS は優先度の低い順に並べたメニュー項目です（最後が最優先）。

    \b
    使用例:
      unmovable simulate player_first_option cancel walk
      unmovable simulate --preserve player_first_option cancel walk
      unmovable simulate --preserve --policy rotate examine_object walk
      unmovable simulate "label:<col=ffffff>Walk here"
    """
    console: Console = (ctx.obj or {}).get("console") or Console()
    config: Config = (ctx.obj or {}).get("config") or Config()

    try:
        entries = [parse_entry(token) for token in tokens]
    except ValidationError as e:
        ErrorHandler.handle_error(e, (ctx.obj or {}).get("verbose", False))
        ctx.exit(1)

    engine = MenuRuleEngine.from_config(config)
    if preserve is not None or policy is not None:
        engine.update_strategy(
            preserve if preserve is not None else config.get_bool("preserve_menu"),
            DemotionPolicy.from_value(policy) if policy else None,
        )

    result = engine.on_menu_built(entries, shift_held=shift, menu_already_open=menu_open)
    after = entries if result is None else result

    if as_json:
        output = {
            "strategy": engine.strategy.value,
            "policy": engine.policy.value,
            "changed": result is not None,
            "before": [_entry_to_dict(e) for e in entries],
            "after": [_entry_to_dict(e) for e in after],
        }
        click.echo(json.dumps(output, indent=2, ensure_ascii=False))
        return

    console.print(f"[dim]戦略: {engine.strategy.value} / 降格方法: {engine.policy.value}[/dim]")
    console.print(_render_table("変更前", entries))
    if result is None:
        console.print("[yellow]no change[/yellow]: メニューは変更されません")
        return
    console.print(_render_table("変更後", result))

