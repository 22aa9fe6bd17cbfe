"""unmovable CLIエントリーポイント

Clickを使用したマルチコマンドCLIインターフェースを提供します。
"""

from __future__ import annotations

import sys
from pathlib import Path

import click
from rich.console import Console

from . import __version__
from .commands.show_config import show_config
from .commands.simulate import simulate
from .core.error_handler import ErrorHandler
from .core.exceptions import UnmovableError
from .utils.config import Config
from .utils.logger import setup_logging

console = Console()


@click.group()
@click.version_option(version=__version__, prog_name="unmovable")
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="詳細な出力を表示します",
)
@click.option(
    "--config-file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="設定ファイルのパスを指定します",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, config_file: Path | None) -> None:
    """unmovable: 地面の左クリック移動を無効化するメニュールール

    最優先の 'walk here' をメニューから削除、または 'cancel' と入れ替えます。
    Shiftを押している間は何もしません。

    \b
    主要コマンド:
      simulate     メニュー構築をシミュレート
      config       現在の設定を表示
    """
    ctx.ensure_object(dict)

    try:
        project_root = config_file.parent if config_file else _find_project_root(Path.cwd())
        config = Config(project_root, config_file=config_file)
        config.validate()

        setup_logging(level=config.get("log_level", "INFO"), verbose=verbose)

        ctx.obj["config"] = config
        ctx.obj["verbose"] = verbose
        ctx.obj["console"] = console

        if verbose:
            console.print(f"[dim]設定ファイル: {config.config_file}[/dim]")

    except UnmovableError as e:
        ErrorHandler.handle_error(e, verbose)
        sys.exit(1)


cli.add_command(simulate)
cli.add_command(show_config)


def _find_project_root(start_path: Path) -> Path:
    """unmovable.toml を含むディレクトリを探索"""
    for path in [start_path, *start_path.parents]:
        if (path / "unmovable.toml").exists():
            return path
    return start_path


def main() -> None:
    """メインエントリーポイント"""
    cli()


if __name__ == "__main__":
    main()
