"""
エラーハンドリング

エラーの分類とユーザーフレンドリーなメッセージ表示を提供します。
"""

from __future__ import annotations

import traceback

from rich.console import Console
from rich.panel import Panel

from .exceptions import ConfigurationError, UnmovableError, ValidationError

console = Console(stderr=True)


class ErrorHandler:
    """エラーハンドリングクラス"""

    @staticmethod
    def handle_error(error: Exception, verbose: bool = False) -> None:
        """エラーを適切に処理し、ユーザーフレンドリーなメッセージを表示"""

        if isinstance(error, UnmovableError):
            ErrorHandler._handle_unmovable_error(error, verbose)
        else:
            ErrorHandler._handle_unexpected_error(error, verbose)

    @staticmethod
    def _handle_unmovable_error(error: UnmovableError, verbose: bool) -> None:
        """unmovable固有のエラーを処理"""

        if isinstance(error, ConfigurationError):
            icon = "⚙️"
            color = "yellow"
            title = "設定エラー"
        elif isinstance(error, ValidationError):
            icon = "❌"
            color = "red"
            title = "入力検証エラー"
        else:
            icon = "⚠️"
            color = "red"
            title = "エラー"

        message_parts = [f"{icon} {error.message}"]

        if verbose and error.details:
            message_parts.append(f"\n[dim]詳細: {error.details}[/dim]")

        if error.suggestion:
            message_parts.append(f"\n💡 [bold green]解決方法:[/bold green] {error.suggestion}")

        panel = Panel(
            "\n".join(message_parts),
            title=f"[bold {color}]{title}[/bold {color}]",
            border_style=color,
            expand=False,
        )
        console.print(panel)

    @staticmethod
    def _handle_unexpected_error(error: Exception, verbose: bool) -> None:
        """予期しないエラーを処理"""

        message_parts = [f"⚠️ 予期しないエラーが発生しました: {type(error).__name__}", f"メッセージ: {error!s}"]

        if verbose:
            message_parts.append(f"\n[dim]スタックトレース:\n{traceback.format_exc()}[/dim]")

        message_parts.append(
            "\n💡 [bold green]解決方法:[/bold green] "
            "このエラーが継続する場合は、--verbose フラグを使用して詳細情報を確認してください"
        )

        panel = Panel("\n".join(message_parts), title="[bold red]予期しないエラー[/bold red]", border_style="red", expand=False)
        console.print(panel)
