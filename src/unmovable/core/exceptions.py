"""
unmovable カスタム例外クラス

エラーハンドリングのための例外階層を定義します。
ルールエンジン自体は例外を送出しません。設定とCLI入力の検証でのみ使用します。
"""

from __future__ import annotations

from typing import Any


class UnmovableError(Exception):
    """unmovableの基底例外クラス"""

    def __init__(self, message: str, suggestion: str | None = None, details: str | None = None):
        super().__init__(message)
        self.message = message
        self.suggestion = suggestion
        self.details = details

    def __str__(self) -> str:
        result = self.message
        if self.details:
            result += f"\n詳細: {self.details}"
        if self.suggestion:
            result += f"\n\n💡 提案: {self.suggestion}"
        return result

    def get_user_friendly_message(self) -> str:
        """ユーザーフレンドリーなエラーメッセージを取得"""
        return str(self)


class ConfigurationError(UnmovableError):
    """設定エラー"""

    def __init__(self, message: str, suggestion: str | None = None, config_file: str | None = None):
        super().__init__(message, suggestion)
        self.config_file = config_file

    @classmethod
    def invalid_config(cls, config_file: str, error_details: str) -> ConfigurationError:
        """設定ファイルが無効な場合のエラー"""
        return cls(
            f"設定ファイル '{config_file}' が無効です: {error_details}",
            "設定ファイルの形式を確認してください",
            config_file=config_file,
        )

    @classmethod
    def invalid_value(cls, key: str, value: Any, expected: str) -> ConfigurationError:
        """設定値が無効な場合のエラー"""
        return cls(
            f"設定 '{key}' の値が無効です: {value}",
            f"有効な値: {expected}",
        )


class ValidationError(UnmovableError):
    """入力検証エラー"""

    def __init__(self, message: str, suggestion: str | None = None, invalid_value: Any = None):
        super().__init__(message, suggestion)
        self.invalid_value = invalid_value

    @classmethod
    def unknown_action(cls, token: str, valid_actions: list[str]) -> ValidationError:
        """不明なメニュー項目トークンのエラー"""
        return cls(
            f"不明なメニュー項目です: {token}",
            f"有効な値: {', '.join(valid_actions)}、または label:<テキスト>",
            invalid_value=token,
        )
