"""
設定管理ユーティリティ

TOML設定ファイル、環境変数、デフォルト値の管理を行います。
"""

from __future__ import annotations

import logging
import os
import tomllib
from collections.abc import Callable
from pathlib import Path
from typing import Any, ClassVar

from ..core.events import ConfigChanged
from ..core.exceptions import ConfigurationError
from ..core.models import DemotionPolicy

CONFIG_GROUP = "unmovable"


class Config:
    """設定管理クラス

    優先順位:
    1. コマンドライン引数（呼び出し側で処理）
    2. 環境変数 (UNMOVABLE_*)
    3. プロジェクト設定ファイル (unmovable.toml)
    4. デフォルト値
    """

    DEFAULT_CONFIG: ClassVar[dict[str, Any]] = {
        "preserve_menu": False,
        "demotion_policy": "swap",
        "label_matching": True,
        "log_level": "INFO",
    }

    # ユーザーに表示する設定項目
    CONFIG_ITEMS: ClassVar[dict[str, dict[str, str]]] = {
        "preserve_menu": {
            "key_name": "preserveMenu",
            "name": "Preserve menu",
            "description": "When enabled, swaps 'walk here' with 'cancel' instead of removing it",
        },
        "demotion_policy": {
            "key_name": "demotionPolicy",
            "name": "Demotion policy",
            "description": "'swap' trades places with 'cancel', 'rotate' moves 'walk here' to second place",
        },
        "label_matching": {
            "key_name": "labelMatching",
            "name": "Match by label",
            "description": "Detect 'walk here' by its text when the entry has no action type",
        },
        "log_level": {
            "key_name": "logLevel",
            "name": "Log level",
            "description": "Logging level (DEBUG, INFO, WARNING, ERROR)",
        },
    }

    def __init__(self, project_root: Path | None = None, config_file: Path | None = None):
        """設定を初期化

        Args:
            project_root: プロジェクトルートディレクトリ（Noneの場合は現在のディレクトリ）
            config_file: 設定ファイルのパス（Noneの場合は project_root/unmovable.toml）
        """
        self.project_root = project_root or Path.cwd()
        self.config_file = config_file or self.project_root / "unmovable.toml"
        self._listeners: list[Callable[[ConfigChanged], None]] = []

        self._config = self._load_config()

    def _load_config(self) -> dict[str, Any]:
        """設定を読み込み、優先順位に従ってマージ"""
        config = self.DEFAULT_CONFIG.copy()

        if self.config_file.exists():
            try:
                with open(self.config_file, "rb") as f:
                    project_config = tomllib.load(f)
            except (OSError, tomllib.TOMLDecodeError) as e:
                raise ConfigurationError(
                    f"設定ファイルの読み込みに失敗しました: {self.config_file}",
                    f"設定ファイルの構文を確認してください: {e}",
                    config_file=str(self.config_file),
                ) from e

            section = project_config.get(CONFIG_GROUP, {})
            if not isinstance(section, dict):
                raise ConfigurationError.invalid_config(
                    str(self.config_file), f"[{CONFIG_GROUP}] はテーブルである必要があります"
                )
            config.update(self._normalize_keys(section))

        config.update(self._load_env_config())

        return config

    def _normalize_keys(self, section: dict[str, Any]) -> dict[str, Any]:
        """preserveMenu などのキー名を内部キーに変換"""
        aliases = {item["key_name"]: key for key, item in self.CONFIG_ITEMS.items()}
        return {aliases.get(key, key): value for key, value in section.items()}

    def _load_env_config(self) -> dict[str, Any]:
        """環境変数から設定を読み込み"""
        env_config: dict[str, Any] = {}

        for key, default_value in self.DEFAULT_CONFIG.items():
            env_key = f"UNMOVABLE_{key.upper()}"
            env_value = os.getenv(env_key)

            if env_value is not None:
                if isinstance(default_value, bool):
                    env_config[key] = env_value.lower() in ("true", "1", "yes", "on")
                else:
                    env_config[key] = env_value

        return env_config

    def get(self, key: str, default: Any = None) -> Any:
        """設定値を取得

        Args:
            key: 設定キー
            default: デフォルト値

        Returns:
            設定値
        """
        return self._config.get(key, default)

    def set(self, key: str, value: Any) -> None:
        """設定値を検証・更新し、変更があればリスナーに通知

        Raises:
            ConfigurationError: 不明な設定キー、または値が無効な場合（設定は変更されない）
        """
        if key not in self.DEFAULT_CONFIG:
            raise ConfigurationError(
                f"不明な設定キーです: {key}",
                f"有効なキー: {', '.join(self.DEFAULT_CONFIG)}",
            )
        self._check_value(key, value)

        old_value = self._config.get(key)
        if old_value == value:
            return

        self._config[key] = value
        event = ConfigChanged(group=CONFIG_GROUP, key=key, old_value=old_value, new_value=value)
        for listener in list(self._listeners):
            listener(event)

    def add_listener(self, listener: Callable[[ConfigChanged], None]) -> None:
        """設定変更リスナーを登録（例: EventBus.post）"""
        self._listeners.append(listener)

    def remove_listener(self, listener: Callable[[ConfigChanged], None]) -> None:
        """設定変更リスナーを解除"""
        if listener in self._listeners:
            self._listeners.remove(listener)

    def get_bool(self, key: str) -> bool:
        """真偽値の設定を取得

        Raises:
            ConfigurationError: 値が bool でない場合
        """
        value = self.get(key, self.DEFAULT_CONFIG.get(key))
        self._check_value(key, value)
        return value

    def get_demotion_policy(self) -> DemotionPolicy:
        """降格方法を取得

        Raises:
            ConfigurationError: 値が無効な場合
        """
        value = self.get("demotion_policy", "swap")
        self._check_value("demotion_policy", value)
        return DemotionPolicy.from_value(value)

    def _check_value(self, key: str, value: Any) -> None:
        """設定値の型と許容値をチェック"""
        if key in ("preserve_menu", "label_matching"):
            if not isinstance(value, bool):
                raise ConfigurationError.invalid_value(key, value, "true または false")
        elif key == "demotion_policy":
            if not isinstance(value, str) or DemotionPolicy.from_value(value) is None:
                raise ConfigurationError.invalid_value(key, value, ", ".join(p.value for p in DemotionPolicy))
        elif key == "log_level":
            if not isinstance(value, str) or not isinstance(logging.getLevelName(value.upper()), int):
                raise ConfigurationError.invalid_value(key, value, "DEBUG, INFO, WARNING, ERROR")

    def validate(self) -> None:
        """設定の妥当性をチェック"""
        for key in self.DEFAULT_CONFIG:
            self._check_value(key, self.get(key))

    def as_dict(self) -> dict[str, Any]:
        """現在の設定を辞書で取得"""
        return dict(self._config)

    def __getitem__(self, key: str) -> Any:
        """辞書風アクセスをサポート"""
        return self.get(key)

    def __contains__(self, key: str) -> bool:
        """in演算子をサポート"""
        return key in self._config
