"""
pytest設定と共有フィクスチャ

このファイルは全テストで共有されるフィクスチャとpytest設定を提供します。
"""

import os
from collections.abc import Callable, Generator
from pathlib import Path
from tempfile import TemporaryDirectory

import pytest

from unmovable.core.models import MenuAction, MenuEntry
from unmovable.utils.config import Config


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """
    UNMOVABLE_* 環境変数を取り除く

    開発者の環境変数が設定テストに影響しないようにします。
    """
    for key in list(os.environ):
        if key.startswith("UNMOVABLE_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """
    一時ディレクトリを提供するフィクスチャ

    Returns:
        Path: 一時ディレクトリのパス
    """
    with TemporaryDirectory(prefix="unmovable_test_") as tmp_dir:
        yield Path(tmp_dir)


@pytest.fixture
def sample_config(temp_dir: Path) -> Config:
    """
    テスト用の設定を提供するフィクスチャ

    一時ディレクトリをプロジェクトルートとするため、実際の設定ファイルに影響しません。
    """
    return Config(project_root=temp_dir)


@pytest.fixture
def make_entry() -> Callable[..., MenuEntry]:
    """アクション種別からメニュー項目を作るファクトリ"""

    def _make(action: MenuAction | None = MenuAction.PLAYER_FIRST_OPTION, option: str = "") -> MenuEntry:
        if not option and action is not None:
            option = "Walk here" if action is MenuAction.WALK else action.value
        return MenuEntry(option=option, type=action)

    return _make
