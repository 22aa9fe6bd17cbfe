"""
ホスト連携プラグイン

ゲームクライアントのイベントを受け取り、ルールエンジンの結果をメニューに反映します。
地面の左クリック移動を無効化し、Shift+クリックでのみ移動できるようにします。
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from ..utils.logger import get_logger
from .events import ConfigChanged, EventBus, PostMenuSort
from .models import MenuEntry
from .rule_engine import MenuRuleEngine

if TYPE_CHECKING:
    from ..utils.config import Config

logger = get_logger(__name__)


class KeyCode:
    """ホストのキーコード定数"""

    KC_SHIFT = 81


class Menu(Protocol):
    """ホストのメニュー"""

    def get_menu_entries(self) -> list[MenuEntry]: ...

    def set_menu_entries(self, entries: list[MenuEntry]) -> None: ...


class Client(Protocol):
    """ホストのクライアント"""

    def is_key_pressed(self, key_code: int) -> bool: ...

    def is_menu_open(self) -> bool: ...

    def get_menu(self) -> Menu: ...


class UnmovablePlugin:
    """Unmovable プラグイン

    PostMenuSort を優先度 -10 で購読し、他のメニュー並べ替え処理の後に実行します。
    """

    CONFIG_GROUP = "unmovable"
    PRIORITY = -10

    def __init__(self, client: Client, config: Config):
        self.client = client
        self.config = config
        self.engine = MenuRuleEngine.from_config(config)
        self.event_bus: EventBus | None = None

    def start_up(self, event_bus: EventBus) -> None:
        """イベントを購読"""
        self.event_bus = event_bus
        event_bus.subscribe(PostMenuSort, self.on_post_menu_sort, priority=self.PRIORITY)
        event_bus.subscribe(ConfigChanged, self.on_config_changed)
        logger.debug("Unmovable プラグインを開始しました")

    def shut_down(self) -> None:
        """イベント購読を解除"""
        if self.event_bus is None:
            return
        self.event_bus.unsubscribe(PostMenuSort, self.on_post_menu_sort)
        self.event_bus.unsubscribe(ConfigChanged, self.on_config_changed)
        self.event_bus = None

    def on_config_changed(self, event: ConfigChanged) -> None:
        """プラグインの設定グループが変更された場合に戦略を更新"""
        if event.group != self.CONFIG_GROUP:
            return
        self.engine.apply_config(self.config)

    def on_post_menu_sort(self, event: PostMenuSort | None = None) -> None:
        """Shiftが押されていなければ、最優先の 'walk here' に戦略を適用"""
        if self.client.is_key_pressed(KeyCode.KC_SHIFT) or self.client.is_menu_open():
            return

        menu = self.client.get_menu()
        new_entries = self.engine.on_menu_built(menu.get_menu_entries(), False, False)
        if new_entries is None:
            return

        menu.set_menu_entries(new_entries)
