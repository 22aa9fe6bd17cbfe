"""
イベントバス

ホストのイベント配信を模した同期イベントバスです。
購読者は優先度の降順で呼び出され、同じ優先度では登録順を維持します。
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from ..utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class PostMenuSort:
    """ホストがメニュー項目の並べ替えを終えたときのイベント"""


@dataclass(frozen=True)
class ConfigChanged:
    """設定変更イベント"""

    group: str
    key: str
    old_value: Any = None
    new_value: Any = None


@dataclass
class _Subscriber:
    handler: Callable[[Any], None]
    priority: int
    order: int


class EventBus:
    """優先度付きの同期イベントバス"""

    def __init__(self) -> None:
        self.subscribers: dict[type, list[_Subscriber]] = {}
        self._counter = 0

    def subscribe(self, event_type: type, handler: Callable[[Any], None], priority: int = 0) -> None:
        """イベントを購読

        Args:
            event_type: 購読するイベントのクラス
            handler: イベントを受け取る関数
            priority: 優先度（大きいほど先に呼ばれる）
        """
        self._counter += 1
        subscribers = self.subscribers.setdefault(event_type, [])
        subscribers.append(_Subscriber(handler, priority, self._counter))
        subscribers.sort(key=lambda s: (-s.priority, s.order))

    def unsubscribe(self, event_type: type, handler: Callable[[Any], None]) -> None:
        """購読を解除"""
        subscribers = self.subscribers.get(event_type, [])
        self.subscribers[event_type] = [s for s in subscribers if s.handler != handler]

    def post(self, event: Any) -> None:
        """イベントを購読者に配信（呼び出し元スレッドで同期実行）"""
        subscribers = list(self.subscribers.get(type(event), []))
        logger.debug("イベント配信: %s -> %d 購読者", type(event).__name__, len(subscribers))
        for subscriber in subscribers:
            subscriber.handler(event)
