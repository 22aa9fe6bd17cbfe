"""
メニュールールエンジン

ホストが優先度順に並べたメニュー項目を受け取り、最優先の 'walk here' を
削除（FILTER）するか、優先度を下げる（PRESERVE）かを決定します。
"""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING

from ..utils.logger import get_logger
from .classifier import is_cancel, is_walk
from .models import DemotionPolicy, MenuDecision, MenuEntries, Strategy

if TYPE_CHECKING:
    from ..utils.config import Config

logger = get_logger(__name__)


def select_strategy(preserve_menu: bool) -> Strategy:
    """設定フラグから戦略を決定"""
    return Strategy.PRESERVE if preserve_menu else Strategy.FILTER


def decide(
    entries: MenuEntries,
    shift_held: bool,
    menu_already_open: bool,
    strategy: Strategy,
    policy: DemotionPolicy = DemotionPolicy.SWAP_WITH_CANCEL,
    label_matching: bool = True,
) -> MenuDecision:
    """メニュー項目に戦略を適用

    Args:
        entries: 優先度順のメニュー項目（末尾が最優先）
        shift_held: Shiftキーが押されているか
        menu_already_open: 別のメニューが既に開いているか
        strategy: 適用する戦略
        policy: PRESERVE 時の降格方法
        label_matching: 構造タグが無い項目をラベルで判定するか

    Returns:
        新しいメニュー項目のリスト、変更しない場合は None
    """
    if shift_held or menu_already_open:
        return None

    if not is_tail_walk(entries, label_matching):
        return None

    if strategy is Strategy.FILTER:
        return remove_walk(entries)

    if policy is DemotionPolicy.ROTATE:
        return rotate_walk(entries)
    return swap_with_cancel(entries)


def is_tail_walk(entries: MenuEntries, label_matching: bool = True) -> bool:
    """末尾（最優先）が 'walk here' かどうか"""
    if len(entries) == 0:
        return False
    return is_walk(entries[-1], label_matching)


def remove_walk(entries: MenuEntries) -> MenuDecision:
    """末尾の項目を取り除いた新しいリストを返す（空リストもあり得る）"""
    return list(entries[:-1])


def swap_with_cancel(entries: MenuEntries) -> MenuDecision:
    """末尾の 'walk here' を最初の 'cancel' と入れ替える

    Returns:
        新しいリスト。項目が1つだけ、または cancel が無い場合は None
    """
    # 唯一の項目なら入れ替えても変化しない
    if len(entries) == 1:
        return None

    cancel_index = next((i for i, entry in enumerate(entries) if is_cancel(entry)), None)
    if cancel_index is None:
        return None

    new_entries = list(entries)
    new_entries[-1] = entries[cancel_index]
    new_entries[cancel_index] = entries[-1]
    return new_entries


def rotate_walk(entries: MenuEntries) -> MenuDecision:
    """末尾の 'walk here' を2番目に優先度の高い位置へ下げる"""
    if len(entries) == 1:
        return None

    new_entries = list(entries)
    new_entries[-1], new_entries[-2] = new_entries[-2], new_entries[-1]
    return new_entries


class MenuRuleEngine:
    """メニュールールエンジン

    現在の戦略・降格方法・ラベル判定の設定を保持します。更新は update_strategy /
    apply_config のみで行い、on_menu_built は呼び出しごとに一度だけ全設定を読み取ります。
    """

    def __init__(
        self,
        strategy: Strategy = Strategy.FILTER,
        policy: DemotionPolicy = DemotionPolicy.SWAP_WITH_CANCEL,
        label_matching: bool = True,
    ):
        self._lock = threading.Lock()
        self._strategy = strategy
        self._policy = policy
        self._label_matching = label_matching

    @classmethod
    def from_config(cls, config: Config) -> MenuRuleEngine:
        """設定からエンジンを生成"""
        engine = cls()
        engine.apply_config(config)
        return engine

    @property
    def strategy(self) -> Strategy:
        with self._lock:
            return self._strategy

    @property
    def policy(self) -> DemotionPolicy:
        with self._lock:
            return self._policy

    @property
    def label_matching(self) -> bool:
        with self._lock:
            return self._label_matching

    def update_strategy(
        self,
        preserve_menu: bool,
        policy: DemotionPolicy | None = None,
        label_matching: bool | None = None,
    ) -> Strategy:
        """設定フラグから戦略を再計算

        Args:
            preserve_menu: "Preserve menu" 設定の値
            policy: 降格方法（None の場合は現在の値を維持）
            label_matching: ラベル判定（None の場合は現在の値を維持）

        Returns:
            新しい戦略
        """
        strategy = select_strategy(preserve_menu)
        with self._lock:
            self._strategy = strategy
            if policy is not None:
                self._policy = policy
            if label_matching is not None:
                self._label_matching = label_matching
            policy = self._policy
        logger.debug("戦略を更新しました: %s (%s)", strategy.value, policy.value)
        return strategy

    def apply_config(self, config: Config) -> Strategy:
        """設定オブジェクトから戦略・降格方法・ラベル判定を反映

        すべての値を読み取ってからまとめて書き込むため、
        ConfigurationError の場合はエンジンの状態は変わりません。
        """
        preserve_menu = config.get_bool("preserve_menu")
        label_matching = config.get_bool("label_matching")
        policy = config.get_demotion_policy()
        return self.update_strategy(preserve_menu, policy, label_matching)

    def on_menu_built(self, entries: MenuEntries, shift_held: bool, menu_already_open: bool) -> MenuDecision:
        """メニュー構築イベントごとに呼び出されるエントリーポイント

        Returns:
            置き換え後のメニュー項目、変更しない場合は None
        """
        with self._lock:
            strategy = self._strategy
            policy = self._policy
            label_matching = self._label_matching

        result = decide(entries, shift_held, menu_already_open, strategy, policy, label_matching)
        if result is not None:
            logger.debug("メニューを更新しました: %d -> %d 項目 (%s)", len(entries), len(result), strategy.value)
        return result
