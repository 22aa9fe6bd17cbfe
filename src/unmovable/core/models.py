"""unmovableのデータモデル定義

メニュー項目、アクション種別、戦略などのデータ構造を定義します。
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum


class MenuAction(Enum):
    """メニュー項目のアクション種別（ホスト側の構造タグ）"""

    WALK = "walk"
    CANCEL = "cancel"
    PLAYER_FIRST_OPTION = "player_first_option"
    PLAYER_SECOND_OPTION = "player_second_option"
    PLAYER_THIRD_OPTION = "player_third_option"
    PLAYER_FOURTH_OPTION = "player_fourth_option"
    NPC_FIRST_OPTION = "npc_first_option"
    GAME_OBJECT_FIRST_OPTION = "game_object_first_option"
    EXAMINE_OBJECT = "examine_object"
    UNKNOWN = "unknown"

    @classmethod
    def from_name(cls, name: str) -> MenuAction | None:
        """名前（大文字小文字を区別しない）からアクション種別を取得"""
        normalized = name.strip().lower().replace("-", "_")
        for action in cls:
            if action.value == normalized:
                return action
        return None


class Strategy(Enum):
    """先頭の 'walk here' をどう扱うか"""

    FILTER = "filter"  # メニューから削除
    PRESERVE = "preserve"  # メニューに残して優先度を下げる


class DemotionPolicy(Enum):
    """PRESERVE 戦略での降格方法"""

    SWAP_WITH_CANCEL = "swap"
    ROTATE = "rotate"  # 2番目に優先度の高い項目と入れ替え

    @classmethod
    def from_value(cls, value: str) -> DemotionPolicy | None:
        """設定値から降格方法を取得"""
        for policy in cls:
            if policy.value == str(value).strip().lower():
                return policy
        return None


@dataclass(eq=False)
class MenuEntry:
    """メニュー項目

    エンジンから見ると不透明なトークンで、同一性（is）でのみ比較されます。
    分類に必要な属性以外は参照しません。
    """

    option: str = ""  # 表示ラベル（例: "Walk here"）
    target: str = ""  # 対象（<col=...> などのタグを含む場合あり）
    type: MenuAction | None = None  # 構造タグ（ホストが提供しない場合は None）

    def __repr__(self) -> str:
        kind = self.type.value if self.type else "untagged"
        return f"MenuEntry({kind}, option={self.option!r})"


# 優先度順のメニュー項目（index 0 が最低、末尾が最高）
MenuEntries = Sequence[MenuEntry]

# エンジンの判定結果（None は「変更なし」、リストは置き換え後のメニュー）
MenuDecision = list[MenuEntry] | None
