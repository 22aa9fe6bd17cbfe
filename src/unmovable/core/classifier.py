"""メニュー項目の分類

'walk here' と 'cancel' の判定を行います。構造タグがあればそれを優先し、
タグが無い項目のみ表示ラベルの部分一致で判定します。
"""

from __future__ import annotations

import re

from .models import MenuAction, MenuEntry

WALK_LABEL = "walk here"

_TAG_PATTERN = re.compile(r"<[^>]*>")


def strip_tags(text: str) -> str:
    """<col=ff9040> などのリッチテキストタグを取り除く"""
    return _TAG_PATTERN.sub("", text or "")


def is_walk(entry: MenuEntry, label_matching: bool = True) -> bool:
    """'walk here' アクションかどうか

    Args:
        entry: 判定するメニュー項目
        label_matching: 構造タグが無い場合にラベルで判定するか

    Returns:
        'walk here' アクションの場合 True
    """
    if entry.type is not None:
        return entry.type is MenuAction.WALK

    if not label_matching:
        return False

    return WALK_LABEL in strip_tags(entry.option).casefold()


def is_cancel(entry: MenuEntry) -> bool:
    """'cancel' アクションかどうか（構造タグのみで判定）"""
    return entry.type is MenuAction.CANCEL
