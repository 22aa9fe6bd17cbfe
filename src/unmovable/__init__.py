"""
unmovable: ゲームクライアントの右クリックメニューから 'walk here' を外すルールエンジン

最優先の 'walk here' を削除、または優先度を下げることで、
地面の左クリックによる誤移動を防ぎます。Shift+クリックで移動できます。
"""

__version__ = "0.1.0"

from .core.models import DemotionPolicy, MenuAction, MenuEntry, Strategy
from .core.rule_engine import MenuRuleEngine, decide, select_strategy

__all__ = [
    "DemotionPolicy",
    "MenuAction",
    "MenuEntry",
    "MenuRuleEngine",
    "Strategy",
    "decide",
    "select_strategy",
]
