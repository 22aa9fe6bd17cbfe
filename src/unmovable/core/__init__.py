"""
コアモジュール

メニュールールエンジンとホスト連携を含む
"""

from .classifier import is_cancel, is_walk, strip_tags
from .events import ConfigChanged, EventBus, PostMenuSort
from .exceptions import ConfigurationError, UnmovableError, ValidationError
from .models import DemotionPolicy, MenuAction, MenuDecision, MenuEntries, MenuEntry, Strategy
from .plugin import Client, KeyCode, Menu, UnmovablePlugin
from .rule_engine import MenuRuleEngine, decide, select_strategy

__all__ = [
    # Host integration
    "Client",
    "ConfigChanged",
    # Exceptions
    "ConfigurationError",
    # Models
    "DemotionPolicy",
    "EventBus",
    "KeyCode",
    "Menu",
    "MenuAction",
    "MenuDecision",
    "MenuEntries",
    "MenuEntry",
    # Engine
    "MenuRuleEngine",
    "PostMenuSort",
    "Strategy",
    "UnmovableError",
    "UnmovablePlugin",
    "ValidationError",
    "decide",
    "is_cancel",
    "is_walk",
    "select_strategy",
    "strip_tags",
]
