"""
Navigation state machine: pages, session state and the engine that drives them
"""
from .engine import NavigationEngine
from .pages import Page, PageState
from .state_manager import ShopSession

__all__ = ["NavigationEngine", "Page", "PageState", "ShopSession"]
