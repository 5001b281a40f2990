"""
shopfront - interactive console storefront simulator
"""

__version__ = "1.0.0"
