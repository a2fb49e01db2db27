"""
Kitchen directory integration
"""

from .client import KitchenDirectoryClient, normalize_kitchen

__all__ = ["KitchenDirectoryClient", "normalize_kitchen"]
