"""
Shared HTTP fetching for outbound JSON APIs
"""

from .fetcher import JsonFetcher

__all__ = ["JsonFetcher"]
