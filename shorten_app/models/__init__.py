"""
In-memory models for the URL shortener.

Records live only in the Shortener store and are lost on restart.
"""

from .url import UrlRecord

__all__ = ["UrlRecord"]
