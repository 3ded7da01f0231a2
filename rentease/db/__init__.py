"""
Database init - Exports for the store layer
"""

from .base import Base, TimestampMixin
from .kv import KeyValueEntry

__all__ = ["Base", "TimestampMixin", "KeyValueEntry"]
