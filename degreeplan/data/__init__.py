"""
Record store access.

This package holds the record-store contract, an in-memory implementation,
seed-file loading and row parsing.
"""

from .store import RecordStore, InMemoryRecordStore
from .loader import DataLoader
from .parser import RecordParser

__all__ = ["RecordStore", "InMemoryRecordStore", "DataLoader", "RecordParser"]
