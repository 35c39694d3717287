"""
核心層

分詞、分派、彙整與 backend 介面；不依賴任何具體的拼字檢查實作。
"""

from .aggregator import aggregate, group_positions
from .backend_interface import SpellBackendProtocol, query_backend, validate_backend
from .dispatcher import dispatch, distinct_words
from .events import TypoEvent, TypoEventHandler
from .models import Occurrence, Position, Typo, Verdict
from .scanner import ScanState, WordScanner, iter_occurrences, scan

__all__ = [
    "Occurrence",
    "Position",
    "Typo",
    "Verdict",
    "ScanState",
    "WordScanner",
    "scan",
    "iter_occurrences",
    "distinct_words",
    "dispatch",
    "aggregate",
    "group_positions",
    "SpellBackendProtocol",
    "validate_backend",
    "query_backend",
    "TypoEvent",
    "TypoEventHandler",
]
