"""
Entries module.
Normalizes configured URL entries and selects the one to open.
"""

from .types import UrlEntry, PickItem
from .normalizer import normalize_entries, normalize_entry
from .selector import select_entry, quick_pick_items, PICK_PLACEHOLDER

__all__ = [
    "UrlEntry",
    "PickItem",
    "normalize_entries",
    "normalize_entry",
    "select_entry",
    "quick_pick_items",
    "PICK_PLACEHOLDER",
]
