"""
Entry selection.

Picks the entry to open: none when nothing is configured, the only entry
when there is exactly one, otherwise whatever the interactive picker returns.
"""

import logging
from typing import Awaitable, Callable, List, Optional, Sequence

from .types import PickItem, UrlEntry


logger = logging.getLogger(__name__)

PICK_PLACEHOLDER = 'Choose a URL to open'

# Receives all entries in order; returns the chosen one or None when cancelled.
Picker = Callable[[List[UrlEntry]], Awaitable[Optional[UrlEntry]]]


def quick_pick_items(entries: Sequence[UrlEntry]) -> List[PickItem]:
    """Build the items a picker presents for the given entries."""
    return [
        PickItem(
            label=entry.display_label,
            description=entry.url if entry.label else None,
            entry=entry
        )
        for entry in entries
    ]


async def select_entry(entries: Sequence[UrlEntry], picker: Picker) -> Optional[UrlEntry]:
    """
    Select one entry from the configured list.

    Args:
        entries: Normalized entries in configuration order
        picker: Interactive chooser, consulted only for two or more entries

    Returns:
        The selected entry, or None when there are no entries or the user
        dismissed the picker
    """
    if not entries:
        return None

    if len(entries) == 1:
        logger.debug(f"Single entry configured, selecting {entries[0].url!r}")
        return entries[0]

    logger.debug(f"Asking picker to choose among {len(entries)} entries")
    return await picker(list(entries))
