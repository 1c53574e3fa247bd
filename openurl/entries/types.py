"""
Entry type definitions.

Defines the canonical URL entry and the item shape shown by pickers.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class UrlEntry:
    """
    One selectable URL template.

    Attributes:
        url: URL template, possibly containing ${...} placeholders
        label: Optional human-readable name shown instead of the URL
    """
    url: str
    label: Optional[str] = None

    @property
    def display_label(self) -> str:
        """Text shown as the entry's primary label."""
        return self.label or self.url


@dataclass(frozen=True)
class PickItem:
    """Presentation of an entry inside an interactive picker."""
    label: str
    entry: UrlEntry
    description: Optional[str] = None
