"""
Entry normalization.

Converts raw `openUrl.urls` items into UrlEntry values. Each raw item is
parsed as one of three variants, tried in order:

- string: the item is the URL template itself
- object with url: a mapping (or object) whose `url` field is truthy
- fallback: anything else, stringified

Malformed items never raise; they degrade to the fallback variant so the
output always has the same length and order as the input.
"""

from collections.abc import Mapping
from typing import Any, List, Optional, Sequence

from .types import UrlEntry


_MISSING = object()


def _field(item: Any, name: str) -> Any:
    """Read a field from a mapping or an attribute from an object."""
    if isinstance(item, Mapping):
        return item.get(name, _MISSING)
    return getattr(item, name, _MISSING)


def stringify(value: Any) -> str:
    """
    Render a raw settings value the way it was written in the settings file.

    YAML/JSON scalars come back as Python values; null and booleans are
    rendered in their settings-file spelling rather than Python's.
    """
    if value is None:
        return 'null'
    if isinstance(value, bool):
        return 'true' if value else 'false'
    try:
        return str(value)
    except Exception:
        return object.__repr__(value)


def normalize_entry(item: Any) -> UrlEntry:
    """Normalize a single raw item into a UrlEntry."""
    if isinstance(item, str):
        return UrlEntry(url=item)

    try:
        url = _field(item, 'url')
        if url is not _MISSING and url:
            label = _field(item, 'label')
            return UrlEntry(url=url, label=None if label is _MISSING else label)
    except Exception:
        # Objects with hostile attribute access fall through to the fallback
        pass

    return UrlEntry(url=stringify(item))


def normalize_entries(raw: Optional[Sequence[Any]]) -> List[UrlEntry]:
    """
    Normalize the configured URL list.

    Args:
        raw: Raw list from settings, or None when the setting is absent

    Returns:
        Entries in input order, one per raw item
    """
    if not raw:
        return []
    return [normalize_entry(item) for item in raw]
