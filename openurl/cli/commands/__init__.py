"""CLI command handlers."""

from .open import open_url
from .list import list_entries
from .expand import expand_template

__all__ = ['open_url', 'list_entries', 'expand_template']
