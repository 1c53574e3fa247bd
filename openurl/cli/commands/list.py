"""List command implementation."""

import logging
from argparse import Namespace

from openurl.command import NO_URLS_MESSAGE
from openurl.entries import normalize_entries
from openurl.exceptions import SettingsValidationError

from .common import build_loader, configure_logging


logger = logging.getLogger(__name__)


def list_entries(args: Namespace) -> int:
    """Print configured entries in order, one per line."""
    configure_logging(args)

    try:
        entries = normalize_entries(build_loader(args).load_urls())
    except SettingsValidationError as e:
        for error in e.errors:
            logger.error(f"Settings error: {error.message}")
        return e.exit_code

    if not entries:
        print(NO_URLS_MESSAGE)
        return 0

    for number, entry in enumerate(entries, start=1):
        if entry.label:
            print(f"{number}\t{entry.label}\t{entry.url}")
        else:
            print(f"{number}\t{entry.url}")
    return 0
