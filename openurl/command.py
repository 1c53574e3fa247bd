"""
The open-URL command.

Composes normalization, selection, expansion and encoding, hands the result
to an opener and reports every failure as a single user-visible notice.
"""

import logging
from enum import Enum
from typing import Any, Awaitable, Callable, Optional, Protocol, Sequence
from urllib.parse import quote

from openurl.entries import normalize_entries, select_entry
from openurl.entries.selector import Picker
from openurl.variables import EditorContextSnapshot, VariableExpander


logger = logging.getLogger(__name__)

NO_URLS_MESSAGE = 'No URLs configured in `openUrl.urls`.'
EMPTY_URL_MESSAGE = 'URL is empty after variable expansion.'
OPEN_FAILED_PREFIX = 'Failed to open URL'

# Characters left as-is when encoding: URI reserved and unreserved marks.
# Letters, digits and '_.-~' are always kept by quote().
URI_SAFE_CHARS = ";,/?:@&=+$#!*'()"


class OpenOutcome(str, Enum):
    """How a command invocation ended."""
    OPENED = "opened"
    NOT_CONFIGURED = "not_configured"
    CANCELLED = "cancelled"
    EMPTY_URL = "empty_url"
    FAILED = "failed"


class Notifier(Protocol):
    """Shows notices to the user; ConsoleNotifier on the command line."""

    def info(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...


class Opener(Protocol):
    """Hands a URL to an external handler; BrowserOpener on the command line.

    open() raises on rejection; OpenerError is the usual type.
    """

    def open(self, url: str) -> Awaitable[None]: ...


def encode_uri(text: str) -> str:
    """
    Percent-encode a URL for transport.

    Reserved and unreserved URI characters are kept, so an already
    well-formed URL passes through unchanged. Everything else, including
    '%', spaces and non-ASCII text, is encoded as UTF-8.

    Raises:
        UnicodeEncodeError: If text contains lone surrogates
    """
    return quote(text, safe=URI_SAFE_CHARS)


class OpenUrlCommand:
    """
    Opens one configured URL.

    Each run() reads settings and context afresh and shares no state with
    other runs. The run suspends only while the picker or the opener work.
    """

    def __init__(
        self,
        settings: Callable[[], Optional[Sequence[Any]]],
        context_provider: Callable[[], EditorContextSnapshot],
        picker: Picker,
        opener: Opener,
        notifier: Notifier,
        expander: Optional[VariableExpander] = None
    ):
        """
        Initialize command.

        Args:
            settings: Returns the raw `openUrl.urls` list, or None when unset
            context_provider: Builds the context snapshot used for expansion
            picker: Chooses among two or more entries
            opener: Hands the final URL to an external handler
            notifier: Shows information and error notices
            expander: Placeholder expander (default resolver chain if None)
        """
        self.settings = settings
        self.context_provider = context_provider
        self.picker = picker
        self.opener = opener
        self.notifier = notifier
        self.expander = expander or VariableExpander()

    async def run(self) -> OpenOutcome:
        """Run the command once and report how it ended."""
        entries = normalize_entries(self.settings())
        if not entries:
            self.notifier.info(NO_URLS_MESSAGE)
            return OpenOutcome.NOT_CONFIGURED

        pick = await select_entry(entries, self.picker)
        if pick is None:
            logger.debug("No entry selected")
            return OpenOutcome.CANCELLED

        try:
            expanded = self.expander.expand(pick.url, self.context_provider())
            if not expanded.strip():
                self.notifier.error(EMPTY_URL_MESSAGE)
                return OpenOutcome.EMPTY_URL

            safe = encode_uri(expanded)
            logger.info(f"Opening {safe}")
            await self.opener.open(safe)
        except Exception as e:
            logger.debug("Open failed", exc_info=True)
            self.notifier.error(f"{OPEN_FAILED_PREFIX}: {e}")
            return OpenOutcome.FAILED

        return OpenOutcome.OPENED
