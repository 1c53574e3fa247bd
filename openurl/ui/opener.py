"""
URL openers.

An opener hands a fully expanded, encoded URL to an external handler.
Openers are awaitable so the command can suspend while the handler runs.
"""

import asyncio
import logging
import sys
import webbrowser
from typing import Optional, TextIO

from openurl.exceptions import OpenerError


logger = logging.getLogger(__name__)


class BrowserOpener:
    """
    Opens URLs with the system web browser.

    Uses the standard webbrowser module, which honours $BROWSER. The
    blocking call runs in a worker thread.
    """

    def __init__(self, new: int = 2):
        """
        Args:
            new: webbrowser target (0 same window, 1 new window, 2 new tab)
        """
        self.new = new

    async def open(self, url: str) -> None:
        """
        Open url in the browser.

        Raises:
            OpenerError: If no browser accepted the URL
        """
        logger.debug(f"Opening in browser: {url}")
        try:
            opened = await asyncio.to_thread(webbrowser.open, url, self.new)
        except webbrowser.Error as e:
            raise OpenerError(url, f"Browser rejected URL ({e})") from e

        if not opened:
            raise OpenerError(url, "No browser could open URL")


class PrintOpener:
    """Writes URLs to a stream instead of opening them."""

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream

    async def open(self, url: str) -> None:
        logger.debug(f"Printing URL: {url}")
        print(url, file=self.stream or sys.stdout)
