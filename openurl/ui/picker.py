"""
Interactive terminal picker.

Presents configured entries as a numbered list and reads the user's choice.
Blank input or end of input cancel the pick; Ctrl-C interrupts the command,
which the CLI reports as a cancelled pick.
"""

import asyncio
import logging
import sys
import threading
from typing import List, Optional, TextIO

from openurl.entries import PICK_PLACEHOLDER, UrlEntry, quick_pick_items


logger = logging.getLogger(__name__)


class TerminalPicker:
    """Single-choice picker on a text terminal."""

    def __init__(
        self,
        stream_in: Optional[TextIO] = None,
        stream_out: Optional[TextIO] = None,
        max_attempts: int = 3,
        placeholder: str = PICK_PLACEHOLDER
    ):
        """
        Initialize picker.

        Args:
            stream_in: Where choices are read from (default stdin)
            stream_out: Where the list and prompt are written (default stderr)
            max_attempts: Invalid answers tolerated before giving up
            placeholder: Prompt shown above the list
        """
        self.stream_in = stream_in
        self.stream_out = stream_out
        self.max_attempts = max_attempts
        self.placeholder = placeholder

    async def __call__(self, entries: List[UrlEntry]) -> Optional[UrlEntry]:
        """
        Ask the user to choose one of entries; None when cancelled.

        The blocking read runs on a daemon thread so an interrupted command
        can exit while the thread still waits in readline.
        """
        loop = asyncio.get_running_loop()
        future = loop.create_future()

        def deliver(setter, value):
            if not future.done():
                setter(value)

        def read_choice():
            try:
                outcome = (future.set_result, self.pick(entries))
            except Exception as e:
                outcome = (future.set_exception, e)
            try:
                loop.call_soon_threadsafe(deliver, *outcome)
            except RuntimeError:
                logger.debug("Picker answered after the event loop closed")

        threading.Thread(target=read_choice, name='openurl-picker', daemon=True).start()
        return await future

    def pick(self, entries: List[UrlEntry]) -> Optional[UrlEntry]:
        """Blocking variant of the picker."""
        stream_in = self.stream_in or sys.stdin
        stream_out = self.stream_out or sys.stderr
        items = quick_pick_items(entries)

        print(self.placeholder, file=stream_out)
        for number, item in enumerate(items, start=1):
            if item.description:
                print(f"  {number}) {item.label}  {item.description}", file=stream_out)
            else:
                print(f"  {number}) {item.label}", file=stream_out)

        for _ in range(self.max_attempts):
            stream_out.write(f"Select [1-{len(items)}, blank to cancel]: ")
            stream_out.flush()
            try:
                answer = stream_in.readline()
            except KeyboardInterrupt:
                logger.debug("Picker interrupted")
                return None

            # readline returns '' only at end of input
            if not answer or not answer.strip():
                logger.debug("Picker cancelled")
                return None

            choice = answer.strip()
            if choice.isdigit() and 1 <= int(choice) <= len(items):
                return items[int(choice) - 1].entry

            print(f"Invalid choice: {choice}", file=stream_out)

        logger.debug(f"Picker gave up after {self.max_attempts} invalid answers")
        return None
