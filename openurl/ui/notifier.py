"""User-facing notices written to the console."""

import logging
import sys
from typing import Optional, TextIO


logger = logging.getLogger(__name__)


class ConsoleNotifier:
    """Shows information and error notices on stdout and stderr."""

    def __init__(self, out: Optional[TextIO] = None, err: Optional[TextIO] = None):
        self.out = out
        self.err = err

    def info(self, message: str) -> None:
        logger.debug(f"Info notice: {message}")
        print(message, file=self.out or sys.stdout)

    def error(self, message: str) -> None:
        logger.debug(f"Error notice: {message}")
        print(f"Error: {message}", file=self.err or sys.stderr)
