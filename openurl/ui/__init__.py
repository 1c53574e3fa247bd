"""Console collaborators: notices, the interactive picker and URL openers."""

from .notifier import ConsoleNotifier
from .opener import BrowserOpener, PrintOpener
from .picker import TerminalPicker

__all__ = ['ConsoleNotifier', 'BrowserOpener', 'PrintOpener', 'TerminalPicker']
