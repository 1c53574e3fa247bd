"""Open command implementation."""

import asyncio
import logging
from argparse import Namespace

from openurl.command import OpenOutcome, OpenUrlCommand
from openurl.exceptions import SettingsValidationError
from openurl.ui import BrowserOpener, ConsoleNotifier, PrintOpener, TerminalPicker

from .common import (
    build_context,
    build_loader,
    configure_logging,
    parse_workspace_folders,
    read_selection,
)


logger = logging.getLogger(__name__)

# Exit codes per outcome; notices already told the user what happened.
EXIT_CODES = {
    OpenOutcome.OPENED: 0,
    OpenOutcome.NOT_CONFIGURED: 0,
    OpenOutcome.CANCELLED: 0,
    OpenOutcome.EMPTY_URL: 1,
    OpenOutcome.FAILED: 1,
}


def open_url(args: Namespace) -> int:
    """
    Choose a configured URL, expand it and open it.

    Returns:
        Exit code (0 opened or nothing to do, 1 failure, 2 bad settings/arguments)
    """
    configure_logging(args)

    try:
        # Context flags are checked before any interaction
        workspace_folders = parse_workspace_folders(args)
        selected_text = read_selection(args)
    except FileNotFoundError as e:
        logger.error(f"File not found: {e}")
        return 1
    except ValueError as e:
        logger.error(f"Invalid argument: {e}")
        return 2

    try:
        loader = build_loader(args)

        command = OpenUrlCommand(
            settings=loader.load_urls,
            context_provider=lambda: build_context(args, selected_text, workspace_folders),
            picker=TerminalPicker(),
            opener=PrintOpener() if args.dry_run else BrowserOpener(),
            notifier=ConsoleNotifier()
        )
        outcome = asyncio.run(command.run())
        logger.debug(f"Open finished: {outcome.value}")
        return EXIT_CODES[outcome]

    except (KeyboardInterrupt, asyncio.CancelledError):
        # Ctrl-C at the picker ends the command like a dismissed pick
        logger.debug("Open interrupted")
        return EXIT_CODES[OpenOutcome.CANCELLED]
    except SettingsValidationError as e:
        for error in e.errors:
            logger.error(f"Settings error: {error.message}")
        return e.exit_code
    except Exception as e:
        logger.error(f"Unexpected error: {e}", exc_info=True)
        return 1
