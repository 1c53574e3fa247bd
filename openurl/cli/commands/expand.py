"""Expand command implementation."""

import logging
from argparse import Namespace

from openurl.variables import expand_variables

from .common import build_context, configure_logging


logger = logging.getLogger(__name__)


def expand_template(args: Namespace) -> int:
    """Print the template with placeholders resolved; nothing is opened."""
    configure_logging(args)

    try:
        context = build_context(args)
    except FileNotFoundError as e:
        logger.error(f"File not found: {e}")
        return 1
    except ValueError as e:
        logger.error(f"Invalid argument: {e}")
        return 2

    print(expand_variables(args.template, context))
    return 0
