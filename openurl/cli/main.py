"""Main CLI entry point for openurl."""

import argparse
import sys
from typing import Optional

from .commands import open_url, list_entries, expand_template


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    """Settings and logging options shared by every command."""
    parser.add_argument(
        '--workspace',
        type=str,
        metavar='DIR',
        help='Workspace root searched for settings (default: current directory)'
    )
    parser.add_argument(
        '--settings',
        type=str,
        metavar='PATH',
        help='Settings file to read instead of searching the workspace'
    )
    parser.add_argument(
        '--debug',
        action='store_true',
        help='Enable debug logging'
    )
    parser.add_argument(
        '--quiet',
        action='store_true',
        help='Only log errors'
    )
    parser.add_argument(
        '--log-level',
        choices=['debug', 'info', 'warn', 'error'],
        default='warn',
        help='Set log level'
    )


def _add_context_arguments(parser: argparse.ArgumentParser) -> None:
    """Editor context options used to resolve placeholders."""
    parser.add_argument(
        '--file',
        type=str,
        metavar='PATH',
        help='Active document path'
    )
    parser.add_argument(
        '--line',
        type=int,
        metavar='N',
        help='1-based caret line in the active document'
    )
    parser.add_argument(
        '--selection',
        type=str,
        metavar='TEXT',
        help='Selected text in the active document'
    )
    parser.add_argument(
        '--selection-file',
        type=str,
        metavar='PATH',
        help="Read selected text from a file ('-' for stdin)"
    )
    parser.add_argument(
        '--workspace-folder',
        action='append',
        metavar='NAME=PATH',
        help='Workspace folder (can be specified multiple times)'
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the openurl CLI."""
    parser = argparse.ArgumentParser(
        prog='openurl',
        description='Open configured URL templates with editor context expanded'
    )

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    # Open command
    open_parser = subparsers.add_parser('open', help='Choose a configured URL and open it')
    _add_common_arguments(open_parser)
    _add_context_arguments(open_parser)
    open_parser.add_argument(
        '--dry-run',
        action='store_true',
        help='Print the final URL instead of opening it'
    )

    # List command
    list_parser = subparsers.add_parser('list', help='List configured URLs')
    _add_common_arguments(list_parser)

    # Expand command
    expand_parser = subparsers.add_parser('expand', help='Expand a URL template')
    expand_parser.add_argument(
        'template',
        type=str,
        help='Template containing ${...} placeholders'
    )
    _add_common_arguments(expand_parser)
    _add_context_arguments(expand_parser)

    return parser


def main(args: Optional[list] = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    if not parsed_args.command:
        parser.print_help()
        return 1

    if parsed_args.command == 'open':
        return open_url(parsed_args)
    elif parsed_args.command == 'list':
        return list_entries(parsed_args)
    elif parsed_args.command == 'expand':
        return expand_template(parsed_args)
    else:
        parser.print_help()
        return 1


if __name__ == '__main__':
    sys.exit(main())
