"""Helpers shared by the CLI commands."""

import logging
import sys
from argparse import Namespace
from pathlib import Path
from typing import List, Optional

from openurl.loader import SettingsLoader
from openurl.variables import EditorContextSnapshot, WorkspaceFolder


def configure_logging(args: Namespace) -> None:
    """Set up logging from the --log-level, --debug and --quiet flags."""
    level_name = 'warning' if args.log_level == 'warn' else args.log_level
    log_level = getattr(logging, level_name.upper())
    if args.debug:
        log_level = logging.DEBUG
    elif args.quiet:
        log_level = logging.ERROR

    logging.basicConfig(
        level=log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    logging.getLogger('openurl').setLevel(log_level)


def workspace_dir(args: Namespace) -> Path:
    """Workspace root from --workspace, defaulting to the current directory."""
    return Path(args.workspace) if args.workspace else Path.cwd()


def build_loader(args: Namespace) -> SettingsLoader:
    """Settings loader for the workspace, honouring --settings."""
    settings_path = Path(args.settings) if args.settings else None
    return SettingsLoader(workspace_dir(args), settings_path)


def parse_workspace_folders(args: Namespace) -> List[WorkspaceFolder]:
    """
    Parse --workspace-folder NAME=PATH values.

    Without any, the workspace directory itself is the only folder.

    Raises:
        ValueError: If a value is not NAME=PATH
    """
    if not args.workspace_folder:
        return [WorkspaceFolder.from_directory(workspace_dir(args))]
    return [WorkspaceFolder.parse(spec) for spec in args.workspace_folder]


def read_selection(args: Namespace) -> Optional[str]:
    """Selected text from --selection or --selection-file."""
    if args.selection is not None:
        return args.selection

    if args.selection_file:
        if args.selection_file == '-':
            return sys.stdin.read()
        selection_file = Path(args.selection_file)
        if not selection_file.exists():
            raise FileNotFoundError(f"Selection file not found: {selection_file}")
        return selection_file.read_text(encoding='utf-8')

    return None


def build_context(
    args: Namespace,
    selected_text: Optional[str] = None,
    workspace_folders: Optional[List[WorkspaceFolder]] = None
) -> EditorContextSnapshot:
    """
    Capture a context snapshot from the live process and CLI flags.

    Args:
        args: Parsed CLI arguments
        selected_text: Selection read earlier; read from the flags when None
        workspace_folders: Folders parsed earlier; parsed from the flags when None
    """
    active_file = str(Path(args.file).resolve()) if args.file else None
    if selected_text is None:
        selected_text = read_selection(args)
    if workspace_folders is None:
        workspace_folders = parse_workspace_folders(args)

    return EditorContextSnapshot.capture(
        active_file=active_file,
        selected_text=selected_text,
        line_number=args.line,
        workspace_folders=workspace_folders
    )
