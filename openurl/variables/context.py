"""
Editor context snapshot.

A read-only bundle of the editing state that placeholders are resolved
against: active document, selection, caret line, workspace folders, working
directory and environment. A snapshot is built right before expansion and
discarded afterwards.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path, PurePath
from types import MappingProxyType
from typing import Iterable, Mapping, Optional, Tuple


@dataclass(frozen=True)
class WorkspaceFolder:
    """A named workspace root."""
    name: str
    path: str

    @classmethod
    def parse(cls, spec: str) -> 'WorkspaceFolder':
        """
        Parse a NAME=PATH folder specification.

        Raises:
            ValueError: If the specification has no '=' or an empty name
        """
        if '=' not in spec:
            raise ValueError(f"Invalid workspace folder: {spec}. Expected NAME=PATH")
        name, path = spec.split('=', 1)
        if not name:
            raise ValueError(f"Invalid workspace folder: {spec}. Name cannot be empty")
        return cls(name=name, path=path)

    @classmethod
    def from_directory(cls, directory: Path) -> 'WorkspaceFolder':
        """Folder named after the directory's final component."""
        resolved = directory.resolve()
        return cls(name=resolved.name or str(resolved), path=str(resolved))


@dataclass(frozen=True)
class EditorContextSnapshot:
    """
    Read-only view of the editing context at expansion time.

    Attributes:
        active_file: Filesystem path of the active document, if any
        selected_text: Text under the current selection, if any
        line_number: 1-based caret line in the active document
        workspace_folders: Workspace roots in their configured order
        cwd: Working directory of the process
        environ: Environment variables, looked up by exact name
    """
    active_file: Optional[str] = None
    selected_text: Optional[str] = None
    line_number: Optional[int] = None
    workspace_folders: Tuple[WorkspaceFolder, ...] = ()
    cwd: str = ''
    environ: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))

    @classmethod
    def capture(
        cls,
        active_file: Optional[str] = None,
        selected_text: Optional[str] = None,
        line_number: Optional[int] = None,
        workspace_folders: Iterable[WorkspaceFolder] = (),
        cwd: Optional[str] = None,
        environ: Optional[Mapping[str, str]] = None
    ) -> 'EditorContextSnapshot':
        """
        Build a snapshot from the live process plus the given editor state.

        The working directory and environment default to the current
        process; both are copied so later changes do not leak in. A caret
        with no explicit line sits on line 1 of the active document.
        """
        if active_file and line_number is None:
            line_number = 1

        return cls(
            active_file=active_file,
            selected_text=selected_text,
            line_number=line_number,
            workspace_folders=tuple(workspace_folders),
            cwd=os.getcwd() if cwd is None else cwd,
            environ=MappingProxyType(dict(os.environ if environ is None else environ))
        )

    @property
    def has_document(self) -> bool:
        """True when there is an active document."""
        return bool(self.active_file)

    def getenv(self, name: str) -> str:
        """Environment value for name, empty when unset."""
        return self.environ.get(name, '')

    def folder_path(self, name: Optional[str] = None) -> str:
        """
        Path of a workspace folder.

        Args:
            name: Folder name to look up; None selects the first folder

        Returns:
            The folder path, or empty string when there is no such folder
        """
        if name is None:
            return self.workspace_folders[0].path if self.workspace_folders else ''
        for folder in self.workspace_folders:
            if folder.name == name:
                return folder.path
        return ''

    def relative_file(self) -> str:
        """
        Active document path relative to its workspace folder.

        Uses '/' separators. When the document lies outside every workspace
        folder the path is returned unchanged; the innermost containing
        folder wins when folders are nested.
        """
        if not self.active_file:
            return ''

        file_path = PurePath(self.active_file)
        best: Optional[PurePath] = None
        for folder in self.workspace_folders:
            if not folder.path:
                continue
            try:
                relative = file_path.relative_to(PurePath(folder.path))
            except ValueError:
                continue
            if not relative.parts:
                continue
            if best is None or len(relative.parts) < len(best.parts):
                best = relative

        if best is None:
            return self.active_file
        return best.as_posix()
