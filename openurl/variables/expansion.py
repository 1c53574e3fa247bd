"""
Placeholder expansion for URL templates.
Resolves ${...} placeholders against an EditorContextSnapshot.
"""

import logging
import re
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence

from .context import EditorContextSnapshot


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Resolver:
    """
    A named placeholder rule.

    Attributes:
        name: Rule identifier used in debug logs
        matches: Predicate over the placeholder expression
        resolve: Maps (expression, snapshot) to the replacement text
    """
    name: str
    matches: Callable[[str], bool]
    resolve: Callable[[str, EditorContextSnapshot], str]


def _exact(*names: str) -> Callable[[str], bool]:
    return lambda expr: expr in names


def _resolve_env(expr: str, ctx: EditorContextSnapshot) -> str:
    return ctx.getenv(expr[len('env:'):])


def _resolve_workspace_folder(expr: str, ctx: EditorContextSnapshot) -> str:
    if expr == 'workspaceFolder':
        return ctx.folder_path()
    # Only the first ':'-delimited segment names the folder
    return ctx.folder_path(expr.split(':')[1])


def _resolve_file(expr: str, ctx: EditorContextSnapshot) -> str:
    return ctx.active_file or ''


def _resolve_basename(expr: str, ctx: EditorContextSnapshot) -> str:
    if not ctx.has_document:
        return ''
    return ctx.relative_file().split('/')[-1]


def _resolve_basename_no_extension(expr: str, ctx: EditorContextSnapshot) -> str:
    base = _resolve_basename(expr, ctx)
    # Dot-prefixed names are kept whole: ".report.final.txt" has no extension
    if base.startswith('.'):
        return base
    idx = base.rfind('.')
    return base[:idx] if idx > 0 else base


def _resolve_dirname(expr: str, ctx: EditorContextSnapshot) -> str:
    if not ctx.has_document:
        return ''
    full = ctx.active_file
    idx = full.rfind('/')
    return full[:idx] if idx >= 0 else ''


def _resolve_relative_file(expr: str, ctx: EditorContextSnapshot) -> str:
    return ctx.relative_file()


def _resolve_selected_text(expr: str, ctx: EditorContextSnapshot) -> str:
    if not ctx.has_document:
        return ''
    return ctx.selected_text or ''


def _resolve_line_number(expr: str, ctx: EditorContextSnapshot) -> str:
    if not ctx.has_document or ctx.line_number is None:
        return ''
    return str(ctx.line_number)


def _resolve_env_fallback(expr: str, ctx: EditorContextSnapshot) -> str:
    return ctx.getenv(expr)


DEFAULT_RESOLVERS: List[Resolver] = [
    Resolver('env', lambda expr: expr.startswith('env:'), _resolve_env),
    Resolver(
        'workspaceFolder',
        lambda expr: expr == 'workspaceFolder' or expr.startswith('workspaceFolder:'),
        _resolve_workspace_folder
    ),
    Resolver('cwd', _exact('cwd'), lambda expr, ctx: ctx.cwd),
    Resolver('file', _exact('file', 'filePath'), _resolve_file),
    Resolver('fileBasename', _exact('fileBasename'), _resolve_basename),
    Resolver('fileBasenameNoExtension', _exact('fileBasenameNoExtension'), _resolve_basename_no_extension),
    Resolver('fileDirname', _exact('fileDirname'), _resolve_dirname),
    Resolver('relativeFile', _exact('relativeFile'), _resolve_relative_file),
    Resolver('selectedText', _exact('selectedText'), _resolve_selected_text),
    Resolver('lineNumber', _exact('lineNumber'), _resolve_line_number),
]

# Always matches, so resolution never runs off the end of the chain.
FALLBACK_RESOLVER = Resolver('envFallback', lambda expr: True, _resolve_env_fallback)


class VariableExpander:
    """
    Expands ${expr} placeholders in URL templates.

    Resolvers are tried in order and the first whose predicate matches
    produces the replacement. Unknown or unavailable values become the empty
    string; expansion never raises and never leaves a placeholder behind.

    Supported expressions:
    - ${env:NAME}, ${workspaceFolder}, ${workspaceFolder:NAME}, ${cwd}
    - ${file}, ${filePath}, ${fileBasename}, ${fileBasenameNoExtension}
    - ${fileDirname}, ${relativeFile}, ${selectedText}, ${lineNumber}
    - ${NAME} as a shorthand for an environment variable
    """

    # Inner text may not contain '}' and may not be empty
    VAR_PATTERN = re.compile(r'\$\{([^}]+)\}')

    def __init__(self, resolvers: Optional[Sequence[Resolver]] = None):
        """Initialize with the default resolver chain unless one is given."""
        chain = list(DEFAULT_RESOLVERS if resolvers is None else resolvers)
        self.resolvers: List[Resolver] = chain + [FALLBACK_RESOLVER]

    def expand(self, template: Optional[str], context: EditorContextSnapshot) -> str:
        """
        Expand every placeholder in a template.

        Args:
            template: URL template; None or empty yields an empty string
            context: Snapshot placeholders are resolved against

        Returns:
            The template with each placeholder replaced by its value
        """
        if not template:
            return ''
        if not isinstance(template, str):
            template = str(template)

        def replace_var(match):
            return self.resolve(match.group(1), context)

        return self.VAR_PATTERN.sub(replace_var, template)

    def resolve(self, expr: str, context: EditorContextSnapshot) -> str:
        """Resolve a single placeholder expression."""
        for resolver in self.resolvers:
            try:
                if not resolver.matches(expr):
                    continue
                value = resolver.resolve(expr, context)
            except Exception as e:
                logger.debug(f"Resolver {resolver.name!r} failed for {expr!r}: {e}")
                return ''
            logger.debug(f"Resolved ${{{expr}}} via {resolver.name}")
            return value if isinstance(value, str) else ''
        return ''


def expand_variables(template: Optional[str], context: EditorContextSnapshot) -> str:
    """Expand a template with the default resolver chain."""
    return VariableExpander().expand(template, context)
