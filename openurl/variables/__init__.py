"""
Variable expansion module.
Resolves ${...} placeholders in URL templates against an editor context.
"""

from .context import EditorContextSnapshot, WorkspaceFolder
from .expansion import VariableExpander, Resolver, expand_variables

__all__ = [
    'EditorContextSnapshot',
    'WorkspaceFolder',
    'VariableExpander',
    'Resolver',
    'expand_variables',
]
