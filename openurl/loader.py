"""Settings discovery and loading for the `openUrl.urls` setting."""

import json
import logging
import re
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from openurl.exceptions import ValidationError, SettingsValidationError


logger = logging.getLogger(__name__)


class PreservingLoader(yaml.SafeLoader):
    """YAML loader that keeps bare words like 'on' and 'yes' as strings."""
    pass


# Drop the implicit bool resolvers so that 'on', 'off', 'yes', 'no' entries
# in a URL list stay strings instead of becoming True/False. Only the
# YAML 1.2 spellings of true/false are re-added.
PreservingLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != 'tag:yaml.org,2002:bool']
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}
PreservingLoader.add_implicit_resolver(
    'tag:yaml.org,2002:bool',
    re.compile(r"^(?:true|True|TRUE|false|False|FALSE)$"),
    list("tTfF")
)


def strip_json_comments(text: str) -> str:
    """
    Turn JSON-with-comments into plain JSON.

    Removes // and /* */ comments and trailing commas before '}' or ']', the
    extensions VS Code accepts in settings.json. String contents are left
    untouched.
    """
    without_comments = []
    i, n = 0, len(text)
    in_string = False
    while i < n:
        ch = text[i]
        if in_string:
            if ch == '\\':
                without_comments.append(text[i:i + 2])
                i += 2
                continue
            if ch == '"':
                in_string = False
        elif ch == '"':
            in_string = True
        elif text.startswith('//', i):
            end = text.find('\n', i)
            i = n if end == -1 else end
            continue
        elif text.startswith('/*', i):
            end = text.find('*/', i + 2)
            i = n if end == -1 else end + 2
            continue
        without_comments.append(ch)
        i += 1

    stripped = ''.join(without_comments)
    result = []
    in_string = False
    i, n = 0, len(stripped)
    while i < n:
        ch = stripped[i]
        if in_string:
            if ch == '\\':
                result.append(stripped[i:i + 2])
                i += 2
                continue
            if ch == '"':
                in_string = False
        elif ch == '"':
            in_string = True
        elif ch == ',':
            rest = stripped[i + 1:].lstrip()
            if rest[:1] in ('}', ']'):
                i += 1
                continue
        result.append(ch)
        i += 1
    return ''.join(result)


class SettingsLoader:
    """Locates the settings file for a workspace and reads the URL list."""

    SETTING_KEY = 'openUrl.urls'
    CANDIDATES = ('.openurl.yaml', '.openurl.yml', '.vscode/settings.json')

    def __init__(self, workspace: Path, settings_path: Optional[Path] = None):
        """
        Initialize loader.

        Args:
            workspace: Workspace root searched for settings files
            settings_path: Explicit settings file; skips discovery when set
        """
        self.workspace = workspace.resolve()
        self.settings_path = settings_path
        self.errors: List[ValidationError] = []

    def find_settings_file(self) -> Optional[Path]:
        """Return the settings file to read, or None when there is none."""
        if self.settings_path is not None:
            return self.settings_path

        for candidate in self.CANDIDATES:
            path = self.workspace / candidate
            if path.is_file():
                return path
        return None

    def load(self) -> Dict[str, Any]:
        """
        Read the settings document.

        Returns:
            The settings mapping; empty when no settings file exists

        Raises:
            SettingsValidationError: If the file cannot be read or parsed,
                or its top level is not a mapping
        """
        self.errors = []
        path = self.find_settings_file()
        if path is None:
            logger.debug(f"No settings file found in {self.workspace}")
            return {}

        logger.debug(f"Loading settings: {path}")
        try:
            with open(path, 'r', encoding='utf-8-sig') as f:
                text = f.read()
            if path.suffix.lower() == '.json':
                # JSON with comments, as in .vscode/settings.json
                settings = json.loads(strip_json_comments(text)) if text.strip() else None
            else:
                settings = yaml.load(text, Loader=PreservingLoader)
        except (OSError, UnicodeDecodeError, ValueError, yaml.YAMLError) as e:
            self._add_error(f"Failed to load settings: {e}", str(path))
            self._raise_validation_errors()

        if settings is None:
            return {}

        if not isinstance(settings, dict):
            self._add_error(
                f"Settings must be a mapping, got {type(settings).__name__}",
                str(path)
            )
            self._raise_validation_errors()

        return settings

    def load_urls(self) -> Optional[List[Any]]:
        """
        Read the raw `openUrl.urls` list.

        The flat dotted key wins over the nested `openUrl: {urls: ...}` form.

        Returns:
            The raw list, or None when the setting is absent or not a list
        """
        settings = self.load()

        raw = settings.get(self.SETTING_KEY)
        if raw is None:
            section = settings.get('openUrl')
            if isinstance(section, dict):
                raw = section.get('urls')

        if raw is None:
            return None

        if not isinstance(raw, list):
            logger.warning(
                f"Ignoring '{self.SETTING_KEY}': expected a list, got {type(raw).__name__}"
            )
            return None

        return raw

    def _add_error(self, message: str, path: str = ""):
        self.errors.append(ValidationError(message=message, path=path))

    def _raise_validation_errors(self):
        raise SettingsValidationError(self.errors)
