"""openurl exceptions."""

from typing import List
from dataclasses import dataclass


@dataclass
class ValidationError:
    """Single settings validation error."""
    message: str
    path: str = ""
    exit_code: int = 2


class SettingsValidationError(Exception):
    """Raised when the settings file cannot be read as a settings document.

    The loader raises this so the CLI can catch it and map it to an exit code.
    Malformed entries inside a readable document never raise; they are
    degraded by the entry normalizer instead.
    """

    def __init__(self, errors: List[ValidationError]):
        self.errors = errors
        self.exit_code = 2

        messages = []
        for error in errors:
            location = f" ({error.path})" if error.path else ""
            messages.append(f"Settings error{location}: {error.message}")

        super().__init__("\n".join(messages))


class OpenerError(Exception):
    """Raised when the external handler rejects a URL."""

    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"{reason}: {url}")
