"""Custom exception hierarchy for mdfmt.

The table engine itself never raises these; they belong to the code that
reads configuration and files around it.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any


class MdfmtError(Exception):
    """Base exception for all mdfmt errors."""

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        super().__init__(message)
        self.message = message


class ConfigError(MdfmtError):
    """Invalid configuration value.

    Examples: unknown width policy, non-boolean strict flag.
    """

    def __init__(self, message: str = "", key: str | None = None) -> None:
        super().__init__(message)
        self.key = key


class InputError(MdfmtError):
    """A document could not be read, decoded or written."""

    def __init__(
        self,
        message: str = "",
        path: str | Path | None = None,
        original: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.path = Path(path) if path is not None else None
        self.original = original
