"""Error handling — exceptions raised around the table engine."""

from mdfmt.errors.exceptions import (
    ConfigError,
    InputError,
    MdfmtError,
)

__all__ = [
    "MdfmtError",
    "ConfigError",
    "InputError",
]
