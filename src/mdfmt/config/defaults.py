"""Package-level default configuration values."""

from __future__ import annotations

from typing import Any

# Default engine settings
DEFAULT_WIDTH = "unicode"
DEFAULT_STRICT = False
DEFAULT_CODE_FENCES = True
DEFAULT_ALIGN_CONTENT = False

# Default I/O settings
DEFAULT_ENCODING = "utf-8"

# Log level
DEFAULT_LOG_LEVEL = "WARNING"


def get_defaults() -> dict[str, Any]:
    """Return all defaults as a flat dictionary for merging."""
    return {
        "width": DEFAULT_WIDTH,
        "strict": DEFAULT_STRICT,
        "code_fences": DEFAULT_CODE_FENCES,
        "align_content": DEFAULT_ALIGN_CONTENT,
        "encoding": DEFAULT_ENCODING,
        "log_level": DEFAULT_LOG_LEVEL,
    }
