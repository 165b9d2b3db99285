"""Display-width policies for measuring cell text.

The renderer never measures text itself; it is handed one of these
functions so the Unicode tables can be swapped without touching the
rendering code.
"""

from __future__ import annotations

from wcwidth import wcwidth

from mdfmt.types import WidthFunction


def char_width(char: str) -> int:
    """Rendering columns taken by a single character.

    Wide (East Asian) characters count 2 and combining marks 0. Control
    characters, which wcwidth reports as -1, count as one column.
    """
    width = wcwidth(char)
    return width if width >= 0 else 1


def display_width(text: str) -> int:
    """Sum of the display widths of every character in ``text``."""
    return sum(char_width(char) for char in text)


def ascii_width(text: str) -> int:
    """One column per code point."""
    return len(text)


_WIDTH_POLICIES: dict[str, WidthFunction] = {
    "unicode": display_width,
    "ascii": ascii_width,
}


def get_width_function(name: str) -> WidthFunction:
    """Look up a width policy by name."""
    try:
        return _WIDTH_POLICIES[name]
    except KeyError:
        known = ", ".join(sorted(_WIDTH_POLICIES))
        raise ValueError(f"Unknown width policy '{name}' (expected one of: {known})") from None


def list_width_policies() -> list[str]:
    return sorted(_WIDTH_POLICIES)
