"""Text helpers for diagram input and SVG output. No engine imports."""

from __future__ import annotations

import re

# Private-use stand-in for a letter "o" sandwiched between letters, so it is
# never mistaken for a point decoration. Restored in the final output.
HIDE_O = "\ue004"

_HIDE_O_RE = re.compile(r"([a-zA-Z])o([a-zA-Z])")


def escape_html_entities(s: str) -> str:
    """Converts <>&" to their HTML escape sequences."""
    return s.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;").replace('"', "&quot;")


def is_ascii_letter(c: str) -> bool:
    return ("A" <= c <= "Z") or ("a" <= c <= "z")


def equalize_line_lengths(text: str) -> list[str]:
    """Split into rows and right-pad every row with spaces to the longest.

    A single trailing empty line left by a final newline is dropped.
    """
    lines = text.split("\n")
    if len(lines) > 1 and lines[-1] == "":
        lines.pop()
    longest = max(len(line) for line in lines)
    return [line.ljust(longest) for line in lines]


def hide_embedded_o(text: str) -> str:
    return _HIDE_O_RE.sub(r"\1" + HIDE_O + r"\2", text)


def restore_embedded_o(text: str) -> str:
    return text.replace(HIDE_O, "o")
