# css_variable_importer/extraction/general/token/split.py
"""
split.

Does: Split CSS function arguments on top-level separators only, so that
      commas or spaces inside nested calls (`var(--x)`, `calc(h + 10)`)
      never become split points.
Returns: split_top_level(), function_call(), var_reference().
Used by: Value classifier (light-dark), relative color evaluator (channels).
"""

from __future__ import annotations

import re

__all__ = ["split_top_level", "function_call", "var_reference"]

_FUNCTION_RE = re.compile(r"^\s*([a-zA-Z][a-zA-Z0-9-]*)\(", re.DOTALL)
_VAR_RE = re.compile(r"^\s*var\(\s*--(?P<name>[A-Za-z0-9_-]+)\s*\)\s*$")


def split_top_level(text: str, separator: str | None = ",") -> list[str] | None:
    """
    Does: Split `text` on `separator` at parenthesis depth 0; `None` splits on
          whitespace runs. Empty parts are dropped for whitespace splitting.
    Returns: Stripped parts, or None when parentheses are unbalanced.
    """
    parts: list[str] = []
    depth = 0
    buf: list[str] = []
    for ch in text:
        if ch == "(":
            depth += 1
        elif ch == ")":
            depth -= 1
            if depth < 0:
                return None
        at_split = depth == 0 and (ch.isspace() if separator is None else ch == separator)
        if at_split:
            parts.append("".join(buf).strip())
            buf = []
            continue
        buf.append(ch)
    if depth != 0:
        return None
    parts.append("".join(buf).strip())
    if separator is None:
        return [p for p in parts if p]
    return parts


def function_call(text: str) -> tuple[str, str] | None:
    """
    Does: Recognise `name( ... )` where the closing parenthesis ends the text.
    Returns: (lowercased name, inner argument text) or None.
    """
    m = _FUNCTION_RE.match(text)
    if not m:
        return None
    body = text.strip()
    open_at = body.index("(")
    depth = 0
    for i in range(open_at, len(body)):
        ch = body[i]
        if ch == "(":
            depth += 1
        elif ch == ")":
            depth -= 1
            if depth == 0:
                if i != len(body) - 1:
                    return None
                return m.group(1).lower(), body[open_at + 1 : i]
    return None


def var_reference(text: str) -> str | None:
    """Does: Return OTHER when `text` is exactly `var(--OTHER)`, else None."""
    m = _VAR_RE.match(text)
    return m.group("name") if m else None
