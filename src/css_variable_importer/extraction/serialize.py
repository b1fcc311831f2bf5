# css_variable_importer/extraction/serialize.py
"""
serialize.

Does: Re-emit finalized entries as a stylesheet (`:root` block plus one
      `[data-theme="<mode>"]` block per mode) and as JSON-ready dicts.
Returns: format_value(), format_stylesheet(), entries_to_dicts().
Used by: CLI demo, round-trip tests, adapters that persist a snapshot.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from css_variable_importer.extraction.types import RGBA, FinalizedEntry, ModeSlot, Value

__all__ = ["format_value", "format_stylesheet", "entries_to_dicts"]

_INDENT = "  "


def _percent(channel: float) -> str:
    return f"{channel * 100.0!r}%"


def format_value(value: Value) -> str:
    """
    Does: Format a concrete value as CSS text. Colors use `rgba()` with
          percentage channels at full float precision.
    """
    if isinstance(value, RGBA):
        return f"rgba({_percent(value.r)}, {_percent(value.g)}, {_percent(value.b)}, {value.a!r})"
    if isinstance(value, (int, float)):
        return repr(float(value))
    return str(value)


def format_stylesheet(
    entries: Iterable[FinalizedEntry],
    *,
    mode_attribute: str = "data-theme",
) -> str:
    """
    Does: Serialize entries back to custom-property declarations; descriptions
          become trailing comments.
    Returns: Stylesheet text that re-imports to the same typed values.
    """
    base_lines: list[str] = []
    mode_lines: dict[str, list[str]] = {}
    for entry in entries:
        line = f"{_INDENT}--{entry.name}: {format_value(entry.value)};"
        if entry.description:
            line += f" /* {entry.description} */"
        base_lines.append(line)
        for mode, slot in (entry.modes or {}).items():
            mode_lines.setdefault(mode, []).append(
                f"{_INDENT}--{entry.name}: {format_value(slot.value)};"
            )

    blocks = [":root {\n" + "\n".join(base_lines) + "\n}"]
    for mode, lines in mode_lines.items():
        blocks.append(f'[{mode_attribute}="{mode}"] {{\n' + "\n".join(lines) + "\n}")
    return "\n\n".join(blocks) + "\n"


def _plain(value: Value) -> Any:
    return value.as_dict() if isinstance(value, RGBA) else value


def _slot_dict(slot: ModeSlot) -> dict[str, Any]:
    out: dict[str, Any] = {"type": slot.kind.value, "value": _plain(slot.value)}
    if slot.alias_of:
        out["alias_of"] = slot.alias_of
    return out


def entries_to_dicts(entries: Iterable[FinalizedEntry]) -> list[dict[str, Any]]:
    """Does: Convert entries to plain dicts (JSON-serializable)."""
    out: list[dict[str, Any]] = []
    for e in entries:
        item: dict[str, Any] = {
            "name": e.name,
            "hierarchical_name": e.hierarchical_name,
            "type": e.kind.value,
            "value": _plain(e.value),
            "scopes": list(e.scopes),
            "code_syntax": e.code_syntax,
        }
        if e.modes:
            item["modes"] = {mode: _slot_dict(slot) for mode, slot in e.modes.items()}
        if e.description:
            item["description"] = e.description
        if e.alias_of:
            item["alias_of"] = e.alias_of
        out.append(item)
    return out
