# css_variable_importer/extraction/variables/lookup.py
"""
lookup.

Does: Hold the in-pass table of classified variables and answer read-only
      value queries against it, falling back to the existing-variable snapshot.
Returns: VariableTable (ordered name → ParsedVariable, plus color()/number()).
Used by: Value classifier, relative color evaluator, mode extractor, alias resolver.
"""

from __future__ import annotations

from collections.abc import Iterator

from css_variable_importer.extraction.types import (
    RGBA,
    ExistingSnapshot,
    ExistingVariable,
    ParsedVariable,
    VariableKind,
)

__all__ = ["VariableTable"]


class VariableTable:
    """Insertion-ordered variables of one import run, with snapshot fallback."""

    def __init__(self, snapshot: ExistingSnapshot | None = None):
        self._vars: dict[str, ParsedVariable] = {}
        self.snapshot = snapshot or ExistingSnapshot()

    # ── mapping surface ──────────────────────────────────────────────────────
    def __contains__(self, name: object) -> bool:
        return name in self._vars

    def __iter__(self) -> Iterator[ParsedVariable]:
        return iter(self._vars.values())

    def __len__(self) -> int:
        return len(self._vars)

    def get(self, name: str) -> ParsedVariable | None:
        return self._vars.get(name)

    def put(self, var: ParsedVariable) -> None:
        """Does: Insert or replace; a redeclared name keeps its first position."""
        self._vars[var.name] = var

    def remove(self, name: str) -> ParsedVariable | None:
        return self._vars.pop(name, None)

    def aliases(self) -> list[ParsedVariable]:
        return [v for v in self._vars.values() if v.is_alias]

    # ── value queries ────────────────────────────────────────────────────────
    def concrete(self, name: str) -> ParsedVariable | ExistingVariable | None:
        """
        Does: Follow in-pass alias edges from `name` until a concrete variable
              is reached, then fall back to the snapshot for names not in-pass.
        Returns: The concrete record, or None (missing target or cycle).
        """
        seen: set[str] = set()
        current = name
        while current in self._vars:
            if current in seen:
                return None
            seen.add(current)
            var = self._vars[current]
            if var.fallback:
                # placeholder base of a mode-only variable
                return None
            if not var.is_alias:
                return var
            current = str(var.value)
        return self.snapshot.get(current)

    def color(self, name: str) -> RGBA | None:
        hit = self.concrete(name)
        if hit is None or hit.kind is not VariableKind.COLOR:
            return None
        return hit.value  # type: ignore[return-value]

    def number(self, name: str) -> float | None:
        hit = self.concrete(name)
        if hit is None or hit.kind is not VariableKind.NUMBER:
            return None
        return float(hit.value)  # type: ignore[arg-type]
