# css_variable_importer/extraction/types.py
"""
types.py.

Does: Define the typed records that flow through the import engine:
      raw declarations, parsed variables, per-mode slots, the existing-variable
      snapshot and the finalized entries handed to a store adapter.
Returns: Dataclasses, the VariableKind enum and the VariableSource protocol.
Used by: Classifier, mode extractor, alias resolver, orchestrator, serializer.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum
from typing import Protocol, Union, runtime_checkable

__all__ = [
    "VariableKind",
    "RGBA",
    "Value",
    "Declaration",
    "ModeSlot",
    "ParsedVariable",
    "ModeAlias",
    "ExistingVariable",
    "ExistingSnapshot",
    "FinalizedEntry",
    "ImportOptions",
    "VariableSource",
]
__docformat__ = "google"


# ── Kinds & values ───────────────────────────────────────────────────────────
class VariableKind(str, Enum):
    """Resolved type of a variable (values mirror the host store's names)."""

    NUMBER = "FLOAT"
    COLOR = "COLOR"
    ALIAS = "ALIAS"


@dataclass(frozen=True)
class RGBA:
    """Normalized sRGB color, each channel a fraction in [0, 1]."""

    r: float
    g: float
    b: float
    a: float = 1.0

    def as_dict(self) -> dict[str, float]:
        return {"r": self.r, "g": self.g, "b": self.b, "a": self.a}


# float for NUMBER, RGBA for COLOR, target name for ALIAS
Value = Union[float, RGBA, str]


# ── Parse-time records ───────────────────────────────────────────────────────
@dataclass(frozen=True)
class Declaration:
    """One `--name: value;` statement (name without the leading dashes)."""

    name: str
    raw_value: str
    comment: str | None = None


@dataclass
class ModeSlot:
    """Value of a variable under one named mode."""

    kind: VariableKind
    value: Value
    alias_of: str | None = None


@dataclass
class ParsedVariable:
    """
    Canonical unit of output.

    `value` holds the target name while `kind` is ALIAS; once resolved, the
    kind and value are copied from the target and `alias_of` keeps its name.
    `fallback` marks a variable that was only declared inside mode blocks.
    """

    name: str
    kind: VariableKind
    value: Value
    modes: dict[str, ModeSlot] | None = None
    description: str | None = None
    alias_of: str | None = None
    fallback: bool = False

    @property
    def is_alias(self) -> bool:
        return self.kind is VariableKind.ALIAS

    def set_mode(self, mode: str, slot: ModeSlot) -> None:
        if self.modes is None:
            self.modes = {}
        self.modes[mode] = slot


@dataclass(frozen=True)
class ModeAlias:
    """A queued mode-slot alias: `owner` under `mode` points at `target`."""

    owner: str
    mode: str
    target: str

    @property
    def key(self) -> str:
        return f"{self.owner}@{self.mode}"


# ── Existing-variable snapshot ───────────────────────────────────────────────
@dataclass(frozen=True)
class ExistingVariable:
    """A variable already present in the store, aliases pre-resolved by the caller."""

    name: str
    kind: VariableKind
    value: float | RGBA
    syntax: str | None = None


class ExistingSnapshot:
    """
    Read-only name → ExistingVariable index.

    Keys: the flat name, its hierarchical form, and the declared external
    alias-syntax form (e.g. `var(--brand-color)`) when one is present.
    """

    def __init__(self, variables: dict[str, ExistingVariable] | None = None):
        self._by_key: dict[str, ExistingVariable] = dict(variables or {})

    @classmethod
    def from_variables(cls, variables: Iterable[ExistingVariable]) -> ExistingSnapshot:
        from css_variable_importer.extraction.general.naming import (
            to_flat_name,
            to_hierarchical_name,
        )

        index: dict[str, ExistingVariable] = {}
        for var in variables:
            if var.kind is VariableKind.ALIAS:
                # snapshot entries must already be flattened to concrete values
                continue
            flat = to_flat_name(var.name)
            index.setdefault(flat, var)
            index.setdefault(to_hierarchical_name(flat), var)
            if var.syntax:
                index.setdefault(var.syntax.strip(), var)
        return cls(index)

    def get(self, name: str) -> ExistingVariable | None:
        hit = self._by_key.get(name)
        if hit is None:
            hit = self._by_key.get(f"var(--{name})")
        return hit

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.get(name) is not None

    def __len__(self) -> int:
        return len({id(v) for v in self._by_key.values()})


# ── Output & configuration ───────────────────────────────────────────────────
@dataclass(frozen=True)
class FinalizedEntry:
    """One fully resolved variable, ready for a store adapter."""

    name: str
    hierarchical_name: str
    kind: VariableKind
    value: float | RGBA
    modes: dict[str, ModeSlot] | None = None
    description: str | None = None
    scopes: tuple[str, ...] = ()
    alias_of: str | None = None

    @property
    def code_syntax(self) -> str:
        """Reference text a stylesheet uses to read this variable back."""
        return f"var(--{self.name})"


@dataclass
class ImportOptions:
    """Per-call configuration of an import run."""

    collection_name: str = "CSS Variables"
    scope_overrides: dict[str, list[str]] = field(default_factory=dict)
    group_scope_overrides: dict[str, list[str]] = field(default_factory=dict)
    rem_base: float = 16.0


@runtime_checkable
class VariableSource(Protocol):
    """Store adapter surface consulted before resolution begins."""

    async def fetch_existing(self, collection_name: str) -> Iterable[ExistingVariable]: ...
