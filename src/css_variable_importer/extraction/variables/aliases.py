# css_variable_importer/extraction/variables/aliases.py
"""
aliases.

Does: Resolve alias edges (`--a: var(--b)`) to concrete values with a bounded
      worklist: at most N rounds for N outstanding aliases, stopping early
      when a round resolves nothing (cycle or missing target).
Returns: resolve_aliases(), collect_mode_aliases(), resolve_mode_aliases(),
         each with a ResolutionReport.
Used by: Orchestrator, after classification and mode extraction.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TypeVar

from css_variable_importer.extraction.types import (
    ExistingVariable,
    ModeAlias,
    ModeSlot,
    ParsedVariable,
    VariableKind,
)
from css_variable_importer.extraction.variables.lookup import VariableTable

__all__ = [
    "ResolutionReport",
    "lookup_target",
    "lookup_mode_target",
    "resolve_aliases",
    "collect_mode_aliases",
    "resolve_mode_aliases",
]

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class ResolutionReport:
    """Outcome of one worklist run."""

    resolved: list[str] = field(default_factory=list)
    unresolved: list[str] = field(default_factory=list)
    rounds: int = 0

    @property
    def complete(self) -> bool:
        return not self.unresolved


def lookup_target(table: VariableTable, name: str) -> ParsedVariable | ExistingVariable | None:
    """
    Does: Look `name` up in-pass first, then in the snapshot.
    Returns: A concrete record, or None when the in-pass target is itself
             still an alias, an unsettled mode-only placeholder, or unknown.
    """
    var = table.get(name)
    if var is not None:
        return None if var.is_alias or var.fallback else var
    return table.snapshot.get(name)


def lookup_mode_target(
    table: VariableTable, name: str, mode: str
) -> ModeSlot | ParsedVariable | ExistingVariable | None:
    """
    Does: Look `name` up as seen under `mode`: its own slot for that mode when
          it has one, otherwise its base value (never a placeholder base).
    Returns: A concrete slot or record, or None while the target is not ready.
    """
    var = table.get(name)
    if var is None:
        return table.snapshot.get(name)
    slot = (var.modes or {}).get(mode)
    if slot is not None:
        return None if slot.kind is VariableKind.ALIAS else slot
    return None if var.is_alias or var.fallback else var


def _run_worklist(
    items: list[T],
    try_resolve: Callable[[T], bool],
    key: Callable[[T], str],
) -> ResolutionReport:
    report = ResolutionReport()
    outstanding = list(items)
    bound = len(outstanding)
    while outstanding and report.rounds < bound:
        report.rounds += 1
        waiting: list[T] = []
        for item in outstanding:
            if try_resolve(item):
                report.resolved.append(key(item))
            else:
                waiting.append(item)
        stalled = len(waiting) == len(outstanding)
        outstanding = waiting
        if stalled:
            break
    report.unresolved = [key(item) for item in outstanding]
    return report


# ── Base aliases ─────────────────────────────────────────────────────────────
def resolve_aliases(table: VariableTable, *, final: bool = True) -> ResolutionReport:
    """
    Does: Materialize every ALIAS variable as its target's kind and value,
          keeping the immediate target name in `alias_of`.
    Returns: ResolutionReport; unresolved names stay ALIAS in the table and
             are logged when `final` is set.
    """

    def _try(var: ParsedVariable) -> bool:
        target_name = str(var.value)
        target = lookup_target(table, target_name)
        if target is None:
            return False
        var.kind = target.kind
        var.value = target.value
        var.alias_of = target_name
        return True

    report = _run_worklist(table.aliases(), _try, key=lambda v: v.name)
    if final and report.unresolved:
        logger.info(
            "Unresolved aliases after %d round(s): %s",
            report.rounds,
            ", ".join(report.unresolved),
        )
    return report


# ── Mode-slot aliases ────────────────────────────────────────────────────────
def collect_mode_aliases(table: VariableTable) -> list[ModeAlias]:
    """Does: Queue every mode slot that still holds an alias, tagged by owner and mode."""
    queue: list[ModeAlias] = []
    for var in table:
        for mode, slot in (var.modes or {}).items():
            if slot.kind is VariableKind.ALIAS:
                queue.append(ModeAlias(var.name, mode, str(slot.value)))
    return queue


def resolve_mode_aliases(table: VariableTable, queue: list[ModeAlias]) -> ResolutionReport:
    """
    Does: Resolve queued mode-slot aliases with the same bounded worklist and
          write each target into its own mode slot. Unresolved slots are
          removed (a variable left without slots drops its `modes`).
    Returns: ResolutionReport keyed `name@mode`.
    """

    def _try(item: ModeAlias) -> bool:
        target = lookup_mode_target(table, item.target, item.mode)
        if target is None:
            return False
        owner = table.get(item.owner)
        if owner is not None:
            owner.set_mode(item.mode, ModeSlot(target.kind, target.value, alias_of=item.target))
        return True

    report = _run_worklist(queue, _try, key=lambda a: a.key)
    for item in queue:
        if item.key not in report.unresolved:
            continue
        owner = table.get(item.owner)
        if owner is None or not owner.modes:
            continue
        owner.modes.pop(item.mode, None)
        if not owner.modes:
            owner.modes = None
    if report.unresolved:
        logger.info("Unresolved mode aliases: %s", ", ".join(report.unresolved))
    return report
