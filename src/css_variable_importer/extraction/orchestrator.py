# orchestrator.py
from __future__ import annotations

"""
orchestrator.py
===============

Does: High-level orchestration of one stylesheet import: scan declarations,
      classify them, merge mode blocks, resolve aliases (base, mode slots, then
      aliases to mode-only variables), infer scopes and emit finalized entries
      in source order.
Returns:
  - import_stylesheet(css, options, snapshot) -> ImportResult
  - import_stylesheet_async(css, source, options) -> ImportResult
Used by: Store adapters, the CLI demo, tests.
"""

import logging
from dataclasses import dataclass, field

from css_variable_importer.extraction.color import DEFAULT_MODELS, ColorModelTable
from css_variable_importer.extraction.general.naming import to_hierarchical_name
from css_variable_importer.extraction.general.scopes import resolve_scopes, scope_keywords
from css_variable_importer.extraction.general.token import Stylesheet
from css_variable_importer.extraction.general.utils import debug
from css_variable_importer.extraction.types import (
    ExistingSnapshot,
    FinalizedEntry,
    ImportOptions,
    ModeSlot,
    ParsedVariable,
    VariableKind,
    VariableSource,
)
from css_variable_importer.extraction.variables import (
    VariableTable,
    classify_declaration,
    collect_mode_aliases,
    extract_mode_variants,
    resolve_aliases,
    resolve_mode_aliases,
    settle_fallbacks,
)

logger = logging.getLogger(__name__)

__all__ = [
    "ImportResult",
    "build_table",
    "finalize",
    "import_stylesheet",
    "import_stylesheet_async",
]


# =============================================================================
# Result
# =============================================================================


@dataclass
class ImportResult:
    """Finalized entries plus per-entry failure information."""

    collection_name: str
    entries: list[FinalizedEntry] = field(default_factory=list)
    unresolved: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)

    def find(self, name: str) -> FinalizedEntry | None:
        for entry in self.entries:
            if entry.name == name or entry.hierarchical_name == name:
                return entry
        return None

    def summary(self) -> dict[str, int]:
        """Counts for adapter-side messaging."""
        return {
            "entries": len(self.entries),
            "colors": sum(e.kind is VariableKind.COLOR for e in self.entries),
            "numbers": sum(e.kind is VariableKind.NUMBER for e in self.entries),
            "aliases": sum(e.alias_of is not None for e in self.entries),
            "with_modes": sum(bool(e.modes) for e in self.entries),
            "unresolved": len(self.unresolved),
            "skipped": len(self.skipped),
        }

    def plan(self, existing_names: set[str] | frozenset[str]) -> dict[str, list[str]]:
        """Partition entry names into `created` / `updated` against the store's names."""
        created: list[str] = []
        updated: list[str] = []
        for entry in self.entries:
            if entry.hierarchical_name in existing_names or entry.name in existing_names:
                updated.append(entry.name)
            else:
                created.append(entry.name)
        return {"created": created, "updated": updated}


# =============================================================================
# Pipeline stages
# =============================================================================


def build_table(
    stylesheet: Stylesheet,
    options: ImportOptions,
    snapshot: ExistingSnapshot | None = None,
    models: ColorModelTable = DEFAULT_MODELS,
) -> tuple[VariableTable, list[str]]:
    """
    Does: Classify top-level declarations (single forward pass), then merge
          mode blocks.
    Returns: (table, names of declarations no grammar understood).
    """
    table = VariableTable(snapshot)
    skipped: list[str] = []
    for decl in stylesheet.declarations():
        var = classify_declaration(decl, table, rem_base=options.rem_base, models=models)
        if var is None:
            skipped.append(decl.name)
            continue
        table.put(var)
    slots = extract_mode_variants(stylesheet, table, models, options.rem_base)
    debug(f"classified={len(table)} skipped={len(skipped)} mode_slots={slots}", "import")
    return table, [name for name in dict.fromkeys(skipped) if name not in table]


def _finalize_modes(var: ParsedVariable) -> dict[str, ModeSlot] | None:
    if not var.modes:
        return None
    kept: dict[str, ModeSlot] = {}
    for mode, slot in var.modes.items():
        if slot.kind is var.kind:
            kept[mode] = slot
        else:
            logger.warning(
                "Dropping %s slot of --%s: %s value for a %s variable",
                mode,
                var.name,
                slot.kind.value,
                var.kind.value,
            )
    return kept or None


def finalize(table: VariableTable, options: ImportOptions) -> list[FinalizedEntry]:
    """
    Does: Turn resolved variables into entries: unresolved aliases and
          leftover mode-only placeholders are excluded.
    Returns: Entries in source order.
    """
    keywords = scope_keywords()
    entries: list[FinalizedEntry] = []
    for var in table:
        if var.is_alias or var.fallback:
            continue
        modes = _finalize_modes(var)
        entries.append(
            FinalizedEntry(
                name=var.name,
                hierarchical_name=to_hierarchical_name(var.name),
                kind=var.kind,
                value=var.value,  # type: ignore[arg-type]
                modes=modes,
                description=var.description,
                scopes=resolve_scopes(
                    var.name,
                    var.kind,
                    options.scope_overrides,
                    options.group_scope_overrides,
                    keywords,
                ),
                alias_of=var.alias_of,
            )
        )
    return entries


# =============================================================================
# Entry points
# =============================================================================


def import_stylesheet(
    css: str,
    options: ImportOptions | None = None,
    snapshot: ExistingSnapshot | None = None,
    models: ColorModelTable = DEFAULT_MODELS,
) -> ImportResult:
    """
    Does: Run a full, stateless import of `css`.
    Returns: ImportResult; per-entry failures only show up as absent names
             (listed in `unresolved` / `skipped`), never as exceptions.
    """
    options = options or ImportOptions()
    stylesheet = Stylesheet(css)

    table, skipped = build_table(stylesheet, options, snapshot, models)
    # aliases to mode-only variables wait until those have a base value
    resolve_aliases(table, final=False)
    mode_report = resolve_mode_aliases(table, collect_mode_aliases(table))
    settle_fallbacks(table)
    base_report = resolve_aliases(table)
    entries = finalize(table, options)

    result = ImportResult(
        collection_name=options.collection_name,
        entries=entries,
        unresolved=base_report.unresolved + mode_report.unresolved,
        skipped=skipped,
    )
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("[import] %s → %s", options.collection_name, result.summary())
    debug(f"summary={result.summary()}", "import")
    return result


async def import_stylesheet_async(
    css: str,
    source: VariableSource,
    options: ImportOptions | None = None,
) -> ImportResult:
    """
    Does: Await the store adapter's existing variables for the target
          collection, then run import_stylesheet() against that snapshot.
    """
    options = options or ImportOptions()
    existing = await source.fetch_existing(options.collection_name)
    snapshot = ExistingSnapshot.from_variables(existing)
    debug(f"snapshot size={len(snapshot)}", "import")
    return import_stylesheet(css, options, snapshot)
