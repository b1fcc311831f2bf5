# css_variable_importer/extraction/general/scopes.py
"""
scopes.

Does: Infer where a variable may be applied in the design tool from its name:
      exact scope identifiers first, then per-scope keyword lists loaded from
      `data/scope_keywords.json`, filtered by the type/scope table. Caller
      overrides (per name, then per group) replace inference entirely.
Returns: infer_scopes(), resolve_scopes(), filter_scopes(), normalize_scope_token().
Used by: Orchestrator when finalizing entries.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Mapping, Sequence

from css_variable_importer.extraction.general.naming import (
    group_of,
    to_flat_name,
    to_hierarchical_name,
)
from css_variable_importer.extraction.general.utils import ConfigTypeError, load_config
from css_variable_importer.extraction.types import VariableKind

__all__ = [
    "SCOPE_VOCABULARY",
    "TYPE_SCOPES",
    "normalize_scope_token",
    "scope_keywords",
    "filter_scopes",
    "infer_scopes",
    "resolve_scopes",
]

logger = logging.getLogger(__name__)

# ── Vocabulary & type table ──────────────────────────────────────────────────
SCOPE_VOCABULARY: tuple[str, ...] = (
    "ALL_SCOPES",
    "TEXT_CONTENT",
    "CORNER_RADIUS",
    "WIDTH_HEIGHT",
    "GAP",
    "ALL_FILLS",
    "FRAME_FILL",
    "SHAPE_FILL",
    "TEXT_FILL",
    "STROKE_COLOR",
    "STROKE_FLOAT",
    "EFFECT_FLOAT",
    "EFFECT_COLOR",
    "OPACITY",
    "FONT_FAMILY",
    "FONT_STYLE",
    "FONT_WEIGHT",
    "FONT_SIZE",
    "LINE_HEIGHT",
    "LETTER_SPACING",
    "PARAGRAPH_SPACING",
    "PARAGRAPH_INDENT",
)

TYPE_SCOPES: dict[VariableKind, frozenset[str]] = {
    VariableKind.COLOR: frozenset(
        {
            "ALL_SCOPES",
            "ALL_FILLS",
            "FRAME_FILL",
            "SHAPE_FILL",
            "TEXT_FILL",
            "STROKE_COLOR",
            "EFFECT_COLOR",
        }
    ),
    VariableKind.NUMBER: frozenset(
        {
            "ALL_SCOPES",
            "CORNER_RADIUS",
            "WIDTH_HEIGHT",
            "GAP",
            "STROKE_FLOAT",
            "EFFECT_FLOAT",
            "OPACITY",
            "FONT_WEIGHT",
            "FONT_SIZE",
            "LINE_HEIGHT",
            "LETTER_SPACING",
            "PARAGRAPH_SPACING",
            "PARAGRAPH_INDENT",
        }
    ),
}

# ALL_FILLS already covers these
_FILL_SCOPES = frozenset({"FRAME_FILL", "SHAPE_FILL", "TEXT_FILL"})
_ORDER = {scope: i for i, scope in enumerate(SCOPE_VOCABULARY)}
_NON_ALNUM_RE = re.compile(r"[^A-Z0-9]+")


def normalize_scope_token(name: str) -> str:
    """Does: Uppercase; collapse non-alphanumeric runs to `_` (`--bg-1` → `BG_1`)."""
    return _NON_ALNUM_RE.sub("_", name.upper()).strip("_")


def scope_keywords(file: str = "scope_keywords") -> dict[str, tuple[str, ...]]:
    """
    Does: Load per-scope keyword lists (cached by the config loader).
    Returns: scope → normalized keywords, vocabulary scopes only.
    """
    raw = load_config(file)
    table: dict[str, tuple[str, ...]] = {}
    for scope, words in raw.items():
        if scope not in _ORDER:
            logger.warning("Ignoring keywords for unknown scope %r", scope)
            continue
        if not isinstance(words, list) or not all(isinstance(w, str) for w in words):
            raise ConfigTypeError(f"{file}: keywords for {scope} must be a list of strings")
        table[scope] = tuple(normalize_scope_token(w) for w in words if w.strip())
    return table


def _ordered(scopes: Iterable[str]) -> tuple[str, ...]:
    return tuple(sorted(set(scopes), key=_ORDER.__getitem__))


def filter_scopes(scopes: Iterable[str], kind: VariableKind) -> tuple[str, ...]:
    """
    Does: Keep only scopes legal for `kind`; ALL_SCOPES stands alone and
          ALL_FILLS absorbs the individual fill scopes.
    Returns: Ordered tuple in vocabulary order.
    """
    allowed = TYPE_SCOPES.get(kind, frozenset())
    kept = {s for s in scopes if s in allowed}
    if "ALL_SCOPES" in kept:
        return ("ALL_SCOPES",)
    if "ALL_FILLS" in kept:
        kept -= _FILL_SCOPES
    return _ordered(kept)


def infer_scopes(
    name: str,
    kind: VariableKind,
    keywords: Mapping[str, Sequence[str]] | None = None,
) -> tuple[str, ...]:
    """
    Does: Infer scopes from the name: exact identifier containment, then the
          first matching keyword per remaining scope (keywords match whole
          `_`-delimited runs; text claimed by an exact hit is not reused).
    Returns: Type-filtered scopes in vocabulary order (may be empty).
    """
    token = normalize_scope_token(name)
    if keywords is None:
        keywords = scope_keywords()

    matched: set[str] = set()
    remainder = token
    for scope in SCOPE_VOCABULARY:
        if scope in token:
            matched.add(scope)
            remainder = remainder.replace(scope, "_")

    padded = f"_{remainder}_"
    for scope in SCOPE_VOCABULARY:
        if scope in matched:
            continue
        for kw in keywords.get(scope, ()):
            if f"_{kw}_" in padded:
                matched.add(scope)
                break

    return filter_scopes(matched, kind)


def _override_for(
    name: str,
    scope_overrides: Mapping[str, Sequence[str]],
    group_scope_overrides: Mapping[str, Sequence[str]],
) -> Sequence[str] | None:
    flat = to_flat_name(name)
    for key in (flat, to_hierarchical_name(flat)):
        scopes = scope_overrides.get(key)
        if scopes:
            return scopes
    group = group_of(flat)
    if group:
        for key in (group, to_flat_name(group)):
            scopes = group_scope_overrides.get(key)
            if scopes:
                return scopes
    return None


def resolve_scopes(
    name: str,
    kind: VariableKind,
    scope_overrides: Mapping[str, Sequence[str]] | None = None,
    group_scope_overrides: Mapping[str, Sequence[str]] | None = None,
    keywords: Mapping[str, Sequence[str]] | None = None,
) -> tuple[str, ...]:
    """
    Does: Use a non-empty per-name (else per-group) override when present,
          otherwise infer. Overrides are still type-filtered.
    Returns: Final ordered scope tuple.
    """
    override = _override_for(name, scope_overrides or {}, group_scope_overrides or {})
    if override is None:
        return infer_scopes(name, kind, keywords)

    requested = {s.strip().upper() for s in override}
    scopes = filter_scopes(requested, kind)
    rejected = requested - TYPE_SCOPES.get(kind, frozenset())
    if rejected:
        logger.warning(
            "Dropping scopes illegal for %s variable %r: %s",
            kind.value,
            name,
            ", ".join(sorted(rejected)),
        )
    return scopes
