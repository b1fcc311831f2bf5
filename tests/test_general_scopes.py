from __future__ import annotations

import json
import logging

import pytest

from css_variable_importer.extraction.general import scopes as S
from css_variable_importer.extraction.general.utils import (
    ConfigTypeError,
    clear_config_cache,
    temp_data_dir,
)
from css_variable_importer.extraction.types import VariableKind

"""
Tests: general/scopes.py

Goals:
- Name → scope inference through exact identifiers and the shipped keyword table
- Type filtering (a color never gets a numeric scope and vice versa)
- ALL_SCOPES / ALL_FILLS collapsing
- Per-name and per-group overrides, still type-filtered
"""

COLOR = VariableKind.COLOR
NUMBER = VariableKind.NUMBER


@pytest.fixture(autouse=True)
def _fresh_cache():
    clear_config_cache()
    yield
    clear_config_cache()


# ──────────────────────────────────────────────────────────────────────────────
# Normalization
# ──────────────────────────────────────────────────────────────────────────────
@pytest.mark.parametrize(
    "raw,expect",
    [("--bg-1", "BG_1"), ("brand.primary", "BRAND_PRIMARY"), ("letter-spacing", "LETTER_SPACING")],
)
def test_normalize_scope_token(raw, expect):
    assert S.normalize_scope_token(raw) == expect


# ──────────────────────────────────────────────────────────────────────────────
# Inference with the shipped keyword table
# ──────────────────────────────────────────────────────────────────────────────
@pytest.mark.parametrize(
    "name,kind,expect",
    [
        ("radius-md", NUMBER, ("CORNER_RADIUS",)),
        ("space-4", NUMBER, ("GAP",)),
        ("letter-spacing-tight", NUMBER, ("LETTER_SPACING",)),
        ("shadow-blur", NUMBER, ("EFFECT_FLOAT",)),
        ("text-size-lg", NUMBER, ("FONT_SIZE",)),
        ("bg-primary", COLOR, ("ALL_FILLS",)),
        ("text-muted", COLOR, ("TEXT_FILL",)),
        ("border-default", COLOR, ("STROKE_COLOR",)),
        ("shadow-color", COLOR, ("EFFECT_COLOR",)),
        ("all-scopes-accent", COLOR, ("ALL_SCOPES",)),
    ],
)
def test_infer_scopes_from_names(name, kind, expect):
    assert S.infer_scopes(name, kind) == expect


def test_type_filter_drops_numeric_scopes_from_colors():
    assert S.infer_scopes("radius-md", COLOR) == ()
    assert S.infer_scopes("text-muted", NUMBER) == ()


def test_all_fills_absorbs_individual_fills():
    assert S.infer_scopes("surface-text", COLOR) == ("ALL_FILLS",)


def test_border_width_gets_stroke_float():
    assert "STROKE_FLOAT" in S.infer_scopes("border-width", NUMBER)


def test_unmatched_name_gets_no_scopes():
    assert S.infer_scopes("brand-500", COLOR) == ()


def test_custom_keyword_mapping():
    keywords = {"ALL_FILLS": ("TINT",)}
    assert S.infer_scopes("chip-tint", COLOR, keywords) == ("ALL_FILLS",)
    # keywords only match whole `_` runs
    assert S.infer_scopes("tinted", COLOR, keywords) == ()


def test_filter_scopes_orders_by_vocabulary():
    got = S.filter_scopes({"STROKE_COLOR", "TEXT_FILL", "FONT_SIZE"}, COLOR)
    assert got == ("TEXT_FILL", "STROKE_COLOR")


# ──────────────────────────────────────────────────────────────────────────────
# Overrides
# ──────────────────────────────────────────────────────────────────────────────
def test_name_override_replaces_inference():
    assert S.resolve_scopes("bg-primary", COLOR, {"bg-primary": ["frame_fill"]}) == ("FRAME_FILL",)


def test_name_override_by_hierarchical_key():
    assert S.resolve_scopes("brand-500", COLOR, {"brand/500": ["TEXT_FILL"]}) == ("TEXT_FILL",)


def test_group_override_and_precedence():
    groups = {"space": ["WIDTH_HEIGHT"]}
    assert S.resolve_scopes("space-4", NUMBER, None, groups) == ("WIDTH_HEIGHT",)
    assert S.resolve_scopes("space-4", NUMBER, {"space-4": ["GAP"]}, groups) == ("GAP",)


def test_empty_override_falls_back_to_inference():
    assert S.resolve_scopes("radius-md", NUMBER, {"radius-md": []}) == ("CORNER_RADIUS",)


def test_illegal_override_scopes_are_dropped(caplog):
    with caplog.at_level(logging.WARNING, logger=S.__name__):
        got = S.resolve_scopes("space-4", NUMBER, None, {"space": ["GAP", "TEXT_FILL"]})
    assert got == ("GAP",)
    assert "TEXT_FILL" in caplog.text


# ──────────────────────────────────────────────────────────────────────────────
# Keyword table loading
# ──────────────────────────────────────────────────────────────────────────────
def test_scope_keywords_from_custom_data_dir(tmp_path, caplog):
    (tmp_path / "scope_keywords.json").write_text(
        json.dumps({"GAP": ["gutter", "air-space"], "NOT_A_SCOPE": ["x"]}), encoding="utf-8"
    )
    with temp_data_dir(tmp_path), caplog.at_level(logging.WARNING, logger=S.__name__):
        table = S.scope_keywords()
    assert table == {"GAP": ("GUTTER", "AIR_SPACE")}
    assert "NOT_A_SCOPE" in caplog.text


def test_scope_keywords_rejects_non_list(tmp_path):
    (tmp_path / "scope_keywords.json").write_text(json.dumps({"GAP": "gutter"}), encoding="utf-8")
    with temp_data_dir(tmp_path), pytest.raises(ConfigTypeError):
        S.scope_keywords()


def test_shipped_keyword_table_covers_vocabulary_only():
    table = S.scope_keywords()
    assert set(table) <= set(S.SCOPE_VOCABULARY)
    assert "RADIUS" in table["CORNER_RADIUS"]
