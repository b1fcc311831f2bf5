from __future__ import annotations

import logging

import pytest

from css_variable_importer.extraction.types import (
    RGBA,
    ExistingSnapshot,
    ExistingVariable,
    ModeSlot,
    ParsedVariable,
    VariableKind,
)
from css_variable_importer.extraction.variables import (
    VariableTable,
    collect_mode_aliases,
    lookup_mode_target,
    lookup_target,
    resolve_aliases,
    resolve_mode_aliases,
)

ALIAS = VariableKind.ALIAS
COLOR = VariableKind.COLOR
NUMBER = VariableKind.NUMBER

RED = RGBA(1.0, 0.0, 0.0, 1.0)
GREEN = RGBA(0.0, 1.0, 0.0, 1.0)


def _table(*vars_, snapshot=None):
    t = VariableTable(snapshot)
    for v in vars_:
        t.put(v)
    return t


def _alias(name, target):
    return ParsedVariable(name, ALIAS, target)


# ──────────────────────────────────────────────────────────────────────────────
# Base aliases
# ──────────────────────────────────────────────────────────────────────────────
@pytest.mark.parametrize(
    "order",
    [("a", "b", "c"), ("c", "b", "a"), ("b", "a", "c")],
)
def test_chain_resolves_regardless_of_order(order):
    defs = {
        "a": _alias("a", "b"),
        "b": _alias("b", "c"),
        "c": ParsedVariable("c", COLOR, RED),
    }
    table = _table(*(defs[n] for n in order))
    report = resolve_aliases(table)

    assert report.complete
    assert sorted(report.resolved) == ["a", "b"]
    a = table.get("a")
    assert a.kind is COLOR and a.value == RED
    # alias_of keeps the immediate target, not the chain's end
    assert a.alias_of == "b"
    assert table.get("b").alias_of == "c"


def test_chain_declared_backwards_needs_two_rounds():
    table = _table(_alias("a", "b"), _alias("b", "c"), ParsedVariable("c", NUMBER, 4.0))
    report = resolve_aliases(table)
    assert report.rounds == 2
    assert report.resolved == ["b", "a"]


def test_cycle_terminates_and_stays_unresolved(caplog):
    table = _table(_alias("a", "b"), _alias("b", "a"), ParsedVariable("c", NUMBER, 1.0))
    with caplog.at_level(logging.INFO):
        report = resolve_aliases(table)
    assert report.rounds == 1
    assert not report.complete
    assert report.unresolved == ["a", "b"]
    assert table.get("a").is_alias and table.get("b").is_alias
    assert "Unresolved aliases" in caplog.text


def test_missing_target_stays_unresolved():
    table = _table(_alias("ghost", "nowhere"))
    report = resolve_aliases(table)
    assert report.unresolved == ["ghost"]


def test_no_aliases_is_a_noop():
    report = resolve_aliases(_table(ParsedVariable("c", COLOR, RED)))
    assert report.rounds == 0 and report.complete


# ──────────────────────────────────────────────────────────────────────────────
# Snapshot fallback
# ──────────────────────────────────────────────────────────────────────────────
def test_snapshot_targets_by_flat_hierarchical_and_syntax():
    snapshot = ExistingSnapshot.from_variables(
        [
            ExistingVariable("brand/primary", COLOR, RED),
            ExistingVariable("Accent Blue", COLOR, GREEN, syntax="var(--accent-blue)"),
            ExistingVariable("stale", ALIAS, RED),
        ]
    )
    assert len(snapshot) == 2
    assert "brand-primary" in snapshot and "brand/primary" in snapshot
    assert "stale" not in snapshot

    table = _table(_alias("cta", "brand-primary"), _alias("link", "accent-blue"), snapshot=snapshot)
    report = resolve_aliases(table)
    assert report.complete
    assert table.get("cta").value == RED
    assert table.get("link").value == GREEN


def test_in_pass_definition_shadows_snapshot():
    snapshot = ExistingSnapshot.from_variables([ExistingVariable("brand-primary", COLOR, RED)])
    table = _table(
        ParsedVariable("brand-primary", COLOR, GREEN),
        _alias("cta", "brand-primary"),
        snapshot=snapshot,
    )
    resolve_aliases(table)
    assert table.get("cta").value == GREEN


def test_lookup_target_refuses_unresolved_alias():
    table = _table(_alias("a", "b"), ParsedVariable("b", COLOR, RED))
    assert lookup_target(table, "a") is None
    assert lookup_target(table, "b").value == RED
    assert lookup_target(table, "nowhere") is None


def test_table_value_queries_follow_aliases_and_check_kind():
    table = _table(_alias("a", "b"), ParsedVariable("b", COLOR, RED), _alias("x", "y"), _alias("y", "x"))
    assert table.color("a") == RED
    assert table.number("a") is None
    assert table.color("x") is None


# ──────────────────────────────────────────────────────────────────────────────
# Mode-slot aliases
# ──────────────────────────────────────────────────────────────────────────────
def test_mode_alias_written_into_its_own_slot():
    bg = ParsedVariable("bg", COLOR, RED, modes={"dark": ModeSlot(ALIAS, "ink")})
    table = _table(bg, ParsedVariable("ink", COLOR, GREEN))

    queue = collect_mode_aliases(table)
    assert [q.key for q in queue] == ["bg@dark"]

    report = resolve_mode_aliases(table, queue)
    assert report.complete
    slot = table.get("bg").modes["dark"]
    assert slot.kind is COLOR and slot.value == GREEN and slot.alias_of == "ink"
    # base slot untouched
    assert table.get("bg").value == RED


def test_unresolved_mode_alias_removes_slot():
    fg = ParsedVariable(
        "fg",
        COLOR,
        RED,
        modes={"dark": ModeSlot(ALIAS, "nowhere"), "light": ModeSlot(COLOR, RED)},
    )
    lonely = ParsedVariable("lonely", COLOR, RED, modes={"dark": ModeSlot(ALIAS, "nowhere")})
    table = _table(fg, lonely)

    report = resolve_mode_aliases(table, collect_mode_aliases(table))
    assert report.unresolved == ["fg@dark", "lonely@dark"]
    assert set(table.get("fg").modes) == {"light"}
    assert table.get("lonely").modes is None


def test_mode_alias_reads_the_target_slot_of_the_same_mode():
    surface = ParsedVariable(
        "surface", COLOR, GREEN, modes={"light": ModeSlot(COLOR, GREEN), "dark": ModeSlot(COLOR, RED)}
    )
    card = ParsedVariable("card", COLOR, GREEN, modes={"dark": ModeSlot(ALIAS, "surface")})
    table = _table(surface, card)

    resolve_mode_aliases(table, collect_mode_aliases(table))
    slot = table.get("card").modes["dark"]
    assert slot.value == RED and slot.alias_of == "surface"


def test_mode_alias_between_mode_only_variables():
    glow = ParsedVariable("glow", COLOR, RGBA(0.0, 0.0, 0.0, 1.0), fallback=True)
    glow.set_mode("dark", ModeSlot(COLOR, RED))
    halo = ParsedVariable("halo", COLOR, RGBA(0.0, 0.0, 0.0, 1.0), fallback=True)
    halo.set_mode("dark", ModeSlot(ALIAS, "glow"))
    table = _table(glow, halo)

    report = resolve_mode_aliases(table, collect_mode_aliases(table))
    assert report.complete
    assert table.get("halo").modes["dark"].value == RED


def test_lookup_mode_target():
    pending = ParsedVariable("pending", COLOR, RED, modes={"dark": ModeSlot(ALIAS, "x")})
    placeholder = ParsedVariable("placeholder", COLOR, RED, fallback=True)
    placeholder.set_mode("dark", ModeSlot(COLOR, GREEN))
    table = _table(pending, placeholder, _alias("a", "pending"))

    assert lookup_mode_target(table, "pending", "dark") is None
    assert lookup_mode_target(table, "pending", "light").value == RED
    assert lookup_mode_target(table, "placeholder", "dark").value == GREEN
    # the zero base of a mode-only variable is never copied
    assert lookup_mode_target(table, "placeholder", "light") is None
    assert lookup_mode_target(table, "a", "dark") is None


def test_base_alias_waits_for_mode_only_target(caplog):
    placeholder = ParsedVariable("gap", COLOR, RGBA(0.0, 0.0, 0.0, 1.0), fallback=True)
    placeholder.set_mode("dark", ModeSlot(NUMBER, 8.0))
    table = _table(_alias("pad", "gap"), placeholder)

    assert lookup_target(table, "gap") is None
    with caplog.at_level(logging.INFO):
        report = resolve_aliases(table, final=False)
    assert report.unresolved == ["pad"]
    assert "Unresolved aliases" not in caplog.text
