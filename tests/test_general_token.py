from __future__ import annotations

import pytest

from css_variable_importer.extraction.general.token import (
    Stylesheet,
    function_call,
    mask_comments,
    split_top_level,
    var_reference,
)

"""
Tests: general/token (declarations.py, split.py)

Goals:
- Declarations are read from masked text: commented-out declarations vanish,
  trailing same-line comments are kept on the record
- Mode blocks are separated from top-level declarations; malformed
  `[data-*]` blocks are ignored entirely
- The declaration stream can be iterated more than once
- Argument splitting respects parenthesis depth
"""


CSS = """
/* --ghost: red; */
--bare: 4px;
:root {
  --bg: #ffffff; /* Page background */
  --fg: #000000; /* - internal */
  --radius: 0.5rem;
}
[data-theme="dark"] {
  --bg: #000000;
  --fg: var(--white);
}
[data-density='compact'] { --gap: 2px; }
[data-theme] { --broken: red; }
"""


# ──────────────────────────────────────────────────────────────────────────────
# Comment masking
# ──────────────────────────────────────────────────────────────────────────────
def test_mask_comments_keeps_length_and_newlines():
    text = "a /* x\ny */ b"
    masked = mask_comments(text)
    assert len(masked) == len(text)
    assert masked.count("\n") == 1
    assert "x" not in masked and masked.startswith("a ") and masked.endswith(" b")


# ──────────────────────────────────────────────────────────────────────────────
# Top-level declarations
# ──────────────────────────────────────────────────────────────────────────────
def test_top_level_declarations_skip_comments_and_mode_blocks():
    names = [d.name for d in Stylesheet(CSS).declarations()]
    assert names == ["bare", "bg", "fg", "radius"]


def test_trailing_comment_is_attached():
    decls = {d.name: d for d in Stylesheet(CSS).declarations()}
    assert decls["bg"].raw_value == "#ffffff"
    assert decls["bg"].comment == "Page background"
    assert decls["fg"].comment == "- internal"
    assert decls["radius"].comment is None


def test_comment_on_next_line_is_not_trailing():
    decls = list(Stylesheet("--a: 1;\n/* about b */\n--b: 2;").declarations())
    assert [d.comment for d in decls] == [None, None]


def test_declaration_stream_is_restartable():
    stream = Stylesheet(CSS).declarations()
    first = list(stream)
    second = list(stream)
    assert first == second and len(first) == 4


def test_stylesheet_rejects_non_text():
    with pytest.raises(TypeError):
        Stylesheet(b"--a: 1;")  # type: ignore[arg-type]


# ──────────────────────────────────────────────────────────────────────────────
# Mode blocks
# ──────────────────────────────────────────────────────────────────────────────
def test_mode_blocks_in_source_order():
    blocks = list(Stylesheet(CSS).mode_blocks())
    assert [b.mode for b in blocks] == ["dark", "compact"]
    dark = blocks[0]
    assert [(d.name, d.raw_value) for d in dark.declarations] == [
        ("bg", "#000000"),
        ("fg", "var(--white)"),
    ]
    assert [d.name for d in blocks[1].declarations] == ["gap"]


def test_unquoted_mode_value():
    blocks = list(Stylesheet("[data-theme=dark] { --x: red; }").mode_blocks())
    assert [b.mode for b in blocks] == ["dark"]


def test_malformed_mode_block_is_ignored_everywhere():
    sheet = Stylesheet(CSS)
    assert "broken" not in {d.name for d in sheet.declarations()}
    for block in sheet.mode_blocks():
        assert "broken" not in {d.name for d in block.declarations}


# ──────────────────────────────────────────────────────────────────────────────
# Splitting helpers
# ──────────────────────────────────────────────────────────────────────────────
@pytest.mark.parametrize(
    "text,sep,expect",
    [
        ("a, light-dark(b, c), d", ",", ["a", "light-dark(b, c)", "d"]),
        ("var(--x), rgb(1, 2, 3)", ",", ["var(--x)", "rgb(1, 2, 3)"]),
        ("l  c calc(h + 10)", None, ["l", "c", "calc(h + 10)"]),
        ("0.5 0.1 120 / 50%", "/", ["0.5 0.1 120", "50%"]),
    ],
)
def test_split_top_level_respects_depth(text, sep, expect):
    assert split_top_level(text, sep) == expect


@pytest.mark.parametrize("text", ["a(b, c", "a), b("])
def test_split_top_level_unbalanced(text):
    assert split_top_level(text) is None


def test_function_call():
    assert function_call("Light-Dark(a, b)") == ("light-dark", "a, b")
    assert function_call("  oklch(from var(--a) l c h) ") == ("oklch", "from var(--a) l c h")
    assert function_call("rgb(1) extra") is None
    assert function_call("10px") is None


def test_var_reference():
    assert var_reference(" var( --brand-500 ) ") == "brand-500"
    assert var_reference("var(--a, red)") is None
    assert var_reference("calc(var(--a))") is None
