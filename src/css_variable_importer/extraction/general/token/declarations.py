# css_variable_importer/extraction/general/token/declarations.py
# ──────────────────────────────────────────────────────────────
# Declaration scanning for custom-property stylesheets
# ──────────────────────────────────────────────────────────────
"""
declarations.

Does: Scan stylesheet text for `--name: value;` declarations and for flat
      mode blocks (`[data-theme="dark"] { ... }`), keeping trailing same-line
      comments so they can become descriptions.
Returns: Stylesheet, DeclarationStream, ModeBlock, mask_comments().
Used by: Value classifier and mode variant extractor (via the orchestrator).

Block comments are blanked out in a "masked" copy of the text before any
regex runs, so offsets in the masked copy are offsets in the source.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterator
from dataclasses import dataclass

from css_variable_importer.extraction.types import Declaration

__all__ = [
    "Stylesheet",
    "DeclarationStream",
    "ModeBlock",
    "mask_comments",
]

logger = logging.getLogger(__name__)

_COMMENT_RE = re.compile(r"/\*.*?\*/", re.DOTALL)
_DECLARATION_RE = re.compile(
    r"(?<![\w-])--(?P<name>[A-Za-z0-9_-]+)\s*:\s*(?P<value>[^;{}]+?)\s*;"
)
_TRAILING_COMMENT_RE = re.compile(r"[ \t]*/\*(?P<comment>.*?)\*/", re.DOTALL)
_BLOCK_RE = re.compile(r"(?P<selector>[^{};]*)\{(?P<body>[^{}]*)\}")
_MODE_ATTR_RE = re.compile(
    r"\[\s*data-[\w-]+\s*=\s*(?P<quote>[\"']?)(?P<mode>[\w-]+)(?P=quote)\s*\]"
)


def mask_comments(text: str) -> str:
    """
    Does: Replace every block comment with spaces (newlines kept).
    Returns: A string of the same length as `text`.
    """
    return _COMMENT_RE.sub(lambda m: re.sub(r"[^\n]", " ", m.group(0)), text)


def _trailing_comment(source: str, pos: int) -> str | None:
    m = _TRAILING_COMMENT_RE.match(source, pos)
    if not m:
        return None
    comment = m.group("comment").strip()
    return comment or None


class DeclarationStream:
    """
    Lazy, restartable sequence of Declaration records over one span of text.

    Every iteration rescans the span; spans listed in `skip` (absolute
    offsets) are excluded.
    """

    def __init__(
        self,
        source: str,
        masked: str,
        start: int = 0,
        end: int | None = None,
        skip: tuple[tuple[int, int], ...] = (),
    ):
        self._source = source
        self._masked = masked
        self._start = start
        self._end = len(masked) if end is None else end
        self._skip = skip

    def __iter__(self) -> Iterator[Declaration]:
        for m in _DECLARATION_RE.finditer(self._masked, self._start, self._end):
            if any(lo <= m.start() < hi for lo, hi in self._skip):
                continue
            yield Declaration(
                name=m.group("name"),
                raw_value=m.group("value").strip(),
                comment=_trailing_comment(self._source, m.end()),
            )


@dataclass(frozen=True)
class ModeBlock:
    """Declarations found under one `[data-*="<mode>"]` selector."""

    mode: str
    selector: str
    declarations: DeclarationStream


@dataclass(frozen=True)
class _Block:
    selector: str
    start: int
    end: int
    body_start: int
    body_end: int
    mode: str | None
    malformed: bool


class Stylesheet:
    """
    Raw stylesheet text split into top-level declarations and mode blocks.

    Top-level: bare declarations and declarations inside non-mode blocks such
    as `:root { ... }`. Mode blocks: flat blocks whose selector carries a data
    attribute naming the mode. Blocks with a `[data-` selector that does not
    yield a mode name are ignored entirely.
    """

    def __init__(self, text: str):
        if not isinstance(text, str):
            raise TypeError(f"stylesheet text must be str, got {type(text).__name__}")
        self.text = text
        self.masked = mask_comments(text)
        self._blocks = tuple(self._scan_blocks())

    def _scan_blocks(self) -> Iterator[_Block]:
        for m in _BLOCK_RE.finditer(self.masked):
            selector = " ".join(m.group("selector").split())
            attr = _MODE_ATTR_RE.search(selector)
            malformed = attr is None and "[data-" in selector.replace(" ", "")
            if malformed:
                logger.debug("Ignoring malformed mode block selector %r", selector)
            yield _Block(
                selector=selector,
                start=m.start("selector"),
                end=m.end(),
                body_start=m.start("body"),
                body_end=m.end("body"),
                mode=attr.group("mode") if attr else None,
                malformed=malformed,
            )

    def declarations(self) -> DeclarationStream:
        """Does: Return the top-level declarations (mode and malformed blocks excluded)."""
        skip = tuple(
            (b.start, b.end) for b in self._blocks if b.mode is not None or b.malformed
        )
        return DeclarationStream(self.text, self.masked, skip=skip)

    def mode_blocks(self) -> Iterator[ModeBlock]:
        """Does: Yield one ModeBlock per well-formed mode selector, in source order."""
        for b in self._blocks:
            if b.mode is None:
                continue
            yield ModeBlock(
                mode=b.mode,
                selector=b.selector,
                declarations=DeclarationStream(
                    self.text, self.masked, start=b.body_start, end=b.body_end
                ),
            )
