# css_variable_importer/extraction/general/token/__init__.py
"""
token.
=====

Does: Provide stylesheet scanning (declarations, mode blocks) and
      depth-aware argument splitting.
Exports: Stylesheet, DeclarationStream, ModeBlock, mask_comments,
         split_top_level, function_call, var_reference
Used by: Value classifier, relative color evaluator, mode extractor.
"""

from __future__ import annotations

from .declarations import (
    DeclarationStream,
    ModeBlock,
    Stylesheet,
    mask_comments,
)
from .split import (
    function_call,
    split_top_level,
    var_reference,
)

__all__ = [
    # declarations
    "Stylesheet",
    "DeclarationStream",
    "ModeBlock",
    "mask_comments",
    # split
    "split_top_level",
    "function_call",
    "var_reference",
]
