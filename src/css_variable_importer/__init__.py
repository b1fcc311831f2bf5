"""
css_variable_importer
=====================

Does: Root package initializer for the CSS custom-property importer.
Returns: Re-exports the import entry points and the records they produce.
Used by: Store adapters, the CLI demo, tests.
"""

from css_variable_importer.extraction.orchestrator import (
    ImportResult,
    import_stylesheet,
    import_stylesheet_async,
)
from css_variable_importer.extraction.types import (
    RGBA,
    ExistingSnapshot,
    ExistingVariable,
    FinalizedEntry,
    ImportOptions,
    VariableKind,
)

__all__: list[str] = [
    "ImportResult",
    "import_stylesheet",
    "import_stylesheet_async",
    "RGBA",
    "ExistingSnapshot",
    "ExistingVariable",
    "FinalizedEntry",
    "ImportOptions",
    "VariableKind",
]
__docformat__ = "google"
