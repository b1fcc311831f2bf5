# src/css_variable_importer/demo.py
import argparse
import json
import logging
import sys
from pathlib import Path


def main():
    """CLI demo: import a stylesheet's custom properties and print the resolved variables."""
    from .extraction.general.utils import enable_topics
    from .extraction.orchestrator import import_stylesheet
    from .extraction.serialize import entries_to_dicts
    from .extraction.types import ImportOptions

    parser = argparse.ArgumentParser(
        prog="css-vars-demo",
        description="Parse CSS custom properties into typed, alias-resolved design variables.",
    )
    parser.add_argument(
        "file",
        nargs="?",
        help="Stylesheet to import (reads stdin when omitted)",
    )
    parser.add_argument("--debug", action="store_true", help="Verbose debug logs")
    parser.add_argument(
        "--collection",
        default="CSS Variables",
        help="Target collection name",
    )
    parser.add_argument(
        "--rem-base",
        type=float,
        default=16.0,
        dest="rem_base",
        help="Pixels per rem for unit literals",
    )

    args = parser.parse_args()
    if args.debug:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
        enable_topics("all")

    try:
        css = Path(args.file).read_text(encoding="utf-8") if args.file else sys.stdin.read()
        result = import_stylesheet(
            css, ImportOptions(collection_name=args.collection, rem_base=args.rem_base)
        )
        print(f"\n🎨 {result.collection_name}:\n")
        print(json.dumps(entries_to_dicts(result.entries), indent=2, ensure_ascii=False))
        print(json.dumps(result.summary(), indent=2))
        if result.unresolved:
            print(f"Unresolved: {', '.join(result.unresolved)}", file=sys.stderr)
    except Exception as e:
        print(f"❌ Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
