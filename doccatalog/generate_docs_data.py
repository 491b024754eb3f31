"""Generate the documentation catalog JSON for a TypeScript utility library.

Scans the library's ``src/core``, ``src/utils`` and ``src/constants`` modules for
exported declarations with JSDoc comments and writes a single ``DocsData``
artifact for the documentation site.
"""

import argparse
import logging
from pathlib import Path

from doccatalog.build_docs import run_build
from doccatalog.get_scanner import SCANNERS


def main(argv: list[str] | None = None) -> int:
    """Run the catalog generator."""
    ap = argparse.ArgumentParser(
        description="Generate the documentation catalog JSON (docs-data.json).",
    )
    ap.add_argument(
        "root",
        nargs="?",
        type=Path,
        default=Path(),
        help="Library root containing src/ and package.json (default: .)",
    )
    ap.add_argument(
        "--output",
        type=Path,
        help="Artifact path (default: <root>/docs/src/data/docs-data.json)",
    )
    ap.add_argument(
        "--config",
        help="Path to a YAML configuration file (default: <root>/doccatalog.yml)",
    )
    ap.add_argument(
        "--scanner",
        choices=sorted(SCANNERS),
        help="Declaration scanner to use (default: lexer)",
    )
    ap.add_argument(
        "--verbose",
        action="store_true",
        help="Log debug output",
    )
    args = ap.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return run_build(args)


if __name__ == "__main__":
    raise SystemExit(main())
