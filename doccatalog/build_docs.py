"""Orchestration of a catalog build from parsed command-line arguments."""

import argparse
import logging
from pathlib import Path
from typing import Any

from doccatalog.compute_config_hash import compute_config_hash
from doccatalog.docs_cache import DocsCache
from doccatalog.extract_docs import Coverage, DocsExtractor
from doccatalog.helpers.array import group_by
from doccatalog.helpers.date import now
from doccatalog.load_config import DEFAULT_CONFIG_NAME, load_config
from doccatalog.models import DocsData
from doccatalog.previous_versions import load_previous_versions
from doccatalog.write_docs_data import write_docs_data

logger = logging.getLogger(__name__)


def _init_config(root: Path, args: argparse.Namespace) -> dict[str, Any]:
    """Load the configuration and apply command-line overrides."""
    config_path = args.config
    if config_path is None and (root / DEFAULT_CONFIG_NAME).exists():
        config_path = str(root / DEFAULT_CONFIG_NAME)
    config = load_config(config_path)
    if args.scanner:
        config["parsing"]["scanner"] = args.scanner
    return config


def run_build(args: argparse.Namespace, cache: DocsCache | None = None) -> int:
    """Execute the full extraction pipeline and write the artifact."""
    root = args.root.resolve()
    if not root.is_dir():
        msg = f"Project root not found: {root}"
        raise SystemExit(msg)

    config = _init_config(root, args)
    manifest = root / config["sources"]["manifest"]
    if not manifest.is_file():
        msg = f"Package manifest not found: {manifest}"
        raise SystemExit(msg)

    output = args.output or root / config["output"]["path"]
    previous = (
        load_previous_versions(output) if config["parsing"]["preserve_since"] else {}
    )
    extractor = DocsExtractor(root, config, previous_versions=previous)
    if cache is None:
        cache = DocsCache()
    build_key = compute_config_hash(config, root)
    logger.debug("Build key: %s", build_key)
    extracted: list[Coverage] = []

    def load() -> DocsData:
        data = extractor.extract()
        extracted.append(extractor.coverage)
        return data

    data = cache.get(build_key, loader=load)
    if not extracted:
        logger.info("Using cached catalog for %s", root)

    try:
        write_docs_data(data, output, config["output"].get("indent", 2))
    except OSError as e:
        msg = f"Could not write {output}: {e}"
        raise SystemExit(msg) from e

    _print_summary(data, extracted[0] if extracted else None, output)
    return 0


def _print_summary(data: DocsData, coverage: Coverage | None, output: Path) -> None:
    print(f"Generated on {now('YYYY-MM-DD HH:mm')}")
    print(f"Functions: {len(data.functions)}")
    for category, items in group_by(data.functions, lambda f: f.category).items():
        print(f"  {category}: {len(items)}")
    print(f"Constants: {len(data.constants)}")
    print(f"Types: {len(data.types)}")
    if coverage is not None and coverage.total:
        print(
            f"Documented: {coverage.documented}/{coverage.total} "
            f"({coverage.percent}%)"
        )
    print(f"Wrote catalog to: {output}")
