"""Concurrent reading of source files."""

import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from doccatalog.helpers.number import clamp

logger = logging.getLogger(__name__)

MAX_WORKERS = 32


def _read(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        logger.exception("Error reading %s", path)
        return ""


def read_sources(paths: list[Path], workers: int = 8) -> dict[Path, str]:
    """Read every path on a thread pool and return their texts.

    A file that cannot be read maps to an empty string.
    """
    if not paths:
        return {}
    max_workers = int(clamp(workers, 1, min(MAX_WORKERS, len(paths))))
    with ThreadPoolExecutor(max_workers=max_workers) as pool:
        texts = list(pool.map(_read, paths))
    return dict(zip(paths, texts, strict=True))
