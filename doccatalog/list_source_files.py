"""Logic for enumerating the TypeScript sources to scan."""

import logging
from collections.abc import Iterable
from pathlib import Path

logger = logging.getLogger(__name__)


def list_source_files(
    root: Path,
    dirs: Iterable[str],
    extensions: Iterable[str],
    ignored: Iterable[str] = (),
) -> list[Path]:
    """Recursively list matching files under each of ``dirs`` (relative to root).

    Files are returned sorted within each directory. Missing directories are
    logged and skipped.
    """
    exts = tuple(extensions)
    skip = set(ignored)
    files: list[Path] = []
    for rel in dirs:
        directory = root / rel
        if not directory.is_dir():
            logger.warning("Source directory not found: %s", directory)
            continue
        try:
            found = sorted(
                p
                for p in directory.rglob("*")
                if p.is_file() and p.name.endswith(exts) and p.name not in skip
            )
        except OSError:
            logger.exception("Error reading directory %s", directory)
            continue
        files.extend(found)
    return files
