"""Logic for deriving a record's category from its source path."""

from pathlib import PurePosixPath


def category_of(source_file: str) -> str:
    """Return the category for a root-relative POSIX source path.

    Files under ``core/`` are grouped by their file stem, files under
    ``utils/`` share the ``utils`` category, and everything else is ``other``.
    """
    path = PurePosixPath(source_file.replace("\\", "/"))
    parts = path.parts[:-1]
    if "core" in parts:
        return path.stem
    if "utils" in parts:
        return "utils"
    return "other"
