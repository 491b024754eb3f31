"""Logic for carrying ``since`` versions over from a previous artifact."""

import json
import logging
from pathlib import Path

from doccatalog.helpers.typecheck import is_plain_object

logger = logging.getLogger(__name__)

KINDS = {"functions": "function", "constants": "constant", "types": "type"}


def version_key(kind: str, category: str, name: str) -> str:
    """Key identifying one record across builds."""
    return f"{kind}:{category}:{name}"


def load_previous_versions(path: Path) -> dict[str, str]:
    """Map record keys to their non-empty ``since`` in the artifact at ``path``.

    A missing artifact gives an empty mapping. An unreadable one is logged and
    ignored.
    """
    if not path.exists():
        return {}
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError):
        logger.warning("Ignoring unreadable previous artifact %s", path, exc_info=True)
        return {}
    if not is_plain_object(raw):
        logger.warning("Ignoring previous artifact %s: not a JSON object", path)
        return {}

    versions: dict[str, str] = {}
    for section, kind in KINDS.items():
        entries = raw.get(section)
        if entries is None:
            continue
        if not isinstance(entries, list):
            logger.warning(
                "Ignoring %r in previous artifact %s: not a list", section, path
            )
            continue
        for entry in entries:
            if not is_plain_object(entry):
                continue
            since = entry.get("since")
            name = entry.get("name")
            if isinstance(since, str) and since and isinstance(name, str):
                key = version_key(kind, str(entry.get("category", "")), name)
                versions[key] = since
    logger.debug("Loaded %d previous versions from %s", len(versions), path)
    return versions
