"""Logic for computing the key a catalog build is cached under."""

import hashlib
import json
from pathlib import Path
from typing import Any


def compute_config_hash(config: dict[str, Any], root: Path | None = None) -> str:
    """Compute a stable hash of the configuration and the project root.

    Uses canonical JSON serialization (sorted keys). The resolved root is part
    of the payload, so the same settings applied to two projects never share a
    cached catalog.
    """
    payload = {
        "config": config,
        "root": str(root.resolve()) if root is not None else None,
    }
    config_json = json.dumps(payload, sort_keys=True, ensure_ascii=True, default=str)
    return hashlib.sha256(config_json.encode("utf-8")).hexdigest()
