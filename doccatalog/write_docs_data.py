"""Reading and writing the JSON catalog artifact."""

import json
from pathlib import Path

from doccatalog.models import DocsData, docs_data_from_dict, docs_data_to_dict


def write_docs_data(data: DocsData, path: Path, indent: int = 2) -> Path:
    """Write the catalog as UTF-8 JSON, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    text = json.dumps(docs_data_to_dict(data), indent=indent, ensure_ascii=False)
    path.write_text(text + "\n", encoding="utf-8")
    return path


def load_docs_data(path: Path) -> DocsData:
    """Load a catalog previously written by ``write_docs_data``."""
    return docs_data_from_dict(json.loads(path.read_text(encoding="utf-8")))
