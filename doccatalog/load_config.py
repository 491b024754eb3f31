"""Logic for loading and merging configuration files."""

import copy
from pathlib import Path
from typing import Any

import yaml

from doccatalog.deep_merge import deep_merge

DEFAULT_CONFIG_NAME = "doccatalog.yml"

DEFAULT_CONFIG: dict[str, Any] = {
    "sources": {
        "function_dirs": ["src/core", "src/utils"],
        "constant_dirs": ["src/constants"],
        "extensions": [".ts"],
        "ignored_files": ["index.ts", "index.js"],
        "manifest": "package.json",
    },
    "parsing": {
        "scanner": "lexer",
        "max_blank_lines": 1,
        "default_since": "",
        "preserve_since": True,
        "preview_length": 50,
    },
    "output": {
        "path": "docs/src/data/docs-data.json",
        "indent": 2,
    },
    "workers": 8,
}


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path:
        p = Path(path)
        if p.exists():
            user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            config = deep_merge(config, user_config)
    return config
