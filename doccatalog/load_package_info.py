"""Logic for loading package metadata from a ``package.json`` manifest."""

import json
import logging
import re
from pathlib import Path
from typing import Any

from doccatalog.helpers.array import uniq
from doccatalog.helpers.object import get
from doccatalog.helpers.typecheck import is_plain_object, is_string
from doccatalog.models import PackageAuthor, PackageInfo, PackageRepository

logger = logging.getLogger(__name__)

# npm's "Name <email> (url)" shorthand; email and url are optional.
AUTHOR_RE = re.compile(r"^\s*([^<(]*?)\s*(?:<([^>]*)>)?\s*(?:\(([^)]*)\))?\s*$")


def _text(value: Any) -> str:
    return value.strip() if is_string(value) else ""


def parse_author(raw: Any) -> PackageAuthor:
    """Normalize an npm author string or object."""
    if is_string(raw):
        m = AUTHOR_RE.match(raw)
        if not m:
            return PackageAuthor(name=raw.strip())
        name, email, url = m.groups()
        return PackageAuthor(name=name or "", email=email or "", url=url or "")
    if is_plain_object(raw):
        return PackageAuthor(
            name=_text(raw.get("name")),
            email=_text(raw.get("email")),
            url=_text(raw.get("url")),
        )
    return PackageAuthor()


def parse_repository(raw: Any) -> PackageRepository:
    """Normalize a repository string or ``{type, url}`` object."""
    if is_string(raw):
        return PackageRepository(type="git", url=raw.strip())
    if is_plain_object(raw):
        return PackageRepository(type=_text(raw.get("type")), url=_text(raw.get("url")))
    return PackageRepository()


def package_info_from_manifest(manifest: dict[str, Any]) -> PackageInfo:
    """Build ``PackageInfo`` from a parsed manifest object."""
    keywords = get(manifest, "keywords", [])
    if not isinstance(keywords, list):
        keywords = []
    return PackageInfo(
        name=_text(manifest.get("name")),
        version=_text(manifest.get("version")),
        description=_text(manifest.get("description")),
        author=parse_author(manifest.get("author")),
        repository=parse_repository(manifest.get("repository")),
        license=_text(manifest.get("license")),
        homepage=_text(manifest.get("homepage")),
        keywords=tuple(uniq(k.strip() for k in keywords if is_string(k) and k.strip())),
    )


def load_package_info(path: Path) -> PackageInfo:
    """Read a manifest, returning the empty default on any failure."""
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError):
        logger.exception("Error loading package manifest %s", path)
        return PackageInfo()
    if not is_plain_object(raw):
        logger.error("Package manifest %s is not a JSON object", path)
        return PackageInfo()
    return package_info_from_manifest(raw)
