"""Data models for the documentation catalog.

Records are frozen dataclasses. ``docs_data_to_dict`` / ``docs_data_from_dict``
translate to and from the camelCase JSON shape consumed by the docs site.
"""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class DocParam:
    """A documented function parameter."""

    name: str
    type: str
    description: str
    optional: bool = False


@dataclass(frozen=True)
class DocReturn:
    """A documented return value."""

    type: str
    description: str


@dataclass(frozen=True)
class DocFunction:
    """An exported function with its doc comment."""

    name: str
    category: str
    description: str
    syntax: str
    params: tuple[DocParam, ...]
    returns: DocReturn
    example: str
    since: str
    source_file: str


@dataclass(frozen=True)
class DocConstant:
    """An exported constant."""

    name: str
    category: str
    description: str
    type: str  # object/array/string/number/boolean/regexp/expression
    value: str
    preview: str
    since: str
    source_file: str


@dataclass(frozen=True)
class DocTypeProperty:
    """A member of an exported interface."""

    name: str
    type: str
    description: str = ""
    optional: bool = False


@dataclass(frozen=True)
class DocType:
    """An exported interface or type alias."""

    name: str
    category: str
    kind: str  # interface/type
    description: str
    definition: str
    properties: tuple[DocTypeProperty, ...]
    since: str
    source_file: str


@dataclass(frozen=True)
class PackageAuthor:
    name: str = ""
    email: str = ""
    url: str = ""


@dataclass(frozen=True)
class PackageRepository:
    type: str = ""
    url: str = ""


@dataclass(frozen=True)
class PackageInfo:
    """Normalized package manifest metadata."""

    name: str = ""
    version: str = ""
    description: str = ""
    author: PackageAuthor = field(default_factory=PackageAuthor)
    repository: PackageRepository = field(default_factory=PackageRepository)
    license: str = ""
    homepage: str = ""
    keywords: tuple[str, ...] = ()


@dataclass(frozen=True)
class DocsData:
    """The full catalog snapshot written to the JSON artifact."""

    functions: tuple[DocFunction, ...] = ()
    constants: tuple[DocConstant, ...] = ()
    types: tuple[DocType, ...] = ()
    package_info: PackageInfo = field(default_factory=PackageInfo)


# -----------------------------
# Serialization
# -----------------------------


def _param_to_dict(p: DocParam) -> dict[str, Any]:
    return {
        "name": p.name,
        "type": p.type,
        "description": p.description,
        "optional": p.optional,
    }


def function_to_dict(f: DocFunction) -> dict[str, Any]:
    """Serialize a function record."""
    return {
        "name": f.name,
        "category": f.category,
        "description": f.description,
        "syntax": f.syntax,
        "params": [_param_to_dict(p) for p in f.params],
        "returns": {"type": f.returns.type, "description": f.returns.description},
        "example": f.example,
        "since": f.since,
        "sourceFile": f.source_file,
    }


def constant_to_dict(c: DocConstant) -> dict[str, Any]:
    """Serialize a constant record."""
    return {
        "name": c.name,
        "category": c.category,
        "description": c.description,
        "type": c.type,
        "value": c.value,
        "preview": c.preview,
        "since": c.since,
        "sourceFile": c.source_file,
    }


def type_to_dict(t: DocType) -> dict[str, Any]:
    """Serialize a type record."""
    return {
        "name": t.name,
        "category": t.category,
        "kind": t.kind,
        "description": t.description,
        "definition": t.definition,
        "properties": [
            {
                "name": p.name,
                "type": p.type,
                "description": p.description,
                "optional": p.optional,
            }
            for p in t.properties
        ],
        "since": t.since,
        "sourceFile": t.source_file,
    }


def package_info_to_dict(info: PackageInfo) -> dict[str, Any]:
    """Serialize package metadata."""
    return {
        "name": info.name,
        "version": info.version,
        "description": info.description,
        "author": {
            "name": info.author.name,
            "email": info.author.email,
            "url": info.author.url,
        },
        "repository": {"type": info.repository.type, "url": info.repository.url},
        "license": info.license,
        "homepage": info.homepage,
        "keywords": list(info.keywords),
    }


def docs_data_to_dict(data: DocsData) -> dict[str, Any]:
    """Serialize the whole catalog to the artifact's JSON shape."""
    return {
        "functions": [function_to_dict(f) for f in data.functions],
        "constants": [constant_to_dict(c) for c in data.constants],
        "types": [type_to_dict(t) for t in data.types],
        "packageInfo": package_info_to_dict(data.package_info),
    }


def docs_data_from_dict(raw: dict[str, Any]) -> DocsData:
    """Rebuild a catalog from its JSON shape (inverse of docs_data_to_dict)."""
    functions = tuple(
        DocFunction(
            name=f["name"],
            category=f["category"],
            description=f.get("description", ""),
            syntax=f.get("syntax", ""),
            params=tuple(
                DocParam(
                    name=p["name"],
                    type=p.get("type", "any"),
                    description=p.get("description", ""),
                    optional=bool(p.get("optional", False)),
                )
                for p in f.get("params") or []
            ),
            returns=DocReturn(
                type=(f.get("returns") or {}).get("type", "void"),
                description=(f.get("returns") or {}).get("description", ""),
            ),
            example=f.get("example", ""),
            since=f.get("since", ""),
            source_file=f.get("sourceFile", ""),
        )
        for f in raw.get("functions") or []
    )
    constants = tuple(
        DocConstant(
            name=c["name"],
            category=c["category"],
            description=c.get("description", ""),
            type=c.get("type", ""),
            value=c.get("value", ""),
            preview=c.get("preview", ""),
            since=c.get("since", ""),
            source_file=c.get("sourceFile", ""),
        )
        for c in raw.get("constants") or []
    )
    types = tuple(
        DocType(
            name=t["name"],
            category=t["category"],
            kind=t.get("kind", ""),
            description=t.get("description", ""),
            definition=t.get("definition", ""),
            properties=tuple(
                DocTypeProperty(
                    name=p["name"],
                    type=p.get("type", ""),
                    description=p.get("description", ""),
                    optional=bool(p.get("optional", False)),
                )
                for p in t.get("properties") or []
            ),
            since=t.get("since", ""),
            source_file=t.get("sourceFile", ""),
        )
        for t in raw.get("types") or []
    )
    pkg = raw.get("packageInfo") or {}
    author = pkg.get("author") or {}
    repository = pkg.get("repository") or {}
    package_info = PackageInfo(
        name=pkg.get("name", ""),
        version=pkg.get("version", ""),
        description=pkg.get("description", ""),
        author=PackageAuthor(
            name=author.get("name", ""),
            email=author.get("email", ""),
            url=author.get("url", ""),
        ),
        repository=PackageRepository(
            type=repository.get("type", ""), url=repository.get("url", "")
        ),
        license=pkg.get("license", ""),
        homepage=pkg.get("homepage", ""),
        keywords=tuple(pkg.get("keywords") or ()),
    )
    return DocsData(
        functions=functions,
        constants=constants,
        types=types,
        package_info=package_info,
    )
