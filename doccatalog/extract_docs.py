"""The documentation extraction pipeline.

``DocsExtractor`` lists the configured source directories, reads the files on a
thread pool, scans each one for exported declarations and turns the documented
ones into catalog records:

- functions and types come from the function directories (``src/core`` and
  ``src/utils`` by default),
- constants come from the constant directories (``src/constants``),
- package metadata comes from the manifest.

Declarations without a doc comment are left out but still counted for
coverage.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from doccatalog.build_records import build_constant, build_function, build_type
from doccatalog.category_of import category_of
from doccatalog.declaration import Declaration
from doccatalog.get_scanner import SourceScanner, get_scanner
from doccatalog.helpers.array import sort_by, uniq
from doccatalog.helpers.math import round_to
from doccatalog.helpers.string import purify
from doccatalog.jsdoc import ParsedDoc, parse_jsdoc
from doccatalog.list_source_files import list_source_files
from doccatalog.load_config import load_config
from doccatalog.load_package_info import load_package_info
from doccatalog.models import DocConstant, DocFunction, DocsData, DocType
from doccatalog.previous_versions import version_key
from doccatalog.read_sources import read_sources

logger = logging.getLogger(__name__)


@dataclass
class Coverage:
    """Counts of exported declarations with and without doc comments."""

    documented: int = 0
    undocumented: int = 0

    @property
    def total(self) -> int:
        return self.documented + self.undocumented

    @property
    def percent(self) -> float:
        if not self.total:
            return 100.0
        return round_to(100.0 * self.documented / self.total, 1)

    def add(self, documented: bool) -> None:
        if documented:
            self.documented += 1
        else:
            self.undocumented += 1


def first_documented(decls: list[Declaration]) -> list[Declaration]:
    """Collapse overloads: one declaration per name, the first documented one.

    Names whose declarations are all undocumented keep their first one.
    """
    chosen: dict[tuple[str, str], Declaration] = {}
    for decl in decls:
        key = (decl.kind, decl.name)
        current = chosen.get(key)
        if current is None or (not current.documented and decl.documented):
            chosen[key] = decl
    return list(chosen.values())


def _record_key(record: Any) -> tuple[str, str, str]:
    return (purify(record.category), purify(record.name), record.name)


class DocsExtractor:
    """Builds a ``DocsData`` snapshot for one project root."""

    def __init__(
        self,
        root: Path,
        config: dict[str, Any] | None = None,
        scanner: SourceScanner | None = None,
        previous_versions: dict[str, str] | None = None,
    ) -> None:
        """Initialize the extractor.

        ``scanner`` overrides the configured scanning strategy.
        ``previous_versions`` maps record keys to ``since`` values published
        by an earlier build.
        """
        self.root = Path(root)
        self.config = config if config is not None else load_config(None)
        parsing = self.config["parsing"]
        self.scanner = scanner or get_scanner(
            parsing["scanner"], parsing["max_blank_lines"]
        )
        self.previous_versions = previous_versions or {}
        self.coverage = Coverage()

    def extract(self) -> DocsData:
        """Run the pipeline and return the sorted catalog."""
        sources = self.config["sources"]
        extensions = sources["extensions"]
        function_files = list_source_files(
            self.root, sources["function_dirs"], extensions, sources["ignored_files"]
        )
        constant_files = list_source_files(
            self.root, sources["constant_dirs"], extensions
        )
        texts = read_sources(
            uniq(function_files + constant_files), self.config.get("workers", 8)
        )
        logger.info(
            "Scanning %d source files with the %s scanner",
            len(texts),
            self.scanner.name,
        )

        self.coverage = Coverage()
        functions: list[DocFunction] = []
        types: list[DocType] = []
        constants: list[DocConstant] = []
        for path in function_files:
            found_functions, found_types = self.extract_module(path, texts[path])
            functions.extend(found_functions)
            types.extend(found_types)
        for path in constant_files:
            constants.extend(self.extract_constants(path, texts[path]))

        package_info = load_package_info(self.root / sources["manifest"])
        return DocsData(
            functions=tuple(sort_by(functions, _record_key)),
            constants=tuple(sort_by(constants, _record_key)),
            types=tuple(sort_by(types, _record_key)),
            package_info=package_info,
        )

    def relative(self, path: Path) -> str:
        try:
            return path.relative_to(self.root).as_posix()
        except ValueError:
            return path.as_posix()

    def since(self, doc: ParsedDoc, kind: str, category: str, name: str) -> str:
        """Resolve ``since``: the tag, then the previous build, then the default."""
        if doc.since:
            return doc.since
        parsing = self.config["parsing"]
        if parsing.get("preserve_since", True):
            previous = self.previous_versions.get(version_key(kind, category, name))
            if previous:
                return previous
        return parsing.get("default_since", "")

    def extract_module(
        self, path: Path, text: str
    ) -> tuple[list[DocFunction], list[DocType]]:
        """Functions and types documented in one function-directory file."""
        source_file = self.relative(path)
        category = category_of(source_file)
        decls = [d for d in self.scanner.scan(text) if d.kind != "const"]

        functions: list[DocFunction] = []
        types: list[DocType] = []
        for decl in first_documented(decls):
            self.coverage.add(decl.documented)
            if not decl.documented:
                logger.debug("Skipping undocumented %s in %s", decl.name, source_file)
                continue
            doc = parse_jsdoc(decl.doc)
            if decl.kind == "function":
                since = self.since(doc, "function", category, decl.name)
                functions.append(
                    build_function(decl, doc, category, source_file, since)
                )
            else:
                since = self.since(doc, "type", category, decl.name)
                types.append(build_type(decl, doc, category, source_file, since))
        return functions, types

    def extract_constants(self, path: Path, text: str) -> list[DocConstant]:
        """Constants documented in one constant-directory file."""
        source_file = self.relative(path)
        preview_length = self.config["parsing"].get("preview_length", 50)
        constants: list[DocConstant] = []
        for decl in first_documented(
            [d for d in self.scanner.scan(text) if d.kind == "const"]
        ):
            self.coverage.add(decl.documented)
            if not decl.documented:
                continue
            doc = parse_jsdoc(decl.doc)
            since = self.since(doc, "constant", "constants", decl.name)
            constants.append(
                build_constant(decl, doc, source_file, since, preview_length)
            )
        return constants
