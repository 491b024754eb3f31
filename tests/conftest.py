"""Shared fixtures: a small TypeScript utility library on disk."""

import json
from pathlib import Path

import pytest

ARRAY_TS = """/**
 * Splits an array into chunks.
 * @param {T[]} array - The array to split
 * @param {number} [size=1] - Chunk length
 * @returns {T[][]} The chunks
 * @example
 * chunk([1, 2, 3], 2); // [[1, 2], [3]]
 * @since 1.0.0
 */
export function chunk<T>(array: T[], size = 1): T[][] {
  const out: T[][] = [];
  for (let i = 0; i < array.length; i += size) {
    out.push(array.slice(i, i + size));
  }
  return out;
}

export function internalHelper(): void {}

/**
 * Returns the last element.
 * @param array - Source array
 */
export const last = <T>(array: T[]): T | undefined => array[array.length - 1];
"""

FORMAT_TS = """/** Formats a label. */
export function formatLabel(label: string): string {
  return `[${label}]`;
}

/**
 * A labelled value.
 */
export interface Labelled {
  /** The label text. */
  label: string;
  value?: number;
}

/** Either a string or a number. */
export type Primitive = string | number;
"""

CONSTANTS_TS = """/**
 * Default settings.
 * @since 0.5.0
 */
export const DEFAULTS = {
  retries: 3,
  delay: 100,
} as const;

/** Supported locales. */
export const LOCALES = ["en", "fr", "de", "es"];

/** Library name. */
export const NAME = "utils";

export const HIDDEN = 1;
"""

MANIFEST = {
    "name": "@acme/utils",
    "version": "2.1.0",
    "description": "Utility functions",
    "author": "Ada Lovelace <ada@example.com> (https://ada.dev)",
    "repository": {"type": "git", "url": "https://github.com/acme/utils"},
    "license": "MIT",
    "keywords": ["utils", "array"],
}


def make_project(root: Path) -> Path:
    """Lay out a small library under ``root``."""
    files = {
        "src/core/array.ts": ARRAY_TS,
        "src/core/index.ts": 'export * from "./array";\n',
        "src/utils/format.ts": FORMAT_TS,
        "src/constants/index.ts": CONSTANTS_TS,
        "package.json": json.dumps(MANIFEST),
    }
    for rel, text in files.items():
        path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
    return root


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """A library root with core, utils and constants modules."""
    return make_project(tmp_path)
