from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

import bibtexparser
from bibtexparser import model as bpmodel

from archdate.dates import UnsupportedFormatError, normalize_to_dashed

logger = logging.getLogger(__name__)


@dataclass
class DateFix:
    """Outcome of normalizing one date field of one entry."""

    key: str
    field: str
    original: str
    normalized: str = ""
    error: str = ""

    @property
    def failed(self) -> bool:
        return bool(self.error)

    @property
    def changed(self) -> bool:
        return not self.failed and self.normalized != self.original


def _field_str(entry: bpmodel.Entry, key: str) -> str:
    """Extract string value from a bibtexparser Entry field, stripping outer braces."""
    f = entry.fields_dict.get(key)
    if f is None:
        return ""
    val = f.value
    if isinstance(val, str):
        val = val.strip()
        # Strip outer curly braces that BibTeX uses for case protection
        if val.startswith("{") and val.endswith("}"):
            val = val[1:-1]
        return val
    return str(val).strip()


def normalize_entry(entry: bpmodel.Entry, fields: Iterable[str]) -> list[DateFix]:
    fixes: list[DateFix] = []
    for name in fields:
        value = _field_str(entry, name)
        if not value:
            continue
        try:
            normalized = normalize_to_dashed(value)
        except UnsupportedFormatError as exc:
            logger.info("%s: leaving %s = %r unchanged", entry.key, name, value)
            fixes.append(DateFix(entry.key, name, value, error=str(exc)))
            continue
        if normalized != value:
            entry.set_field(bpmodel.Field(key=name, value=normalized))
        fixes.append(DateFix(entry.key, name, value, normalized=normalized))
    return fixes


def normalize_library(library: bibtexparser.Library, fields: Iterable[str]) -> list[DateFix]:
    """Normalize the given date fields of every entry in place.

    Unsupported values are left as they are and reported on the returned
    DateFix with an error message.
    """
    fields = list(fields)
    fixes: list[DateFix] = []
    for entry in library.entries:
        fixes.extend(normalize_entry(entry, fields))
    logger.debug(
        "normalized %d entries: %d changed, %d failed",
        len(library.entries),
        sum(f.changed for f in fixes),
        sum(f.failed for f in fixes),
    )
    return fixes


def normalize_bibtex_str(text: str, fields: Iterable[str]) -> tuple[str, list[DateFix]]:
    """Normalize date fields in a BibTeX string and return the rewritten text."""
    lib = bibtexparser.parse_string(text)
    fixes = normalize_library(lib, fields)
    return bibtexparser.write_string(lib), fixes


def normalize_file(path: str, fields: Iterable[str], output: str | None = None) -> list[DateFix]:
    """Normalize date fields of the .bib file at *path*.

    The result is written to *output* when given, which may be *path* itself.
    """
    lib = bibtexparser.parse_file(path)
    fixes = normalize_library(lib, fields)
    if output is not None:
        bibtexparser.write_file(output, lib)
        logger.info("wrote %s", output)
    return fixes
