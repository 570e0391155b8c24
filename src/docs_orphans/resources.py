from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable

from .links import DEFAULT_INTERNAL_PREFIXES, extract_references
from .paths import resource_path


@dataclass
class DocsScan:
    """Everything the directory walk learns about a docs tree."""

    docs_root: Path
    resources: list[str] = field(default_factory=list)
    doc_linked: list[str] = field(default_factory=list)
    doc_imported: list[str] = field(default_factory=list)
    _linked_seen: set[str] = field(default_factory=set, repr=False, compare=False)
    _imported_seen: set[str] = field(default_factory=set, repr=False, compare=False)

    def add_resource(self, path: str) -> None:
        self.resources.append(path)

    def add_linked(self, paths: Iterable[str]) -> None:
        for p in paths:
            if p not in self._linked_seen:
                self._linked_seen.add(p)
                self.doc_linked.append(p)

    def add_imported(self, paths: Iterable[str]) -> None:
        for p in paths:
            if p not in self._imported_seen:
                self._imported_seen.add(p)
                self.doc_imported.append(p)


def _walk(directory: Path, scan: DocsScan, internal_prefixes: tuple[str, ...]) -> None:
    for entry in sorted(directory.iterdir(), key=lambda p: p.name):
        if entry.is_dir() and not entry.is_symlink():
            _walk(entry, scan, internal_prefixes)
            continue
        origin = resource_path(entry, scan.docs_root)
        scan.add_resource(origin)
        source = entry.read_text(encoding="utf-8", errors="ignore")
        linked, imported = extract_references(source, origin, internal_prefixes)
        scan.add_linked(linked)
        scan.add_imported(imported)


def scan_docs(docs_root: Path, internal_prefixes: Iterable[str] = DEFAULT_INTERNAL_PREFIXES) -> DocsScan:
    """Walk ``docs_root`` recording every file as a resource plus what it links and imports.

    OSError from an unreadable directory or file propagates unchanged.
    """
    scan = DocsScan(docs_root=docs_root)
    _walk(docs_root, scan, tuple(internal_prefixes))
    return scan
