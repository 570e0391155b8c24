"""Sidebar navigation model and the coverage it grants.

A sidebar configuration maps sidebar names to ordered item lists. Items are
parsed into a closed set of variants; anything that does not fit becomes an
``UnknownItem`` and only produces a warning, so malformed navigation can only
make more resources look orphaned, never fewer.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Union


@dataclass(frozen=True)
class CategoryItem:
    label: str
    items: tuple[Any, ...]


@dataclass(frozen=True)
class DocItem:
    doc_id: str


@dataclass(frozen=True)
class AutogeneratedItem:
    dir_name: str


@dataclass(frozen=True)
class LinkItem:
    href: str


@dataclass(frozen=True)
class UnknownItem:
    raw: Any
    reason: str


SidebarItem = Union[CategoryItem, DocItem, AutogeneratedItem, LinkItem, UnknownItem]


@dataclass
class SidebarCoverage:
    linked: list[str] = field(default_factory=list)
    autogenerated_dirs: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)


def parse_item(raw: Any) -> SidebarItem:
    if isinstance(raw, str):
        return UnknownItem(raw, f"String detected in sidebar item: {raw}")
    if not isinstance(raw, Mapping):
        return UnknownItem(raw, f"Detected unhandled sidebar item: {raw!r}")

    kind = raw.get("type")
    if kind == "category":
        items = raw.get("items")
        if not isinstance(items, list):
            return UnknownItem(raw, f"Sidebar item of type category does not have items: {raw.get('label', raw)!r}")
        return CategoryItem(str(raw.get("label", "")), tuple(items))
    if kind == "doc":
        doc_id = raw.get("id")
        if not doc_id:
            return UnknownItem(raw, f"Sidebar item of type doc does not have an id: {raw!r}")
        return DocItem(str(doc_id))
    if kind == "autogenerated":
        dir_name = raw.get("dirName")
        if not dir_name:
            return UnknownItem(raw, f"Sidebar item of type autogenerated does not have a dirName: {raw!r}")
        return AutogeneratedItem(str(dir_name))
    if kind == "link":
        return LinkItem(str(raw.get("href", "")))
    return UnknownItem(raw, f"Detected unhandled type on sidebar item: {kind}")


def _collect(items: Any, coverage: SidebarCoverage) -> None:
    for raw in items:
        item = parse_item(raw)
        if isinstance(item, CategoryItem):
            _collect(item.items, coverage)
        elif isinstance(item, DocItem):
            coverage.linked.append("/" + item.doc_id)
        elif isinstance(item, AutogeneratedItem):
            coverage.autogenerated_dirs.append("/" + item.dir_name)
        elif isinstance(item, LinkItem):
            continue
        else:
            coverage.warnings.append(item.reason)


def resolve_sidebars(sidebars: Mapping[str, Any] | None) -> SidebarCoverage:
    """Sidebar-linked resources and autogenerated directories of every sidebar."""
    coverage = SidebarCoverage()
    if not sidebars:
        return coverage
    for sidebar in sidebars.values():
        # category shorthand mappings are not resolved
        if not sidebar or not isinstance(sidebar, list):
            continue
        _collect(sidebar, coverage)
    return coverage
