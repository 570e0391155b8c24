from __future__ import annotations

from typing import Collection, Iterable

from .resources import DocsScan
from .sidebar import SidebarCoverage

IMAGE_SUFFIX = ".png"


def is_covered(
    resource: str,
    autogenerated_dirs: Iterable[str],
    sidebar_linked: Collection[str],
    doc_imported: Collection[str],
    doc_linked: Collection[str],
) -> bool:
    if any(resource.startswith(d) for d in autogenerated_dirs):
        return True
    if resource in sidebar_linked or resource in doc_imported:
        return True
    # only png images count as reached by a plain link
    return resource.endswith(IMAGE_SUFFIX) and resource in doc_linked


def find_orphans(scan: DocsScan, coverage: SidebarCoverage) -> list[str]:
    autogenerated = tuple(coverage.autogenerated_dirs)
    sidebar_linked = set(coverage.linked)
    doc_imported = set(scan.doc_imported)
    doc_linked = set(scan.doc_linked)
    return [
        resource
        for resource in scan.resources
        if not is_covered(resource, autogenerated, sidebar_linked, doc_imported, doc_linked)
    ]
