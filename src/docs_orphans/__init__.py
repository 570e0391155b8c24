"""Find documentation files that no sidebar, link or import reaches."""

from __future__ import annotations

from .detector import find_orphans, is_covered
from .links import extract_references, resolve_resource_path
from .resources import DocsScan, scan_docs
from .sidebar import SidebarCoverage, resolve_sidebars

__version__ = "0.1.0"

__all__ = [
    "DocsScan",
    "SidebarCoverage",
    "extract_references",
    "find_orphans",
    "is_covered",
    "resolve_resource_path",
    "resolve_sidebars",
    "scan_docs",
]
