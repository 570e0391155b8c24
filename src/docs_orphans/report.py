from __future__ import annotations

import json
import sys
from pathlib import Path

from .core.context import RunContext
from .core.schema import validate_json
from .resources import DocsScan
from .sidebar import SidebarCoverage

REPORT_SCHEMA = "orphan-report.schema.json"


def build_report(
    ctx: RunContext,
    scan: DocsScan,
    coverage: SidebarCoverage,
    orphans: list[str],
    sidebars: Path,
) -> dict[str, object]:
    payload: dict[str, object] = {
        "schema_version": 1,
        "tool": "docs-orphans",
        "run_id": ctx.run_id,
        "status": "pass" if not orphans else "fail",
        "docs_root": str(scan.docs_root),
        "sidebars": str(sidebars),
        "counts": {
            "resources": len(scan.resources),
            "sidebar_linked": len(coverage.linked),
            "autogenerated_dirs": len(coverage.autogenerated_dirs),
            "doc_linked": len(scan.doc_linked),
            "doc_imported": len(scan.doc_imported),
            "orphans": len(orphans),
        },
        "orphans": orphans,
        "warnings": list(coverage.warnings),
    }
    validate_json(payload, REPORT_SCHEMA)
    return payload


def render_text(orphans: list[str]) -> None:
    if not orphans:
        return
    print("Found orphan resources:", file=sys.stderr)
    for resource in orphans:
        print(resource)


def render_json(payload: dict[str, object]) -> str:
    return json.dumps(payload, sort_keys=True)


def write_report(path: Path, payload: dict[str, object]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload, indent=2, sort_keys=True) + "\n", encoding="utf-8")
