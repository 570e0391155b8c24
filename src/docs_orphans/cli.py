from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from . import __version__
from .config import load_config
from .core.context import RunContext
from .core.logging import log_event
from .detector import find_orphans
from .errors import ScriptError
from .exit_codes import ERR_INTERNAL, ERR_IO, ERR_ORPHANS, OK
from .navigation import load_sidebars
from .report import build_report, render_json, render_text, write_report
from .resources import scan_docs
from .sidebar import resolve_sidebars


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="docs-orphans",
        description="report documentation files reachable from no sidebar, import or image link",
    )
    p.add_argument("--version", action="version", version=f"docs-orphans {__version__}")
    p.add_argument("--docs-root", help="documentation tree to scan (default: docs)")
    p.add_argument("--sidebars", help="sidebar config: .json, .yaml/.yml or .js (default: sidebars.json)")
    p.add_argument("--config", help="YAML config file (default: ./docs-orphans.yaml when present)")
    p.add_argument(
        "--internal-prefix",
        action="append",
        dest="internal_prefixes",
        metavar="URL",
        help="absolute URL prefix of the docs site itself; repeatable",
    )
    p.add_argument("--format", choices=["text", "json"], default="text", help="output format")
    p.add_argument("--out-file", help="also write the JSON report to this path")
    p.add_argument("--run-id", help="run identifier for logs and reports")
    vg = p.add_mutually_exclusive_group()
    vg.add_argument("--verbose", action="store_true", help="enable debug diagnostics")
    vg.add_argument("--quiet", action="store_true", help="only emit warnings and errors")
    return p


def run(ctx: RunContext, ns: argparse.Namespace) -> int:
    config = load_config(
        {"docs_root": ns.docs_root, "sidebars": ns.sidebars, "internal_prefixes": ns.internal_prefixes},
        Path(ns.config) if ns.config else None,
    )
    log_event(ctx, "info", "cli", "start", docs_root=str(config.docs_root), sidebars=str(config.sidebars))
    sidebars = load_sidebars(config.sidebars)

    try:
        scan = scan_docs(config.docs_root, config.internal_prefixes)
    except OSError as exc:
        raise ScriptError(f"cannot read docs tree {config.docs_root}: {exc}", ERR_IO, "io_error") from exc
    log_event(
        ctx,
        "debug",
        "collector",
        "scanned",
        resources=len(scan.resources),
        doc_linked=len(scan.doc_linked),
        doc_imported=len(scan.doc_imported),
    )

    coverage = resolve_sidebars(sidebars)
    for warning in coverage.warnings:
        log_event(ctx, "warn", "sidebar", "skip-item", message=warning)
    log_event(
        ctx,
        "debug",
        "sidebar",
        "resolved",
        sidebar_linked=len(coverage.linked),
        autogenerated_dirs=len(coverage.autogenerated_dirs),
    )

    orphans = find_orphans(scan, coverage)
    payload = build_report(ctx, scan, coverage, orphans, config.sidebars)
    if ns.out_file:
        try:
            write_report(Path(ns.out_file), payload)
        except OSError as exc:
            raise ScriptError(f"cannot write report {ns.out_file}: {exc}", ERR_IO, "io_error") from exc
    if ctx.output_format == "json":
        print(render_json(payload))
    else:
        render_text(orphans)
    log_event(ctx, "info", "cli", "finish", status=payload["status"], orphans=len(orphans))
    return ERR_ORPHANS if orphans else OK


def _emit_error(ctx: RunContext, message: str, code: int, kind: str) -> None:
    if ctx.output_format == "json":
        print(
            json.dumps(
                {
                    "schema_version": 1,
                    "tool": "docs-orphans",
                    "status": "fail",
                    "error": {"message": message, "code": code, "kind": kind},
                },
                sort_keys=True,
            ),
            file=sys.stderr,
        )
    else:
        print(message, file=sys.stderr)


def main(argv: list[str] | None = None) -> int:
    ns = build_parser().parse_args(argv)
    ctx = RunContext.from_args(ns.run_id, ns.format, ns.verbose, ns.quiet)
    try:
        return run(ctx, ns)
    except ScriptError as exc:
        _emit_error(ctx, str(exc), exc.code, exc.kind)
        return exc.code
    except Exception as exc:  # pragma: no cover
        _emit_error(ctx, f"internal error: {exc}", ERR_INTERNAL, "internal_error")
        return ERR_INTERNAL


if __name__ == "__main__":
    raise SystemExit(main())
