from __future__ import annotations

from pathlib import Path

DOC_EXTENSIONS = (".mdx", ".md")


def strip_doc_extension(path: str) -> str:
    for ext in DOC_EXTENSIONS:
        if path.endswith(ext):
            return path[: -len(ext)]
    return path


def resource_path(path: Path, docs_root: Path) -> str:
    """Root-relative, slash-led, extension-less key of a file under ``docs_root``."""
    rel = path.relative_to(docs_root).as_posix()
    return "/" + strip_doc_extension(rel)


def _parent_parts(origin: str) -> list[str]:
    parts = origin.split("/")
    parts.pop()
    return parts


def _join(parts: list[str], rest: str) -> str:
    return ("/".join(parts) + "/" if len(parts) > 1 else "/") + rest


def resolve_resource_path(href: str, origin: str) -> str:
    """Resolve ``href`` as written in the document at ``origin`` to a resource path."""
    if href.startswith("./"):
        href = _join(_parent_parts(origin), href[2:])

    if href.startswith("../"):
        parts = _parent_parts(origin)
        while href.startswith("../"):
            href = href[3:]
            # the root itself is never popped
            if len(parts) > 1:
                parts.pop()
        href = _join(parts, href)

    if not href.startswith("/"):
        href = "/" + href
    return strip_doc_extension(href)
