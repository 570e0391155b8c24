"""Outbound link and import extraction for markdown/MDX sources.

Links are pulled out with regular expressions rather than a full markdown
parser: inline links and images, reference definitions, autolinks and bare
URLs. HTML comments, fenced and indented code blocks and inline code are
skipped. Imports are static MDX ``import Name from './file.mdx'`` statements.
"""

from __future__ import annotations

import re
from typing import Iterable

from .paths import resolve_resource_path

DEFAULT_INTERNAL_PREFIXES: tuple[str, ...] = (
    "https://developer.offchainlabs.com",
    "https://developer.arbitrum.io",
    "https://docs.arbitrum.io",
)
EXTERNAL_SCHEMES = ("http://", "https://")

_FENCE_RE = re.compile(r"^\s{0,3}(`{3,}|~{3,})")
_INLINE_CODE_RE = re.compile(r"(`+)(?:(?!\1).)+?\1")
_INDENTED_RE = re.compile(r"^(?: {4}|\t)")
_HTML_COMMENT_RE = re.compile(r"<!--.*?-->", re.DOTALL)
_INLINE_LINK_RE = re.compile(
    r"\]\(\s*(?:<([^>\n]*)>|([^\s()]+))(?:\s+(?:\"[^\"]*\"|'[^']*'|\([^)]*\)))?\s*\)"
)
_REF_DEF_RE = re.compile(r"^\s{0,3}\[(?!\^)[^\]\n]+\]:\s*<?([^\s>]+)>?", re.MULTILINE)
_AUTOLINK_RE = re.compile(r"<([A-Za-z][A-Za-z0-9+.-]{1,31}:[^\s<>]*)>")
_BARE_URL_RE = re.compile(r"(?<![(<\w\"'=/])https?://[^\s<>()\[\]\"'`]+")
_IMPORT_RE = re.compile(r"""import\s+[A-Za-z_]\w*\s+from\s+(['"])(?P<path>[^'"\n]+\.mdx?)\1""")


def _strip_code(markdown: str) -> str:
    lines: list[str] = []
    fence: str | None = None
    indented = False
    prev_blank = True
    for line in _HTML_COMMENT_RE.sub("", markdown).splitlines():
        m = _FENCE_RE.match(line)
        if fence is not None:
            if m and m.group(1)[0] == fence[0] and len(m.group(1)) >= len(fence):
                fence = None
                prev_blank = False
            continue
        if not line.strip():
            lines.append("")
            prev_blank = True
            continue
        # an indented code block opens only after a blank line
        if _INDENTED_RE.match(line) and (prev_blank or indented):
            indented = True
            continue
        indented = False
        prev_blank = False
        if m:
            fence = m.group(1)
            continue
        lines.append(_INLINE_CODE_RE.sub("", line))
    return "\n".join(lines)


def extract_links(markdown: str) -> list[str]:
    """Raw hrefs of every link in ``markdown``, in document order per link kind."""
    text = _strip_code(markdown)
    links: list[str] = []
    for m in _INLINE_LINK_RE.finditer(text):
        href = m.group(1) if m.group(1) is not None else m.group(2)
        links.append(href.strip())
    links.extend(m.group(1) for m in _REF_DEF_RE.finditer(text))
    links.extend(m.group(1) for m in _AUTOLINK_RE.finditer(text))
    links.extend(m.group(0).rstrip(".,;:!?*_") for m in _BARE_URL_RE.finditer(text))
    return links


def classify_link(href: str, internal_prefixes: Iterable[str] = DEFAULT_INTERNAL_PREFIXES) -> str | None:
    """Return the in-site part of ``href``, or None when it does not point at a doc resource."""
    if "#" in href and not href.startswith("#"):
        href = href.split("#", 1)[0]

    for prefix in internal_prefixes:
        if href.startswith(prefix):
            return href[len(prefix):]

    if href.startswith(EXTERNAL_SCHEMES):
        return None
    if ":" in href:
        # typed pointers such as tiff:/exif:/mailto:
        return None
    if href.startswith("@"):
        return None
    if not href or href.startswith("#"):
        return None
    return href


def extract_imports(source: str) -> list[str]:
    return [m.group("path") for m in _IMPORT_RE.finditer(source)]


def _dedupe(items: Iterable[str]) -> list[str]:
    return list(dict.fromkeys(items))


def extract_references(
    source: str,
    origin: str,
    internal_prefixes: Iterable[str] = DEFAULT_INTERNAL_PREFIXES,
) -> tuple[list[str], list[str]]:
    """Linked and imported resource paths referenced from the document at ``origin``."""
    prefixes = tuple(internal_prefixes)
    linked: list[str] = []
    for href in extract_links(source):
        target = classify_link(href, prefixes)
        if target is not None:
            linked.append(resolve_resource_path(target, origin))
    imported = [resolve_resource_path(path, origin) for path in extract_imports(source)]
    return _dedupe(linked), _dedupe(imported)


__all__ = [
    "DEFAULT_INTERNAL_PREFIXES",
    "classify_link",
    "extract_imports",
    "extract_links",
    "extract_references",
    "resolve_resource_path",
]
