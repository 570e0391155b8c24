from __future__ import annotations

import json
import socket
from pathlib import Path
from typing import Callable

import pytest
from hypothesis import settings

_ALLOWED_MARKERS = {"unit", "integration", "slow"}

settings.register_profile("docs-orphans", deadline=None, max_examples=50)
settings.load_profile("docs-orphans")


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        names = {mark.name for mark in item.iter_markers()}
        if not names.intersection(_ALLOWED_MARKERS):
            item.add_marker("unit")


@pytest.fixture(autouse=True)
def no_network_for_unit(request: pytest.FixtureRequest, monkeypatch: pytest.MonkeyPatch) -> None:
    if request.node.get_closest_marker("integration") or request.node.get_closest_marker("slow"):
        return

    def _blocked(*_args: object, **_kwargs: object) -> socket.socket:
        raise RuntimeError("network disabled in unit tests")

    def _blocked_connect(*_args: object, **_kwargs: object) -> None:
        raise RuntimeError("network disabled in unit tests")

    monkeypatch.setattr(socket, "create_connection", _blocked)
    monkeypatch.setattr(socket.socket, "connect", _blocked_connect)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("DOCS_ORPHANS_ROOT", raising=False)
    monkeypatch.delenv("DOCS_ORPHANS_SIDEBARS", raising=False)
    monkeypatch.delenv("RUN_ID", raising=False)


@pytest.fixture
def write_tree() -> Callable[[Path, dict[str, str | bytes]], Path]:
    def _write(root: Path, files: dict[str, str | bytes]) -> Path:
        for rel, content in files.items():
            path = root / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            if isinstance(content, bytes):
                path.write_bytes(content)
            else:
                path.write_text(content, encoding="utf-8")
        return root

    return _write


@pytest.fixture
def site(tmp_path: Path, write_tree: Callable[[Path, dict[str, str | bytes]], Path]) -> Path:
    """A small docs site with exactly one orphan: /stale."""
    write_tree(
        tmp_path / "docs",
        {
            "intro.md": (
                "import Note from './partials/_note.mdx';\n\n"
                "# Intro\n\n![logo](./img/logo.png)\n\nSee the [guide](./guides/a.md#top).\n"
            ),
            "img/logo.png": b"\x89PNG\r\n\x1a\n",
            "partials/_note.mdx": "A shared note.\n",
            "guides/a.md": "[back](../intro.md)\n",
            "stale.md": "Nobody links here.\n",
        },
    )
    sidebars = {
        "docs": [
            {"type": "doc", "id": "intro"},
            {"type": "category", "label": "Guides", "items": [{"type": "autogenerated", "dirName": "guides"}]},
        ]
    }
    (tmp_path / "sidebars.json").write_text(json.dumps(sidebars), encoding="utf-8")
    return tmp_path
