from __future__ import annotations

from pathlib import Path

import pytest

from docs_orphans.config import load_config
from docs_orphans.errors import ScriptError
from docs_orphans.exit_codes import ERR_CONFIG
from docs_orphans.links import DEFAULT_INTERNAL_PREFIXES


def test_defaults_are_relative_to_cwd(tmp_path: Path) -> None:
    cfg = load_config(cwd=tmp_path)
    assert cfg.docs_root == tmp_path / "docs"
    assert cfg.sidebars == tmp_path / "sidebars.json"
    assert cfg.internal_prefixes == DEFAULT_INTERNAL_PREFIXES


def test_config_file_values_are_relative_to_file(tmp_path: Path) -> None:
    conf_dir = tmp_path / "site"
    conf_dir.mkdir()
    (conf_dir / "orphans.yaml").write_text(
        "docs_root: arbitrum-docs\nsidebars: sidebars.yaml\ninternal_prefixes:\n  - https://docs.example.org\n",
        encoding="utf-8",
    )
    cfg = load_config(config_path=Path("site/orphans.yaml"), cwd=tmp_path)
    assert cfg.docs_root == conf_dir / "arbitrum-docs"
    assert cfg.sidebars == conf_dir / "sidebars.yaml"
    assert cfg.internal_prefixes == ("https://docs.example.org",)


def test_default_config_file_is_picked_up(tmp_path: Path) -> None:
    (tmp_path / "docs-orphans.yaml").write_text("docs_root: content\n", encoding="utf-8")
    assert load_config(cwd=tmp_path).docs_root == tmp_path / "content"


def test_precedence_cli_over_env_over_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    (tmp_path / "docs-orphans.yaml").write_text("docs_root: from-file\nsidebars: file.json\n", encoding="utf-8")
    monkeypatch.setenv("DOCS_ORPHANS_ROOT", "from-env")
    cfg = load_config({"docs_root": None, "sidebars": None}, cwd=tmp_path)
    assert cfg.docs_root == tmp_path / "from-env"
    assert cfg.sidebars == tmp_path / "file.json"
    cfg = load_config({"docs_root": "from-cli", "internal_prefixes": ["https://x.dev"]}, cwd=tmp_path)
    assert cfg.docs_root == tmp_path / "from-cli"
    assert cfg.internal_prefixes == ("https://x.dev",)


def test_missing_config_file_is_config_error(tmp_path: Path) -> None:
    with pytest.raises(ScriptError) as excinfo:
        load_config(config_path=Path("nope.yaml"), cwd=tmp_path)
    assert excinfo.value.code == ERR_CONFIG


@pytest.mark.parametrize(
    "body",
    [
        "- just\n- a list\n",
        "docs_root: [unclosed\n",
        "unknown_key: 1\n",
        "internal_prefixes: https://docs.example.org\n",
    ],
)
def test_invalid_config_file_is_config_error(tmp_path: Path, body: str) -> None:
    (tmp_path / "bad.yaml").write_text(body, encoding="utf-8")
    with pytest.raises(ScriptError) as excinfo:
        load_config(config_path=tmp_path / "bad.yaml", cwd=tmp_path)
    assert excinfo.value.code == ERR_CONFIG
