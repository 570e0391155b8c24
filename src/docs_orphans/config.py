from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

import yaml

from .core.yaml_utils import load_yaml
from .errors import ScriptError
from .exit_codes import ERR_CONFIG
from .links import DEFAULT_INTERNAL_PREFIXES

DEFAULT_CONFIG_FILE = "docs-orphans.yaml"
DEFAULT_DOCS_ROOT = "docs"
DEFAULT_SIDEBARS = "sidebars.json"

ENV_DOCS_ROOT = "DOCS_ORPHANS_ROOT"
ENV_SIDEBARS = "DOCS_ORPHANS_SIDEBARS"

_KNOWN_KEYS = {"docs_root", "sidebars", "internal_prefixes"}


@dataclass(frozen=True)
class OrphanConfig:
    docs_root: Path
    sidebars: Path
    internal_prefixes: tuple[str, ...] = DEFAULT_INTERNAL_PREFIXES


def _read_config_file(path: Path) -> dict[str, Any]:
    try:
        data = load_yaml(path)
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as exc:
        raise ScriptError(f"cannot read config file {path}: {exc}", ERR_CONFIG, "config_error") from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ScriptError(f"{path}: root must be mapping", ERR_CONFIG, "config_error")
    unknown = sorted(set(data) - _KNOWN_KEYS)
    if unknown:
        raise ScriptError(f"{path}: unknown config keys: {', '.join(unknown)}", ERR_CONFIG, "config_error")
    prefixes = data.get("internal_prefixes")
    if prefixes is not None and (
        not isinstance(prefixes, list) or not all(isinstance(p, str) for p in prefixes)
    ):
        raise ScriptError(f"{path}: internal_prefixes must be a list of strings", ERR_CONFIG, "config_error")
    return data


def load_config(
    cli_values: Mapping[str, Any] | None = None,
    config_path: Path | None = None,
    cwd: Path | None = None,
) -> OrphanConfig:
    """Resolve settings: CLI values, then environment, then config file, then defaults.

    Relative paths from a config file are taken relative to that file's directory.
    """
    cli = {k: v for k, v in (cli_values or {}).items() if v}
    base = cwd or Path.cwd()

    file_values: dict[str, Any] = {}
    file_dir = base
    if config_path is not None:
        path = config_path if config_path.is_absolute() else base / config_path
        if not path.is_file():
            raise ScriptError(f"config file not found: {config_path}", ERR_CONFIG, "config_error")
        file_values = _read_config_file(path)
        file_dir = path.parent
    elif (base / DEFAULT_CONFIG_FILE).is_file():
        file_values = _read_config_file(base / DEFAULT_CONFIG_FILE)

    def _path(key: str, env: str, default: str) -> Path:
        if key in cli:
            return base / Path(cli[key])
        if os.environ.get(env):
            return base / Path(os.environ[env])
        if key in file_values:
            return file_dir / Path(str(file_values[key]))
        return base / default

    prefixes = cli.get("internal_prefixes") or file_values.get("internal_prefixes") or DEFAULT_INTERNAL_PREFIXES
    return OrphanConfig(
        docs_root=_path("docs_root", ENV_DOCS_ROOT, DEFAULT_DOCS_ROOT),
        sidebars=_path("sidebars", ENV_SIDEBARS, DEFAULT_SIDEBARS),
        internal_prefixes=tuple(prefixes),
    )
