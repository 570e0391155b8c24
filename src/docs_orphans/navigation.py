from __future__ import annotations

import json
import shutil
import subprocess
from pathlib import Path
from typing import Any

import yaml

from .core.yaml_utils import load_yaml
from .errors import ScriptError
from .exit_codes import ERR_CONFIG

DATA_SUFFIXES = {".yaml", ".yml", ".json"}
SCRIPT_SUFFIXES = {".js", ".cjs"}

_NODE_DUMP = "const m = require(process.argv[1]); process.stdout.write(JSON.stringify(m.default || m));"


def _load_js(path: Path) -> Any:
    node = shutil.which("node")
    if node is None:
        raise ScriptError(f"node is required to evaluate {path}", ERR_CONFIG, "config_error")
    proc = subprocess.run(
        [node, "-e", _NODE_DUMP, str(path.resolve())],
        text=True,
        capture_output=True,
        check=False,
    )
    if proc.returncode != 0:
        raise ScriptError(f"evaluating {path} failed: {proc.stderr.strip()}", ERR_CONFIG, "config_error")
    try:
        return json.loads(proc.stdout)
    except json.JSONDecodeError as exc:
        raise ScriptError(f"{path}: node did not print JSON: {exc}", ERR_CONFIG, "config_error") from exc


def load_sidebars(path: Path) -> dict[str, Any]:
    """Read a sidebar configuration from YAML, JSON or a CommonJS module."""
    if not path.is_file():
        raise ScriptError(f"sidebar config not found: {path}", ERR_CONFIG, "config_error")
    suffix = path.suffix.lower()
    if suffix in SCRIPT_SUFFIXES:
        data = _load_js(path)
    elif suffix in DATA_SUFFIXES:
        try:
            data = load_yaml(path)
        except (OSError, UnicodeDecodeError, yaml.YAMLError) as exc:
            raise ScriptError(f"cannot parse sidebar config {path}: {exc}", ERR_CONFIG, "config_error") from exc
    else:
        raise ScriptError(f"unsupported sidebar config format: {path.name}", ERR_CONFIG, "config_error")
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ScriptError(f"{path}: sidebar config root must be mapping", ERR_CONFIG, "config_error")
    return data
