from __future__ import annotations

import json
from pathlib import Path

import jsonschema

SCHEMAS_DIR = Path(__file__).resolve().parents[1] / "schemas"


def load_json(path: Path) -> dict[str, object]:
    return json.loads(path.read_text(encoding="utf-8"))


def validate_json(payload: dict[str, object], schema_name: str) -> None:
    schema = load_json(SCHEMAS_DIR / schema_name)
    jsonschema.validate(payload, schema)
