"""Initial item lists: the built-in seed and JSON seed files."""

from __future__ import annotations

import json
from pathlib import Path

from jsonschema import SchemaError, ValidationError, validate

SCHEMAS_DIR = Path(__file__).resolve().parent / "schemas"
SEED_SCHEMA = "seed"

DEFAULT_SEED: tuple[str, ...] = (
    "Learn Rust",
    "Build a TUI app",
    "Share with others",
    "Write documentation",
    "Add more features",
)


def validate_json(data: dict, schema_name: str) -> tuple[bool, str]:
    """Validate JSON data against schema. Returns (valid, error_message)."""
    schema_path = SCHEMAS_DIR / f"{schema_name}.schema.json"
    if not schema_path.exists():
        return False, f"Schema not found: {schema_path}"

    try:
        schema = json.loads(schema_path.read_text())
        validate(instance=data, schema=schema)
        return True, ""
    except SchemaError as e:
        return False, f"Invalid schema: {e.message}"
    except ValidationError as e:
        path = " -> ".join(str(p) for p in e.absolute_path) if e.absolute_path else "root"
        return False, f"Validation error at '{path}': {e.message}"


def load_seed(path: Path) -> tuple[bool, list[str] | str]:
    """Read a seed file.

    Returns (True, items) on success, (False, message) otherwise.
    """
    if not path.exists():
        return False, f"Seed file not found: {path}"
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        return False, f"Invalid JSON in {path}: {e.msg} (line {e.lineno})"
    except UnicodeDecodeError as e:
        return False, f"{path} is not valid UTF-8: {e.reason}"
    except OSError as e:
        return False, f"Could not read {path}: {e}"

    valid, msg = validate_json(data, SEED_SCHEMA)
    if not valid:
        return False, f"{path}: {msg}"
    return True, list(data["items"])
