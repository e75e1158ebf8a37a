"""
Schema Validation Utilities

Validates JSON question banks against the bundled schema.

Basic structural checks run first so the common mistakes (missing
``questions`` list, entry without an ``answer``) get a precise path in
the error. Full JSON Schema validation runs afterwards.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema


QUESTION_BANK_SCHEMA_VERSION = 1

# Load schemas lazily
_SCHEMAS: dict[str, dict] = {}


def _load_schema(name: str) -> dict:
    """Load a schema from the schemas directory."""
    if name not in _SCHEMAS:
        schema_path = Path(__file__).parent / f"{name}.schema.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")
        with open(schema_path, "r", encoding="utf-8") as f:
            _SCHEMAS[name] = json.load(f)
    return _SCHEMAS[name]


class ValidationError(Exception):
    """Raised when data fails schema validation."""

    def __init__(self, message: str, path: str = "", errors: list[str] | None = None):
        super().__init__(message)
        self.path = path
        self.errors = errors or []


def validate_question_bank(data: Any) -> None:
    """
    Validate a question bank document.

    Expected format:

        {
          "schema_version": 1,
          "questions": [{"question": "5+5", "answer": "10"}, ...]
        }

    Args:
        data: Parsed JSON document

    Raises:
        ValidationError: If data is invalid
    """
    if not isinstance(data, dict):
        raise ValidationError(
            f"Question bank must be an object, got {type(data).__name__}",
            path="",
        )

    questions = data.get("questions")
    if not isinstance(questions, list):
        raise ValidationError("questions must be a list", path="questions")

    version = data.get("schema_version", QUESTION_BANK_SCHEMA_VERSION)
    if version != QUESTION_BANK_SCHEMA_VERSION:
        raise ValidationError(
            f"Unsupported question bank schema version: {version} "
            f"(expected {QUESTION_BANK_SCHEMA_VERSION})",
            path="schema_version",
        )

    for i, entry in enumerate(questions):
        _validate_entry(entry, f"questions[{i}]")

    schema = _load_schema("question_bank")
    try:
        jsonschema.validate(data, schema)
    except jsonschema.ValidationError as e:
        raise ValidationError(
            f"Schema validation failed: {e.message}",
            path=".".join(str(p) for p in e.absolute_path),
            errors=[e.message],
        ) from e


def _validate_entry(entry: Any, path: str) -> None:
    """Validate a single question entry."""
    if not isinstance(entry, dict):
        raise ValidationError("question entry must be an object", path=path)

    missing = [f for f in ("question", "answer") if f not in entry]
    if missing:
        raise ValidationError(
            f"Question entry missing required fields: {missing}",
            path=path,
            errors=[f"Missing field: {f}" for f in missing],
        )

    for key in ("question", "answer"):
        if not isinstance(entry[key], str):
            raise ValidationError(
                f"{key} must be a string, got {type(entry[key]).__name__}",
                path=f"{path}.{key}",
            )
