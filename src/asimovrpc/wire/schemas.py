from __future__ import annotations

from dataclasses import dataclass, field
from functools import lru_cache
from typing import Any

import jsonschema

REQUEST_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "title": "JSON-RPC 2.0 request",
    "type": "object",
    "required": ["id", "jsonrpc", "method", "params"],
    "properties": {
        "id": {"type": "integer"},
        "jsonrpc": {"const": "2.0"},
        "method": {"type": "string", "minLength": 1},
        "params": {"type": "array"},
    },
}

RESPONSE_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "title": "JSON-RPC 2.0 response",
    "type": "object",
    "properties": {
        "id": {"type": ["integer", "string", "null"]},
        "jsonrpc": {"type": "string"},
        "error": {
            "type": ["object", "null"],
            "required": ["code", "message"],
            "properties": {
                "code": {"type": "integer"},
                "message": {"type": "string"},
            },
        },
    },
    "anyOf": [
        {"required": ["result"]},
        {"required": ["error"], "properties": {"error": {"type": "object"}}},
    ],
}

SCHEMAS = {
    "request": REQUEST_SCHEMA,
    "response": RESPONSE_SCHEMA,
}


class SchemaValidationError(ValueError):
    """An envelope failed its JSON Schema; ``errors`` holds one entry per violation."""

    def __init__(self, schema: str, errors: list[str]) -> None:
        super().__init__(f"invalid {schema} envelope: " + "; ".join(errors))
        self.schema = schema
        self.errors = errors


@dataclass(frozen=True)
class SchemaRegistry:
    schemas: dict[str, dict[str, Any]] = field(default_factory=lambda: dict(SCHEMAS))
    _validators: dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def default(cls) -> "SchemaRegistry":
        return _default_registry()

    def load_schema(self, name: str) -> dict[str, Any]:
        try:
            return self.schemas[name]
        except KeyError:
            raise KeyError(f"Unknown schema: {name}") from None

    def validator_for(self, name: str) -> jsonschema.Validator:
        validator = self._validators.get(name)
        if validator is None:
            schema = self.load_schema(name)
            validator_cls = jsonschema.validators.validator_for(schema)
            validator_cls.check_schema(schema)
            validator = self._validators[name] = validator_cls(schema)
        return validator

    def validate_instance(self, instance: Any, name: str) -> None:
        validator = self.validator_for(name)
        violations = [_describe(err) for err in validator.iter_errors(instance)]
        if violations:
            raise SchemaValidationError(name, sorted(violations))


def _describe(error: jsonschema.ValidationError) -> str:
    return f"{error.json_path}: {error.message}"


@lru_cache(maxsize=1)
def _default_registry() -> SchemaRegistry:
    return SchemaRegistry()
