"""Output contracts for verbctl JSON payloads."""

from .validate import load_catalog, schema_path, validate, validate_self

__all__ = ["load_catalog", "schema_path", "validate", "validate_self"]
