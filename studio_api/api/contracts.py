# This file snapshots the OpenAPI contract and compares snapshots for breaking changes.
# A change is treated as breaking when a path, schema, property, or required field disappears.

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from fastapi import FastAPI


def openapi_snapshot(app: FastAPI, *, api_base_path: str, app_version: str) -> dict[str, Any]:
    schema = app.openapi()
    return {
        "api_base_path": api_base_path,
        "app_version": app_version,
        "generated_at": datetime.now(tz=UTC).isoformat(),
        "paths": schema.get("paths", {}),
        "components": schema.get("components", {}),
    }


def detect_breaking_schema_changes(
    *,
    previous_snapshot: dict[str, Any],
    current_snapshot: dict[str, Any],
) -> list[str]:
    """Detect likely breaking changes by checking removed paths, methods, and fields."""

    findings: list[str] = []

    previous_paths = previous_snapshot.get("paths", {})
    current_paths = current_snapshot.get("paths", {})
    for path in sorted(set(previous_paths) - set(current_paths)):
        findings.append(f"Removed API path: {path}")
    for path in sorted(set(previous_paths) & set(current_paths)):
        for method in sorted(set(previous_paths[path]) - set(current_paths[path])):
            findings.append(f"Removed API method: {method.upper()} {path}")

    previous_schemas = previous_snapshot.get("components", {}).get("schemas", {})
    current_schemas = current_snapshot.get("components", {}).get("schemas", {})

    for schema_name, previous_schema in previous_schemas.items():
        if schema_name not in current_schemas:
            findings.append(f"Removed schema component: {schema_name}")
            continue

        previous_required = set(previous_schema.get("required", []))
        current_required = set(current_schemas[schema_name].get("required", []))
        for removed_required in sorted(previous_required - current_required):
            findings.append(f"Schema {schema_name} removed required field: {removed_required}")

        previous_properties = previous_schema.get("properties", {})
        current_properties = current_schemas[schema_name].get("properties", {})
        for removed_prop in sorted(set(previous_properties) - set(current_properties)):
            findings.append(f"Schema {schema_name} removed property: {removed_prop}")

    return findings
