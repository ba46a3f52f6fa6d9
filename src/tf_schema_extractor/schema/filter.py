"""Narrows a provider schema document to selected resources and data sources."""

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from tf_schema_extractor.errors import (
    NoDataSourcesFoundError,
    NoResourcesFoundError,
    OutputError,
    ParseError,
    SchemaFormatError,
)
from tf_schema_extractor.schema.base import (
    ABSENT,
    WILDCARD,
    FilterSpec,
    ProviderSchema,
    SchemaDocument,
)


def parse_schema(raw_json: str) -> SchemaDocument:
    """Parse terraform's schema JSON into a SchemaDocument."""
    try:
        data = json.loads(raw_json)
    except json.JSONDecodeError as e:
        raise ParseError(f"terraform schema output is not valid JSON: {e}") from e

    try:
        doc = SchemaDocument.model_validate(data)
    except ValidationError as e:
        raise SchemaFormatError(f"Unexpected terraform schema layout: {e}") from e
    if not doc.provider_schemas:
        raise SchemaFormatError("terraform schema output contains no provider schemas")
    return doc


def select(schemas: dict[str, Any], names: list[str]) -> dict[str, Any]:
    """Pick `names` out of `schemas`; unknown names map to ABSENT."""
    if names == [WILDCARD]:
        return dict(schemas)
    return {name: schemas.get(name, ABSENT) for name in names}


def filter_schema(raw_json: str, filter_spec: FilterSpec) -> SchemaDocument:
    """Return the schema document reduced to the requested names.

    Only the first provider under `provider_schemas` is considered. The
    provider configuration block is replaced with an empty object.
    """
    doc = parse_schema(raw_json)
    key, source = next(iter(doc.provider_schemas.items()))

    resources = select(source.resource_schemas, filter_spec.resources)
    if not resources:
        raise NoResourcesFoundError(
            "No resources found with filter: " + " || ".join(filter_spec.resources)
        )

    data_sources = select(source.data_source_schemas, filter_spec.data_sources)
    if not data_sources:
        raise NoDataSourcesFoundError(
            "No data sources found with filter: " + " || ".join(filter_spec.data_sources)
        )

    return SchemaDocument(
        format_version=doc.format_version,
        provider_schemas={
            key: ProviderSchema(
                provider={},
                resource_schemas=resources,
                data_source_schemas=data_sources,
            )
        },
    )


def _encode(obj: Any) -> Any:
    if obj is ABSENT:
        return None
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def render_schema(doc: SchemaDocument, indent: int | None = None) -> str:
    """Serialize to JSON; compact unless an indent is given."""
    separators = None if indent else (",", ":")
    return json.dumps(
        doc.to_json_dict(),
        indent=indent,
        separators=separators,
        ensure_ascii=False,
        default=_encode,
    )


def write_schema(doc: SchemaDocument, out_file: Path) -> None:
    """Write compact JSON to `out_file`, replacing any existing content."""
    try:
        out_file.write_text(render_schema(doc), encoding="utf-8")
    except OSError as e:
        raise OutputError(f"Could not write {out_file}: {e}") from e
