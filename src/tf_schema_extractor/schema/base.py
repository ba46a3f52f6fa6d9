"""Data models for terraform provider schema documents.

Schemas of individual resources and data sources are kept as opaque dicts;
only the keys the filter navigates are modelled.
"""

from typing import Any

from pydantic import BaseModel

WILDCARD = "*"


class _Absent:
    """Marker for a requested name the provider schema does not define."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "ABSENT"

    def __bool__(self) -> bool:
        return False


ABSENT = _Absent()


class ProviderSchema(BaseModel):
    """One entry of `provider_schemas`."""

    provider: dict = {}
    resource_schemas: dict[str, Any] = {}
    data_source_schemas: dict[str, Any] = {}


class SchemaDocument(BaseModel):
    """Output of `terraform providers schema -json`, raw or filtered."""

    format_version: str
    provider_schemas: dict[str, ProviderSchema]

    def to_json_dict(self) -> dict:
        """Plain dict in terraform's layout, ABSENT values left in place."""
        return {
            "format_version": self.format_version,
            "provider_schemas": {
                key: {
                    "provider": schema.provider,
                    "resource_schemas": schema.resource_schemas,
                    "data_source_schemas": schema.data_source_schemas,
                }
                for key, schema in self.provider_schemas.items()
            },
        }


class FilterSpec(BaseModel):
    """Names to keep; `["*"]` keeps everything, an empty list keeps nothing."""

    resources: list[str] = []
    data_sources: list[str] = []

    def is_empty(self) -> bool:
        return not self.resources and not self.data_sources
