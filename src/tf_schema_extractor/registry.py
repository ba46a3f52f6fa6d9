"""Terraform registry client used to look up the latest provider version."""

import requests
from pydantic import BaseModel, ValidationError

from tf_schema_extractor.errors import RegistryError
from tf_schema_extractor.provider import full_provider_name

DEFAULT_REGISTRY_URL = "https://registry.terraform.io"
REGISTRY_TIMEOUT = 30


class ProviderMetadata(BaseModel):
    """The subset of `/v1/providers/{namespace}/{name}` we rely on."""

    version: str


class RegistryClient:
    """Thin wrapper around the registry's provider metadata endpoint."""

    def __init__(self, base_url: str | None = None, timeout: float = REGISTRY_TIMEOUT):
        self.base_url = (base_url or DEFAULT_REGISTRY_URL).rstrip("/")
        self.timeout = timeout

    def latest_version(self, provider_name: str) -> str:
        """Return the latest published version of a provider."""
        name = full_provider_name(provider_name)
        url = f"{self.base_url}/v1/providers/{name}"
        try:
            response = requests.get(url, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            raise RegistryError(f"Failed to fetch provider {name}: {e}") from e

        try:
            metadata = ProviderMetadata.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            raise RegistryError(f"Unexpected registry response for provider {name}: {e}") from e
        return metadata.version


def resolve_version(
    provider_name: str,
    requested_version: str | None,
    registry: RegistryClient | None = None,
) -> str:
    """Return the requested version, or ask the registry for the latest one."""
    if requested_version:
        return requested_version
    registry = registry or RegistryClient()
    return registry.latest_version(provider_name)
