"""Provider identity: name normalization and the resolved provider spec."""

from pydantic import BaseModel

from tf_schema_extractor.errors import InvalidProviderError

DEFAULT_NAMESPACE = "hashicorp"


def full_provider_name(provider_name: str) -> str:
    """Return `namespace/name`, defaulting the namespace for bare names."""
    parts = provider_name.split("/")
    if len(parts) == 1:
        parts = [DEFAULT_NAMESPACE, provider_name]
    if len(parts) != 2 or not all(parts):
        raise InvalidProviderError(
            f"Invalid provider name {provider_name!r}, expected 'name' or 'namespace/name'"
        )
    return "/".join(parts)


class ProviderSpec(BaseModel):
    """A provider requirement with a concrete version."""

    name: str  # namespace/name
    version: str

    @classmethod
    def create(cls, provider_name: str, version: str) -> "ProviderSpec":
        return cls(name=full_provider_name(provider_name), version=version)

    @property
    def alias(self) -> str:
        """Local name used in `required_providers`."""
        return self.name.split("/")[1]
