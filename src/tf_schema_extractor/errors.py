"""Error types raised by the extraction pipeline.

Each error carries the process exit code the CLI uses when it stops on it.
"""


class ExtractorError(Exception):
    """Base class for all extraction failures."""

    exit_code = 1


class InvalidProviderError(ExtractorError):
    """Provider name is not `name` or `namespace/name`."""

    exit_code = 2


class RegistryError(ExtractorError):
    """Version lookup against the provider registry failed."""

    exit_code = 3


class SpawnError(ExtractorError):
    """The terraform binary could not be started."""

    exit_code = 4


class ProcessError(ExtractorError):
    """terraform ran but reported a failure."""

    exit_code = 5

    def __init__(self, message: str, returncode: int | None = None):
        super().__init__(message)
        self.returncode = returncode


class InitError(ProcessError):
    """`terraform init` exited non-zero."""


class ParseError(ExtractorError):
    """Schema output was not valid JSON."""

    exit_code = 6


class SchemaFormatError(ParseError):
    """Schema JSON is missing keys the filter depends on."""


class NoResourcesFoundError(ExtractorError):
    exit_code = 7


class NoDataSourcesFoundError(ExtractorError):
    exit_code = 7


class OutputError(ExtractorError):
    """Filtered schema could not be written."""

    exit_code = 8


class WorkspaceError(ExtractorError):
    """Temporary terraform workspace could not be created."""

    exit_code = 9
