"""Temporary terraform workspace holding a single provider requirement."""

import shutil
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from tf_schema_extractor.errors import WorkspaceError
from tf_schema_extractor.provider import ProviderSpec

CONFIG_FILENAME = "main.tf"


def render_config(provider: ProviderSpec) -> str:
    """Render a `terraform` block requiring exactly this provider."""
    return f'''terraform {{
  required_providers {{
    {provider.alias} = {{
      source  = "{provider.name}"
      version = "{provider.version}"
    }}
  }}
}}
'''


def provision_workspace(provider: ProviderSpec) -> Path:
    """Create a temp directory and write the provider config into it.

    The caller owns the directory and must remove it with cleanup_workspace.
    """
    try:
        path = Path(tempfile.mkdtemp(prefix="tf-"))
    except OSError as e:
        raise WorkspaceError(f"Could not create workspace directory: {e}") from e
    try:
        (path / CONFIG_FILENAME).write_text(render_config(provider), encoding="utf-8")
    except OSError as e:
        cleanup_workspace(path)
        raise WorkspaceError(f"Could not write {path / CONFIG_FILENAME}: {e}") from e
    return path


def cleanup_workspace(path: Path) -> None:
    """Remove the workspace directory, ignoring any errors."""
    shutil.rmtree(path, ignore_errors=True)


@contextmanager
def workspace(provider: ProviderSpec) -> Iterator[Path]:
    path = provision_workspace(provider)
    try:
        yield path
    finally:
        cleanup_workspace(path)
