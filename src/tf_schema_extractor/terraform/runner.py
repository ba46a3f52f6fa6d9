"""Runs terraform in a workspace to export provider schemas.

Both commands block until terraform exits; no timeout is applied.
"""

import subprocess
from pathlib import Path

from tf_schema_extractor.errors import InitError, ParseError, ProcessError, SpawnError

DEFAULT_TERRAFORM_BIN = "terraform"

INIT_ARGS = ["init"]
SCHEMA_ARGS = ["providers", "schema", "-json"]


def _run(terraform_bin: str, args: list[str], cwd: Path) -> subprocess.CompletedProcess:
    try:
        return subprocess.run(
            [terraform_bin, *args],
            capture_output=True,
            encoding="utf-8",
            cwd=cwd,
        )
    except OSError as e:
        raise SpawnError(f"Could not start {terraform_bin}: {e}") from e
    except UnicodeDecodeError as e:
        raise ParseError(f"terraform {' '.join(args)} output is not valid UTF-8: {e}") from e


def run_init(workspace: Path, terraform_bin: str = DEFAULT_TERRAFORM_BIN) -> None:
    """Run `terraform init` so the provider plugin is installed."""
    result = _run(terraform_bin, INIT_ARGS, workspace)
    if result.returncode != 0:
        message = f"terraform exited with code {result.returncode}"
        if result.stderr.strip():
            message += f"\n{result.stderr.strip()}"
        raise InitError(message, returncode=result.returncode)


def run_schema(workspace: Path, terraform_bin: str = DEFAULT_TERRAFORM_BIN) -> str:
    """Run `terraform providers schema -json` and return its stdout.

    Any stderr output fails the step, even when stdout holds a complete
    document and terraform exited 0.
    """
    result = _run(terraform_bin, SCHEMA_ARGS, workspace)
    if result.stderr:
        raise ProcessError(result.stderr, returncode=result.returncode)
    if result.returncode != 0:
        raise ProcessError(
            f"terraform exited with code {result.returncode}",
            returncode=result.returncode,
        )
    return result.stdout


def acquire_schema(workspace: Path, terraform_bin: str = DEFAULT_TERRAFORM_BIN) -> str:
    """Initialize the workspace, then export the provider schema as JSON text."""
    run_init(workspace, terraform_bin)
    return run_schema(workspace, terraform_bin)
