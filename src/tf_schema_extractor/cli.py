"""CLI entry point for tf-schema-extractor."""

import sys
from pathlib import Path

import click

from tf_schema_extractor.errors import ExtractorError
from tf_schema_extractor.provider import ProviderSpec
from tf_schema_extractor.registry import DEFAULT_REGISTRY_URL, RegistryClient, resolve_version
from tf_schema_extractor.schema.base import FilterSpec
from tf_schema_extractor.schema.filter import filter_schema, render_schema, write_schema
from tf_schema_extractor.terraform.runner import DEFAULT_TERRAFORM_BIN, acquire_schema
from tf_schema_extractor.terraform.workspace import workspace


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="tf-schema-extractor")
@click.option("-p", "--provider", required=True, help="Provider name, e.g. aws. Adds hashicorp if namespace not provided.")
@click.option("-v", "--providerVersion", "provider_version", default=None, help="The version of the provider to use. Defaults to latest.")
@click.option("-r", "--resources", multiple=True, help="A resource to extract, repeatable. Use '*' for all.")
@click.option("-d", "--data", multiple=True, help="A data source to extract, repeatable. Use '*' for all.")
@click.option("-o", "--out", type=click.Path(dir_okay=False, path_type=Path), default=None, help="The output file. Defaults to stdout.")
@click.option("--terraform-bin", envvar="TERRAFORM_BIN", default=DEFAULT_TERRAFORM_BIN, show_default=True, help="terraform executable to run.")
@click.option("--registry-url", envvar="TF_REGISTRY_URL", default=DEFAULT_REGISTRY_URL, show_default=True, help="Terraform registry base URL.")
@click.option("-q", "--quiet", is_flag=True, default=False, help="Only print the schema and errors.")
def main(
    provider: str,
    provider_version: str | None,
    resources: tuple[str, ...],
    data: tuple[str, ...],
    out: Path | None,
    terraform_bin: str,
    registry_url: str,
    quiet: bool,
):
    """Extract a filtered subset of a terraform provider's JSON schema."""
    filter_spec = FilterSpec(resources=list(resources), data_sources=list(data))
    if filter_spec.is_empty():
        raise click.UsageError("Please provide at least one resource or data to extract")

    def progress(message: str) -> None:
        if not quiet:
            click.echo(message, err=True)

    try:
        # Step 1: Resolve version
        progress(f"Resolving version of {provider}...")
        version = resolve_version(provider, provider_version, RegistryClient(base_url=registry_url))
        spec = ProviderSpec.create(provider, version)
        progress(f"Using {spec.name} {spec.version}")

        with workspace(spec) as path:
            # Step 2: Acquire schema
            progress(f"Running terraform in {path}...")
            raw_schema = acquire_schema(path, terraform_bin)

            # Step 3: Filter
            filtered = filter_schema(raw_schema, filter_spec)

        # Step 4: Emit
        if out:
            write_schema(filtered, out)
            progress(f"Schema saved to {out}")
        else:
            click.echo(render_schema(filtered, indent=2))
    except ExtractorError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(e.exit_code)
