"""
pkgfilter — CLI entrypoint.

Usage:
    python -m pkgfilter.main --help
    python -m pkgfilter.main detect
    python -m pkgfilter.main select catalog.yml --root /opt/extension
"""

from __future__ import annotations

import json
import os
import sys
from pathlib import Path

import click

from pkgfilter import __version__
from pkgfilter.core.observability.logging_config import (
    ENV_FILE,
    ENV_FILE_LEVEL,
    resolve_level,
    setup_logging,
)


@click.group()
@click.version_option(version=__version__, prog_name="pkgfilter")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.pass_context
def cli(ctx: click.Context, verbose: bool, quiet: bool, debug: bool) -> None:
    """pkgfilter — pick the catalog components this machine still needs."""
    ctx.ensure_object(dict)
    ctx.obj["quiet"] = quiet

    if debug:
        flag_level = "DEBUG"
    elif verbose:
        flag_level = "INFO"
    elif quiet:
        flag_level = "ERROR"
    else:
        flag_level = None

    setup_logging(
        level=resolve_level(flag_level),
        log_file=os.environ.get(ENV_FILE),
        log_file_level=os.environ.get(ENV_FILE_LEVEL),
        quiet_third_party=not debug,
    )


@cli.command()
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
def detect(as_json: bool) -> None:
    """Show the detected platform and architecture."""
    from pkgfilter.core.services.runtime_detection import detect_runtime_target

    target = detect_runtime_target()

    if as_json:
        click.echo(json.dumps(target.model_dump(), indent=2))
        return

    click.echo(f"Platform:     {target.platform}")
    click.echo(f"Architecture: {target.architecture}")


@cli.command("select")
@click.argument("catalog", type=click.Path(dir_okay=False, path_type=Path))
@click.option(
    "--root",
    "install_root",
    required=True,
    type=click.Path(file_okay=False, path_type=Path),
    help="Install root that catalog install paths are relative to.",
)
@click.option("--platform", "platform_name", default=None, help="Override detected platform.")
@click.option("--arch", "architecture", default=None, help="Override detected architecture.")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def select_cmd(
    ctx: click.Context,
    catalog: Path,
    install_root: Path,
    platform_name: str | None,
    architecture: str | None,
    as_json: bool,
) -> None:
    """List catalog components that match this system and are not installed."""
    from pkgfilter.core.use_cases.select import build_target, run_select

    target = build_target(platform_name, architecture)
    result = run_select(catalog, install_root, target=target)

    # JSON mode keeps stdout machine-readable: the error rides in the document
    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        sys.exit(1 if result.error else 0)

    if result.error:
        click.secho(f"❌ {result.error}", fg="red", err=True)
        sys.exit(1)

    quiet = ctx.obj.get("quiet", False)
    if not quiet:
        click.secho(
            f"Target {result.target}: {len(result.selected)} of "
            f"{result.catalog_size} components to install",
            fg="cyan", bold=True,
        )

    for component in result.selected:
        click.echo(f"  • {component.label}  → {component.install_path}")


if __name__ == "__main__":
    cli()
