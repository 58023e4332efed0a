"""
cqrs-scaffold — CLI entrypoint.

Usage:
    python -m cqrs_scaffold.main --help
    python -m cqrs_scaffold.main command "create user"
    python -m cqrs_scaffold.main query get-user --path users --flat
    python -m cqrs_scaffold.main config check
"""

from __future__ import annotations

import json
import os
import sys
from pathlib import Path

import click

from cqrs_scaffold import __version__
from cqrs_scaffold.core.observability.logging_config import (
    ENV_FILE,
    ENV_FILE_LEVEL,
    resolve_level,
    setup_logging,
)


@click.group()
@click.version_option(version=__version__, prog_name="cqrs-scaffold")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False),
    default=None,
    help="Path to cqrs-scaffold.yml (default: auto-detect).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    config_path: str | None,
) -> None:
    """cqrs-scaffold — generate NestJS CQRS commands, queries and handlers."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["debug"] = debug
    ctx.obj["config_path"] = Path(config_path) if config_path else None

    # ── Logging setup (once, at process start) ──────────────────
    setup_logging(
        level=resolve_level(debug=debug, verbose=verbose, quiet=quiet),
        log_file=os.environ.get(ENV_FILE),
        log_file_level=os.environ.get(ENV_FILE_LEVEL),
    )


@cli.group()
def config() -> None:
    """Scaffold configuration commands."""


@config.command("check")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def config_check(ctx: click.Context, as_json: bool) -> None:
    """Validate cqrs-scaffold.yml configuration."""
    from cqrs_scaffold.core.use_cases.config_check import check_config

    result = check_config(config_path=ctx.obj.get("config_path"))

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        sys.exit(0 if result.valid else 1)
        return

    if result.valid:
        assert result.config is not None  # guaranteed when valid
        click.secho("✅ Configuration is valid", fg="green", bold=True)
        if result.config_path:
            click.echo(f"   File:          {result.config_path}")
        click.echo(f"   Source root:   {result.config.source_root}")
        click.echo(f"   Module suffix: {result.config.module_suffix}")
        click.echo(f"   Flat layout:   {result.config.flat}")
        click.echo(f"   Skip import:   {result.config.skip_import}")
    else:
        click.secho("❌ Configuration errors:", fg="red", bold=True)
        for err in result.errors:
            click.echo(f"   • {err}")

    if result.warnings and not ctx.obj.get("quiet"):
        click.echo()
        click.secho("⚠️  Warnings:", fg="yellow")
        for warn in result.warnings:
            click.echo(f"   • {warn}")

    if not result.valid:
        click.echo()
        sys.exit(1)

    click.echo()


# ── Register generation commands from cqrs_scaffold/ui/cli/ ────────

from cqrs_scaffold.ui.cli.generate import command, query  # noqa: E402

cli.add_command(command)
cli.add_command(query)


if __name__ == "__main__":
    cli()
