"""
CLI commands for command/query generation.

Thin wrappers over ``cqrs_scaffold.core.use_cases.generate``. Both
commands share one option set, built by ``_make_generate_command``.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from cqrs_scaffold.core.models.artifact import ArtifactKind
from cqrs_scaffold.core.services.generators import COMMAND, QUERY


def _resolve_root_and_config(ctx: click.Context):
    """Load config and resolve the project root from context or CWD."""
    from cqrs_scaffold.core.config.loader import find_config_file, load_config, project_root

    config_path: Path | None = ctx.obj.get("config_path")
    if config_path is None:
        config_path = find_config_file()
    return project_root(config_path), load_config(config_path)


def _fail(message: str, as_json: bool) -> None:
    if as_json:
        click.echo(json.dumps({"error": message}, indent=2))
    else:
        click.secho(f"❌ {message}", fg="red")
    sys.exit(1)


def _make_generate_command(kind: ArtifactKind) -> click.Command:
    label = kind.label

    @click.command(kind.key, help=f"Generate a {kind.key} and its handler.")
    @click.argument("name", required=False, default="")
    @click.option("--path", "-p", default=None, help="Directory below the source root.")
    @click.option("--skip-import", is_flag=True, help="Don't register the handler in the module file.")
    @click.option("--flat", is_flag=True, help="Put both files directly in the target directory.")
    @click.option("--dry-run", is_flag=True, help="Show what would be written without writing.")
    @click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
    @click.pass_context
    def _generate(
        ctx: click.Context,
        name: str,
        path: str | None,
        skip_import: bool,
        flat: bool,
        dry_run: bool,
        as_json: bool,
    ) -> None:
        from cqrs_scaffold.adapters import DiskFileTree, FileTreeError
        from cqrs_scaffold.core.config.loader import ConfigError
        from cqrs_scaffold.core.models.generation import GenerationRequest
        from cqrs_scaffold.core.observability.logging_config import log_diagnostics
        from cqrs_scaffold.core.services.module_updater import ModuleUpdateError
        from cqrs_scaffold.core.use_cases.generate import (
            InputValidationError,
            generate_artifacts,
        )

        try:
            root, config = _resolve_root_and_config(ctx)
        except ConfigError as e:
            _fail(str(e), as_json)
            return

        tree = DiskFileTree(root, dry_run=dry_run)
        request = GenerationRequest(name=name, path=path, skip_import=skip_import, flat=flat)

        try:
            result = generate_artifacts(kind, request, tree, config=config)
        except InputValidationError as e:
            _fail(str(e), as_json)
            return
        except FileTreeError as e:
            _fail(f"Failed to generate {kind.key}: {e}", as_json)
            return
        except ModuleUpdateError as e:
            _fail(f"{e} (generated files were kept)", as_json)
            return

        if as_json:
            click.echo(json.dumps(result.to_dict(), indent=2))
            return

        mode_label = "[dry-run] " if result.dry_run else ""
        click.secho(f"\n⚡ {mode_label}{label}: {result.name}", fg="cyan", bold=True)
        verb = "would create" if result.dry_run else "created"
        for f in result.files:
            click.secho("   ✓ ", fg="green", nl=False)
            click.echo(f"{verb} {f.path}")

        if result.module_updated:
            verb = "would update" if result.dry_run else "updated"
            click.secho("   ✓ ", fg="green", nl=False)
            click.echo(f"{verb} {result.module_path}")
        elif result.module_skipped:
            click.secho("   ⊘ module update skipped", fg="yellow")

        log_diagnostics(result.diagnostics)
        if not ctx.obj.get("verbose"):
            for diag in result.diagnostics:
                if diag.kind == "already_registered":
                    click.echo(f"   • {diag.message}")

        if ctx.obj.get("verbose") and result.dry_run:
            for staged_path, content in tree.staged.items():
                click.echo()
                click.secho(f"   ── {staged_path}", fg="white", bold=True)
                for line in content.splitlines():
                    click.echo(f"     │ {line}")

        click.echo()

    return _generate


command = _make_generate_command(COMMAND)
query = _make_generate_command(QUERY)
