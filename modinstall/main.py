"""
modinstall — CLI entrypoint.

Usage:
    modinstall --help
    modinstall resolve requests --reinstall
    modinstall resolve pip --python /usr/bin/python3 --json
    modinstall supported
    modinstall installers

Commands are printed, never run.
"""

from __future__ import annotations

import json
import shlex
import sys
from pathlib import Path

import click

from modinstall import __version__
from modinstall.core.errors import ModInstallError
from modinstall.core.models.environment import (
    EnvironmentType,
    InterpreterInfo,
    PythonVersion,
    ResourceScope,
    is_resource,
)
from modinstall.core.models.install import ModuleInstallFlags
from modinstall.core.models.product import Product
from modinstall.core.observability.logging_config import setup_logging

_ENV_TYPES = [t.value for t in EnvironmentType]


@click.group()
@click.version_option(version=__version__, prog_name="modinstall")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Only report errors.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False),
    default=None,
    help="Path to .modinstall.yml (default: auto-detect).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    config_path: str | None,
) -> None:
    """modinstall — resolve the command that installs a module with pip."""
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = Path(config_path) if config_path else None

    if debug:
        level = "DEBUG"
    elif verbose:
        level = "INFO"
    elif quiet:
        level = "ERROR"
    else:
        level = None
    setup_logging(level=level)


def _python_options(f):
    f = click.option(
        "--env-type",
        type=click.Choice(_ENV_TYPES, case_sensitive=False),
        default=None,
        help="Environment kind of --python.",
    )(f)
    f = click.option(
        "--python-version",
        default=None,
        help="Version of --python, e.g. 3.11.4.",
    )(f)
    f = click.option(
        "--python",
        "python_path",
        default=None,
        help="Target interpreter (default: the workspace's active interpreter).",
    )(f)
    return f


def _load(ctx: click.Context):
    """Settings + default registry, or exit 1 on a settings error."""
    from modinstall.adapters import build_services
    from modinstall.core.config.settings import load_settings
    from modinstall.installers.registry import default_registry

    try:
        settings = load_settings(ctx.obj.get("config_path"))
    except ModInstallError as e:
        click.secho(f"❌ {e}", fg="red", err=True)
        sys.exit(1)

    services = build_services(settings)
    return settings, services, default_registry(services)


def _target(
    settings,
    python_path: str | None,
    python_version: str | None,
    env_type: str | None,
) -> ResourceScope | InterpreterInfo:
    if python_path:
        return InterpreterInfo(
            path=python_path,
            version=PythonVersion.parse(python_version) if python_version else None,
            env_type=EnvironmentType.parse(env_type),
        )
    root = settings.source.parent if settings.source else Path.cwd()
    return ResourceScope(uri=root.resolve().as_uri())


def _as_product(module: str) -> Product | str:
    try:
        return Product(module)
    except ValueError:
        return module


@cli.command()
@click.argument("module")
@_python_options
@click.option("--reinstall", is_flag=True, help="Force a reinstall.")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def resolve(
    ctx: click.Context,
    module: str,
    python_path: str | None,
    python_version: str | None,
    env_type: str | None,
    reinstall: bool,
    as_json: bool,
) -> None:
    """Print the command that installs MODULE."""
    settings, services, registry = _load(ctx)
    env = _target(settings, python_path, python_version, env_type)
    flags = ModuleInstallFlags.REINSTALL if reinstall else ModuleInstallFlags.NONE

    try:
        command = registry.resolve(_as_product(module), env, flags)
    except ModInstallError as e:
        if as_json:
            click.echo(json.dumps({"error": str(e)}, indent=2))
        else:
            click.secho(f"❌ {e}", fg="red", err=True)
        sys.exit(1)

    argv = command.as_argv(_interpreter_for(services, env))

    if as_json:
        data = command.model_dump(mode="json")
        data["argv"] = argv
        click.echo(json.dumps(data, indent=2))
        return

    click.echo(shlex.join(argv))


def _interpreter_for(services, env: ResourceScope | InterpreterInfo) -> str:
    if not is_resource(env):
        return env.path
    active = services.interpreters.get_active_interpreter(env)
    return active.path if active else "python"


@cli.command()
@_python_options
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def supported(
    ctx: click.Context,
    python_path: str | None,
    python_version: str | None,
    env_type: str | None,
    as_json: bool,
) -> None:
    """Show which installers support the target environment."""
    settings, _services, registry = _load(ctx)
    env = _target(settings, python_path, python_version, env_type)
    status = registry.installer_status(env)

    if as_json:
        click.echo(json.dumps(status, indent=2))
        return

    for entry in status.values():
        marker = click.style("✓", fg="green") if entry["supported"] else click.style("✗", fg="red")
        click.echo(f"  {marker} {entry['display_name']} (priority {entry['priority']})")


@cli.command()
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def installers(ctx: click.Context, as_json: bool) -> None:
    """List registered installers, highest precedence first."""
    _settings, _services, registry = _load(ctx)
    entries = [
        {
            "name": i.name,
            "display_name": i.display_name,
            "type": i.type.value,
            "priority": i.priority,
        }
        for i in registry.list_installers()
    ]

    if as_json:
        click.echo(json.dumps(entries, indent=2))
        return

    for entry in entries:
        click.echo(f"  • {entry['display_name']} [{entry['type']}] priority {entry['priority']}")


def main() -> None:
    cli(obj={})


if __name__ == "__main__":
    main()
