"""CLI — init, check, actions, matrix, routes."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from clinica.auth.permissions import get_checker, has_role
from clinica.auth.roles import KNOWN_ROLES, is_known_role
from clinica.config import LOG_LEVELS, OUTPUT_FORMATS, Config, ConfigError
from clinica.navigation import visible_routes

logger = logging.getLogger(__name__)


def _warn_unknown_role(role: str) -> None:
    if has_role(role) and not is_known_role(role):
        click.echo(f"Warning: unknown role {role!r}, known roles: {', '.join(KNOWN_ROLES)}", err=True)


def _use_json(config: Config, as_json: bool) -> bool:
    return as_json or config.output_format == "json"


@click.group()
@click.version_option(package_name="clinica-access")
@click.option("--config", "config_path", type=click.Path(path_type=Path), default=None, help="Config file")
@click.option("-v", "--verbose", is_flag=True, help="Log at debug level")
@click.pass_context
def main(ctx: click.Context, config_path: Path | None, verbose: bool) -> None:
    """Clinica — role-based access checks."""
    try:
        config = Config.load(config_path)
    except ConfigError as e:
        raise click.UsageError(str(e)) from e
    logging.basicConfig(
        level=logging.DEBUG if verbose else config.level,
        format="%(levelname)s %(name)s: %(message)s",
        force=True,
    )
    ctx.obj = config


@main.command()
@click.argument("role")
@click.argument("action")
@click.option("--json", "as_json", is_flag=True, help="Print the decision as JSON")
@click.pass_obj
def check(config: Config, role: str, action: str, as_json: bool) -> None:
    """Check whether ROLE may perform ACTION. Exits 1 when denied."""
    _warn_unknown_role(role)
    allowed = get_checker().can(role, action)
    logger.debug("Decision role=%r action=%r allowed=%s", role, action, allowed)

    if _use_json(config, as_json):
        click.echo(json.dumps({"_v": "1.0", "role": role, "action": action, "allowed": allowed}))
    else:
        click.echo("allowed" if allowed else "denied")

    if not allowed:
        sys.exit(1)


@main.command()
@click.argument("role")
@click.option("--json", "as_json", is_flag=True, help="Print the actions as JSON")
@click.pass_obj
def actions(config: Config, role: str, as_json: bool) -> None:
    """List the actions ROLE may perform."""
    _warn_unknown_role(role)
    allowed = get_checker().allowed_actions(role)
    logger.debug("Role %r may perform %d actions", role, len(allowed))

    if _use_json(config, as_json):
        click.echo(json.dumps({"_v": "1.0", "role": role, "actions": allowed}))
        return

    if not allowed:
        click.echo(f"No actions allowed for role {role!r}")
        return
    for action in allowed:
        click.echo(action)


@main.command()
@click.option("--json", "as_json", is_flag=True, help="Print the table as JSON")
@click.pass_obj
def matrix(config: Config, as_json: bool) -> None:
    """Show the permission table for every known role."""
    checker = get_checker()

    if _use_json(config, as_json):
        click.echo(json.dumps([entry.to_response() for entry in checker.entries()], indent=2))
        return

    table = Table(title="Permissions")
    table.add_column("Action", style="cyan")
    for role in KNOWN_ROLES:
        table.add_column(role, justify="center")
    for action in checker.actions():
        marks = ["[green]✓[/green]" if checker.can(role, action) else "[red]✗[/red]" for role in KNOWN_ROLES]
        table.add_row(action, *marks)
    Console().print(table)


@main.command()
@click.argument("role")
@click.option("--json", "as_json", is_flag=True, help="Print the routes as JSON")
@click.pass_obj
def routes(config: Config, role: str, as_json: bool) -> None:
    """List the navigation routes visible to ROLE."""
    _warn_unknown_role(role)
    visible = visible_routes(role)

    if _use_json(config, as_json):
        click.echo(json.dumps([route.to_response() for route in visible], indent=2))
        return

    if not visible:
        click.echo(f"No routes visible for role {role!r}")
        return
    table = Table(title=f"Routes for {role}")
    table.add_column("Key", style="cyan")
    table.add_column("Label")
    for route in visible:
        table.add_row(route.key, route.label)
    Console().print(table)


@main.command()
@click.option("--log-level", type=click.Choice(LOG_LEVELS, case_sensitive=False), default=None)
@click.option("--output", "output_format", type=click.Choice(OUTPUT_FORMATS, case_sensitive=False), default=None)
@click.option("--force", is_flag=True, help="Overwrite an existing config file")
@click.pass_obj
def init(config: Config, log_level: str | None, output_format: str | None, force: bool) -> None:
    """Write the config file with the given settings."""
    if config.config_path.exists() and not force:
        click.echo(f"Error: {config.config_path} already exists. Use --force to overwrite.", err=True)
        sys.exit(1)

    if log_level:
        config.log_level = log_level
    if output_format:
        config.output_format = output_format
    config.validate()
    config.save()
    logger.debug("Saved config to %s", config.config_path)
    click.echo(f"Wrote config to {config.config_path}")
