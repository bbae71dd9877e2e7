"""Command-line interface for Pathfinder.

This module defines the CLI commands using the Click framework.

Commands:
- paths: Print the candidate paths for an executable.
- find: Print where an executable was found.
- suite: Resolve every executable of the application suite.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

import click

from . import __version__
from .candidates import ExecutableQuery, Flavor
from .config import ConfigError, load_config, load_config_file
from .discovery import PathFinder
from .platforms import Platform

# Companion executables a server console looks for on startup.
SUITE_EXECUTABLES = ("Interface", "domain-server", "assignment-client")

_FLAVOR_CHOICES = [flavor.value for flavor in Flavor]
_PLATFORM_CHOICES = [platform.value for platform in Platform]


def _query_options(func):
    """Attach the options shared by every discovery command."""
    func = click.option(
        "--platform",
        "platform_name",
        type=click.Choice(_PLATFORM_CHOICES),
        default=None,
        help="Simulate another platform's layout (default: this one)",
    )(func)
    func = click.option(
        "--packaged", is_flag=True, help="Search an installed layout, not a build tree"
    )(func)
    func = click.option(
        "--flavor",
        type=click.Choice(_FLAVOR_CHOICES),
        default=Flavor.LOCAL_DEBUG.value,
        show_default=True,
        help="Build configuration to prefer in a build tree",
    )(func)
    return func


@click.group()
@click.version_option(version=__version__, prog_name="pathfinder")
@click.option("-v", "--verbose", is_flag=True, help="Log every probed path")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Configuration file (default: ./pathfinder.yaml if present)",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, config_path: Path | None):
    """Locate the companion executables of the application suite."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        if config_path is not None:
            config = load_config_file(config_path)
        else:
            config = load_config(Path.cwd())
    except ConfigError as exc:
        raise click.ClickException(str(exc)) from None
    ctx.obj = config


def _finder(ctx: click.Context, platform_name: str | None) -> PathFinder:
    platform = Platform.parse(platform_name) if platform_name else None
    return PathFinder.from_config(ctx.obj, platform=platform)


@cli.command()
@click.argument("name")
@_query_options
@click.option("--json", "as_json", is_flag=True, help="Print a JSON array")
@click.pass_context
def paths(
    ctx: click.Context,
    name: str,
    flavor: str,
    packaged: bool,
    platform_name: str | None,
    as_json: bool,
):
    """Print the candidate paths for NAME, most preferred first."""
    query = ExecutableQuery(name, Flavor.parse(flavor), packaged)
    candidates = _finder(ctx, platform_name).search_paths(query)
    if as_json:
        click.echo(json.dumps(candidates, indent=2))
        return
    for candidate in candidates:
        click.echo(candidate)


@cli.command()
@click.argument("name")
@_query_options
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON")
@click.pass_context
def find(
    ctx: click.Context,
    name: str,
    flavor: str,
    packaged: bool,
    platform_name: str | None,
    as_json: bool,
):
    """Print where NAME was found; exit with status 1 if it was not."""
    query = ExecutableQuery(name, Flavor.parse(flavor), packaged)
    result = _finder(ctx, platform_name).resolve(query)
    if as_json:
        payload = {"name": name, "path": result.path, "searched": result.searched}
        click.echo(json.dumps(payload, indent=2))
    elif result.found:
        click.echo(result.path)
    if not result.found:
        if not as_json:
            click.echo(click.style(f"{name} not found.", fg="red", bold=True), err=True)
            for candidate in result.searched:
                click.echo(f"  searched: {candidate}", err=True)
        raise SystemExit(1)


@cli.command()
@_query_options
@click.pass_context
def suite(ctx: click.Context, flavor: str, packaged: bool, platform_name: str | None):
    """Resolve every executable of the application suite."""
    finder = _finder(ctx, platform_name)
    missing = 0
    width = max(len(name) for name in SUITE_EXECUTABLES)
    for name in SUITE_EXECUTABLES:
        result = finder.resolve(ExecutableQuery(name, Flavor.parse(flavor), packaged))
        if result.found:
            click.echo(f"{name:<{width}}  {result.path}")
        else:
            missing += 1
            click.echo(f"{name:<{width}}  " + click.style("not found", fg="yellow"))
    if missing:
        raise SystemExit(1)


def main():
    """Entry point for the CLI application."""
    cli()
