from __future__ import annotations

import typer

from hcswap.cli.commands._helpers import exit_on_error, global_options, require_tool
from hcswap.cli.context import build_context
from hcswap.releases.activate import link_path
from hcswap.releases.store import active_version
from hcswap.releases.uninstall import uninstall as remove_version

_TOOL_ARG = typer.Argument(..., metavar="TOOL", help="terraform, packer or vault")


def install(
    ctx: typer.Context,
    tool_name: str = _TOOL_ARG,
    versions: list[str] = typer.Argument(..., metavar="VERSION...", help="Versions to install."),
    activate: bool = typer.Option(
        True,
        "--activate/--no-activate",
        help="Point the tool's symlink at the last installed version.",
    ),
) -> None:
    """Download and install one or more versions, in order.

    The first failure stops the batch; versions installed before it are kept.
    """
    cli = build_context(global_options(ctx))
    tool = require_tool(tool_name, cli)
    store = cli.paths.store_dir(tool.canonical)

    exit_on_error(cli.fetcher().download(tool, store, versions), cli)
    if activate:
        exit_on_error(cli.activator().activate(tool, store, versions[-1], cli.paths.bin_path), cli)


def use(
    ctx: typer.Context,
    tool_name: str = _TOOL_ARG,
    version: str = typer.Argument(..., help="Installed version to activate."),
) -> None:
    """Activate an installed version."""
    cli = build_context(global_options(ctx))
    tool = require_tool(tool_name, cli)
    store = cli.paths.store_dir(tool.canonical)

    if not (store / version).is_dir():
        cli.console.warning(f"{tool.canonical} v{version} is not installed in {store}")
    exit_on_error(cli.activator().activate(tool, store, version, cli.paths.bin_path), cli)


def uninstall(
    ctx: typer.Context,
    tool_name: str = _TOOL_ARG,
    version: str = typer.Argument(..., help="Version to remove."),
) -> None:
    """Remove an installed version. The active symlink is left in place."""
    cli = build_context(global_options(ctx))
    tool = require_tool(tool_name, cli)
    store = cli.paths.store_dir(tool.canonical)
    link = link_path(tool, cli.paths.bin_path)
    was_active = active_version(link, store) == version

    removed = exit_on_error(remove_version(tool, store, version), cli)
    cli.console.success(f"Removed {removed}")
    if was_active:
        cli.console.warning(f"{link} still points at the removed v{version}")
