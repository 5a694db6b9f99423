from __future__ import annotations

import typer

from hcswap.cli.commands._helpers import exit_on_error, global_options, require_tool
from hcswap.cli.context import build_context
from hcswap.output.console import Style
from hcswap.releases.activate import link_path
from hcswap.releases.store import Missing, Populated, active_version, inspect_store


def list_installed(
    ctx: typer.Context,
    tool_name: str = typer.Argument(..., metavar="TOOL", help="terraform, packer or vault"),
) -> None:
    """List installed versions of a tool."""
    cli = build_context(global_options(ctx))
    tool = require_tool(tool_name, cli)
    store = cli.paths.store_dir(tool.canonical)

    state = exit_on_error(inspect_store(store), cli)
    match state:
        case Missing():
            cli.console.print(f"No {tool.canonical} installations found ({store})", Style.DIM)
        case Populated(versions=versions):
            active = active_version(link_path(tool, cli.paths.bin_path), store)
            for version in versions:
                if version == active:
                    cli.console.print(f"* {version}", Style.SUCCESS)
                else:
                    cli.console.print(f"  {version}")
        case _:
            cli.console.print(f"No {tool.canonical} versions installed ({store})", Style.DIM)


def available(
    ctx: typer.Context,
    tool_name: str = typer.Argument(..., metavar="TOOL", help="terraform, packer or vault"),
    limit: int | None = typer.Option(
        None,
        "--limit",
        min=1,
        help="Show up to this many entries, in listing order (default from config: 10).",
    ),
) -> None:
    """List versions published on the release index."""
    cli = build_context(global_options(ctx))
    tool = require_tool(tool_name, cli)

    versions = exit_on_error(cli.catalog(limit).list_versions(tool), cli)
    if not versions:
        cli.console.warning(f"No {tool.canonical} versions available")
        return
    for version in versions:
        cli.console.print(version)
