from __future__ import annotations

from pathlib import Path

import typer

from hcswap import __version__
from hcswap.cli.commands.manage import install, uninstall, use
from hcswap.cli.commands.session import run_session
from hcswap.cli.commands.versions import available, list_installed
from hcswap.cli.context import GlobalOptions


app = typer.Typer(
    add_completion=False,
    no_args_is_help=False,
    rich_markup_mode="rich",
    help="Install and switch between versions of Terraform, Packer and Vault.",
)


# Commands
app.command("list")(list_installed)
app.command()(available)
app.command()(install)
app.command()(use)
app.command()(uninstall)


@app.callback(invoke_without_command=True)
def _main(  # pyright: ignore[reportUnusedFunction]
    ctx: typer.Context,
    version: bool = typer.Option(False, "--version", help="Show version and exit."),
    config: Path | None = typer.Option(
        None,
        "--config",
        help="Config file (default: $HCSWAP_CONFIG or the user config dir).",
    ),
    app_dir: Path | None = typer.Option(
        None,
        "--app-dir",
        help="Root holding the <tool>-versions stores (overrides config).",
    ),
    bin_dir: Path | None = typer.Option(
        None,
        "--bin-dir",
        help="Directory for the active-version symlinks (overrides config).",
    ),
    limit: int | None = typer.Option(
        None,
        "--limit",
        min=1,
        help="How many versions the catalog lists (overrides config).",
    ),
) -> None:
    if version:
        typer.echo(__version__)
        raise typer.Exit(code=0)

    options = GlobalOptions(config=config, app_dir=app_dir, bin_dir=bin_dir, limit=limit)
    ctx.obj = options

    if ctx.invoked_subcommand is None:
        run_session(options)


def main() -> None:
    app()
