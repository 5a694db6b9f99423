"""Shared helpers for CLI commands."""

from __future__ import annotations

from typing import TYPE_CHECKING, NoReturn, TypeVar

import typer

from hcswap.cli.context import GlobalOptions
from hcswap.core.errors import ErrorCode
from hcswap.core.result import Err, Result
from hcswap.output.console import Style
from hcswap.output.errors import print_swap_error, swap_error_exit_code
from hcswap.releases.errors import SwapError
from hcswap.releases.products import Tool, parse_tool

if TYPE_CHECKING:
    from hcswap.cli.context import CLIContext


T = TypeVar("T")


def exit_on_error[T](result: Result[T, SwapError], ctx: CLIContext) -> T:
    """Return the Ok value, or print the error and exit with its code.

    Replaces the pattern:
        if isinstance(result, Err):
            print_swap_error(result.error, ctx.console)
            raise typer.Exit(code=swap_error_exit_code(result.error))
        value = result.value
    """
    if isinstance(result, Err):
        print_swap_error(result.error, ctx.console)
        raise typer.Exit(code=swap_error_exit_code(result.error))
    return result.value


def require_tool(name: str, ctx: CLIContext) -> Tool:
    tool = parse_tool(name)
    if tool is None:
        ctx.console.error(f"Unknown tool: {name}")
        ctx.console.print(f"Available: {', '.join(t.canonical for t in Tool)}", Style.DIM)
        exit_with_code(int(ErrorCode.USER_ERROR))
    return tool


def global_options(typer_ctx: typer.Context) -> GlobalOptions | None:
    obj = typer_ctx.find_root().obj
    return obj if isinstance(obj, GlobalOptions) else None


def exit_with_code(code: int) -> NoReturn:
    """Exit with given code. Explicit helper for clarity."""
    raise typer.Exit(code=code)
