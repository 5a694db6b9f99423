from __future__ import annotations

from typing import TYPE_CHECKING

from hcswap.cli.commands._helpers import exit_on_error, exit_with_code
from hcswap.cli.context import GlobalOptions, build_context
from hcswap.cli.lifecycle import LifecycleEngine
from hcswap.cli.selector import TerminalChooser, is_interactive_terminal
from hcswap.core.errors import ErrorCode
from hcswap.output.console import Style

if TYPE_CHECKING:
    from hcswap.cli.selector import Chooser


def run_session(options: GlobalOptions | None = None, chooser: Chooser | None = None) -> None:
    """Interactive session: pick a tool, then install, switch or uninstall."""
    ctx = build_context(options)

    if chooser is None:
        if not is_interactive_terminal():
            ctx.console.error("the interactive menu needs a terminal")
            ctx.console.print("hint: use `hc-swap install|use|uninstall TOOL VERSION`", Style.DIM)
            exit_with_code(int(ErrorCode.USER_ERROR))
        chooser = TerminalChooser()

    engine = LifecycleEngine(
        chooser=chooser,
        console=ctx.console,
        paths=ctx.paths,
        catalog=ctx.catalog(),
        fetcher=ctx.fetcher(),
        activator=ctx.activator(),
        loop_after_activate=ctx.config.menu.loop_after_activate,
    )
    try:
        result = engine.run()
    except KeyboardInterrupt:
        ctx.console.newline()
        exit_with_code(int(ErrorCode.INTERRUPTED))
    exit_on_error(result, ctx)
