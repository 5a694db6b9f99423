"""Interactive install/switch/uninstall session.

Steps:

    select_tool -> inspect_store -> first_install            (store missing)
                                 -> menu -> <version>         (activate)
                                         -> install_new  -> inspect_store
                                         -> uninstall    -> inspect_store
                                         -> Exit / cancel

Installing into a fresh store and picking an installed version both end
the session. Install New and Uninstall change the store, so they go back to
inspect_store and show the updated menu. Cancelling any prompt ends the
session normally.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, replace
from enum import StrEnum
from pathlib import Path
from typing import TYPE_CHECKING

from hcswap.cli.session_fsm import FINISH, StepOutcome, advance, run_state_machine
from hcswap.core.result import Err, Ok, Result
from hcswap.output.console import Style
from hcswap.releases.activate import link_path
from hcswap.releases.errors import StoreError, SwapError
from hcswap.releases.products import Tool, parse_tool
from hcswap.releases.store import Missing, Populated, active_version, inspect_store
from hcswap.releases.uninstall import uninstall

if TYPE_CHECKING:
    from hcswap.cli.selector import Chooser
    from hcswap.core.config import PathsConfig
    from hcswap.output.console import ConsoleProtocol
    from hcswap.releases.activate import Activator
    from hcswap.releases.catalog import CatalogClient
    from hcswap.releases.fetch import ReleaseFetcher

__all__ = ["LifecycleEngine", "Session", "Step", "INSTALL_NEW", "UNINSTALL", "EXIT"]

INSTALL_NEW = "Install New"
UNINSTALL = "Uninstall"
EXIT = "Exit"

Remover = Callable[[Tool, Path, str], Result[Path, StoreError]]


class Step(StrEnum):
    SELECT_TOOL = "select_tool"
    INSPECT_STORE = "inspect_store"
    FIRST_INSTALL = "first_install"
    MENU = "menu"
    INSTALL_NEW = "install_new"
    UNINSTALL = "uninstall"


@dataclass(frozen=True, slots=True)
class Session:
    step: Step
    tool: Tool | None = None
    versions: tuple[str, ...] = ()

    def require_tool(self) -> Tool:
        if self.tool is None:
            raise ValueError(f"step {self.step} needs a selected tool")
        return self.tool


class LifecycleEngine:
    def __init__(
        self,
        *,
        chooser: Chooser,
        console: ConsoleProtocol,
        paths: PathsConfig,
        catalog: CatalogClient,
        fetcher: ReleaseFetcher,
        activator: Activator,
        loop_after_activate: bool = False,
        remover: Remover = uninstall,
    ) -> None:
        self._chooser = chooser
        self._console = console
        self._paths = paths
        self._catalog = catalog
        self._fetcher = fetcher
        self._activator = activator
        self._loop_after_activate = loop_after_activate
        self._remover = remover
        self.visited: list[Step] = []

    def run(self, tool: Tool | None = None) -> Result[None, SwapError]:
        """Run one session. Starts at tool selection unless ``tool`` is given."""
        if tool is None:
            start = Session(step=Step.SELECT_TOOL)
        else:
            start = Session(step=Step.INSPECT_STORE, tool=tool)
        self.visited = [start.step]

        return run_state_machine(
            initial_state=start,
            get_step=lambda s: s.step,
            handlers={
                Step.SELECT_TOOL: self._select_tool,
                Step.INSPECT_STORE: self._inspect_store,
                Step.FIRST_INSTALL: self._first_install,
                Step.MENU: self._menu,
                Step.INSTALL_NEW: self._install_new,
                Step.UNINSTALL: self._uninstall,
            },
            on_transition=lambda s: self.visited.append(s.step),
        )

    def _store(self, tool: Tool) -> Path:
        return self._paths.store_dir(tool.canonical)

    def _select_tool(self, session: Session) -> Result[StepOutcome[Session], SwapError]:
        choice = self._chooser.choose("Tool Select", Tool.display_names())
        tool = parse_tool(choice) if choice is not None else None
        if tool is None:
            return Ok(FINISH)
        return Ok(advance(Session(step=Step.INSPECT_STORE, tool=tool)))

    def _inspect_store(self, session: Session) -> Result[StepOutcome[Session], SwapError]:
        tool = session.require_tool()
        store = self._store(tool)
        state = inspect_store(store)
        if isinstance(state, Err):
            return state

        match state.value:
            case Missing():
                self._console.print(f"No {tool.canonical} installations found...")
                return Ok(advance(Session(step=Step.FIRST_INSTALL, tool=tool)))
            case Populated(versions=versions):
                active = active_version(link_path(tool, self._paths.bin_path), store)
                if active is not None:
                    self._console.print(f"Active {tool.canonical}: v{active}", Style.DIM)
                return Ok(advance(Session(step=Step.MENU, tool=tool, versions=versions)))
            case _:
                return Ok(advance(Session(step=Step.MENU, tool=tool)))

    def _first_install(self, session: Session) -> Result[StepOutcome[Session], SwapError]:
        tool = session.require_tool()
        store = self._store(tool)
        self._console.print(f"Setting up standard versioning directories at {store}")
        try:
            store.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            return Err(StoreError(path=store, message=f"Cannot create version store ({e})"))

        installed = self._pick_and_install(tool, "Select version to install")
        if isinstance(installed, Err):
            return installed
        return Ok(FINISH)

    def _menu(self, session: Session) -> Result[StepOutcome[Session], SwapError]:
        tool = session.require_tool()
        options = [*session.versions, INSTALL_NEW, UNINSTALL, EXIT]
        choice = self._chooser.choose("Select Version", options)

        if choice is None or choice == EXIT:
            return Ok(FINISH)
        if choice == INSTALL_NEW:
            return Ok(advance(replace(session, step=Step.INSTALL_NEW)))
        if choice == UNINSTALL:
            return Ok(advance(replace(session, step=Step.UNINSTALL)))

        activated = self._activator.activate(tool, self._store(tool), choice, self._paths.bin_path)
        if isinstance(activated, Err):
            return activated
        if self._loop_after_activate:
            return Ok(advance(Session(step=Step.INSPECT_STORE, tool=tool)))
        return Ok(FINISH)

    def _install_new(self, session: Session) -> Result[StepOutcome[Session], SwapError]:
        tool = session.require_tool()
        installed = self._pick_and_install(tool, "Select Version")
        if isinstance(installed, Err):
            return installed
        if installed.value is None:
            return Ok(FINISH)
        return Ok(advance(Session(step=Step.INSPECT_STORE, tool=tool)))

    def _uninstall(self, session: Session) -> Result[StepOutcome[Session], SwapError]:
        tool = session.require_tool()
        choice = self._chooser.choose("Select Version", [*session.versions, EXIT])
        if choice is None or choice == EXIT:
            return Ok(FINISH)

        store = self._store(tool)
        link = link_path(tool, self._paths.bin_path)
        was_active = active_version(link, store) == choice

        self._console.print(f"Uninstalling {tool.canonical} v{choice}...", Style.BOLD)
        removed = self._remover(tool, store, choice)
        if isinstance(removed, Err):
            return removed
        self._console.success("Uninstall complete!")
        if was_active:
            self._console.warning(
                f"{link} still points at the removed v{choice}; select another version to fix it"
            )
        return Ok(advance(Session(step=Step.INSPECT_STORE, tool=tool)))

    def _pick_and_install(self, tool: Tool, label: str) -> Result[str | None, SwapError]:
        """Choose a catalog version, install and activate it.

        Ok(None) means nothing was installed (no versions or prompt cancelled).
        """
        listed = self._catalog.list_versions(tool)
        if isinstance(listed, Err):
            return listed
        if not listed.value:
            self._console.warning(f"No {tool.canonical} versions available")
            return Ok(None)

        version = self._chooser.choose(label, listed.value)
        if version is None:
            return Ok(None)

        store = self._store(tool)
        fetched = self._fetcher.download(tool, store, [version])
        if isinstance(fetched, Err):
            return fetched
        activated = self._activator.activate(tool, store, version, self._paths.bin_path)
        if isinstance(activated, Err):
            return activated
        return Ok(version)
