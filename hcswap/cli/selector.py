"""Single-choice prompts.

The lifecycle engine only needs ``choose(label, options)``, which returns
the picked option or None when the user cancels. ``TerminalChooser`` draws
an arrow-key menu on a TTY; ``ScriptedChooser`` replays canned answers.
"""

from __future__ import annotations

import os
import shutil
import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Literal, Protocol, TypeVar

T = TypeVar("T")

__all__ = [
    "Chooser",
    "TerminalChooser",
    "ScriptedChooser",
    "SelectorOption",
    "SelectorResult",
    "is_interactive_terminal",
    "select_one",
]


class Chooser(Protocol):
    def choose(self, label: str, options: Sequence[str]) -> str | None: ...


@dataclass(frozen=True, slots=True)
class SelectorOption[T]:
    value: T
    label: str
    detail: str | None = None


@dataclass(frozen=True, slots=True)
class SelectorResult[T]:
    action: Literal["select", "cancel"]
    value: T | None
    index: int


def is_interactive_terminal() -> bool:
    return bool(sys.stdin.isatty() and sys.stdout.isatty())


def _color_enabled() -> bool:
    if not is_interactive_terminal():
        return False
    if os.getenv("NO_COLOR") is not None:
        return False
    return os.getenv("TERM", "").lower() != "dumb"


def _paint(text: str, *codes: str) -> str:
    if not _color_enabled() or not codes:
        return text
    return f"\x1b[{';'.join(codes)}m{text}\x1b[0m"


def _clear() -> None:
    sys.stdout.write("\x1b[2J\x1b[H")


def _read_key() -> str:
    if os.name == "nt":
        import msvcrt

        ch = msvcrt.getwch()
        if ch in ("\r", "\n"):
            return "enter"
        if ch in ("q", "Q", "\x03", "\x1b"):
            return "cancel"
        if ch in ("\x00", "\xe0"):
            ch2 = msvcrt.getwch()
            if ch2 == "H":
                return "up"
            if ch2 == "P":
                return "down"
        return "other"

    import termios
    import tty

    fd = sys.stdin.fileno()
    old = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        ch = sys.stdin.read(1)
        if ch in ("\r", "\n"):
            return "enter"
        # Raw mode swallows SIGINT; treat Ctrl-C like q
        if ch in ("q", "Q", "\x03"):
            return "cancel"
        if ch in ("k", "K"):
            return "up"
        if ch in ("j", "J"):
            return "down"
        if ch == "\x1b":
            if sys.stdin.read(1) == "[":
                c3 = sys.stdin.read(1)
                if c3 == "A":
                    return "up"
                if c3 == "B":
                    return "down"
            return "cancel"
        return "other"
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)


def _truncate(text: str, width: int) -> str:
    if width <= 0:
        return ""
    if len(text) <= width:
        return text
    if width <= 3:
        return text[:width]
    return text[: width - 3] + "..."


def _pad(text: str, width: int) -> str:
    return _truncate(text, width).ljust(width)


def _render(*, title: str, options: Sequence[SelectorOption[object]], index: int) -> None:
    _clear()
    print(_paint(title, "1", "96"))
    print()

    cols = max(40, min(100, shutil.get_terminal_size((80, 24)).columns))
    label_w = max(12, min(40, max(len(o.label) for o in options)))
    detail_w = max(0, cols - label_w - 10)

    for i, opt in enumerate(options):
        marker = ">" if i == index else " "
        line = f" {marker} {_pad(opt.label, label_w)}"
        if opt.detail:
            line += "  " + _truncate(opt.detail, detail_w)
        if i == index:
            print(_paint(line, "1", "30", "46"))
        else:
            print(_paint(line, "97"))

    print()
    print(
        _paint("Keys:", "1", "96")
        + " "
        + _paint("Up/Down", "1", "97")
        + " + Enter, "
        + _paint("q", "1", "97")
        + ": cancel"
    )
    sys.stdout.flush()


def select_one[T](
    *,
    title: str,
    options: Sequence[SelectorOption[T]],
    initial_index: int = 0,
) -> SelectorResult[T]:
    if not options:
        raise ValueError("selector requires at least one option")
    if not is_interactive_terminal():
        raise RuntimeError("interactive selector requires a TTY")

    idx = max(0, min(initial_index, len(options) - 1))
    casted: list[SelectorOption[object]] = [
        SelectorOption(value=o.value, label=o.label, detail=o.detail) for o in options
    ]

    while True:
        _render(title=title, options=casted, index=idx)
        key = _read_key()

        if key == "up":
            idx = (idx - 1) % len(options)
        elif key == "down":
            idx = (idx + 1) % len(options)
        elif key == "enter":
            return SelectorResult(action="select", value=options[idx].value, index=idx)
        elif key == "cancel":
            return SelectorResult(action="cancel", value=None, index=idx)


class TerminalChooser:
    """Arrow-key menu on the controlling terminal."""

    def choose(self, label: str, options: Sequence[str]) -> str | None:
        if not options:
            return None
        result = select_one(
            title=label,
            options=[SelectorOption(value=o, label=o) for o in options],
        )
        _clear()
        sys.stdout.flush()
        if result.action == "cancel":
            return None
        return result.value


class ScriptedChooser:
    """Chooser that answers from a fixed script.

    Each call consumes the next answer; None means "cancel". Once the
    script is exhausted every prompt is cancelled. Prompts are recorded in
    ``prompts`` as ``(label, options)``.

    Usage:
        chooser = ScriptedChooser(["Terraform", "Uninstall", "1.5.0"])
    """

    def __init__(self, answers: Iterable[str | None]) -> None:
        self._answers = list(answers)
        self.prompts: list[tuple[str, list[str]]] = []

    @property
    def remaining(self) -> int:
        return len(self._answers)

    def choose(self, label: str, options: Sequence[str]) -> str | None:
        self.prompts.append((label, list(options)))
        if not self._answers:
            return None
        answer = self._answers.pop(0)
        if answer is not None and answer not in options:
            raise ValueError(f"scripted answer {answer!r} is not one of {list(options)!r}")
        return answer
