"""Subprocess execution with Result-based error handling.

The only process hc-swap starts is the freshly activated tool, to print its
version banner. Output goes straight to the terminal.
"""

from __future__ import annotations

import subprocess
from dataclasses import dataclass
from pathlib import Path

from hcswap.core.result import Err, Ok, Result

__all__ = ["ProcessError", "run_streaming"]


@dataclass(frozen=True, slots=True)
class ProcessError:
    """Error from a failed subprocess execution.

    Attributes:
        command: The command that was executed.
        returncode: Exit code, or -1 if the process could not be started.
        message: Details (OS error text or timeout notice).
    """

    command: tuple[str, ...]
    returncode: int
    message: str = ""

    def __str__(self) -> str:
        cmd_str = " ".join(self.command[:3])
        if len(self.command) > 3:
            cmd_str += " ..."
        if self.returncode < 0:
            return f"{cmd_str} could not run: {self.message}"
        return f"{cmd_str} failed (exit {self.returncode})"


def run_streaming(
    cmd: list[str],
    cwd: Path | None = None,
    *,
    timeout: float | None = 30.0,
) -> Result[None, ProcessError]:
    """Execute a command, letting stdout/stderr pass through to the terminal.

    Args:
        cmd: Command and arguments to execute.
        cwd: Working directory (current directory if None).
        timeout: Maximum seconds to wait (None for no limit).

    Returns:
        Ok(None) on exit code 0, Err(ProcessError) otherwise.
    """
    try:
        proc = subprocess.run(
            cmd,
            cwd=str(cwd) if cwd is not None else None,
            timeout=timeout,
            check=False,
        )
    except subprocess.TimeoutExpired:
        return Err(
            ProcessError(
                command=tuple(cmd),
                returncode=-1,
                message=f"timed out after {timeout}s",
            )
        )
    except OSError as e:
        return Err(ProcessError(command=tuple(cmd), returncode=-1, message=str(e)))

    if proc.returncode != 0:
        return Err(ProcessError(command=tuple(cmd), returncode=proc.returncode))

    return Ok(None)
