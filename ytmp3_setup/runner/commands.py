"""Command runners: execute external commands, or only display them (dry run).

Every step of the setup procedure goes through a :class:`CommandRunner`, so
dry-run mode is a matter of handing the steps a :class:`DryRunRunner`.
"""

from __future__ import annotations

import logging
import shutil
import subprocess
from collections.abc import Callable, Sequence
from typing import Protocol

from ytmp3_setup.reporter import Reporter
from ytmp3_setup.types import CommandResult

logger = logging.getLogger(__name__)


class CommandRunner(Protocol):
    def run(self, command: Sequence[str], *, capture: bool = False) -> CommandResult: ...

    def which(self, name: str) -> bool: ...


def _has(cmd: str) -> bool:
    return shutil.which(cmd) is not None


class SubprocessRunner:
    """Runs commands for real, blocking until each one exits.

    With ``capture=True`` stdout is collected into the result; otherwise the
    child inherits the terminal so package-manager progress stays visible.
    """

    def run(self, command: Sequence[str], *, capture: bool = False) -> CommandResult:
        argv = tuple(command)
        logger.debug("running command", extra={"command": " ".join(argv)})
        # npm is a .cmd shim on Windows; it only launches by its resolved path
        executable = shutil.which(argv[0]) or argv[0]
        try:
            proc = subprocess.run(
                [executable, *argv[1:]],
                check=False,
                stdout=subprocess.PIPE if capture else None,
                stderr=subprocess.DEVNULL if capture else None,
                text=True,
            )
        except FileNotFoundError:
            # shell statuses: 127 not found, 126 found but not executable
            logger.warning("command not found", extra={"command": argv[0]})
            return CommandResult(argv, 127)
        except OSError as exc:
            logger.warning(
                "command not executable", extra={"command": argv[0], "error": str(exc)}
            )
            return CommandResult(argv, 126)
        logger.debug(
            "command finished", extra={"command": " ".join(argv), "exit_code": proc.returncode}
        )
        return CommandResult(argv, proc.returncode, proc.stdout or "")

    def which(self, name: str) -> bool:
        return _has(name)


class DryRunRunner:
    """Displays each command line instead of running it.

    Results are marked ``simulated`` so callers can skip branches that depend
    on real output. Executable lookups are echoed as ``command -v`` and
    answered from the search path; they never spawn a process.
    """

    def __init__(self, reporter: Reporter, lookup: Callable[[str], bool] = _has) -> None:
        self.reporter = reporter
        self.lookup = lookup

    def run(self, command: Sequence[str], *, capture: bool = False) -> CommandResult:
        argv = tuple(command)
        self.reporter.command(argv)
        logger.debug("dry run", extra={"command": " ".join(argv), "dry_run": True})
        return CommandResult(argv, 0, simulated=True)

    def which(self, name: str) -> bool:
        self.reporter.command(("command", "-v", name))
        return self.lookup(name)


def make_runner(dry_run: bool, reporter: Reporter) -> CommandRunner:
    if dry_run:
        return DryRunRunner(reporter)
    return SubprocessRunner()
