"""Node.js installation through the system package manager.

Manager choice, made once per run:
- posix: `apt-get`, unconditionally
- win32: `apt-get` if `apt` is on PATH, else `choco` if present, else fail
"""

from __future__ import annotations

import logging

from ytmp3_setup.detect.node_version import check_node
from ytmp3_setup.errors import (
    InstallFailedError,
    PackageManagerNotFoundError,
    UnsupportedPlatformError,
)
from ytmp3_setup.reporter import Reporter
from ytmp3_setup.runner.commands import CommandRunner
from ytmp3_setup.types import CommandResult, Platform, SetupContext

APT_INSTALL = ("apt-get", "install", "nodejs", "-y")
CHOCO_INSTALL = ("choco", "install", "nodejs", "-y")

logger = logging.getLogger(__name__)


def select_install_command(ctx: SetupContext, runner: CommandRunner) -> tuple[str, ...]:
    if ctx.platform is Platform.POSIX:
        return APT_INSTALL
    if ctx.platform is Platform.UNKNOWN:
        raise UnsupportedPlatformError(ctx.kernel or "unknown")
    if runner.which("apt"):
        return APT_INSTALL
    if runner.which("choco"):
        return CHOCO_INSTALL
    raise PackageManagerNotFoundError()


def install_node(ctx: SetupContext, runner: CommandRunner, reporter: Reporter) -> CommandResult:
    command = select_install_command(ctx, runner)
    manager = "apt" if command[0] == "apt-get" else "choco"
    reporter.info(f"Installing node using `{manager}` command ...")

    result = runner.run(command)
    if result.simulated:
        return result
    if not result.ok:
        logger.error("node install failed", extra={"exit_code": result.exit_code})
        raise InstallFailedError("Node.js", result.exit_code)

    version = runner.run(("node", "--version"), capture=True).output.strip()
    reporter.info(f"Node.js {version or '(unknown version)'} has been installed")
    return result


def ensure_node(ctx: SetupContext, runner: CommandRunner, reporter: Reporter) -> bool:
    """Install Node.js when missing or outdated (and the operator agrees).

    Returns True if an installation was attempted.
    """
    if not check_node(ctx, runner, reporter):
        return False
    install_node(ctx, runner, reporter)
    return True
