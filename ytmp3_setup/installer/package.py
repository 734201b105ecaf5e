"""Global npm package installation."""

from __future__ import annotations

import logging

from ytmp3_setup.errors import InstallFailedError
from ytmp3_setup.installer.node import ensure_node
from ytmp3_setup.reporter import Reporter
from ytmp3_setup.runner.commands import CommandRunner
from ytmp3_setup.types import SetupContext

NPM_LIST_GLOBAL = ("npm", "list", "--global")

logger = logging.getLogger(__name__)


def npm_install_command(package: str) -> tuple[str, ...]:
    return ("npm", "install", "--global", f"{package}@latest")


def is_listed(listing: str, package: str) -> bool:
    # case-sensitive; the trailing "@" keeps "foo" from matching "foo-bar"
    return f"{package}@" in listing


def install_package(ctx: SetupContext, runner: CommandRunner, reporter: Reporter) -> bool:
    """Make sure ``ctx.package`` is installed globally.

    Node.js is checked (and installed if needed) first; errors from that step
    propagate and the package step is never reached. Returns True if npm
    install ran, False when the package was already present.
    """
    ensure_node(ctx, runner, reporter)

    reporter.info(f"Checking {ctx.package} module in npm installed packages ...")
    listing = runner.run(NPM_LIST_GLOBAL, capture=True)
    if not listing.simulated and is_listed(listing.output, ctx.package):
        reporter.info(f"{ctx.package} module has been installed previously")
        _usage_tip(ctx, reporter)
        return False

    reporter.info(f"Installing latest {ctx.package} module from registry ...")
    result = runner.run(npm_install_command(ctx.package))
    if result.simulated:
        return True
    if not result.ok:
        logger.error(
            "npm install failed", extra={"package": ctx.package, "exit_code": result.exit_code}
        )
        raise InstallFailedError(ctx.package, result.exit_code)

    reporter.info(f"{ctx.package} module has successfully installed")
    _usage_tip(ctx, reporter)
    return True


def _usage_tip(ctx: SetupContext, reporter: Reporter) -> None:
    cmd = ctx.usage_command
    reporter.tip(f"Use `{cmd}` command to run the module, or `{cmd} -?` for help")
