"""Setup orchestration: platform → node check/install → npm package."""

from __future__ import annotations

import logging

from ytmp3_setup.installer.package import install_package
from ytmp3_setup.reporter import Reporter
from ytmp3_setup.runner.commands import CommandRunner
from ytmp3_setup.types import SetupContext

logger = logging.getLogger(__name__)


def run_setup(ctx: SetupContext, runner: CommandRunner, reporter: Reporter) -> None:
    """Run the whole procedure once.

    Raises :class:`~ytmp3_setup.errors.SetupError` on any fatal condition; the
    caller turns it into an exit status.
    """
    logger.info(
        "setup started",
        extra={"platform": ctx.platform.value, "kernel": ctx.kernel, "dry_run": ctx.dry_run},
    )
    install_package(ctx, runner, reporter)
    logger.info("setup finished", extra={"package": ctx.package})
