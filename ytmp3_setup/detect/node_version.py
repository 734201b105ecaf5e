"""Node.js presence and version check.

The runtime reports its own major version via ``node --print``. Anything
unparseable counts as version 0, i.e. too old.
"""

from __future__ import annotations

import logging

from ytmp3_setup.prompt import ask_yes_no
from ytmp3_setup.reporter import Reporter
from ytmp3_setup.runner.commands import CommandRunner
from ytmp3_setup.types import Answer, SetupContext

NODE_MAJOR_COMMAND = ("node", "--print", "process.versions.node.split('.')[0]")

logger = logging.getLogger(__name__)


def parse_major_version(text: str) -> int:
    first = text.strip().splitlines()[0].strip() if text.strip() else ""
    try:
        return int(first.lstrip("v").split(".")[0])
    except ValueError:
        return 0


def node_major_version(runner: CommandRunner) -> int | None:
    """Return the installed major version, or None when only simulated."""
    result = runner.run(NODE_MAJOR_COMMAND, capture=True)
    if result.simulated:
        return None
    if not result.ok:
        return 0
    return parse_major_version(result.output)


def check_node(ctx: SetupContext, runner: CommandRunner, reporter: Reporter) -> bool:
    """Return True when Node.js has to be installed.

    Missing → True without asking. Older than ``ctx.min_node_major`` → ask
    once; a "no" prints the manual-install tip and returns False. Raises
    :class:`~ytmp3_setup.errors.InvalidAnswerError` on garbage input. In a
    dry run node counts as present.
    """
    reporter.info("Checking node package ...")
    # a dry run treats the lookup as succeeded, whatever PATH holds
    found = runner.which("node") or ctx.dry_run
    if not found:
        logger.info("node not found on PATH")
        return True

    reporter.info("Verifying the node version ...")
    major = node_major_version(runner)
    if major is None or major >= ctx.min_node_major:
        return False

    logger.info("node too old", extra={"major": major, "minimum": ctx.min_node_major})
    reporter.error(f"Not supported Node.js version {ctx.min_node_major - 1}.x and older")
    answer = ask_yes_no(reporter, "Do you want to install the latest version of Node.js?")
    if answer is Answer.NO:
        reporter.tip("You can install manually from <https://nodejs.org>")
        return False
    return True
