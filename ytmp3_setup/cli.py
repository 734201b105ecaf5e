"""ytmp3-setup CLI: install Node.js if needed, then the ytmp3-js npm package.

Usage:
- ytmp3-setup            (live run)
- ytmp3-setup --dry-run  (print the commands instead of running them; also -n, --dry)

Settings come from YTMP3_SETUP_PACKAGE, YTMP3_SETUP_COMMAND,
YTMP3_SETUP_MIN_NODE and YTMP3_SETUP_LOG_LEVEL.
"""

from __future__ import annotations

import typer
from pydantic import ValidationError

from ytmp3_setup.core import run_setup
from ytmp3_setup.detect.platform import detect_platform, kernel_name
from ytmp3_setup.errors import SetupError
from ytmp3_setup.logging import get_logger
from ytmp3_setup.reporter import Reporter
from ytmp3_setup.runner.commands import make_runner
from ytmp3_setup.types import SetupContext, SetupSettings

app = typer.Typer(add_completion=False, help="Install Node.js and the ytmp3-js npm module")
reporter = Reporter()
logger = get_logger()


@app.command()
def main(
    dry_run: bool = typer.Option(
        False, "-n", "--dry", "--dry-run", help="Show the commands without running them"
    ),
) -> None:
    try:
        settings = SetupSettings.from_env()
    except ValidationError as exc:
        reporter.error(f"Invalid configuration: {exc.errors()[0]['msg']}")
        raise typer.Exit(code=1) from exc
    logger.setLevel(settings.log_level)

    kernel = kernel_name()
    ctx = SetupContext.from_settings(
        settings, platform=detect_platform(kernel), kernel=kernel, dry_run=dry_run
    )
    runner = make_runner(dry_run, reporter)

    try:
        run_setup(ctx, runner, reporter)
    except SetupError as exc:
        logger.error(str(exc), extra={"exit_code": exc.exit_code})
        reporter.error(str(exc))
        if exc.hint:
            reporter.tip(exc.hint)
        raise typer.Exit(code=exc.exit_code) from exc


if __name__ == "__main__":
    app()
