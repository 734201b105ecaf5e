"""Errors that end the setup procedure with a specific exit status."""

from __future__ import annotations

NODEJS_URL = "https://nodejs.org"


def shell_status(code: int) -> int:
    """Exit status a shell would report for a child's return code.

    Signal deaths (negative codes) become 128+N; 0 becomes 1 since the caller
    is reporting a failure.
    """
    if code < 0:
        return 128 - code
    return code or 1


class SetupError(Exception):
    """Base error; the CLI prints it and exits with ``exit_code``."""

    def __init__(self, message: str, *, exit_code: int = 1, hint: str | None = None) -> None:
        super().__init__(message)
        self.exit_code = exit_code
        self.hint = hint


class UnsupportedPlatformError(SetupError):
    def __init__(self, kernel: str) -> None:
        super().__init__(
            f"Unsupported platform: {kernel}",
            hint=f"You can install Node.js manually from <{NODEJS_URL}>",
        )
        self.kernel = kernel


class PackageManagerNotFoundError(SetupError):
    def __init__(self) -> None:
        super().__init__(
            "Sorry, we cannot determine package manager on your system",
            hint=f"You can install Node.js manually from <{NODEJS_URL}>",
        )


class InvalidAnswerError(SetupError):
    def __init__(self, value: str) -> None:
        super().__init__(f"Invalid value: {value}")
        self.value = value


class InstallFailedError(SetupError):
    """A package manager or npm returned non-zero.

    The subprocess status is propagated as the exit code (see :func:`shell_status`).
    """

    def __init__(self, what: str, exit_code: int) -> None:
        super().__init__(
            f"An error occurred during installation of {what}",
            exit_code=shell_status(exit_code),
        )
        self.what = what
