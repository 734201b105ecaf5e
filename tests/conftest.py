from __future__ import annotations

import io
from collections.abc import Sequence

import pytest
from rich.console import Console

from ytmp3_setup.reporter import Reporter
from ytmp3_setup.types import CommandResult, Platform, SetupContext


class FakeRunner:
    """In-memory CommandRunner: scripted results, recorded calls."""

    def __init__(
        self,
        on_path: set[str] | None = None,
        results: dict[tuple[str, ...], tuple[int, str]] | None = None,
    ) -> None:
        self.on_path = set(on_path or ())
        self.results = dict(results or {})
        self.calls: list[tuple[str, ...]] = []
        self.lookups: list[str] = []

    def run(self, command: Sequence[str], *, capture: bool = False) -> CommandResult:
        argv = tuple(command)
        self.calls.append(argv)
        code, output = self.results.get(argv, (0, ""))
        return CommandResult(argv, code, output)

    def which(self, name: str) -> bool:
        self.lookups.append(name)
        return name in self.on_path


class ScriptedReporter(Reporter):
    """Reporter writing to a buffer and answering prompts from a list."""

    def __init__(self, answers: Sequence[str] = ()) -> None:
        self.buffer = io.StringIO()
        super().__init__(Console(file=self.buffer, width=200, color_system=None))
        self.answers = list(answers)
        self.questions: list[str] = []

    def ask(self, question: str, choices: str = "Y/n") -> str:
        self.questions.append(question)
        return self.answers.pop(0)

    @property
    def text(self) -> str:
        return self.buffer.getvalue()


@pytest.fixture
def make_ctx():
    def _make(platform: Platform = Platform.POSIX, **kw) -> SetupContext:
        kw.setdefault("kernel", "Linux" if platform is Platform.POSIX else "Msys")
        return SetupContext(platform=platform, **kw)

    return _make


@pytest.fixture
def reporter() -> ScriptedReporter:
    return ScriptedReporter()


@pytest.fixture
def fake_runner_cls():
    return FakeRunner


@pytest.fixture
def reporter_cls():
    return ScriptedReporter
