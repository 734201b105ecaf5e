from __future__ import annotations

import pytest

from ytmp3_setup.detect.node_version import NODE_MAJOR_COMMAND, check_node, parse_major_version
from ytmp3_setup.errors import (
    InstallFailedError,
    InvalidAnswerError,
    PackageManagerNotFoundError,
    UnsupportedPlatformError,
)
from ytmp3_setup.installer.node import APT_INSTALL, CHOCO_INSTALL, ensure_node, install_node
from ytmp3_setup.runner.commands import DryRunRunner
from ytmp3_setup.types import Platform


@pytest.mark.parametrize(
    ("text", "expected"),
    [("18\n", 18), ("v20.11.1", 20), ("14.21.3\n", 14), ("", 0), ("garbage", 0), ("\n\n", 0)],
)
def test_parse_major_version(text: str, expected: int) -> None:
    assert parse_major_version(text) == expected


def test_current_node_needs_nothing(make_ctx, fake_runner_cls, reporter) -> None:
    runner = fake_runner_cls(on_path={"node"}, results={NODE_MAJOR_COMMAND: (0, "18\n")})
    assert ensure_node(make_ctx(), runner, reporter) is False
    assert APT_INSTALL not in runner.calls
    assert reporter.questions == []


def test_missing_node_installs_without_prompt(make_ctx, fake_runner_cls, reporter) -> None:
    runner = fake_runner_cls(results={("node", "--version"): (0, "v20.0.0\n")})
    assert ensure_node(make_ctx(), runner, reporter) is True
    assert runner.calls.count(APT_INSTALL) == 1
    assert reporter.questions == []
    assert "Node.js v20.0.0 has been installed" in reporter.text


@pytest.mark.parametrize("answer", ["", "y", "YES"])
def test_outdated_node_prompts_once_and_installs(
    answer, make_ctx, fake_runner_cls, reporter_cls
) -> None:
    rep = reporter_cls(answers=[answer])
    runner = fake_runner_cls(on_path={"node"}, results={NODE_MAJOR_COMMAND: (0, "14\n")})
    assert ensure_node(make_ctx(), runner, rep) is True
    assert len(rep.questions) == 1
    assert runner.calls.count(APT_INSTALL) == 1


def test_outdated_node_declined(make_ctx, fake_runner_cls, reporter_cls) -> None:
    rep = reporter_cls(answers=["n"])
    runner = fake_runner_cls(on_path={"node"}, results={NODE_MAJOR_COMMAND: (0, "12\n")})
    assert ensure_node(make_ctx(), runner, rep) is False
    assert APT_INSTALL not in runner.calls
    assert "https://nodejs.org" in rep.text


def test_invalid_answer_aborts_before_install(make_ctx, fake_runner_cls, reporter_cls) -> None:
    rep = reporter_cls(answers=["maybe"])
    runner = fake_runner_cls(on_path={"node"}, results={NODE_MAJOR_COMMAND: (0, "10\n")})
    with pytest.raises(InvalidAnswerError):
        ensure_node(make_ctx(), runner, rep)
    assert APT_INSTALL not in runner.calls


def test_unparseable_version_counts_as_outdated(make_ctx, fake_runner_cls, reporter_cls) -> None:
    rep = reporter_cls(answers=["no"])
    runner = fake_runner_cls(on_path={"node"}, results={NODE_MAJOR_COMMAND: (0, "oops")})
    assert check_node(make_ctx(), runner, rep) is False
    assert len(rep.questions) == 1


def test_failed_version_query_counts_as_outdated(make_ctx, fake_runner_cls, reporter_cls) -> None:
    rep = reporter_cls(answers=[""])
    runner = fake_runner_cls(on_path={"node"}, results={NODE_MAJOR_COMMAND: (1, "")})
    assert check_node(make_ctx(), runner, rep) is True


def test_minimum_major_is_configurable(make_ctx, fake_runner_cls, reporter_cls) -> None:
    rep = reporter_cls(answers=[""])
    runner = fake_runner_cls(on_path={"node"}, results={NODE_MAJOR_COMMAND: (0, "18")})
    assert check_node(make_ctx(min_node_major=20), runner, rep) is True
    assert "19.x and older" in rep.text


def test_posix_always_uses_apt(make_ctx, fake_runner_cls, reporter) -> None:
    runner = fake_runner_cls(on_path={"choco"})
    install_node(make_ctx(Platform.POSIX), runner, reporter)
    assert runner.calls[0] == APT_INSTALL
    assert runner.lookups == []


def test_win32_prefers_apt_then_choco(make_ctx, fake_runner_cls, reporter) -> None:
    runner = fake_runner_cls(on_path={"apt", "choco"})
    install_node(make_ctx(Platform.WIN32), runner, reporter)
    assert runner.calls[0] == APT_INSTALL

    runner = fake_runner_cls(on_path={"choco"})
    install_node(make_ctx(Platform.WIN32), runner, reporter)
    assert runner.calls[0] == CHOCO_INSTALL
    assert "`choco`" in reporter.text


def test_win32_without_manager_fails(make_ctx, fake_runner_cls, reporter) -> None:
    runner = fake_runner_cls()
    with pytest.raises(PackageManagerNotFoundError) as exc:
        install_node(make_ctx(Platform.WIN32), runner, reporter)
    assert exc.value.exit_code == 1
    assert "nodejs.org" in (exc.value.hint or "")
    assert runner.calls == []


def test_unknown_platform_is_rejected(make_ctx, fake_runner_cls, reporter) -> None:
    runner = fake_runner_cls(on_path={"apt"})
    with pytest.raises(UnsupportedPlatformError, match="FreeBSD"):
        install_node(make_ctx(Platform.UNKNOWN, kernel="FreeBSD"), runner, reporter)
    assert runner.calls == []


def test_install_failure_propagates_status(make_ctx, fake_runner_cls, reporter) -> None:
    runner = fake_runner_cls(results={APT_INSTALL: (100, "")})
    with pytest.raises(InstallFailedError) as exc:
        install_node(make_ctx(), runner, reporter)
    assert exc.value.exit_code == 100
    assert ("node", "--version") not in runner.calls


def test_dry_run_treats_node_as_present(make_ctx, reporter) -> None:
    runner = DryRunRunner(reporter, lookup=lambda name: False)
    assert check_node(make_ctx(dry_run=True), runner, reporter) is False
    assert reporter.questions == []
    assert reporter.text.splitlines()[1:] == [
        "> command -v node",
        "ytmp3-setup: Verifying the node version ...",
        "> " + " ".join(NODE_MAJOR_COMMAND),
    ]
