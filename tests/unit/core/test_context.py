"""Tests for production context wiring."""

from pathlib import Path

import pytest

from ghmerge.core.context import ExecutionContext, create_context
from ghmerge.core.git_ops import RealGitOps
from ghmerge.core.github_ops import RealGitHubOps
from ghmerge.core.global_config import GlobalConfig
from ghmerge.core.prompt_ops import GumPromptOps
from ghmerge.core.shell_ops import RealShellOps
from ghmerge.core.user_feedback import InteractiveFeedback
from tests.fakes.context import create_test_context
from tests.fakes.user_feedback import FakeUserFeedback


def test_create_context_wires_real_gateways(tmp_path: Path) -> None:
    ctx = create_context(execution=ExecutionContext(), config_path=tmp_path / "missing.toml")

    assert isinstance(ctx.shell_ops, RealShellOps)
    assert isinstance(ctx.git_ops, RealGitOps)
    assert isinstance(ctx.github_ops, RealGitHubOps)
    assert isinstance(ctx.prompt_ops, GumPromptOps)
    assert isinstance(ctx.feedback, InteractiveFeedback)
    assert ctx.config == GlobalConfig()
    assert ctx.cwd == Path.cwd()


def test_create_context_keeps_execution_flags(tmp_path: Path) -> None:
    execution = ExecutionContext(verbose=True, dry_run=True)
    ctx = create_context(execution=execution, config_path=tmp_path / "missing.toml")
    assert ctx.execution == execution


def test_create_context_loads_config(tmp_path: Path) -> None:
    path = tmp_path / "config.toml"
    path.write_text('remote = "upstream"\n', encoding="utf-8")

    ctx = create_context(execution=ExecutionContext(), config_path=path)

    assert ctx.config.remote == "upstream"


def test_create_context_rejects_bad_config(tmp_path: Path) -> None:
    path = tmp_path / "config.toml"
    path.write_text("remote = [\n", encoding="utf-8")

    with pytest.raises(ValueError):
        create_context(execution=ExecutionContext(), config_path=path)


def test_debug_gated_by_verbose() -> None:
    quiet = FakeUserFeedback()
    create_test_context(feedback=quiet).debug("hidden")
    assert quiet.messages == []

    loud = FakeUserFeedback()
    create_test_context(feedback=loud, verbose=True).debug("shown")
    assert loud.messages == [("debug", "shown")]
