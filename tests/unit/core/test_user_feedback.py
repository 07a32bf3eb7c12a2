"""Tests for InteractiveFeedback output channels."""

import pytest

from ghmerge.core.user_feedback import InteractiveFeedback, UserFeedback


def test_feedback_levels() -> None:
    # Fatal errors are reported by the CLI entry point, not through feedback
    assert UserFeedback.__abstractmethods__ == {"info", "success", "warning", "debug"}


def test_interactive_feedback_writes_to_stderr_only(capsys: pytest.CaptureFixture[str]) -> None:
    feedback = InteractiveFeedback()

    feedback.info("Pushing to origin...")
    feedback.success("done")
    feedback.warning("careful")
    feedback.debug("tracing")

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Pushing to origin..." in captured.err
    assert "done" in captured.err
    assert "careful" in captured.err
    assert "[verbose] tracing" in captured.err
