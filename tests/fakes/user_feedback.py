"""Fake UserFeedback that records messages instead of printing them."""

from ghmerge.core.user_feedback import UserFeedback


class FakeUserFeedback(UserFeedback):
    """Records every message with its level for test assertions."""

    def __init__(self) -> None:
        self._messages: list[tuple[str, str]] = []

    def info(self, message: str) -> None:
        self._messages.append(("info", message))

    def success(self, message: str) -> None:
        self._messages.append(("success", message))

    def warning(self, message: str) -> None:
        self._messages.append(("warning", message))

    def debug(self, message: str) -> None:
        self._messages.append(("debug", message))

    @property
    def messages(self) -> list[tuple[str, str]]:
        return self._messages.copy()

    def of_level(self, level: str) -> list[str]:
        """Messages recorded at one level."""
        return [message for lvl, message in self._messages if lvl == level]

    @property
    def text(self) -> str:
        """All messages joined with newlines, for substring assertions."""
        return "\n".join(message for _, message in self._messages)
