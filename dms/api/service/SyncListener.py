"""UI collaborator interface for the sync service."""

from typing import Literal, Protocol

NoticeLevel = Literal["info", "warning", "error"]


class SyncListener(Protocol):
    """Receives refresh signals and user-visible notices."""

    def refresh(self) -> None:
        """State changed (push or pull); re-render."""
        ...

    def notify(self, level: NoticeLevel, message: str) -> None:
        """Show a non-fatal notice to the user."""
        ...


class NullListener:
    """Listener that ignores everything (library use without a UI)."""

    def refresh(self) -> None:
        pass

    def notify(self, level: NoticeLevel, message: str) -> None:
        pass
