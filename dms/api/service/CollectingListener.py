"""Listener that records notices for command output."""

from dataclasses import dataclass, field

from .SyncListener import NoticeLevel


@dataclass
class CollectingListener:
    """Collects notices into ``errors``/``warnings`` lists and counts refreshes."""

    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    infos: list[str] = field(default_factory=list)
    refreshes: int = 0

    def refresh(self) -> None:
        self.refreshes += 1

    def notify(self, level: NoticeLevel, message: str) -> None:
        if level == "error":
            self.errors.append(message)
        elif level == "warning":
            self.warnings.append(message)
        else:
            self.infos.append(message)
