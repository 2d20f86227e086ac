"""Abstract display interface."""

from abc import ABC, abstractmethod
from typing import Any


class Display(ABC):
    """Where command announcements, results and structured output go."""

    @abstractmethod
    def status(self, message: str, **kwargs) -> None:
        pass

    @abstractmethod
    def success(self, message: str, **kwargs) -> None:
        pass

    @abstractmethod
    def error(self, message: str, **kwargs) -> None:
        pass

    @abstractmethod
    def warning(self, message: str, **kwargs) -> None:
        pass

    @abstractmethod
    def info(self, message: str, **kwargs) -> None:
        pass

    @abstractmethod
    def json_output(self, data: Any, **kwargs) -> None:
        """Print structured command output (``format`` is ``json`` or ``yaml``)."""
