"""Process-wide display selection."""

from .CLIDisplay import CLIDisplay
from .Display import Display


class _DisplayContext:
    def __init__(self):
        self._displays: dict[str, Display] = {}

    def get_display(self, mode: str = "cli") -> Display:
        if mode != "cli":
            raise ValueError(f"Unsupported display mode: {mode!r}")
        if mode not in self._displays:
            self._displays[mode] = CLIDisplay()
        return self._displays[mode]


display_context = _DisplayContext()
