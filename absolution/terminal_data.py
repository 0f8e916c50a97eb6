"""Scroll-back log of messages shown in the terminal panel."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class TerminalLog:
    """Ordered list of lines written to the game terminal."""

    _lines: list[str] = field(default_factory=list)

    def push(self, line: str) -> None:
        """Append a line to the log."""
        self._lines.append(line)

    def pop(self) -> str:
        """Remove and return the newest line; raises IndexError when empty."""
        if not self._lines:
            raise IndexError("terminal log is empty")
        return self._lines.pop()

    def lines(self) -> list[str]:
        """Return a copy of all lines, oldest first."""
        return list(self._lines)