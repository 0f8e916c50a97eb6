"""Editable single-line input field with a cursor."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class InputData:
    """The text typed at the prompt and the cursor's position inside it."""

    _field: str = ""
    _cursor: int = 0

    def push(self, char: str) -> None:
        """Insert ``char`` at the cursor and move the cursor past it."""
        self._field = self._field[: self._cursor] + char + self._field[self._cursor :]
        self.move_right()

    def backspace(self) -> None:
        """Remove the character before the cursor, if there is one."""
        if self._cursor == 0:
            return
        index = self._cursor - 1
        self._field = self._field[:index] + self._field[index + 1 :]
        self.move_left()

    def move_left(self) -> None:
        """Move the cursor one place left, stopping at the start."""
        self._cursor = min(max(self._cursor - 1, 0), len(self._field))

    def move_right(self) -> None:
        """Move the cursor one place right, stopping at the end of the text."""
        self._cursor = min(self._cursor + 1, len(self._field))

    def move_start(self) -> None:
        """Put the cursor at the start of the text."""
        self._cursor = 0

    def clear(self) -> None:
        """Empty the field and reset the cursor."""
        self._field = ""
        self._cursor = 0

    def text(self) -> str:
        """Return the current contents of the field."""
        return self._field

    def cursor(self) -> int:
        """Return the cursor position."""
        return self._cursor