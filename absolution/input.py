"""Turns key presses into edits of the prompt and command execution."""

from __future__ import annotations

from enum import Enum, auto
from typing import Any


class Key(Enum):
    """Non-character keys the game reacts to."""

    BACKSPACE = auto()
    LEFT = auto()
    RIGHT = auto()
    ENTER = auto()


def handle_key(game: Any, key: Key | str) -> None:
    """Apply one key press; a string inserts its characters at the cursor."""
    field = game.data.input
    if isinstance(key, str):
        for char in key:
            field.push(char)
    elif key is Key.BACKSPACE:
        field.backspace()
    elif key is Key.LEFT:
        field.move_left()
    elif key is Key.RIGHT:
        field.move_right()
    elif key is Key.ENTER:
        game.registry.dispatch(field.text(), game)
        field.clear()