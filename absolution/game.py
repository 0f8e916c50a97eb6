"""The game object, its main loop and the command-line entry point."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from absolution.command import (
    CommandRegistry,
    ExitCommand,
    GameState,
    HelpCommand,
    StartCommand,
    TurnCommand,
)
from absolution.game_data import GameData
from absolution.game_system import GameSystem
from absolution.input import Key, handle_key
from absolution.ui import draw

_SPECIAL_KEYS = {
    "KEY_BACKSPACE": Key.BACKSPACE,
    "KEY_LEFT": Key.LEFT,
    "KEY_RIGHT": Key.RIGHT,
    "KEY_ENTER": Key.ENTER,
}


def _default_registry() -> CommandRegistry:
    registry = CommandRegistry()
    for command in (ExitCommand(), TurnCommand(), HelpCommand(), StartCommand()):
        registry.register(command)
    return registry


def _translate(keystroke: Any) -> Key | str | None:
    """Map a terminal keystroke to a key the game handles, or None."""
    if keystroke.is_sequence:
        return _SPECIAL_KEYS.get(keystroke.name)
    text = str(keystroke)
    return text if text and text.isprintable() else None


@dataclass
class Game:
    """A game session: its state, data, systems and commands."""

    state: GameState = GameState.RUNNING
    data: GameData = field(default_factory=GameData)
    system: GameSystem = field(default_factory=GameSystem)
    registry: CommandRegistry = field(default_factory=_default_registry)

    def render(self, term: Any) -> None:
        """Draw the whole screen on ``term`` and place the cursor."""
        screen = draw(self.data, self.system, term.width, term.height)
        parts = [term.home, term.clear]
        parts.extend(term.move_xy(0, row) + line for row, line in enumerate(screen.lines))
        parts.append(term.move_xy(*screen.cursor))
        print("".join(parts), end="", flush=True)

    def run(self) -> None:
        """Run the interactive loop until the player exits."""
        from blessed import Terminal

        term = Terminal()
        with term.fullscreen(), term.cbreak():
            while True:
                self.render(term)
                key = _translate(term.inkey())
                if key is not None:
                    handle_key(self, key)
                if self.state is GameState.CLOSING:
                    break


def main(argv: list[str] | None = None) -> int:
    """Start a new game in the terminal."""
    Game().run()
    return 0