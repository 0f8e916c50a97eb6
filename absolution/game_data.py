"""All mutable state of a running game: input, log, turn count and resources."""

from __future__ import annotations

from dataclasses import dataclass, field

from absolution.input_data import InputData
from absolution.resource_data import Resources
from absolution.terminal_data import TerminalLog


@dataclass
class GameData:
    """Container for the player-visible game state."""

    input: InputData = field(default_factory=InputData)
    terminal: TerminalLog = field(default_factory=TerminalLog)
    turns: int = 0
    resources: Resources = field(default_factory=Resources)

    def turn(self) -> None:
        """Pay out one turn of resources and advance the turn counter."""
        self.resources.turn_change()
        self.turns += 1

    def push_content(self, content: str) -> None:
        """Write a message to the terminal log."""
        self.terminal.push(content)