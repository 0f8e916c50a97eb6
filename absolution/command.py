"""Text commands typed at the prompt and the registry that dispatches them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any

from absolution.campaigns import CampaignKind

HELP_MESSAGE = (
    "\n    Commands:\n\n"
    "     exit - leave the game\n\n"
    "     turn - go to the next turn\n\n"
    "     help - display help message\n\n"
)


class GameState(Enum):
    """Whether the main loop keeps going."""

    CLOSING = auto()
    RUNNING = auto()


def handle_commands(game: Any) -> None:
    """Match the whole input line against the fixed set of commands."""
    text = game.data.input.text()
    if text == "exit":
        game.state = GameState.CLOSING
    elif text == "turn":
        game.system.update(game.data)
        game.data.turn()
    elif text == "help":
        game.data.push_content(HELP_MESSAGE)
    elif text == "start campaign(mining)":
        game.system.campaign.start_new(CampaignKind.MINING)


class Command(ABC):
    """A command that recognises its tokens and acts on the game."""

    @abstractmethod
    def matches(self, tokens: Sequence[str]) -> bool:
        """Return True when ``tokens`` invoke this command."""

    @abstractmethod
    def execute(self, args: Sequence[str], game: Any) -> None:
        """Carry out the command on ``game``."""


@dataclass
class CommandRegistry:
    """Ordered collection of commands; every matching command runs."""

    commands: list[Command] = field(default_factory=list)

    def register(self, command: Command) -> None:
        """Add a command to the registry."""
        self.commands.append(command)

    def dispatch(self, text: str, game: Any) -> None:
        """Split ``text`` on whitespace and run every command that matches."""
        tokens = text.split()
        for command in self.commands:
            if command.matches(tokens):
                command.execute(tokens, game)


class TurnCommand(Command):
    """``turn``: advance the game by one turn."""

    def matches(self, tokens: Sequence[str]) -> bool:
        return list(tokens) == ["turn"]

    def execute(self, args: Sequence[str], game: Any) -> None:
        game.data.turn()
        game.system.update(game.data)
        game.data.push_content("Turn has passed.")


class ExitCommand(Command):
    """``exit``: leave the game."""

    def matches(self, tokens: Sequence[str]) -> bool:
        return list(tokens) == ["exit"]

    def execute(self, args: Sequence[str], game: Any) -> None:
        game.state = GameState.CLOSING


class HelpCommand(Command):
    """``help``: print the list of commands."""

    def matches(self, tokens: Sequence[str]) -> bool:
        return list(tokens) == ["help"]

    def execute(self, args: Sequence[str], game: Any) -> None:
        game.data.push_content(HELP_MESSAGE)


class StartCommand(Command):
    """``start <what> <kind>``: start something, such as a campaign."""

    def matches(self, tokens: Sequence[str]) -> bool:
        return len(tokens) == 3 and tokens[0] == "start"

    def execute(self, args: Sequence[str], game: Any) -> None:
        _, what, kind = args
        if what == "campaign" and kind == "mining":
            game.system.start_new(CampaignKind.MINING)
            game.data.push_content("Started Mining Campaign.")