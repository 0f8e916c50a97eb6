from types import SimpleNamespace

import pytest

from absolution.campaigns import CampaignKind, CampaignStatus
from absolution.command import (
    HELP_MESSAGE,
    Command,
    CommandRegistry,
    ExitCommand,
    GameState,
    HelpCommand,
    StartCommand,
    TurnCommand,
    handle_commands,
)
from absolution.game_data import GameData
from absolution.game_system import GameSystem


def _game():
    return SimpleNamespace(data=GameData(), system=GameSystem(), state=GameState.RUNNING)


def _registry():
    registry = CommandRegistry()
    for command in (ExitCommand(), TurnCommand(), HelpCommand(), StartCommand()):
        registry.register(command)
    return registry


def test_turn_advances_and_reports():
    game = _game()
    _registry().dispatch("turn", game)
    assert game.data.turns == 1
    assert game.data.terminal.lines() == ["Turn has passed."]


def test_turn_with_surrounding_whitespace():
    game = _game()
    _registry().dispatch("   turn  ", game)
    assert game.data.turns == 1


def test_turn_with_extra_argument_does_not_match():
    game = _game()
    _registry().dispatch("turn now", game)
    assert game.data.turns == 0
    assert game.data.terminal.lines() == []


def test_exit_sets_closing():
    game = _game()
    _registry().dispatch("exit", game)
    assert game.state is GameState.CLOSING


def test_help_prints_message():
    game = _game()
    _registry().dispatch("help", game)
    assert game.data.terminal.lines() == [HELP_MESSAGE]
    assert "exit - leave the game" in HELP_MESSAGE


def test_start_mining_campaign():
    game = _game()
    _registry().dispatch("start campaign mining", game)
    assert game.system.campaign.kind is CampaignKind.MINING
    assert game.system.campaign.status is CampaignStatus.RUNNING
    assert game.data.terminal.lines() == ["Started Mining Campaign."]


@pytest.mark.parametrize("text", ["start campaign test", "start other mining", "start campaign"])
def test_start_unknown_does_nothing(text):
    game = _game()
    _registry().dispatch(text, game)
    assert game.system.campaign.kind is CampaignKind.NONE
    assert game.data.terminal.lines() == []


def test_unknown_command_leaves_game_untouched():
    game = _game()
    _registry().dispatch("dance", game)
    assert game.state is GameState.RUNNING
    assert game.data.turns == 0


def test_turn_progresses_running_campaign():
    game = _game()
    registry = _registry()
    registry.dispatch("start campaign mining", game)
    registry.dispatch("turn", game)
    assert game.system.campaign.progress > 0


def test_start_matches_only_three_tokens():
    command = StartCommand()
    assert command.matches(["start", "campaign", "mining"])
    assert not command.matches(["start", "campaign"])
    assert not command.matches(["begin", "campaign", "mining"])


def test_command_is_abstract():
    with pytest.raises(TypeError):
        Command()


def _type(game, text):
    for char in text:
        game.data.input.push(char)


def test_handle_commands_exit():
    game = _game()
    _type(game, "exit")
    handle_commands(game)
    assert game.state is GameState.CLOSING


def test_handle_commands_turn():
    game = _game()
    _type(game, "turn")
    handle_commands(game)
    assert game.data.turns == 1
    assert game.data.terminal.lines() == []


def test_handle_commands_start_campaign():
    game = _game()
    _type(game, "start campaign(mining)")
    handle_commands(game)
    assert game.system.campaign.kind is CampaignKind.MINING
    assert game.system.campaign.status is CampaignStatus.RUNNING


def test_handle_commands_help():
    game = _game()
    _type(game, "help")
    handle_commands(game)
    assert game.data.terminal.lines() == [HELP_MESSAGE]