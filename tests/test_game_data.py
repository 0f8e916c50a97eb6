from absolution.game_data import GameData
from absolution.resource_data import Resources


def test_new_game_state():
    data = GameData()
    assert data.turns == 0
    assert data.resources == Resources()
    assert data.terminal.lines() == []
    assert data.input.text() == ""


def test_turn_advances_counter_and_resources():
    data = GameData()
    start = Resources()
    data.turn()
    assert data.turns == 1
    assert data.resources.metals == start.metals + start.metal_change
    assert data.resources.population == start.population + start.population_change


def test_push_content_writes_to_log():
    data = GameData()
    data.push_content("Started Mining Campaign.")
    assert data.terminal.lines() == ["Started Mining Campaign."]


def test_instances_do_not_share_state():
    first = GameData()
    second = GameData()
    first.push_content("hello")
    first.input.push("x")
    assert second.terminal.lines() == []
    assert second.input.text() == ""