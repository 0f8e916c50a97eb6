"""Lays the panels out into one full screen."""

from __future__ import annotations

from dataclasses import dataclass

from absolution.game_data import GameData
from absolution.game_system import GameSystem
from absolution.widgets import campaign_panel, input_panel, resource_panel, terminal_panel


@dataclass(frozen=True)
class Screen:
    """A rendered screen: one string per row and the cursor's (x, y)."""

    lines: list[str]
    cursor: tuple[int, int]


def draw(data: GameData, system: GameSystem, width: int, height: int) -> Screen:
    """Compose the terminal, resource, campaign and input panels."""
    top_height = round(height * 0.9)
    bottom_height = height - top_height
    left_width = round(width * 2 / 3)
    right_width = width - left_width
    resources_height = round(top_height * 2 / 3)
    campaign_height = top_height - resources_height

    terminal = terminal_panel(data.terminal, left_width, top_height)
    side = resource_panel(data, right_width, resources_height) + campaign_panel(
        system, right_width, campaign_height
    )
    lines = [left + right for left, right in zip(terminal, side)]
    lines += input_panel(data.input, width, bottom_height)

    return Screen(lines=lines, cursor=(data.input.cursor() + 1, top_height + 1))