"""Text panels that make up the game screen, each a list of fixed-width lines."""

from __future__ import annotations

import textwrap

from absolution.campaigns import CampaignKind
from absolution.game_data import GameData
from absolution.game_system import GameSystem
from absolution.input_data import InputData
from absolution.terminal_data import TerminalLog

_TOP_LEFT, _TOP_RIGHT = "┏", "┓"
_BOTTOM_LEFT, _BOTTOM_RIGHT = "┗", "┛"
_HORIZONTAL, _VERTICAL = "━", "┃"
_GAUGE_FILL = "█"


def _fit(text: str, width: int, fill: str = " ") -> str:
    return text[:width].ljust(width, fill)


def _number(value: float) -> str:
    """Format a number the way the status panel shows it: no needless '.0'."""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def _text_lines(message: str) -> list[str]:
    lines = message.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line.removesuffix("\r") for line in lines]


def framed(title: str, body: list[str], width: int, height: int) -> list[str]:
    """Draw ``body`` inside a thick border titled ``title``, clipped to size."""
    width, height = max(width, 0), max(height, 0)
    if width < 2 or height < 2:
        return [" " * width for _ in range(height)]
    inner = width - 2
    rows = [_TOP_LEFT + _fit(title, inner, _HORIZONTAL) + _TOP_RIGHT]
    for index in range(height - 2):
        line = body[index] if index < len(body) else ""
        rows.append(_VERTICAL + _fit(line, inner) + _VERTICAL)
    rows.append(_BOTTOM_LEFT + _HORIZONTAL * inner + _BOTTOM_RIGHT)
    return rows


def resource_panel(data: GameData, width: int, height: int) -> list[str]:
    """Panel listing the turn number and the current resources."""
    res = data.resources
    population = abs(res.population) // 1000 * (1 if res.population >= 0 else -1)
    body = [
        f"Turn: {data.turns}",
        f"Population: {population}B",
        f"Metals: {_number(res.metals)}",
        f"Mana: {_number(res.mana)}",
        f"Founds: {_number(res.founds)}",
    ]
    return framed("Resources", body, width, height)


def terminal_panel(log: TerminalLog, width: int, height: int) -> list[str]:
    """Panel showing the message log, newest message at the top."""
    body: list[str] = []
    for message in reversed(log.lines()):
        body.extend(_text_lines(message))
    return framed("Terminal", body, width, height)


def input_panel(input_data: InputData, width: int, height: int) -> list[str]:
    """Panel showing the first wrapped line of the prompt text."""
    inner = max(width - 2, 0)
    text = input_data.text()
    wrapped = textwrap.wrap(text, inner) if inner and text else []
    return framed("Input", wrapped[:1], width, height)


def _gauge(percent: int, width: int, with_label: bool) -> str:
    filled = width * percent // 100
    bar = _GAUGE_FILL * filled + " " * (width - filled)
    if not with_label:
        return bar
    label = f"{percent}%"[:width]
    start = (width - len(label)) // 2
    return bar[:start] + label + bar[start + len(label):]


def campaign_panel(system: GameSystem, width: int, height: int) -> list[str]:
    """Panel with the running campaign's name, progress gauge and level."""
    inner_width = max(width - 2, 0)
    inner_height = max(height - 2, 0)
    body = [""] * inner_height
    campaign = system.campaign
    if campaign.kind is CampaignKind.MINING:
        bounds = [round(i * inner_height / 3) for i in range(4)]
        if bounds[1] > bounds[0]:
            body[bounds[0]] = "Mining"
        percent = min(max(int(campaign.progress), 0), 100)
        label_row = bounds[1] + (bounds[2] - bounds[1]) // 2
        for row in range(bounds[1], bounds[2]):
            body[row] = _gauge(percent, inner_width, row == label_row)
        if bounds[3] > bounds[2]:
            body[bounds[2]] = str(campaign.level)
    return framed("Campaign", body, width, height)