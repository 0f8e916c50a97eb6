"""Stockpiles of the player's resources and their per-turn income."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Resources:
    """Current amounts and how much each grows every turn."""

    metals: float = 0.0
    population: int = 8_000
    mana: float = 0.0
    founds: float = 0.0
    metal_change: float = 1.0
    population_change: int = 1
    mana_change: float = 1.0
    found_change: float = 1.0

    def turn_change(self) -> None:
        """Add one turn's income to every stockpile."""
        self.mana += self.mana_change
        self.metals += self.metal_change
        self.population += self.population_change
        self.founds += self.found_change