"""Game systems that react to each turn, such as campaigns."""

from __future__ import annotations

from dataclasses import dataclass, field

from absolution.campaigns import Campaign, CampaignKind, CampaignStatus
from absolution.game_data import GameData


@dataclass
class GameSystem:
    """Holds the active campaign and applies its effects on each turn."""

    campaign: Campaign = field(default_factory=Campaign)

    def start_new(self, kind: CampaignKind) -> None:
        """Start a campaign of the given kind."""
        self.campaign.start_new(kind)

    def update(self, data: GameData) -> None:
        """Advance the campaign; a finished one raises metal income."""
        status = self.campaign.update(data.resources.population)
        if status is CampaignStatus.FINISHED:
            data.resources.metal_change += self.campaign.effect