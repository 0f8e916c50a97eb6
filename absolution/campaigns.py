"""Campaigns: long-running projects that boost resource income when finished."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class CampaignStatus(Enum):
    RUNNING = auto()
    FINISHED = auto()
    PAUSED = auto()


class CampaignKind(Enum):
    NONE = auto()
    MINING = auto()


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b >= 0) else -quotient


@dataclass
class Campaign:
    """A campaign's progress, level and reward."""

    effect: float = 0.25
    progress: float = 0.0
    level: int = 1
    status: CampaignStatus = CampaignStatus.PAUSED
    kind: CampaignKind = CampaignKind.NONE

    def start_new(self, kind: CampaignKind) -> None:
        """Start running, switching to ``kind`` unless it is NONE."""
        if kind is CampaignKind.MINING:
            self.kind = CampaignKind.MINING
        self.status = CampaignStatus.RUNNING

    def update(self, population: int) -> CampaignStatus:
        """Advance the campaign by one turn and report its status.

        A campaign whose progress reached 100 resets, gains a level and
        reports FINISHED instead of progressing this turn.
        """
        status = self._check_status()
        if status is not CampaignStatus.RUNNING:
            return status

        if self.kind is CampaignKind.MINING:
            divisor = self.level * 5
            self.progress += float(_trunc_div(_trunc_div(population, 100), divisor))

        return CampaignStatus.RUNNING

    def _check_status(self) -> CampaignStatus:
        if self.status is CampaignStatus.PAUSED:
            return CampaignStatus.PAUSED
        if self.progress >= 100.0:
            self.progress = 0.0
            self.level += 1
            return CampaignStatus.FINISHED
        return CampaignStatus.RUNNING