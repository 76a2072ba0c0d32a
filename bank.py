# bank.py - The finite shared resource pool

from __future__ import annotations

from typing import Dict, Mapping, Optional

from constants import BANK_START_COUNT, RESOURCES
from logging_config import get_logger
from models import Player

logger = get_logger(__name__)


def _check_kind(kind: str) -> None:
    if kind not in RESOURCES:
        raise ValueError(f"Invalid resource '{kind}'. Expected one of: {', '.join(RESOURCES)}")


class Bank:
    """Shared stock of every resource kind.

    Every card that enters or leaves a hand passes through give/spend, so for
    each kind the bank count plus all hands stays constant.
    """

    def __init__(self, counts: Optional[Mapping[str, int]] = None):
        self.counts: Dict[str, int] = {r: 0 for r in RESOURCES}
        for kind, amount in (counts or {}).items():
            _check_kind(kind)
            if amount < 0:
                raise ValueError("Resource counts cannot be negative")
            self.counts[kind] = amount

    @classmethod
    def default(cls) -> "Bank":
        return cls({r: BANK_START_COUNT for r in RESOURCES})

    def count(self, kind: str) -> int:
        _check_kind(kind)
        return self.counts[kind]

    @property
    def total(self) -> int:
        return sum(self.counts.values())

    def give(self, amount: int, player: Player, kind: str) -> bool:
        """Move *amount* cards of *kind* from the bank to *player*."""
        _check_kind(kind)
        if amount <= 0:
            return False
        if self.counts[kind] < amount:
            logger.debug("bank_short", resource=kind, wanted=amount, available=self.counts[kind])
            return False
        self.counts[kind] -= amount
        player.add_resource(kind, amount)
        return True

    def spend(self, amount: int, player: Player, kind: str) -> bool:
        """Move *amount* cards of *kind* from *player* back to the bank."""
        _check_kind(kind)
        if amount <= 0:
            return False
        if player.resource(kind) < amount:
            return False
        player.remove_resource(kind, amount)
        self.counts[kind] += amount
        return True

    def can_provide_all(self, demand: Mapping[str, int]) -> bool:
        for kind, needed in demand.items():
            _check_kind(kind)
            if self.counts[kind] < needed:
                return False
        return True

    # ── Costs ─────────────────────────────────────────────────────────────────

    @staticmethod
    def can_afford(player: Player, cost: Mapping[str, int]) -> bool:
        return all(player.resource(res) >= amount for res, amount in cost.items())

    def pay(self, player: Player, cost: Mapping[str, int]) -> bool:
        """Charge the whole *cost* or nothing at all."""
        if not self.can_afford(player, cost):
            return False
        for res, amount in cost.items():
            self.spend(amount, player, res)
        return True
