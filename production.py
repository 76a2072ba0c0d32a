# production.py - Roll resolution: resource production and the robber

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from bank import Bank
from board import Board
from constants import HAND_LIMIT, RESOURCES, ROBBER_ROLL
from dice import Dice
from logging_config import get_logger
from models import Player

logger = get_logger(__name__)

ROBBER = "robber"
IDLE = "idle"
SHORTAGE = "shortage"
DISTRIBUTED = "distributed"


@dataclass
class ProductionReport:
    roll: int
    outcome: str
    gains: Dict[str, Dict[str, int]] = field(default_factory=dict)
    discards: Dict[str, int] = field(default_factory=dict)
    robber_tile: Optional[int] = None
    victim: Optional[str] = None
    stolen: Optional[str] = None

    @property
    def produced(self) -> bool:
        return self.outcome == DISTRIBUTED


class ResourceProduction:
    """Turns a dice roll into card movements between the bank and the players."""

    def __init__(self, dice: Dice, bank: Bank, board: Board, rng: random.Random):
        self.dice = dice
        self.bank = bank
        self.board = board
        self.rng = rng

    def produce(self, current: Player, players: List[Player]) -> ProductionReport:
        return self.resolve(self.dice.roll(), current, players)

    def resolve(self, roll: int, current: Player, players: List[Player]) -> ProductionReport:
        if roll == ROBBER_ROLL:
            return self.handle_robber(roll, current, players)

        by_color = {p.color: p for p in players}
        gains: Dict[str, Dict[str, int]] = {p.color: {r: 0 for r in RESOURCES} for p in players}
        total: Dict[str, int] = {r: 0 for r in RESOURCES}

        for tile in self.board.tiles_by_token(roll):
            if tile.idx == self.board.robber_tile or not tile.produces:
                continue
            resource = tile.resource
            for nidx in tile.nodes:
                node = self.board.node(nidx)
                if node.owner is None:
                    continue
                amount = 2 if node.is_city else 1
                gains[node.owner][resource] += amount
                total[resource] += amount

        if not any(total.values()):
            return ProductionReport(roll=roll, outcome=IDLE)

        if not self.bank.can_provide_all(total):
            logger.info("production_aborted", roll=roll, demand=total, bank=dict(self.bank.counts))
            return ProductionReport(roll=roll, outcome=SHORTAGE)

        for color, demand in gains.items():
            for res, amount in demand.items():
                if amount > 0:
                    self.bank.give(amount, by_color[color], res)

        gains = {c: d for c, d in gains.items() if any(d.values())}
        return ProductionReport(roll=roll, outcome=DISTRIBUTED, gains=gains)

    # ── Robber ────────────────────────────────────────────────────────────────

    def handle_robber(self, roll: int, thief: Player, players: List[Player]) -> ProductionReport:
        report = ProductionReport(roll=roll, outcome=ROBBER)

        for p in players:
            total = p.resource_count
            if total > HAND_LIMIT:
                to_discard = total // 2
                self.discard_random_cards(p, to_discard)
                report.discards[p.color] = to_discard

        tile_idx = self.rng.randrange(len(self.board.tiles))
        self.board.move_robber(tile_idx)
        report.robber_tile = tile_idx

        eligible = self.board.owners_around_tile(tile_idx)
        if not eligible:
            return report

        by_color = {p.color: p for p in players}
        victim = by_color[self.rng.choice(eligible)]
        report.victim = victim.color
        report.stolen = self.steal_random_card(thief, victim)
        return report

    def discard_random_cards(self, player: Player, amount: int) -> None:
        pool = player.card_pool()
        self.rng.shuffle(pool)
        for res in pool[:amount]:
            self.bank.spend(1, player, res)

    def steal_random_card(self, thief: Player, victim: Player) -> Optional[str]:
        """Move one random card from *victim* to *thief*; returns its kind."""
        pool = victim.card_pool()
        if not pool:
            return None
        self.rng.shuffle(pool)
        stolen = pool[0]
        if self.bank.spend(1, victim, stolen):
            self.bank.give(1, thief, stolen)
        return stolen
