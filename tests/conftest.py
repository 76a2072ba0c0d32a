from __future__ import annotations

import random
import sys
from pathlib import Path
from typing import List

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from bank import Bank
from board import Board
from constants import PLAYER_COLORS
from logging_config import configure_logging
from models import Player

configure_logging(verbose=False)


class ScriptedRandom(random.Random):
    """Random source whose robber choices are fixed by the test."""

    def __init__(self, tile: int = 0, pick: int = 0, seed: int = 0):
        super().__init__(seed)
        self.tile = tile
        self.pick = pick

    def randrange(self, *args, **kwargs) -> int:  # type: ignore[override]
        return self.tile

    def choice(self, seq):  # type: ignore[override]
        return seq[self.pick]


@pytest.fixture
def board() -> Board:
    return Board()


@pytest.fixture
def bank() -> Bank:
    return Bank.default()


@pytest.fixture
def players() -> List[Player]:
    return [Player(color=c) for c in PLAYER_COLORS]


def fund(bank: Bank, player: Player, **amounts: int) -> None:
    for kind, amount in amounts.items():
        assert bank.give(amount, player, kind)
