# dice.py - Roll sources: a single die and a summed set of dice

from __future__ import annotations

import random
from typing import Iterable, List, Protocol


class Dice(Protocol):
    def roll(self) -> int:
        ...


class RegularDice:
    """One die with *sides* faces numbered from 1."""

    def __init__(self, sides: int, rng: random.Random):
        if sides < 1:
            raise ValueError("A die needs at least one side")
        self.sides = sides
        self.rng = rng

    def roll(self) -> int:
        return 1 + self.rng.randrange(self.sides)


class MultiDice:
    """Rolls every contained die and returns the sum."""

    def __init__(self, dice: Iterable[Dice] = ()):
        self.dice: List[Dice] = list(dice)

    def add(self, die: Dice) -> None:
        self.dice.append(die)

    def roll(self) -> int:
        return sum(die.roll() for die in self.dice)


def two_six_sided(rng: random.Random) -> MultiDice:
    return MultiDice([RegularDice(6, rng), RegularDice(6, rng)])
