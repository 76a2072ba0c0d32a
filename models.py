# models.py - Dataclasses for board entities and players

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from constants import RESOURCES, TERRAIN_RESOURCE
from geometry import Point


@dataclass
class Player:
    color: str
    hand: Dict[str, int] = field(default_factory=lambda: {r: 0 for r in RESOURCES})
    roads: List[int] = field(default_factory=list)
    settlements: List[int] = field(default_factory=list)
    roads_built: int = 0
    settlements_built: int = 0
    cities_built: int = 0

    @property
    def name(self) -> str:
        return self.color.upper()

    @property
    def victory_points(self) -> int:
        # A city replaces its settlement, so each upgrade adds one point.
        return self.settlements_built + self.cities_built

    @property
    def resource_count(self) -> int:
        return sum(self.hand.values())

    def resource(self, kind: str) -> int:
        return self.hand[kind]

    def card_pool(self) -> List[str]:
        """Flatten the hand into one entry per card, in resource order."""
        return [res for res in RESOURCES for _ in range(self.hand[res])]

    def hand_str(self) -> str:
        return ", ".join(f"{r}:{self.hand[r]}" for r in RESOURCES)

    # Only the bank moves cards in and out of a hand.
    def add_resource(self, kind: str, amount: int) -> None:
        self.hand[kind] += amount

    def remove_resource(self, kind: str, amount: int) -> None:
        self.hand[kind] -= amount

    def record_road(self, edge_idx: int) -> None:
        self.roads_built += 1
        self.roads.append(edge_idx)

    def record_settlement(self, node_idx: int) -> None:
        self.settlements_built += 1
        self.settlements.append(node_idx)

    def record_city(self) -> None:
        self.cities_built += 1


@dataclass
class Tile:
    idx: int
    q: int
    r: int
    terrain: str
    number: Optional[int]
    nodes: List[int] = field(default_factory=list)

    @property
    def resource(self) -> Optional[str]:
        return TERRAIN_RESOURCE[self.terrain]

    @property
    def produces(self) -> bool:
        return self.resource is not None and self.number is not None


@dataclass
class Node:
    idx: int
    point: Point
    hexes: List[int] = field(default_factory=list)
    edges: List[int] = field(default_factory=list)
    owner: Optional[str] = None
    is_city: bool = False


@dataclass
class Edge:
    idx: int
    a: int
    b: int
    owner: Optional[str] = None

    def other(self, node_idx: int) -> int:
        return self.b if self.a == node_idx else self.a

    def touches(self, node_idx: int) -> bool:
        return node_idx in (self.a, self.b)
