from __future__ import annotations

from typing import List

from conftest import fund

import rules
from bank import Bank
from board import Board
from models import Player


def _outward_path(board: Board) -> tuple:
    """Node 0, its outward neighbour, and a node two steps away from 0."""
    mid = 6
    far = min(n for n in board.node_neighbors(mid) if n != 0)
    return 0, mid, far


def test_distance_rule_blocks_adjacent_settlement(board: Board, players: List[Player]) -> None:
    orange, white = players[0], players[1]
    assert rules.build_settlement(board, orange, 0, initial=True)
    for neighbour in board.node_neighbors(0):
        ok, reason = rules.can_build_settlement(board, white, neighbour, initial=True)
        assert not ok
        assert "Distance rule" in reason
        assert not rules.build_settlement(board, white, neighbour, initial=True)
        assert board.node(neighbour).owner is None


def test_occupied_node_rejected(board: Board, players: List[Player]) -> None:
    assert rules.build_settlement(board, players[0], 10, initial=True)
    ok, reason = rules.can_build_settlement(board, players[1], 10, initial=True)
    assert not ok
    assert "occupied" in reason
    assert players[0].settlements == [10]
    assert players[1].settlements_built == 0


def test_settlement_needs_own_road_after_setup(board: Board, players: List[Player]) -> None:
    orange, white = players[0], players[1]
    start, mid, far = _outward_path(board)
    assert rules.build_settlement(board, orange, start, initial=True)
    assert not rules.build_settlement(board, orange, far)

    assert rules.build_road(board, orange, board.find_edge(start, mid).idx)
    assert rules.build_road(board, orange, board.find_edge(mid, far).idx)

    assert not rules.build_settlement(board, white, far)
    assert rules.build_settlement(board, orange, far)
    assert board.node(far).owner == "orange"
    assert any(board.edge(e).owner == "orange" for e in board.node(far).edges)


def test_road_must_connect(board: Board, players: List[Player]) -> None:
    orange = players[0]
    assert rules.build_settlement(board, orange, 0, initial=True)
    far_edge = board.edges[-1]
    assert not far_edge.touches(0)

    ok, reason = rules.can_build_road(board, orange, far_edge.idx)
    assert not ok
    assert "connect" in reason
    assert not rules.build_road(board, orange, far_edge.idx)
    assert far_edge.owner is None
    assert orange.roads == []
    assert orange.roads_built == 0


def test_road_connects_through_own_road_not_others(board: Board, players: List[Player]) -> None:
    orange, white = players[0], players[1]
    start, mid, far = _outward_path(board)
    assert rules.build_settlement(board, orange, start, initial=True)
    assert rules.build_road(board, orange, board.find_edge(start, mid).idx)
    next_edge = board.find_edge(mid, far).idx

    assert not rules.build_road(board, white, next_edge)
    assert rules.build_road(board, orange, next_edge)
    assert orange.roads_built == 2
    assert not rules.build_road(board, orange, next_edge)


def test_setup_road_must_touch_new_settlement(board: Board, players: List[Player]) -> None:
    orange = players[0]
    assert rules.build_settlement(board, orange, 20, initial=True)
    touching = board.node(20).edges[0]
    elsewhere = next(e.idx for e in board.edges if not e.touches(20))
    assert not rules.build_road(board, orange, elsewhere, setup_node=20)
    assert rules.build_road(board, orange, touching, setup_node=20)


def test_city_upgrade(board: Board, players: List[Player]) -> None:
    orange, white = players[0], players[1]
    assert not rules.build_city(board, orange, 0)
    assert rules.build_settlement(board, orange, 0, initial=True)
    assert board.victory_points("orange") == 1
    assert orange.victory_points == 1

    assert not rules.build_city(board, white, 0)
    assert rules.build_city(board, orange, 0)
    assert board.node(0).is_city
    assert board.node(0).owner == "orange"
    assert board.victory_points("orange") == 2
    assert orange.victory_points == 2
    assert orange.settlements == [0]

    ok, reason = rules.can_build_city(board, orange, 0)
    assert not ok
    assert "already a city" in reason


def test_invalid_ids_are_failures(board: Board, players: List[Player]) -> None:
    assert rules.can_build_road(board, players[0], 500) == (False, "Invalid edge id.")
    assert rules.can_build_settlement(board, players[0], -3)[0] is False
    assert rules.can_build_city(board, players[0], 54)[0] is False


def test_purchase_is_atomic(board: Board, bank: Bank, players: List[Player]) -> None:
    orange = players[0]
    assert rules.build_settlement(board, orange, 0, initial=True)
    far_edge = board.edges[-1].idx
    fund(bank, orange, wood=1, brick=1)

    # structural failure: nothing is charged
    assert not rules.purchase_road(board, bank, orange, far_edge)
    assert orange.hand["wood"] == 1 and orange.hand["brick"] == 1
    assert bank.counts["wood"] == 18

    edge = board.node(0).edges[0]
    assert rules.purchase_road(board, bank, orange, edge)
    assert orange.hand["wood"] == 0 and orange.hand["brick"] == 0
    assert bank.counts["wood"] == 19 and bank.counts["brick"] == 19
    assert board.edge(edge).owner == "orange"

    # funding failure: nothing is built
    other = board.node(0).edges[1]
    assert not rules.purchase_road(board, bank, orange, other)
    assert board.edge(other).owner is None


def test_purchase_city_and_settlement(board: Board, bank: Bank, players: List[Player]) -> None:
    orange = players[0]
    start, mid, far = _outward_path(board)
    assert rules.build_settlement(board, orange, start, initial=True)
    assert rules.build_road(board, orange, board.find_edge(start, mid).idx)
    assert rules.build_road(board, orange, board.find_edge(mid, far).idx)

    fund(bank, orange, wood=1, brick=1, sheep=1)
    assert not rules.purchase_settlement(board, bank, orange, far)
    assert orange.resource_count == 3
    fund(bank, orange, wheat=1)
    assert rules.purchase_settlement(board, bank, orange, far)
    assert orange.resource_count == 0

    fund(bank, orange, wheat=2, ore=2)
    assert not rules.purchase_city(board, bank, orange, far)
    fund(bank, orange, ore=1)
    assert rules.purchase_city(board, bank, orange, far)
    assert board.node(far).is_city
    assert orange.resource_count == 0
    assert bank.total == 5 * 19
