# rules.py - Build validation and commits for roads, settlements and cities

from __future__ import annotations

from typing import Optional, Tuple

from bank import Bank
from board import Board
from constants import CITY_COST, ROAD_COST, SETTLEMENT_COST
from logging_config import get_logger
from models import Player

logger = get_logger(__name__)


# ── Placement validation ──────────────────────────────────────────────────────

def distance_rule_ok(board: Board, node_idx: int) -> bool:
    return all(board.node(nbr).owner is None for nbr in board.node_neighbors(node_idx))


def has_connected_road(board: Board, player: Player, node_idx: int) -> bool:
    return any(board.edge(eidx).owner == player.color for eidx in board.node(node_idx).edges)


def edge_connected_to_player(board: Board, player: Player, edge_idx: int) -> bool:
    edge = board.edge(edge_idx)
    for nidx in (edge.a, edge.b):
        if board.node(nidx).owner == player.color:
            return True
        if has_connected_road(board, player, nidx):
            return True
    return False


def can_build_road(
    board: Board, player: Player, edge_idx: int, setup_node: Optional[int] = None
) -> Tuple[bool, str]:
    if not board.has_edge(edge_idx):
        return False, "Invalid edge id."
    edge = board.edge(edge_idx)
    if edge.owner is not None:
        return False, "Edge already has a road."
    if setup_node is not None:
        if edge.touches(setup_node):
            return True, ""
        return False, "Setup road must touch the just-placed settlement."
    if not edge_connected_to_player(board, player, edge_idx):
        return False, "Road must connect to your existing road or building."
    return True, ""


def can_build_settlement(
    board: Board, player: Player, node_idx: int, initial: bool = False
) -> Tuple[bool, str]:
    if not board.has_node(node_idx):
        return False, "Invalid node id."
    if board.node(node_idx).owner is not None:
        return False, "Node is already occupied."
    if not distance_rule_ok(board, node_idx):
        return False, "Distance rule violated (adjacent settlement/city)."
    if not initial and not has_connected_road(board, player, node_idx):
        return False, "Settlement must connect to one of your roads."
    return True, ""


def can_build_city(board: Board, player: Player, node_idx: int) -> Tuple[bool, str]:
    if not board.has_node(node_idx):
        return False, "Invalid node id."
    node = board.node(node_idx)
    if node.owner != player.color:
        return False, "You do not own this node."
    if node.is_city:
        return False, "Node is already a city."
    return True, ""


# ── Structural commits (no cost) ──────────────────────────────────────────────

def build_road(
    board: Board, player: Player, edge_idx: int, setup_node: Optional[int] = None
) -> bool:
    ok, reason = can_build_road(board, player, edge_idx, setup_node=setup_node)
    if not ok:
        logger.debug("road_rejected", player=player.color, edge=edge_idx, reason=reason)
        return False
    board.edge(edge_idx).owner = player.color
    player.record_road(edge_idx)
    return True


def build_settlement(
    board: Board, player: Player, node_idx: int, initial: bool = False
) -> bool:
    ok, reason = can_build_settlement(board, player, node_idx, initial=initial)
    if not ok:
        logger.debug("settlement_rejected", player=player.color, node=node_idx, reason=reason)
        return False
    node = board.node(node_idx)
    node.owner = player.color
    node.is_city = False
    player.record_settlement(node_idx)
    return True


def build_city(board: Board, player: Player, node_idx: int) -> bool:
    ok, reason = can_build_city(board, player, node_idx)
    if not ok:
        logger.debug("city_rejected", player=player.color, node=node_idx, reason=reason)
        return False
    board.node(node_idx).is_city = True
    player.record_city()
    return True


# ── Paid builds: validate structure and funds, then pay, then commit ─────────

def purchase_road(board: Board, bank: Bank, player: Player, edge_idx: int) -> bool:
    ok, reason = can_build_road(board, player, edge_idx)
    if not ok:
        logger.debug("road_rejected", player=player.color, edge=edge_idx, reason=reason)
        return False
    if not bank.pay(player, ROAD_COST):
        logger.debug("road_unaffordable", player=player.color, hand=player.hand_str())
        return False
    return build_road(board, player, edge_idx)


def purchase_settlement(board: Board, bank: Bank, player: Player, node_idx: int) -> bool:
    ok, reason = can_build_settlement(board, player, node_idx)
    if not ok:
        logger.debug("settlement_rejected", player=player.color, node=node_idx, reason=reason)
        return False
    if not bank.pay(player, SETTLEMENT_COST):
        logger.debug("settlement_unaffordable", player=player.color, hand=player.hand_str())
        return False
    return build_settlement(board, player, node_idx)


def purchase_city(board: Board, bank: Bank, player: Player, node_idx: int) -> bool:
    ok, reason = can_build_city(board, player, node_idx)
    if not ok:
        logger.debug("city_rejected", player=player.color, node=node_idx, reason=reason)
        return False
    if not bank.pay(player, CITY_COST):
        logger.debug("city_unaffordable", player=player.color, hand=player.hand_str())
        return False
    return build_city(board, player, node_idx)
