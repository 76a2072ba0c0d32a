# game.py - Simulation driver: initial placement, rounds, turns and scoring

from __future__ import annotations

import random
import time
from typing import Dict, List, Optional, Tuple

from bank import Bank
from board import Board
from constants import (
    CITY_COST, HAND_LIMIT, PLAYER_COLORS, RESOURCES, ROAD_COST, SETTLEMENT_COST,
    VICTORY_POINTS_TO_WIN,
)
from models import Player
from production import DISTRIBUTED, ROBBER, SHORTAGE, ProductionReport, ResourceProduction
import rules


# (kind, target id) where kind is "city", "settlement" or "road".
Action = Tuple[str, int]


class Game:
    def __init__(
        self,
        board: Board,
        bank: Bank,
        production: ResourceProduction,
        max_rounds: int,
        rng: random.Random,
        turn_delay: float = 0.0,
    ):
        self.board = board
        self.bank = bank
        self.production = production
        self.max_rounds = max_rounds
        self.rng = rng
        self.turn_delay = turn_delay
        self.players: List[Player] = [Player(color=c) for c in PLAYER_COLORS]
        self.current_round: int = 0
        self.setup_initial_placements()

    # ── Scoring ───────────────────────────────────────────────────────────────

    def victory_points(self, player: Player) -> int:
        return self.board.victory_points(player.color)

    def check_winner(self) -> bool:
        return any(self.victory_points(p) >= VICTORY_POINTS_TO_WIN for p in self.players)

    def leader(self) -> Tuple[Player, int]:
        """Highest scorer; ties go to the earliest player in turn order."""
        best: Optional[Player] = None
        best_vp = -1
        for p in self.players:
            vp = self.victory_points(p)
            if vp > best_vp:
                best, best_vp = p, vp
        assert best is not None
        return best, best_vp

    # ── Setup phase ───────────────────────────────────────────────────────────

    def setup_initial_placements(self) -> None:
        for p in self.players:
            self.place_initial_settlement_and_road(p)
        for p in self.players:
            node_idx = self.place_initial_settlement_and_road(p)
            if node_idx is not None:
                self.grant_starting_resources(p, node_idx)

    def place_initial_settlement_and_road(self, player: Player) -> Optional[int]:
        candidates = [
            n.idx for n in self.board.nodes
            if rules.can_build_settlement(self.board, player, n.idx, initial=True)[0]
        ]
        if not candidates:
            return None
        node_idx = self.rng.choice(candidates)
        if not rules.build_settlement(self.board, player, node_idx, initial=True):
            return None
        self.log(player, f"initial placement: SETTLEMENT at node {node_idx}")

        edge_candidates = [
            eidx for eidx in self.board.node(node_idx).edges
            if self.board.edge(eidx).owner is None
        ]
        if edge_candidates:
            edge_idx = self.rng.choice(edge_candidates)
            if rules.build_road(self.board, player, edge_idx, setup_node=node_idx):
                self.log(player, f"initial placement: ROAD on edge {edge_idx}")
        return node_idx

    def grant_starting_resources(self, player: Player, node_idx: int) -> bool:
        demand: Dict[str, int] = {r: 0 for r in RESOURCES}
        for tidx in self.board.node(node_idx).hexes:
            tile = self.board.tile(tidx)
            if tile.produces:
                demand[tile.resource] += 1

        if not self.bank.can_provide_all(demand):
            self.log(player, "starting resources skipped (bank shortage).")
            return False
        for res, amount in demand.items():
            if amount > 0:
                self.bank.give(amount, player, res)
        self.log(player, "received starting resources for initial placement.")
        return True

    # ── Legal actions ─────────────────────────────────────────────────────────

    def legal_actions(self, player: Player) -> List[Action]:
        actions: List[Action] = []

        if Bank.can_afford(player, CITY_COST):
            for n in self.board.nodes:
                if rules.can_build_city(self.board, player, n.idx)[0]:
                    actions.append(("city", n.idx))

        if Bank.can_afford(player, SETTLEMENT_COST):
            for n in self.board.nodes:
                if rules.can_build_settlement(self.board, player, n.idx)[0]:
                    actions.append(("settlement", n.idx))

        if Bank.can_afford(player, ROAD_COST):
            for e in self.board.edges:
                if rules.can_build_road(self.board, player, e.idx)[0]:
                    actions.append(("road", e.idx))

        return actions

    def perform(self, player: Player, action: Action) -> bool:
        kind, target = action
        if kind == "city":
            ok = rules.purchase_city(self.board, self.bank, player, target)
            label = f"built CITY at node {target}"
        elif kind == "settlement":
            ok = rules.purchase_settlement(self.board, self.bank, player, target)
            label = f"built SETTLEMENT at node {target}"
        elif kind == "road":
            ok = rules.purchase_road(self.board, self.bank, player, target)
            label = f"built ROAD on edge {target}"
        else:
            raise ValueError(f"Unknown action kind '{kind}'")
        if ok:
            self.log(player, label)
        else:
            self.log(player, f"could not complete {kind} on {target}.")
        return ok

    def choose_and_perform(self, player: Player) -> bool:
        actions = self.legal_actions(player)
        if not actions:
            return False
        return self.perform(player, actions[self.rng.randrange(len(actions))])

    # ── Turn loop ─────────────────────────────────────────────────────────────

    def play_turn(self, player: Player) -> ProductionReport:
        report = self.production.produce(player, self.players)

        print(f"=== Round {self.current_round}, {player.name}'s turn ===")
        self.narrate_roll(player, report)

        if player.resource_count > HAND_LIMIT:
            if self.choose_and_perform(player):
                self.log(player, "was encouraged to spend (>7 cards) and built something.")
            else:
                self.log(player, "has >7 cards but could not build anything.")
        elif not self.choose_and_perform(player):
            self.log(player, "has no legal build action available.")

        self.pause()
        return report

    def narrate_roll(self, player: Player, report: ProductionReport) -> None:
        self.log(player, f"rolled {report.roll}.")
        if report.outcome == DISTRIBUTED:
            print("Resources produced for eligible settlements/cities.")
        elif report.outcome == SHORTAGE:
            print("Bank cannot cover this roll; no production this turn.")
        else:
            print("No production this turn.")
        if report.outcome != ROBBER:
            return
        for color, count in report.discards.items():
            print(f"{color.upper()} discards {count} cards.")
        print(f"Robber moved to tile {report.robber_tile}.")
        if report.victim is None:
            print("No one to steal from.")
        elif report.stolen is None:
            print(f"{report.victim.upper()} had no cards to steal.")
        else:
            print(f"{player.name} stole 1 {report.stolen} from {report.victim.upper()}.")

    def play_round(self) -> None:
        for p in self.players:
            self.play_turn(p)

    def start(self) -> Tuple[Player, int]:
        while self.current_round < self.max_rounds and not self.check_winner():
            self.current_round += 1
            self.play_round()
            self.print_victory_points_summary()
        return self.end_game()

    def end_game(self) -> Tuple[Player, int]:
        winner, best = self.leader()
        print("=== GAME ENDED ===")
        print(f"Winner: {winner.name} with {best} VP.")
        return winner, best

    # ── Output ────────────────────────────────────────────────────────────────

    def pause(self) -> None:
        if self.turn_delay > 0:
            time.sleep(self.turn_delay)

    def log(self, player: Player, action: str) -> None:
        print(f"{self.current_round} / {player.name}: {action}")

    def print_victory_points_summary(self) -> None:
        summary = ", ".join(f"{p.name}={self.victory_points(p)}" for p in self.players)
        print(f"{self.current_round} / SYSTEM: VP summary -> {summary}")

    def print_status(self) -> None:
        print("\nPlayers:")
        for p in self.players:
            print(
                f"  {p.name:10} VP:{self.victory_points(p):2} "
                f"Roads:{p.roads_built:2} Sett:{p.settlements_built:2} "
                f"Cities:{p.cities_built:2} Hand[{p.hand_str()}]"
            )
        print(f"  BANK       {', '.join(f'{r}:{self.bank.counts[r]}' for r in RESOURCES)}")
        print()
