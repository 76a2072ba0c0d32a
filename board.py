# board.py - Board graph: tiles, intersections, edges and the robber

from __future__ import annotations

from typing import List, Optional, Set, Tuple

from constants import HEX_SIZE
from models import Edge, Node, Tile
from topology import TopologyError, build_topology


class Board:
    """The fixed board graph plus the single movable robber.

    Collection shapes never change after construction; only ownership fields
    on nodes and edges (through rules.py) and the robber position mutate.
    """

    def __init__(self, size: float = HEX_SIZE):
        self._tiles: List[Tile]
        self._nodes: List[Node]
        self._edges: List[Edge]
        self._tiles, self._nodes, self._edges = build_topology(size)

        deserts = [t.idx for t in self._tiles if not t.produces]
        if len(deserts) != 1:
            raise TopologyError(f"Expected exactly one desert tile, found {len(deserts)}")
        self._robber_tile: int = deserts[0]

    # ── Read-only views ───────────────────────────────────────────────────────

    @property
    def tiles(self) -> Tuple[Tile, ...]:
        return tuple(self._tiles)

    @property
    def nodes(self) -> Tuple[Node, ...]:
        return tuple(self._nodes)

    @property
    def edges(self) -> Tuple[Edge, ...]:
        return tuple(self._edges)

    def tile(self, tile_idx: int) -> Tile:
        if not 0 <= tile_idx < len(self._tiles):
            raise ValueError(f"Unknown tile id {tile_idx}")
        return self._tiles[tile_idx]

    def node(self, node_idx: int) -> Node:
        if not 0 <= node_idx < len(self._nodes):
            raise ValueError(f"Unknown node id {node_idx}")
        return self._nodes[node_idx]

    def edge(self, edge_idx: int) -> Edge:
        if not 0 <= edge_idx < len(self._edges):
            raise ValueError(f"Unknown edge id {edge_idx}")
        return self._edges[edge_idx]

    def has_node(self, node_idx: int) -> bool:
        return 0 <= node_idx < len(self._nodes)

    def has_edge(self, edge_idx: int) -> bool:
        return 0 <= edge_idx < len(self._edges)

    def tiles_by_token(self, token: int) -> List[Tile]:
        return [t for t in self._tiles if t.number == token]

    # ── Robber ────────────────────────────────────────────────────────────────

    @property
    def robber_tile(self) -> int:
        return self._robber_tile

    def move_robber(self, tile_idx: int) -> None:
        """Place the robber on *tile_idx*; re-selecting the current tile is allowed."""
        self._robber_tile = self.tile(tile_idx).idx

    # ── Graph helpers ─────────────────────────────────────────────────────────

    def node_neighbors(self, node_idx: int) -> Set[int]:
        node = self.node(node_idx)
        return {self._edges[eidx].other(node_idx) for eidx in node.edges}

    def owners_around_tile(self, tile_idx: int) -> List[str]:
        """Distinct owners of the tile's corners, in corner order."""
        owners: List[str] = []
        for nidx in self.tile(tile_idx).nodes:
            owner = self._nodes[nidx].owner
            if owner is not None and owner not in owners:
                owners.append(owner)
        return owners

    def victory_points(self, color: str) -> int:
        return sum(2 if n.is_city else 1 for n in self._nodes if n.owner == color)

    def find_edge(self, a: int, b: int) -> Optional[Edge]:
        for eidx in self.node(a).edges:
            if self._edges[eidx].touches(b):
                return self._edges[eidx]
        return None

    # ── Display ───────────────────────────────────────────────────────────────

    def print_board(self) -> None:
        print("\nTiles:")
        for t in self._tiles:
            robber = " R" if t.idx == self._robber_tile else ""
            num = "-" if t.number is None else str(t.number)
            print(f"  [{t.idx:02}] ({t.q:+d},{t.r:+d}) {t.terrain:9} num:{num:>2}{robber}")

        print("\nNodes:")
        for n in self._nodes:
            owner = "-"
            if n.owner is not None:
                piece = "C" if n.is_city else "S"
                owner = f"{n.owner}:{piece}"
            print(f"  [{n.idx:02}] owner:{owner:10} hexes:{n.hexes}")

        print("\nEdges:")
        for e in self._edges:
            owner = "-" if e.owner is None else e.owner
            print(f"  [{e.idx:02}] {e.a:02}-{e.b:02} owner:{owner}")
        print()
