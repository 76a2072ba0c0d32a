# topology.py - Board construction: tile/node/edge layout with deterministic ids

from __future__ import annotations

from collections import deque
from typing import Dict, List, Tuple

from constants import (
    BOARD_RADIUS, EDGE_COUNT, HEX_SIZE, NODE_COUNT, TILE_COUNT, TILE_NUMBERS, TILE_TERRAINS,
)
from geometry import axial_to_center, board_coords, corner_lattice, hex_corners
from logging_config import get_logger
from models import Edge, Node, Tile

logger = get_logger(__name__)

LatticeKey = Tuple[int, int]

# Corner positions (CORNER_NAMES order) of the centre tile, listed by the id they receive:
# top-right=0, right=1, bottom-right=2, bottom-left=3, left=4, top-left=5.
CENTER_ID_ORDER = [1, 2, 3, 4, 5, 0]


class TopologyError(RuntimeError):
    """Raised when the generated board is not a valid 54-intersection map."""


def build_topology(
    size: float = HEX_SIZE,
) -> Tuple[List[Tile], List[Node], List[Edge]]:
    """
    Generate the fixed 19-tile board.

    Returns
    -------
    tiles, nodes, edges
        Each list is indexed by id. Node ids are seeded on the centre tile and
        spread breadth-first; edge ids follow (min endpoint, max endpoint).
    """
    coords = board_coords(BOARD_RADIUS)
    if len(coords) != TILE_COUNT:
        raise TopologyError(f"Expected {TILE_COUNT} tiles, generated {len(coords)}")

    # 1) Unique vertices, keyed on exact lattice coordinates.
    first_seen: List[LatticeKey] = []
    points: Dict[LatticeKey, Tuple[float, float]] = {}
    tile_corners: List[List[LatticeKey]] = []
    for q, r in coords:
        keys = corner_lattice(q, r)
        floats = hex_corners(axial_to_center(q, r, size), size)
        for key, point in zip(keys, floats):
            if key not in points:
                points[key] = point
                first_seen.append(key)
        tile_corners.append(keys)

    # 2) Node ids before any edge exists.
    node_ids = assign_node_ids(tile_corners, first_seen)

    # 3) Edges from final ids.
    pairs = edge_pairs(tile_corners, node_ids)
    if len(pairs) != EDGE_COUNT:
        raise TopologyError(f"Expected {EDGE_COUNT} edges, generated {len(pairs)}")
    edges = [Edge(idx=eidx, a=a, b=b) for eidx, (a, b) in enumerate(pairs)]

    nodes: List[Node] = [
        Node(idx=nidx, point=points[key])
        for key, nidx in sorted(node_ids.items(), key=lambda item: item[1])
    ]
    for edge in edges:
        nodes[edge.a].edges.append(edge.idx)
        nodes[edge.b].edges.append(edge.idx)

    # 4) Tiles linked to their final intersections.
    tiles: List[Tile] = []
    for tidx, (q, r) in enumerate(coords):
        corner_ids = [node_ids[key] for key in tile_corners[tidx]]
        tile = Tile(
            idx=tidx,
            q=q,
            r=r,
            terrain=TILE_TERRAINS[tidx],
            number=TILE_NUMBERS[tidx],
            nodes=corner_ids,
        )
        for nidx in corner_ids:
            nodes[nidx].hexes.append(tidx)
        tiles.append(tile)

    logger.debug("topology_built", tiles=len(tiles), nodes=len(nodes), edges=len(edges))
    return tiles, nodes, edges


def corner_neighbors(tile_corners: List[List[LatticeKey]]) -> Dict[LatticeKey, List[LatticeKey]]:
    """Adjacent vertices of every corner, found through the tiles that share it.

    Two corners are adjacent when they are consecutive on some tile. Neighbours
    are listed in tile order, previous corner before next corner.
    """
    neighbors: Dict[LatticeKey, List[LatticeKey]] = {}
    for keys in tile_corners:
        for i, key in enumerate(keys):
            bucket = neighbors.setdefault(key, [])
            for other in (keys[(i - 1) % 6], keys[(i + 1) % 6]):
                if other not in bucket:
                    bucket.append(other)
    return neighbors


def assign_node_ids(
    tile_corners: List[List[LatticeKey]], first_seen: List[LatticeKey]
) -> Dict[LatticeKey, int]:
    """Number every vertex 0..53, centre tile first, then breadth-first outward."""
    center = tile_corners[0]
    seeds = [center[pos] for pos in CENTER_ID_ORDER]
    ids: Dict[LatticeKey, int] = {key: nidx for nidx, key in enumerate(seeds)}

    neighbors = corner_neighbors(tile_corners)
    queue = deque(seeds)
    while queue:
        current = queue.popleft()
        for nb in neighbors.get(current, []):
            if nb in ids:
                continue
            ids[nb] = len(ids)
            queue.append(nb)

    if len(ids) < len(first_seen):
        logger.warning("node_bfs_incomplete", reached=len(ids), total=len(first_seen))
        for key in first_seen:
            if key not in ids:
                ids[key] = len(ids)

    if len(ids) != NODE_COUNT or sorted(ids.values()) != list(range(NODE_COUNT)):
        raise TopologyError(f"Expected {NODE_COUNT} intersections, assigned: {len(ids)}")
    return ids


def edge_pairs(
    tile_corners: List[List[LatticeKey]], node_ids: Dict[LatticeKey, int]
) -> List[Tuple[int, int]]:
    """Unique (low, high) node-id pairs around every tile, sorted ascending."""
    pairs = set()
    for keys in tile_corners:
        ids = [node_ids[key] for key in keys]
        for i in range(6):
            a, b = ids[i], ids[(i + 1) % 6]
            pairs.add((min(a, b), max(a, b)))
    return sorted(pairs)
