# geometry.py - Pure hex-grid geometry helpers (flat-top layout)

from __future__ import annotations

import math
from typing import List, Tuple

Point = Tuple[float, float]
Axial = Tuple[int, int]

SQRT3 = math.sqrt(3)

# Clockwise ring walk directions: E, NE, NW, W, SW, SE.
RING_DIRECTIONS: List[Axial] = [(1, 0), (1, -1), (0, -1), (-1, 0), (-1, 1), (0, 1)]

CORNER_NAMES = ["top-left", "top-right", "right", "bottom-right", "bottom-left", "left"]

# Corner offsets on an exact lattice: x in units of size/2, y in units of size*sqrt(3)/2.
# Same order as CORNER_NAMES.
_LATTICE_OFFSETS: List[Tuple[int, int]] = [(-1, -1), (1, -1), (2, 0), (1, 1), (-1, 1), (-2, 0)]


def axial_to_center(q: int, r: int, size: float) -> Point:
    """Convert axial hex coordinates to the centre point of a flat-top hex."""
    x = size * 1.5 * q
    y = size * SQRT3 * (r + q / 2)
    return x, y


def hex_corners(center: Point, size: float) -> List[Point]:
    """Return the six corners of a flat-top hex in CORNER_NAMES order."""
    cx, cy = center
    half_height = size * SQRT3 / 2
    offsets = [
        (-size * 0.5, -half_height),
        (size * 0.5, -half_height),
        (size, 0.0),
        (size * 0.5, half_height),
        (-size * 0.5, half_height),
        (-size, 0.0),
    ]
    return [(cx + dx, cy + dy) for dx, dy in offsets]


def corner_lattice(q: int, r: int) -> List[Tuple[int, int]]:
    """Exact integer corner coordinates of hex (q, r), in CORNER_NAMES order.

    Two hexes share a corner exactly when they produce the same lattice pair,
    so deduplication never depends on floating-point rounding.
    """
    cx, cy = 3 * q, 2 * r + q
    return [(cx + dx, cy + dy) for dx, dy in _LATTICE_OFFSETS]


def key_point(x: float, y: float) -> Tuple[int, int]:
    """Snap a floating-point coordinate to a 1e-6 integer grid."""
    return (round(x * 1_000_000), round(y * 1_000_000))


def ring_coords(radius: int) -> List[Axial]:
    """Axial coordinates of the ring at *radius*, walked clockwise from (-radius, radius)."""
    if radius == 0:
        return [(0, 0)]
    ring: List[Axial] = []
    q, r = -radius, radius
    for dq, dr in RING_DIRECTIONS:
        for _ in range(radius):
            ring.append((q, r))
            q, r = q + dq, r + dr
    return ring


def board_coords(radius: int = 2) -> List[Axial]:
    """Origin followed by every ring out to *radius*; index is the tile id."""
    coords: List[Axial] = []
    for ring in range(radius + 1):
        coords.extend(ring_coords(ring))
    return coords


def axial_distance(a: Axial, b: Axial) -> int:
    dq = a[0] - b[0]
    dr = a[1] - b[1]
    return (abs(dq) + abs(dr) + abs(dq + dr)) // 2
