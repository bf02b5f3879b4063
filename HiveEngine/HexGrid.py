import math
from typing import NamedTuple


class HexCoordinate(NamedTuple):
    """Axial (q, r) coordinate. Ordered by q, then r."""
    q: int
    r: int

    def __add__(self, other):
        return HexCoordinate(self.q + other[0], self.r + other[1])


DIRECTIONS = (
    HexCoordinate(-1, 1),   # bottom-left
    HexCoordinate(1, -1),   # top-right
    HexCoordinate(1, 0),    # right
    HexCoordinate(-1, 0),   # left
    HexCoordinate(0, -1),   # top-left
    HexCoordinate(0, 1),    # bottom-right
)


def neighbors(coord):
    """
    Returns the six neighbors of `coord`, occupied or not.
    """
    q, r = coord
    return [HexCoordinate(q + dq, r + dr) for dq, dr in DIRECTIONS]


def occupied_neighbors(board, coord):
    return {n for n in neighbors(coord) if board.is_occupied(n)}


def empty_neighbors(board, coord):
    """Neighbors of `coord` that are empty and inside the board."""
    return {n for n in neighbors(coord) if not board.is_occupied(n) and board.in_bounds(n)}


def hex_distance(a, b):
    x1, z1 = a
    y1 = -x1 - z1
    x2, z2 = b
    y2 = -x2 - z2
    return (abs(x1 - x2) + abs(y1 - y2) + abs(z1 - z2)) // 2


# ---------------------------------------------------------
# Fractional coordinates
# ---------------------------------------------------------
def cube_round(x, y, z):
    """
    Rounds fractional cube coordinates to the nearest hex.

    Every component is rounded on its own, then the one that moved the most
    is recomputed from the other two so that x + y + z == 0 holds exactly.
    """
    rx = round(x)
    ry = round(y)
    rz = round(z)

    x_diff = abs(rx - x)
    y_diff = abs(ry - y)
    z_diff = abs(rz - z)

    if x_diff > y_diff and x_diff > z_diff:
        rx = -ry - rz
    elif y_diff > z_diff:
        ry = -rx - rz
    else:
        rz = -rx - ry

    return (int(rx), int(ry), int(rz))


def axial_round(q, r):
    """Nearest axial coordinate to the fractional axial (q, r)."""
    cq, cr, _ = cube_round(q, r, -q - r)
    return HexCoordinate(cq, cr)


def axial_to_pixel(q, r, hex_size):
    """
    Convert axial coords (q,r) to the pixel center of a pointy-top hex
    of radius `hex_size`, with (0, 0) at the pixel origin.
    """
    x = hex_size * math.sqrt(3) * (q + r / 2.0)
    y = hex_size * (3.0 / 2.0) * r
    return (x, y)


def pixel_to_axial(x, y, hex_size):
    q = (math.sqrt(3) / 3 * x - 1 / 3 * y) / hex_size
    r = (2 / 3 * y) / hex_size
    return axial_round(q, r)
