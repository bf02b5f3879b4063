from collections import deque

from HiveEngine.HexGrid import DIRECTIONS, HexCoordinate, neighbors, occupied_neighbors
from HiveEngine.Pieces import BugType

# Bugs that leave their cell by sliding along the ground.
SLIDING_BUGS = (BugType.QUEEN_BEE, BugType.SPIDER, BugType.SOLDIER_ANT)

SPIDER_STEPS = 3


class HiveRules:
    # ---------------------------------------------------------
    # 1. Connectivity oracle
    # ---------------------------------------------------------
    @staticmethod
    def is_board_connected(board):
        occupied_cells = board.occupied_cells()
        if not occupied_cells:
            return True

        parent = {cell: cell for cell in occupied_cells}

        def find(x):
            while parent[x] != x:
                parent[x] = parent[parent[x]]
                x = parent[x]
            return x

        def union(x, y):
            rx = find(x)
            ry = find(y)
            if rx != ry:
                parent[ry] = rx

        for cell in occupied_cells:
            for neighbor in neighbors(cell):
                if neighbor in parent:
                    union(cell, neighbor)

        roots = {find(cell) for cell in occupied_cells}
        return len(roots) == 1

    @staticmethod
    def stays_connected_without_tile(board, coord):
        """
        One-hive check: does the hive stay in one piece while the piece at
        `coord` is picked up? Works on a scratch set of occupied cells, the
        board itself is never touched.
        """
        assert not board.is_empty(), "connectivity checked on an empty board"
        assert board.is_occupied(coord), f"no piece at {coord}"

        remaining = set(board.occupied_cells())
        if not board.is_covering(coord):
            remaining.discard(coord)
        if not remaining:
            return True

        starts = [n for n in neighbors(coord) if n in remaining]
        if not starts:
            return False

        visited = {starts[0]}
        queue = deque([starts[0]])
        while queue:
            cell = queue.popleft()
            for neighbor in neighbors(cell):
                if neighbor in remaining and neighbor not in visited:
                    visited.add(neighbor)
                    queue.append(neighbor)
        return len(visited) == len(remaining)

    @staticmethod
    def is_space_surrounded(board, coord):
        """More than four occupied neighbors: nothing can slide in or out."""
        return len(occupied_neighbors(board, coord)) > 4

    @staticmethod
    def has_freedom_to_move(board, coord):
        return not HiveRules.is_space_surrounded(board, coord)

    @staticmethod
    def can_slide(board, origin, destination):
        """
        True if the gap between two adjacent cells is wide enough.
        Of the two cells flanking the shared edge, at least one must be empty.
        """
        if destination not in neighbors(origin):
            return False
        common = set(neighbors(origin)) & set(neighbors(destination))
        return not all(board.is_occupied(c) for c in common)

    # ---------------------------------------------------------
    # 2. Placement
    # ---------------------------------------------------------
    @staticmethod
    def legal_placements(board, player_id, is_opening_move):
        """
        Cells where `player_id` may put a new piece. During the opening
        round the whole frontier is open (just the seed cell on an empty
        board); afterwards a cell must touch one of the player's own pieces.
        """
        if is_opening_move or board.is_empty():
            return set(board.frontier)

        return {
            cell for cell in board.frontier
            if any(board.piece_at(n).owner_id == player_id for n in occupied_neighbors(board, cell))
        }

    # ---------------------------------------------------------
    # 3. Movement
    # ---------------------------------------------------------
    @staticmethod
    def legal_moves(board, origin):
        """
        Destinations for the visible piece at `origin`. An empty set means
        the piece cannot move this turn.
        """
        origin = HexCoordinate(*origin)
        piece = board.piece_at(origin)
        assert piece is not None, f"no piece to move at {origin}"

        climbing_down = piece.bug_type is BugType.BEETLE and board.is_covering(origin)
        if not climbing_down and not HiveRules.stays_connected_without_tile(board, origin):
            return set()
        if piece.bug_type in SLIDING_BUGS and not HiveRules.has_freedom_to_move(board, origin):
            return set()

        scratch = board.lifted(origin)
        return MOVE_GENERATORS[piece.bug_type](board, scratch, origin)

    @staticmethod
    def queen_destinations(board, scratch, origin):
        frontier = scratch.frontier
        return {
            cell for cell in neighbors(origin)
            if cell in frontier and HiveRules.can_slide(scratch, origin, cell)
        }

    @staticmethod
    def beetle_destinations(board, scratch, origin):
        on_top = board.is_covering(origin)
        frontier = scratch.frontier
        destinations = set()
        for cell in neighbors(origin):
            if not scratch.in_bounds(cell):
                continue
            if scratch.is_occupied(cell):
                # Stacks are at most two high.
                if not scratch.is_covering(cell):
                    destinations.add(cell)
            elif on_top:
                destinations.add(cell)
            elif cell in frontier and HiveRules.can_slide(scratch, origin, cell):
                destinations.add(cell)
        return destinations

    @staticmethod
    def grasshopper_destinations(board, scratch, origin):
        destinations = set()
        for direction in DIRECTIONS:
            cell = origin + direction
            if not scratch.is_occupied(cell):
                continue
            while scratch.is_occupied(cell):
                cell = cell + direction
            if scratch.in_bounds(cell):
                destinations.add(cell)
        return destinations

    @staticmethod
    def ant_destinations(board, scratch, origin):
        return {
            cell for cell in scratch.frontier
            if cell != origin and not HiveRules.is_space_surrounded(scratch, cell)
        }

    @staticmethod
    def spider_destinations(board, scratch, origin):
        """
        Breadth-first walk around the hive, one layer per step. A cell is
        visited the first time it is reached, so the spider never doubles
        back; the answer is whatever is first reached on the third step.
        """
        frontier = scratch.frontier
        visited = {origin}
        layer = [origin]
        for _ in range(SPIDER_STEPS):
            next_layer = []
            for cell in layer:
                for neighbor in neighbors(cell):
                    if neighbor in visited or neighbor not in frontier:
                        continue
                    if not HiveRules.can_slide(scratch, cell, neighbor):
                        continue
                    visited.add(neighbor)
                    next_layer.append(neighbor)
            layer = next_layer
        return set(layer)


MOVE_GENERATORS = {
    BugType.QUEEN_BEE: HiveRules.queen_destinations,
    BugType.BEETLE: HiveRules.beetle_destinations,
    BugType.GRASSHOPPER: HiveRules.grasshopper_destinations,
    BugType.SOLDIER_ANT: HiveRules.ant_destinations,
    BugType.SPIDER: HiveRules.spider_destinations,
}
