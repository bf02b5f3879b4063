import unittest

from HiveEngine.Board import Board
from HiveEngine.HiveRules import HiveRules
from HiveEngine.Pieces import BugType, PieceArena


def build_board(layout):
    """`layout` maps coord -> (bug_type, owner_id)."""
    arena = PieceArena()
    board = Board(arena)
    for coord, (bug_type, owner) in layout.items():
        board.place(coord, arena.create(bug_type, owner))
    return board


Q, S, B, G, A = (BugType.QUEEN_BEE, BugType.SPIDER, BugType.BEETLE,
                 BugType.GRASSHOPPER, BugType.SOLDIER_ANT)


class TestHiveRules(unittest.TestCase):

    def test_is_board_connected(self):
        # Empty board is connected
        self.assertTrue(HiveRules.is_board_connected(build_board({})))

        board = build_board({(0, 0): (Q, 0), (1, 0): (A, 1)})
        self.assertTrue(HiveRules.is_board_connected(board))

        # Two disconnected pieces
        board = build_board({(0, 0): (Q, 0), (2, 2): (A, 1)})
        self.assertFalse(HiveRules.is_board_connected(board))

        board = build_board({
            (0, 0): (Q, 0),
            (1, 0): (A, 1),
            (0, 1): (B, 0),
            (-1, 1): (S, 1),
        })
        self.assertTrue(HiveRules.is_board_connected(board))

    def test_stays_connected_without_tile(self):
        board = build_board({(0, 0): (Q, 0), (1, 0): (A, 1), (2, 0): (A, 0)})
        self.assertFalse(HiveRules.stays_connected_without_tile(board, (1, 0)))
        self.assertTrue(HiveRules.stays_connected_without_tile(board, (0, 0)))
        self.assertTrue(HiveRules.stays_connected_without_tile(board, (2, 0)))
        # The oracle never touches the board.
        self.assertEqual(len(board.occupied_cells()), 3)

    def test_covering_piece_never_splits_the_hive(self):
        board = build_board({(0, 0): (Q, 0), (1, 0): (A, 1), (2, 0): (A, 0), (1, 1): (B, 1)})
        board.move((1, 1), (1, 0))
        self.assertTrue(HiveRules.stays_connected_without_tile(board, (1, 0)))

    def test_connectivity_on_empty_board_is_an_engine_error(self):
        with self.assertRaises(AssertionError):
            HiveRules.stays_connected_without_tile(build_board({}), (0, 0))

    def test_can_slide(self):
        board = build_board({(0, 0): (Q, 0), (1, -1): (A, 1), (0, 1): (A, 0)})
        # Both cells flanking the edge between (0, 0) and (1, 0) are taken.
        self.assertFalse(HiveRules.can_slide(board, (0, 0), (1, 0)))
        self.assertTrue(HiveRules.can_slide(board, (0, 0), (-1, 1)))
        # Not adjacent at all.
        self.assertFalse(HiveRules.can_slide(board, (0, 0), (2, 0)))

    def test_space_surrounded(self):
        ring = {(1, 0): (A, 1), (1, -1): (A, 1), (0, -1): (A, 0), (-1, 0): (A, 0)}
        board = build_board(ring)
        self.assertFalse(HiveRules.is_space_surrounded(board, (0, 0)))
        ring[(-1, 1)] = (S, 0)
        board = build_board(ring)
        self.assertTrue(HiveRules.is_space_surrounded(board, (0, 0)))
        self.assertFalse(HiveRules.has_freedom_to_move(board, (0, 0)))

    def test_legal_placements(self):
        board = build_board({})
        self.assertEqual(HiveRules.legal_placements(board, 0, True), {(0, 0)})

        board = build_board({(0, 0): (Q, 0)})
        self.assertEqual(HiveRules.legal_placements(board, 1, True), set(board.frontier))

        board = build_board({(0, 0): (Q, 0), (1, 0): (Q, 1)})
        placements = HiveRules.legal_placements(board, 0, False)
        self.assertIn((-1, 0), placements)
        self.assertIn((1, -1), placements)
        self.assertNotIn((2, 0), placements)
        self.assertEqual(placements, {(-1, 1), (1, -1), (-1, 0), (0, -1), (0, 1)})

    def test_queen_moves(self):
        board = build_board({(0, 0): (Q, 0), (1, 0): (A, 1)})
        self.assertEqual(HiveRules.legal_moves(board, (0, 0)), {(1, -1), (0, 1)})

    def test_queen_blocked_by_gate(self):
        board = build_board({
            (0, 0): (Q, 0),
            (1, -1): (A, 1),
            (2, -1): (A, 1),
            (2, 0): (A, 1),
            (1, 1): (A, 0),
            (0, 1): (A, 0),
        })
        moves = HiveRules.legal_moves(board, (0, 0))
        self.assertNotIn((1, 0), moves)
        self.assertEqual(moves, {(-1, 1), (0, -1)})

    def test_beetle_moves(self):
        board = build_board({(0, 0): (B, 0), (1, 0): (Q, 1)})
        self.assertEqual(HiveRules.legal_moves(board, (0, 0)), {(1, 0), (1, -1), (0, 1)})

    def test_beetle_on_top_moves_anywhere_but_onto_a_stack(self):
        board = build_board({(0, 0): (Q, 0), (1, 0): (Q, 1), (-1, 0): (B, 0), (2, 0): (B, 1)})
        board.move((2, 0), (1, 0))
        board.move((-1, 0), (0, 0))
        self.assertEqual(
            HiveRules.legal_moves(board, (0, 0)),
            {(-1, 1), (1, -1), (-1, 0), (0, -1), (0, 1)},
        )

    def test_grasshopper_moves(self):
        board = build_board({(-1, 0): (G, 0), (0, 0): (Q, 0), (1, 0): (Q, 1)})
        self.assertEqual(HiveRules.legal_moves(board, (-1, 0)), {(2, 0)})

    def test_ant_moves(self):
        board = build_board({(0, 0): (A, 0), (1, 0): (Q, 1)})
        self.assertEqual(
            HiveRules.legal_moves(board, (0, 0)),
            {(0, 1), (2, -1), (2, 0), (1, -1), (1, 1)},
        )

    def test_ant_cannot_enter_a_surrounded_space(self):
        board = build_board({
            (1, 0): (Q, 1),
            (1, -1): (A, 1),
            (0, -1): (A, 0),
            (-1, 0): (Q, 0),
            (-1, 1): (S, 0),
            (2, 0): (A, 0),
        })
        moves = HiveRules.legal_moves(board, (2, 0))
        self.assertNotIn((0, 0), moves)
        self.assertNotIn((2, 0), moves)
        self.assertIn((0, 1), moves)

    def test_spider_moves_exactly_three_steps(self):
        board = build_board({
            (0, 0): (S, 0),
            (1, 0): (Q, 0),
            (2, 0): (A, 1),
            (3, 0): (Q, 1),
            (4, 0): (A, 0),
        })
        self.assertEqual(HiveRules.legal_moves(board, (0, 0)), {(3, -1), (2, 1)})

    def test_pinned_piece_cannot_move(self):
        board = build_board({(0, 0): (Q, 0), (1, 0): (A, 1), (2, 0): (G, 0)})
        self.assertEqual(HiveRules.legal_moves(board, (1, 0)), set())

    def test_surrounded_slider_cannot_move(self):
        board = build_board({
            (0, 0): (A, 0),
            (1, 0): (Q, 1),
            (1, -1): (A, 1),
            (0, -1): (B, 0),
            (-1, 0): (Q, 0),
            (-1, 1): (S, 0),
        })
        self.assertEqual(HiveRules.legal_moves(board, (0, 0)), set())

    def test_moves_leave_the_board_untouched(self):
        board = build_board({(0, 0): (A, 0), (1, 0): (Q, 1)})
        before = set(board.frontier)
        HiveRules.legal_moves(board, (0, 0))
        self.assertEqual(board.frontier, before)
        self.assertTrue(board.is_occupied((0, 0)))


if __name__ == "__main__":
    unittest.main()
