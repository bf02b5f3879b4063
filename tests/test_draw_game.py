import unittest

from HiveEngine import DrawGame
from HiveEngine.Config import MatchConfig
from HiveEngine.HiveMatch import HiveMatch


class TestDrawGameHelpers(unittest.TestCase):

    def test_screen_round_trip(self):
        origin = (480, 315)
        for coord in [(0, 0), (2, -1), (-3, 2)]:
            pos = DrawGame.hex_to_screen(coord, origin)
            self.assertEqual(DrawGame.screen_to_hex(pos, origin), coord)

    def test_board_origin_centers_the_seed(self):
        match = HiveMatch()
        origin = DrawGame.board_origin(match, DrawGame.WINDOW_SIZE)
        self.assertAlmostEqual(origin[0], 480)
        self.assertAlmostEqual(origin[1], 315.0)

        match = HiveMatch(MatchConfig(columns=5, rows=4))
        origin = DrawGame.board_origin(match, DrawGame.WINDOW_SIZE)
        seed_pos = DrawGame.hex_to_screen(match.board.seed, origin)
        self.assertAlmostEqual(seed_pos[0], 480)
        self.assertAlmostEqual(seed_pos[1], 315.0)

    def test_inventory_slot_at(self):
        window = DrawGame.WINDOW_SIZE
        bottom = window[1] - 10
        self.assertIsNone(DrawGame.inventory_slot_at((50, 100), window))
        self.assertEqual(DrawGame.inventory_slot_at((50, bottom), window), 0)
        self.assertEqual(DrawGame.inventory_slot_at((DrawGame.SLOT_WIDTH * 4 + 1, bottom), window), 4)
        self.assertIsNone(DrawGame.inventory_slot_at((DrawGame.SLOT_WIDTH * 6, bottom), window))

    def test_polygon_corners(self):
        corners = DrawGame.polygon_corners((0, 0), 10)
        self.assertEqual(len(corners), 6)
        for x, y in corners:
            self.assertAlmostEqual(x * x + y * y, 100)

    def test_cells_to_draw(self):
        match = HiveMatch()
        self.assertIn((0, 0), DrawGame.cells_to_draw(match))
        match = HiveMatch(MatchConfig(columns=5, rows=4))
        self.assertEqual(len(DrawGame.cells_to_draw(match)), 20)

    def test_parser(self):
        args = DrawGame.parser().parse_args(["--hex-size", "30", "--log-level", "DEBUG"])
        self.assertEqual(args.hex_size, 30)
        self.assertEqual(args.log_level, "DEBUG")
        self.assertIsNone(args.config)


if __name__ == "__main__":
    unittest.main()
