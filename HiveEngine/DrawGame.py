"""
A small pygame front end for HiveMatch.

It only draws what the match reports and turns mouse clicks into selection
events; every rule decision is left to the engine.

    hive-viewer --config match.json --hex-size 36
"""
import argparse
import logging
import math
import sys

import pygame

from HiveEngine.Config import MatchConfig, configure_logging, load_config
from HiveEngine.Errors import RuleViolation
from HiveEngine.HexGrid import axial_to_pixel, neighbors, pixel_to_axial
from HiveEngine.HiveMatch import HiveMatch
from HiveEngine.Pieces import INVENTORY_ORDER
from HiveEngine.Selection import SelectionController

HEX_SIZE = 40
WINDOW_SIZE = (960, 720)
PANEL_HEIGHT = 90
SLOT_WIDTH = 110

BACKGROUND_COLOR = (40, 40, 40)
GRID_COLOR = (90, 90, 96)
TEXT_COLOR = (255, 255, 255)
PLAYER_ON_TURN_COLOR = (230, 41, 55)
HIGHLIGHT_COLOR = (0, 158, 47)
POSSIBLE_MOVES_COLOR = (7, 140, 140)
PLAYER_COLORS = {0: (0, 0, 0), 1: (130, 130, 130)}


# ---------------------- Hex Grid Helpers -------------------------
def hex_to_screen(coord, origin, hex_size=HEX_SIZE):
    x, y = axial_to_pixel(coord[0], coord[1], hex_size)
    return (x + origin[0], y + origin[1])


def screen_to_hex(pos, origin, hex_size=HEX_SIZE):
    return pixel_to_axial(pos[0] - origin[0], pos[1] - origin[1], hex_size)


def polygon_corners(center, size):
    """
    The six corners of a pointy-top hex centered at `center`.
    """
    cx, cy = center
    corners = []
    for i in range(6):
        angle_rad = math.radians(60 * i - 30)
        corners.append((cx + size * math.cos(angle_rad), cy + size * math.sin(angle_rad)))
    return corners


def board_origin(match, window_size, hex_size=HEX_SIZE):
    """Pixel position of axial (0, 0) that puts the seed cell mid-window."""
    sx, sy = axial_to_pixel(*match.board.seed, hex_size)
    return (window_size[0] / 2 - sx, (window_size[1] - PANEL_HEIGHT) / 2 - sy)


def inventory_slot_at(pos, window_size):
    """Index of the hand slot under `pos`, or None outside the hand panel."""
    x, y = pos
    if y < window_size[1] - PANEL_HEIGHT:
        return None
    index = int(x // SLOT_WIDTH)
    return index if 0 <= index < len(INVENTORY_ORDER) else None


def cells_to_draw(match):
    board = match.board
    if board.bounds is not None:
        return board.bounds
    cells = set(board.frontier) | set(board.occupied_cells())
    for cell in list(cells):
        cells.update(neighbors(cell))
    return cells


# ---------------------- Drawing -------------------------
def draw_board(surface, match, controller, origin, font, hex_size=HEX_SIZE):
    snapshot = match.board_snapshot()
    highlights = controller.highlights
    for coord in cells_to_draw(match):
        center = hex_to_screen(coord, origin, hex_size)
        corners = polygon_corners(center, hex_size)
        tile = snapshot.get(coord)
        if tile is not None:
            pygame.draw.polygon(surface, PLAYER_COLORS[tile.owner_id], corners, 0)
            pygame.draw.polygon(surface, tile.display_color, polygon_corners(center, hex_size * 0.6), 0)
            label = tile.bug_type.letter
            if tile.covered is not None:
                label += f"/{tile.covered.bug_type.letter}"
            text = font.render(label, True, TEXT_COLOR)
            surface.blit(text, text.get_rect(center=center))
        if coord == controller.selected_origin:
            pygame.draw.polygon(surface, HIGHLIGHT_COLOR, corners, 4)
        elif coord in highlights:
            pygame.draw.polygon(surface, POSSIBLE_MOVES_COLOR, corners, 3)
        else:
            pygame.draw.polygon(surface, GRID_COLOR, corners, 1)


def draw_hand_panel(surface, match, controller, font, window_size):
    top = window_size[1] - PANEL_HEIGHT
    pygame.draw.rect(surface, (25, 25, 25), (0, top, window_size[0], PANEL_HEIGHT))
    player = match.current_player()
    for index, (bug_type, count) in enumerate(player.inventory()):
        rect = pygame.Rect(index * SLOT_WIDTH, top, SLOT_WIDTH, PANEL_HEIGHT)
        if bug_type is controller.selected_bug:
            pygame.draw.rect(surface, HIGHLIGHT_COLOR, rect, 3)
        text = font.render(f"{bug_type.value} x{count}", True, TEXT_COLOR)
        surface.blit(text, text.get_rect(center=rect.center))
    name = font.render(f"{player.name} on turn (turn {match.turn})", True, PLAYER_ON_TURN_COLOR)
    surface.blit(name, (len(INVENTORY_ORDER) * SLOT_WIDTH + 20, top + PANEL_HEIGHT // 2 - 10))


def draw_banner(surface, message, font, window_size):
    if not message:
        return
    text = font.render(message, True, PLAYER_ON_TURN_COLOR)
    surface.blit(text, text.get_rect(center=(window_size[0] / 2, 30)))


# ---------------------- Main loop -------------------------
def run(config, hex_size=HEX_SIZE):
    match = HiveMatch(config)
    controller = SelectionController(match)

    pygame.init()
    screen = pygame.display.set_mode(WINDOW_SIZE, pygame.RESIZABLE)
    pygame.display.set_caption("Hive")
    font = pygame.font.SysFont(None, 24)
    banner_font = pygame.font.SysFont(None, 40)
    window_size = WINDOW_SIZE

    running = True
    while running:
        origin = board_origin(match, window_size, hex_size)
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.VIDEORESIZE:
                window_size = (event.w, event.h)
                screen = pygame.display.set_mode(window_size, pygame.RESIZABLE)
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_p:
                try:
                    match.apply_pass()
                except RuleViolation as e:
                    logging.warning(f"Rejected action: {e.message}")
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                slot = inventory_slot_at(event.pos, window_size)
                if slot is not None:
                    controller.select_inventory(slot)
                else:
                    controller.try_select_cell(screen_to_hex(event.pos, origin, hex_size))

        screen.fill(BACKGROUND_COLOR)
        draw_board(screen, match, controller, origin, font, hex_size)
        draw_hand_panel(screen, match, controller, font, window_size)
        draw_banner(screen, match.message, banner_font, window_size)
        pygame.display.flip()
        pygame.time.wait(15)

    pygame.quit()
    return match


# ---------------------- CLI parser -------------------------
def parser():
    p = argparse.ArgumentParser(description="Play a local game of Hive.")
    p.add_argument("--config", metavar="PATH", help="JSON match config")
    p.add_argument("--hex-size", type=int, default=HEX_SIZE)
    p.add_argument("--log-level", default="INFO",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return p


def main(argv=None):
    args = parser().parse_args(argv)
    configure_logging(args.log_level)
    config = load_config(args.config) if args.config else MatchConfig()
    match = run(config, args.hex_size)
    logging.info(f"Final status: {match.current_status().value}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
