import random

import pygame

from blockfall.block import CELL_SIZE, IBlock, TBlock
from blockfall.colors import get_cell_colors
from blockfall.game import Game
from blockfall.position import Position


def make_game(seed=0):
    return Game(rng=random.Random(seed))


def test_bag_hands_out_every_kind_once():
    game = make_game()
    ids = [game.current_block.id, game.next_block.id]
    ids += [game.get_random_block().id for _ in range(5)]
    assert sorted(ids) == list(range(1, 8))
    assert game.blocks == []


def test_bag_refills_when_empty():
    game = make_game(3)
    for _ in range(5):
        game.get_random_block()
    game.get_random_block()
    assert len(game.blocks) == len(game.get_all_blocks()) - 1


def test_get_all_blocks_returns_fresh_instances():
    game = make_game()
    first = game.get_all_blocks()
    second = game.get_all_blocks()
    assert [b.id for b in first] == [b.id for b in second]
    assert all(a is not b for a, b in zip(first, second))


def test_move_left_stops_at_wall():
    game = make_game()
    for _ in range(20):
        game.move_block_left()
    columns = [p.column for p in game.current_block.get_cell_positions()]
    assert min(columns) == 0


def test_move_right_stops_at_wall():
    game = make_game()
    for _ in range(20):
        game.move_block_right()
    columns = [p.column for p in game.current_block.get_cell_positions()]
    assert max(columns) == game.grid.num_cols - 1


def test_move_down_stops_at_floor():
    game = make_game()
    for _ in range(40):
        game.move_block_down()
    rows = [p.row for p in game.current_block.get_cell_positions()]
    assert max(rows) == game.grid.num_rows - 1


def test_rotation_blocked_at_wall_is_reverted():
    game = make_game()
    game.current_block = IBlock()
    game.rotate_block()
    for _ in range(10):
        game.move_block_left()
    before = game.current_block.get_cell_positions()
    state = game.current_block.rotation_state
    game.rotate_block()
    assert game.current_block.rotation_state == state
    assert game.current_block.get_cell_positions() == before


def test_rotation_in_open_space():
    game = make_game()
    game.current_block = TBlock()
    game.move_block_down()
    game.rotate_block()
    assert game.current_block.rotation_state == 1


def test_handle_input_left_key():
    game = make_game()
    game.current_block = TBlock()
    before = game.current_block.get_cell_positions()
    game.handle_input(pygame.K_LEFT)
    after = game.current_block.get_cell_positions()
    assert after == [Position(p.row, p.column - 1) for p in before]


def test_handle_input_down_and_up_keys():
    game = make_game()
    game.current_block = TBlock()
    before = game.current_block.get_cell_positions()
    game.handle_input(pygame.K_DOWN)
    assert game.current_block.get_cell_positions() == [
        Position(p.row + 1, p.column) for p in before
    ]
    game.handle_input(pygame.K_UP)
    assert game.current_block.rotation_state == 1


def test_handle_input_ignores_other_keys():
    game = make_game()
    before = game.current_block.get_cell_positions()
    game.handle_input(pygame.K_a)
    game.handle_input(None)
    assert game.current_block.get_cell_positions() == before


def test_draw_shows_current_block():
    game = make_game()
    surface = pygame.Surface((300, 600))
    game.draw(surface)
    block = game.current_block
    color = get_cell_colors()[block.id]
    for pos in block.get_cell_positions():
        if pos.row >= 0:
            assert surface.get_at((pos.column * CELL_SIZE + 1, pos.row * CELL_SIZE + 1)) == color