import curses

import pytest

from cursetris.game import BOARD_HEIGHT, BOARD_WIDTH, Action, Game
from cursetris.pieces import standard_tetrominoes
from cursetris.ui import SIDEBAR_X, Screen, key_to_action, render_lines


class FixedRandom:
    def __init__(self, value=0):
        self.value = value

    def randrange(self, stop):
        return self.value % stop


class FakeWindow:
    def __init__(self, keys=(), fail_rows=()):
        self.keys = list(keys)
        self.fail_rows = set(fail_rows)
        self.rows = {}
        self.keypad_flag = None
        self.timeout_value = None
        self.nodelay_flag = None
        self.refreshes = 0

    def keypad(self, flag):
        self.keypad_flag = flag

    def timeout(self, value):
        self.timeout_value = value

    def nodelay(self, flag):
        self.nodelay_flag = flag

    def addstr(self, y, x, text):
        if y in self.fail_rows:
            raise curses.error("out of range")
        self.rows[y] = text

    def refresh(self):
        self.refreshes += 1

    def getch(self):
        return self.keys.pop(0) if self.keys else -1


def make_game():
    return Game(standard_tetrominoes(), FixedRandom(0), sequential=True)


@pytest.mark.parametrize(
    "key, action",
    [
        (ord("q"), Action.QUIT),
        (curses.KEY_LEFT, Action.LEFT),
        (curses.KEY_RIGHT, Action.RIGHT),
        (curses.KEY_DOWN, Action.DOWN),
        (curses.KEY_UP, Action.ROTATE),
        (ord(" "), Action.DROP),
        (-1, Action.NONE),
        (ord("x"), Action.NONE),
    ],
)
def test_key_to_action(key, action):
    assert key_to_action(key) is action


def test_render_borders():
    lines = render_lines(make_game())
    border = "+" + "-" * BOARD_WIDTH + "+"
    assert lines[0] == border
    assert lines[BOARD_HEIGHT + 1] == border
    for line in lines[1 : BOARD_HEIGHT + 1]:
        assert line[0] == "|"
        assert line[BOARD_WIDTH + 1] == "|"


def test_render_shows_falling_piece():
    game = make_game()
    lines = render_lines(game)
    board_area = [line[1 : BOARD_WIDTH + 1] for line in lines[1 : BOARD_HEIGHT + 1]]
    filled = sum(row.count("#") for row in board_area)
    cells = sum(sum(row) for row in game.current_block)
    assert filled == cells
    assert all(cell == "." for cell in game.board[1])


def test_render_sidebar():
    game = make_game()
    lines = render_lines(game)
    assert lines[1][SIDEBAR_X:] == "Score: 0"
    assert lines[2][SIDEBAR_X:] == "High Score: 2200"
    assert lines[3][SIDEBAR_X:] == "Level: 1"
    assert lines[5][SIDEBAR_X:] == "Next:"
    preview = [line[SIDEBAR_X : SIDEBAR_X + 4] for line in lines[6:10]]
    preview_cells = sum(sum(row) for row in game.shapes[game.next_tetromino][0])
    assert sum(row.count("#") for row in preview) == preview_cells


def test_render_debug_line():
    game = make_game()
    plain = render_lines(game)
    debug = render_lines(game, debug=True)
    assert len(plain) == BOARD_HEIGHT + 2
    assert debug[: len(plain)] == plain
    expected = (
        f"x:{game.block_x} y:{game.block_y} "
        f"r:{game.current_rotation} t:{game.current_tetromino}"
    )
    assert debug[BOARD_HEIGHT + 3][SIDEBAR_X:] == expected


def test_render_reflects_landed_cells():
    game = make_game()
    game.drop()
    lines = render_lines(game)
    bottom = lines[BOARD_HEIGHT][1 : BOARD_WIDTH + 1]
    assert bottom == "".join(game.board[BOARD_HEIGHT - 1])
    assert "#" in bottom


def test_screen_setup():
    window = FakeWindow()
    Screen(window)
    assert window.keypad_flag is True
    assert window.timeout_value == 0


def test_screen_draw_matches_render():
    window = FakeWindow()
    game = make_game()
    Screen(window, debug=True).draw(game)
    expected = {y: line for y, line in enumerate(render_lines(game, True)) if line}
    assert window.rows == expected
    assert window.refreshes == 1


def test_screen_draw_skips_rows_that_fail():
    window = FakeWindow(fail_rows={0})
    game = make_game()
    Screen(window).draw(game)
    assert 0 not in window.rows
    assert window.rows[1] == render_lines(game)[1]
    assert window.refreshes == 1


def test_screen_read_action():
    window = FakeWindow(keys=[curses.KEY_LEFT, ord("q")])
    screen = Screen(window)
    assert screen.read_action() is Action.LEFT
    assert screen.read_action() is Action.QUIT
    assert screen.read_action() is Action.NONE


def test_screen_wait_for_key():
    window = FakeWindow(keys=[ord("z")])
    screen = Screen(window)
    assert screen.wait_for_key() == ord("z")
    assert window.nodelay_flag is False