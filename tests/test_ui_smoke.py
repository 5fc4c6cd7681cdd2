from __future__ import annotations

from typing import Iterable, List

import pytest

from othello_lite.engine.board import BLACK, EMPTY, WHITE
from othello_lite.engine.game import Game
from othello_lite.engine.search import Searcher
from othello_lite.ui.console import ConsoleGame, State, format_result
from othello_lite.ui.render import render_board


class Script:
    """Feeds canned answers to prompts and records everything shown."""

    def __init__(self, answers: Iterable[str]) -> None:
        self.answers = list(answers)
        self.prompts: List[str] = []
        self.out: List[str] = []

    def ask(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)

    def show(self, text: str) -> None:
        self.out.append(text)


def console(answers: Iterable[str], **kwargs) -> tuple:
    script = Script(answers)
    game = ConsoleGame(Game(Searcher(seed=3)), input_fn=script.ask, output_fn=script.show, **kwargs)
    return game, script


def test_render_initial_board():
    text = render_board(Game().board)
    lines = text.split("\n")
    assert lines[1] == "   1   2   3   4   5   6   7   8"
    assert lines[2].startswith("A ")
    assert lines[3] == "  ---+---+---+---+---+---+---+---"
    row_d = lines[2 + 2 * 3]
    assert row_d == "D    |   |   | O |*X*|   |   |   "
    row_e = lines[2 + 2 * 4]
    assert row_e == "E    |   |   |*X*| O |   |   |   "
    assert sum(1 for line in lines if line[:1].isalpha()) == 8


def test_difficulty_prompt_then_quit():
    game, script = console(["9", "x", "Q"])
    assert game.run() == 0
    assert game.state is State.QUIT
    assert script.prompts.count("AI: Select difficulty: 1-5, or (Q)uit? ") == 3
    assert script.out[-1] == "Quit!"


def test_list_invalid_move_undo_and_quit_round():
    game, script = console(["2", "LIST", "zz", "A1", "C4", "UNDO", "quit", "q"])
    assert game.run() == 0
    assert "Possible moves: C4 D3 E6 F5" in script.out
    assert script.out.count("That is not a valid move.") == 2
    assert any(line.startswith("Playing ") for line in script.out)
    undone = [line for line in script.out if line.startswith("Undid: ")]
    assert len(undone) == 2
    assert undone[0].startswith("Undid: WHITE ")
    assert undone[1] == "Undid: BLACK C4"
    assert "Quit!\n" in script.out
    assert game.depth == 2


def test_hint_is_a_legal_opening_move():
    game, script = console(["1"])
    game.run()
    hint_prompts = [p for p in script.prompts if p.startswith("Specify move")]
    assert hint_prompts
    assert any(f"(like {m};" in hint_prompts[0] for m in ("C4", "D3", "E6", "F5"))


def test_undo_with_no_moves():
    game, script = console(["1", "UNDO"])
    game.run()
    assert "No moves to undo." in script.out


def test_eof_quits():
    game, script = console([])
    assert game.run() == 0
    assert game.state is State.QUIT


def test_preset_difficulty_skips_prompt():
    game, script = console([], difficulty=4)
    game.run()
    assert game.depth == 4
    assert not any(p.startswith("AI:") for p in script.prompts)


def test_full_board_ends_game():
    game, script = console(["q"])
    cells = game.game.board.cells
    for i in range(8):
        for j in range(8):
            cells[i][j] = WHITE if i == 0 and j < 5 else BLACK
    game.black_moved = True
    game.state = State.AWAIT_WHITE
    game.run()
    assert "Cannot move.  Pass!" in script.out
    assert "BLACK WINS! 59:5 (92.187500%)\n" in script.out


@pytest.mark.parametrize(
    "black,white,expected",
    [
        (40, 24, "BLACK WINS! 40:24 (62.500000%)"),
        (10, 54, "WHITE WINS! 54:10 (84.375000%)"),
        (32, 32, "TIE, NOBODY WINS!"),
    ],
)
def test_format_result(black, white, expected):
    assert format_result(black, white) == expected


def test_both_sides_pass_ends_game():
    game, script = console(["", "q"])
    cells = game.game.board.cells
    for i in range(8):
        for j in range(8):
            cells[i][j] = WHITE
    cells[0][0] = cells[0][1] = EMPTY
    game.white_moved = True
    game.state = State.AWAIT_BLACK
    game.run()
    assert "Cannot move.  Pass!  [press <enter> to continue]" in script.prompts
    assert "Cannot move.  Pass!" in script.out
    assert "WHITE WINS! 62:0 (100.000000%)\n" in script.out
    assert game.state is State.QUIT
