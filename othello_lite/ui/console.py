from __future__ import annotations

import logging
from enum import Enum, auto
from typing import Callable, Optional

from ..engine.board import BLACK, WHITE
from ..engine.game import Game
from ..engine.notation import coord_to_notation, moves_to_string, notation_to_coord
from ..engine.strength import HINT_DEPTH, depth_for_level, parse_difficulty
from ..tools.diag import log_event
from .render import render_board

log = logging.getLogger(__name__)

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]


class State(Enum):
    SELECT_DIFFICULTY = auto()
    AWAIT_BLACK = auto()
    AWAIT_WHITE = auto()
    GAME_OVER = auto()
    QUIT = auto()


class ConsoleGame:
    """Text console play: the human is Black, the computer White.

    Driven as a state machine; each handler returns the next state.
    Input and output are injectable so the loop can be scripted.
    """

    def __init__(
        self,
        game: Optional[Game] = None,
        input_fn: Optional[InputFn] = None,
        output_fn: Optional[OutputFn] = None,
        difficulty: Optional[int] = None,
    ) -> None:
        self.game = game if game is not None else Game()
        self.input = input_fn if input_fn is not None else input
        self.output = output_fn if output_fn is not None else print
        self.preset_difficulty = difficulty
        self.depth = 0
        self.black_moved = False
        self.white_moved = False
        self.state = State.SELECT_DIFFICULTY

    def run(self) -> int:
        handlers = {
            State.SELECT_DIFFICULTY: self._select_difficulty,
            State.AWAIT_BLACK: self._await_black,
            State.AWAIT_WHITE: self._await_white,
            State.GAME_OVER: self._game_over,
        }
        while self.state is not State.QUIT:
            log.debug("state %s", self.state.name)
            try:
                self.state = handlers[self.state]()
            except EOFError:
                self.output("Quit!")
                self.state = State.QUIT
        return 0

    def _ask(self, prompt: str) -> str:
        return self.input(prompt)

    def _show_board(self) -> None:
        self.output(render_board(self.game.board))

    def _select_difficulty(self) -> State:
        self.game.new_game()
        self.black_moved = self.white_moved = False
        level = self.preset_difficulty
        self.preset_difficulty = None
        while level is None:
            answer = self._ask("AI: Select difficulty: 1-5, or (Q)uit? ")
            if answer.strip()[:1].upper() == "Q":
                self.output("Quit!")
                return State.QUIT
            level = parse_difficulty(answer)
        self.depth = depth_for_level(level)
        log_event("console", "game_start", difficulty=level, depth=self.depth)
        self._show_board()
        return State.AWAIT_BLACK

    def _after_move(self, next_state: State) -> State:
        if (not self.black_moved and not self.white_moved) or not self.game.count_empty():
            return State.GAME_OVER
        return next_state

    def _await_black(self) -> State:
        self.output("Black... ")
        hint = self.game.suggest_move(BLACK, HINT_DEPTH)
        if hint is None:
            self._ask("Cannot move.  Pass!  [press <enter> to continue]")
            self.black_moved = False
            log_event("console", "pass", who=BLACK.name)
            return self._after_move(State.AWAIT_WHITE)

        prompt = f"Specify move (like {coord_to_notation(*hint)}; or LIST, UNDO or QUIT): "
        while True:
            command = self._ask(prompt).strip()[:2].upper()
            if command == "QU":
                self.output("Quit!\n")
                return State.SELECT_DIFFICULTY
            if command == "LI":
                with self.game.enumerated(BLACK) as moves:
                    self.output("Possible moves: " + moves_to_string(moves))
                continue
            if command == "UN":
                if self._undo_last_black():
                    self._show_board()
                    return State.AWAIT_BLACK
                self.output("No moves to undo.")
                continue
            try:
                x, y = notation_to_coord(command)
            except ValueError:
                x = y = -1
            if self.game.is_valid_move(x, y, BLACK):
                flipped = self.game.apply_move(x, y, BLACK)
                log_event("console", "move", who=BLACK.name, move=command, flips=len(flipped) - 1)
                self.black_moved = True
                self._show_board()
                return self._after_move(State.AWAIT_WHITE)
            self.output("That is not a valid move.")

    def _undo_last_black(self) -> bool:
        """Undo computer replies back to and including Black's last move."""
        if not self.game.moves_played():
            return False
        while self.game.moves_played():
            who, (x, y) = self.game.undo_move()
            self.output(f"Undid: {who.name} {coord_to_notation(x, y)}")
            log_event("console", "undo", who=who.name, move=coord_to_notation(x, y))
            if who == BLACK:
                break
        return True

    def _await_white(self) -> State:
        self.output("White... ")
        move = self.game.suggest_move(WHITE, self.depth)
        if move is None:
            self.output("Cannot move.  Pass!")
            self.white_moved = False
            log_event("console", "pass", who=WHITE.name)
            return self._after_move(State.AWAIT_BLACK)
        notation = coord_to_notation(*move)
        self.output(f"Playing {notation}")
        flipped = self.game.apply_move(move[0], move[1], WHITE)
        log_event("console", "move", who=WHITE.name, move=notation, flips=len(flipped) - 1)
        self.white_moved = True
        self._show_board()
        return self._after_move(State.AWAIT_BLACK)

    def _game_over(self) -> State:
        black, white = self.game.disc_counts()
        log_event("console", "game_over", black=black, white=white)
        self.output(format_result(black, white) + "\n")
        return State.SELECT_DIFFICULTY


def format_result(black: int, white: int) -> str:
    if black > white:
        return f"BLACK WINS! {black}:{white} ({black / (black + white) * 100:f}%)"
    if white > black:
        return f"WHITE WINS! {white}:{black} ({white / (black + white) * 100:f}%)"
    return "TIE, NOBODY WINS!"
