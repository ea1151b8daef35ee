"""Command interpreter and play loop.

A :class:`Game` owns the live :class:`~ataxx.core.Board` and moves through
three states: SETUP (blocks, moves and player choices are edited), PLAYING
(players are asked for moves in turn) and FINISHED (the result has been
reported; commands run until ``clear`` or ``quit``).  Interested parties, such
as a display, register an ``on_change`` callback that receives the board after
every mutation the game makes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from importlib import resources
from typing import Callable, Dict, Optional, Sequence, Union

import numpy as np

from ataxx.core import AtaxxError, Board, CommandError, GameResult, PieceColor, parse_square
from ataxx.players import AIPlayer, Player, RandomPlayer
from ataxx.search import SearchConfig

from .commands import Command, CommandType, parse_command, parse_move
from .manual import ManualPlayer
from .reporter import TextReporter
from .sources import CommandSources, LineSource

logger = logging.getLogger(__name__)

PLAYER_KINDS = ("manual", "ai", "random")


class State(Enum):
    SETUP = "setup"
    PLAYING = "playing"
    FINISHED = "finished"


@dataclass
class GameConfig:
    red: str = "manual"
    blue: str = "ai"
    search: SearchConfig = field(default_factory=SearchConfig)
    seed: Optional[int] = None
    prompt: str = "ataxx: "

    def __post_init__(self) -> None:
        for kind in (self.red, self.blue):
            if kind not in PLAYER_KINDS:
                raise ValueError(f"Unknown player kind {kind!r}; expected one of {PLAYER_KINDS}")


BoardListener = Callable[[Board], None]


class Game:
    def __init__(
        self,
        source: Union[LineSource, CommandSources],
        reporter: Optional[TextReporter] = None,
        config: Optional[GameConfig] = None,
        *,
        board: Optional[Board] = None,
        on_change: Optional[BoardListener] = None,
    ) -> None:
        self._inputs = source if isinstance(source, CommandSources) else CommandSources([source])
        self._reporter = reporter or TextReporter()
        self.config = config or GameConfig()
        self._board = board if board is not None else Board()
        self._on_change = on_change
        self._rng = np.random.default_rng(self.config.seed)
        self._kinds: Dict[PieceColor, str] = {
            PieceColor.RED: self.config.red,
            PieceColor.BLUE: self.config.blue,
        }
        self._state = State.SETUP
        self._players: Dict[PieceColor, Player] = {}
        self._running = False
        self._handlers: Dict[CommandType, Callable[[Sequence[str]], None]] = {
            CommandType.AUTO: self._do_auto,
            CommandType.MANUAL: self._do_manual,
            CommandType.BLOCK: self._do_block,
            CommandType.CLEAR: self._do_clear,
            CommandType.DUMP: self._do_dump,
            CommandType.HELP: self._do_help,
            CommandType.LOAD: self._do_load,
            CommandType.PASS: self._do_pass,
            CommandType.PIECEMOVE: self._do_move,
            CommandType.SEED: self._do_seed,
            CommandType.START: self._do_start,
            CommandType.QUIT: self._do_quit,
            CommandType.EOF: self._do_quit,
        }

    @property
    def board(self) -> Board:
        return self._board

    @property
    def state(self) -> State:
        return self._state

    def player_kind(self, color: PieceColor) -> str:
        return self._kinds[color]

    # ------------------------------------------------------------------
    # Main loop
    # ------------------------------------------------------------------
    def process(self) -> None:
        """Run games until ``quit`` or the end of input.

        Play starts from the board as it stands; ``clear`` returns to the
        starting layout.
        """
        self._running = True
        self._state = State.SETUP
        self._changed()
        while self._running:
            while self._running and self._state is State.SETUP:
                self.do_command()
            if not self._running:
                break
            self._play()
            while self._running and self._state is State.FINISHED:
                self.do_command()

    def do_command(self) -> None:
        try:
            command = parse_command(self._inputs.get_line(self.config.prompt))
            self._handlers[command.type](command.operands)
        except AtaxxError as excp:
            self._reporter.err_msg(str(excp))

    def get_move_command(self, prompt: str) -> Optional[Command]:
        """Read commands until a move arrives, running any others on the way.

        Returns None if the game leaves the PLAYING state (or input ends) first.
        """
        while self._running and self._state is State.PLAYING:
            try:
                command = parse_command(self._inputs.get_line(prompt))
                if command.is_move:
                    return command
                self._handlers[command.type](command.operands)
            except AtaxxError as excp:
                self._reporter.err_msg(str(excp))
        return None

    def _play(self) -> None:
        players = {color: self._make_player(color) for color in (PieceColor.RED, PieceColor.BLUE)}
        self._players = players
        logger.info(
            "game started: red=%s blue=%s depth=%d",
            self._kinds[PieceColor.RED],
            self._kinds[PieceColor.BLUE],
            self.config.search.depth,
        )
        while self._running and self._state is State.PLAYING and not self._board.game_over():
            color = self._board.whose_move
            player = players[color]
            try:
                move = player.choose_move(self._board)
                if move is None or self._state is not State.PLAYING:
                    continue
                self._board.make_move(move)
            except AtaxxError as excp:
                self._reporter.err_msg(str(excp))
                continue
            if player.is_automated:
                self._reporter.move_msg("%s moves %s.", color, move)
            self._changed()

        if self._running and self._state is State.PLAYING:
            self._report_winner()
            self._state = State.FINISHED

    def _make_player(self, color: PieceColor) -> Player:
        kind = self._kinds[color]
        if kind == "manual":
            return ManualPlayer(self, color)
        if kind == "random":
            return RandomPlayer(color, self._rng)
        return AIPlayer(color, self.config.search)

    def _report_winner(self) -> None:
        result = self._board.result()
        if result == GameResult.RED_WIN:
            message = "Red wins."
        elif result == GameResult.BLUE_WIN:
            message = "Blue wins."
        else:
            message = "Draw."
        logger.info(
            "game over after %d moves: red=%d blue=%d",
            self._board.num_moves,
            self._board.red_pieces,
            self._board.blue_pieces,
        )
        self._reporter.outcome_msg(message)

    def _changed(self) -> None:
        if self._on_change is not None:
            self._on_change(self._board)

    def _check_state(self, command: str, *states: State) -> None:
        if self._state not in states:
            raise CommandError(f"'{command}' command is not allowed now.")

    # ------------------------------------------------------------------
    # Command processors
    # ------------------------------------------------------------------
    def _do_auto(self, operands: Sequence[str]) -> None:
        self._check_state("auto", State.SETUP)
        self._kinds[PieceColor.player_value_of(operands[0])] = "ai"

    def _do_manual(self, operands: Sequence[str]) -> None:
        self._check_state("manual", State.SETUP)
        self._kinds[PieceColor.player_value_of(operands[0])] = "manual"

    def _do_block(self, operands: Sequence[str]) -> None:
        self._check_state("block", State.SETUP)
        col, row = parse_square(operands[0])
        self._board.set_block(col, row)
        self._changed()

    def _do_clear(self, operands: Sequence[str]) -> None:
        self._board.clear()
        self._state = State.SETUP
        self._changed()

    def _do_dump(self, operands: Sequence[str]) -> None:
        self._reporter.info_msg(str(self._board))

    def _do_help(self, operands: Sequence[str]) -> None:
        text = resources.files("ataxx.game").joinpath("help.txt").read_text(encoding="utf-8")
        self._reporter.info_msg(text.rstrip("\n"))

    def _do_load(self, operands: Sequence[str]) -> None:
        self._inputs.push_file(operands[0])

    def _do_pass(self, operands: Sequence[str]) -> None:
        self._check_state("pass", State.SETUP)
        self._board.pass_turn()
        self._changed()

    def _do_move(self, operands: Sequence[str]) -> None:
        self._check_state("move", State.SETUP)
        self._board.make_move(parse_move("-".join(operands)))
        self._changed()

    def _do_seed(self, operands: Sequence[str]) -> None:
        self._rng = np.random.default_rng(int(operands[0]))
        # Random players of a game in progress draw from the new generator too.
        for player in self._players.values():
            if isinstance(player, RandomPlayer):
                player.rng = self._rng

    def _do_start(self, operands: Sequence[str]) -> None:
        self._check_state("start", State.SETUP)
        self._state = State.PLAYING

    def _do_quit(self, operands: Sequence[str]) -> None:
        self._running = False
