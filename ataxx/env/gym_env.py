from __future__ import annotations

from typing import Dict, Optional

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from ataxx.core import (
    ACTION_VECTOR_SIZE,
    PASS,
    SIDE,
    Board,
    GameResult,
    IllegalMove,
    decode_move,
    encode_move,
    parse_square,
)
from ataxx.features import BOARD_CHANNELS, build_board_tensor


class AtaxxEnv(gym.Env):
    metadata = {"render_modes": ["ansi"], "render_fps": 4}

    def __init__(self, *, render_mode: Optional[str] = None) -> None:
        super().__init__()
        self.render_mode = render_mode
        self.observation_space = spaces.Box(
            low=0.0, high=1.0, shape=(BOARD_CHANNELS, SIDE, SIDE), dtype=np.float32
        )
        self.action_space = spaces.Discrete(ACTION_VECTOR_SIZE)
        self._board = Board()

    @property
    def board(self) -> Board:
        return self._board

    def reset(self, *, seed: Optional[int] = None, options: Optional[Dict] = None):
        """Start a new game; ``options["blocks"]`` may list squares such as ``"c3"`` to block."""
        super().reset(seed=seed)
        self._board = Board()
        for square in (options or {}).get("blocks", ()):
            self._board.set_block(*parse_square(square))
        return self._build_observation(), self._build_info()

    def step(self, action_index: int):
        if not self.action_space.contains(action_index):
            raise ValueError(f"Action index {action_index} out of bounds.")

        move = decode_move(int(action_index))
        if not self._board.legal_move(move):
            raise IllegalMove(f"illegal move: {move}")
        self._board.make_move(move)

        terminated = self._board.game_over()
        reward = self._compute_reward(self._board.result())
        return self._build_observation(), reward, terminated, False, self._build_info()

    def legal_action_mask(self) -> np.ndarray:
        mask = np.zeros(self.action_space.n, dtype=np.int8)
        if self._board.game_over():
            return mask
        moves = self._board.legal_moves(self._board.whose_move)
        for move in moves:
            mask[encode_move(move)] = 1
        if not moves:
            mask[encode_move(PASS)] = 1
        return mask

    def render(self):
        if self.render_mode != "ansi":
            raise NotImplementedError("Only 'ansi' render mode is supported.")
        return self._board.to_string(legend=True)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _build_observation(self) -> np.ndarray:
        return build_board_tensor(self._board)

    def _build_info(self) -> Dict[str, object]:
        return {
            "legal_action_mask": self.legal_action_mask(),
            "to_move": self._board.whose_move,
            "red_pieces": self._board.red_pieces,
            "blue_pieces": self._board.blue_pieces,
        }

    def _compute_reward(self, result: GameResult) -> float:
        if result == GameResult.RED_WIN:
            return 1.0
        if result == GameResult.BLUE_WIN:
            return -1.0
        return 0.0
