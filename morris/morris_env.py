import logging
from typing import Dict, Optional

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .enums import Color, Occupancy, Phase
from .game import MorrisGame
from .render import render_game
from .topology import LABELS, NUM_POSITIONS, index_of

logger = logging.getLogger(__name__)

# --- ACTION LAYOUT ---
PLACE_OFFSET = 0
MOVE_OFFSET = PLACE_OFFSET + NUM_POSITIONS
REMOVE_OFFSET = MOVE_OFFSET + NUM_POSITIONS * NUM_POSITIONS
NUM_ACTIONS = REMOVE_OFFSET + NUM_POSITIONS

# --- REWARD SHAPING ---
INVALID_ACTION_PENALTY = -10.0
MILL_REWARD = 20.0
WIN_REWARD = 100.0
DEFAULT_MAX_STEPS = 200


def encode_place(position):
    return PLACE_OFFSET + index_of(position)


def encode_move(start, end):
    return MOVE_OFFSET + index_of(start) * NUM_POSITIONS + index_of(end)


def encode_remove(position):
    return REMOVE_OFFSET + index_of(position)


def decode_action(action_idx):
    """Turn an action index into ("place", p), ("move", a, b) or ("remove", p)."""
    action_idx = int(action_idx)
    if not 0 <= action_idx < NUM_ACTIONS:
        raise ValueError(f"Action out of range: {action_idx}")
    if action_idx < MOVE_OFFSET:
        return ("place", LABELS[action_idx - PLACE_OFFSET])
    if action_idx < REMOVE_OFFSET:
        start, end = divmod(action_idx - MOVE_OFFSET, NUM_POSITIONS)
        return ("move", LABELS[start], LABELS[end])
    return ("remove", LABELS[action_idx - REMOVE_OFFSET])


class MorrisEnv(gym.Env):
    """Both players share the env; each step acts for `game.turn`.

    Observations are from the point of view of the player about to act.
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(self, render_mode=None, max_steps=DEFAULT_MAX_STEPS, first=Color.WHITE):
        super(MorrisEnv, self).__init__()
        self.render_mode = render_mode
        self.game = MorrisGame(first=first)
        self.action_space = spaces.Discrete(NUM_ACTIONS)
        self.observation_space = spaces.Box(
            low=0, high=1, shape=(3, NUM_POSITIONS), dtype=np.float32
        )

        self.max_steps = max_steps
        self.current_step = 0

    def reset(self, seed: Optional[int] = None, options: Optional[Dict] = None):
        super().reset(seed=seed)
        self.current_step = 0
        self.game.reset()

        return self._get_obs(), self._get_info()

    def step(self, action_idx: int):
        """
        Applies the action for the player to move and returns
        (obs, reward, terminated, truncated, info). The reward belongs to
        the player who acted; an illegal action changes nothing.
        """
        self.current_step += 1
        player = self.game.turn
        reward = 0.0
        terminated = False

        try:
            kind, *positions = decode_action(action_idx)
            if kind == "place":
                mill = self.game.apply_place(*positions)
            elif kind == "move":
                mill = self.game.apply_move(*positions)
            else:
                self.game.apply_remove(*positions)
                mill = False
        except ValueError as e:
            logger.debug("illegal action %s: %s", action_idx, e)
            reward = INVALID_ACTION_PENALTY
        else:
            if mill:
                reward += MILL_REWARD

            outcome = self.game.outcome()
            if outcome is not None:
                terminated = True
                if outcome.winner is player:
                    reward += WIN_REWARD
                elif outcome.winner is not None:
                    reward -= WIN_REWARD

        truncated = not terminated and self.current_step >= self.max_steps

        if self.render_mode == "human":
            self.render()

        return self._get_obs(), reward, terminated, truncated, self._get_info()

    def _get_obs(self):
        obs = np.zeros((3, NUM_POSITIONS), dtype=np.float32)
        curr = Occupancy.of(self.game.turn)  # who acts now
        opp = Occupancy.of(self.game.turn.other())
        for i, state in enumerate(self.game.board.occupancy()):
            if state is curr:
                obs[0][i] = 1
            elif state is opp:
                obs[1][i] = 1
            else:
                obs[2][i] = 1
        return obs

    def _get_info(self):
        return {
            "turn": self.game.turn,
            "phase": self.game.phase,
            "pending_removal": self.game.pending_removal,
            "action_mask": self.get_action_mask(),
        }

    def get_action_mask(self):
        mask = np.zeros(NUM_ACTIONS, dtype=np.int8)
        game = self.game
        if not game.is_running():
            return mask

        if game.pending_removal:
            for i, label in enumerate(LABELS):
                if game.is_valid_remove(label):
                    mask[REMOVE_OFFSET + i] = 1
        elif game.phase is Phase.PLACING:
            for i, label in enumerate(LABELS):
                if game.is_valid_place(label):
                    mask[PLACE_OFFSET + i] = 1
        else:
            for start, end in game.valid_moves():
                mask[encode_move(start, end)] = 1
        return mask

    def render(self):
        text = render_game(self.game)
        if self.render_mode == "human":
            print(text)
            return None
        return text
