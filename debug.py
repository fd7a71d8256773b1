# File: debug.py
#
# Random walk over the env: plays whole games with uniformly random legal
# actions and checks that the rules engine never stalls or drifts out of sync.
import argparse
import logging
from collections import Counter

import numpy as np
from tqdm import tqdm

from morris.enums import Color
from morris.morris_env import MorrisEnv

logger = logging.getLogger("debug")


def check_invariants(game):
    board = game.board
    white = game.pieces[Color.WHITE]
    black = game.pieces[Color.BLACK]

    assert white.positions == board.positions_of(Color.WHITE), "white tracker out of sync"
    assert black.positions == board.positions_of(Color.BLACK), "black tracker out of sync"
    assert not white.positions & black.positions
    for pieces in (white, black):
        assert pieces.placed == len(pieces.positions)
        assert pieces.unplaced >= 0


def play_random_game(env, rng, seed=None):
    """Returns "white", "black", "draw" or "truncated"."""
    _, info = env.reset(seed=seed)
    while True:
        valid_actions = np.where(info["action_mask"] == 1)[0]
        if len(valid_actions) == 0:
            raise AssertionError(f"no legal action while the game runs: {env.game.get_state()}")

        action = int(rng.choice(valid_actions))
        _, reward, terminated, truncated, info = env.step(action)
        check_invariants(env.game)

        if reward < 0 and not terminated:
            raise AssertionError(f"masked action {action} was rejected")
        if terminated:
            outcome = env.game.outcome()
            return "draw" if outcome.is_draw else outcome.winner.value
        if truncated:
            return "truncated"


def main(argv=None):
    parser = argparse.ArgumentParser(description="Random-walk check of the rules engine.")
    parser.add_argument("--games", type=int, default=200)
    parser.add_argument("--max-steps", type=int, default=1000)
    parser.add_argument("--seed", type=int, default=0)
    parser.add_argument("--log-level", default="WARNING")
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper())

    env = MorrisEnv(max_steps=args.max_steps)
    rng = np.random.default_rng(args.seed)
    results = Counter()

    pbar = tqdm(range(args.games), desc="random games", unit="game")
    for game_idx in pbar:
        results[play_random_game(env, rng, seed=args.seed + game_idx)] += 1
        pbar.set_postfix(dict(results))

    logger.info("results: %s", dict(results))
    print(f"\n>>> {args.games} games: {dict(results)}")
    return results


if __name__ == "__main__":
    main()
