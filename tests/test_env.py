import numpy as np
import pytest

from morris.enums import Color, Phase
from morris.morris_env import (
    INVALID_ACTION_PENALTY,
    MILL_REWARD,
    MOVE_OFFSET,
    NUM_ACTIONS,
    REMOVE_OFFSET,
    WIN_REWARD,
    MorrisEnv,
    decode_action,
    encode_move,
    encode_place,
    encode_remove,
)
from morris.topology import INDEX


@pytest.fixture
def env():
    env = MorrisEnv()
    env.reset(seed=0)
    return env


def test_spaces(env):
    assert env.action_space.n == NUM_ACTIONS == 24 + 24 * 24 + 24
    assert env.observation_space.shape == (3, 24)


def test_action_codec():
    assert encode_place("a7") == 0
    assert encode_move("a7", "d7") == MOVE_OFFSET + 1
    assert encode_remove("g1") == NUM_ACTIONS - 1

    assert decode_action(encode_place("d6")) == ("place", "d6")
    assert decode_action(encode_move("g1", "a7")) == ("move", "g1", "a7")
    assert decode_action(REMOVE_OFFSET) == ("remove", "a7")

    with pytest.raises(ValueError):
        decode_action(NUM_ACTIONS)
    with pytest.raises(ValueError):
        decode_action(-1)


def test_reset(env):
    obs, info = env.reset()
    assert obs.shape == (3, 24)
    assert obs.dtype == np.float32
    assert obs[2].sum() == 24
    assert info["phase"] is Phase.PLACING
    assert info["turn"] is Color.WHITE

    mask = info["action_mask"]
    assert mask.sum() == 24
    assert mask[:MOVE_OFFSET].all()


def test_observation_is_from_the_mover(env):
    obs, _, _, _, info = env.step(encode_place("a7"))
    assert info["turn"] is Color.BLACK
    assert obs[1][INDEX["a7"]] == 1
    assert obs[0].sum() == 0

    obs, _, _, _, _ = env.step(encode_place("a1"))
    assert obs[0][INDEX["a7"]] == 1
    assert obs[1][INDEX["a1"]] == 1


def test_illegal_action(env):
    env.step(encode_place("a7"))
    before = env.game.get_state()

    for action in (encode_place("a7"), encode_move("a1", "d1"), encode_remove("a7")):
        _, reward, terminated, truncated, _ = env.step(action)
        assert reward == INVALID_ACTION_PENALTY
        assert not terminated and not truncated
        assert env.game.get_state() == before


def test_mill_and_removal(env):
    for position in ("a7", "b6", "d7", "b4"):
        env.step(encode_place(position))

    _, reward, terminated, _, info = env.step(encode_place("g7"))
    assert reward == MILL_REWARD
    assert not terminated
    assert info["pending_removal"]

    mask = info["action_mask"]
    assert set(np.flatnonzero(mask)) == {encode_remove("b6"), encode_remove("b4")}

    _, reward, _, _, info = env.step(encode_remove("b6"))
    assert reward == 0
    assert info["turn"] is Color.BLACK
    assert not info["pending_removal"]


def test_move_mask(env, make_game):
    env.game = make_game(white=("a7", "d6", "c3"), black=("b2", "d2", "f2", "g4"))
    mask = env.get_action_mask()
    # flying: three pieces, each to any of the 17 empty positions
    assert mask.sum() == 3 * 17
    assert mask[encode_move("a7", "g1")] == 1
    assert mask[:MOVE_OFFSET].sum() == 0


def test_winning_move(env, make_game):
    env.game = make_game(white=("a7", "d7", "g4"), black=("a1", "d1", "f2"))
    _, reward, terminated, _, _ = env.step(encode_move("g4", "g7"))
    assert reward == MILL_REWARD
    assert not terminated

    _, reward, terminated, truncated, info = env.step(encode_remove("a1"))
    assert reward == WIN_REWARD
    assert terminated and not truncated
    assert info["action_mask"].sum() == 0


def test_truncation():
    env = MorrisEnv(max_steps=2)
    env.reset()
    _, _, _, truncated, _ = env.step(encode_place("a7"))
    assert not truncated
    _, _, _, truncated, _ = env.step(encode_place("a1"))
    assert truncated


def test_render(env, capsys):
    env.step(encode_place("a7"))
    text = env.render()
    assert "a   b   c   d   e   f   g" in text
    assert "○" in text

    human = MorrisEnv(render_mode="human")
    human.reset()
    assert human.render() is None
    assert "Phase: placing" in capsys.readouterr().out


def test_random_games_stay_legal():
    env = MorrisEnv(max_steps=300)
    rng = np.random.default_rng(7)
    for game_idx in range(5):
        env.reset(seed=game_idx)
        done = False
        while not done:
            valid = np.flatnonzero(env.get_action_mask())
            assert len(valid) > 0
            _, reward, terminated, truncated, _ = env.step(int(rng.choice(valid)))
            assert reward != INVALID_ACTION_PENALTY
            done = terminated or truncated
