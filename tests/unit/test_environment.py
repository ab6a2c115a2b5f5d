"""
Unit tests for the gymnasium environment wrapper.
"""
import numpy as np
import pytest
from minefield import GameConfig, GamePhase, MinefieldEnv


@pytest.fixture
def env() -> MinefieldEnv:
    """Easy environment rendering to text."""
    return MinefieldEnv(config=GameConfig(9, 9, 10), render_mode="ansi")


class TestEnvironmentReset:
    """Test spaces and reset behavior."""

    def test_spaces_match_board(self, env: MinefieldEnv) -> None:
        """Spaces are sized from the board config."""
        assert env.observation_space.shape == (9, 9)
        assert env.action_space.n == 81

    def test_reset_returns_hidden_board(self, env: MinefieldEnv) -> None:
        """Reset yields a fully hidden board and a pending session."""
        obs, info = env.reset(seed=0)
        assert obs.shape == (9, 9)
        assert np.all(obs == -1)
        assert env.observation_space.contains(obs)
        assert info["phase"] == GamePhase.PENDING.value
        assert info["valid_actions"] == 81
        assert info["total_safe"] == 71

    def test_same_seed_same_mines(self, env: MinefieldEnv) -> None:
        """Seeding reset makes mine placement reproducible."""
        env.reset(seed=42)
        env.step(40)
        first = env.session.board.mine_positions()

        env.reset(seed=42)
        env.step(40)
        assert env.session.board.mine_positions() == first


class TestEnvironmentStep:
    """Test rewards and termination."""

    def test_first_step_is_safe(self, env: MinefieldEnv) -> None:
        """The first reveal never hits a mine."""
        env.reset(seed=1)
        obs, reward, terminated, truncated, info = env.step(0)
        assert reward in (1.0, 10.0)
        assert obs[0, 0] != -1
        assert truncated is False
        assert info["revealed"] >= 1

    def test_repeated_action_is_invalid(self, env: MinefieldEnv) -> None:
        """Revealing an open cell earns the invalid-action penalty."""
        env.reset(seed=1)
        env.step(0)
        if env.session.is_playing:
            _, reward, _, _, _ = env.step(0)
            assert reward == pytest.approx(-0.1)

    def test_action_mask_tracks_hidden_cells(self, env: MinefieldEnv) -> None:
        """Only hidden cells are valid actions."""
        env.reset(seed=3)
        assert env.get_action_mask().sum() == 81
        env.step(0)
        mask = env.get_action_mask()
        assert mask.dtype == np.int8
        assert mask[0] == 0
        assert mask.sum() == len(env.session.hidden_positions())

    def test_random_play_terminates(self, env: MinefieldEnv) -> None:
        """Masked random play ends in a win or a loss."""
        env.reset(seed=7)
        env.action_space.seed(7)
        terminated = False
        steps = 0
        while not terminated:
            action = env.action_space.sample(mask=env.get_action_mask())
            _, reward, terminated, _, info = env.step(action)
            steps += 1
            assert steps <= 81
        assert info["phase"] in ("won", "lost")
        assert reward in (10.0, -10.0)

    def test_render_ansi(self, env: MinefieldEnv) -> None:
        """ANSI rendering shows every cell hidden after reset."""
        env.reset(seed=0)
        text = env.render()
        assert text.split("\n") == [". " * 9] * 9
