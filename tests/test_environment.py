import random

import pytest

from rmpl.environment import FOREST_OBSTACLES, Environment, ForestEnvironment
from rmpl.states import AccState, GeoState, VelState


def _geo_env(cls=Environment):
    return cls(GeoState(0.0, 0.0), GeoState(9.5, 9.5), 0.5)


def test_initial_state_kept():
    env = _geo_env()
    assert env.initial_state == GeoState(0.0, 0.0)


def test_sample_goal_returns_goal_state():
    env = _geo_env()
    assert env.sample_goal() == GeoState(9.5, 9.5)


def test_is_goal_inside_radius():
    env = _geo_env()
    assert env.is_goal(GeoState(9.4, 9.4))
    assert env.is_goal(GeoState(9.5, 9.5))


def test_is_goal_outside_radius():
    env = _geo_env()
    assert not env.is_goal(GeoState(0.0, 0.0))
    assert not env.is_goal(GeoState(9.5, 10.0))


def test_is_goal_ignores_heading():
    env = Environment(VelState(0.0, 0.0, 0.0), VelState(9.5, 9.5, 0.0), 0.5)
    assert env.is_goal(VelState(9.5, 9.5, 3.0))


def test_simple_is_valid_bounds():
    env = _geo_env()
    assert env.is_valid(GeoState(2.0, 2.0))
    assert not env.is_valid(GeoState(-0.1, 5.0))
    assert not env.is_valid(GeoState(5.0, 10.1))


def test_simple_is_valid_checks_all_coordinates():
    env = Environment(
        AccState(0.0, 0.0, 0.0, 0.0), AccState(9.5, 9.5, 0.0, 0.0), 0.5
    )
    assert env.is_valid(AccState(1.0, 1.0, 1.0, 0.0))
    assert not env.is_valid(AccState(1.0, 1.0, 2.5, 0.0))
    assert not env.is_valid(AccState(1.0, 1.0, 1.0, 4.0))


@pytest.mark.parametrize("obstacle", FOREST_OBSTACLES)
def test_forest_rejects_obstacle_centres(obstacle):
    env = _geo_env(ForestEnvironment)
    assert not env.is_valid(GeoState(*obstacle))


def test_forest_accepts_free_space():
    env = _geo_env(ForestEnvironment)
    assert env.is_valid(GeoState(0.0, 0.0))
    assert env.is_valid(GeoState(9.5, 9.5))


def test_forest_obstacle_boundary_is_valid():
    env = _geo_env(ForestEnvironment)
    assert env.is_valid(GeoState(3.0, 2.0))
    assert not env.is_valid(GeoState(2.9, 2.0))


def test_forest_still_checks_bounds():
    env = _geo_env(ForestEnvironment)
    assert not env.is_valid(GeoState(-1.0, 0.0))


def test_forest_works_for_velocity_states():
    env = ForestEnvironment(VelState(0.0, 0.0, 0.0), VelState(9.5, 9.5, 0.0), 0.5)
    assert not env.is_valid(VelState(5.0, 8.0, 0.0))
    assert env.is_valid(VelState(5.0, 6.5, 0.0))


def test_sample_state_type_and_bounds():
    env = Environment(VelState(0.0, 0.0, 0.0), VelState(9.5, 9.5, 0.0), 0.5)
    rng = random.Random(7)
    for _ in range(50):
        state = env.sample_state(rng)
        assert isinstance(state, VelState)
        assert state.contains()


def test_sample_state_reproducible_with_seed():
    env = _geo_env()
    first = [env.sample_state(random.Random(3)) for _ in range(3)]
    second = [env.sample_state(random.Random(3)) for _ in range(3)]
    assert first == second