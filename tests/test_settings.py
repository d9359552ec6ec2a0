import pytest

from asastro.settings import (
    DEFAULT_SPS,
    Action,
    SimulationSettings,
    control_simulation,
)


def test_defaults():
    s = SimulationSettings()
    assert s.dt == 0.0
    assert s.pause is True
    assert s.normalized is False
    assert s.stabilized_sps == pytest.approx(1.01 / 12.0)


def test_accelerate_increases_and_decelerate_undoes():
    s = SimulationSettings()
    s.accelerate(0.25)
    assert s.stabilized_sps > DEFAULT_SPS
    s.decelerate(0.25)
    assert s.stabilized_sps == pytest.approx(DEFAULT_SPS)


def test_zero_delta_leaves_speed():
    s = SimulationSettings()
    s.accelerate(0.0)
    s.decelerate(0.0)
    assert s.stabilized_sps == DEFAULT_SPS


def test_toggle_pause_twice_restores():
    s = SimulationSettings()
    s.toggle_pause()
    assert s.pause is False
    s.toggle_pause()
    assert s.pause is True


def test_reverse_negates():
    s = SimulationSettings()
    s.reverse()
    assert s.stabilized_sps == -DEFAULT_SPS


def test_stabilize_sets_dt_per_frame():
    s = SimulationSettings()
    s.stabilize(60.0)
    assert s.dt * 60.0 == pytest.approx(s.stabilized_sps)


def test_stabilize_without_fps_keeps_dt():
    s = SimulationSettings(dt=0.5)
    s.stabilize(None)
    assert s.dt == 0.5


def test_control_held_accelerate():
    s = SimulationSettings()
    control_simulation(s, {Action.ACCELERATE}, set(), 0.1)
    assert s.stabilized_sps > DEFAULT_SPS


def test_control_held_decelerate():
    s = SimulationSettings()
    control_simulation(s, {Action.DECELERATE}, set(), 0.1)
    assert s.stabilized_sps < DEFAULT_SPS


def test_control_pause_only_on_press():
    s = SimulationSettings()
    control_simulation(s, {Action.PAUSE}, set(), 0.1)
    assert s.pause is True
    control_simulation(s, set(), {Action.PAUSE}, 0.1)
    assert s.pause is False


def test_control_reverse_on_press():
    s = SimulationSettings()
    control_simulation(s, set(), {Action.REVERSE}, 0.1)
    assert s.stabilized_sps == -DEFAULT_SPS


@pytest.mark.parametrize(
    "action", [Action.ACCELERATE, Action.DECELERATE, Action.PAUSE, Action.REVERSE]
)
def test_each_control_action_changes_settings(action):
    s = SimulationSettings()
    control_simulation(s, {action}, {action}, 0.1)
    assert (s.stabilized_sps, s.pause) != (DEFAULT_SPS, True)
    assert s.dt == 0.0