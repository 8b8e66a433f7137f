"""
Tests for the pitch hold and level-flight trim.
"""

import math

import numpy as np
import pytest

from aerofdm.aircraft import AircraftParameters, ControlInputs, FdmConfig, initial_state
from aerofdm.autopilot import PitchHold, trim_level_flight, trimmed_state
from aerofdm.frames import G0_EARTH
from aerofdm.model import FlightDynamicsModel
from aerofdm.utils.rotations import body_to_world, world_to_body


class TestPitchHold:
    """Tests for the proportional pitch-attitude hold."""

    def test_on_target_is_neutral(self):
        state = initial_state(pitch=-math.radians(20.0))
        assert PitchHold(target_deg=20.0).elevator(state) == pytest.approx(0.0, abs=1e-12)

    def test_nose_high_commands_nose_down(self):
        state = initial_state(pitch=-0.1)
        assert PitchHold(target_deg=0.0, gain=2.0).elevator(state) == pytest.approx(0.2)

    def test_nose_low_commands_nose_up(self):
        state = initial_state(pitch=0.1)
        assert PitchHold(target_deg=0.0, gain=2.0).elevator(state) == pytest.approx(-0.2)

    def test_saturates(self):
        assert PitchHold(gain=2.0).elevator(initial_state(pitch=-1.0)) == 1.0
        assert PitchHold(gain=2.0).elevator(initial_state(pitch=1.0)) == -1.0

    def test_call_returns_controls(self):
        controls = PitchHold(gain=2.0)(initial_state(pitch=-0.1), throttle=0.8)
        assert isinstance(controls, ControlInputs)
        assert controls.elevator == pytest.approx(0.2)
        assert controls.throttle == 0.8
        assert controls.ailerons == 0.0
        assert controls.rudder == 0.0

    @pytest.mark.parametrize("gain", [0.0, -1.0, float("nan")])
    def test_invalid_gain(self, gain):
        with pytest.raises(ValueError, match="gain"):
            PitchHold(gain=gain)

    def test_converges_on_target(self, trimmed_model):
        model, throttle = trimmed_model(airspeed=50.0)
        hold = PitchHold(target_deg=8.0, gain=2.0)
        for _ in range(600):
            model.update(1 / 60, hold(model.state, throttle=throttle))
        assert math.degrees(model.state.nose_elevation) == pytest.approx(8.0, abs=0.1)


class TestTrimLevelFlight:
    """Tests for the level-flight trim solver."""

    def test_cruise_values(self, params, config):
        elevation, throttle = trim_level_flight(params, 50.0, config)
        assert math.degrees(elevation) == pytest.approx(4.38, abs=0.01)
        assert throttle == pytest.approx(0.2218, abs=1e-3)

    def test_faster_needs_less_alpha(self, params, config):
        slow, _ = trim_level_flight(params, 40.0, config)
        fast, _ = trim_level_flight(params, 60.0, config)
        assert 0 < fast < slow

    def test_force_balance(self, params, config):
        """Thrust, lift, drag and weight sum to zero at the trim point."""
        state, throttle = trimmed_state(params, 50.0, position=(0, 0, 1000), config=config)
        model = FlightDynamicsModel(params, state, config)
        s = model.state
        force_body = model.body_forces(world_to_body(s.orientation, s.velocity), throttle)
        force_world = body_to_world(s.orientation, force_body)
        force_world[2] -= params.mass * G0_EARTH
        np.testing.assert_allclose(force_world, np.zeros(3), atol=1e-4)

    def test_default_config(self, params):
        assert trim_level_flight(params, 50.0) == trim_level_flight(params, 50.0, FdmConfig())

    @pytest.mark.parametrize("airspeed", [0.0, -10.0, float("nan")])
    def test_invalid_airspeed(self, params, airspeed):
        with pytest.raises(ValueError, match="airspeed"):
            trim_level_flight(params, airspeed)

    def test_too_slow_stalls(self, params):
        with pytest.raises(ValueError, match="stall"):
            trim_level_flight(params, 15.0)

    def test_not_enough_thrust(self):
        with pytest.raises(ValueError, match="thrust"):
            trim_level_flight(AircraftParameters(max_thrust=500.0), 50.0)

    def test_glider_cannot_trim(self):
        with pytest.raises(ValueError, match="thrust"):
            trim_level_flight(AircraftParameters(max_thrust=0.0), 50.0)


class TestTrimmedState:
    """Tests for trimmed_state."""

    def test_pose(self, params, config):
        state, throttle = trimmed_state(params, 50.0, position=(10, 20, 300), yaw=math.pi / 2, config=config)
        elevation, expected_throttle = trim_level_flight(params, 50.0, config)

        np.testing.assert_allclose(state.position, [10, 20, 300])
        np.testing.assert_allclose(state.velocity, [0.0, 50.0, 0.0], atol=1e-12)
        assert state.yaw == pytest.approx(math.pi / 2)
        assert state.nose_elevation == pytest.approx(elevation)
        assert state.roll == 0.0
        assert throttle == expected_throttle
