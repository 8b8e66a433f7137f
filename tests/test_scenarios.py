"""
End-to-end flight scenarios: climb, power-off stall and a bank-induced turn.

Each scenario flies the model at a 60 Hz tick through several phases and
checks the gross outcome rather than exact numbers.
"""

import math

import pytest

from aerofdm.aircraft import ControlInputs, initial_state
from aerofdm.autopilot import PitchHold
from aerofdm.model import FlightDynamicsModel
from aerofdm.utils.rotations import angle_difference

TICK = 1.0 / 60.0


def fly(model, seconds, controls):
    """Hold ``controls`` (or call it with the state) for ``seconds``."""
    for _ in range(int(round(seconds / TICK))):
        u = controls(model.state) if callable(controls) else controls
        model.update(TICK, u)


@pytest.mark.slow
@pytest.mark.integration
class TestClimb:
    """Full-power climb under a pitch hold."""

    def test_pitch_hold_climb(self, trimmed_model):
        model, _ = trimmed_model(airspeed=50.0, altitude=500.0)
        model.set_aero_scale(lift=6.0, drag=0.5)

        fly(model, 5.0, ControlInputs(throttle=1.0))
        fly(model, 2.0, ControlInputs(elevator=-0.7, throttle=1.0))
        assert math.degrees(model.state.nose_elevation) > 20.0

        start_altitude = model.state.altitude
        hold = PitchHold(target_deg=20.0, gain=2.0)
        fly(model, 6.0, lambda state: hold(state, throttle=1.0))

        assert model.state.altitude - start_altitude > 5.0
        assert math.degrees(model.state.nose_elevation) == pytest.approx(20.0, abs=1.0)


@pytest.mark.slow
@pytest.mark.integration
class TestStall:
    """
    Steep nose-up attitude at low speed, then power cut.

    The model has no stall break: lift follows the clamped coefficient curve
    and there is no loss of control authority past ``stall_alpha``. A shallow
    pull-up therefore keeps flying after the cut and trades speed for height
    slowly. The 60° nose-high entry at 24 m/s points most of the thrust
    upward, so the aircraft climbs under power for the first phase; once the
    throttle is cut the weight is carried only by low-speed lift and the
    aircraft sinks.
    """

    def test_altitude_lost_after_power_cut(self, params, config):
        state = initial_state(position=(0, 0, 1000), velocity=(24, 0, 0), pitch=math.radians(-60.0))
        model = FlightDynamicsModel(params, state, config)

        fly(model, 3.0, ControlInputs(throttle=0.7))
        assert model.state.altitude > 1000.0

        cut_altitude = model.state.altitude
        fly(model, 5.0, ControlInputs(throttle=0.05))
        assert model.state.altitude < cut_altitude - 5.0


@pytest.mark.slow
@pytest.mark.integration
class TestCoordinatedTurn:
    """Aileron-only turn from trimmed level flight."""

    def test_heading_changes_altitude_held(self, trimmed_model):
        model, throttle = trimmed_model(airspeed=50.0, altitude=1000.0)

        fly(model, 2.0, ControlInputs(throttle=throttle))
        start_yaw = model.state.yaw
        start_altitude = model.state.altitude

        fly(model, 6.0, ControlInputs(ailerons=0.05, throttle=throttle))
        fly(model, 0.5, ControlInputs(throttle=throttle))

        assert model.state.roll > 0
        assert abs(math.degrees(angle_difference(model.state.yaw, start_yaw))) > 1.0
        assert abs(model.state.altitude - start_altitude) < 150.0

    def test_right_wing_up_turns_right(self, trimmed_model):
        """Heading east with the right wing up, yaw decreases toward south."""
        model, throttle = trimmed_model(airspeed=50.0)
        fly(model, 4.0, ControlInputs(ailerons=0.05, throttle=throttle))
        assert angle_difference(model.state.yaw, 0.0) < 0
