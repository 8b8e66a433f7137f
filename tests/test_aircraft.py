"""
Tests for aircraft parameters, configuration, controls and state.
"""

import dataclasses
import math

import numpy as np
import pytest

from aerofdm.aircraft import (
    AircraftParameters,
    AircraftState,
    ControlInputs,
    FdmConfig,
    create_default_aircraft,
    default_config,
    initial_state,
)
from aerofdm.frames import G0_EARTH
from aerofdm.utils.quaternion import quat_identity
from aerofdm.utils.rotations import yaw_pitch_roll


class TestAircraftParameters:
    """Tests for AircraftParameters."""

    def test_defaults(self):
        p = AircraftParameters()
        assert p.mass == 1110.0
        assert p.wing_area == 16.2
        assert p.wing_span == 11.0
        assert p.max_thrust == 4500.0
        assert p.parasite_drag_coefficient == 0.03
        assert p.cl_slope_per_rad == 5.7
        assert p.oswald_efficiency == 0.8

    def test_derived_properties(self, params):
        assert params.aspect_ratio == pytest.approx(121.0 / 16.2)
        assert params.induced_drag_factor == pytest.approx(1.0 / (math.pi * params.aspect_ratio * 0.8))
        assert params.weight == pytest.approx(1110.0 * G0_EARTH)

    def test_frozen(self, params):
        with pytest.raises(AttributeError):
            params.mass = 2000.0

    @pytest.mark.parametrize(
        "field,value",
        [
            ("mass", 0.0),
            ("mass", -1.0),
            ("wing_area", 0.0),
            ("wing_span", -11.0),
            ("cl_slope_per_rad", 0.0),
            ("oswald_efficiency", 0.0),
            ("oswald_efficiency", 1.2),
            ("max_thrust", -1.0),
            ("parasite_drag_coefficient", -0.01),
            ("mass", float("nan")),
            ("wing_area", float("inf")),
        ],
    )
    def test_invalid(self, field, value):
        with pytest.raises(ValueError, match=field):
            AircraftParameters(**{field: value})

    def test_zero_thrust_allowed(self):
        """A glider is a valid airframe."""
        assert AircraftParameters(max_thrust=0.0).max_thrust == 0.0


class TestFdmConfig:
    """Tests for FdmConfig."""

    def test_defaults(self, config):
        np.testing.assert_allclose(config.max_rates, [math.pi, math.pi / 2, math.pi / 2])
        np.testing.assert_allclose(config.rate_gains, [0.6, 0.5, 0.4])
        assert config.stall_alpha == pytest.approx(math.radians(15.0))
        assert config.coordination_gain == 0.7
        assert config.lateral_drag_coefficient == 0.98

    def test_default_config_factory(self):
        assert default_config() == FdmConfig()

    @pytest.mark.parametrize("field", ["max_roll_rate", "yaw_rate_gain", "coordination_gain"])
    def test_negative_rejected(self, field):
        with pytest.raises(ValueError, match=field):
            FdmConfig(**{field: -0.1})

    @pytest.mark.parametrize("stall", [0.0, -0.1, math.pi / 2, 2.0])
    def test_stall_range(self, stall):
        with pytest.raises(ValueError, match="stall_alpha"):
            FdmConfig(stall_alpha=stall)

    def test_zero_gain_allowed(self):
        assert FdmConfig(roll_rate_gain=0.0).rate_gains[0] == 0.0


class TestControlInputs:
    """Tests for ControlInputs clamping."""

    def test_defaults_neutral(self):
        np.testing.assert_array_equal(ControlInputs().as_array(), np.zeros(4))

    def test_within_range_unchanged(self):
        c = ControlInputs(elevator=0.3, ailerons=-0.2, rudder=0.1, throttle=0.5)
        assert c.clamped() == c

    def test_clamps_each_axis(self):
        c = ControlInputs(elevator=2.0, ailerons=-3.0, rudder=1.5, throttle=1.7).clamped()
        assert (c.elevator, c.ailerons, c.rudder, c.throttle) == (1.0, -1.0, 1.0, 1.0)

    def test_throttle_floor(self):
        assert ControlInputs(throttle=-0.5).clamped().throttle == 0.0

    def test_non_finite_become_zero(self):
        c = ControlInputs(elevator=float("nan"), ailerons=float("inf"), rudder=-float("inf"), throttle=float("nan"))
        np.testing.assert_array_equal(c.clamped().as_array(), np.zeros(4))

    def test_clamped_returns_new_instance(self):
        c = ControlInputs(elevator=5.0)
        c.clamped()
        assert c.elevator == 5.0

    def test_as_array_order(self):
        np.testing.assert_array_equal(ControlInputs(0.1, 0.2, 0.3, 0.4).as_array(), [0.1, 0.2, 0.3, 0.4])


class TestAircraftState:
    """Tests for AircraftState."""

    def test_default_at_rest(self):
        s = AircraftState()
        np.testing.assert_array_equal(s.position, np.zeros(3))
        np.testing.assert_array_equal(s.orientation, quat_identity())
        assert s.ground_speed == 0.0

    def test_arrays_read_only(self):
        s = AircraftState(position=[1.0, 2.0, 3.0])
        with pytest.raises(ValueError):
            s.position[0] = 0.0
        with pytest.raises(ValueError):
            s.orientation[0] = 0.0

    def test_input_not_aliased(self):
        pos = np.array([1.0, 2.0, 3.0])
        s = AircraftState(position=pos)
        pos[0] = 99.0
        assert s.position[0] == 1.0

    def test_bad_orientation_shape(self):
        with pytest.raises(ValueError, match="orientation"):
            AircraftState(orientation=[1.0, 0.0, 0.0])

    def test_bad_position_shape(self):
        with pytest.raises(ValueError):
            AircraftState(position=[1.0, 2.0])

    def test_properties(self):
        s = initial_state(position=(0, 0, 500), velocity=(3, 4, 0), yaw=-math.pi / 2, pitch=0.1)
        assert s.altitude == 500.0
        assert s.ground_speed == pytest.approx(5.0)
        assert s.heading_deg == pytest.approx(270.0)
        assert s.nose_elevation == pytest.approx(-0.1)
        np.testing.assert_allclose(s.euler(), [-math.pi / 2, 0.1, 0.0])

    def test_copy_equal_but_distinct(self):
        s = initial_state(position=(1, 2, 3), yaw=0.5)
        c = s.copy()
        assert c is not s
        assert c.yaw == s.yaw
        np.testing.assert_array_equal(c.position, s.position)

    def test_fields_cannot_be_reassigned(self):
        s = initial_state(position=(1, 2, 3))
        with pytest.raises(dataclasses.FrozenInstanceError):
            s.yaw = 1.0
        with pytest.raises(dataclasses.FrozenInstanceError):
            s.position = np.zeros(3)
        assert s.yaw == 0.0
        np.testing.assert_array_equal(s.position, [1.0, 2.0, 3.0])

    def test_replace_builds_new_state(self):
        s = initial_state(velocity=(10, 0, 0))
        r = dataclasses.replace(s, velocity=[0.0, 5.0, 0.0])
        assert s.ground_speed == pytest.approx(10.0)
        assert r.ground_speed == pytest.approx(5.0)
        with pytest.raises(ValueError):
            r.velocity[0] = 1.0


class TestFactories:
    """Tests for factory functions."""

    def test_initial_state_quaternion_matches_angles(self, assert_unit_quat):
        s = initial_state(yaw=0.4, pitch=-0.2, roll=0.3)
        assert_unit_quat(s.orientation)
        np.testing.assert_allclose(yaw_pitch_roll(s.orientation), (0.4, -0.2, 0.3), atol=1e-12)
        np.testing.assert_array_equal(s.angular_rates, np.zeros(3))

    def test_create_default_aircraft(self):
        params, state = create_default_aircraft()
        assert params == AircraftParameters()
        assert state.altitude == 0.0
        assert state.ground_speed == 0.0
