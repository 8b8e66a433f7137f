"""
Aircraft parameters, model configuration, control inputs and state.

Data Model
----------
    AircraftParameters : physical airframe constants (frozen)
    FdmConfig          : control-authority and aerodynamic tuning (frozen)
    ControlInputs      : one tick of pilot input (frozen, clamped on use)
    AircraftState      : position, velocity, attitude and body rates

State Layout
------------
    position      : ENU [m]           shape (3,)
    velocity      : ENU [m/s]         shape (3,)
    orientation   : body→ENU [w,x,y,z] shape (4,)
    yaw/pitch/roll: ZYX Euler [rad]   derived from orientation
    angular_rates : body [p, q, r]    shape (3,)

The default values describe a Cessna 172-like light aircraft.
"""

import math
from dataclasses import dataclass, field, replace
from typing import Sequence, Tuple

import numpy as np

from aerofdm.aerodynamics import induced_drag_factor
from aerofdm.frames import G0_EARTH
from aerofdm.utils.rotations import euler_to_quat, heading_deg
from aerofdm.utils.vectors import as_vec3

# =============================================================================
# Parameter Dataclasses
# =============================================================================


@dataclass(frozen=True)
class AircraftParameters:
    """
    Physical parameters of the airframe.

    Attributes
    ----------
    mass : float
        Aircraft mass [kg].
    wing_area : float
        Reference wing area S [m²].
    wing_span : float
        Wing span b [m].
    max_thrust : float
        Static thrust at full throttle [N].
    parasite_drag_coefficient : float
        Zero-lift drag coefficient Cd0.
    cl_slope_per_rad : float
        Lift curve slope [1/rad].
    oswald_efficiency : float
        Oswald span efficiency factor e, in (0, 1].
    """

    mass: float = 1110.0  # ~2450 lb MTOW
    wing_area: float = 16.2  # 174 ft²
    wing_span: float = 11.0  # 36 ft 1 in
    max_thrust: float = 4500.0  # ~180 hp at ~30 m/s
    parasite_drag_coefficient: float = 0.03
    cl_slope_per_rad: float = 5.7  # ~2π corrected for a finite wing
    oswald_efficiency: float = 0.8

    def __post_init__(self):
        """Validate parameters."""
        for name in ("mass", "wing_area", "wing_span", "cl_slope_per_rad", "oswald_efficiency"):
            value = getattr(self, name)
            if not math.isfinite(value) or value <= 0:
                raise ValueError(f"{name} must be positive and finite, got {value}")
        for name in ("max_thrust", "parasite_drag_coefficient"):
            value = getattr(self, name)
            if not math.isfinite(value) or value < 0:
                raise ValueError(f"{name} must be non-negative and finite, got {value}")
        if self.oswald_efficiency > 1.0:
            raise ValueError(f"oswald_efficiency must be <= 1, got {self.oswald_efficiency}")

    @property
    def aspect_ratio(self) -> float:
        """Wing aspect ratio b²/S."""
        return self.wing_span**2 / self.wing_area

    @property
    def induced_drag_factor(self) -> float:
        """k = 1/(π·AR·e) of the drag polar."""
        return induced_drag_factor(self.aspect_ratio, self.oswald_efficiency)

    @property
    def weight(self) -> float:
        """Weight at standard gravity [N]."""
        return self.mass * G0_EARTH


@dataclass(frozen=True)
class FdmConfig:
    """
    Tuning of the rate-command attitude model and the lateral aerodynamics.

    Each control axis commands a body rate
    ``control · max_rate · rate_gain · speed_factor``.

    Attributes
    ----------
    max_roll_rate, max_pitch_rate, max_yaw_rate : float
        Per-axis maximum angular rate [rad/s].
    roll_rate_gain, pitch_rate_gain, yaw_rate_gain : float
        Fraction of the maximum rate reached at full deflection and full
        airspeed authority.
    stall_alpha : float
        Angle of attack at which the lift coefficient saturates [rad].
    coordination_gain : float
        Strength of the bank-induced yaw rate.
    lateral_drag_coefficient : float
        Sideforce slope per radian of sideslip.
    """

    max_roll_rate: float = math.pi
    max_pitch_rate: float = math.pi / 2
    max_yaw_rate: float = math.pi / 2
    roll_rate_gain: float = 0.6
    pitch_rate_gain: float = 0.5
    yaw_rate_gain: float = 0.4
    stall_alpha: float = math.radians(15.0)
    coordination_gain: float = 0.7
    lateral_drag_coefficient: float = 0.98

    def __post_init__(self):
        """Validate configuration."""
        for name in (
            "max_roll_rate",
            "max_pitch_rate",
            "max_yaw_rate",
            "roll_rate_gain",
            "pitch_rate_gain",
            "yaw_rate_gain",
            "coordination_gain",
            "lateral_drag_coefficient",
        ):
            value = getattr(self, name)
            if not math.isfinite(value) or value < 0:
                raise ValueError(f"{name} must be non-negative and finite, got {value}")
        if not 0 < self.stall_alpha < math.pi / 2:
            raise ValueError(f"stall_alpha must be in (0, π/2), got {self.stall_alpha}")

    @property
    def max_rates(self) -> np.ndarray:
        """Maximum [roll, pitch, yaw] rates [rad/s]."""
        return np.array([self.max_roll_rate, self.max_pitch_rate, self.max_yaw_rate])

    @property
    def rate_gains(self) -> np.ndarray:
        """Per-axis [roll, pitch, yaw] rate gains."""
        return np.array([self.roll_rate_gain, self.pitch_rate_gain, self.yaw_rate_gain])


# =============================================================================
# Control Inputs
# =============================================================================


def _clamp_input(value: float, lower: float, upper: float) -> float:
    if not math.isfinite(value):
        return 0.0
    return max(lower, min(upper, float(value)))


@dataclass(frozen=True)
class ControlInputs:
    """
    Pilot inputs for one tick.

    Attributes
    ----------
    elevator : float
        Pitch command in [-1, 1]. Positive pitches the nose down.
    ailerons : float
        Roll command in [-1, 1]. Positive raises the right wing.
    rudder : float
        Yaw command in [-1, 1]. Positive swings the nose left.
    throttle : float
        Thrust fraction in [0, 1].
    """

    elevator: float = 0.0
    ailerons: float = 0.0
    rudder: float = 0.0
    throttle: float = 0.0

    def clamped(self) -> "ControlInputs":
        """Copy with every axis clamped to its range; non-finite values become 0."""
        return ControlInputs(
            elevator=_clamp_input(self.elevator, -1.0, 1.0),
            ailerons=_clamp_input(self.ailerons, -1.0, 1.0),
            rudder=_clamp_input(self.rudder, -1.0, 1.0),
            throttle=_clamp_input(self.throttle, 0.0, 1.0),
        )

    def as_array(self) -> np.ndarray:
        """[elevator, ailerons, rudder, throttle]."""
        return np.array([self.elevator, self.ailerons, self.rudder, self.throttle], dtype=np.float64)


CONTROL_NAMES = ["elevator", "ailerons", "rudder", "throttle"]


# =============================================================================
# Aircraft State
# =============================================================================


def _frozen(v: np.ndarray) -> np.ndarray:
    arr = np.array(v, dtype=np.float64)
    arr.setflags(write=False)
    return arr


@dataclass(frozen=True)
class AircraftState:
    """
    Full simulation state of one aircraft.

    A state is immutable: its fields cannot be reassigned and its arrays
    are read-only. The model replaces the whole state on every substep, so
    a reference taken before an update keeps its old value.

    Attributes
    ----------
    position : np.ndarray, shape (3,)
        ENU position [m]; ``position[2]`` is altitude.
    velocity : np.ndarray, shape (3,)
        ENU velocity [m/s].
    orientation : np.ndarray, shape (4,)
        Unit quaternion [w, x, y, z], body→ENU.
    yaw, pitch, roll : float
        ZYX Euler angles derived from ``orientation`` [rad].
    angular_rates : np.ndarray, shape (3,)
        Body rates [p, q, r] [rad/s].
    """

    position: np.ndarray = field(default_factory=lambda: np.zeros(3))
    velocity: np.ndarray = field(default_factory=lambda: np.zeros(3))
    orientation: np.ndarray = field(default_factory=lambda: np.array([1.0, 0.0, 0.0, 0.0]))
    yaw: float = 0.0
    pitch: float = 0.0
    roll: float = 0.0
    angular_rates: np.ndarray = field(default_factory=lambda: np.zeros(3))

    def __post_init__(self):
        """Convert and validate array fields."""
        object.__setattr__(self, "position", _frozen(as_vec3(self.position)))
        object.__setattr__(self, "velocity", _frozen(as_vec3(self.velocity)))
        object.__setattr__(self, "angular_rates", _frozen(as_vec3(self.angular_rates)))
        orientation = np.array(self.orientation, dtype=np.float64).reshape(-1)
        if orientation.shape != (4,):
            raise ValueError(f"orientation must be (4,), got {np.shape(self.orientation)}")
        object.__setattr__(self, "orientation", _frozen(orientation))
        for name in ("yaw", "pitch", "roll"):
            object.__setattr__(self, name, float(getattr(self, name)))

    @property
    def ground_speed(self) -> float:
        """Speed over the ground [m/s]; equals airspeed only in still air."""
        return float(np.linalg.norm(self.velocity))

    @property
    def altitude(self) -> float:
        """Height above the ENU origin [m]."""
        return float(self.position[2])

    @property
    def heading_deg(self) -> float:
        """Yaw as a display heading in [0, 360) degrees."""
        return heading_deg(self.yaw)

    @property
    def nose_elevation(self) -> float:
        """Angle of the nose above the horizon [rad]; the negative of ``pitch``."""
        return -self.pitch

    def euler(self) -> np.ndarray:
        """[yaw, pitch, roll] in radians."""
        return np.array([self.yaw, self.pitch, self.roll])

    def copy(self) -> "AircraftState":
        return replace(self)


# =============================================================================
# Factory Functions
# =============================================================================


def initial_state(
    position: Sequence[float] = (0.0, 0.0, 0.0),
    velocity: Sequence[float] = (0.0, 0.0, 0.0),
    yaw: float = 0.0,
    pitch: float = 0.0,
    roll: float = 0.0,
) -> AircraftState:
    """
    Build a non-rotating state from a pose given in Euler angles.

    Parameters
    ----------
    position : array-like, shape (3,)
        ENU position [m].
    velocity : array-like, shape (3,)
        ENU velocity [m/s].
    yaw, pitch, roll : float
        ZYX Euler angles [rad]. Negative pitch is nose up.

    Returns
    -------
    AircraftState
        State whose quaternion matches the given angles and whose body
        rates are zero.

    Example
    -------
    >>> state = initial_state(position=(0, 0, 1000), velocity=(50, 0, 0))
    >>> state.altitude
    1000.0
    """
    return AircraftState(
        position=position,
        velocity=velocity,
        orientation=euler_to_quat(yaw, pitch, roll),
        yaw=float(yaw),
        pitch=float(pitch),
        roll=float(roll),
    )


def create_default_aircraft() -> Tuple[AircraftParameters, AircraftState]:
    """
    Cessna 172-like parameters and a state at rest at the origin.

    Returns
    -------
    params : AircraftParameters
    state : AircraftState
    """
    return AircraftParameters(), initial_state()


def default_config() -> FdmConfig:
    """Create default model configuration."""
    return FdmConfig()
