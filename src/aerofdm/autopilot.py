"""
Simple guidance helpers for driving the flight model.

- :class:`PitchHold`: proportional elevator law holding a nose attitude.
- :func:`trim_level_flight`: attitude and throttle for steady level flight.
- :func:`trimmed_state`: a state already in that trimmed condition.

Angles here are nose elevations (positive nose up), which is the negative
of the model's ``pitch`` angle.
"""

import math
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from aerofdm.aerodynamics import drag_coefficient, dynamic_pressure
from aerofdm.aircraft import AircraftParameters, AircraftState, ControlInputs, FdmConfig, initial_state
from aerofdm.logging_system import get_logger

logger = get_logger(__name__)

TRIM_ITERATIONS = 50
TRIM_TOLERANCE = 1e-10


@dataclass
class PitchHold:
    """
    Proportional pitch-attitude hold.

    elevator = clamp(gain · (elevation - target), -1, 1)

    Positive elevator pitches the nose down, so a nose above the target
    produces a positive command.

    Attributes
    ----------
    target_deg : float
        Desired nose elevation above the horizon [deg].
    gain : float
        Elevator per radian of attitude error.
    """

    target_deg: float = 0.0
    gain: float = 2.0

    def __post_init__(self):
        if not math.isfinite(self.gain) or self.gain <= 0:
            raise ValueError(f"gain must be positive, got {self.gain}")

    def elevator(self, state: AircraftState) -> float:
        """Elevator command for the current state."""
        error = state.nose_elevation - math.radians(self.target_deg)
        return max(-1.0, min(1.0, self.gain * error))

    def __call__(self, state: AircraftState, throttle: float = 0.0) -> ControlInputs:
        return ControlInputs(elevator=self.elevator(state), throttle=throttle)


def trim_level_flight(
    params: AircraftParameters,
    airspeed: float,
    config: Optional[FdmConfig] = None,
) -> Tuple[float, float]:
    """
    Solve for steady, wings-level, unaccelerated flight.

    With the body axis raised by ``a`` above a horizontal flight path, the
    balance of forces is

        T·cos(a) = D(a)
        L(a) + T·sin(a) = m·g

    which is solved by fixed-point iteration on ``a``.

    Parameters
    ----------
    params : AircraftParameters
        Airframe constants.
    airspeed : float
        True airspeed [m/s]; must be positive.
    config : FdmConfig, optional
        Supplies the stall angle. Defaults to ``FdmConfig()``.

    Returns
    -------
    elevation : float
        Nose elevation (equal to the angle of attack) [rad].
    throttle : float
        Throttle fraction needed to balance drag.

    Raises
    ------
    ValueError
        If the speed is not positive, the required angle exceeds the stall
        angle, or the required thrust exceeds ``max_thrust``.
    """
    if not math.isfinite(airspeed) or airspeed <= 0:
        raise ValueError(f"airspeed must be positive, got {airspeed}")
    config = config if config is not None else FdmConfig()

    q_s = dynamic_pressure(airspeed) * params.wing_area
    lift_per_rad = q_s * params.cl_slope_per_rad

    alpha = params.weight / lift_per_rad
    thrust = 0.0
    for _ in range(TRIM_ITERATIONS):
        cl = params.cl_slope_per_rad * alpha
        cd = drag_coefficient(params.parasite_drag_coefficient, cl, params.aspect_ratio, params.oswald_efficiency)
        thrust = cd * q_s / math.cos(alpha)
        alpha_next = (params.weight - thrust * math.sin(alpha)) / lift_per_rad
        converged = abs(alpha_next - alpha) < TRIM_TOLERANCE
        alpha = alpha_next
        if converged:
            break

    if alpha > config.stall_alpha:
        raise ValueError(
            f"Level flight at {airspeed:.1f} m/s needs alpha {math.degrees(alpha):.1f}°, "
            f"beyond stall ({math.degrees(config.stall_alpha):.1f}°)"
        )
    if params.max_thrust <= 0 or thrust > params.max_thrust:
        raise ValueError(f"Level flight at {airspeed:.1f} m/s needs {thrust:.0f} N of thrust")

    throttle = thrust / params.max_thrust
    logger.debug("Trim at %.1f m/s: alpha=%.2f°, throttle=%.3f", airspeed, math.degrees(alpha), throttle)
    return alpha, throttle


def trimmed_state(
    params: AircraftParameters,
    airspeed: float,
    position: Sequence[float] = (0.0, 0.0, 0.0),
    yaw: float = 0.0,
    config: Optional[FdmConfig] = None,
) -> Tuple[AircraftState, float]:
    """
    Level-flight state heading along ``yaw`` together with its trim throttle.

    Returns
    -------
    state : AircraftState
    throttle : float
    """
    elevation, throttle = trim_level_flight(params, airspeed, config)
    velocity = (airspeed * math.cos(yaw), airspeed * math.sin(yaw), 0.0)
    state = initial_state(position=position, velocity=velocity, yaw=yaw, pitch=-elevation)
    return state, throttle
