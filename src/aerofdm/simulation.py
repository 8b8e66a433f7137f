"""
Closed-loop simulation driver.

Runs a :class:`~aerofdm.model.FlightDynamicsModel` at a fixed tick with a
controller callback and records the trajectory in a :class:`FlightLog`.
"""

from dataclasses import dataclass
from typing import Callable

import numpy as np

from aerofdm.aircraft import AircraftState, ControlInputs
from aerofdm.logging_system import get_logger
from aerofdm.model import FlightDynamicsModel

logger = get_logger(__name__)

Controller = Callable[[float, AircraftState], ControlInputs]


@dataclass
class FlightLog:
    """
    Recorded trajectory.

    Attributes
    ----------
    t : np.ndarray, shape (N,)
        Sample times [s], starting at 0.
    position : np.ndarray, shape (N, 3)
        ENU position [m].
    velocity : np.ndarray, shape (N, 3)
        ENU velocity [m/s].
    euler : np.ndarray, shape (N, 3)
        [yaw, pitch, roll] [rad].
    rates : np.ndarray, shape (N, 3)
        Body rates [p, q, r] [rad/s].
    controls : np.ndarray, shape (N-1, 4)
        [elevator, ailerons, rudder, throttle] applied over each interval,
        as returned by the controller (before clamping).
    """

    t: np.ndarray
    position: np.ndarray
    velocity: np.ndarray
    euler: np.ndarray
    rates: np.ndarray
    controls: np.ndarray

    @property
    def altitude(self) -> np.ndarray:
        return self.position[:, 2]

    @property
    def ground_speed(self) -> np.ndarray:
        return np.linalg.norm(self.velocity, axis=1)

    @property
    def heading_deg(self) -> np.ndarray:
        return (np.degrees(self.euler[:, 0]) + 360.0) % 360.0

    def __len__(self) -> int:
        return len(self.t)


def simulate(
    model: FlightDynamicsModel,
    controller: Controller,
    duration: float,
    dt: float = 1.0 / 60.0,
) -> FlightLog:
    """
    Run a closed-loop simulation.

    Parameters
    ----------
    model : FlightDynamicsModel
        Model to advance; it continues from its current state and is left
        at the final state.
    controller : callable
        Control law with signature ``controls = controller(t, state)``,
        where ``t`` is the time since the start of this call.
    duration : float
        Simulated time [s].
    dt : float
        Tick length [s]. Each tick is one ``model.update`` call.

    Returns
    -------
    FlightLog
        ``round(duration / dt) + 1`` samples including the starting state.

    Raises
    ------
    ValueError
        If ``duration`` is negative or ``dt`` is not positive.
    """
    if not np.isfinite(dt) or dt <= 0:
        raise ValueError(f"dt must be positive, got {dt}")
    if not np.isfinite(duration) or duration < 0:
        raise ValueError(f"duration must be non-negative, got {duration}")

    n_steps = int(round(duration / dt))
    t = np.arange(n_steps + 1) * dt

    position = np.zeros((n_steps + 1, 3))
    velocity = np.zeros((n_steps + 1, 3))
    euler = np.zeros((n_steps + 1, 3))
    rates = np.zeros((n_steps + 1, 3))
    controls = np.zeros((n_steps, 4))

    def record(k: int, state: AircraftState) -> None:
        position[k] = state.position
        velocity[k] = state.velocity
        euler[k] = state.euler()
        rates[k] = state.angular_rates

    record(0, model.state)
    for k in range(n_steps):
        u_k = controller(t[k], model.state)
        controls[k] = u_k.as_array()
        model.update(dt, u_k)
        record(k + 1, model.state)

    logger.debug("Simulated %.2f s in %d steps, final altitude %.1f m", duration, n_steps, model.state.altitude)
    return FlightLog(t=t, position=position, velocity=velocity, euler=euler, rates=rates, controls=controls)
