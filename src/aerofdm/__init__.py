"""
aerofdm - A compact six-degree-of-freedom flight dynamics model.

This library advances an aircraft's position, velocity and quaternion
attitude over time from pilot control inputs, using a small coefficient
aerodynamic model and a substepped integrator that stays stable under large
or irregular time steps.

Visualization utilities are available in the `aerofdm.visualization` submodule:
    from aerofdm.visualization import plot_flight, plot_trajectory_3d
"""

__version__ = "0.1.0"

from aerofdm.aerodynamics import (
    aero_angles,
    drag_coefficient,
    drag_force,
    dynamic_pressure,
    lift_coefficient,
    lift_force,
    sideforce,
)
from aerofdm.aircraft import (
    AircraftParameters,
    AircraftState,
    ControlInputs,
    FdmConfig,
    create_default_aircraft,
    default_config,
    initial_state,
)
from aerofdm.autopilot import PitchHold, trim_level_flight, trimmed_state
from aerofdm.config import load_aircraft_config, load_default_aircraft
from aerofdm.logging_system import get_logger, initialize_logging
from aerofdm.model import FlightDynamicsModel
from aerofdm.simulation import FlightLog, simulate
from aerofdm.telemetry import FlightHudState, StateBus, hud_state
from aerofdm.utils import (
    euler_to_quat,
    quat_integrate,
    quat_multiply,
    quat_normalize,
    quat_to_dcm,
    yaw_pitch_roll,
)

__all__ = [
    "AircraftParameters",
    "AircraftState",
    "ControlInputs",
    "FdmConfig",
    "FlightDynamicsModel",
    "FlightHudState",
    "FlightLog",
    "PitchHold",
    "StateBus",
    "__version__",
    "aero_angles",
    "create_default_aircraft",
    "default_config",
    "drag_coefficient",
    "drag_force",
    "dynamic_pressure",
    "euler_to_quat",
    "get_logger",
    "hud_state",
    "initial_state",
    "initialize_logging",
    "lift_coefficient",
    "lift_force",
    "load_aircraft_config",
    "load_default_aircraft",
    "quat_integrate",
    "quat_multiply",
    "quat_normalize",
    "quat_to_dcm",
    "sideforce",
    "simulate",
    "trim_level_flight",
    "trimmed_state",
    "yaw_pitch_roll",
]
