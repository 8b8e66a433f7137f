"""
Coefficient-level aerodynamic model.

A deliberately small model: linear lift up to a symmetric stall angle (the
coefficient saturates beyond it rather than dropping off), parabolic drag
polar, and a linear sideforce opposing sideslip.

    Cl = Cl_α · clamp(α, -α_stall, α_stall)
    Cd = Cd0 + Cl² / (π · AR · e)
    L  = ½ · Cl · ρ · V² · S
    D  = ½ · Cd · ρ · V² · S
    Y  = -q̄ · S · Cy_β · β

All functions are pure and scalar-in/scalar-out except :func:`aero_angles`.
Zero airspeed gives exactly zero force.
"""

import math
from typing import Tuple

import numpy as np

from aerofdm.frames import SEA_LEVEL_DENSITY

# Airflow below this speed has no defined angle of attack or sideslip [m/s].
MIN_ANGLE_AIRSPEED = 0.1
# Floors keeping atan2 away from (0, 0).
ALPHA_FORWARD_EPS = 1e-3
BETA_FORWARD_EPS = 1e-6


def lift_coefficient(alpha: float, cl_slope_per_rad: float, stall_alpha: float) -> float:
    """
    Lift coefficient, linear in angle of attack and saturated at stall.

    Parameters
    ----------
    alpha : float
        Angle of attack [rad].
    cl_slope_per_rad : float
        Lift curve slope [1/rad].
    stall_alpha : float
        Stall angle of attack [rad]; the coefficient is held at its value
        at ±stall_alpha beyond it.

    Returns
    -------
    float
        Cl (dimensionless).
    """
    return cl_slope_per_rad * max(-stall_alpha, min(stall_alpha, alpha))


def induced_drag_factor(aspect_ratio: float, oswald_efficiency: float) -> float:
    """k = 1 / (π · AR · e)."""
    return 1.0 / (math.pi * aspect_ratio * oswald_efficiency)


def drag_coefficient(
    parasite_drag_coefficient: float,
    cl: float,
    aspect_ratio: float,
    oswald_efficiency: float,
) -> float:
    """
    Drag coefficient from the parabolic polar Cd = Cd0 + k·Cl².

    Parameters
    ----------
    parasite_drag_coefficient : float
        Zero-lift drag coefficient Cd0.
    cl : float
        Current lift coefficient.
    aspect_ratio : float
        Wing aspect ratio b²/S.
    oswald_efficiency : float
        Oswald span efficiency factor e.

    Returns
    -------
    float
        Cd (dimensionless).
    """
    return parasite_drag_coefficient + induced_drag_factor(aspect_ratio, oswald_efficiency) * cl * cl


def dynamic_pressure(airspeed: float, rho: float = SEA_LEVEL_DENSITY) -> float:
    """q̄ = ½ · ρ · V² [Pa]."""
    return 0.5 * rho * airspeed * airspeed


def lift_force(cl: float, airspeed: float, wing_area: float, rho: float = SEA_LEVEL_DENSITY) -> float:
    """Lift magnitude ½·Cl·ρ·V²·S [N]. Signed by Cl."""
    return cl * dynamic_pressure(airspeed, rho) * wing_area


def drag_force(cd: float, airspeed: float, wing_area: float, rho: float = SEA_LEVEL_DENSITY) -> float:
    """Drag magnitude ½·Cd·ρ·V²·S [N]."""
    return cd * dynamic_pressure(airspeed, rho) * wing_area


def sideforce(q_bar: float, wing_area: float, cy_per_rad: float, beta: float) -> float:
    """
    Crude fin/fuselage sideforce along body +Y [N].

    Proportional to dynamic pressure, wing area, the per-radian coefficient
    and sideslip; the sign opposes the sideslip.
    """
    return -q_bar * wing_area * cy_per_rad * beta


def aero_angles(v_air_body: np.ndarray) -> Tuple[float, float]:
    """
    Angle of attack and sideslip from the body-frame air velocity.

    Parameters
    ----------
    v_air_body : np.ndarray, shape (3,)
        Velocity of the aircraft relative to the air mass, body axes
        (X forward, Y right, Z up).

    Returns
    -------
    alpha : float
        atan2(w, max(1e-3, u)) [rad].
    beta : float
        atan2(v, hypot(max(1e-6, u), w)) [rad].

    Notes
    -----
    Backward flow has no meaning in this model, so the forward component u
    is clamped at zero before either angle is formed. Both angles are zero
    when the clamped airspeed is below 0.1 m/s.

    With body Z up, the nose sitting above the flight path gives w < 0 and
    therefore a negative alpha. The lift direction built by the model flips
    with it, so a nose-up attitude still produces lift toward body +Z.
    """
    u = max(0.0, float(v_air_body[0]))
    v = float(v_air_body[1])
    w = float(v_air_body[2])

    if math.sqrt(u * u + v * v + w * w) < MIN_ANGLE_AIRSPEED:
        return 0.0, 0.0

    alpha = math.atan2(w, max(ALPHA_FORWARD_EPS, u))
    beta = math.atan2(v, math.hypot(max(BETA_FORWARD_EPS, u), w))
    return alpha, beta
