"""
Rotation utilities for aircraft attitude.

This module provides functions for working with rotation matrices (DCM)
and yaw/pitch/roll Euler angles, and for moving vectors between the body
frame and the ENU world frame.

Conventions
-----------
- Euler angles are in radians
- Euler sequence is 'ZYX' (yaw-pitch-roll, aerospace convention)
- DCM transforms vectors from body frame to world frame: v_W = C @ v_B
- Right-hand rotation convention
- Body axes: X forward, Y right, Z up. With Z up, a positive pitch angle
  puts the nose DOWN and a positive roll angle raises the right wing.

Euler Angle Sequences
---------------------
The sequence 'ZYX' means: first rotate about Z (yaw), then Y (pitch),
then X (roll), so C = Rz(yaw) @ Ry(pitch) @ Rx(roll).

References
----------
- Diebel (2006) - Representing Attitude: Euler Angles, Unit Quaternions, and Rotation Vectors
- Stevens & Lewis - Aircraft Control and Simulation
"""

from typing import Tuple

import numpy as np

from aerofdm.utils.quaternion import quat_normalize, quat_to_dcm

# Pitch is kept this far away from ±90° when extracted.
PITCH_LIMIT_EPS = 1e-3

# =============================================================================
# Basic Rotation Matrices
# =============================================================================


def rotx(angle: float) -> np.ndarray:
    """
    Elementary rotation matrix about the x-axis.

    Parameters
    ----------
    angle : float
        Rotation angle in radians.

    Returns
    -------
    np.ndarray, shape (3, 3)
        Rotation matrix.
    """
    c, s = np.cos(angle), np.sin(angle)
    return np.array([[1, 0, 0], [0, c, -s], [0, s, c]])


def roty(angle: float) -> np.ndarray:
    """Elementary rotation matrix about the y-axis."""
    c, s = np.cos(angle), np.sin(angle)
    return np.array([[c, 0, s], [0, 1, 0], [-s, 0, c]])


def rotz(angle: float) -> np.ndarray:
    """Elementary rotation matrix about the z-axis."""
    c, s = np.cos(angle), np.sin(angle)
    return np.array([[c, -s, 0], [s, c, 0], [0, 0, 1]])


# =============================================================================
# Frame Transforms
# =============================================================================


def dcm_transpose(C: np.ndarray) -> np.ndarray:
    """
    Inverse of a rotation matrix.

    Rotation matrices are orthonormal, so the inverse is the transpose. Given
    the body→world DCM this yields the world→body DCM.
    """
    return np.asarray(C, dtype=np.float64).T.copy()


def body_to_world(q: np.ndarray, v_body: np.ndarray) -> np.ndarray:
    """Rotate a body-frame vector into the ENU world frame."""
    return quat_to_dcm(q) @ np.asarray(v_body, dtype=np.float64)


def world_to_body(q: np.ndarray, v_world: np.ndarray) -> np.ndarray:
    """Rotate an ENU world-frame vector into the body frame."""
    return dcm_transpose(quat_to_dcm(q)) @ np.asarray(v_world, dtype=np.float64)


# =============================================================================
# Euler Angles
# =============================================================================


def euler_to_dcm(yaw: float, pitch: float, roll: float) -> np.ndarray:
    """
    Convert ZYX Euler angles to the body→world DCM.

    Parameters
    ----------
    yaw : float
        Rotation about the world Z (up) axis, radians.
    pitch : float
        Rotation about the intermediate Y axis, radians. Positive is nose down.
    roll : float
        Rotation about the body X axis, radians. Positive raises the right wing.

    Returns
    -------
    np.ndarray, shape (3, 3)
        C = Rz(yaw) @ Ry(pitch) @ Rx(roll)
    """
    return rotz(yaw) @ roty(pitch) @ rotx(roll)


def euler_to_quat(yaw: float, pitch: float, roll: float) -> np.ndarray:
    """
    Convert ZYX Euler angles to a unit quaternion.

    Parameters
    ----------
    yaw, pitch, roll : float
        Euler angles in radians (see :func:`euler_to_dcm`).

    Returns
    -------
    np.ndarray, shape (4,)
        Unit quaternion [w, x, y, z] equal to qz(yaw) ⊗ qy(pitch) ⊗ qx(roll).

    Examples
    --------
    >>> euler_to_quat(np.pi / 2, 0.0, 0.0)  # 90° yaw
    array([0.70710678, 0.        , 0.        , 0.70710678])
    """
    cy, sy = np.cos(yaw / 2), np.sin(yaw / 2)
    cp, sp = np.cos(pitch / 2), np.sin(pitch / 2)
    cr, sr = np.cos(roll / 2), np.sin(roll / 2)

    q = np.array(
        [
            cr * cp * cy + sr * sp * sy,
            sr * cp * cy - cr * sp * sy,
            cr * sp * cy + sr * cp * sy,
            cr * cp * sy - sr * sp * cy,
        ]
    )
    return quat_normalize(q)


def dcm_to_yaw_pitch_roll(C: np.ndarray) -> Tuple[float, float, float]:
    """
    Extract ZYX Euler angles from a body→world DCM.

    Parameters
    ----------
    C : np.ndarray, shape (3, 3)
        Rotation matrix.

    Returns
    -------
    yaw, pitch, roll : float
        Angles in radians. Pitch is clamped to
        (-π/2 + 1e-3, π/2 - 1e-3).

    Notes
    -----
    The pitch clamp keeps the yaw/roll split defined for display purposes
    only. It does not remove the gimbal-lock singularity, which is why
    these angles are never integrated.
    """
    C = np.asarray(C, dtype=np.float64)

    limit = np.pi / 2 - PITCH_LIMIT_EPS
    pitch = float(np.arcsin(np.clip(-C[2, 0], -1.0, 1.0)))
    pitch = float(np.clip(pitch, -limit, limit))
    roll = float(np.arctan2(C[2, 1], C[2, 2]))
    yaw = float(np.arctan2(C[1, 0], C[0, 0]))
    return yaw, pitch, roll


def yaw_pitch_roll(q: np.ndarray) -> Tuple[float, float, float]:
    """Extract ZYX Euler angles (yaw, pitch, roll) from an attitude quaternion."""
    return dcm_to_yaw_pitch_roll(quat_to_dcm(q))


# =============================================================================
# Angle Wrapping Utilities
# =============================================================================


def wrap_angle(angle: float) -> float:
    """
    Wrap angle to [-π, π).

    Parameters
    ----------
    angle : float
        Angle in radians.

    Returns
    -------
    float
        Wrapped angle.
    """
    return (angle + np.pi) % (2 * np.pi) - np.pi


def angle_difference(angle1: float, angle2: float) -> float:
    """Shortest signed difference ``angle1 - angle2`` in [-π, π)."""
    return wrap_angle(angle1 - angle2)


def heading_deg(yaw: float) -> float:
    """Yaw angle as a compass-style display value in degrees, in [0, 360)."""
    return (np.degrees(yaw) + 360.0) % 360.0
