"""
Quaternion utilities for aircraft attitude.

Quaternions use the scalar-first convention:
    q = [q_w, q_x, q_y, q_z] = [cos(θ/2), sin(θ/2)·n]

where θ is the rotation angle and n is the unit rotation axis. An attitude
quaternion rotates vectors from the aircraft body frame into the local ENU
world frame.

Products follow Hamilton's rule. A quaternion and its negation describe the
same attitude; nothing here picks a sign.
"""

import numpy as np


def quat_identity() -> np.ndarray:
    """Level attitude, nose east: [1, 0, 0, 0]."""
    return np.array([1.0, 0.0, 0.0, 0.0])


def quat_multiply(q1: np.ndarray, q2: np.ndarray) -> np.ndarray:
    """
    Hamilton product q1 ⊗ q2.

    As rotations, the result applies q2 first and q1 second, so
    ``quat_to_dcm(q1 ⊗ q2) == quat_to_dcm(q1) @ quat_to_dcm(q2)``.
    """
    w1, x1, y1, z1 = np.asarray(q1, dtype=np.float64)
    w2, x2, y2, z2 = np.asarray(q2, dtype=np.float64)

    return np.array(
        [
            w1 * w2 - x1 * x2 - y1 * y2 - z1 * z2,
            w1 * x2 + x1 * w2 + y1 * z2 - z1 * y2,
            w1 * y2 - x1 * z2 + y1 * w2 + z1 * x2,
            w1 * z2 + x1 * y2 - y1 * x2 + z1 * w2,
        ]
    )


def quat_conjugate(q: np.ndarray) -> np.ndarray:
    """Quaternion conjugate [w, -x, -y, -z] (the inverse of a unit quaternion)."""
    q = np.asarray(q, dtype=np.float64)
    return np.array([q[0], -q[1], -q[2], -q[3]])


def quat_norm(q: np.ndarray) -> float:
    return float(np.linalg.norm(q))


def quat_normalize(q: np.ndarray) -> np.ndarray:
    """
    Scale ``q`` to unit length.

    A quaternion with norm below 1e-12 has no direction to keep and is
    replaced by the identity.
    """
    q = np.asarray(q, dtype=np.float64)
    norm = quat_norm(q)
    if norm < 1e-12:
        return quat_identity()
    return q / norm


def quat_to_dcm(q: np.ndarray) -> np.ndarray:
    """
    Body→ENU direction cosine matrix of an attitude quaternion.

        v_W = C @ v_B

    Parameters
    ----------
    q : np.ndarray, shape (4,)
        Attitude [w, x, y, z], assumed unit length.

    Returns
    -------
    C : np.ndarray, shape (3, 3)

    Notes
    -----
    The input is not renormalized; attitude quaternions are kept at unit
    length by the integrator.
    """
    w, x, y, z = np.asarray(q, dtype=np.float64)

    xx, yy, zz = x * x, y * y, z * z
    xy, xz, yz = x * y, x * z, y * z
    wx, wy, wz = w * x, w * y, w * z

    return np.array(
        [
            [1 - 2 * (yy + zz), 2 * (xy - wz), 2 * (xz + wy)],
            [2 * (xy + wz), 1 - 2 * (xx + zz), 2 * (yz - wx)],
            [2 * (xz - wy), 2 * (yz + wx), 1 - 2 * (xx + yy)],
        ]
    )


def quat_from_axis_angle(axis: np.ndarray, angle: float) -> np.ndarray:
    """
    Rotation by ``angle`` radians about ``axis`` (any length; a zero axis
    gives the identity).
    """
    n = np.asarray(axis, dtype=np.float64)
    length = np.linalg.norm(n)
    if length < 1e-12:
        return quat_identity()

    half = 0.5 * angle
    return np.concatenate(([np.cos(half)], np.sin(half) * n / length))


def quat_derivative(q: np.ndarray, omega: np.ndarray) -> np.ndarray:
    """
    Quaternion time derivative for body angular rates.

    q̇ = (1/2) q ⊗ [0, p, q, r]

    Parameters
    ----------
    q : np.ndarray, shape (4,)
        Current attitude quaternion [w, x, y, z].
    omega : np.ndarray, shape (3,)
        Body angular rates [p, q, r] in rad/s.

    Returns
    -------
    q_dot : np.ndarray, shape (4,)
    """
    p, q_rate, r = np.asarray(omega, dtype=np.float64)
    return 0.5 * quat_multiply(q, np.array([0.0, p, q_rate, r]))


def quat_integrate(q: np.ndarray, omega: np.ndarray, dt: float) -> np.ndarray:
    """
    Advance an attitude quaternion by one explicit Euler step.

        q' = normalize(q + dt · q̇)

    Parameters
    ----------
    q : array-like, shape (4,)
        Attitude at the start of the step.
    omega : array-like, shape (3,)
        Body rates [p, q, r] [rad/s], held over the step.
    dt : float
        Step length [s].

    Returns
    -------
    q_next : np.ndarray, shape (4,)
        Renormalized attitude at the end of the step.

    Notes
    -----
    First order only. The model keeps ``dt`` at or below one substep
    (0.02 s), where the truncation error is far below the renormalization.
    """
    q = np.asarray(q, dtype=np.float64)
    return quat_normalize(q + dt * quat_derivative(q, omega))
