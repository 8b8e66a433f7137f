"""
Vector3 helpers on numpy arrays.

Every function accepts array-likes of length 3 and returns a new
``float64`` array; inputs are never modified. A vector carries no frame
tag, so callers are responsible for only combining vectors expressed in
the same frame (ENU world or aircraft body).
"""

import numpy as np

# Vectors shorter than this normalize to zero instead of blowing up.
NORMALIZE_EPS = 1e-6


def vec3(x: float = 0.0, y: float = 0.0, z: float = 0.0) -> np.ndarray:
    """Build a Vector3 from components."""
    return np.array([x, y, z], dtype=np.float64)


def as_vec3(v) -> np.ndarray:
    """
    Convert an array-like to a Vector3.

    Raises
    ------
    ValueError
        If ``v`` does not have exactly three components.
    """
    arr = np.array(v, dtype=np.float64).reshape(-1)
    if arr.shape != (3,):
        raise ValueError(f"Expected a 3-vector, got shape {np.shape(v)}")
    return arr


def add(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    return np.asarray(a, dtype=np.float64) + np.asarray(b, dtype=np.float64)


def scale(v: np.ndarray, s: float) -> np.ndarray:
    return np.asarray(v, dtype=np.float64) * s


def dot(a: np.ndarray, b: np.ndarray) -> float:
    return float(np.dot(a, b))


def cross(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    return np.cross(np.asarray(a, dtype=np.float64), np.asarray(b, dtype=np.float64))


def magnitude(v: np.ndarray) -> float:
    return float(np.linalg.norm(v))


def normalize(v: np.ndarray) -> np.ndarray:
    """
    Unit vector in the direction of ``v``.

    Parameters
    ----------
    v : np.ndarray, shape (3,)
        Input vector.

    Returns
    -------
    np.ndarray, shape (3,)
        ``v / |v|``, or the zero vector when ``|v| <= 1e-6``.
    """
    v = np.asarray(v, dtype=np.float64)
    norm = np.linalg.norm(v)
    if norm <= NORMALIZE_EPS:
        return np.zeros(3)
    return v / norm


def clamp(value: float, lower: float, upper: float) -> float:
    """Clamp a scalar to ``[lower, upper]``."""
    return max(lower, min(upper, value))


def clamp_magnitude(v: np.ndarray, max_norm: float) -> np.ndarray:
    """Rescale ``v`` so that its magnitude does not exceed ``max_norm``."""
    v = np.asarray(v, dtype=np.float64)
    norm = np.linalg.norm(v)
    if norm > max_norm:
        return v * (max_norm / norm)
    return v.copy()
