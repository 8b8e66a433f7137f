"""
Utility functions for aerofdm.

Modules
-------
vectors : Vector3 helpers on numpy arrays
quaternion : Quaternion operations (scalar-first convention)
rotations : Rotation utilities (DCM, Euler angles, frame transforms)
"""

from aerofdm.utils.quaternion import (
    quat_conjugate,
    # Kinematics
    quat_derivative,
    quat_from_axis_angle,
    quat_identity,
    quat_integrate,
    # Core operations
    quat_multiply,
    quat_norm,
    quat_normalize,
    # Conversions
    quat_to_dcm,
)
from aerofdm.utils.rotations import (
    angle_difference,
    # Frame transforms
    body_to_world,
    dcm_to_yaw_pitch_roll,
    dcm_transpose,
    # Euler angle conversions
    euler_to_dcm,
    euler_to_quat,
    heading_deg,
    # Elementary rotations
    rotx,
    roty,
    rotz,
    world_to_body,
    # Angle utilities
    wrap_angle,
    yaw_pitch_roll,
)
from aerofdm.utils.vectors import (
    add,
    as_vec3,
    clamp,
    clamp_magnitude,
    cross,
    dot,
    magnitude,
    normalize,
    scale,
    vec3,
)

__all__ = [
    # Vectors
    'add',
    'angle_difference',
    'as_vec3',
    # Rotations - Frame transforms
    'body_to_world',
    'clamp',
    'clamp_magnitude',
    'cross',
    'dcm_to_yaw_pitch_roll',
    'dcm_transpose',
    'dot',
    # Rotations - Euler angles
    'euler_to_dcm',
    'euler_to_quat',
    'heading_deg',
    'magnitude',
    'normalize',
    # Quaternion
    'quat_conjugate',
    'quat_derivative',
    'quat_from_axis_angle',
    'quat_identity',
    'quat_integrate',
    'quat_multiply',
    'quat_norm',
    'quat_normalize',
    'quat_to_dcm',
    # Rotations - Elementary
    'rotx',
    'roty',
    'rotz',
    'scale',
    'vec3',
    'world_to_body',
    # Rotations - Angle utilities
    'wrap_angle',
    'yaw_pitch_roll',
]
