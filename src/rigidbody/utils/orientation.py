"""
Conversions between orientation attitudes and standard rotation forms.

An orientation attitude ``(angle, axis)`` is read as a rotation by
``angle`` radians about the direction of ``axis``. The helpers here turn
it into scipy rotations, quaternions in scalar-last ``[x, y, z, w]``
format and rotation matrices, and build attitudes back from those.

Examples
--------
>>> from rigidbody.utils.orientation import (
...     orientation_from_axis_angle,
...     attitude_to_quaternion,
... )

# 90 degrees about Z
>>> ori = orientation_from_axis_angle([0, 0, 1], 90)
>>> q = attitude_to_quaternion(ori)   # [0, 0, 0.7071, 0.7071]
"""
from __future__ import annotations

import warnings

import numpy as np
from numpy.typing import NDArray
from scipy.spatial.transform import Rotation as R

from rigidbody.dynamics.attitude import Attitude, make_attitude

AXIS_EPSILON = 1e-12

# Axis reported for the zero rotation
DEFAULT_AXIS: NDArray[np.float64] = np.array([0.0, 0.0, 1.0])


def attitude_to_rotation(ori: Attitude) -> R:
    """
    Convert an orientation attitude to a scipy Rotation.

    The axis is normalized for the conversion only; the attitude itself is
    untouched. A zero-length axis has no direction, so it warns and maps
    to the identity rotation.
    """
    angle, axis = ori
    axis = np.asarray(axis, dtype=np.float64)
    n = np.linalg.norm(axis)
    if n < AXIS_EPSILON:
        warnings.warn(
            "Zero-length orientation axis. Returning identity rotation.",
            RuntimeWarning,
            stacklevel=2
        )
        return R.identity()
    return R.from_rotvec(axis / n * float(angle))


def attitude_to_quaternion(ori: Attitude) -> NDArray[np.float64]:
    """Quaternion [x, y, z, w] for an orientation attitude."""
    return attitude_to_rotation(ori).as_quat()


def attitude_to_matrix(ori: Attitude) -> NDArray[np.float64]:
    """
    Rotation matrix for an orientation attitude.

    Returns
    -------
    NDArray[np.float64]
        3x3 matrix R such that v_world = R @ v_body
    """
    return attitude_to_rotation(ori).as_matrix()


def orientation_from_axis_angle(
    axis: tuple[float, float, float] | list[float] | NDArray,
    angle: float,
    degrees: bool = True
) -> Attitude:
    """
    Create orientation attitude from axis-angle.

    Parameters
    ----------
    axis : array-like
        Rotation axis [x, y, z]. Will be normalized.
    angle : float
        Rotation angle [degrees or radians]
    degrees : bool
        If True (default), angle is in degrees.

    Returns
    -------
    Attitude
        (angle [rad], unit axis)

    Raises
    ------
    ValueError
        If axis has zero length
    """
    axis = np.asarray(axis, dtype=np.float64)
    n = np.linalg.norm(axis)
    if n < AXIS_EPSILON:
        raise ValueError(f"Rotation axis must be non-zero, got {axis}")

    if degrees:
        angle = np.deg2rad(angle)

    return make_attitude(angle, axis / n)


def orientation_from_quaternion(q: NDArray[np.float64]) -> Attitude:
    """
    Create orientation attitude from quaternion [x, y, z, w].

    The identity quaternion gives angle 0 about +Z.
    """
    rotvec = R.from_quat(q).as_rotvec()
    angle = np.linalg.norm(rotvec)
    if angle < AXIS_EPSILON:
        return make_attitude(0.0, DEFAULT_AXIS)
    return make_attitude(angle, rotvec / angle)


def describe_attitude(att: Attitude, degrees: bool = True) -> str:
    """
    Get human-readable description of an attitude.

    Examples
    --------
    >>> describe_attitude(orientation_from_axis_angle([0, 0, 1], 90))
    'Angle: 90.0°, Axis: [0.000, 0.000, 1.000]'
    """
    magnitude, axis = att
    magnitude = float(magnitude)
    unit = "°" if degrees else " rad"
    if degrees:
        magnitude = np.rad2deg(magnitude)
    axis_txt = ", ".join(f"{float(c):.3f}" for c in axis)
    return f"Angle: {magnitude:.1f}{unit}, Axis: [{axis_txt}]"
