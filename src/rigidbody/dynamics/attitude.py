"""
Angular quantities as (magnitude, axis) pairs.

The same shape is used at three derivative orders:

- Orientation: magnitude is the accumulated angle [rad], axis the rotation axis.
- Torque: magnitude is the angular rate [rad/s], axis the instantaneous axis.
- Wrench: magnitude is the rate of the rate [rad/s²], axis its axis.

Axes are not required to be unit length and are never normalized here.
"""
from __future__ import annotations

from typing import NamedTuple

import numpy as np
from numpy.typing import DTypeLike, NDArray


class Attitude(NamedTuple):
    """Scalar magnitude paired with a 3-vector axis."""

    magnitude: float
    axis: NDArray


def make_attitude(
    magnitude: float = 0.0,
    axis=(0.0, 0.0, 0.0),
    dtype: DTypeLike = np.float64,
) -> Attitude:
    """
    Build an Attitude with values coerced to ``dtype``.

    The axis is always copied, so the result never aliases the input.

    Raises
    ------
    ValueError
        If ``axis`` does not have exactly 3 elements.
    """
    vec = np.array(axis, dtype=dtype).reshape(-1)
    if vec.shape != (3,):
        raise ValueError(f"Attitude axis must have 3 elements, got shape {np.shape(axis)}")
    return Attitude(np.dtype(dtype).type(magnitude), vec)


def angular(a: Attitude, b: Attitude, t: float) -> Attitude:
    """
    Advance attitude ``a`` by rate ``b`` over ``t``.

    Analogue of ``s' = s + v * t`` for angular quantities. The magnitude
    picks up the rate weighted by how aligned the two axes are, and the
    axis of ``a`` is turned about the axis of ``b`` by ``b.magnitude * t``
    using Rodrigues' rotation formula::

        v' = v cos(θ) + (k × v) sin(θ) + k (k · v)(1 - cos(θ))

    Parameters
    ----------
    a : Attitude
        State, one derivative order below ``b``.
    b : Attitude
        Rate. Its axis is used as the rotation axis as given.
    t : float
        Time increment [s]. Any sign.

    Returns
    -------
    Attitude
        New attitude. Inputs are not modified.
    """
    a_mag, v = a
    b_mag, k = b

    theta = b_mag * t
    cos = np.cos(theta)
    sin = np.sin(theta)

    magnitude = a_mag + np.dot(v, k) * b_mag * t
    axis = v * cos + np.cross(k, v) * sin + k * (np.dot(k, v) * (1 - cos))
    return Attitude(magnitude, axis)
