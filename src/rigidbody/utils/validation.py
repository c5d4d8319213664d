"""
Validation utilities for body state and simulation parameters.

Integration itself never validates; these checks guard construction,
configuration loading and the run loop.
"""
from __future__ import annotations
from numbers import Real
import numpy as np
from numpy.typing import NDArray
import warnings


def validate_real(value, name: str) -> None:
    """
    Validate that a value is a real number.

    Booleans are rejected even though Python treats them as ints, since a
    ``true`` in a config file is never a meaningful step or duration.

    Raises
    ------
    ValueError
        If value is not a real scalar
    """
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, Real):
        raise ValueError(f"{name} must be a real number, got {value!r}")


def validate_positive(value: float, name: str, strict: bool = True) -> None:
    """
    Check that ``value`` is strictly greater than zero.

    Parameters
    ----------
    value : float
        Scalar to check, e.g. a config ``dt``
    name : str
        Label used in the message
    strict : bool
        Raise on failure when True, otherwise emit a RuntimeWarning and
        let the caller carry on.

    Raises
    ------
    ValueError
        If strict and value <= 0
    """
    if value > 0:
        return
    msg = f"'{name}' must be > 0 (got {value})"
    if not strict:
        warnings.warn(msg, RuntimeWarning, stacklevel=2)
        return
    raise ValueError(msg)


def validate_non_negative(value: float, name: str) -> None:
    """Reject values below zero; zero itself is allowed (e.g. an empty run)."""
    if value < 0:
        raise ValueError(f"'{name}' must be >= 0 (got {value})")


def validate_vector3(v: NDArray, name: str) -> None:
    """
    Validate that array is a 3-vector.

    Raises
    ------
    ValueError
        If shape is not (3,)
    """
    if np.shape(v) != (3,):
        raise ValueError(f"{name} must have shape (3,), got {np.shape(v)}")


def validate_attitude(att, name: str) -> None:
    """
    Validate that value is a (magnitude, axis) pair.

    Parameters
    ----------
    att : Attitude | tuple
        Pair of scalar magnitude and 3-element axis
    name : str
        Parameter name for error messages

    Raises
    ------
    ValueError
        If the pair shape is wrong
    """
    try:
        magnitude, axis = att
    except (TypeError, ValueError) as e:
        raise ValueError(f"{name} must be a (magnitude, axis) pair, got {att!r}") from e

    if np.ndim(magnitude) != 0:
        raise ValueError(f"{name} magnitude must be a scalar, got shape {np.shape(magnitude)}")
    validate_vector3(np.asarray(axis), f"{name} axis")


def validate_timestep(dt: float, max_dt: float = 1.0) -> None:
    """
    Check the fixed step used by a run loop.

    Individual ``update`` calls accept any step, including negative ones;
    only :meth:`World.run` needs a forward step to reach its end time.
    Kick-drift-kick stays exact for constant accelerations at any step, but
    accelerations supplied per tick are sampled once per step, so very
    coarse steps blur whatever the caller drives the body with.

    Parameters
    ----------
    dt : float
        Step [s]
    max_dt : float
        Step above which a coarse-sampling warning is emitted [s]

    Raises
    ------
    ValueError
        If dt <= 0
    """
    validate_positive(dt, "dt")
    if dt > max_dt:
        warnings.warn(
            f"dt={dt}s exceeds {max_dt}s; accelerations set per step "
            "will be sampled coarsely.",
            RuntimeWarning,
            stacklevel=2
        )
