"""Utility functions for rigidbody simulations."""

from .validation import (
    validate_attitude,
    validate_non_negative,
    validate_positive,
    validate_real,
    validate_timestep,
    validate_vector3,
)

__all__ = [
    "validate_positive",
    "validate_real",
    "validate_non_negative",
    "validate_vector3",
    "validate_attitude",
    "validate_timestep",
]
