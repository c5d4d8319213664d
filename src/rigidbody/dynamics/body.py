"""
Rigid body kinematic state with symmetric (kick-drift-kick) integration.

Linear state is integrated with ordinary vector arithmetic. Angular state
is held as (magnitude, axis) attitudes and integrated with the same
half-step scheme using :func:`~rigidbody.dynamics.attitude.angular` in
place of vector addition.

Units are whatever the caller uses consistently; SI is assumed in docs:
- Position: meters [m]
- Velocity: meters per second [m/s]
- Acceleration: meters per second squared [m/s²]
- Angles: radians [rad], rates [rad/s], rates of rates [rad/s²]
"""
from __future__ import annotations

import numpy as np
from numpy.typing import DTypeLike, NDArray

from rigidbody.dynamics.attitude import Attitude, angular, make_attitude
from rigidbody.utils.validation import validate_attitude, validate_vector3

VECTOR_FIELDS = ("pos", "vel", "acc")
ATTITUDE_FIELDS = ("ori", "tor", "wre")


class RigidBody:
    """
    Kinematic state of one rigid body at one instant.

    State Variables
    ---------------
    - pos : NDArray
        Linear position (3,)
    - vel : NDArray
        Linear velocity (3,)
    - acc : NDArray
        Linear acceleration (3,). Supplied by the caller each tick.
    - ori : Attitude
        Orientation (angle, axis)
    - tor : Attitude
        Torque, the angular velocity analogue (rate, axis)
    - wre : Attitude
        Wrench, the angular acceleration analogue (rate of rate, axis).
        Supplied by the caller each tick.

    Notes
    -----
    All inputs are copied on construction, so a body never shares arrays
    with the caller or with other bodies. ``dtype`` selects the numeric
    type of every component (float32, float64, longdouble, ...).
    """
    __slots__ = (
        "name", "dtype",
        "pos", "vel", "acc",
        "ori", "tor", "wre",
    )

    def __init__(
        self,
        name: str = "body",
        pos: NDArray | None = None,
        vel: NDArray | None = None,
        acc: NDArray | None = None,
        ori: Attitude | tuple | None = None,
        tor: Attitude | tuple | None = None,
        wre: Attitude | tuple | None = None,
        dtype: DTypeLike = np.float64,
    ) -> None:
        """
        Initialize a rigid body.

        Parameters
        ----------
        name : str
            Identifier used in logs and configs
        pos, vel, acc : array-like | None
            Linear state (3,). Default to zero.
        ori, tor, wre : (magnitude, axis) | None
            Angular state. Default to (0, [0, 0, 0]).
        dtype : numpy dtype
            Numeric type for all state.

        Raises
        ------
        ValueError
            If any vector is not 3 elements or any attitude is not a
            (scalar, 3-vector) pair.
        """
        self.name = name
        self.dtype = np.dtype(dtype)

        self.pos = self._vector(pos, "pos")
        self.vel = self._vector(vel, "vel")
        self.acc = self._vector(acc, "acc")

        self.ori = self._attitude(ori, "ori")
        self.tor = self._attitude(tor, "tor")
        self.wre = self._attitude(wre, "wre")

    def _vector(self, v, name: str) -> NDArray:
        if v is None:
            return np.zeros(3, dtype=self.dtype)
        out = np.array(v, dtype=self.dtype)
        validate_vector3(out, name)
        return out

    def _attitude(self, att, name: str) -> Attitude:
        if att is None:
            return make_attitude(dtype=self.dtype)
        validate_attitude(att, name)
        magnitude, axis = att
        return make_attitude(magnitude, axis, dtype=self.dtype)

    def update_linear(self, dt: float) -> None:
        """
        Advance position and velocity by ``dt`` (kick-drift-kick).

        Notes
        -----
        1. vel += acc * dt/2
        2. pos += vel * dt
        3. vel += acc * dt/2

        Exact for constant acceleration and self-inverse under ``-dt``.
        ``acc`` is read only; it may be reassigned to any 3-sequence
        between steps and is read in the body's dtype.
        """
        dt = self.dtype.type(dt)
        half_dt = self.dtype.type(0.5) * dt
        acc = np.asarray(self.acc, dtype=self.dtype)
        self.vel += acc * half_dt
        self.pos += self.vel * dt
        self.vel += acc * half_dt

    def update_angular(self, dt: float) -> None:
        """
        Advance orientation and torque by ``dt`` (kick-drift-kick).

        Same scheme as :meth:`update_linear`, composing attitudes with
        :func:`angular`. ``wre`` is read only. Attitudes reassigned as
        plain (magnitude, axis) pairs are read in the body's dtype.
        """
        dt = self.dtype.type(dt)
        half_dt = self.dtype.type(0.5) * dt
        wre = make_attitude(*self.wre, dtype=self.dtype)
        tor = make_attitude(*self.tor, dtype=self.dtype)
        ori = make_attitude(*self.ori, dtype=self.dtype)

        tor = angular(tor, wre, half_dt)
        self.ori = angular(ori, tor, dt)
        self.tor = angular(tor, wre, half_dt)

    def update(self, dt: float) -> None:
        """Advance linear then angular state by ``dt``."""
        self.update_linear(dt)
        self.update_angular(dt)

    def copy(self) -> RigidBody:
        """Return an independent copy of this body."""
        return RigidBody(
            name=self.name,
            pos=self.pos,
            vel=self.vel,
            acc=self.acc,
            ori=self.ori,
            tor=self.tor,
            wre=self.wre,
            dtype=self.dtype,
        )

    def __copy__(self) -> RigidBody:
        return self.copy()

    def __deepcopy__(self, memo) -> RigidBody:
        return self.copy()

    def as_dict(self) -> dict[str, float]:
        """
        Flatten current state into a dict.

        Keys are ``<field>_<component>``, e.g. ``pos_x`` or ``ori_mag``.
        """
        out: dict[str, float] = {}
        for field in VECTOR_FIELDS:
            for comp, val in zip("xyz", getattr(self, field)):
                out[f"{field}_{comp}"] = float(val)
        for field in ATTITUDE_FIELDS:
            magnitude, axis = getattr(self, field)
            out[f"{field}_mag"] = float(magnitude)
            for comp, val in zip("xyz", axis):
                out[f"{field}_{comp}"] = float(val)
        return out

    def __repr__(self) -> str:
        return (
            f"RigidBody(name={self.name!r}, pos={self.pos.tolist()}, "
            f"vel={self.vel.tolist()}, ori=({float(self.ori.magnitude)}, "
            f"{self.ori.axis.tolist()}))"
        )
