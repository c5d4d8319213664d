"""
Verification Test Suite for rigidbody.

These tests compare integration results against analytical solutions.

Test Categories:
- Kinematic: constant velocity, constant acceleration, time reversal
- Rotational: steady spin, constant angular drive, identities
"""

import numpy as np
import pytest

from rigidbody.dynamics.body import RigidBody


# -----------------------------------------------------------------------------
# Helper Functions
# -----------------------------------------------------------------------------

def _integrate(body: RigidBody, duration: float, dt: float) -> RigidBody:
    """Step body in place for duration and return it."""
    n_steps = int(round(duration / dt))
    for _ in range(n_steps):
        body.update(dt)
    return body


# -----------------------------------------------------------------------------
# Common Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture
def integrate():
    """Fixed-step integration helper."""
    return _integrate


@pytest.fixture
def rng():
    """Seeded generator for randomized property checks."""
    return np.random.default_rng(1234)
