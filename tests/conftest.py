import os
import sys

import numpy as np
import pytest

# Make 'src' importable without installing the package
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, os.path.join(project_root, 'src'))

from rigidbody.dynamics.body import RigidBody  # noqa: E402


@pytest.fixture
def projectile():
    """Body thrown along +x under gravity, no rotation."""
    return RigidBody(
        "projectile",
        pos=[0.0, 0.0, 0.0],
        vel=[1.0, 0.0, 0.0],
        acc=[0.0, -9.8, 0.0],
        ori=(0.0, [0.0, 0.0, 1.0]),
        tor=(0.0, [0.0, 0.0, 0.0]),
        wre=(0.0, [0.0, 0.0, 0.0]),
    )


@pytest.fixture
def spinner():
    """Body spinning about +z at 2 rad/s with no angular drive."""
    return RigidBody(
        "spinner",
        ori=(0.0, [1.0, 0.0, 0.0]),
        tor=(2.0, [0.0, 0.0, 1.0]),
    )
