"""
rigidbody - Minimal rigid body kinematic integrator.

Core Components
---------------
RigidBody : Linear and angular state with kick-drift-kick updates
Attitude : (magnitude, axis) pair for orientation, torque and wrench
angular : Advance an attitude by a rate over time
World : Stepping loop over independent bodies
CSVLogger : Buffered state logging

Examples
--------
>>> from rigidbody import RigidBody
>>> body = RigidBody(vel=[1, 0, 0], acc=[0, -9.8, 0], ori=(0.0, [0, 0, 1]))
>>> body.update(0.1)
"""

__version__ = "0.1.0"

from rigidbody.core.simulation import World
from rigidbody.dynamics.attitude import Attitude, angular, make_attitude
from rigidbody.dynamics.body import RigidBody
from rigidbody.logger import CSVLogger

__all__ = [
    # Version
    "__version__",
    # Core
    "RigidBody",
    "Attitude",
    "make_attitude",
    "angular",
    "World",
    # Logging
    "CSVLogger",
]
