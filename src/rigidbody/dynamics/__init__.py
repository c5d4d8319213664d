from .attitude import Attitude, angular, make_attitude
from .body import RigidBody
