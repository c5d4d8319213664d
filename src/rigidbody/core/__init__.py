from .simulation import World
