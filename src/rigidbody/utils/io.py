# src/rigidbody/utils/io.py
import json
from pathlib import Path
from typing import Any, Dict, List

import pandas as pd

from rigidbody.core.simulation import World
from rigidbody.dynamics.body import ATTITUDE_FIELDS, VECTOR_FIELDS, RigidBody
from rigidbody.utils.validation import validate_positive, validate_real


def save_simulation_history(history: List[Dict[str, Any]], filepath: str) -> None:
    """
    Saves a list of state dictionaries to a CSV file.

    Args:
        history: List of dicts, e.g. [world.snapshot() for each step]
        filepath: Destination path (e.g., 'results/run1.csv')
    """
    if not history:
        raise ValueError("Simulation history is empty. Nothing to save.")

    path = Path(filepath)
    path.parent.mkdir(parents=True, exist_ok=True)

    df = pd.DataFrame(history)
    df.to_csv(path, index=False)
    print(f"Simulation results saved to {path.absolute()}")


def load_simulation_history(filepath: str) -> pd.DataFrame:
    """Load a history CSV written by save_simulation_history or CSVLogger."""
    return pd.read_csv(filepath)


def load_simulation_config(filepath: str) -> Dict[str, Any]:
    """
    Load simulation settings from a JSON file.

    Expected keys: "dt" and "duration" (positive numbers), "bodies" (list
    of body dicts, see body_from_config), optional "name".

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the JSON is malformed or required keys are invalid
    """
    path = Path(filepath)
    with open(path, "r", encoding="utf-8") as f:
        try:
            cfg = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {path}: {e}") from e

    if not isinstance(cfg, dict):
        raise ValueError(f"Config root must be an object, got {type(cfg).__name__}")

    for key in ("dt", "duration"):
        if key not in cfg:
            raise ValueError(f"Config is missing required key '{key}'")
        validate_real(cfg[key], key)
        validate_positive(cfg[key], key)

    bodies = cfg.setdefault("bodies", [])
    if not isinstance(bodies, list):
        raise ValueError(f"'bodies' must be a list, got {type(bodies).__name__}")

    return cfg


def body_from_config(cfg: Dict[str, Any]) -> RigidBody:
    """
    Build a RigidBody from a dict.

    Vectors are given as [x, y, z] and attitudes as [magnitude, [x, y, z]].
    Missing fields default to zero. Unknown keys raise ValueError.
    """
    allowed = {"name", "dtype", *VECTOR_FIELDS, *ATTITUDE_FIELDS}
    unknown = set(cfg) - allowed
    if unknown:
        raise ValueError(f"Unknown body keys: {sorted(unknown)}. Valid options: {sorted(allowed)}")

    kwargs = {k: cfg[k] for k in cfg if k in allowed}
    return RigidBody(**kwargs)


def world_from_config(cfg: Dict[str, Any]) -> World:
    """Build a World holding every body listed in a loaded config."""
    world = World()
    for body_cfg in cfg.get("bodies", []):
        world.add_body(body_from_config(body_cfg))
    return world
