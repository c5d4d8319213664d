from __future__ import annotations
import os
import csv
import warnings
from typing import Dict, Tuple, List, Iterable
import numpy as np
import matplotlib.pyplot as plt
from matplotlib.figure import Figure
from mpl_toolkits.mplot3d import Axes3D  # noqa: F401  (registers 3D projection)


def _load_csv(filepath: str) -> Tuple[np.ndarray, Dict[str, np.ndarray], List[str]]:
    """
    Load a CSV produced by CSVLogger.

    Returns
    -------
    t : (N,) array
        Time vector.
    cols : dict[str, np.ndarray]
        Mapping column_name -> (N,) array.
    headers : list[str]
        Column headers in order (first one should be 't').
    """
    with open(filepath, "r", newline="") as f:
        reader = csv.reader(f)
        headers = next(reader)
    if headers[0] != "t":
        raise ValueError("First column must be time 't'.")
    with warnings.catch_warnings():
        # header-only files are reported below instead
        warnings.simplefilter("ignore", UserWarning)
        data = np.loadtxt(filepath, delimiter=",", skiprows=1, dtype=float, ndmin=2)
    if data.size == 0:
        raise ValueError(f"CSV has no data rows: {filepath}")
    cols: Dict[str, np.ndarray] = {}
    for j, name in enumerate(headers):
        cols[name] = data[:, j]
    return cols["t"], cols, headers


def _get_components(cols: Dict[str, np.ndarray], names: Iterable[str]) -> List[np.ndarray]:
    out = []
    for name in names:
        if name not in cols:
            raise KeyError(f"Column '{name}' not found in CSV.")
        out.append(cols[name])
    return out


def _vector(cols: Dict[str, np.ndarray], body: str, field: str) -> List[np.ndarray]:
    return _get_components(cols, [f"{body}.{field}_{c}" for c in "xyz"])


def _finish(fig: Figure, save_path: str | None, show: bool) -> Figure:
    fig.tight_layout()
    if save_path:
        os.makedirs(os.path.dirname(save_path) or ".", exist_ok=True)
        fig.savefig(save_path, dpi=180, bbox_inches="tight")
    if show:
        plt.show()
    return fig


def plot_trajectory_3d(
    csv_path: str,
    body_name: str,
    save_path: str | None = None,
    show: bool = True,
) -> Figure:
    """
    Plot 3D trajectory (x,y,z) of a given body and each coordinate vs time.

    Parameters
    ----------
    csv_path : str
        Path to logger CSV.
    body_name : str
        The 'name' used when creating the body (e.g., 'ball').
    save_path : str | None
        If given, save the figure to this path (png/svg).
    show : bool
        Whether to call plt.show().

    Returns
    -------
    fig : Figure
    """
    t, cols, _ = _load_csv(csv_path)
    px, py, pz = _vector(cols, body_name, "pos")

    fig = plt.figure(figsize=(10, 6))
    gs = fig.add_gridspec(2, 2, height_ratios=[2.0, 1.0])
    ax3d = fig.add_subplot(gs[0, :], projection="3d")
    axt = fig.add_subplot(gs[1, :])

    ax3d.plot(px, py, pz, lw=2.0, color="#1a73e8")
    ax3d.scatter(px[0], py[0], pz[0], color="#34a853", s=40, label="start")
    ax3d.scatter(px[-1], py[-1], pz[-1], color="#ea4335", s=40, label="end")
    ax3d.set_xlabel("x [m]"); ax3d.set_ylabel("y [m]"); ax3d.set_zlabel("z [m]")
    ax3d.set_title(f"3D trajectory: {body_name}")
    ax3d.legend(loc="best")

    axt.plot(t, px, label="x", color="#1a73e8")
    axt.plot(t, py, label="y", color="#34a853")
    axt.plot(t, pz, label="z", color="#fbbc05")
    axt.set_xlabel("t [s]"); axt.set_ylabel("position [m]")
    axt.grid(True, alpha=0.3)
    axt.legend(loc="best")

    return _finish(fig, save_path, show)


def plot_linear_kinematics(
    csv_path: str,
    body_name: str,
    save_path: str | None = None,
    show: bool = True,
    magnitude: bool = True,
) -> Figure:
    """
    Plot velocity and acceleration components with optional magnitudes.

    Acceleration is read from the logged ``acc`` columns, i.e. the value
    the caller supplied for each step.
    """
    t, cols, _ = _load_csv(csv_path)
    V = np.column_stack(_vector(cols, body_name, "vel"))
    A = np.column_stack(_vector(cols, body_name, "acc"))

    fig, axes = plt.subplots(2, 1, figsize=(10, 7), sharex=True)
    colors = ["#1a73e8", "#34a853", "#fbbc05"]

    for ax, data, sym, unit in ((axes[0], V, "v", "velocity [m/s]"),
                                (axes[1], A, "a", "accel [m/s²]")):
        for k, c in enumerate("xyz"):
            ax.plot(t, data[:, k], label=f"{sym}_{c}", color=colors[k])
        if magnitude:
            ax.plot(t, np.linalg.norm(data, axis=1), label=f"|{sym}|",
                    color="#ea4335", lw=2.0, alpha=0.8)
        ax.set_ylabel(unit)
        ax.grid(True, alpha=0.3)
        ax.legend(loc="best")

    axes[0].set_title(f"Linear kinematics: {body_name}")
    axes[1].set_xlabel("t [s]")
    return _finish(fig, save_path, show)


def plot_attitude(
    csv_path: str,
    body_name: str,
    save_path: str | None = None,
    show: bool = True,
) -> Figure:
    """
    Plot orientation and torque magnitudes and their axis components.

    Parameters
    ----------
    csv_path : str
    body_name : str
    save_path : str | None
    show : bool

    Returns
    -------
    fig : Figure
    """
    t, cols, _ = _load_csv(csv_path)
    ori_mag, = _get_components(cols, [f"{body_name}.ori_mag"])
    tor_mag, = _get_components(cols, [f"{body_name}.tor_mag"])
    ori_axis = _vector(cols, body_name, "ori")

    fig, axes = plt.subplots(2, 1, figsize=(10, 7), sharex=True)

    axes[0].plot(t, ori_mag, label="angle", color="#1a73e8", lw=2)
    axes[0].plot(t, tor_mag, label="rate", color="#ea4335", lw=2, alpha=0.8)
    axes[0].set_ylabel("[rad], [rad/s]")
    axes[0].grid(True, alpha=0.3)
    axes[0].legend(loc="best")
    axes[0].set_title(f"Attitude: {body_name}")

    for comp, color, series in zip("xyz", ["#1a73e8", "#34a853", "#fbbc05"], ori_axis):
        axes[1].plot(t, series, label=f"axis_{comp}", color=color)
    axes[1].set_xlabel("t [s]"); axes[1].set_ylabel("orientation axis")
    axes[1].grid(True, alpha=0.3)
    axes[1].legend(loc="best")

    return _finish(fig, save_path, show)
