"""
World stepping loop for independent rigid bodies.

Holds bodies and simulation time, lets the caller supply accelerations
before each step, and optionally logs state to CSV with automatic
output organization.
"""
from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from pathlib import Path

from rigidbody.dynamics.body import RigidBody
from rigidbody.logger import CSVLogger
from rigidbody.utils.validation import validate_non_negative, validate_timestep

# Default output directory
DEFAULT_OUTPUT_DIR = Path("output")


class World:
    """
    Container and stepping loop for a set of rigid bodies.

    Bodies are fully independent: each step calls ``body.update(dt)`` on
    every body in insertion order. Accelerations (``acc``) and wrenches
    (``wre``) are the caller's to set, usually from a pre-step callback.

    Parameters
    ----------
    simulation_name : str | None
        Name for this simulation. Used to organize output files. If None,
        logging is disabled until enable_logging() is called.
    output_dir : Path | str | None
        Base directory for outputs. Defaults to "./output".
    auto_timestamp : bool
        If True, append timestamp to simulation folder name to prevent overwrites.

    Attributes
    ----------
    bodies : list[RigidBody]
        All bodies in the simulation
    t : float
        Current simulation time [s]
    logger : CSVLogger | None
        Data logger instance, or None if logging disabled
    output_path : Path | None
        Path to simulation output directory

    Examples
    --------
    >>> world = World()
    >>> world.add_body(RigidBody("ball", vel=[1, 0, 0]))
    >>> def gravity(w, dt):
    ...     w.bodies[0].acc[:] = [0.0, -9.8, 0.0]
    >>> world.set_pre_step_callback(gravity)
    >>> world.run(duration=1.0, dt=0.01)
    """

    def __init__(
        self,
        simulation_name: str | None = None,
        output_dir: Path | str | None = None,
        auto_timestamp: bool = True,
    ) -> None:
        self.bodies: list[RigidBody] = []
        self.t = 0.0
        self.pre_step_callback: Callable[[World, float], None] | None = None
        self.termination_callback: Callable[[World], bool] | None = None

        self._simulation_name = simulation_name
        self._output_dir = Path(output_dir) if output_dir else DEFAULT_OUTPUT_DIR
        self._auto_timestamp = auto_timestamp
        self.output_path: Path | None = None
        self.logger: CSVLogger | None = None

        if simulation_name is not None:
            self.enable_logging(simulation_name)

    def enable_logging(self, name: str | None = None) -> Path:
        """
        Enable CSV logging with automatic output organization.

        Creates ``output_dir/<name>[_timestamp]/logs/simulation.csv``.

        Parameters
        ----------
        name : str | None
            Simulation name. If None, uses name from __init__.

        Returns
        -------
        Path
            Path to the created output directory

        Raises
        ------
        ValueError
            If no simulation name available
        """
        if name is not None:
            self._simulation_name = name

        if self._simulation_name is None:
            raise ValueError(
                "Simulation name required for logging. "
                "Either pass name to __init__ or to enable_logging()."
            )

        if self._auto_timestamp:
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            folder_name = f"{self._simulation_name}_{timestamp}"
        else:
            folder_name = self._simulation_name

        self.disable_logging()
        self.output_path = self._output_dir / folder_name
        logs_dir = self.output_path / "logs"
        logs_dir.mkdir(parents=True, exist_ok=True)

        self.logger = CSVLogger(logs_dir / "simulation.csv")

        print(f"[World] Logging enabled: {self.output_path}")
        print(f"        Logs: {logs_dir}")

        return self.output_path

    def disable_logging(self) -> None:
        """Disable logging and close any open log file."""
        if self.logger is not None:
            self.logger.close()
            self.logger = None
            print("[World] Logging disabled")

    def add_body(self, body: RigidBody) -> int:
        """
        Add a rigid body to the simulation.

        Returns
        -------
        int
            Index of the added body
        """
        self.bodies.append(body)
        return len(self.bodies) - 1

    def set_pre_step_callback(self, fn: Callable[[World, float], None]) -> None:
        """
        Set hook called as ``fn(world, dt)`` before every step.

        This is where ``acc`` and ``wre`` are supplied for the coming step.
        """
        self.pre_step_callback = fn

    def set_termination_callback(self, fn: Callable[[World], bool]) -> None:
        """
        Set custom termination condition.

        Parameters
        ----------
        fn : Callable[[World], bool]
            Returns True to stop. Called after each step.

        Examples
        --------
        >>> world.set_termination_callback(lambda w: w.bodies[0].pos[1] < 0.0)
        """
        self.termination_callback = fn

    def step(self, dt: float) -> bool:
        """
        Advance every body by one time step.

        Parameters
        ----------
        dt : float
            Time step [s]. Any sign; not validated.

        Returns
        -------
        bool
            True if termination condition met, False otherwise
        """
        if self.pre_step_callback is not None:
            self.pre_step_callback(self, dt)

        for b in self.bodies:
            b.update(dt)
        self.t += dt

        if self.logger is not None:
            self.logger.log(self)

        if self.termination_callback:
            return bool(self.termination_callback(self))
        return False

    def run(self, duration: float, dt: float, log_interval: float = 1.0) -> None:
        """
        Run fixed-step simulation for specified duration.

        Parameters
        ----------
        duration : float
            Simulation duration [s]
        dt : float
            Fixed time step [s]
        log_interval : float
            Interval [s] for printing progress to terminal. Set to <= 0 to disable.

        Raises
        ------
        ValueError
            If duration is negative or dt is not positive

        Notes
        -----
        - Logs initial state before integration
        - Stops early if termination condition met
        - Flushes logger when complete
        """
        validate_non_negative(duration, "duration")
        validate_timestep(dt)

        t_end = self.t + float(duration)
        last_log_time = self.t

        if self.logger is not None:
            self.logger.log(self)

        if log_interval > 0:
            print(f"[World] Starting simulation: {duration}s duration, dt={dt}s, "
                  f"{len(self.bodies)} bodies")

        try:
            # Half-step slack keeps float drift from adding an extra step
            while self.t < t_end - 0.5 * dt:
                if self.step(dt):
                    if log_interval > 0:
                        print(f"[World] Simulation terminated at t={self.t:.6f}s")
                    break

                if log_interval > 0 and (self.t - last_log_time) >= log_interval:
                    print(f"[World] t={self.t:6.2f}s")
                    last_log_time = self.t
        finally:
            if self.logger:
                self.logger.flush()

    def snapshot(self) -> dict[str, float]:
        """
        Flatten time and every body's state into one dict.

        Keys are ``t`` and ``<body>.<field>_<component>``, matching the
        CSV logger's columns. Useful for collecting in-memory history.
        """
        out = {"t": float(self.t)}
        for b in self.bodies:
            for key, val in b.as_dict().items():
                out[f"{b.name}.{key}"] = val
        return out
