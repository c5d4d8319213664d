"""
CSV logging for body state with buffered writes.

Buffers data in memory and writes in batches to minimize I/O overhead.
Implements context manager protocol for safe resource handling.
"""
from __future__ import annotations

import csv
from pathlib import Path
from typing import Any, TextIO

from rigidbody.dynamics.body import ATTITUDE_FIELDS, VECTOR_FIELDS, RigidBody

VALID_FIELDS = set(VECTOR_FIELDS) | set(ATTITUDE_FIELDS)

# Column suffixes per field kind
FIELD_COMPONENTS = {
    **{f: ["x", "y", "z"] for f in VECTOR_FIELDS},
    **{f: ["mag", "x", "y", "z"] for f in ATTITUDE_FIELDS},
}


class CSVLogger:
    """
    Buffered CSV logger for body state.

    Parameters
    ----------
    filepath : str | Path
        Output CSV file path
    buffer_size : int
        Number of rows to buffer before writing. Higher = fewer writes but more memory.
    fields : list[str] | None
        State fields to log per body. Default: all of
        ["pos", "vel", "acc", "ori", "tor", "wre"].
        Vector fields produce ``_x, _y, _z`` columns; attitude fields
        produce ``_mag, _x, _y, _z``.

    Notes
    -----
    Anything with a float ``t`` and a ``bodies`` sequence can be logged,
    normally a :class:`~rigidbody.core.simulation.World`.

    Context manager (recommended):
    >>> with CSVLogger("output.csv") as logger:
    ...     for _ in range(num_steps):
    ...         world.step(dt)
    ...         logger.log(world)

    Manual management:
    >>> logger = CSVLogger("output.csv", fields=["pos", "ori"])
    >>> logger.log(world)
    >>> logger.close()  # Important!
    """

    def __init__(
        self,
        filepath: str | Path,
        buffer_size: int = 1000,
        fields: list[str] | None = None
    ) -> None:
        self.filepath = Path(filepath)
        self.buffer_size = buffer_size
        self.fields = fields if fields is not None else [*VECTOR_FIELDS, *ATTITUDE_FIELDS]

        invalid = set(self.fields) - VALID_FIELDS
        if invalid:
            raise ValueError(
                f"Invalid fields: {invalid}. Valid options: {VALID_FIELDS}"
            )

        self._buffer: list[list[str]] = []
        self._file: TextIO | None = None
        self._writer: Any = None  # csv.writer is a function, not a type
        self._header_written = False

        self.filepath.parent.mkdir(parents=True, exist_ok=True)

    def __enter__(self) -> CSVLogger:
        """Open file for writing."""
        self._file = open(self.filepath, "w", newline="", encoding="utf-8")
        self._writer = csv.writer(self._file)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Close file, flushing any remaining data."""
        self.close()

    @staticmethod
    def _values(b: RigidBody, field: str) -> list:
        val = getattr(b, field)
        if field in ATTITUDE_FIELDS:
            magnitude, axis = val
            return [magnitude, *axis]
        return list(val)

    def _write_header(self, world: Any) -> None:
        """Generate and write CSV header row."""
        hdr = ["t"]
        for b in world.bodies:
            for field in self.fields:
                for component in FIELD_COMPONENTS[field]:
                    hdr.append(f"{b.name}.{field}_{component}")

        self._writer.writerow(hdr)
        self._file.flush()  # Ensure header written immediately
        self._header_written = True

    def log(self, world: Any) -> None:
        """
        Log current state to buffer.

        Parameters
        ----------
        world : World
            Object with ``t`` and ``bodies``

        Notes
        -----
        Automatically opens file on first call if not using context manager.
        Writes to disk when buffer is full.
        """
        if self._file is None:
            self.__enter__()

        if not self._header_written:
            self._write_header(world)

        row = [f"{world.t:.10f}"]
        for b in world.bodies:
            for field in self.fields:
                row.extend(f"{float(v):.10e}" for v in self._values(b, field))

        self._buffer.append(row)

        if len(self._buffer) >= self.buffer_size:
            self.flush()

    def flush(self) -> None:
        """Write buffered data to disk and clear buffer."""
        if self._writer and self._buffer:
            self._writer.writerows(self._buffer)
            if self._file:
                self._file.flush()
            self._buffer.clear()

    def close(self) -> None:
        """Flush remaining data and close file."""
        self.flush()
        if self._file:
            self._file.close()
            self._file = None
            self._writer = None
