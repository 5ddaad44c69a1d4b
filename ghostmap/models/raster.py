"""Dense raster grid for elevation or imagery values."""

import logging

import numpy as np

from ghostmap.models.geometry import BoundingBox

logger = logging.getLogger(__name__)


class Raster:
    """Fixed-size 2-D grid of float64 values over a geographic extent.

    Cells are stored flat in row-major order: cell (x, y) lives at
    ``data[y * width + x]``. Out-of-range access never fails: reads return 0.0
    and writes are ignored.

    The raster owns its storage. Call close() exactly once when finished, or
    use the raster as a context manager:

        with Raster(256, 256, bounds) as dem:
            dem.set(10, 20, 131.5)

    Attributes:
        width: Number of columns
        height: Number of rows
        bounds: Geographic extent covered by the grid
    """

    def __init__(self, width: int, height: int, bounds: BoundingBox):
        if width < 0 or height < 0:
            msg = f"Raster dimensions must be non-negative, got {width}x{height}"
            raise ValueError(msg)

        self.width = width
        self.height = height
        self.bounds = bounds
        self._data: np.ndarray | None = np.zeros(width * height, dtype=np.float64)
        logger.debug(f"Allocated {width}x{height} raster")

    @classmethod
    def create(cls, width: int, height: int, bounds: BoundingBox) -> "Raster":
        """Allocate a zero-filled raster."""
        return cls(width, height, bounds)

    @property
    def data(self) -> np.ndarray:
        """Flat row-major backing array of length width * height.

        Raises:
            RuntimeError: If the raster has been closed
        """
        if self._data is None:
            msg = "Raster storage has already been released"
            raise RuntimeError(msg)
        return self._data

    @property
    def closed(self) -> bool:
        return self._data is None

    def _in_range(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get(self, x: int, y: int) -> float:
        """Value at column x, row y, or 0.0 if (x, y) is outside the grid."""
        data = self.data
        if not self._in_range(x, y):
            return 0.0
        return float(data[y * self.width + x])

    def set(self, x: int, y: int, value: float) -> None:
        """Store value at column x, row y. No-op if (x, y) is outside the grid."""
        data = self.data
        if not self._in_range(x, y):
            return
        data[y * self.width + x] = value

    def close(self) -> None:
        """Release the backing storage. Must be called exactly once."""
        if self._data is None:
            msg = "Raster storage has already been released"
            raise RuntimeError(msg)
        self._data = None
        logger.debug(f"Released {self.width}x{self.height} raster")

    def __enter__(self) -> "Raster":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self._data is not None:
            self.close()

    def __repr__(self) -> str:
        state = "closed" if self.closed else "open"
        return f"Raster(width={self.width}, height={self.height}, bounds={self.bounds!r}, {state})"
