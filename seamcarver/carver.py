"""
Stateful seam carving engine.

SeamCarver holds the current grid and replaces it wholesale after each
seam removal. Width and height always come from the current grid.
"""

import logging

import torch
from typing import List, Sequence

from .energy import dual_gradient_energy, pixel_energy
from .grid import PixelGrid
from .seam import horizontal_seam, remove_seam, vertical_seam

logger = logging.getLogger(__name__)


class SeamCarver:
    """
    Find and remove low-energy seams from a picture, one at a time.

    Typical use:

        carver = SeamCarver(grid)
        carver.remove_vertical_seam(carver.find_vertical_seam())
        smaller = carver.grid
    """

    def __init__(self, grid: PixelGrid):
        self._grid = grid

    @property
    def grid(self) -> PixelGrid:
        return self._grid

    @property
    def width(self) -> int:
        return self._grid.width

    @property
    def height(self) -> int:
        return self._grid.height

    def energy(self, x: int, y: int) -> float:
        """
        Energy of the pixel at (x, y) in the current grid.

        Raises:
            CoordinateOutOfRange: if (x, y) is outside the grid
        """
        return pixel_energy(self._grid, x, y)

    def calculate_energies(self) -> torch.Tensor:
        """Energy map (H, W) of the current grid, computed fresh."""
        energy = dual_gradient_energy(self._grid)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Energy matrix (%dx%d):\n%s", self.width, self.height, energy)
        return energy

    def find_horizontal_seam(self) -> List[int]:
        """Row index per column of the cheapest horizontal seam."""
        return horizontal_seam(self._grid, self.calculate_energies())

    def find_vertical_seam(self) -> List[int]:
        """Column index per row of the cheapest vertical seam."""
        return vertical_seam(self._grid)

    def remove_horizontal_seam(self, seam: Sequence[int]):
        """Remove a horizontal seam; height shrinks by one."""
        self._replace(remove_seam(self._grid, seam, direction='horizontal'))

    def remove_vertical_seam(self, seam: Sequence[int]):
        """Remove a vertical seam; width shrinks by one."""
        self._replace(remove_seam(self._grid, seam, direction='vertical'))

    def _replace(self, grid: PixelGrid):
        logger.debug("Grid %dx%d -> %dx%d", self.width, self.height, grid.width, grid.height)
        self._grid = grid
