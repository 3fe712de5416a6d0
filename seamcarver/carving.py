"""
High-level carving functions that drive the engine over many seams.
"""

import logging

import torch
from typing import Optional, Sequence, Tuple

from .carver import SeamCarver
from .errors import DegenerateDimension
from .grid import PixelGrid

logger = logging.getLogger(__name__)


def carve_image(grid: PixelGrid, n_seams: int,
                direction: str = 'vertical') -> PixelGrid:
    """
    Traditional seam carving in one direction.

    Energy is recomputed after every removal.

    Args:
        grid: Pixel grid
        n_seams: Number of seams to remove
        direction: 'vertical' (narrower) or 'horizontal' (shorter)

    Returns:
        Carved grid
    """
    if direction not in ('vertical', 'horizontal'):
        raise ValueError(f"Invalid direction: {direction}")

    carver = SeamCarver(grid)

    for i in range(n_seams):
        if direction == 'vertical':
            carver.remove_vertical_seam(carver.find_vertical_seam())
        else:
            carver.remove_horizontal_seam(carver.find_horizontal_seam())

        if (i + 1) % 20 == 0:
            logger.info("Removed %d/%d %s seams, size: %dx%d",
                        i + 1, n_seams, direction, carver.width, carver.height)

    return carver.grid


def resize(grid: PixelGrid, width: Optional[int] = None,
           height: Optional[int] = None) -> PixelGrid:
    """
    Shrink a grid to a target size.

    Vertical seams are removed first, then horizontal seams.

    Args:
        grid: Pixel grid
        width: Target width (defaults to the current width)
        height: Target height (defaults to the current height)

    Returns:
        Grid of size width x height

    Raises:
        DegenerateDimension: a target is below 1 or above the current size
    """
    width = grid.width if width is None else width
    height = grid.height if height is None else height

    for name, target, current in (('width', width, grid.width),
                                  ('height', height, grid.height)):
        if target < 1:
            raise DegenerateDimension(f"Target {name} must be at least 1, got {target}")
        if target > current:
            raise DegenerateDimension(
                f"Target {name} {target} exceeds current {name} {current}; "
                f"seam insertion is not supported")

    carved = carve_image(grid, grid.width - width, direction='vertical')
    carved = carve_image(carved, grid.height - height, direction='horizontal')
    return carved


def overlay_seam(grid: PixelGrid, seam: Sequence[int], direction: str = 'vertical',
                 color: Tuple[int, int, int] = (255, 0, 0)) -> PixelGrid:
    """Visualize a seam on a copy of the grid."""
    image = grid.to_image().clone()
    paint = torch.tensor(color, dtype=torch.uint8, device=image.device)

    if direction == 'vertical':
        for y, x in enumerate(seam):
            image[y, int(x)] = paint
    elif direction == 'horizontal':
        for x, y in enumerate(seam):
            image[int(y), x] = paint
    else:
        raise ValueError(f"Invalid direction: {direction}")

    return PixelGrid(image.reshape(-1, 3), grid.width, grid.height)
