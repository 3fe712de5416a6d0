"""
Quarter-turn rotations.

A vertical seam in a grid is a horizontal seam in the same grid rotated by
90 degrees, so the engine only ever searches horizontally.

Clockwise:          source (x, y) -> destination (height - 1 - y, x)
Counter-clockwise:  source (x, y) -> destination (y, width - 1 - x)

The destination canvas is height x width in both cases, and the two
rotations undo each other.
"""

import torch

from .grid import PixelGrid


def rotate_clockwise(grid: PixelGrid) -> PixelGrid:
    """
    Rotate a grid 90 degrees clockwise.

    Args:
        grid: Source grid (W x H)

    Returns:
        New grid (H x W)
    """
    image = grid.to_image()  # (H, W, 3)
    # out[r, c] = image[H - 1 - c, r]
    rotated = torch.rot90(image, k=-1, dims=(0, 1)).contiguous()
    return PixelGrid(rotated.reshape(-1, 3), grid.height, grid.width)


def rotate_counter_clockwise(grid: PixelGrid) -> PixelGrid:
    """
    Rotate a grid 90 degrees counter-clockwise (inverse of rotate_clockwise).

    Args:
        grid: Source grid (W x H)

    Returns:
        New grid (H x W)
    """
    image = grid.to_image()
    # out[r, c] = image[c, W - 1 - r]
    rotated = torch.rot90(image, k=1, dims=(0, 1)).contiguous()
    return PixelGrid(rotated.reshape(-1, 3), grid.height, grid.width)
