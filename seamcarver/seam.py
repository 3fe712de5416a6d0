"""
Seam computation and removal.

Seams are found with dynamic programming over the energy map:
1. Forward pass: cumulative minimal cost, one column at a time
2. Backtrack: read the cheapest connected path out, last column first

Only horizontal seams are searched directly. A vertical seam is a
horizontal seam of the grid rotated clockwise, read back in reverse.
"""

import logging

import torch
from typing import List, Optional, Sequence

from .energy import dual_gradient_energy
from .errors import (CoordinateOutOfRange, DegenerateDimension, InvalidSeamLength,
                     SeamAdjacencyViolation)
from .grid import PixelGrid
from .transpose import rotate_clockwise

logger = logging.getLogger(__name__)


def cumulative_cost(energy: torch.Tensor) -> torch.Tensor:
    """
    Forward pass of the horizontal seam search.

    cost[y, x] = energy[y, x] + min(cost[y-1, x-1], cost[y, x-1], cost[y+1, x-1])

    with y-1 and y+1 clamped to the grid (the edge row is its own
    neighbour). Column 0 is its own energy. Each column depends on the
    whole previous column, so columns are processed in order while the
    rows of a column are computed together.

    Args:
        energy: Energy map (H, W)

    Returns:
        Cumulative cost map (H, W)
    """
    H, W = energy.shape
    cost = energy.clone()

    for x in range(1, W):
        prev = cost[:, x - 1]
        above = torch.cat([prev[:1], prev[:-1]])
        below = torch.cat([prev[1:], prev[-1:]])
        cost[:, x] = energy[:, x] + torch.minimum(torch.minimum(above, below), prev)

    return cost


def backtrack_seam(cost: torch.Tensor) -> List[int]:
    """
    Read the cheapest horizontal seam out of a cumulative cost map.

    Starting from the last column, pick the row with the lowest cost inside
    a window that begins as the full column and then shrinks to the rows
    adjacent to the previous pick. Candidates are scanned from the bottom
    of the window up and ties replace the running minimum, so the smallest
    row index wins among equal costs.

    Args:
        cost: Cumulative cost map (H, W)

    Returns:
        Row index for each column, length W
    """
    H, W = cost.shape
    columns = cost.t().tolist()
    seam = [0] * W

    start, end = 0, H - 1
    for x in range(W - 1, -1, -1):
        column = columns[x]
        best = float('inf')

        for y in range(end, start - 1, -1):
            if column[y] <= best:
                best = column[y]
                seam[x] = y

        start = max(0, seam[x] - 1)
        end = min(H - 1, seam[x] + 1)

    return seam


def horizontal_seam(grid: PixelGrid, energy: Optional[torch.Tensor] = None) -> List[int]:
    """
    Find the lowest-energy horizontal seam of a grid.

    Args:
        grid: Pixel grid
        energy: Precomputed energy map (H, W); computed fresh if omitted

    Returns:
        Row index for each column, length grid.width
    """
    if energy is None:
        energy = dual_gradient_energy(grid)
    seam = backtrack_seam(cumulative_cost(energy))
    logger.debug("Horizontal seam: %s", seam)
    return seam


def vertical_seam(grid: PixelGrid) -> List[int]:
    """
    Find the lowest-energy vertical seam of a grid.

    The grid is rotated clockwise and searched horizontally. Rotation
    reverses the order of the rows, so the result must be reversed to line
    up with the original orientation.

    Args:
        grid: Pixel grid (left unchanged)

    Returns:
        Column index for each row, length grid.height
    """
    rotated = rotate_clockwise(grid)
    seam = horizontal_seam(rotated)
    seam.reverse()
    logger.debug("Vertical seam: %s", seam)
    return seam


def validate_seam(grid: PixelGrid, seam: Sequence[int], direction: str = 'vertical') -> List[int]:
    """
    Check that a seam can be removed from a grid.

    Args:
        grid: Grid the seam will be removed from
        seam: Seam indices
        direction: 'vertical' or 'horizontal'

    Returns:
        The seam as a list of ints

    Raises:
        DegenerateDimension: the dimension to shrink is already 1
        InvalidSeamLength: wrong number of entries
        CoordinateOutOfRange: an entry falls outside the grid
        SeamAdjacencyViolation: consecutive entries differ by more than 1
    """
    W, H = grid.width, grid.height

    if direction == 'vertical':
        length, limit = H, W
    elif direction == 'horizontal':
        length, limit = W, H
    else:
        raise ValueError(f"Invalid direction: {direction}")

    if limit <= 1:
        raise DegenerateDimension(
            f"Cannot remove a {direction} seam from a {W}x{H} grid")

    seam = [int(v) for v in seam]
    if len(seam) != length:
        raise InvalidSeamLength(len(seam), length)

    for i, value in enumerate(seam):
        if not 0 <= value < limit:
            if direction == 'vertical':
                raise CoordinateOutOfRange(value, i, W, H)
            raise CoordinateOutOfRange(i, value, W, H)
        if i > 0 and abs(value - seam[i - 1]) > 1:
            raise SeamAdjacencyViolation(i, seam[i - 1], value)

    return seam


def remove_seam(grid: PixelGrid, seam: Sequence[int],
                direction: str = 'vertical') -> PixelGrid:
    """
    Remove a seam from a grid.

    The seam is validated before anything is copied, and the input grid is
    never modified.

    Args:
        grid: Pixel grid
        seam: Seam indices (column per row for vertical, row per column
              for horizontal)
        direction: 'vertical' or 'horizontal'

    Returns:
        New grid with one column (vertical) or one row (horizontal) removed
    """
    seam = validate_seam(grid, seam, direction)
    image = grid.to_image()  # (H, W, 3)
    H, W, _ = image.shape

    if direction == 'vertical':
        # Remove one pixel from each row
        carved = torch.empty(H, W - 1, 3, dtype=image.dtype, device=image.device)

        for y in range(H):
            col = seam[y]
            carved[y, :col] = image[y, :col]
            carved[y, col:] = image[y, col + 1:]

        return PixelGrid(carved.reshape(-1, 3), W - 1, H)

    # Remove one pixel from each column
    carved = torch.empty(H - 1, W, 3, dtype=image.dtype, device=image.device)

    for x in range(W):
        row = seam[x]
        carved[:row, x] = image[:row, x]
        carved[row:, x] = image[row + 1:, x]

    return PixelGrid(carved.reshape(-1, 3), W, H - 1)


def remove_horizontal_seam(grid: PixelGrid, seam: Sequence[int]) -> PixelGrid:
    return remove_seam(grid, seam, direction='horizontal')


def remove_vertical_seam(grid: PixelGrid, seam: Sequence[int]) -> PixelGrid:
    return remove_seam(grid, seam, direction='vertical')
