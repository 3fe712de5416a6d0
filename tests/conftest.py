"""Shared test fixtures for the seamcarver test suite."""

import itertools
import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import torch
import pytest
from seamcarver.grid import PixelGrid


def make_uniform_grid(W, H, color=(120, 60, 30)):
    """Every pixel the same color."""
    pixels = torch.tensor(color, dtype=torch.uint8).repeat(W * H, 1)
    return PixelGrid(pixels, W, H)


def make_random_grid(W, H, seed=42):
    """Random RGB noise."""
    torch.manual_seed(seed)
    pixels = torch.randint(0, 256, (W * H, 3), dtype=torch.uint8)
    return PixelGrid(pixels, W, H)


def make_index_grid(W, H):
    """Pixel (x, y) has color (x, y, 0), so every pixel records where it came from."""
    rows = [[(x, y, 0) for x in range(W)] for y in range(H)]
    return PixelGrid.from_rows(rows)


def brute_force_min_seam_energy(energy, direction):
    """Lowest total energy over every connected seam (small maps only)."""
    if direction == 'horizontal':
        energy = energy.t()
    values = energy.tolist()  # values[step][position]
    n_steps, limit = len(values), len(values[0])

    best = float('inf')
    for start in range(limit):
        for moves in itertools.product((-1, 0, 1), repeat=n_steps - 1):
            pos, total = start, values[0][start]
            for step, move in enumerate(moves, start=1):
                pos += move
                if not 0 <= pos < limit:
                    break
                total += values[step][pos]
            else:
                best = min(best, total)
    return best


def seam_energy(energy, seam, direction):
    if direction == 'horizontal':
        return sum(energy[y, x].item() for x, y in enumerate(seam))
    return sum(energy[y, x].item() for y, x in enumerate(seam))


@pytest.fixture
def uniform_grid():
    """3x3 grid of a single color."""
    return make_uniform_grid(3, 3)


@pytest.fixture
def spot_grid():
    """4x3 black grid with one white pixel at (1, 1)."""
    grid = make_uniform_grid(4, 3, color=(0, 0, 0))
    grid.set_pixel(1, 1, (255, 255, 255))
    return grid
