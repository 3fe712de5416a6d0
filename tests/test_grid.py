"""Tests for the pixel grid."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import torch
import pytest
from seamcarver.grid import PixelGrid
from seamcarver.errors import CoordinateOutOfRange

from conftest import make_index_grid


class TestPixelGrid:
    def test_new_grid_dimensions(self):
        grid = PixelGrid.new(5, 3)
        assert grid.width == 5
        assert grid.height == 3
        assert grid.pixels.shape == (15, 3)

    def test_row_major_layout(self):
        """Pixel (x, y) lives at flat index y * width + x."""
        grid = make_index_grid(4, 3)
        assert grid.pixels[2 * 4 + 1].tolist() == [1, 2, 0]
        assert grid.get_pixel(3, 1) == (3, 1, 0)

    def test_set_then_get(self):
        grid = PixelGrid.new(2, 2)
        grid.set_pixel(1, 0, (10, 20, 30))
        assert grid.get_pixel(1, 0) == (10, 20, 30)
        assert grid.get_pixel(0, 1) == (0, 0, 0)

    def test_out_of_range_access_raises(self):
        grid = PixelGrid.new(3, 2)
        with pytest.raises(CoordinateOutOfRange):
            grid.get_pixel(3, 0)
        with pytest.raises(CoordinateOutOfRange):
            grid.set_pixel(0, -1, (0, 0, 0))

    def test_mismatched_buffer_rejected(self):
        with pytest.raises(ValueError):
            PixelGrid(torch.zeros(5, 3, dtype=torch.uint8), 2, 2)

    def test_tensor_round_trip(self):
        """to_tensor / from_tensor use the channel-first (3, H, W) layout."""
        grid = make_index_grid(5, 4)
        tensor = grid.to_tensor()
        assert tensor.shape == (3, 4, 5)
        assert tensor[0, 2, 3].item() == 3
        assert tensor[1, 2, 3].item() == 2
        assert PixelGrid.from_tensor(tensor) == grid

    def test_from_float_tensor(self):
        image = torch.zeros(3, 2, 2)
        image[0] = 1.0
        grid = PixelGrid.from_tensor(image)
        assert grid.get_pixel(1, 1) == (255, 0, 0)

    def test_clone_is_independent(self):
        grid = make_index_grid(3, 3)
        copy = grid.clone()
        copy.set_pixel(0, 0, (9, 9, 9))
        assert grid.get_pixel(0, 0) == (0, 0, 0)
        assert copy != grid
