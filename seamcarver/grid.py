"""
Pixel grid used by the seam carving engine.

A grid is a width x height array of RGB triples (three uint8 channels)
stored as one flat, row-major buffer:

    index = y * width + x

Every operation that changes the shape of an image (rotation, seam
removal) builds a brand new grid, so a grid handed to a caller is never
patched afterwards.
"""

import torch
from typing import Sequence, Tuple

from .errors import CoordinateOutOfRange


class PixelGrid:
    """
    Self-describing RGB grid.

    The grid owns its width and height, so code holding a grid never has
    to track the dimensions separately.
    """

    def __init__(self, pixels: torch.Tensor, width: int, height: int):
        """
        Wrap a flat pixel buffer.

        Args:
            pixels: uint8 tensor (width * height, 3), row-major
            width: Number of columns
            height: Number of rows
        """
        if pixels.shape != (width * height, 3):
            raise ValueError(
                f"Pixel buffer of shape {tuple(pixels.shape)} does not "
                f"match a {width}x{height} grid")
        self.pixels = pixels.to(torch.uint8).contiguous()
        self._width = width
        self._height = height

    @classmethod
    def new(cls, width: int, height: int, device='cpu'):
        """Blank (black) grid, to be filled with set_pixel."""
        pixels = torch.zeros(width * height, 3, dtype=torch.uint8, device=device)
        return cls(pixels, width, height)

    @classmethod
    def from_tensor(cls, image: torch.Tensor):
        """
        Build a grid from an image tensor.

        Args:
            image: RGB tensor (3, H, W); float tensors are read as [0, 1]

        Returns:
            PixelGrid with a fresh buffer
        """
        if image.dim() != 3 or image.shape[0] != 3:
            raise ValueError(f"Expected an RGB tensor (3, H, W), got {tuple(image.shape)}")

        if image.is_floating_point():
            image = (image * 255.0).round().clamp(0, 255)

        _, H, W = image.shape
        pixels = image.permute(1, 2, 0).reshape(H * W, 3).to(torch.uint8).clone()
        return cls(pixels, W, H)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Tuple[int, int, int]]]):
        """Build a grid from nested lists indexed rows[y][x] -> (r, g, b)."""
        height = len(rows)
        width = len(rows[0]) if height else 0
        if any(len(row) != width for row in rows):
            raise ValueError("All rows must have the same length")
        image = torch.tensor(rows, dtype=torch.uint8).reshape(height, width, 3)
        return cls(image.reshape(width * height, 3), width, height)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def device(self):
        return self.pixels.device

    def _index(self, x: int, y: int) -> int:
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise CoordinateOutOfRange(x, y, self._width, self._height)
        return y * self._width + x

    def get_pixel(self, x: int, y: int) -> Tuple[int, int, int]:
        r, g, b = self.pixels[self._index(x, y)].tolist()
        return r, g, b

    def set_pixel(self, x: int, y: int, rgb: Tuple[int, int, int]):
        self.pixels[self._index(x, y)] = torch.tensor(rgb, dtype=torch.uint8)

    def to_image(self) -> torch.Tensor:
        """(H, W, 3) view of the buffer."""
        return self.pixels.view(self._height, self._width, 3)

    def to_tensor(self) -> torch.Tensor:
        """Channel-first copy (3, H, W), uint8."""
        return self.to_image().permute(2, 0, 1).contiguous()

    def clone(self) -> 'PixelGrid':
        return PixelGrid(self.pixels.clone(), self._width, self._height)

    def __eq__(self, other):
        if not isinstance(other, PixelGrid):
            return NotImplemented
        return (self._width == other._width and self._height == other._height
                and torch.equal(self.pixels, other.pixels))

    def __repr__(self):
        return f"PixelGrid(width={self._width}, height={self._height})"
