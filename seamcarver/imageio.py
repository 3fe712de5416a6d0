"""Load and save pictures as pixel grids."""

import logging

import numpy as np
import torch
from PIL import Image

from .grid import PixelGrid

logger = logging.getLogger(__name__)


def load_image(path: str) -> PixelGrid:
    """Load an image file as an RGB grid."""
    img = Image.open(path).convert('RGB')
    img_array = np.array(img, dtype=np.uint8)
    H, W, _ = img_array.shape
    pixels = torch.from_numpy(img_array.reshape(H * W, 3).copy())
    logger.debug("Loaded %s (%dx%d)", path, W, H)
    return PixelGrid(pixels, W, H)


def save_image(grid: PixelGrid, path: str):
    """Save a grid as an image file; the format follows the extension."""
    img_array = grid.to_image().cpu().numpy().astype(np.uint8)
    img = Image.fromarray(img_array)
    img.save(path)
    logger.debug("Saved %s (%dx%d)", path, grid.width, grid.height)
