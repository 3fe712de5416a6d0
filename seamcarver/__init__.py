"""
Seam carving for content-aware image shrinking.

Repeatedly finds the lowest-energy connected path of pixels crossing an
image and removes it, shrinking the image one row or column at a time.
"""

__version__ = "0.1.0"

from .errors import (
    SeamCarvingError,
    CoordinateOutOfRange,
    InvalidSeamLength,
    SeamAdjacencyViolation,
    DegenerateDimension,
)
from .grid import PixelGrid
from .energy import dual_gradient_energy, pixel_energy
from .transpose import rotate_clockwise, rotate_counter_clockwise
from .seam import (cumulative_cost, backtrack_seam, horizontal_seam, vertical_seam,
                   validate_seam, remove_seam, remove_horizontal_seam, remove_vertical_seam)
from .carver import SeamCarver
from .carving import carve_image, resize, overlay_seam

__all__ = [
    'SeamCarvingError',
    'CoordinateOutOfRange',
    'InvalidSeamLength',
    'SeamAdjacencyViolation',
    'DegenerateDimension',
    'PixelGrid',
    'dual_gradient_energy',
    'pixel_energy',
    'rotate_clockwise',
    'rotate_counter_clockwise',
    'cumulative_cost',
    'backtrack_seam',
    'horizontal_seam',
    'vertical_seam',
    'validate_seam',
    'remove_seam',
    'remove_horizontal_seam',
    'remove_vertical_seam',
    'SeamCarver',
    'carve_image',
    'resize',
    'overlay_seam',
]
