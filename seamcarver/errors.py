"""Exceptions raised by the seam carving engine."""


class SeamCarvingError(Exception):
    """Base exception for all seamcarver errors."""

    pass


class CoordinateOutOfRange(SeamCarvingError, IndexError):
    """A pixel coordinate lies outside the current grid."""

    def __init__(self, x, y, width, height):
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        super().__init__(
            f"Coordinates ({x}, {y}) out of bounds for a {width}x{height} grid")


class InvalidSeamLength(SeamCarvingError, ValueError):
    """A seam does not have one entry per column (or row)."""

    def __init__(self, length, expected):
        self.length = length
        self.expected = expected
        super().__init__(f"Seam has length {length}, expected {expected}")


class SeamAdjacencyViolation(SeamCarvingError, ValueError):
    """Consecutive seam entries differ by more than one."""

    def __init__(self, index, previous, current):
        self.index = index
        super().__init__(
            f"Seam jumps from {previous} to {current} at position {index}")


class DegenerateDimension(SeamCarvingError, ValueError):
    """The operation would leave a grid with no rows or no columns."""

    pass
