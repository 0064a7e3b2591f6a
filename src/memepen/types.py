"""Type aliases used across the memepen package."""

from typing import Literal, Tuple

# Geometry
Coordinate = Tuple[float, float]  # (x, y) in canvas pixels, origin top-left

# Colors
HexColor = str  # "#RRGGBB" or "#RRGGBBAA"

# Storage backends
UploaderType = Literal["local", "noop", "http"]
