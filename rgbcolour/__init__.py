from .colour import PALETTE, Color, Colour
from .errors import ColourDecodeError, ColourError

__all__ = [
    "PALETTE",
    "Color",
    "Colour",
    "ColourDecodeError",
    "ColourError",
]

__version__ = "0.1.0"
