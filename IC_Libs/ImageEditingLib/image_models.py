"""
Image editing data models for Image Cmd.

This module defines core data structures used throughout the image editing system.

Classes:
    Canvas: Mutable RGBA pixel buffer loaded from (and saved to) a file
    ResolvedRect: Concrete pixel bounds produced by the geometry resolver

Type Aliases:
    RgbaColor: A tuple of 4 integers representing RGBA color values (0-255)
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

from IC_Libs.constants import CANVAS_MODE
from IC_Libs.pillow_compat import Image

RgbaColor = Tuple[int, int, int, int]


@dataclass
class Canvas:
    """An owned RGBA image buffer.

    Transforms replace ``image`` when the pixel grid changes shape (rotation),
    so callers always read the current buffer through the canvas.

    Attributes:
        image: PIL Image in RGBA mode
        path: File the canvas was loaded from, if any
    """
    image: 'Image.Image'
    path: Optional[Path] = None

    def __post_init__(self):
        if self.image.mode != CANVAS_MODE:
            self.image = self.image.convert(CANVAS_MODE)

    @property
    def width(self) -> int:
        return self.image.width

    @property
    def height(self) -> int:
        return self.image.height

    @property
    def size(self) -> Tuple[int, int]:
        return self.image.size

    def close(self) -> None:
        self.image.close()

    def __enter__(self) -> "Canvas":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


@dataclass(frozen=True)
class ResolvedRect:
    x: int
    y: int
    width: int
    height: int

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    @property
    def is_degenerate(self) -> bool:
        """True when the rectangle covers no pixels."""
        return self.width <= 0 or self.height <= 0
