"""
Geometric and per-pixel color transforms for Image Cmd.

Every transform mutates the given canvas in place. Color transforms touch only
the R, G and B channels; alpha is preserved.

Functions:
    rotate_90: Rotate 90 degrees clockwise
    rotate_180: Rotate 180 degrees
    flip_horizontal: Mirror across the vertical axis
    flip_vertical: Mirror across the horizontal axis
    invert_colors: XOR each color channel with 0xFF
    convert_to_grayscale: Luma-weighted desaturation
"""

import numpy as np

from IC_Libs.ImageEditingLib.image_models import Canvas
from IC_Libs.pillow_compat import Image

INVERSION_MASK = 0xFF

# Luma weights in hundredths: 0.30 R + 0.59 G + 0.11 B
LUMA_WEIGHTS = (30, 59, 11)
LUMA_SCALE = 100


def _transpose(canvas: Canvas, method) -> None:
    canvas.image = canvas.image.transpose(method)


def rotate_90(canvas: Canvas) -> None:
    """Rotate clockwise; width and height swap."""
    _transpose(canvas, Image.Transpose.ROTATE_270)


def rotate_180(canvas: Canvas) -> None:
    _transpose(canvas, Image.Transpose.ROTATE_180)


def flip_horizontal(canvas: Canvas) -> None:
    _transpose(canvas, Image.Transpose.FLIP_LEFT_RIGHT)


def flip_vertical(canvas: Canvas) -> None:
    _transpose(canvas, Image.Transpose.FLIP_TOP_BOTTOM)


def invert_colors(canvas: Canvas) -> None:
    """
    Invert every pixel's color channels.

    Each of R, G and B becomes ``0xFF ^ value``. Applying the inversion twice
    restores the original image.
    """
    pixels = np.array(canvas.image, dtype=np.uint8)
    pixels[:, :, :3] ^= INVERSION_MASK
    canvas.image = Image.fromarray(pixels)


def convert_to_grayscale(canvas: Canvas) -> None:
    """
    Desaturate using luma weights.

    Each of R, G and B becomes ``floor(0.30 R + 0.59 G + 0.11 B)``. The sum is
    computed in integer hundredths so truncation is exact and a gray pixel
    maps to itself.
    """
    pixels = np.array(canvas.image, dtype=np.uint8)
    rgb = pixels[:, :, :3].astype(np.uint32)

    red_weight, green_weight, blue_weight = LUMA_WEIGHTS
    gray = (
        rgb[:, :, 0] * red_weight
        + rgb[:, :, 1] * green_weight
        + rgb[:, :, 2] * blue_weight
    ) // LUMA_SCALE

    pixels[:, :, :3] = gray[:, :, np.newaxis].astype(np.uint8)
    canvas.image = Image.fromarray(pixels)
