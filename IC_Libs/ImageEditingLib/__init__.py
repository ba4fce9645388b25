"""
ImageEditingLib - Canvas models and image transforms

This module provides the canvas model, pixel transforms and font caching
for Image Cmd. Drawing and compositing handlers live in
``IC_Libs.ImageEditingLib.draw_ops``.
"""

from IC_Libs.ImageEditingLib.image_models import Canvas, ResolvedRect, RgbaColor
from IC_Libs.ImageEditingLib.pixel_transforms import (
    rotate_90,
    rotate_180,
    flip_horizontal,
    flip_vertical,
    invert_colors,
    convert_to_grayscale,
)
from IC_Libs.ImageEditingLib.font_cache import FontCache, FontHandle

__all__ = [
    "Canvas",
    "ResolvedRect",
    "RgbaColor",
    "rotate_90",
    "rotate_180",
    "flip_horizontal",
    "flip_vertical",
    "invert_colors",
    "convert_to_grayscale",
    "FontCache",
    "FontHandle",
]
