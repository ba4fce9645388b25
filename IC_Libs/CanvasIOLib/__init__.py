"""
CanvasIOLib - Reading source images and writing results
"""

from IC_Libs.CanvasIOLib.canvas_io import (
    load_canvas,
    resolve_output_path,
    resolve_save_format,
    save_canvas,
)

__all__ = [
    "load_canvas",
    "resolve_output_path",
    "resolve_save_format",
    "save_canvas",
]
