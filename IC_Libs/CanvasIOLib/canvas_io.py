"""
Canvas loading and saving for Image Cmd.

Source images are decoded once and converted to RGBA canvases; the result is
written back with a format chosen from the output file extension.

Functions:
    load_canvas: Decode an image file into an RGBA Canvas
    save_canvas: Write a canvas to a path, replacing an existing file
    resolve_output_path: Check that the output directory exists
    resolve_save_format: Pick the Pillow format for an output path
"""

from pathlib import Path
from typing import Union
import logging

from IC_Libs.constants import ALPHA_LESS_FORMATS, CANVAS_MODE, DEFAULT_OUTPUT_FORMAT
from IC_Libs.ImageEditingLib.image_models import Canvas
from IC_Libs.pillow_compat import Image

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def load_canvas(file_path: PathLike) -> Canvas:
    """
    Load an image file into an RGBA canvas.

    The file handle is released before returning; the canvas owns an
    independent RGBA copy of the pixels.

    Args:
        file_path: Path to the source image

    Returns:
        Canvas holding the decoded image

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the path is not a file
        IOError: If the image cannot be decoded
    """
    path = Path(file_path)

    if not path.exists():
        raise FileNotFoundError(f"Image file not found: {path}")

    if not path.is_file():
        raise ValueError(f"Path is not a file: {path}")

    try:
        with Image.open(path) as img:
            img.load()
            rgba = img.convert(CANVAS_MODE)
    except Exception as e:
        raise IOError(f"Failed to load image from {path}: {str(e)}") from e

    logger.debug(f"Loaded {path} ({rgba.width}x{rgba.height})")
    return Canvas(image=rgba, path=path)


def resolve_save_format(output_path: PathLike) -> str:
    """
    Get the Pillow format name for an output path.

    Falls back to PNG when the extension is not registered with Pillow.
    """
    extension = Path(output_path).suffix.lower()
    return Image.registered_extensions().get(extension, DEFAULT_OUTPUT_FORMAT)


def resolve_output_path(output_path: PathLike) -> Path:
    """
    Validate an output path before writing.

    Raises:
        OSError: If the destination directory does not exist
    """
    output_file = Path(output_path)
    directory = output_file.parent

    if not directory.is_dir():
        raise OSError(f"Output directory does not exist: {directory}")

    return output_file


def save_canvas(canvas: Canvas, output_path: PathLike) -> Path:
    """
    Save the canvas, replacing an existing file.

    The format follows the output file extension. Formats without an alpha
    channel get a flattened RGB copy.

    Returns:
        Path where the canvas was saved

    Raises:
        OSError: If the directory is missing or the file cannot be written
    """
    output_file = resolve_output_path(output_path)
    save_format = resolve_save_format(output_file)

    image = canvas.image
    if save_format in ALPHA_LESS_FORMATS:
        image = image.convert("RGB")

    try:
        if output_file.exists():
            output_file.unlink()
        image.save(output_file, format=save_format)
    except Exception as e:
        raise OSError(f"Failed to save image to {output_file}: {str(e)}") from e

    logger.info(f"Saved {canvas.width}x{canvas.height} image to {output_file}")
    return output_file
