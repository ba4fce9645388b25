"""
Drawing and compositing operations for Image Cmd.

Shapes and text are painted onto a transparent overlay the size of the
primary canvas, which is then alpha-composited over it (source-over). Geometry
that falls outside the canvas is clipped; degenerate rectangles draw nothing.

Classes:
    RectParams: Resolved parameters for drawRect
    LineParams: Resolved parameters for drawLine
    TextParams: Resolved parameters for drawText
    ImageParams: Resolved parameters for drawImage

Functions:
    draw_rect, draw_line, draw_text, composite_image, merge_images
    execute_draw_rect, execute_draw_line, execute_draw_text,
    execute_draw_image, execute_merge: Operation handlers
"""

from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Tuple
import logging

from IC_Libs.constants import (
    CANVAS_MODE,
    DEFAULT_COLOR,
    DEFAULT_FONT_FAMILY,
    DEFAULT_FONT_SIZE,
    DEFAULT_SHAPE_RECT,
    DEFAULT_TEXT_RECT,
    PARAM_CENTER_TEXT,
    PARAM_COLOR,
    PARAM_FILL,
    PARAM_FONT,
    PARAM_FONT_FILE,
    PARAM_FONT_SIZE,
    PARAM_LINE,
    PARAM_POSITION,
    PARAM_RECT,
    PARAM_SIZE,
    PARAM_TEXT,
    TRANSPARENT,
)
from IC_Libs.ImageEditingLib.font_cache import FontCache
from IC_Libs.ImageEditingLib.image_models import Canvas, ResolvedRect, RgbaColor
from IC_Libs.OperationLib.operation_context import OperationContext
from IC_Libs.OperationLib.operation_request import ParameterTable
from IC_Libs.OperationLib.value_resolvers import (
    resolve_bool,
    resolve_color,
    resolve_float,
    resolve_optional_text,
    resolve_points,
    resolve_position,
    resolve_rect,
    resolve_size,
    resolve_text,
)
from IC_Libs.pillow_compat import Image, ImageDraw

logger = logging.getLogger(__name__)

Point = Tuple[int, int]


@dataclass(frozen=True)
class RectParams:
    rect: ResolvedRect
    color: RgbaColor = DEFAULT_COLOR
    fill: bool = False

    @classmethod
    def from_params(cls, params: ParameterTable, image_size: Tuple[int, int]) -> "RectParams":
        return cls(
            rect=resolve_rect(params, PARAM_RECT, image_size, DEFAULT_SHAPE_RECT),
            color=resolve_color(params, PARAM_COLOR),
            fill=resolve_bool(params, PARAM_FILL),
        )


@dataclass(frozen=True)
class LineParams:
    start: Point
    end: Point
    color: RgbaColor = DEFAULT_COLOR

    @classmethod
    def from_params(cls, params: ParameterTable) -> "LineParams":
        start, end = resolve_points(params, PARAM_LINE)
        return cls(start=start, end=end, color=resolve_color(params, PARAM_COLOR))


@dataclass(frozen=True)
class TextParams:
    """Resolved parameters for drawText.

    Attributes:
        text: Text to render; blank text draws nothing
        rect: Layout rectangle; text wraps to its width and is clipped to it
        color: Text color
        font_family: Installed font looked up when no font file is given
        font_file: Optional font file path, takes precedence over font_family
        font_size: Font size in pixels
        center: Center the text block horizontally and vertically in rect
    """
    text: str
    rect: ResolvedRect
    color: RgbaColor = DEFAULT_COLOR
    font_family: str = DEFAULT_FONT_FAMILY
    font_file: Optional[str] = None
    font_size: float = DEFAULT_FONT_SIZE
    center: bool = False

    @classmethod
    def from_params(cls, params: ParameterTable, image_size: Tuple[int, int]) -> "TextParams":
        font_size = resolve_float(params, PARAM_FONT_SIZE, DEFAULT_FONT_SIZE)
        if font_size <= 0:
            font_size = DEFAULT_FONT_SIZE

        return cls(
            text=resolve_text(params, PARAM_TEXT, ""),
            rect=resolve_rect(params, PARAM_RECT, image_size, DEFAULT_TEXT_RECT),
            color=resolve_color(params, PARAM_COLOR),
            font_family=resolve_text(params, PARAM_FONT, DEFAULT_FONT_FAMILY),
            font_file=resolve_optional_text(params, PARAM_FONT_FILE),
            font_size=font_size,
            center=resolve_bool(params, PARAM_CENTER_TEXT),
        )

    def load_font(self, fonts: FontCache) -> Any:
        if self.font_file:
            return fonts.file_font(self.font_file, self.font_size)
        return fonts.system_font(self.font_family, self.font_size)


@dataclass(frozen=True)
class ImageParams:
    position: Point
    size: Tuple[int, int]

    @classmethod
    def from_params(cls, params: ParameterTable, source_size: Tuple[int, int]) -> "ImageParams":
        return cls(
            position=resolve_position(params, PARAM_POSITION),
            size=resolve_size(params, PARAM_SIZE, source_size),
        )


def _paint_overlay(canvas: Canvas, paint: Callable[[Any], None]) -> Any:
    overlay = Image.new(CANVAS_MODE, canvas.size, TRANSPARENT)
    paint(ImageDraw.Draw(overlay))
    return overlay


def _composite(canvas: Canvas, overlay: Any) -> None:
    canvas.image = Image.alpha_composite(canvas.image, overlay)


def _clip_box(rect: ResolvedRect, size: Tuple[int, int]) -> Optional[Tuple[int, int, int, int]]:
    width, height = size
    left = max(rect.x, 0)
    top = max(rect.y, 0)
    right = min(rect.right, width)
    bottom = min(rect.bottom, height)
    if right <= left or bottom <= top:
        return None
    return (left, top, right, bottom)


def draw_rect(canvas: Canvas, rect: ResolvedRect, color: RgbaColor, fill: bool = False) -> None:
    """
    Fill or outline a rectangle.

    A filled rectangle covers ``[x, x + width) x [y, y + height)``. An outline
    is one pixel wide and passes through both ``(x, y)`` and
    ``(x + width, y + height)``.
    """
    if rect.is_degenerate:
        logger.debug(f"Skipping degenerate rectangle {rect}")
        return

    def paint(draw):
        if fill:
            draw.rectangle([rect.x, rect.y, rect.right - 1, rect.bottom - 1], fill=color)
        else:
            draw.rectangle([rect.x, rect.y, rect.right, rect.bottom], outline=color, width=1)

    _composite(canvas, _paint_overlay(canvas, paint))


def draw_line(canvas: Canvas, start: Point, end: Point, color: RgbaColor) -> None:
    """Stroke a one pixel line. Zero-length lines draw nothing."""
    if start == end:
        return

    def paint(draw):
        draw.line([start, end], fill=color, width=1)

    _composite(canvas, _paint_overlay(canvas, paint))


def wrap_text(draw: Any, text: str, font: Any, max_width: int) -> List[str]:
    """
    Break text into lines no wider than ``max_width`` at word boundaries.

    Explicit newlines are kept. A single word wider than the limit stays on
    its own line and is clipped when drawn.
    """
    lines: List[str] = []
    for paragraph in text.split("\n"):
        current = ""
        for word in paragraph.split(" "):
            candidate = f"{current} {word}" if current else word
            if current and draw.textlength(candidate, font=font) > max_width:
                lines.append(current)
                current = word
            else:
                current = candidate
        lines.append(current)
    return lines


def draw_text(
    canvas: Canvas,
    text: str,
    rect: ResolvedRect,
    font: Any,
    color: RgbaColor,
    center: bool = False,
) -> None:
    """
    Render text inside a layout rectangle.

    Text wraps to the rectangle width and anything outside the rectangle is
    clipped. With ``center`` the block is centered on both axes.
    """
    if not text.strip():
        return

    box = _clip_box(rect, canvas.size)
    if rect.is_degenerate or box is None:
        logger.debug(f"Text rectangle {rect} does not intersect the canvas")
        return

    def paint(draw):
        wrapped = "\n".join(wrap_text(draw, text, font, rect.width))
        if center:
            anchor_point = (rect.x + rect.width / 2, rect.y + rect.height / 2)
            draw.multiline_text(anchor_point, wrapped, fill=color, font=font, anchor="mm", align="center")
        else:
            draw.multiline_text((rect.x, rect.y), wrapped, fill=color, font=font)

    overlay = _paint_overlay(canvas, paint)

    clipped = Image.new(CANVAS_MODE, canvas.size, TRANSPARENT)
    clipped.paste(overlay.crop(box), box[:2])
    _composite(canvas, clipped)


def composite_image(canvas: Canvas, source: Canvas, position: Point, size: Tuple[int, int]) -> None:
    """
    Draw ``source`` onto ``canvas`` at ``position``, scaled to ``size``.

    The source canvas is never modified. Parts landing outside the canvas are
    clipped; a non-positive size draws nothing.
    """
    width, height = size
    if width <= 0 or height <= 0:
        logger.debug(f"Skipping composite with non-positive size {size}")
        return

    image = source.image
    if image.size != (width, height):
        image = image.resize((width, height), Image.Resampling.BILINEAR)

    overlay = Image.new(CANVAS_MODE, canvas.size, TRANSPARENT)
    overlay.paste(image, position)
    _composite(canvas, overlay)


def merge_images(canvas: Canvas, source: Canvas) -> None:
    """Composite ``source`` at the origin at its own size."""
    composite_image(canvas, source, (0, 0), source.size)


def execute_draw_rect(context: OperationContext) -> None:
    params = RectParams.from_params(context.params, context.primary.size)
    draw_rect(context.primary, params.rect, params.color, params.fill)


def execute_draw_line(context: OperationContext) -> None:
    params = LineParams.from_params(context.params)
    draw_line(context.primary, params.start, params.end, params.color)


def execute_draw_text(context: OperationContext) -> None:
    params = TextParams.from_params(context.params, context.primary.size)
    if not params.text.strip():
        logger.info("drawText called without text, nothing drawn")
        return

    font = params.load_font(context.fonts)
    draw_text(context.primary, params.text, params.rect, font, params.color, params.center)


def execute_draw_image(context: OperationContext) -> None:
    source = context.require_secondary()
    params = ImageParams.from_params(context.params, source.size)
    composite_image(context.primary, source, params.position, params.size)


def execute_merge(context: OperationContext) -> None:
    merge_images(context.primary, context.require_secondary())
