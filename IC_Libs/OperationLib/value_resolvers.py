"""
Typed value resolvers for operation parameters.

Every resolver has the shape ``resolve_x(params, key, default, ...)`` and never
raises. Operation tokens are hand-written command-line text, so a missing or
malformed value falls back to its default instead of aborting the invocation.

The fallback is the :func:`lenient` policy: a strict parser turns raw text into
a value and raises ValueError when the whole value is unusable; the wrapper
catches that and returns the default. Inside compound values (colors, rects,
positions, sizes) an unparseable component resolves to 0 on its own, while a
wrong number of components rejects the whole value.

Functions:
    lenient: Decorator turning a strict parser into a resolver
    resolve_color, resolve_bool, resolve_int, resolve_float, resolve_text
    resolve_rect, resolve_position, resolve_size, resolve_points
"""

from functools import wraps
from typing import Any, Callable, List, Optional, Tuple
import logging
import math

from IC_Libs.constants import (
    COMPONENT_SEPARATOR,
    DEFAULT_COLOR,
    DEFAULT_LINE,
    DEFAULT_POSITION,
    DEFAULT_SIZE,
    DEFAULT_TEXT_RECT,
    FALSE_LITERALS,
    TRUE_LITERALS,
    WILDCARD_AXIS,
)
from IC_Libs.ImageEditingLib.image_models import ResolvedRect, RgbaColor
from IC_Libs.OperationLib.geometry_resolver import parse_int_or_zero, resolve_axis
from IC_Libs.OperationLib.operation_request import ParameterTable

logger = logging.getLogger(__name__)

Point = Tuple[int, int]
Size = Tuple[int, int]


def lenient(fallback: Any = None) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """
    Wrap a strict raw-text parser in the lenient resolution policy.

    The decorated resolver takes ``(params, key, default=fallback, *args)``.
    It returns ``default`` when the key is absent or blank, or when the parser
    raises ValueError; otherwise it returns ``parser(raw_value, *args)``.
    The undecorated parser stays reachable as ``resolver.parser``.

    Args:
        fallback: Default used when the caller does not supply one
    """
    def decorator(parser: Callable[..., Any]) -> Callable[..., Any]:
        @wraps(parser)
        def resolver(params: ParameterTable, key: str, default: Any = fallback, *args: Any) -> Any:
            raw = params.get(key)
            if raw is None or not raw.strip():
                return default
            try:
                return parser(raw, *args)
            except ValueError as e:
                logger.debug(f"Parameter '{key}' falls back to default {default!r}: {e}")
                return default

        resolver.parser = parser
        return resolver

    return decorator


def _components(raw: str, count: int) -> List[str]:
    parts = raw.split(COMPONENT_SEPARATOR)
    if len(parts) != count:
        raise ValueError(f"Expected {count} comma-separated values, got {len(parts)} in {raw!r}")
    return parts


def _parse_byte(text: str) -> int:
    value = parse_int_or_zero(text)
    if not 0 <= value <= 255:
        return 0
    return value


@lenient(DEFAULT_COLOR)
def resolve_color(raw: str) -> RgbaColor:
    """Parse ``R,G,B,A``. Components outside 0-255 or unparseable become 0."""
    r, g, b, a = (_parse_byte(part) for part in _components(raw, 4))
    return (r, g, b, a)


@lenient(False)
def resolve_bool(raw: str) -> bool:
    literal = raw.strip()
    if literal in TRUE_LITERALS:
        return True
    if literal in FALSE_LITERALS:
        return False
    raise ValueError(f"Not a boolean literal: {raw!r}")


@lenient(0)
def resolve_int(raw: str) -> int:
    return int(raw)


@lenient(0.0)
def resolve_float(raw: str) -> float:
    value = float(raw)
    if not math.isfinite(value):
        raise ValueError(f"Not a finite number: {raw!r}")
    return value


@lenient("")
def resolve_text(raw: str) -> str:
    return raw


@lenient()
def _parse_rect(raw: str, image_size: Size) -> ResolvedRect:
    x_token, y_token, width_token, height_token = _components(raw, 4)
    image_width, image_height = image_size

    x = parse_int_or_zero(x_token)
    y = parse_int_or_zero(y_token)
    width = resolve_axis(width_token, image_width, x)
    height = resolve_axis(height_token, image_height, y)

    return ResolvedRect(x, y, width, height)


def resolve_rect(
    params: ParameterTable,
    key: str,
    image_size: Size,
    default_text: str = DEFAULT_TEXT_RECT,
) -> ResolvedRect:
    """
    Resolve an ``x,y,width,height`` rectangle against an image size.

    Width and height accept the symbolic axis forms (``*``, ``+N``, ``-N``);
    the origin is always a plain integer. The default is itself rectangle text
    and is resolved the same way.

    Args:
        params: Parameter lookup table
        key: Parameter key holding the rectangle
        image_size: (width, height) of the canvas being drawn on
        default_text: Rectangle text used when the value is missing or malformed

    Returns:
        Concrete ResolvedRect
    """
    default = _parse_rect.parser(default_text, image_size)
    return _parse_rect(params, key, default, image_size)


@lenient(DEFAULT_POSITION)
def resolve_position(raw: str) -> Point:
    x_token, y_token = _components(raw, 2)
    return (parse_int_or_zero(x_token), parse_int_or_zero(y_token))


def _size_axis(token: str, source_extent: int) -> int:
    if token.strip() == WILDCARD_AXIS:
        return source_extent
    return parse_int_or_zero(token)


@lenient()
def _parse_size(raw: str, source_size: Size) -> Size:
    width_token, height_token = _components(raw, 2)
    source_width, source_height = source_size
    return (_size_axis(width_token, source_width), _size_axis(height_token, source_height))


def resolve_size(
    params: ParameterTable,
    key: str,
    source_size: Size,
    default_text: str = DEFAULT_SIZE,
) -> Size:
    """
    Resolve a ``width,height`` size where ``*`` means the source's own extent.

    Each axis is resolved independently against the matching source extent.
    """
    default = _parse_size.parser(default_text, source_size)
    return _parse_size(params, key, default, source_size)


@lenient()
def _parse_points(raw: str) -> Tuple[Point, Point]:
    x0, y0, x1, y1 = (parse_int_or_zero(part) for part in _components(raw, 4))
    return (x0, y0), (x1, y1)


def resolve_points(
    params: ParameterTable,
    key: str,
    default_text: str = DEFAULT_LINE,
) -> Tuple[Point, Point]:
    """Resolve ``x0,y0,x1,y1`` into a start and end point."""
    return _parse_points(params, key, _parse_points.parser(default_text))


def resolve_optional_text(params: ParameterTable, key: str) -> Optional[str]:
    """Return the raw value for ``key``, or None when absent or blank."""
    value = resolve_text(params, key, "")
    return value if value.strip() else None


__all__ = [
    "lenient",
    "resolve_color",
    "resolve_bool",
    "resolve_int",
    "resolve_float",
    "resolve_text",
    "resolve_optional_text",
    "resolve_rect",
    "resolve_position",
    "resolve_size",
    "resolve_points",
]
