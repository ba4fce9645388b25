"""
Geometry resolution for operation parameters.

Axis tokens let an operation token describe sizes without knowing the image
dimensions in advance:

- ``*``  - fill the remaining extent from the paired origin
- ``-N`` - full extent minus N
- ``+N`` - full extent plus N
- ``N``  - absolute value

Unparseable tokens resolve to 0. No clamping is done; drawing primitives clip.
"""

import re

from IC_Libs.constants import WILDCARD_AXIS

_UNSIGNED_PATTERN = re.compile(r"\s*\d+\s*\Z", re.ASCII)
_SIGNED_PATTERN = re.compile(r"\s*[+-]?\d+\s*\Z", re.ASCII)


def parse_int_or_zero(text: str) -> int:
    """Parse a plain signed base-10 integer, returning 0 when malformed."""
    if text is None or not _SIGNED_PATTERN.match(text):
        return 0
    return int(text)


def parse_unsigned(text: str) -> int:
    """
    Parse an unsigned base-10 integer.

    Raises:
        ValueError: If the text is not a run of ASCII digits
    """
    if not _UNSIGNED_PATTERN.match(text):
        raise ValueError(f"Expected unsigned integer, got {text!r}")
    return int(text)


def resolve_axis(token: str, image_extent: int, origin: int = 0) -> int:
    """
    Resolve a single width or height token against an image extent.

    Args:
        token: Axis token (``*``, ``+N``, ``-N`` or a plain integer)
        image_extent: Image width or height for this axis
        origin: Rectangle origin on this axis, used by the wildcard

    Returns:
        Concrete extent in pixels (may be zero or negative)
    """
    token = token.strip()

    if token == WILDCARD_AXIS:
        return image_extent - origin

    if token.startswith("-") or token.startswith("+"):
        try:
            relative = parse_unsigned(token[1:])
        except ValueError:
            return 0
        if token.startswith("-"):
            return image_extent - relative
        return image_extent + relative

    return parse_int_or_zero(token)
