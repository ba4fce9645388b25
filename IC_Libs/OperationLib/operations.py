"""
The closed set of operations Image Cmd can perform.

Each operation token names exactly one member of :class:`Operation`. The
member is chosen once, when the token is decoded, and decides whether the
second CLI path is a compositing source or the output destination.
"""

from enum import Enum
from typing import Optional

from IC_Libs import constants


class Operation(Enum):
    MERGE = constants.OP_MERGE
    ROTATE_90 = constants.OP_ROTATE_90
    ROTATE_180 = constants.OP_ROTATE_180
    FLIP_H = constants.OP_FLIP_H
    FLIP_V = constants.OP_FLIP_V
    INVERSE = constants.OP_INVERSE
    BLACK_AND_WHITE = constants.OP_BLACK_AND_WHITE
    DRAW_TEXT = constants.OP_DRAW_TEXT
    DRAW_RECT = constants.OP_DRAW_RECT
    DRAW_LINE = constants.OP_DRAW_LINE
    DRAW_IMAGE = constants.OP_DRAW_IMAGE

    @property
    def requires_secondary(self) -> bool:
        """Whether the operation composites a second canvas onto the first."""
        return self in (Operation.MERGE, Operation.DRAW_IMAGE)

    @classmethod
    def from_name(cls, name: str) -> Optional["Operation"]:
        """
        Look up an operation by its token name.

        Names are case-sensitive. Returns None for unknown names.
        """
        try:
            return cls(name)
        except ValueError:
            return None


def requires_secondary(name: str) -> bool:
    """Decide from the operation name alone whether a source image is needed."""
    operation = Operation.from_name(name)
    return operation is not None and operation.requires_secondary
