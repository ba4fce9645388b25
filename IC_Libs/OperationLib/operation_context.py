"""
Inputs handed to an operation handler.
"""

from dataclasses import dataclass, field
from typing import Optional

from IC_Libs.ImageEditingLib.font_cache import FontCache
from IC_Libs.ImageEditingLib.image_models import Canvas
from IC_Libs.OperationLib.operation_request import ParameterTable


@dataclass
class OperationContext:
    """Everything one operation may read or mutate.

    Attributes:
        primary: Canvas that is transformed and eventually saved
        secondary: Read-only compositing source, present for merge/drawImage
        params: Decoded parameter lookup table
        fonts: Font cache owned by the current invocation
    """
    primary: Canvas
    secondary: Optional[Canvas] = None
    params: ParameterTable = field(default_factory=dict)
    fonts: FontCache = field(default_factory=FontCache)

    def require_secondary(self) -> Canvas:
        if self.secondary is None:
            raise ValueError("Operation requires a secondary source image")
        return self.secondary
