"""
Operation Handler Registry and Dispatcher.

This module maps each :class:`Operation` to the handler that performs it and
dispatches decoded operation requests against loaded canvases.

Classes:
    OperationRegistry: Registry for operation handlers

Functions:
    get_default_registry: Get the global default registry (singleton)
    register_default_operations: Register all built-in operation handlers
    dispatch: Run a decoded request against the default registry
"""

from functools import wraps
from typing import Callable, Dict, List, Optional
import logging

from IC_Libs.ImageEditingLib.font_cache import FontCache
from IC_Libs.ImageEditingLib.image_models import Canvas
from IC_Libs.OperationLib.operation_context import OperationContext
from IC_Libs.OperationLib.operation_request import OperationRequest
from IC_Libs.OperationLib.operations import Operation

logger = logging.getLogger(__name__)

# Type alias for handler function
OperationHandler = Callable[[OperationContext], None]


class OperationRegistry:
    """
    Registry mapping each Operation to its handler.

    Example:
        >>> registry = OperationRegistry()
        >>> registry.register(Operation.INVERSE, invert_handler)
        >>> registry.dispatch(request, primary)
    """

    def __init__(self):
        """Initialize an empty registry."""
        self._handlers: Dict[Operation, OperationHandler] = {}

    def register(self, operation: Operation, handler: OperationHandler) -> None:
        """
        Register an operation handler.

        Args:
            operation: The operation this handler performs
            handler: Callable accepting an OperationContext

        Raises:
            ValueError: If operation is not an Operation or handler is not callable
            RuntimeError: If operation is already registered
        """
        if not isinstance(operation, Operation):
            raise ValueError(f"operation must be an Operation, got {type(operation)}")

        if not callable(handler):
            raise ValueError(f"handler must be callable, got {type(handler)}")

        if operation in self._handlers:
            raise RuntimeError(f"Operation '{operation.value}' is already registered")

        self._handlers[operation] = handler
        logger.debug(f"Registered handler for operation: {operation.value}")

    def get_handler(self, operation: Operation) -> OperationHandler:
        """
        Get the handler for an operation.

        Raises:
            KeyError: If operation is not registered
        """
        if operation not in self._handlers:
            available = ", ".join(self.list_operations())
            raise KeyError(
                f"No handler registered for operation '{operation.value}'. "
                f"Available operations: {available}"
            )

        return self._handlers[operation]

    def list_operations(self) -> List[str]:
        """
        Get list of all registered operation names.

        Returns:
            Sorted list of operation names
        """
        return sorted(operation.value for operation in self._handlers)

    def dispatch(
        self,
        request: OperationRequest,
        primary: Canvas,
        secondary: Optional[Canvas] = None,
        fonts: Optional[FontCache] = None,
    ) -> None:
        """
        Perform a decoded operation on the primary canvas.

        Unknown operation names leave the primary canvas untouched.

        Args:
            request: Decoded operation token
            primary: Canvas to transform in place
            secondary: Compositing source for merge/drawImage
            fonts: Invocation font cache (a fresh one is created if omitted)

        Raises:
            ValueError: If the operation needs a secondary canvas and none is given
            KeyError: If the operation is known but has no registered handler
            Exception: Any exception raised by the handler
        """
        operation = request.operation
        if operation is None:
            logger.warning(f"Unknown operation '{request.name}', image left unchanged")
            return

        if operation.requires_secondary and secondary is None:
            raise ValueError(f"Operation '{operation.value}' requires a secondary source image")

        handler = self.get_handler(operation)
        context = OperationContext(
            primary=primary,
            secondary=secondary,
            params=request.params,
            fonts=fonts if fonts is not None else FontCache(),
        )

        logger.info(f"Running operation '{operation.value}' on {primary.width}x{primary.height} canvas")
        handler(context)


def _on_primary(transform: Callable[[Canvas], None]) -> OperationHandler:
    @wraps(transform)
    def handler(context: OperationContext) -> None:
        transform(context.primary)

    return handler


# Global singleton registry
_default_registry: Optional[OperationRegistry] = None


def get_default_registry() -> OperationRegistry:
    """
    Get the global default registry (singleton).

    Creates the registry on first call and registers default handlers.
    """
    global _default_registry

    if _default_registry is None:
        _default_registry = OperationRegistry()
        register_default_operations(_default_registry)

    return _default_registry


def register_default_operations(registry: OperationRegistry) -> None:
    """
    Register all built-in operation handlers.

    Args:
        registry: The registry to register handlers with
    """
    from IC_Libs.ImageEditingLib import pixel_transforms
    from IC_Libs.ImageEditingLib import draw_ops

    handlers = {
        Operation.MERGE: draw_ops.execute_merge,
        Operation.ROTATE_90: _on_primary(pixel_transforms.rotate_90),
        Operation.ROTATE_180: _on_primary(pixel_transforms.rotate_180),
        Operation.FLIP_H: _on_primary(pixel_transforms.flip_horizontal),
        Operation.FLIP_V: _on_primary(pixel_transforms.flip_vertical),
        Operation.INVERSE: _on_primary(pixel_transforms.invert_colors),
        Operation.BLACK_AND_WHITE: _on_primary(pixel_transforms.convert_to_grayscale),
        Operation.DRAW_TEXT: draw_ops.execute_draw_text,
        Operation.DRAW_RECT: draw_ops.execute_draw_rect,
        Operation.DRAW_LINE: draw_ops.execute_draw_line,
        Operation.DRAW_IMAGE: draw_ops.execute_draw_image,
    }
    for operation, handler in handlers.items():
        registry.register(operation, handler)

    logger.debug("Registered default operation handlers")


def dispatch(
    request: OperationRequest,
    primary: Canvas,
    secondary: Optional[Canvas] = None,
    fonts: Optional[FontCache] = None,
) -> None:
    """Dispatch ``request`` through the default registry."""
    get_default_registry().dispatch(request, primary, secondary, fonts)
