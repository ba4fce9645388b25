"""
Tests for the Operation Handler Registry.

Tests cover:
- Registry creation and registration
- Dispatch of known, unknown and compositing operations
- Singleton default registry
"""

import unittest

import numpy as np
from PIL import Image

from IC_Libs.ImageEditingLib.image_models import Canvas
from IC_Libs.OperationLib.operation_dispatcher import (
    OperationRegistry,
    get_default_registry,
    register_default_operations,
)
from IC_Libs.OperationLib.operation_request import decode_operation_token
from IC_Libs.OperationLib.operations import Operation


def _canvas(width=4, height=4, color=(10, 20, 30, 255)):
    return Canvas(image=Image.new("RGBA", (width, height), color))


class TestOperationRegistry(unittest.TestCase):
    """Test OperationRegistry basic functionality."""

    def setUp(self):
        """Create a fresh registry for each test."""
        self.registry = OperationRegistry()

    def test_registry_creation(self):
        self.assertEqual(len(self.registry.list_operations()), 0)

    def test_register_handler(self):
        def handler(context):
            pass

        self.registry.register(Operation.INVERSE, handler)

        self.assertIs(self.registry.get_handler(Operation.INVERSE), handler)
        self.assertEqual(self.registry.list_operations(), ["inverse"])

    def test_register_string_name_raises_error(self):
        with self.assertRaises(ValueError):
            self.registry.register("inverse", lambda context: None)

    def test_register_non_callable_raises_error(self):
        with self.assertRaises(ValueError):
            self.registry.register(Operation.INVERSE, "not callable")

    def test_register_duplicate_raises_error(self):
        self.registry.register(Operation.INVERSE, lambda context: None)

        with self.assertRaises(RuntimeError):
            self.registry.register(Operation.INVERSE, lambda context: None)

    def test_get_unregistered_handler_raises_error(self):
        with self.assertRaises(KeyError):
            self.registry.get_handler(Operation.MERGE)

    def test_dispatch_passes_context(self):
        seen = {}

        def handler(context):
            seen["params"] = context.params
            seen["primary"] = context.primary

        self.registry.register(Operation.DRAW_LINE, handler)
        canvas = _canvas()

        self.registry.dispatch(decode_operation_token("drawLine||args::1,2,3,4"), canvas)

        self.assertEqual(seen["params"], {"args": "1,2,3,4"})
        self.assertIs(seen["primary"], canvas)

    def test_dispatch_unknown_operation_is_noop(self):
        canvas = _canvas()
        before = np.array(canvas.image).copy()

        self.registry.dispatch(decode_operation_token("sharpen"), canvas)

        np.testing.assert_array_equal(np.array(canvas.image), before)

    def test_dispatch_compositing_without_secondary_raises(self):
        self.registry.register(Operation.MERGE, lambda context: None)

        with self.assertRaises(ValueError):
            self.registry.dispatch(decode_operation_token("merge"), _canvas())


class TestDefaultRegistry(unittest.TestCase):
    """Test the built-in operation set."""

    def test_singleton(self):
        self.assertIs(get_default_registry(), get_default_registry())

    def test_all_operations_registered(self):
        registry = OperationRegistry()
        register_default_operations(registry)

        self.assertEqual(
            registry.list_operations(),
            sorted(operation.value for operation in Operation),
        )

    def test_default_handlers_cannot_be_replaced(self):
        with self.assertRaises(RuntimeError):
            get_default_registry().register(Operation.INVERSE, lambda context: None)

    def test_pixel_handlers_only_touch_primary(self):
        primary = _canvas(3, 2)
        secondary = _canvas(3, 2, (1, 2, 3, 4))

        get_default_registry().dispatch(decode_operation_token("rotate90"), primary, secondary)

        self.assertEqual(primary.size, (2, 3))
        self.assertEqual(secondary.size, (3, 2))
        self.assertEqual(secondary.image.getpixel((0, 0)), (1, 2, 3, 4))

    def test_inverse_handler(self):
        canvas = _canvas(color=(0, 100, 255, 9))

        get_default_registry().dispatch(decode_operation_token("inverse"), canvas)

        self.assertEqual(canvas.image.getpixel((0, 0)), (255, 155, 0, 9))
