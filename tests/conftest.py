"""
Pytest configuration and shared fixtures for Image Cmd tests.

This module provides shared test fixtures and configuration
used across multiple test modules.
"""

import numpy as np
import pytest
from PIL import Image

from IC_Libs.ImageEditingLib.image_models import Canvas


@pytest.fixture
def temp_image_dir(tmp_path):
    """
    Provide a temporary directory for image files.

    Args:
        tmp_path: Pytest's built-in temporary directory fixture

    Returns:
        Path object pointing to a temporary directory
    """
    return tmp_path


@pytest.fixture
def sample_rgba_colors():
    """
    Provide a list of sample RGBA color tuples for testing.

    Returns:
        List of (R, G, B, A) tuples with common test colors
    """
    return [
        (255, 0, 0, 255),    # Red
        (0, 255, 0, 255),    # Green
        (0, 0, 255, 255),    # Blue
        (255, 255, 255, 255),  # White
        (0, 0, 0, 255),      # Black
        (128, 128, 128, 255),  # Gray
        (10, 200, 30, 77),   # Translucent
    ]


@pytest.fixture
def solid_canvas():
    """Factory for single-color canvases."""
    def make(width=100, height=100, color=(255, 255, 255, 255)):
        return Canvas(image=Image.new("RGBA", (width, height), color))
    return make


@pytest.fixture
def noise_canvas():
    """A 16x12 canvas with deterministic varied RGBA pixels."""
    rng = np.random.default_rng(1234)
    pixels = rng.integers(0, 256, size=(12, 16, 4), dtype=np.uint8)
    return Canvas(image=Image.fromarray(pixels))
