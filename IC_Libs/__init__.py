"""
IC_Libs - Image Cmd Library Modules

This package contains core functionality for the Image Cmd tool,
organized into specialized sub-packages:

- OperationLib: Operation token decoding, value resolvers, geometry and dispatch
- ImageEditingLib: Canvas models, pixel transforms, drawing and font caching
- CanvasIOLib: Loading source canvases and saving the result to disk
"""

__version__ = "0.1.0"
