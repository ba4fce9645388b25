"""
Constants and configuration values for Image Cmd.

This module centralizes all constant values, magic numbers, and
configuration settings used throughout the tool.
"""

# Operation token delimiters
OPERATION_DELIMITER = "||"
PARAMETER_DELIMITER = "::"
COMPONENT_SEPARATOR = ","
WILDCARD_AXIS = "*"

# Operation names
OP_MERGE = "merge"
OP_ROTATE_90 = "rotate90"
OP_ROTATE_180 = "rotate180"
OP_FLIP_H = "flipH"
OP_FLIP_V = "flipV"
OP_INVERSE = "inverse"
OP_BLACK_AND_WHITE = "blackAndWhite"
OP_DRAW_TEXT = "drawText"
OP_DRAW_RECT = "drawRect"
OP_DRAW_LINE = "drawLine"
OP_DRAW_IMAGE = "drawImage"

# Parameter keys
PARAM_COLOR = "color"
PARAM_RECT = "rect"
PARAM_FILL = "fill"
PARAM_LINE = "args"
PARAM_TEXT = "text"
PARAM_FONT = "font"
PARAM_FONT_FILE = "fontFile"
PARAM_FONT_SIZE = "fontSize"
PARAM_CENTER_TEXT = "centerText"
PARAM_POSITION = "position"
PARAM_SIZE = "size"

# Parameter defaults
DEFAULT_COLOR = (0, 0, 0, 255)
DEFAULT_TEXT_RECT = "0,0,*,*"
DEFAULT_SHAPE_RECT = "0,0,0,0"
DEFAULT_LINE = "0,0,0,0"
DEFAULT_POSITION = (0, 0)
DEFAULT_SIZE = "*,*"
DEFAULT_FONT_FAMILY = "Calibri"
DEFAULT_FONT_SIZE = 18.0
FONT_FILE_EXTENSIONS = (".ttf", ".otf")

# Boolean literals accepted by the boolean resolver
TRUE_LITERALS = {"true", "True"}
FALSE_LITERALS = {"false", "False"}

# Canvas settings
CANVAS_MODE = "RGBA"
TRANSPARENT = (0, 0, 0, 0)

# Output settings
DEFAULT_OUTPUT_FORMAT = "PNG"
ALPHA_LESS_FORMATS = {"JPEG"}

# Logging
LOG_LEVEL_ENV_VAR = "IMAGE_CMD_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

# Exit codes
EXIT_SUCCESS = 0
EXIT_FAILURE = 1
