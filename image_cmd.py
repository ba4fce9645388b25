"""
Image Cmd - command-line image transformation.

Usage:
    image-cmd <input_image> <source_or_output> <operation> [output_image]

For ``merge`` and ``drawImage`` the second path is the source image composited
onto the input, and the optional fourth argument is the output path (the
second path is overwritten when it is omitted). For every other operation the
second path is the output and a fourth argument is ignored.

The operation argument is a name optionally followed by parameters::

    drawRect||color::255,0,0,255||rect::10,10,50,50||fill::true

Exit code is 0 on success and 1 on any failure.
"""

from contextlib import ExitStack
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence
import logging
import os
import sys

from IC_Libs.constants import (
    DEFAULT_LOG_LEVEL,
    EXIT_FAILURE,
    EXIT_SUCCESS,
    LOG_FORMAT,
    LOG_LEVEL_ENV_VAR,
)
from IC_Libs.CanvasIOLib.canvas_io import load_canvas, save_canvas
from IC_Libs.ImageEditingLib.font_cache import FontCache
from IC_Libs.OperationLib.operation_dispatcher import get_default_registry
from IC_Libs.OperationLib.operation_request import decode_operation_token, operation_name
from IC_Libs.OperationLib.operations import requires_secondary

logger = logging.getLogger("image_cmd")

MIN_ARGUMENTS = 3


@dataclass(frozen=True)
class Invocation:
    """Command-line arguments of one run.

    Attributes:
        input_path: Primary image, always loaded and transformed
        second_path: Source image for compositing operations, else the output
        operation_token: Encoded operation name and parameters
        explicit_output_path: Output for compositing operations, if given
    """
    input_path: str
    second_path: str
    operation_token: str
    explicit_output_path: Optional[str] = None

    @classmethod
    def from_argv(cls, argv: Sequence[str]) -> "Invocation":
        """
        Build an Invocation from positional arguments (program name excluded).

        Raises:
            ValueError: If fewer than three arguments are given
        """
        if len(argv) < MIN_ARGUMENTS:
            raise ValueError(
                f"Expected at least {MIN_ARGUMENTS} arguments "
                f"(input, source/output, operation), got {len(argv)}"
            )

        explicit_output = argv[3] if len(argv) > MIN_ARGUMENTS else None
        return cls(
            input_path=argv[0],
            second_path=argv[1],
            operation_token=argv[2],
            explicit_output_path=explicit_output,
        )

    @property
    def uses_source_image(self) -> bool:
        """Whether the second path is a compositing source rather than the output."""
        return requires_secondary(operation_name(self.operation_token))

    @property
    def secondary_path(self) -> Optional[str]:
        return self.second_path if self.uses_source_image else None

    @property
    def output_path(self) -> str:
        if self.uses_source_image and self.explicit_output_path is not None:
            return self.explicit_output_path
        return self.second_path


def run_invocation(invocation: Invocation) -> Optional[Path]:
    """
    Load the canvases, run the operation and save the result.

    Returns:
        Path written, or None when the output path is blank

    Raises:
        ValueError: If the operation token is empty
        FileNotFoundError: If a source image is missing
        OSError: If an image cannot be read or written
    """
    request = decode_operation_token(invocation.operation_token)
    fonts = FontCache()

    with ExitStack() as stack:
        primary = stack.enter_context(load_canvas(invocation.input_path))

        secondary = None
        if invocation.secondary_path is not None:
            secondary = stack.enter_context(load_canvas(invocation.secondary_path))

        get_default_registry().dispatch(request, primary, secondary, fonts)

        output_path = invocation.output_path
        if not output_path.strip():
            logger.info("No output path given, result not saved")
            return None

        return save_canvas(primary, output_path)


def configure_logging() -> None:
    level_name = os.environ.get(LOG_LEVEL_ENV_VAR, DEFAULT_LOG_LEVEL).upper()
    level = getattr(logging, level_name, None)
    if not isinstance(level, int):
        level = getattr(logging, DEFAULT_LOG_LEVEL)
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run one image operation.

    Args:
        argv: Arguments without the program name (defaults to sys.argv[1:])

    Returns:
        Process exit code
    """
    if argv is None:
        argv = sys.argv[1:]

    try:
        invocation = Invocation.from_argv(argv)
    except ValueError as e:
        logger.error(str(e))
        logger.error(
            "Usage: image-cmd <input_image> <source_or_output> <operation> [output_image]"
        )
        return EXIT_FAILURE

    try:
        run_invocation(invocation)
    except (ValueError, OSError) as e:
        logger.error(str(e))
        return EXIT_FAILURE
    except Exception:
        logger.exception("Image operation failed")
        return EXIT_FAILURE

    return EXIT_SUCCESS


def run() -> None:
    """Console script entry point."""
    configure_logging()
    sys.exit(main())


if __name__ == "__main__":
    run()
