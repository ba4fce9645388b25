"""
Operation token decoding.

An operation token packs an operation name and its parameters into a single
command-line argument::

    drawRect||color::255,0,0,255||rect::10,10,50,50||fill::true

Segments are separated by ``||``; each parameter segment holds a key and a
value separated by ``::``.

Classes:
    OperationRequest: Decoded operation name plus ordered raw parameters

Functions:
    decode_operation_token: Split a raw token into an OperationRequest
    operation_name: Operation name of a raw token without decoding parameters
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple
import logging

from IC_Libs.constants import OPERATION_DELIMITER, PARAMETER_DELIMITER
from IC_Libs.OperationLib.operations import Operation

logger = logging.getLogger(__name__)

ParameterTable = Dict[str, str]


@dataclass(frozen=True)
class OperationRequest:
    """A decoded operation token.

    Attributes:
        name: Operation name exactly as written in the token
        raw_params: Ordered (key, value) pairs in token order
        operation: The matching Operation, or None for unknown names
    """
    name: str
    raw_params: Tuple[Tuple[str, str], ...] = ()
    operation: Optional[Operation] = field(default=None, compare=False)

    def __post_init__(self):
        if self.operation is None:
            object.__setattr__(self, "operation", Operation.from_name(self.name))

    @property
    def params(self) -> ParameterTable:
        """Key to value lookup table. A repeated key keeps its last value."""
        return dict(self.raw_params)

    @property
    def requires_secondary(self) -> bool:
        return self.operation is not None and self.operation.requires_secondary


def _split_parameter(segment: str) -> Optional[Tuple[str, str]]:
    key, delimiter, value = segment.partition(PARAMETER_DELIMITER)
    if not delimiter or not key or not value:
        return None
    return key, value


def _segments(token: str) -> List[str]:
    return [segment for segment in token.split(OPERATION_DELIMITER) if segment]


def operation_name(token: str) -> str:
    """Name of the operation in a raw token, or an empty string if there is none."""
    segments = _segments(token)
    return segments[0] if segments else ""


def decode_operation_token(token: str) -> OperationRequest:
    """
    Decode a raw operation token.

    Malformed parameter segments (no ``::``, empty key or empty value) are
    skipped with a warning rather than failing the invocation.

    Args:
        token: The operation argument from the command line

    Returns:
        The decoded OperationRequest

    Raises:
        ValueError: If the token contains no operation name
    """
    segments = _segments(token)
    if not segments:
        raise ValueError(f"Operation token has no operation name: {token!r}")

    name, parameter_segments = segments[0], segments[1:]

    raw_params = []
    for segment in parameter_segments:
        pair = _split_parameter(segment)
        if pair is None:
            logger.warning(f"Skipping malformed parameter segment: {segment!r}")
            continue
        raw_params.append(pair)

    request = OperationRequest(name=name, raw_params=tuple(raw_params))
    logger.debug(f"Decoded operation '{name}' with {len(raw_params)} parameter(s)")
    return request
