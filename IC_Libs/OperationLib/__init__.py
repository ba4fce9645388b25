"""
OperationLib - Operation token language and dispatch

Modules:
    operations: The closed set of Operation variants
    operation_request: Decoding operation tokens into requests
    geometry_resolver: Symbolic axis resolution against image extents
    value_resolvers: Lenient typed parameter resolvers
    operation_context: Inputs handed to operation handlers
    operation_dispatcher: Handler registry and dispatch
"""

from IC_Libs.OperationLib.operations import Operation, requires_secondary
from IC_Libs.OperationLib.operation_request import (
    OperationRequest,
    ParameterTable,
    decode_operation_token,
    operation_name,
)
from IC_Libs.OperationLib.geometry_resolver import resolve_axis
from IC_Libs.OperationLib.operation_context import OperationContext
from IC_Libs.OperationLib.operation_dispatcher import (
    OperationRegistry,
    get_default_registry,
    register_default_operations,
    dispatch,
)

__all__ = [
    "Operation",
    "requires_secondary",
    "OperationRequest",
    "ParameterTable",
    "decode_operation_token",
    "operation_name",
    "resolve_axis",
    "OperationContext",
    "OperationRegistry",
    "get_default_registry",
    "register_default_operations",
    "dispatch",
]
