from callr_rt.protocol.commands import COMMAND_PARAMS, STANDARD_COMMANDS
from callr_rt.protocol.errors import (
    EMPTY_REQUEST,
    INVALID_PROCESS_FUNCTION,
    INVALID_PROCESS_FUNCTION_RESPONSE,
    INVALID_PROPERTY,
    INVALID_REQUEST,
    EmptyRequest,
    InvalidCallback,
    InvalidCallbackResult,
    InvalidRequest,
    MissingProperty,
    RealtimeError,
)
from callr_rt.protocol.models import (
    CALL_EVENT_FIELDS,
    CallEvent,
    CallStatus,
    CommandObject,
    HttpResponse,
)
from callr_rt.protocol.version import PROTOCOL_VERSION, SERVER_BANNER

__all__ = [
    "CALL_EVENT_FIELDS",
    "COMMAND_PARAMS",
    "EMPTY_REQUEST",
    "INVALID_PROCESS_FUNCTION",
    "INVALID_PROCESS_FUNCTION_RESPONSE",
    "INVALID_PROPERTY",
    "INVALID_REQUEST",
    "PROTOCOL_VERSION",
    "SERVER_BANNER",
    "STANDARD_COMMANDS",
    "CallEvent",
    "CallStatus",
    "CommandObject",
    "EmptyRequest",
    "HttpResponse",
    "InvalidCallback",
    "InvalidCallbackResult",
    "InvalidRequest",
    "MissingProperty",
    "RealtimeError",
]
