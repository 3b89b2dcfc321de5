"""Protocol failures. Each one ends the current request without a response."""

from __future__ import annotations

EMPTY_REQUEST = "EMPTY_REQUEST"
INVALID_REQUEST = "INVALID_REQUEST"
INVALID_PROPERTY = "INVALID_PROPERTY"
INVALID_PROCESS_FUNCTION = "INVALID_PROCESS_FUNCTION"
INVALID_PROCESS_FUNCTION_RESPONSE = "INVALID_PROCESS_FUNCTION_RESPONSE"


class RealtimeError(Exception):
    code = "REALTIME_ERROR"

    def __init__(self, message: str = ""):
        super().__init__(message or self.code)
        self.message = message or self.code


class EmptyRequest(RealtimeError):
    """No request body was received."""

    code = EMPTY_REQUEST


class InvalidRequest(RealtimeError):
    """A body was received but it is not a JSON object."""

    code = INVALID_REQUEST


class MissingProperty(RealtimeError):
    """A required call event field is absent from the request body."""

    code = INVALID_PROPERTY

    def __init__(self, name: str):
        super().__init__(f"missing property '{name}'")
        self.name = name


class InvalidCallback(RealtimeError):
    """The process callback supplied by the application is not callable."""

    code = INVALID_PROCESS_FUNCTION


class InvalidCallbackResult(RealtimeError):
    """The application callback did not return a usable CommandObject."""

    code = INVALID_PROCESS_FUNCTION_RESPONSE
