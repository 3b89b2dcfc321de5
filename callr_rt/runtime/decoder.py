"""Turns a raw request body into a CallEvent."""

from __future__ import annotations

import json
from typing import Optional, Union

from callr_rt.log import get_logger
from callr_rt.protocol.errors import EmptyRequest, InvalidRequest, MissingProperty
from callr_rt.protocol.models import CALL_EVENT_FIELDS, CallEvent

logger = get_logger(__name__)


def _reject_constant(token: str) -> None:
    raise ValueError(f"non-standard JSON token {token}")


def decode(raw_body: Optional[Union[bytes, str]]) -> CallEvent:
    """Parse and check one request body.

    Raises EmptyRequest when nothing was sent, InvalidRequest when the body is
    not a UTF-8 JSON object and MissingProperty for the first absent field.
    """
    if raw_body is None or len(raw_body) == 0:
        raise EmptyRequest("no request body received")

    if isinstance(raw_body, bytes):
        try:
            text = raw_body.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise InvalidRequest(f"request body is not UTF-8: {exc}") from exc
    else:
        text = raw_body

    try:
        payload = json.loads(text, parse_constant=_reject_constant)
    except ValueError as exc:
        raise InvalidRequest(f"request body is not JSON: {exc}") from exc

    if not isinstance(payload, dict):
        raise InvalidRequest(f"request body is a JSON {type(payload).__name__}, not an object")

    for name in CALL_EVENT_FIELDS:
        if name not in payload:
            raise MissingProperty(name)

    event = CallEvent.model_validate({name: payload[name] for name in CALL_EVENT_FIELDS})
    logger.debug(
        "Call event decoded",
        extra={"callid": event.callid, "call_status": event.call_status, "previous_command": event.command},
    )
    return event
