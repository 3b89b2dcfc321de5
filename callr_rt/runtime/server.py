
"""Runs one webhook request through decode, callback and response emission."""

from __future__ import annotations

from enum import Enum
from typing import Any, List, Optional, Tuple, Union

from pydantic import ValidationError

from callr_rt.apps.base import CallApplication
from callr_rt.config import ServerSettings, load_settings
from callr_rt.log import get_logger
from callr_rt.protocol.errors import InvalidCallback, InvalidCallbackResult, RealtimeError
from callr_rt.protocol.models import CallEvent, CommandObject, HttpResponse
from callr_rt.runtime.decoder import decode
from callr_rt.runtime.serialization import CONTENT_TYPE, encode_command

logger = get_logger(__name__)

Callback = CallApplication
RawBody = Optional[Union[bytes, str]]


class CycleState(str, Enum):
    IDLE = "idle"
    DECODING = "decoding"
    INVOKING = "invoking"
    SERIALIZING = "serializing"
    SENT = "sent"
    FAILED = "failed"


class RequestCycle:
    """Lifecycle of a single request. Runs once; afterwards it only holds results."""

    def __init__(self, settings: ServerSettings):
        self.settings = settings
        self.state = CycleState.IDLE
        self.event: Optional[CallEvent] = None
        self.command: Optional[CommandObject] = None
        self.response: Optional[HttpResponse] = None

    def run(self, raw_body: RawBody, callback: Any) -> HttpResponse:
        if self.state is not CycleState.IDLE:
            raise RuntimeError(f"request cycle already {self.state.value}")

        try:
            self.state = CycleState.DECODING
            self.event = decode(raw_body)

            if not callable(callback):
                raise InvalidCallback(f"process callback {callback!r} is not callable")

            self.state = CycleState.INVOKING
            self.command = _checked_result(callback(self.event))

            self.state = CycleState.SERIALIZING
            body = _encode(self.command)
        except RealtimeError as exc:
            self.state = CycleState.FAILED
            logger.warning(
                "Request rejected",
                extra={"code": exc.code, "reason": exc.message},
            )
            raise
        except Exception:
            self.state = CycleState.FAILED
            raise

        self.response = HttpResponse(headers=self._headers(body), body=body)
        self.state = CycleState.SENT
        logger.info(
            "Command sent",
            extra={
                "callid": self.event.callid,
                "call_status": self.event.call_status,
                "command": self.command.command,
                "command_id": self.command.command_id,
            },
        )
        return self.response

    def _headers(self, body: bytes) -> List[Tuple[str, str]]:
        return [
            ("User-Agent", self.settings.banner),
            ("Content-Length", str(len(body))),
            ("Content-Type", CONTENT_TYPE),
            ("Connection", "close"),
        ]


def _checked_result(result: Any) -> CommandObject:
    if not isinstance(result, CommandObject):
        raise InvalidCallbackResult(
            f"process callback returned {type(result).__name__}, expected CommandObject"
        )
    # params/variables can be mutated in place after assignment validation ran.
    try:
        return CommandObject.model_validate(result.model_dump())
    except ValidationError as exc:
        raise InvalidCallbackResult(f"process callback returned an invalid command: {exc}") from exc


def _encode(command: CommandObject) -> bytes:
    try:
        return encode_command(command)
    except (TypeError, ValueError) as exc:
        raise InvalidCallbackResult(f"command is not JSON serializable: {exc}") from exc


class RealtimeServer:
    """Reusable front for the transport. Holds settings only, never request data."""

    def __init__(self, settings: Optional[ServerSettings] = None):
        self.settings = settings or load_settings()

    def new_cycle(self) -> RequestCycle:
        return RequestCycle(self.settings)

    def handle(self, raw_body: RawBody, callback: Callback) -> HttpResponse:
        return self.new_cycle().run(raw_body, callback)


def handle(raw_body: RawBody, callback: Callback, settings: Optional[ServerSettings] = None) -> HttpResponse:
    return RealtimeServer(settings).handle(raw_body, callback)
