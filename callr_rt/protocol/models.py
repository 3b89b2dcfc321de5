
"""Protocol request and response models."""

from __future__ import annotations

import random
from enum import Enum
from typing import Any, Dict, List, Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, StrictInt

from callr_rt.protocol.commands import (
    COMMAND_ID_MAX,
    COMMAND_ID_MIN,
    DIALOUT,
    HANGUP,
    PLAY,
    PLAY_RECORD,
    READ,
    RECORD,
    SEND_DTMF,
    WAIT,
    WAIT_FOR_SILENCE,
)


class CallStatus(str, Enum):
    INCOMING_CALL = "INCOMING_CALL"
    UP = "UP"
    HANGUP = "HANGUP"
    BUSY = "BUSY"
    NOANSWER = "NOANSWER"


# Every one of these keys must be present in an inbound body, checked in this order.
CALL_EVENT_FIELDS: Tuple[str, ...] = (
    "app",
    "callid",
    "request_hash",
    "cli_name",
    "cli_number",
    "number",
    "command",
    "command_id",
    "command_result",
    "command_error",
    "date_started",
    "variables",
    "call_status",
)


class CallEvent(BaseModel):
    """Call state posted by the platform after each command completes.

    Values are kept exactly as they arrived on the wire. `request_hash` is
    `False` for outbound calls, `command_result` depends on the previous
    command and is left to the application to interpret.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    app: Any
    callid: Any
    request_hash: Any
    cli_name: Any
    cli_number: Any
    number: Any
    command: Any
    command_id: Any
    command_result: Any
    command_error: Any
    date_started: Any
    variables: Any
    call_status: Any

    @property
    def status(self) -> Optional[CallStatus]:
        try:
            return CallStatus(self.call_status)
        except ValueError:
            return None

    @property
    def is_inbound(self) -> bool:
        return self.request_hash is not False

    @property
    def is_active(self) -> bool:
        return self.status in (CallStatus.INCOMING_CALL, CallStatus.UP)


CommandName = Literal[
    "dialout",
    "play",
    "play_record",
    "read",
    "record",
    "send_dtmf",
    "wait",
    "wait_for_silence",
    "hangup",
]


def _new_command_id() -> int:
    return random.randint(COMMAND_ID_MIN, COMMAND_ID_MAX)


class CommandObject(BaseModel):
    """Next action for the call. Hangs up unless one of the setters is used.

    Each setter replaces both `command` and `params`; the last one called wins.
    Setters return the object itself so a callback can `return cmd.play(...)`.
    """

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    command_id: StrictInt = Field(default_factory=_new_command_id)
    command: CommandName = HANGUP
    params: Dict[str, Any] = Field(default_factory=dict)
    variables: Dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def carry(cls, event: CallEvent) -> "CommandObject":
        """Start a command that keeps the variables the event brought back."""
        variables = event.variables if isinstance(event.variables, dict) else {}
        return cls(variables=dict(variables))

    def _set(self, command: str, **params: Any) -> "CommandObject":
        self.command = command
        self.params = params
        return self

    def dialout(
        self,
        ringtone: str,
        cli: str,
        targets: List[Any],
        whisper: str,
        cdr_field: str,
    ) -> "CommandObject":
        """Call the targets and bridge the first leg that answers."""
        return self._set(
            DIALOUT,
            ringtone=ringtone,
            cli=cli,
            targets=targets,
            whisper=whisper,
            cdr_field=cdr_field,
        )

    def play(self, media_id: Any) -> "CommandObject":
        """Play a stored media, or say `media_id` through text-to-speech."""
        return self._set(PLAY, media_id=media_id)

    def play_record(self, media_file: str) -> "CommandObject":
        """Play back a temporary file produced by `record`."""
        return self._set(PLAY_RECORD, media_file=media_file)

    def read(self, media_id: Any, attempts: int, max_digits: int, timeout_ms: int) -> "CommandObject":
        """Play a prompt while collecting keypad digits."""
        return self._set(
            READ,
            media_id=media_id,
            attempts=attempts,
            max_digits=max_digits,
            timeout_ms=timeout_ms,
        )

    def record(self, silence: int, max_duration: int) -> "CommandObject":
        """Record the caller until '#', `silence` seconds of silence or `max_duration` seconds."""
        return self._set(RECORD, silence=silence, max_duration=max_duration)

    def send_dtmf(self, digit: str, timeout_ms: int, duration_ms: int) -> "CommandObject":
        return self._set(SEND_DTMF, digit=digit, timeout_ms=timeout_ms, duration_ms=duration_ms)

    def wait(self, wait: int) -> "CommandObject":
        return self._set(WAIT, wait=wait)

    def wait_for_silence(self, silence_ms: int, iterations: int, timeout_ms: int) -> "CommandObject":
        return self._set(
            WAIT_FOR_SILENCE,
            silence_ms=silence_ms,
            iterations=iterations,
            timeout_ms=timeout_ms,
        )

    def hangup(self) -> "CommandObject":
        return self._set(HANGUP)


class HttpResponse(BaseModel):
    """The single response handed back to the transport."""

    model_config = ConfigDict(frozen=True)

    status: str = "200 OK"
    headers: List[Tuple[str, str]]
    body: bytes

    @property
    def status_code(self) -> int:
        return int(self.status.split(" ", 1)[0])

    def header(self, name: str) -> Optional[str]:
        for key, value in self.headers:
            if key.lower() == name.lower():
                return value
        return None
