"""Command names understood by the platform and the parameters each one takes."""

from typing import Dict, Tuple

DIALOUT = "dialout"
PLAY = "play"
PLAY_RECORD = "play_record"
READ = "read"
RECORD = "record"
SEND_DTMF = "send_dtmf"
WAIT = "wait"
WAIT_FOR_SILENCE = "wait_for_silence"
HANGUP = "hangup"

# Order matches the setters on CommandObject.
COMMAND_PARAMS: Dict[str, Tuple[str, ...]] = {
    DIALOUT: ("ringtone", "cli", "targets", "whisper", "cdr_field"),
    PLAY: ("media_id",),
    PLAY_RECORD: ("media_file",),
    READ: ("media_id", "attempts", "max_digits", "timeout_ms"),
    RECORD: ("silence", "max_duration"),
    SEND_DTMF: ("digit", "timeout_ms", "duration_ms"),
    WAIT: ("wait",),
    WAIT_FOR_SILENCE: ("silence_ms", "iterations", "timeout_ms"),
    HANGUP: (),
}

STANDARD_COMMANDS = list(COMMAND_PARAMS)

COMMAND_ID_MIN = 100
COMMAND_ID_MAX = 999
