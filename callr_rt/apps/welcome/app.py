"""Greeting and voicemail demo application."""

from __future__ import annotations

from callr_rt.protocol.models import CallEvent, CommandObject

WELCOME_MEDIA = "welcome.wav"
MENU_MEDIA = "menu.wav"
RECORD_DIGIT = "1"


def handle(event: CallEvent) -> CommandObject:
    command = CommandObject.carry(event)
    if not event.is_active:
        return command.hangup()

    step = command.variables.get("step")
    if step is None:
        command.variables["step"] = "welcome"
        return command.play(WELCOME_MEDIA)

    if step == "welcome":
        command.variables["step"] = "menu"
        return command.read(MENU_MEDIA, 3, 1, 5000)

    if step == "menu" and event.command_result == RECORD_DIGIT:
        command.variables["step"] = "record"
        return command.record(3, 60)

    if step == "record" and not event.command_error and event.command_result:
        command.variables["step"] = "playback"
        return command.play_record(event.command_result)

    command.variables["step"] = "done"
    return command.hangup()
