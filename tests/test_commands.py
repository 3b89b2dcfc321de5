from __future__ import annotations

import json
import typing

import pytest
from pydantic import ValidationError

from callr_rt.protocol.commands import COMMAND_PARAMS, STANDARD_COMMANDS
from callr_rt.protocol.models import CallEvent, CommandName, CommandObject
from callr_rt.runtime.serialization import encode_command

from conftest import call_event_payload


def wire(command):
    return json.loads(encode_command(command).decode("utf-8"))


def test_fresh_command_is_hangup():
    body = wire(CommandObject())
    assert list(body) == ["command_id", "command", "params", "variables"]
    assert body["command"] == "hangup"
    assert body["params"] == {}
    assert body["variables"] == {}
    assert isinstance(body["command_id"], int)
    assert 100 <= body["command_id"] <= 999


def test_play_sets_media_id():
    body = wire(CommandObject().play("hello"))
    assert body["command"] == "play"
    assert body["params"] == {"media_id": "hello"}


def test_last_setter_wins_and_params_are_replaced():
    command = CommandObject()
    command.read("menu.wav", 3, 1, 5000)
    command.play("hello")
    assert command.command == "play"
    assert command.params == {"media_id": "hello"}

    command.hangup()
    assert command.command == "hangup"
    assert command.params == {}


def test_every_setter_matches_declared_params():
    calls = {
        "dialout": ("ring.wav", "+33100000000", ["+33600000000"], "whisper.wav", "campaign"),
        "play": ("hello",),
        "play_record": ("/tmp/rec-1.wav",),
        "read": ("menu.wav", 3, 1, 5000),
        "record": (3, 60),
        "send_dtmf": ("12#", 250, 100),
        "wait": (2,),
        "wait_for_silence": (500, 3, 10),
        "hangup": (),
    }
    assert set(calls) == set(STANDARD_COMMANDS)
    for name, arguments in calls.items():
        command = getattr(CommandObject(), name)(*arguments)
        assert command.command == name
        assert list(command.params) == list(COMMAND_PARAMS[name])
        assert list(command.params.values()) == list(arguments)


def test_command_names_match_literal():
    assert list(typing.get_args(CommandName)) == STANDARD_COMMANDS


def test_missing_setter_argument_is_a_type_error():
    with pytest.raises(TypeError):
        CommandObject().record(3)


def test_numeric_ranges_are_not_checked():
    command = CommandObject().wait_for_silence(-1, 0, -500)
    assert command.params == {"silence_ms": -1, "iterations": 0, "timeout_ms": -500}


def test_assignment_is_validated():
    command = CommandObject()
    with pytest.raises(ValidationError):
        command.command = "dance"
    with pytest.raises(ValidationError):
        command.command_id = "abc"


def test_explicit_command_id_and_variables():
    command = CommandObject(command_id=42, variables={"step": "menu"})
    body = wire(command.wait(1))
    assert body == {"command_id": 42, "command": "wait", "params": {"wait": 1}, "variables": {"step": "menu"}}


def test_carry_copies_event_variables():
    event = CallEvent.model_validate(call_event_payload(variables={"step": "welcome", "tries": 2}))
    command = CommandObject.carry(event)
    command.variables["step"] = "menu"
    assert command.variables == {"step": "menu", "tries": 2}
    assert event.variables == {"step": "welcome", "tries": 2}


def test_carry_ignores_non_mapping_variables():
    event = CallEvent.model_validate(call_event_payload(variables=[]))
    assert CommandObject.carry(event).variables == {}


def test_non_ascii_params_are_encoded_as_utf8():
    raw = encode_command(CommandObject(command_id=100).play("Bonjour, café"))
    assert "café".encode("utf-8") in raw
