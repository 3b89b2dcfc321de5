"""Wire encoding for outgoing command objects."""

from __future__ import annotations

import json
from typing import Any

from callr_rt.protocol.models import CommandObject

CONTENT_TYPE = "application/json; charset=utf-8"


def compact_json_dumps(obj: Any, ensure_ascii: bool = False) -> str:
    return json.dumps(obj, ensure_ascii=ensure_ascii, allow_nan=False, separators=(",", ":"))


def encode_command(command: CommandObject) -> bytes:
    """Encode the four command fields in declaration order.

    Raises ValueError for NaN or infinite floats, which have no JSON form.
    """
    payload = command.model_dump()
    try:
        return compact_json_dumps(payload).encode("utf-8")
    except UnicodeEncodeError:
        # Lone surrogates have no UTF-8 form; \u escapes carry them verbatim.
        return compact_json_dumps(payload, ensure_ascii=True).encode("ascii")
