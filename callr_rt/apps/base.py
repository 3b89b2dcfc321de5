"""Application contract for the real-time server.

An application is a callable taking the decoded CallEvent and returning the
CommandObject for the next step. It must not write to the transport or keep
per-call state of its own: whatever it needs on the next request goes in
`CommandObject.variables`, which the platform sends back verbatim.
"""

from __future__ import annotations

from typing import Protocol

from callr_rt.protocol.models import CallEvent, CommandObject


class CallApplication(Protocol):
    def __call__(self, event: CallEvent) -> CommandObject:
        ...
