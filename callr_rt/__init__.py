"""Server side of the real-time call-control webhook protocol."""

from callr_rt.protocol import CallEvent, CallStatus, CommandObject
from callr_rt.runtime.server import RealtimeServer, handle

__all__ = ["CallEvent", "CallStatus", "CommandObject", "RealtimeServer", "handle"]
