"""
Closest kitchen request handling and Lambda entrypoint
"""

from .lambda_function import handler
from .responses import Message, Payload, build_response
from .service import ClosestKitchenHandler, handle_event

__all__ = [
    "handler",
    "ClosestKitchenHandler",
    "handle_event",
    "Message",
    "Payload",
    "build_response",
]
