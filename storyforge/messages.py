"""Short text feedback shown to the player."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ClientMessageUrgency(Enum):
    """How a client message is presented; values are display names."""

    NORMAL = "Normal"
    POSITIVE = "Positive"
    NEGATIVE = "Negative"


@dataclass
class ClientMessage:
    """A line of text feedback with a lifetime in seconds and an urgency."""

    message: str = ""
    lifetime: float = 0.0
    urgency: ClientMessageUrgency = ClientMessageUrgency.NORMAL