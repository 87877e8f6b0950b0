"""Mailboxes and event routing for the Unreal relay"""

from .events import CHAT_MESSAGE_SENT, EventRelay
from .mailbox import Cue, CueLog, Mailbox, Prediction
from .predictions import generate_prediction

__all__ = [
    "CHAT_MESSAGE_SENT",
    "Cue",
    "CueLog",
    "EventRelay",
    "Mailbox",
    "Prediction",
    "generate_prediction",
]
