"""Dispatch of verified webhook events into the relay mailboxes"""

import logging
from typing import Any, Callable

from .mailbox import Cue, CueLog, Mailbox, Prediction
from .predictions import generate_prediction

logger = logging.getLogger(__name__)

CHAT_MESSAGE_SENT = "chat.message.sent"
DEFAULT_TRIGGER = "!zoltar give me a prediction"


class EventRelay:
    """Owns the prediction and cue mailboxes and routes events into them"""

    def __init__(
        self,
        trigger: str = DEFAULT_TRIGGER,
        predictor: Callable[[str], str] = generate_prediction,
    ):
        self.trigger = trigger
        self.predictor = predictor
        self.predictions: Mailbox[Prediction] = Mailbox()
        self.cues: Mailbox[Cue] = Mailbox()
        self.cue_log = CueLog()

    def dispatch(self, event_type: str, payload: Any) -> bool:
        """Route one verified event

        Unknown event types are acknowledged without side effects.

        Returns:
            True if a mailbox was written
        """
        if event_type == CHAT_MESSAGE_SENT:
            return self._on_chat_message(payload)

        logger.debug(f"Ignoring webhook event type {event_type!r}")
        return False

    def _on_chat_message(self, payload: Any) -> bool:
        if not isinstance(payload, dict):
            return False

        content = str(payload.get("content") or "")
        sender = payload.get("sender")
        username = (sender.get("username") if isinstance(sender, dict) else None) or "unknown"

        if self.trigger.lower() not in content.lower():
            return False

        prediction = Prediction(text=self.predictor(username))
        self.predictions.put(prediction)
        logger.info(f"Prediction for {username}: {prediction.text}")
        return True

    def record_cue(self, cue: str, data: Any = None) -> Cue:
        """Publish a scene cue and append it to the log

        ``data`` may be any JSON value; a falsy value is stored as {}.
        """
        entry = Cue(cue=cue, data=data or {})
        self.cues.put(entry)
        self.cue_log.append(entry)
        logger.info(f"Cue received: {cue}")
        return entry
