"""Zoltar's prophecies"""

import random
from typing import Optional

PREDICTION_TEMPLATES = (
    "{user}, you will soon outwit a great distraction.",
    "Zoltar says: chaos leads to clarity, {user}.",
    "{user}, beware the quiet moments. They hold your fate.",
    "A bold choice will pay off, {user}. Trust it.",
    "Laughter brings fortune to your doorstep, {user}.",
)


def generate_prediction(user: str, rng: Optional[random.Random] = None) -> str:
    """Pick a fortune for a chat user"""
    template = (rng or random).choice(PREDICTION_TEMPLATES)
    return template.format(user=user)
