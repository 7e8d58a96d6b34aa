"""Intent classification: is the user asking about devices or changing them?

Handles:
    "is the kitchen fan on"          -> query_state
    "what is the kitchen fan status" -> query_state
    "turn off the living room light" -> set_state
    "toggle the lamp"                -> set_state

Query patterns are tried first: "is the light on" would otherwise hit the
bare "on" set pattern.
"""

import re

from homevoice.nlu.parse import QUERY_STATE, SET_STATE

_QUERY_PATTERNS = [
    re.compile(r"\b(?:is|are)\s+.*\s+(?:on|off|running|active)\b"),
    re.compile(r"\b(?:what\s+is|whats|what\s+s)\s+.*\s+(?:state|status)\b"),
    re.compile(r"\b(?:status|state)\s+of\b"),
    re.compile(r"\b(?:check|show|tell\s+me)\b"),
]

_SET_PATTERNS = [
    re.compile(r"\b(?:turn|switch|set)\s+(?:on|off)\b"),
    re.compile(r"\b(?:activate|deactivate|enable|disable)\b"),
    re.compile(r"\b(?:open|close|start|stop|shut)\b"),
    re.compile(r"\bpower\s+(?:on|off)\b"),
    re.compile(r"\b(?:on|off)\b"),
    re.compile(r"\b(?:toggle|flip|switch)\b"),
]

_INTENT_PATTERNS = [
    (QUERY_STATE, _QUERY_PATTERNS),
    (SET_STATE, _SET_PATTERNS),
]


def extract_intent(command):
    """Classify a normalized command. Returns an intent name or None."""
    for intent, patterns in _INTENT_PATTERNS:
        for pattern in patterns:
            if pattern.search(command):
                return intent
    return None


# --- Standalone test ---

if __name__ == "__main__":
    tests = [
        "is the kitchen fan on",
        "what is the kitchen fan status",
        "whats the state of the lamp",
        "show me the devices",
        "turn on the light",
        "power off everything",
        "toggle the fan",
        "hello there",
    ]
    for t in tests:
        print(f"  {t!r:40s} => {extract_intent(t)}")
