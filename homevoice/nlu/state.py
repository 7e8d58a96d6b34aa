"""Desired on/off state for set_state commands."""

import re

_ON_PATTERNS = [
    re.compile(r"\b(?:turn|switch|set)\s+on\b"),
    re.compile(r"\bon\b"),
    re.compile(r"\b(?:activate|enable|start|open)\b"),
]

_OFF_PATTERNS = [
    re.compile(r"\b(?:turn|switch|set)\s+off\b"),
    re.compile(r"\boff\b"),
    re.compile(r"\b(?:deactivate|disable|stop|close|shut)\b"),
]


def extract_desired_state(command):
    """Return "ON", "OFF", or None if the command doesn't say.

    ON wins when both appear. None must be reported to the user, never
    treated as a default.
    """
    if any(p.search(command) for p in _ON_PATTERNS):
        return "ON"
    if any(p.search(command) for p in _OFF_PATTERNS):
        return "OFF"
    return None
