"""Device resolution: which of the known devices does a command refer to?

Tried in order, first hit wins:
    1. "all" / "every" / "everything", optionally narrowed by a device type
       ("turn off all the lamps")
    2. device names appearing verbatim in the command
    3. relevance scoring (see score_device); a tie at the top is ambiguous
       and comes back with a clarification prompt
"""

import re

from homevoice.nlu.parse import ALL_TARGET, DeviceScore, Resolution
from homevoice.nlu.synonyms import DEVICE_TYPES, LOCATIONS
from homevoice.nlu.text import normalize

# Scoring weights
EXACT_NAME_SCORE = 100
EXACT_WORD_SCORE = 50
LOCATION_SCORE = 40
PARTIAL_WORD_SCORE = 30
DEVICE_TYPE_SCORE = 25

_ALL_RE = re.compile(r"\b(?:all|every|everything)\b")


def _device_key(device):
    return normalize(device.name)


def _find_type(command, device_types):
    """First device category with a synonym in the command, or None."""
    for dtype, synonyms in device_types.items():
        if any(s in command for s in synonyms):
            return dtype
    return None


def _matches_type(name, dtype, device_types):
    return any(s in name for s in device_types.get(dtype, ()))


def format_device_list(names):
    """Join names as "A or B?" (two) or "A, B, or C?" (three or more)."""
    if len(names) == 2:
        return f"{names[0]} or {names[1]}?"
    return f"{', '.join(names[:-1])}, or {names[-1]}?"


def score_device(device, command, words=None,
                 device_types=DEVICE_TYPES, locations=LOCATIONS):
    """Relevance of one device to a normalized command (0 = unrelated).

    Contributions add up:
        +50 per word of the device name found as a whole command word
        +30 per (name word, command word) pair where one contains the other
        +25 per device category of the name whose synonym is in the command
        +40 per location in the name whose synonym is in the command
    A name found verbatim scores 100 outright.
    """
    name = _device_key(device)
    if not name:
        return 0
    if name in command:
        return EXACT_NAME_SCORE

    if words is None:
        words = command.split()
    name_words = name.split()
    score = 0

    for nw in name_words:
        if nw in words:
            score += EXACT_WORD_SCORE

    for nw in name_words:
        for cw in words:
            if nw != cw and (cw in nw or nw in cw):
                score += PARTIAL_WORD_SCORE

    for dtype, synonyms in device_types.items():
        if _matches_type(name, dtype, device_types):
            if any(s in command for s in synonyms):
                score += DEVICE_TYPE_SCORE

    for location, synonyms in locations.items():
        if location in name:
            if any(s in command for s in synonyms):
                score += LOCATION_SCORE

    return score


def extract_target_devices(command, devices, words=None,
                           device_types=DEVICE_TYPES, locations=LOCATIONS):
    """Resolve a normalized command against a device snapshot.

    Returns a Resolution. Empty targets means nothing matched.
    """
    if _ALL_RE.search(command):
        dtype = _find_type(command, device_types)
        if dtype is None:
            return Resolution(targets=[ALL_TARGET])
        return Resolution(targets=[
            d.name for d in devices
            if _matches_type(_device_key(d), dtype, device_types)
        ])

    exact = [d.name for d in devices
             if _device_key(d) and _device_key(d) in command]
    if exact:
        return Resolution(targets=exact)

    scored = [DeviceScore(device=d,
                          score=score_device(d, command, words,
                                             device_types, locations))
              for d in devices]
    relevant = [ds for ds in scored if ds.score > 0]
    if not relevant:
        return Resolution(targets=[])

    relevant.sort(key=lambda ds: -ds.score)
    top_score = relevant[0].score
    top = [ds for ds in relevant if ds.score == top_score]

    # A tie at EXACT_NAME_SCORE can't come out of scoring (verbatim names
    # are caught above); the guard stays so the two paths agree.
    if len(top) > 1 and top_score < EXACT_NAME_SCORE:
        names = [ds.device.name for ds in top]
        return Resolution(
            targets=names,
            ambiguous=True,
            clarification_prompt=f"Which device did you mean? {format_device_list(names)}",
        )

    return Resolution(targets=[relevant[0].device.name])


# --- Standalone test ---

if __name__ == "__main__":
    from homevoice.devices import Device

    devices = [
        Device(1, "Living Room Light"),
        Device(2, "Kitchen Fan"),
        Device(3, "Garden Outlet"),
        Device(4, "Light 1"),
        Device(5, "Light 2"),
    ]
    tests = [
        "turn on all lights",
        "turn on everything",
        "turn off the kitchen fan",
        "turn on the light",
        "switch off the lounge lamp",
        "turn on",
    ]
    for t in tests:
        r = extract_target_devices(normalize(t), devices)
        print(f"  {t!r:35s} => {r.targets} ambiguous={r.ambiguous}")
        if r.ambiguous:
            print(f"  {'':35s}    {r.clarification_prompt}")
