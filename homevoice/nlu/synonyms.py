"""Static synonym tables used by the device resolver.

Keys are canonical names; values are the phrasings matched (by substring)
against device names and normalized commands. Order matters for DEVICE_TYPES:
an "all ..." command picks the first category with a synonym in the command.
"""

DEVICE_TYPES = {
    "light": ("light", "lamp", "bulb", "lighting"),
    "fan": ("fan", "ventilator", "blower"),
    "outlet": ("outlet", "socket", "plug", "power point"),
}

LOCATIONS = {
    "living room": ("living room", "living", "lounge", "front room"),
    "kitchen": ("kitchen", "cook"),
    "bedroom": ("bedroom", "bed room", "room"),
    "garden": ("garden", "yard", "outdoor", "outside"),
}
