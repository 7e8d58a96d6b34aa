"""Device snapshot and an in-memory registry.

The real device table lives in the dashboard's backend; this registry stands
in for it so utterances can be dispatched locally. Device files are JSON
lists like:

    [{"id": 1, "name": "Kitchen Fan", "state": 0}, ...]
"""

import json
import os
from dataclasses import dataclass, replace

# Devices file: env override, else devices.json next to the homevoice package
DEFAULT_DEVICES_PATH = os.environ.get(
    "HOMEVOICE_DEVICES",
    os.path.join(os.path.dirname(os.path.dirname(__file__)), "devices.json"))


@dataclass
class Device:
    id: object
    name: str
    state: int = 0    # 1 = on, 0 = off

    @property
    def is_on(self):
        return bool(self.state)


def load_devices(path=DEFAULT_DEVICES_PATH):
    """Read a device list from a JSON file. Raises ValueError if malformed."""
    with open(path) as f:
        try:
            raw = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"{path}: not valid JSON ({e})") from e

    if not isinstance(raw, list):
        raise ValueError(f"{path}: expected a list of devices")

    devices = []
    for i, entry in enumerate(raw):
        if not isinstance(entry, dict) or "id" not in entry or "name" not in entry:
            raise ValueError(f"{path}: device #{i} needs an id and a name")
        devices.append(Device(id=entry["id"], name=str(entry["name"]),
                              state=1 if entry.get("state") else 0))
    return devices


class DeviceRegistry:
    """Holds the current devices; the interpreter only ever sees snapshots."""

    def __init__(self, devices=()):
        self._devices = {d.id: replace(d) for d in devices}

    def snapshot(self):
        """Copies of all devices, in insertion order."""
        return [replace(d) for d in self._devices.values()]

    def find(self, name):
        """Device with exactly this name, or None."""
        for d in self._devices.values():
            if d.name == name:
                return replace(d)
        return None

    def set_state(self, device_id, value):
        """Set a device on (1) or off (0). Raises KeyError for unknown ids."""
        if device_id not in self._devices:
            raise KeyError(device_id)
        self._devices[device_id].state = 1 if value else 0

    def __len__(self):
        return len(self._devices)
