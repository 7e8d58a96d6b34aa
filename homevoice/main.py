"""homevoice main loop.

Reads one utterance per line from stdin, interprets it against the device
registry, applies it, and prints the response.

Usage:
    HOMEVOICE_DEVICES=devices.json python -m homevoice
"""

import sys
import time

from homevoice import executor
from homevoice.devices import DEFAULT_DEVICES_PATH, DeviceRegistry, load_devices


def log(msg):
    print(msg, flush=True)


def load_registry(path=DEFAULT_DEVICES_PATH):
    """Load devices into a fresh registry, logging what was found."""
    t0 = time.time()
    devices = load_devices(path)
    log(f"Loaded {len(devices)} device(s) from {path} ({time.time() - t0:.2f}s)")
    for d in devices:
        log(f"  {d.name}: {'ON' if d.state else 'OFF'}")
    return DeviceRegistry(devices)


def run_utterance(text, registry, source="[voice]"):
    """Dispatch one utterance and log the outcome. Returns the response."""
    log(f"  \"{text}\"")
    response, outcome = executor.dispatch(text, registry, source)
    log(f"  [{outcome}] {response}")
    return response


def main(path=DEFAULT_DEVICES_PATH, stream=None):
    stream = stream or sys.stdin
    try:
        registry = load_registry(path)
    except (OSError, ValueError) as e:
        log(f"Could not load devices: {e}")
        return 1

    log("Listening... type a command, Ctrl+D to quit.\n")
    try:
        for line in stream:
            text = line.strip()
            if not text:
                continue
            if text.lower() in ("quit", "exit"):
                break
            run_utterance(text, registry, source="[stdin]")
    except KeyboardInterrupt:
        pass
    log("\nShutting down.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
