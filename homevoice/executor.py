"""Command executor: interprets an utterance and applies it to the registry.

Every utterance goes IDLE -> PARSING -> one of the outcomes below -> IDLE:
    rejected    not understood, no targets, no state, or every change failed
    clarifying  several devices tied; nothing is changed
    querying    report current state, nothing is changed
    setting     apply ON/OFF to each target

There is no pending-clarification state: the answer to "Which device did you
mean?" is just the next utterance, interpreted from scratch.
"""

import os
from datetime import datetime

from homevoice.nlu import process_command, QUERY_STATE, SET_STATE

REJECTED = "rejected"
CLARIFYING = "clarifying"
QUERYING = "querying"
SETTING = "setting"

# Log file: lives next to the homevoice package directory
_LOG_PATH = os.path.join(os.path.dirname(os.path.dirname(__file__)), "homevoice.log")


def _log_request(text, parsed, source="[voice]"):
    """Append a compact 2-line entry to the log file."""
    ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    if parsed is None:
        parse_line = "  -> none"
    else:
        parts = [parsed.intent, f"targets={parsed.targets!r}"]
        if parsed.state is not None:
            parts.append(f"state={parsed.state}")
        if parsed.requires_clarification:
            parts.append("clarify")
        parse_line = f"  -> {', '.join(parts)}"
    try:
        with open(_LOG_PATH, "a") as f:
            f.write(f"{ts} {source}  {text}\n{parse_line}\n")
    except OSError:
        pass


def _log_error(msg):
    """Append a failure line to the log file."""
    ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    try:
        with open(_LOG_PATH, "a") as f:
            f.write(f"{ts}  !! {msg}\n")
    except OSError:
        pass


def _on_off(device):
    return "ON" if device.is_on else "OFF"


def _lookup(parsed, registry):
    """Registry devices for the target names; "all" expands to everything."""
    if parsed.targets_all:
        return registry.snapshot()
    found = (registry.find(name) for name in parsed.targets)
    return [d for d in found if d is not None]


def _query(parsed, registry):
    devices = _lookup(parsed, registry)
    if not parsed.targets or (parsed.targets_all and not devices):
        return "No devices found to query.", REJECTED
    if not devices:
        return "Device not found.", REJECTED
    if len(devices) == 1:
        d = devices[0]
        return f"{d.name} is currently {_on_off(d)}", QUERYING
    statuses = ", ".join(f"{d.name}: {_on_off(d)}" for d in devices)
    return f"Device statuses: {statuses}", QUERYING


def _set(parsed, registry):
    state = parsed.state
    devices = _lookup(parsed, registry)
    if not parsed.targets or (parsed.targets_all and not devices):
        return "No devices found to control.", REJECTED
    if not devices:
        return "Device not found.", REJECTED

    # Each device is tried on its own; one failure doesn't stop the rest
    value = 1 if state == "ON" else 0
    changed, failed = [], []
    for d in devices:
        try:
            registry.set_state(d.id, value)
        except Exception as e:
            _log_error(f"set_state failed for {d.name!r}: {e!r}")
            failed.append(d)
        else:
            changed.append(d)

    if not changed:
        return "Failed to execute command.", REJECTED
    if failed:
        names = ", ".join(d.name for d in changed)
        missed = ", ".join(d.name for d in failed)
        return f"Turned {state}: {names}. Failed: {missed}", SETTING
    if parsed.targets_all:
        return f"Turned {state} all devices.", SETTING
    if len(changed) == 1:
        return f"{changed[0].name} turned {state}", SETTING
    names = ", ".join(d.name for d in changed)
    return f"Turned {state}: {names}", SETTING


def execute(parsed, registry):
    """Carry out a ParsedCommand. Returns (response, outcome)."""
    if parsed is None or parsed.intent is None:
        return "Could not understand the command. Please try again.", REJECTED

    if parsed.requires_clarification:
        return parsed.clarification_prompt, CLARIFYING

    if parsed.intent == QUERY_STATE:
        return _query(parsed, registry)

    if parsed.intent == SET_STATE:
        if parsed.state is None:
            return "Could not determine the desired state.", REJECTED
        return _set(parsed, registry)

    return "Could not understand the command. Please try again.", REJECTED


def dispatch(text, registry, source="[voice]"):
    """Interpret text against the registry's devices and run it.

    Args:
        text: Transcribed user input.
        registry: DeviceRegistry to read from and apply changes to.
        source: Source tag for logging, e.g. "[voice]" or "[stdin]".

    Returns:
        (response, outcome): response text and one of REJECTED, CLARIFYING,
        QUERYING, SETTING.
    """
    parsed = process_command(text, registry.snapshot())
    _log_request(text, parsed, source)
    return execute(parsed, registry)
