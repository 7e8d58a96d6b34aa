"""Voice-command interpreter: utterance + device snapshot -> ParsedCommand.

Each utterance is interpreted on its own; nothing is remembered between
calls, including a pending clarification question.
"""

from homevoice.nlu.intent import extract_intent
from homevoice.nlu.parse import ParsedCommand, SET_STATE
from homevoice.nlu.resolver import extract_target_devices
from homevoice.nlu.state import extract_desired_state
from homevoice.nlu.text import normalize, tokenize


def process_command(command, devices):
    """Interpret one utterance against a list of Devices.

    Args:
        command: Transcribed user input, as heard.
        devices: Device snapshot; only read, never modified.

    Returns:
        ParsedCommand, or None if no intent was recognized.
    """
    normalized = normalize(command)
    tokens = tokenize(normalized)

    intent = extract_intent(normalized)
    if intent is None:
        return None

    resolution = extract_target_devices(normalized, devices, tokens.words)
    state = extract_desired_state(normalized) if intent == SET_STATE else None

    result = ParsedCommand(
        intent=intent,
        targets=resolution.targets,
        original_command=command,
        state=state,
    )
    if resolution.ambiguous:
        result.requires_clarification = True
        result.clarification_prompt = resolution.clarification_prompt
    return result
