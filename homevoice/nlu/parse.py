"""Result objects for the voice-command interpreter.

process_command(text, devices) returns a ParsedCommand (or None when the
utterance isn't understood). The executor reads it and decides what to do.
"""

from dataclasses import dataclass, field

SET_STATE = "set_state"
QUERY_STATE = "query_state"

ALL_TARGET = "all"  # sentinel target meaning every known device


@dataclass
class Tokens:
    words: list = field(default_factory=list)
    bigrams: list = field(default_factory=list)
    trigrams: list = field(default_factory=list)


@dataclass
class DeviceScore:
    device: object
    score: int


@dataclass
class Resolution:
    targets: list            # device names, or ["all"]
    ambiguous: bool = False
    clarification_prompt: str = None


@dataclass
class ParsedCommand:
    intent: str              # "set_state" or "query_state"
    targets: list            # device names, or ["all"]
    original_command: str
    state: str = None        # "ON" / "OFF" / None (set_state only)
    requires_clarification: bool = False
    clarification_prompt: str = None

    @property
    def targets_all(self):
        return self.targets == [ALL_TARGET]

    def to_dict(self):
        """Plain dict form; optional keys are left out when unset."""
        d = {
            "intent": self.intent,
            "targets": list(self.targets),
            "original_command": self.original_command,
        }
        if self.state is not None:
            d["state"] = self.state
        if self.requires_clarification:
            d["requires_clarification"] = True
            d["clarification_prompt"] = self.clarification_prompt
        return d
