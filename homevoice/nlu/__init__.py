from homevoice.nlu.interpreter import process_command
from homevoice.nlu.parse import (
    ALL_TARGET, QUERY_STATE, SET_STATE, ParsedCommand,
)

__all__ = [
    "process_command", "ParsedCommand",
    "ALL_TARGET", "QUERY_STATE", "SET_STATE",
]
