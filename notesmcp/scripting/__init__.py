"""AppleScript generation, execution and result decoding."""

from notesmcp.scripting.executor import CommandOutcome, ScriptExecutor
from notesmcp.scripting.protocol import (
    OperationResult,
    Outcome,
    decode_list,
    decode_outcome,
)
from notesmcp.scripting.sanitize import format_note_body, sanitize_for_applescript

__all__ = [
    "CommandOutcome",
    "ScriptExecutor",
    "OperationResult",
    "Outcome",
    "decode_list",
    "decode_outcome",
    "format_note_body",
    "sanitize_for_applescript",
]
