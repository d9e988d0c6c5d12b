"""Sentinel protocol between generated scripts and their decoders.

A script exits 0 both when it did its job and when the note or folder it
looked for does not exist, so the script body itself returns one of the
literals below. Command builders and decoders import them from here and
nowhere else.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, List, Optional

from notesmcp.scripting.executor import CommandOutcome

# === Sentinels ===

SUCCESS = "success"
CREATED = "created"
NOT_FOUND = "not found"
NOTE_NOT_FOUND = "note not found"
FOLDER_NOT_FOUND = "folder not found"

# Listing scripts join names with AppleScript's ``linefeed``.
LIST_SEPARATOR = "\n"

GENERIC_FAILURE = "Failed to execute command"


class Outcome(str, Enum):
    """Closed set of results a note operation can produce."""

    OK = "ok"
    NOT_FOUND = "not_found"
    FOLDER_NOT_FOUND = "folder_not_found"
    FAILED = "failed"


# Fixed checking order. The dependent entity (folder) is reported before
# the note itself.
SENTINEL_PRIORITY = (
    (FOLDER_NOT_FOUND, Outcome.FOLDER_NOT_FOUND),
    (NOTE_NOT_FOUND, Outcome.NOT_FOUND),
    (NOT_FOUND, Outcome.NOT_FOUND),
)


@dataclass(frozen=True)
class OperationResult:
    """Typed outcome of one note operation.

    ``payload`` is set only for ``Outcome.OK``; ``reason`` only for
    ``Outcome.FAILED`` and always holds a fixed, caller-safe message.
    """

    outcome: Outcome
    payload: Any = None
    reason: Optional[str] = None

    @classmethod
    def ok(cls, payload: Any = None) -> "OperationResult":
        return cls(Outcome.OK, payload=payload)

    @classmethod
    def not_found(cls) -> "OperationResult":
        return cls(Outcome.NOT_FOUND)

    @classmethod
    def folder_not_found(cls) -> "OperationResult":
        return cls(Outcome.FOLDER_NOT_FOUND)

    @classmethod
    def failed(cls, reason: str = GENERIC_FAILURE) -> "OperationResult":
        return cls(Outcome.FAILED, reason=reason)

    @property
    def is_ok(self) -> bool:
        return self.outcome is Outcome.OK

    @property
    def is_failed(self) -> bool:
        return self.outcome is Outcome.FAILED


def decode_outcome(
    outcome: CommandOutcome,
    *,
    sentinels: Iterable[str] = (),
    failure_message: str = GENERIC_FAILURE,
) -> OperationResult:
    """Map a ``CommandOutcome`` onto an ``OperationResult``.

    Args:
        outcome: What the executor reported.
        sentinels: The sentinel literals this operation's script can return.
            They are checked in ``SENTINEL_PRIORITY`` order whatever order
            they are given in.
        failure_message: Returned as the reason when the process layer
            failed. The executor's own error text is never passed on.

    Returns:
        ``failed`` for a process failure, the matching sentinel result, or
        ``ok`` carrying the script output.
    """
    if not outcome.success:
        return OperationResult.failed(failure_message)

    expected = set(sentinels)
    for sentinel, kind in SENTINEL_PRIORITY:
        if sentinel in expected and outcome.output == sentinel:
            if kind is Outcome.FOLDER_NOT_FOUND:
                return OperationResult.folder_not_found()
            return OperationResult.not_found()

    return OperationResult.ok(outcome.output)


def split_list_output(output: str) -> List[str]:
    """Split joined script output into trimmed, non-empty items."""
    if not output or not output.strip():
        return []
    return [item.strip() for item in output.split(LIST_SEPARATOR) if item.strip()]


def decode_list(
    outcome: CommandOutcome, *, failure_message: str = GENERIC_FAILURE
) -> OperationResult:
    """Decode a listing script. Empty output is an empty list, not ``[""]``."""
    if not outcome.success:
        return OperationResult.failed(failure_message)
    return OperationResult.ok(split_list_output(outcome.output))
