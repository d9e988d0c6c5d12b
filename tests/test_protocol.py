"""Tests for the sentinel protocol and result decoding."""

from notesmcp.scripting.executor import CommandOutcome
from notesmcp.scripting.protocol import (
    FOLDER_NOT_FOUND,
    GENERIC_FAILURE,
    NOT_FOUND,
    NOTE_NOT_FOUND,
    OperationResult,
    Outcome,
    SENTINEL_PRIORITY,
    decode_list,
    decode_outcome,
    split_list_output,
)


def ok(output: str) -> CommandOutcome:
    return CommandOutcome(success=True, output=output, exit_code=0)


class TestDecodeOutcome:
    def test_payload_when_no_sentinel_matches(self):
        result = decode_outcome(ok("created"), sentinels=(FOLDER_NOT_FOUND,))
        assert result == OperationResult.ok("created")
        assert result.is_ok

    def test_not_found_sentinel(self):
        result = decode_outcome(ok(NOT_FOUND), sentinels=(NOT_FOUND,))
        assert result.outcome is Outcome.NOT_FOUND
        assert result.payload is None
        assert result.reason is None

    def test_sentinel_not_declared_is_payload(self):
        # A note body that happens to read "folder not found" is just content.
        result = decode_outcome(ok(FOLDER_NOT_FOUND), sentinels=(NOT_FOUND,))
        assert result == OperationResult.ok(FOLDER_NOT_FOUND)

    def test_folder_checked_before_note(self):
        assert [s for s, _ in SENTINEL_PRIORITY][:2] == [FOLDER_NOT_FOUND, NOTE_NOT_FOUND]

        result = decode_outcome(
            ok(FOLDER_NOT_FOUND), sentinels=(NOTE_NOT_FOUND, NOT_FOUND, FOLDER_NOT_FOUND)
        )
        assert result.outcome is Outcome.FOLDER_NOT_FOUND

        result = decode_outcome(ok(NOTE_NOT_FOUND), sentinels=(NOTE_NOT_FOUND, FOLDER_NOT_FOUND))
        assert result.outcome is Outcome.NOT_FOUND

    def test_process_failure_hides_raw_error(self):
        outcome = CommandOutcome(success=False, output="", error="ENOENT")
        result = decode_outcome(outcome, sentinels=(NOT_FOUND,))
        assert result == OperationResult.failed("Failed to execute command")
        assert result.reason == GENERIC_FAILURE
        assert "ENOENT" not in repr(result)

    def test_failure_wins_over_sentinel_text(self):
        outcome = CommandOutcome(success=False, output=NOT_FOUND, error="x", exit_code=1)
        result = decode_outcome(outcome, sentinels=(NOT_FOUND,), failure_message="Failed to delete note")
        assert result.is_failed
        assert result.reason == "Failed to delete note"

    def test_timeout_is_failure(self):
        outcome = CommandOutcome(success=False, output="partial", error="timed out", timed_out=True)
        assert decode_outcome(outcome).is_failed


class TestDecodeList:
    def test_empty_output_is_empty_list(self):
        assert decode_list(ok("")) == OperationResult.ok([])

    def test_whitespace_output_is_empty_list(self):
        assert decode_list(ok("  \n ")).payload == []

    def test_items_are_trimmed_and_blank_items_dropped(self):
        result = decode_list(ok(" Groceries \n\nIdeas, big and small\n  Work"))
        assert result.payload == ["Groceries", "Ideas, big and small", "Work"]

    def test_failure(self):
        outcome = CommandOutcome(success=False, output="", error="-1743 not authorized")
        result = decode_list(outcome, failure_message="Failed to list folders")
        assert result == OperationResult.failed("Failed to list folders")

    def test_split_list_output_single_item(self):
        assert split_list_output("Notes") == ["Notes"]
