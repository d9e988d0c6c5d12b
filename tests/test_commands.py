"""Tests for generated AppleScript commands."""

import pytest

from notesmcp.scripting import commands
from notesmcp.scripting.protocol import (
    CREATED,
    FOLDER_NOT_FOUND,
    NOT_FOUND,
    NOTE_NOT_FOUND,
    SUCCESS,
)

HOSTILE = 'x" & do shell script "id" & "'
ESCAPED_HOSTILE = 'x\\" & do shell script \\"id\\" & \\"'


def literal_count(script: str) -> int:
    count = 0
    in_literal = escaped = False
    for ch in script:
        if in_literal:
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == '"':
                in_literal = False
        elif ch == '"':
            in_literal = True
            count += 1
    assert not in_literal
    return count


class TestCreateNoteScript:
    def test_default_account_variant(self):
        script = commands.create_note_script('My "Note"', "line 1\nline 2")
        assert script.startswith('tell application "Notes"')
        assert "tell account" not in script
        assert '{name:"My \\"Note\\"", body:"line 1<br>line 2"}' in script
        assert f'return "{CREATED}"' in script

    def test_account_variant(self):
        script = commands.create_note_script("Title", "Body", account="iCloud")
        assert 'tell account "iCloud"' in script
        assert f'return "{CREATED}"' in script

    def test_folder_variant_locates_folder_by_name(self):
        script = commands.create_note_script("Title", "Body", account="iCloud", folder="Work")
        assert 'if name of aFolder is "Work" then' in script
        assert f'return "{FOLDER_NOT_FOUND}"' in script
        assert "tell targetFolder" in script
        assert script.index(FOLDER_NOT_FOUND) < script.index(CREATED)

    def test_folder_requires_account(self):
        with pytest.raises(ValueError, match="account is required"):
            commands.create_note_script("Title", "Body", folder="Work")


class TestLocateByName:
    @pytest.mark.parametrize(
        "script, found, missing",
        [
            (commands.update_note_body_script("T", "B", "iCloud"), SUCCESS, NOT_FOUND),
            (commands.delete_note_script("T", "iCloud"), SUCCESS, NOT_FOUND),
            (commands.move_note_script("T", "F", "iCloud"), SUCCESS, NOTE_NOT_FOUND),
        ],
    )
    def test_explicit_sentinel_on_both_paths(self, script, found, missing):
        assert 'if name of aNote is "T" then' in script
        assert "exit repeat" in script
        assert f'return "{found}"' in script
        assert f'return "{missing}"' in script

    def test_get_note_returns_body_or_not_found(self):
        script = commands.get_note_body_script("T", "iCloud")
        assert "return body of aNote" in script
        assert f'return "{NOT_FOUND}"' in script

    def test_move_resolves_folder_before_note(self):
        script = commands.move_note_script("T", "Archive", "iCloud")
        assert script.index(FOLDER_NOT_FOUND) < script.index("every note")
        assert "move aNote to targetFolder" in script


class TestListings:
    @pytest.mark.parametrize(
        "script",
        [
            commands.list_accounts_script(),
            commands.list_folders_script("iCloud"),
            commands.search_notes_script("milk", "iCloud"),
        ],
    )
    def test_results_joined_with_linefeed(self, script):
        assert "set AppleScript's text item delimiters to linefeed" in script
        assert "return joinedText" in script

    def test_search_uses_body_contains(self):
        script = commands.search_notes_script("milk", "iCloud")
        assert 'notes whose body contains "milk"' in script


class TestInjection:
    @pytest.mark.parametrize(
        "build, literals",
        [
            (lambda s: commands.create_note_script(s, s), 4),
            (lambda s: commands.create_note_script(s, s, account=s, folder=s), 7),
            (lambda s: commands.search_notes_script(s, s), 4),
            (lambda s: commands.get_note_body_script(s, s), 4),
            (lambda s: commands.update_note_body_script(s, s, s), 6),
            (lambda s: commands.delete_note_script(s, s), 5),
            (lambda s: commands.list_folders_script(s), 3),
            (lambda s: commands.move_note_script(s, s, s), 7),
        ],
    )
    def test_hostile_text_stays_inside_literals(self, build, literals):
        script = build(HOSTILE)
        assert ESCAPED_HOSTILE in script
        assert HOSTILE not in script
        assert literal_count(script) == literals
