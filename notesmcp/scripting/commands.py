"""AppleScript command builders for Notes.

Each builder takes raw caller text and returns a complete script. Caller
text only ever reaches a script through ``_quote``, which sanitizes it
into a double-quoted literal. Scripts that look an entity up by name walk
the collection comparing names and return a sentinel on both the found and
the not-found path.
"""

from typing import Optional

from notesmcp.scripting.protocol import (
    CREATED,
    FOLDER_NOT_FOUND,
    NOT_FOUND,
    NOTE_NOT_FOUND,
    SUCCESS,
)
from notesmcp.scripting.sanitize import format_note_body, sanitize_for_applescript


def _quote(text: Optional[str]) -> str:
    return f'"{sanitize_for_applescript(text)}"'


def _in_account(account: str, body: str) -> str:
    return f"""tell application "Notes"
  tell account {_quote(account)}
{body}
  end tell
end tell"""


def _in_default_account(body: str) -> str:
    return f"""tell application "Notes"
{body}
end tell"""


def _return_joined(list_var: str) -> str:
    return f"""    set AppleScript's text item delimiters to linefeed
    set joinedText to {list_var} as text
    set AppleScript's text item delimiters to ""
    return joinedText"""


def _find_folder(folder: str) -> str:
    return f"""    set targetFolder to missing value
    repeat with aFolder in folders
      if name of aFolder is {_quote(folder)} then
        set targetFolder to aFolder
        exit repeat
      end if
    end repeat
    if targetFolder is missing value then
      return {_quote(FOLDER_NOT_FOUND)}
    end if"""


def _for_note_named(title: str, action: str, found: str, missing: str) -> str:
    return f"""    set foundNote to false
    repeat with aNote in (every note)
      if name of aNote is {_quote(title)} then
        {action}
        set foundNote to true
        exit repeat
      end if
    end repeat
    if foundNote then
      return {_quote(found)}
    else
      return {_quote(missing)}
    end if"""


def list_accounts_script() -> str:
    return _in_default_account(
        f"""  set nameList to {{}}
  repeat with anAccount in accounts
    set end of nameList to name of anAccount
  end repeat
{_return_joined("nameList")}"""
    )


def create_note_script(
    title: str,
    content: str,
    account: Optional[str] = None,
    folder: Optional[str] = None,
) -> str:
    """Build a note-creation script.

    With ``folder`` the script is scoped to ``account`` and reports
    ``FOLDER_NOT_FOUND`` when no folder has that exact name. Without an
    account it targets the application's default account.
    """
    properties = f"{{name:{_quote(title)}, body:{_quote(format_note_body(content))}}}"
    make_note = f"make new note with properties {properties}"

    if folder:
        if not account:
            raise ValueError("account is required when creating in a folder")
        return _in_account(
            account,
            f"""{_find_folder(folder)}
    tell targetFolder
      {make_note}
    end tell
    return {_quote(CREATED)}""",
        )

    if account:
        return _in_account(
            account,
            f"""    {make_note}
    return {_quote(CREATED)}""",
        )

    return _in_default_account(
        f"""  {make_note}
  return {_quote(CREATED)}"""
    )


def search_notes_script(query: str, account: str) -> str:
    return _in_account(
        account,
        f"""    set nameList to {{}}
    repeat with aNote in (notes whose body contains {_quote(query)})
      set end of nameList to name of aNote
    end repeat
{_return_joined("nameList")}""",
    )


def get_note_body_script(title: str, account: str) -> str:
    return _in_account(
        account,
        f"""    repeat with aNote in (every note)
      if name of aNote is {_quote(title)} then
        return body of aNote
      end if
    end repeat
    return {_quote(NOT_FOUND)}""",
    )


def update_note_body_script(title: str, content: str, account: str) -> str:
    return _in_account(
        account,
        _for_note_named(
            title,
            f"set body of aNote to {_quote(format_note_body(content))}",
            SUCCESS,
            NOT_FOUND,
        ),
    )


def delete_note_script(title: str, account: str) -> str:
    return _in_account(
        account,
        _for_note_named(title, "delete aNote", SUCCESS, NOT_FOUND),
    )


def list_folders_script(account: str) -> str:
    return _in_account(
        account,
        f"""    set nameList to {{}}
    repeat with aFolder in folders
      set end of nameList to name of aFolder
    end repeat
{_return_joined("nameList")}""",
    )


def move_note_script(title: str, folder: str, account: str) -> str:
    """Build a move script; the folder is resolved before the note."""
    return _in_account(
        account,
        f"""{_find_folder(folder)}
{_for_note_named(title, "move aNote to targetFolder", SUCCESS, NOTE_NOT_FOUND)}""",
    )
