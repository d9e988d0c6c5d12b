"""Handlers for note tools: create, search, get, edit, delete, move, folders, accounts."""

from typing import Any, Dict

from notesmcp.mcp.sanitize import sanitize_array, sanitize_string, validate_schema
from notesmcp.mcp.tool_definitions import (
    MAX_CONTENT_LENGTH,
    MAX_FOLDER_LENGTH,
    MAX_QUERY_LENGTH,
    MAX_TAG_LENGTH,
    MAX_TAGS,
    MAX_TITLE_LENGTH,
    TOOL_SCHEMAS,
)
from notesmcp.notes import NotesManager
from notesmcp.scripting.protocol import OperationResult, Outcome

NOTE_NOT_FOUND_MESSAGE = "Note not found"

# ---------------------------------------------------------------------------
# Validators
# ---------------------------------------------------------------------------


def validate_create_note(arguments: Dict[str, Any]) -> Dict[str, Any]:
    validate_schema("create-note", TOOL_SCHEMAS["create-note"], arguments)
    sanitized: Dict[str, Any] = {}
    sanitized["title"] = sanitize_string(arguments.get("title"), "title", MAX_TITLE_LENGTH)
    sanitized["content"] = sanitize_string(
        arguments.get("content"), "content", MAX_CONTENT_LENGTH
    )
    sanitized["tags"] = sanitize_array(arguments.get("tags"), "tags", MAX_TAG_LENGTH, MAX_TAGS)
    sanitized["folder"] = (
        sanitize_string(arguments.get("folder"), "folder", MAX_FOLDER_LENGTH, required=False)
        or None
    )
    return sanitized


def validate_search_notes(arguments: Dict[str, Any]) -> Dict[str, Any]:
    validate_schema("search-notes", TOOL_SCHEMAS["search-notes"], arguments)
    return {"query": sanitize_string(arguments.get("query"), "query", MAX_QUERY_LENGTH)}


def _validate_title_only(tool_name: str, arguments: Dict[str, Any]) -> Dict[str, Any]:
    validate_schema(tool_name, TOOL_SCHEMAS[tool_name], arguments)
    return {"title": sanitize_string(arguments.get("title"), "title", MAX_TITLE_LENGTH)}


def validate_get_note_content(arguments: Dict[str, Any]) -> Dict[str, Any]:
    return _validate_title_only("get-note-content", arguments)


def validate_delete_note(arguments: Dict[str, Any]) -> Dict[str, Any]:
    return _validate_title_only("delete-note", arguments)


def validate_edit_note(arguments: Dict[str, Any]) -> Dict[str, Any]:
    validate_schema("edit-note", TOOL_SCHEMAS["edit-note"], arguments)
    sanitized: Dict[str, Any] = {}
    sanitized["title"] = sanitize_string(arguments.get("title"), "title", MAX_TITLE_LENGTH)
    sanitized["newContent"] = sanitize_string(
        arguments.get("newContent"), "newContent", MAX_CONTENT_LENGTH
    )
    return sanitized


def validate_move_note(arguments: Dict[str, Any]) -> Dict[str, Any]:
    validate_schema("move-note", TOOL_SCHEMAS["move-note"], arguments)
    sanitized: Dict[str, Any] = {}
    sanitized["title"] = sanitize_string(arguments.get("title"), "title", MAX_TITLE_LENGTH)
    sanitized["targetFolder"] = sanitize_string(
        arguments.get("targetFolder"), "targetFolder", MAX_FOLDER_LENGTH
    )
    return sanitized


def validate_list_folders(arguments: Dict[str, Any]) -> Dict[str, Any]:
    validate_schema("list-folders", TOOL_SCHEMAS["list-folders"], arguments)
    return {}


def validate_list_accounts(arguments: Dict[str, Any]) -> Dict[str, Any]:
    validate_schema("list-accounts", TOOL_SCHEMAS["list-accounts"], arguments)
    return {}


# ---------------------------------------------------------------------------
# Handlers
# ---------------------------------------------------------------------------


class ToolFailure(Exception):
    """A note operation failed; the message is safe to show the caller."""


def _require_ok(result: OperationResult) -> None:
    if result.is_failed:
        raise ToolFailure(result.reason)


async def handle_create_note(args: Dict[str, Any], notes: NotesManager) -> str:
    folder = args.get("folder")
    result = await notes.create_note(
        args["title"], args["content"], tags=args.get("tags"), folder=folder
    )
    if result.outcome is Outcome.FOLDER_NOT_FOUND:
        raise ToolFailure("Specified folder not found")
    _require_ok(result)
    note = result.payload
    if folder:
        return f'✅ Note created successfully in folder "{folder}": "{note.title}"'
    return f'✅ Note created successfully: "{note.title}"'


async def handle_search_notes(args: Dict[str, Any], notes: NotesManager) -> str:
    result = await notes.search_notes(args["query"])
    _require_ok(result)
    found = result.payload
    if not found:
        return "No notes found matching your query"
    lines = [f"Found {len(found)} notes:"]
    lines.extend(f"• {note.title}" for note in found)
    return "\n".join(lines)


async def handle_get_note_content(args: Dict[str, Any], notes: NotesManager) -> str:
    result = await notes.get_note_content(args["title"])
    _require_ok(result)
    if result.outcome is Outcome.NOT_FOUND:
        return NOTE_NOT_FOUND_MESSAGE
    return result.payload or NOTE_NOT_FOUND_MESSAGE


async def handle_edit_note(args: Dict[str, Any], notes: NotesManager) -> str:
    result = await notes.edit_note(args["title"], args["newContent"])
    _require_ok(result)
    if result.outcome is Outcome.NOT_FOUND:
        raise ToolFailure(NOTE_NOT_FOUND_MESSAGE)
    return f'✅ Note "{args["title"]}" has been updated successfully'


async def handle_delete_note(args: Dict[str, Any], notes: NotesManager) -> str:
    result = await notes.delete_note(args["title"])
    _require_ok(result)
    if result.outcome is Outcome.NOT_FOUND:
        raise ToolFailure(NOTE_NOT_FOUND_MESSAGE)
    return f'✅ Note "{args["title"]}" has been deleted successfully'


async def handle_move_note(args: Dict[str, Any], notes: NotesManager) -> str:
    result = await notes.move_note(args["title"], args["targetFolder"])
    _require_ok(result)
    if result.outcome is Outcome.FOLDER_NOT_FOUND:
        raise ToolFailure("Target folder not found")
    if result.outcome is Outcome.NOT_FOUND:
        raise ToolFailure(NOTE_NOT_FOUND_MESSAGE)
    return f'✅ Note "{args["title"]}" has been moved to folder "{args["targetFolder"]}"'


async def handle_list_folders(args: Dict[str, Any], notes: NotesManager) -> str:
    result = await notes.list_folders()
    _require_ok(result)
    folders = result.payload
    if not folders:
        return "No folders found in the current account"
    lines = [f"Folders in {notes.account}:"]
    lines.extend(f"• {folder.name}" for folder in folders)
    return "\n".join(lines)


async def handle_list_accounts(args: Dict[str, Any], notes: NotesManager) -> str:
    result = await notes.list_accounts()
    _require_ok(result)
    return f"Available accounts: {', '.join(result.payload)}\nCurrent account: {notes.account}"


HANDLERS = {
    "create-note": handle_create_note,
    "search-notes": handle_search_notes,
    "get-note-content": handle_get_note_content,
    "edit-note": handle_edit_note,
    "delete-note": handle_delete_note,
    "move-note": handle_move_note,
    "list-folders": handle_list_folders,
    "list-accounts": handle_list_accounts,
}

VALIDATORS = {
    "create-note": validate_create_note,
    "search-notes": validate_search_notes,
    "get-note-content": validate_get_note_content,
    "edit-note": validate_edit_note,
    "delete-note": validate_delete_note,
    "move-note": validate_move_note,
    "list-folders": validate_list_folders,
    "list-accounts": validate_list_accounts,
}
