"""MCP tool schema definitions for note operations.

Each Tool() defines the name, description, and JSON Schema for one MCP tool.
Validators and handlers live in notesmcp.mcp.handlers.
"""

from mcp.types import Tool

MAX_TITLE_LENGTH = 255
MAX_CONTENT_LENGTH = 50000
MAX_TAG_LENGTH = 50
MAX_TAGS = 20
MAX_FOLDER_LENGTH = 100
MAX_QUERY_LENGTH = 100

# No path-like or control characters in names and queries.
SAFE_NAME_PATTERN = r'^[^<>:"|?*\x00-\x1F]+$'
TAG_PATTERN = r"^[\w\s\-]+$"

_TITLE = {
    "type": "string",
    "minLength": 1,
    "maxLength": MAX_TITLE_LENGTH,
    "pattern": SAFE_NAME_PATTERN,
    "description": "Exact title of the note",
}

TOOLS = [
    Tool(
        name="create-note",
        description="Create a new note in Apple Notes, optionally inside an existing folder.",
        inputSchema={
            "type": "object",
            "properties": {
                "title": {**_TITLE, "description": "Title of the new note"},
                "content": {
                    "type": "string",
                    "minLength": 1,
                    "maxLength": MAX_CONTENT_LENGTH,
                    "description": "Note content (plain text; newlines are kept)",
                },
                "tags": {
                    "type": "array",
                    "items": {
                        "type": "string",
                        "maxLength": MAX_TAG_LENGTH,
                        "pattern": TAG_PATTERN,
                    },
                    "maxItems": MAX_TAGS,
                    "description": "Tags to attach to the returned note",
                },
                "folder": {
                    "type": "string",
                    "maxLength": MAX_FOLDER_LENGTH,
                    "description": "Name of an existing folder to create the note in",
                },
            },
            "required": ["title", "content"],
            "additionalProperties": False,
        },
    ),
    Tool(
        name="search-notes",
        description="Search notes whose body contains the query. Returns matching titles.",
        inputSchema={
            "type": "object",
            "properties": {
                "query": {
                    "type": "string",
                    "minLength": 1,
                    "maxLength": MAX_QUERY_LENGTH,
                    "pattern": SAFE_NAME_PATTERN,
                    "description": "Text to search for",
                },
            },
            "required": ["query"],
            "additionalProperties": False,
        },
    ),
    Tool(
        name="get-note-content",
        description="Get the body of a note by its exact title.",
        inputSchema={
            "type": "object",
            "properties": {"title": _TITLE},
            "required": ["title"],
            "additionalProperties": False,
        },
    ),
    Tool(
        name="edit-note",
        description="Replace the body of a note, found by its exact title.",
        inputSchema={
            "type": "object",
            "properties": {
                "title": _TITLE,
                "newContent": {
                    "type": "string",
                    "minLength": 1,
                    "maxLength": MAX_CONTENT_LENGTH,
                    "description": "New note content",
                },
            },
            "required": ["title", "newContent"],
            "additionalProperties": False,
        },
    ),
    Tool(
        name="delete-note",
        description="Delete a note by its exact title.",
        inputSchema={
            "type": "object",
            "properties": {"title": _TITLE},
            "required": ["title"],
            "additionalProperties": False,
        },
    ),
    Tool(
        name="move-note",
        description="Move a note, found by its exact title, to another folder.",
        inputSchema={
            "type": "object",
            "properties": {
                "title": _TITLE,
                "targetFolder": {
                    "type": "string",
                    "minLength": 1,
                    "maxLength": MAX_FOLDER_LENGTH,
                    "description": "Name of the destination folder",
                },
            },
            "required": ["title", "targetFolder"],
            "additionalProperties": False,
        },
    ),
    Tool(
        name="list-folders",
        description="List the folders of the configured account.",
        inputSchema={"type": "object", "properties": {}, "additionalProperties": False},
    ),
    Tool(
        name="list-accounts",
        description="List the Notes accounts available on this machine.",
        inputSchema={"type": "object", "properties": {}, "additionalProperties": False},
    ),
]

TOOL_SCHEMAS = {tool.name: tool.inputSchema for tool in TOOLS}
