"""Handler registry for MCP tools.

Collects HANDLERS and VALIDATORS from the handler modules into unified dicts.
"""

from typing import Callable, Dict

from notesmcp.mcp.handlers.notes import HANDLERS as _NOTES_H
from notesmcp.mcp.handlers.notes import VALIDATORS as _NOTES_V

HANDLERS: Dict[str, Callable] = {
    **_NOTES_H,
}

VALIDATORS: Dict[str, Callable] = {
    **_NOTES_V,
}
