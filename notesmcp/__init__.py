"""
notesmcp - Apple Notes over the Model Context Protocol.

Note operations are carried out by generated AppleScript run through osascript.
"""

from .notes import NotesManager
from .scripting import CommandOutcome, ScriptExecutor, sanitize_for_applescript

try:
    from importlib.metadata import version

    __version__ = version("notesmcp")
except Exception:
    __version__ = "0.0.0"

__all__ = ["NotesManager", "ScriptExecutor", "CommandOutcome", "sanitize_for_applescript"]
