"""Escaping of untrusted text for AppleScript string literals.

Every generated command embeds caller text only inside double-quoted
AppleScript literals. ``sanitize_for_applescript`` is the single place
where that text is made safe for the position.

Single quotes are left as they are. Inside a double-quoted literal they
end nothing, and AppleScript has no escape form for them. Splicing them
out with the shell-style concatenation idiom would put a bare ``"`` into
the literal and end it early.
"""

from typing import Optional

# Applied in order. Backslash must come first or the escapes added by
# the later steps would themselves be escaped.
_ESCAPES = (
    ("\\", "\\\\"),
    ('"', '\\"'),
    # Single quotes are not structural inside a double-quoted literal and
    # AppleScript has no escape form for them, so they pass through.
    ("\n", "\\n"),
    ("\r", "\\r"),
    ("\t", "\\t"),
)


def sanitize_for_applescript(raw: Optional[str]) -> str:
    """Escape text so it can sit verbatim between ``"`` delimiters.

    The result cannot close the literal early or start a new statement.
    No length or character-class checks happen here; those belong to
    input validation.

    Args:
        raw: Untrusted text. ``None`` and ``""`` map to ``""``.

    Returns:
        The escaped text.
    """
    if not raw:
        return ""

    sanitized = raw
    for char, replacement in _ESCAPES:
        sanitized = sanitized.replace(char, replacement)
    return sanitized


def format_note_body(content: Optional[str]) -> str:
    """Convert plain-text content to the HTML line breaks Notes stores."""
    if not content:
        return ""
    return content.replace("\r\n", "\n").replace("\n", "<br>")
