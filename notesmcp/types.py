"""
Value types returned by note operations.

Notes does not hand out stable identifiers through AppleScript, so ``id``
is generated per result and only identifies the returned object.
"""

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List


def utc_now() -> datetime:
    """Get the current time in UTC."""
    return datetime.now(timezone.utc)


def new_id() -> str:
    return str(uuid.uuid4())


@dataclass
class Note:
    title: str
    content: str = ""
    tags: List[str] = field(default_factory=list)
    id: str = field(default_factory=new_id)
    created: datetime = field(default_factory=utc_now)
    modified: datetime = field(default_factory=utc_now)


@dataclass
class Folder:
    name: str
    account: str
    id: str = field(default_factory=new_id)
