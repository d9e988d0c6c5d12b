"""Note operations against the Notes application.

``NotesManager`` turns each operation into one or more generated scripts,
runs them through a ``ScriptExecutor`` and decodes the output with the
sentinel protocol. Every method returns an ``OperationResult``; process
failures and missing notes are results, not exceptions.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from notesmcp.scripting import commands
from notesmcp.scripting.executor import ScriptExecutor
from notesmcp.scripting.protocol import (
    FOLDER_NOT_FOUND,
    GENERIC_FAILURE,
    NOT_FOUND,
    NOTE_NOT_FOUND,
    OperationResult,
    decode_list,
    decode_outcome,
)
from notesmcp.types import Folder, Note

logger = logging.getLogger(__name__)

DEFAULT_ACCOUNT = "iCloud"


@dataclass
class CommandPlan:
    """Ordered script variants for one operation.

    Variants are tried in order. The plan stops at the first result that is
    not a process failure, so a success or a sentinel (such as a missing
    folder) ends it. If every variant fails, ``failure_message`` is reported.
    """

    name: str
    variants: List[str] = field(default_factory=list)
    sentinels: tuple = ()
    failure_message: str = GENERIC_FAILURE

    async def run(self, executor: ScriptExecutor) -> OperationResult:
        for attempt, script in enumerate(self.variants, 1):
            outcome = await executor.execute(script)
            result = decode_outcome(
                outcome, sentinels=self.sentinels, failure_message=self.failure_message
            )
            logger.debug(
                f"{self.name} attempt {attempt}/{len(self.variants)}: {result.outcome.value}"
            )
            if not result.is_failed:
                return result
        return OperationResult.failed(self.failure_message)


class NotesManager:
    """Creates, finds, edits, deletes and moves notes in one Notes account."""

    def __init__(self, executor: Optional[ScriptExecutor] = None, account: str = DEFAULT_ACCOUNT):
        self.executor = executor or ScriptExecutor()
        self.account = account

    async def list_accounts(self) -> OperationResult:
        outcome = await self.executor.execute(commands.list_accounts_script())
        return decode_list(outcome, failure_message="Failed to list accounts")

    def creation_plan(
        self, title: str, content: str, folder: Optional[str] = None
    ) -> CommandPlan:
        """Choose the script variants used to create a note.

        A folder is always resolved inside the configured account. Without
        one, the application's default account is tried before the
        configured account.
        """
        if folder:
            variants = [commands.create_note_script(title, content, self.account, folder)]
        else:
            variants = [
                commands.create_note_script(title, content),
                commands.create_note_script(title, content, self.account),
            ]
        return CommandPlan(
            name="create_note",
            variants=variants,
            sentinels=(FOLDER_NOT_FOUND,),
            failure_message="Failed to create note",
        )

    async def create_note(
        self,
        title: str,
        content: str,
        tags: Optional[List[str]] = None,
        folder: Optional[str] = None,
    ) -> OperationResult:
        result = await self.creation_plan(title, content, folder).run(self.executor)
        if not result.is_ok:
            return result
        return OperationResult.ok(Note(title=title, content=content, tags=list(tags or [])))

    async def search_notes(self, query: str) -> OperationResult:
        outcome = await self.executor.execute(
            commands.search_notes_script(query, self.account)
        )
        result = decode_list(outcome, failure_message="Failed to search notes")
        if not result.is_ok:
            return result
        return OperationResult.ok([Note(title=title) for title in result.payload])

    async def get_note_content(self, title: str) -> OperationResult:
        outcome = await self.executor.execute(
            commands.get_note_body_script(title, self.account)
        )
        return decode_outcome(
            outcome, sentinels=(NOT_FOUND,), failure_message="Failed to get note content"
        )

    async def edit_note(self, title: str, new_content: str) -> OperationResult:
        outcome = await self.executor.execute(
            commands.update_note_body_script(title, new_content, self.account)
        )
        result = decode_outcome(
            outcome, sentinels=(NOT_FOUND,), failure_message="Failed to update note"
        )
        if not result.is_ok:
            return result
        return OperationResult.ok(Note(title=title, content=new_content))

    async def delete_note(self, title: str) -> OperationResult:
        outcome = await self.executor.execute(commands.delete_note_script(title, self.account))
        result = decode_outcome(
            outcome, sentinels=(NOT_FOUND,), failure_message="Failed to delete note"
        )
        if not result.is_ok:
            return result
        return OperationResult.ok()

    async def list_folders(self) -> OperationResult:
        outcome = await self.executor.execute(commands.list_folders_script(self.account))
        result = decode_list(outcome, failure_message="Failed to list folders")
        if not result.is_ok:
            return result
        return OperationResult.ok(
            [Folder(name=name, account=self.account) for name in result.payload]
        )

    async def move_note(self, title: str, target_folder: str) -> OperationResult:
        outcome = await self.executor.execute(
            commands.move_note_script(title, target_folder, self.account)
        )
        result = decode_outcome(
            outcome,
            sentinels=(FOLDER_NOT_FOUND, NOTE_NOT_FOUND),
            failure_message="Failed to move note",
        )
        if not result.is_ok:
            return result
        return OperationResult.ok()
