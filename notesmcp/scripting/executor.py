"""AppleScript executor.

Runs a generated script through the ``osascript`` interpreter as a child
process and reports a ``CommandOutcome``. The script is passed as one argv
element and no shell is involved, so nothing re-tokenizes it on the way in.
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import List, Optional

logger = logging.getLogger(__name__)

DEFAULT_INTERPRETER = "osascript"
DEFAULT_TIMEOUT = 10.0
_READ_CHUNK = 4096


@dataclass(frozen=True)
class CommandOutcome:
    """Result of one script invocation."""

    success: bool
    output: str
    error: Optional[str] = None
    exit_code: Optional[int] = None
    timed_out: bool = False


async def _drain(stream: Optional[asyncio.StreamReader], chunks: List[bytes]) -> None:
    if stream is None:
        return
    while True:
        chunk = await stream.read(_READ_CHUNK)
        if not chunk:
            return
        chunks.append(chunk)


def _decode(chunks: List[bytes]) -> str:
    return b"".join(chunks).decode("utf-8", errors="replace").strip()


class ScriptExecutor:
    """Spawns the interpreter once per script under a wall-clock bound."""

    def __init__(
        self,
        interpreter: str = DEFAULT_INTERPRETER,
        timeout: float = DEFAULT_TIMEOUT,
        script_flag: str = "-e",
    ):
        if timeout <= 0:
            raise ValueError(f"timeout must be > 0, got {timeout}")
        self.interpreter = interpreter
        self.timeout = timeout
        self.script_flag = script_flag

    def build_argv(self, script: str) -> List[str]:
        return [self.interpreter, self.script_flag, script]

    async def execute(self, script: str) -> CommandOutcome:
        """Run ``script`` and map the process result to a ``CommandOutcome``.

        Never raises for process-level problems: spawn failures (including
        arguments the OS cannot encode), timeouts and non-zero exits all come
        back as ``success=False``. If the awaiting task is cancelled the child
        is killed and reaped before ``CancelledError`` propagates.
        """
        try:
            process = await asyncio.create_subprocess_exec(
                *self.build_argv(script),
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except (OSError, ValueError) as e:
            logger.warning(f"Could not start {self.interpreter}: {e}")
            return CommandOutcome(
                success=False,
                output="",
                error=f"Failed to execute AppleScript: {e}",
            )

        stdout_chunks: List[bytes] = []
        stderr_chunks: List[bytes] = []
        try:
            await asyncio.wait_for(
                self._communicate(process, stdout_chunks, stderr_chunks),
                timeout=self.timeout,
            )
        except asyncio.CancelledError:
            await self._kill(process)
            raise
        except asyncio.TimeoutError:
            await self._kill(process)
            partial = _decode(stdout_chunks)
            logger.warning(
                f"{self.interpreter} timed out after {self.timeout}s",
                extra={"partial_output_chars": len(partial)},
            )
            return CommandOutcome(
                success=False,
                output=partial,
                error=f"AppleScript timed out after {self.timeout:g} seconds",
                timed_out=True,
            )

        code = process.returncode
        output = _decode(stdout_chunks)
        error_output = _decode(stderr_chunks)

        if code == 0:
            return CommandOutcome(success=True, output=output, exit_code=0)

        logger.warning(
            f"{self.interpreter} exited with code {code}",
            extra={"stderr": error_output},
        )
        return CommandOutcome(
            success=False,
            output="",
            error=error_output or f"AppleScript exited with code {code}",
            exit_code=code,
        )

    @staticmethod
    async def _communicate(
        process: asyncio.subprocess.Process,
        stdout_chunks: List[bytes],
        stderr_chunks: List[bytes],
    ) -> None:
        await asyncio.gather(
            _drain(process.stdout, stdout_chunks),
            _drain(process.stderr, stderr_chunks),
            process.wait(),
        )

    @staticmethod
    async def _kill(process: asyncio.subprocess.Process) -> None:
        try:
            process.kill()
        except ProcessLookupError:
            pass
        await process.wait()
