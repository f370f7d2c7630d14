from __future__ import annotations

from collections.abc import Sequence
import logging
import os
import shutil
import subprocess

from lib_wasm_pack.adapters.errors import CommandNotFound, CommandStartError
from lib_wasm_pack.ports.command_runner import CommandResult

logger = logging.getLogger(__name__)


def _decode(data: bytes | None) -> str:
    if not data:
        return ""
    return data.decode("utf-8", errors="replace")


def _is_path(program: str) -> bool:
    return os.sep in program or (os.altsep is not None and os.altsep in program)


class SubprocessCommandRunner:
    """Runs a program found on PATH and buffers both output streams.

    stdin is inherited from the caller. The child is always reaped and its
    pipes closed before ``run`` returns or raises.
    """

    def resolve(self, program: str) -> str:
        # Explicit paths are not searched; spawn reports permission errors.
        if _is_path(program):
            if not os.path.exists(program):
                raise CommandNotFound(
                    f"{program} does not exist",
                    details={"program": program},
                )
            return program
        executable = shutil.which(program)
        if executable is None:
            raise CommandNotFound(
                f"{program} not found on PATH",
                details={"program": program},
                hint="Check that the executable is installed and on PATH.",
            )
        return executable

    def run(self, program: str, args: Sequence[str]) -> CommandResult:
        executable = self.resolve(program)
        logger.debug("Resolved %s to %s", program, executable)
        try:
            completed = subprocess.run(
                [executable, *args],
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                check=False,
            )
        except (OSError, ValueError) as e:
            raise CommandStartError(
                f"{executable} could not be started: {e}",
                details={"program": program, "executable": executable},
                cause=e,
            )
        return CommandResult(
            exit_code=completed.returncode,
            stdout=_decode(completed.stdout),
            stderr=_decode(completed.stderr),
        )
