from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from lib_wasm_pack.domain.output import ExecutionOutput


class ExecutionErrorKind(str, Enum):
    FAILED_TO_START = "failed_to_start"
    EXITED_WITH_FAILURE = "exited_with_failure"


@dataclass(eq=False)
class ExecutionError(Exception):
    """A failed invocation.

    ``output`` is only present for ``EXITED_WITH_FAILURE``: a process that
    never started has nothing to report.
    """

    kind: ExecutionErrorKind
    message: str
    output: ExecutionOutput | None = None
    exit_code: int | None = None
    cause: Exception | None = None

    @classmethod
    def failed_to_start(cls, program: str, cause: Exception) -> ExecutionError:
        return cls(
            kind=ExecutionErrorKind.FAILED_TO_START,
            message=f"Couldn't invoke {program}: {cause}",
            cause=cause,
        )

    @classmethod
    def exited_with_failure(
        cls, program: str, exit_code: int, output: ExecutionOutput
    ) -> ExecutionError:
        return cls(
            kind=ExecutionErrorKind.EXITED_WITH_FAILURE,
            message=f"{program} returned an error (exit status {exit_code})",
            output=output,
            exit_code=exit_code,
        )

    @property
    def stdout(self) -> str:
        return self.output.stdout if self.output is not None else ""

    @property
    def stderr(self) -> str:
        return self.output.stderr if self.output is not None else ""

    def __str__(self) -> str:
        if self.output is None:
            return self.message
        return (
            f"{self.message}\n\n"
            f"stdout:\n{self.output.stdout}\n\n"
            f"stderr:\n{self.output.stderr}\n"
        )
