from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class CommandResult:
    exit_code: int
    stdout: str
    stderr: str


class CommandRunnerPort(Protocol):
    def run(self, program: str, args: Sequence[str]) -> CommandResult: ...
