from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ExecutionOutput:
    stdout: str
    stderr: str
