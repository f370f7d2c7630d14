from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, cast

from lib_wasm_pack.domain.errors import ExecutionError, ExecutionErrorKind

T = TypeVar("T")

COMMAND_NOT_STARTED_EXIT_CODE = 127


@dataclass(frozen=True)
class Result(Generic[T]):
    value: T | None = None
    error: ExecutionError | None = None

    def __post_init__(self) -> None:
        if self.value is not None and self.error is not None:
            raise ValueError("Result cannot carry both a value and an error")

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def exit_code(self) -> int:
        if self.error is None:
            return 0
        if self.error.kind == ExecutionErrorKind.FAILED_TO_START:
            return COMMAND_NOT_STARTED_EXIT_CODE
        return self.error.exit_code if self.error.exit_code is not None else 1

    def unwrap(self) -> T:
        if self.error is not None:
            raise self.error
        return cast(T, self.value)
