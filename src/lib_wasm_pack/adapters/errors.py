from dataclasses import dataclass


@dataclass
class AdapterError(Exception):
    message: str
    details: dict[str, str] | None = None
    hint: str | None = None
    cause: Exception | None = None

    def __str__(self) -> str:
        return self.message


class CommandNotFound(AdapterError):
    pass


class CommandStartError(AdapterError):
    pass
