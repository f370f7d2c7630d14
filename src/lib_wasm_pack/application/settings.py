from dataclasses import dataclass

DEFAULT_EXECUTABLE = "wasm-pack"


@dataclass(frozen=True)
class RunnerSettings:
    executable: str = DEFAULT_EXECUTABLE
