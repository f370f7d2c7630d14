from __future__ import annotations

from collections.abc import Iterable

from lib_wasm_pack.application.run_command import Arg, run_command
from lib_wasm_pack.application.settings import RunnerSettings
from lib_wasm_pack.domain.output import ExecutionOutput
from lib_wasm_pack.domain.result import Result
from lib_wasm_pack.ports.command_runner import CommandRunnerPort


def run(
    args: Iterable[Arg],
    *,
    settings: RunnerSettings | None = None,
    runner: CommandRunnerPort | None = None,
) -> Result[ExecutionOutput]:
    """Run wasm-pack with the given arguments.

    The first argument is usually the subcommand; everything is passed
    through as-is::

        result = run(["build", "--out-dir", "../target/pkg", "my-crate"])
        output = result.unwrap()
    """
    settings = settings or RunnerSettings()
    return run_command(settings.executable, args, runner=runner)
