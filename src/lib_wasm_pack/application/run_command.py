from __future__ import annotations

from collections.abc import Iterable
import logging
import os

from lib_wasm_pack.adapters.command_runner.subprocess_runner import SubprocessCommandRunner
from lib_wasm_pack.adapters.errors import AdapterError
from lib_wasm_pack.domain.errors import ExecutionError
from lib_wasm_pack.domain.output import ExecutionOutput
from lib_wasm_pack.domain.result import Result
from lib_wasm_pack.ports.command_runner import CommandRunnerPort

logger = logging.getLogger(__name__)

Arg = str | os.PathLike[str]


def _find_nul(program: str, args: list[str]) -> str | None:
    if "\0" in program:
        return "program name contains a NUL character"
    for index, arg in enumerate(args):
        if "\0" in arg:
            return f"argument {index} contains a NUL character"
    return None


def run_command(
    program: str,
    args: Iterable[Arg],
    *,
    runner: CommandRunnerPort | None = None,
) -> Result[ExecutionOutput]:
    """Run ``program`` once with ``args`` and capture what it prints.

    Every outcome comes back as a ``Result``: exit status 0 carries an
    ``ExecutionOutput``, anything else carries an ``ExecutionError``.
    """
    argv = [os.fspath(arg) for arg in args]
    logger.debug("Running %s with args: %r", program, argv)

    problem = _find_nul(program, argv)
    if problem is not None:
        error = ExecutionError.failed_to_start(program, ValueError(problem))
        logger.warning("%s", error)
        return Result(error=error)

    runner = runner or SubprocessCommandRunner()
    try:
        completed = runner.run(program, argv)
    except AdapterError as exc:
        error = ExecutionError.failed_to_start(program, exc)
        logger.warning("%s", error)
        return Result(error=error)

    output = ExecutionOutput(stdout=completed.stdout, stderr=completed.stderr)
    logger.info("%s exited with status %d", program, completed.exit_code)
    logger.debug("%s stdout: %s", program, output.stdout)
    logger.debug("%s stderr: %s", program, output.stderr)

    if completed.exit_code != 0:
        error = ExecutionError.exited_with_failure(program, completed.exit_code, output)
        logger.warning("%s", error.message)
        return Result(error=error)
    return Result(value=output)
