from pathlib import Path
import stat
import sys

import pytest

from lib_wasm_pack.adapters.command_runner.subprocess_runner import SubprocessCommandRunner
from lib_wasm_pack.adapters.errors import CommandNotFound, CommandStartError


def test_runner_captures_stdout_and_stderr():
    result = SubprocessCommandRunner().run(
        sys.executable,
        ["-c", "import sys; sys.stdout.write('out\\n'); sys.stderr.write('err\\n')"],
    )
    assert result.exit_code == 0
    assert result.stdout == "out\n"
    assert result.stderr == "err\n"


def test_runner_returns_nonzero_exit_without_raising():
    result = SubprocessCommandRunner().run(sys.executable, ["-c", "raise SystemExit(4)"])
    assert result.exit_code == 4


def test_runner_decodes_invalid_utf8_lossily():
    result = SubprocessCommandRunner().run(
        sys.executable,
        ["-c", "import sys; sys.stdout.buffer.write(b'ok \\xff\\xfe done')"],
    )
    assert result.stdout.startswith("ok ")
    assert result.stdout.endswith(" done")
    assert "\ufffd" in result.stdout


def test_runner_raises_not_found_for_missing_program():
    with pytest.raises(CommandNotFound) as excinfo:
        SubprocessCommandRunner().run("lib-wasm-pack-no-such-program", ["--version"])
    assert excinfo.value.details == {"program": "lib-wasm-pack-no-such-program"}


@pytest.mark.skipif(sys.platform == "win32", reason="POSIX exec semantics")
def test_runner_raises_start_error_for_unexecutable_file(tmp_path: Path):
    bogus = tmp_path / "bogus-tool"
    bogus.write_bytes(b"\x00\x01\x02 not a program")
    bogus.chmod(bogus.stat().st_mode | stat.S_IXUSR)
    with pytest.raises(CommandStartError) as excinfo:
        SubprocessCommandRunner().run(str(bogus), [])
    assert isinstance(excinfo.value.cause, OSError)


@pytest.mark.skipif(sys.platform == "win32", reason="POSIX exec semantics")
def test_runner_reports_permission_error_for_non_executable_path(tmp_path: Path):
    script = tmp_path / "wasm-pack"
    script.write_text("#!/bin/sh\necho hi\n")
    script.chmod(0o644)
    with pytest.raises(CommandStartError) as excinfo:
        SubprocessCommandRunner().run(str(script), ["--version"])
    assert isinstance(excinfo.value.cause, PermissionError)


def test_runner_raises_not_found_for_missing_explicit_path(tmp_path: Path):
    with pytest.raises(CommandNotFound):
        SubprocessCommandRunner().run(str(tmp_path / "missing" / "wasm-pack"), [])
