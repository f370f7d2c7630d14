from lib_wasm_pack.adapters.errors import AdapterError, CommandNotFound, CommandStartError


def test_adapter_error_has_message_and_details():
    err = CommandNotFound("wasm-pack not found on PATH", details={"program": "wasm-pack"})
    assert "wasm-pack not found" in str(err)
    assert err.details["program"] == "wasm-pack"
    assert isinstance(err, AdapterError)


def test_start_error_keeps_cause():
    cause = PermissionError("denied")
    err = CommandStartError("could not be started", cause=cause)
    assert err.cause is cause
    assert str(err) == "could not be started"
