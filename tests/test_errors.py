from unittest import mock

import pytest

from duckengine.errors import EngineError, ErrorType, panic


def test_error_type_numbering_starts_at_one():
    assert ErrorType(1) is ErrorType.UNKNOWN
    assert [ErrorType(value) for value in range(1, len(ErrorType) + 1)] == list(ErrorType)


@pytest.mark.parametrize(
    "kind, text",
    [
        (ErrorType.IO, "Io"),
        (ErrorType.LUA_INIT, "Lua initialization"),
        (ErrorType.INVALID_GAME, "Invalid game"),
        (ErrorType.LUA_UNEXPECTED_NIL, "Unexpected `nil` Lua value"),
        (ErrorType.UNSUPPORTED_PLATFORM, "Unsupported platform"),
    ],
)
def test_error_type_descriptions(kind, text):
    assert str(kind) == text


def test_every_error_type_has_a_description():
    descriptions = [str(EngineError(kind)) for kind in ErrorType]
    assert len(set(descriptions)) == len(ErrorType)
    assert all(text.endswith(": ") for text in descriptions)
    assert all(text != f"{kind.name}: " for kind, text in zip(ErrorType, descriptions))


def test_engine_error_string_includes_kind_and_message():
    err = EngineError(ErrorType.INVALID_STATE, "Game is already loaded")
    assert str(err) == "Invalid state: Game is already loaded"
    assert err.kind is ErrorType.INVALID_STATE
    assert err.message == "Game is already loaded"


def test_engine_error_without_message():
    err = EngineError(ErrorType.SDL)
    assert err.message == ""
    assert str(err) == "Sdl: "


def test_engine_error_is_raisable():
    err = EngineError(ErrorType.LUA, "bad script")
    with pytest.raises(EngineError) as info:
        raise err
    assert info.value is err
    assert str(info.value) == "Lua: bad script"
    assert info.value.kind is ErrorType.LUA


def test_panic_exits_with_101(capsys):
    with pytest.raises(SystemExit) as info:
        panic("something broke")
    assert info.value.code == 101
    err = capsys.readouterr().err
    assert "Program panicked:" in err
    assert "something broke" in err


def test_critical_panic_aborts(capsys):
    with mock.patch("os.abort") as abort:
        panic("fatal", critical=True)
    assert abort.call_count == 1
    assert "fatal" in capsys.readouterr().err