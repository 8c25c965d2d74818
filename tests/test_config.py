from pathlib import Path

import pytest
from pydantic import ValidationError

from failchain import StackNode, StringCode, new
from failchain.config import DEFAULT_MESSAGE, Settings, get_settings, reset_settings


def test_settings_defaults() -> None:
    settings = Settings()
    assert settings.default_message == DEFAULT_MESSAGE
    assert settings.call_stack_depth == 32
    assert settings.log_level == "ERROR"


def test_settings_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FAILCHAIN_DEFAULT_MESSAGE", "Oops")
    monkeypatch.setenv("FAILCHAIN_CALL_STACK_DEPTH", "4")
    settings = Settings()
    assert settings.default_message == "Oops"
    assert settings.call_stack_depth == 4


def test_settings_reads_env_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    env = tmp_path / ".env"
    env.write_text("FAILCHAIN_DEFAULT_MESSAGE=from file\nUNRELATED=1\n")
    monkeypatch.chdir(str(tmp_path))
    assert Settings().default_message == "from file"


@pytest.mark.parametrize(
    "name, value",
    [
        ("FAILCHAIN_CALL_STACK_DEPTH", "-1"),
        ("FAILCHAIN_CALL_STACK_DEPTH", "many"),
        ("FAILCHAIN_DEFAULT_MESSAGE", ""),
    ],
)
def test_settings_rejects_invalid_values(
    monkeypatch: pytest.MonkeyPatch, name: str, value: str
) -> None:
    monkeypatch.setenv(name, value)
    with pytest.raises(ValidationError):
        Settings()


def test_settings_are_frozen() -> None:
    settings = Settings()
    with pytest.raises(ValidationError):
        settings.default_message = "changed"  # type: ignore[misc]


def test_get_settings_is_cached(monkeypatch: pytest.MonkeyPatch) -> None:
    first = get_settings()
    monkeypatch.setenv("FAILCHAIN_DEFAULT_MESSAGE", "later")
    assert get_settings() is first
    reset_settings()
    assert get_settings().default_message == "later"


def test_call_stack_depth_from_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FAILCHAIN_CALL_STACK_DEPTH", "2")
    err = new(StringCode("A"))
    assert isinstance(err, StackNode)
    assert len(err.call_stack) == 2
