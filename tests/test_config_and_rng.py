from __future__ import annotations

import pytest
from pydantic import ValidationError

from turnplay.config import Settings, load_settings
from turnplay.errors import RandomRangeInvalid
from turnplay.rng import SeededRandomSource


def test_defaults_when_env_is_empty() -> None:
    settings = load_settings({})
    assert settings == Settings()
    assert settings.seed is None
    assert settings.log_level == "WARNING"
    assert settings.max_decision_attempts == 3


def test_values_read_from_prefixed_env() -> None:
    settings = load_settings(
        {
            "TURNPLAY_SEED": "42",
            "TURNPLAY_LOG_LEVEL": "debug",
            "TURNPLAY_MAX_DECISION_ATTEMPTS": "5",
            "SEED": "7",
        }
    )
    assert settings.seed == 42
    assert settings.log_level == "DEBUG"
    assert settings.max_decision_attempts == 5


def test_blank_values_fall_back_to_defaults() -> None:
    assert load_settings({"TURNPLAY_SEED": "  "}).seed is None


@pytest.mark.parametrize(
    "env",
    [
        {"TURNPLAY_MAX_DECISION_ATTEMPTS": "0"},
        {"TURNPLAY_LOG_LEVEL": "chatty"},
        {"TURNPLAY_SEED": "abc"},
    ],
)
def test_invalid_settings_rejected(env: dict[str, str]) -> None:
    with pytest.raises(ValidationError):
        load_settings(env)


def test_reads_process_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TURNPLAY_SEED", "11")
    assert load_settings().seed == 11


def test_uniform_is_inclusive() -> None:
    rng = SeededRandomSource(3)
    rolls = {rng.uniform(1, 3) for _ in range(200)}
    assert rolls == {1, 2, 3}
    assert rng.uniform(5, 5) == 5


def test_same_seed_same_sequence() -> None:
    a = SeededRandomSource(77)
    b = SeededRandomSource(77)
    assert [a.uniform(0, 51) for _ in range(20)] == [b.uniform(0, 51) for _ in range(20)]


def test_seed_is_picked_when_missing() -> None:
    rng = SeededRandomSource()
    assert 1 <= rng.seed <= 2**31 - 1


def test_inverted_range_fails_fast() -> None:
    with pytest.raises(RandomRangeInvalid) as e:
        SeededRandomSource(1).uniform(10, 1)
    assert "min 10 > max 1" in str(e.value)
