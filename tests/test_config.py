import pytest
from pydantic import ValidationError

from reversi import config
from reversi.config import (
    MAX_MOBILITY_DIFFERENCE,
    MAX_POSITIONAL_SCORE,
    MAX_TERMINAL_SCORE,
    SearchSettings,
    get_verbose,
)


def test_defaults() -> None:
    settings = SearchSettings()
    assert settings.medium_depth == 3
    assert settings.hard_depth == 5
    assert settings.mobility_weight == 5
    assert settings.terminal_score == 10000
    assert not settings.verbose


@pytest.mark.parametrize(
    ["kwargs"],
    [
        pytest.param({"medium_depth": 0}, id="medium-depth-zero"),
        pytest.param({"hard_depth": -1}, id="hard-depth-negative"),
        pytest.param({"mobility_weight": -5}, id="mobility-weight-negative"),
        pytest.param({"terminal_score": 100}, id="terminal-score-too-small"),
        pytest.param(
            {"mobility_weight": 200, "terminal_score": 10000},
            id="terminal-score-below-mobility",
        ),
        pytest.param({"terminal_score": 2_000_000}, id="terminal-score-too-large"),
    ],
)
def test_invalid(kwargs: dict[str, int]) -> None:
    with pytest.raises(ValidationError):
        SearchSettings(**kwargs)


def test_terminal_score_bound() -> None:
    bound = MAX_POSITIONAL_SCORE + 5 * MAX_MOBILITY_DIFFERENCE

    with pytest.raises(ValidationError):
        SearchSettings(terminal_score=bound)

    assert SearchSettings(terminal_score=bound + 1).terminal_score == bound + 1


def test_frozen() -> None:
    settings = SearchSettings()

    with pytest.raises(ValidationError):
        settings.hard_depth = 7  # type: ignore[misc]


def test_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("REVERSI_MEDIUM_DEPTH", "2")
    monkeypatch.setenv("REVERSI_HARD_DEPTH", "4")
    monkeypatch.setenv("REVERSI_MOBILITY_WEIGHT", "7")
    monkeypatch.setenv("REVERSI_TERMINAL_SCORE", "20000")
    monkeypatch.setenv("REVERSI_VERBOSE", "1")

    settings = SearchSettings.from_env()

    assert settings.medium_depth == 2
    assert settings.hard_depth == 4
    assert settings.mobility_weight == 7
    assert settings.terminal_score == 20000
    assert settings.verbose


def test_from_env_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in [
        "REVERSI_MEDIUM_DEPTH",
        "REVERSI_HARD_DEPTH",
        "REVERSI_MOBILITY_WEIGHT",
        "REVERSI_TERMINAL_SCORE",
        "REVERSI_VERBOSE",
    ]:
        monkeypatch.delenv(name, raising=False)

    assert SearchSettings.from_env() == SearchSettings()
    assert not get_verbose()


def test_from_env_invalid(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("REVERSI_HARD_DEPTH", "0")

    with pytest.raises(ValidationError):
        SearchSettings.from_env()


def test_terminal_score_upper_bound() -> None:
    assert SearchSettings(terminal_score=MAX_TERMINAL_SCORE).terminal_score == (
        MAX_TERMINAL_SCORE
    )

    with pytest.raises(ValidationError):
        SearchSettings(terminal_score=MAX_TERMINAL_SCORE + 1)


def test_from_env_loads_dotenv(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[str] = []

    def fake_load_dotenv() -> bool:
        calls.append("load")
        monkeypatch.setenv("REVERSI_HARD_DEPTH", "6")
        return True

    monkeypatch.delenv("REVERSI_HARD_DEPTH", raising=False)
    monkeypatch.setattr(config, "load_dotenv", fake_load_dotenv)

    assert SearchSettings().hard_depth == 5
    assert calls == []

    assert SearchSettings.from_env().hard_depth == 6
    assert calls == ["load"]
