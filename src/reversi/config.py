from __future__ import annotations

import os
from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, ValidationInfo, field_validator

# Sum of absolute values of the positional weight table.
MAX_POSITIONAL_SCORE = 924

# Upper bound on the mobility difference between both players.
MAX_MOBILITY_DIFFERENCE = 64

# Terminal scores plus the disc difference must stay inside the search window.
MAX_TERMINAL_SCORE = 100000


def get_medium_depth() -> int:
    return int(os.getenv("REVERSI_MEDIUM_DEPTH", "3"))


def get_hard_depth() -> int:
    return int(os.getenv("REVERSI_HARD_DEPTH", "5"))


def get_mobility_weight() -> int:
    return int(os.getenv("REVERSI_MOBILITY_WEIGHT", "5"))


def get_terminal_score() -> int:
    return int(os.getenv("REVERSI_TERMINAL_SCORE", "10000"))


def get_verbose() -> bool:
    return os.getenv("REVERSI_VERBOSE", "0") != "0"


class SearchSettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    medium_depth: int = 3
    hard_depth: int = 5
    mobility_weight: int = 5
    terminal_score: int = 10000
    verbose: bool = False

    @field_validator("medium_depth", "hard_depth")
    @classmethod
    def validate_depth(cls, v: int) -> int:
        if v < 1:
            raise ValueError(f"Search depth must be at least 1, got {v}")
        return v

    @field_validator("mobility_weight")
    @classmethod
    def validate_mobility_weight(cls, v: int) -> int:
        if v < 0:
            raise ValueError(f"Mobility weight must not be negative, got {v}")
        return v

    @field_validator("terminal_score")
    @classmethod
    def validate_terminal_score(cls, v: int, info: ValidationInfo) -> int:
        mobility_weight = info.data.get("mobility_weight", 0)
        max_heuristic = MAX_POSITIONAL_SCORE + mobility_weight * MAX_MOBILITY_DIFFERENCE

        # Finished games must always outrank heuristic evaluations.
        if v <= max_heuristic:
            raise ValueError(
                f"Terminal score must be greater than {max_heuristic}, got {v}"
            )
        if v > MAX_TERMINAL_SCORE:
            raise ValueError(
                f"Terminal score must be at most {MAX_TERMINAL_SCORE}, got {v}"
            )
        return v

    @classmethod
    def from_env(cls) -> SearchSettings:
        """Reads settings from `REVERSI_*` variables, loading `.env` first."""
        load_dotenv()
        return cls(
            medium_depth=get_medium_depth(),
            hard_depth=get_hard_depth(),
            mobility_weight=get_mobility_weight(),
            terminal_score=get_terminal_score(),
            verbose=get_verbose(),
        )


DEFAULT_SETTINGS = SearchSettings()
