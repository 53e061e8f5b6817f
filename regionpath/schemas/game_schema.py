from enum import Enum
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import List, Optional, Tuple
from uuid import UUID
from datetime import datetime

from regionpath.schemas.region_schema import RegionRead


class Challenge(BaseModel):
    model_config = ConfigDict(frozen=True)

    start_id: int
    end_id: int


class Score(BaseModel):
    model_config = ConfigDict(frozen=True)

    player_steps: int
    shortest_steps: int
    extra: int

    @property
    def optimal(self) -> bool:
        return self.extra == 0

    @property
    def message(self) -> str:
        if self.optimal:
            return f"Perfect! You reached the target in {self.player_steps} steps (optimal)."
        return (f"Finished in {self.player_steps} steps. "
                f"Shortest possible is {self.shortest_steps} (extra {self.extra}).")


class GameSession(BaseModel):
    """
    State of one game. Never mutated: every guess produces a new session.
    `visited` holds start and target first, then the guessed regions in order.
    """
    model_config = ConfigDict(frozen=True)

    start_id: int
    end_id: int
    current_id: int
    visited: Tuple[int, ...]
    finished: bool = False
    moves: int = 0

    @property
    def guessed(self) -> Tuple[int, ...]:
        return self.visited[2:]


class GuessOutcome(str, Enum):
    ADDED = "added"
    FINISHED = "finished"
    ALREADY_SELECTED = "already_selected"
    UNKNOWN_REGION = "unknown_region"
    IGNORED = "ignored"  # game already over or empty input


class GuessResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    session: GameSession
    outcome: GuessOutcome
    region_id: Optional[int] = None
    path: List[int] = []  # selected path, only set once finished
    score: Optional[Score] = None

    @property
    def accepted(self) -> bool:
        return self.outcome in (GuessOutcome.ADDED, GuessOutcome.FINISHED)


# Data sent by user
class GuessRequest(BaseModel):
    guess: str = Field(..., max_length=200)

    @field_validator("guess", mode="before")
    @classmethod
    def none_to_empty(cls, value):
        """Treat a missing guess like an empty one"""
        if value is None:
            return ""
        return value


class ScoreRead(BaseModel):
    player_steps: int
    shortest_steps: int
    extra: int
    optimal: bool


class GameRead(BaseModel):
    id: UUID
    start: RegionRead
    end: RegionRead
    current: RegionRead
    guessed: List[RegionRead]
    finished: bool
    moves: int
    created_at: Optional[datetime] = None


class GuessRead(BaseModel):
    outcome: GuessOutcome
    message: str
    game: GameRead
    region: Optional[RegionRead] = None
    path: List[RegionRead] = []
    score: Optional[ScoreRead] = None
