from regionpath.schemas.region_schema import Region, RegionEntry, RegionRead, RegionDetail
from regionpath.schemas.game_schema import (Challenge, GameSession, GuessOutcome, GuessResult, Score,
                                            GuessRequest, GameRead, GuessRead, ScoreRead)
from regionpath.schemas.path_schema import PathRead
