import logging
import random
from typing import List, Optional
from uuid import UUID, uuid4

from fastapi import HTTPException

from regionpath import models
from regionpath.core.config import settings
from regionpath.engine import apply_guess, pick_challenge, shortest_path, start_session
from regionpath.engine.pathfinder import path_steps
from regionpath.schemas import (
    GameRead,
    GameSession,
    GuessOutcome,
    GuessRead,
    GuessResult,
    PathRead,
    RegionRead,
    ScoreRead,
)
from regionpath.services.catalog_services import RegionCatalog

logger = logging.getLogger(__name__)

# shared so a fixed CHALLENGE_SEED yields a reproducible sequence of games
_challenge_rng = random.Random(settings.CHALLENGE_SEED)

MESSAGES = {
    GuessOutcome.ADDED: "Region added. Keep selecting regions to connect start and target.",
    GuessOutcome.ALREADY_SELECTED: "Pick a region you have not already added.",
    GuessOutcome.UNKNOWN_REGION: "That region name was not found.",
}
AMBIGUOUS_MESSAGE = "Several regions match that name. Be more specific."
EMPTY_GUESS_MESSAGE = "Enter a region name."
GAME_OVER_MESSAGE = "This game is already finished. Start a new one."
NO_PATH_MESSAGE = "No path found between selected regions."


class GameServices:
    """ Handles all game related DB operations"""

    def __init__(self, db, catalog: RegionCatalog, rng: Optional[random.Random] = None):
        self.db = db
        self.catalog = catalog
        self.rng = rng or _challenge_rng

    # create game
    def create_game(self) -> models.Game:
        """Pick a challenge and store a fresh game"""
        challenge = pick_challenge(
            self.catalog.regions,
            self.catalog.adjacency,
            rng=self.rng,
            attempts=settings.CHALLENGE_ATTEMPTS,
            min_length=settings.MIN_CHALLENGE_LENGTH,
        )
        session = start_session(challenge)

        game = models.Game(id=uuid4())
        self._store_session(game, session)
        self.db.add(game)
        self.db.commit()
        self.db.refresh(game)

        logger.info("New game %s: %s -> %s", game.id,
                    self.catalog.get(session.start_id).label, self.catalog.get(session.end_id).label)
        return game

    # get one game by id
    def get_game_by_id(self, game_id: UUID) -> models.Game:
        game = self.db.query(models.Game).filter(models.Game.id == game_id).first()
        if not game:
            raise HTTPException(status_code=404, detail="Game not found")
        return game

    # delete one game
    def delete_game(self, game_id: UUID):
        game = self.get_game_by_id(game_id)
        self.db.delete(game)
        self.db.commit()
        logger.info("Deleted game %s", game_id)

    # guess
    def submit_guess(self, game_id: UUID, guess: str) -> tuple[models.Game, GuessResult, str]:
        """
        Resolve the typed region name and apply it to the game.
        Rejected guesses leave the stored game untouched.
        """
        game = self.get_game_by_id(game_id)
        session = self.to_session(game)

        if session.finished:
            return game, GuessResult(session=session, outcome=GuessOutcome.IGNORED), GAME_OVER_MESSAGE

        guess = guess.strip()
        if not guess:
            return game, GuessResult(session=session, outcome=GuessOutcome.IGNORED), EMPTY_GUESS_MESSAGE

        matches = self.catalog.find_matches(guess)
        if len(matches) != 1:
            message = AMBIGUOUS_MESSAGE if matches else MESSAGES[GuessOutcome.UNKNOWN_REGION]
            logger.debug("Game %s: unresolved guess %r", game_id, guess)
            return game, GuessResult(session=session, outcome=GuessOutcome.UNKNOWN_REGION), message

        result = apply_guess(session, matches[0], self.catalog.adjacency)
        if result.accepted:
            self._store_session(game, result.session)
            self.db.commit()
            self.db.refresh(game)

        if result.outcome == GuessOutcome.FINISHED:
            logger.info("Game %s finished: %d steps, %d extra",
                        game_id, result.score.player_steps, result.score.extra)
            return game, result, result.score.message

        return game, result, MESSAGES[result.outcome]

    # reveal
    def reveal_shortest_path(self, game_id: UUID) -> PathRead:
        """Shortest path between start and target of the game"""
        game = self.get_game_by_id(game_id)
        # both ends must still exist, even when no path connects them
        self._region(game.start_id)
        self._region(game.end_id)

        path = shortest_path(self.catalog.adjacency, game.start_id, game.end_id)
        return PathRead(
            regions=[self._region(region_id) for region_id in path],
            steps=path_steps(path),
            description=self.describe_path(path),
        )

    def describe_path(self, path: List[int]) -> str:
        if not path:
            return NO_PATH_MESSAGE
        return "Shortest path: " + " → ".join(self.catalog.get(region_id).label for region_id in path)

    # ORM <-> immutable session
    @staticmethod
    def to_session(game: models.Game) -> GameSession:
        return GameSession(
            start_id=game.start_id,
            end_id=game.end_id,
            current_id=game.current_id,
            visited=tuple(game.visited),
            finished=game.finished,
            moves=game.moves,
        )

    @staticmethod
    def _store_session(game: models.Game, session: GameSession):
        game.start_id = session.start_id
        game.end_id = session.end_id
        game.current_id = session.current_id
        game.visited = list(session.visited)  # new list so the JSON column is flagged dirty
        game.finished = session.finished
        game.moves = session.moves

    # Serialize game data for the API
    def _region(self, region_id: int) -> RegionRead:
        region = self.catalog.get(region_id)
        if region is None:
            # stored game predates a catalog change
            raise HTTPException(status_code=409, detail=f"Region {region_id} is not in the catalog")
        return RegionRead.from_region(region)

    def serialize_game(self, game: models.Game) -> GameRead:
        session = self.to_session(game)
        return GameRead(
            id=game.id,
            start=self._region(session.start_id),
            end=self._region(session.end_id),
            current=self._region(session.current_id),
            guessed=[self._region(region_id) for region_id in session.guessed],
            finished=session.finished,
            moves=session.moves,
            created_at=game.created_at,
        )

    def serialize_guess(self, game: models.Game, result: GuessResult, message: str) -> GuessRead:
        score = None
        if result.score:
            score = ScoreRead(
                player_steps=result.score.player_steps,
                shortest_steps=result.score.shortest_steps,
                extra=result.score.extra,
                optimal=result.score.optimal,
            )
        return GuessRead(
            outcome=result.outcome,
            message=message,
            game=self.serialize_game(game),
            region=self._region(result.region_id) if result.region_id is not None else None,
            path=[self._region(region_id) for region_id in result.path],
            score=score,
        )
