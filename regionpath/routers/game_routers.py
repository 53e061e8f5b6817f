from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from uuid import UUID

from regionpath.core.database import get_db
from regionpath.schemas import GameRead, GuessRead, GuessRequest, PathRead
from regionpath.services import GameServices, RegionCatalog, get_catalog


router = APIRouter()


# Start new game
@router.post("/", response_model=GameRead, status_code=201)
async def create_game(db: Session = Depends(get_db), catalog: RegionCatalog = Depends(get_catalog)):
    """Pick a challenge and start a new game"""
    services = GameServices(db, catalog)
    game = services.create_game()
    return services.serialize_game(game)


# Get game by id
@router.get("/{game_id}", response_model=GameRead)
async def get_game(game_id: UUID, db: Session = Depends(get_db), catalog: RegionCatalog = Depends(get_catalog)):
    """Fetch one game by ID"""
    services = GameServices(db, catalog)
    game = services.get_game_by_id(game_id)
    return services.serialize_game(game)


# Guess a region
@router.post("/{game_id}/guesses", response_model=GuessRead)
async def submit_guess(
    game_id: UUID,
    guess: GuessRequest,
    db: Session = Depends(get_db),
    catalog: RegionCatalog = Depends(get_catalog),
):
    """Add a region to the player's path"""
    services = GameServices(db, catalog)
    game, result, message = services.submit_guess(game_id, guess.guess)
    return services.serialize_guess(game, result, message)


# Reveal the optimal path
@router.get("/{game_id}/shortest-path", response_model=PathRead)
async def reveal_shortest_path(game_id: UUID, db: Session = Depends(get_db), catalog: RegionCatalog = Depends(get_catalog)):
    """Shortest path between start and target of the game"""
    services = GameServices(db, catalog)
    return services.reveal_shortest_path(game_id)


# API Delete Request
@router.delete("/{game_id}", status_code=204)
async def delete_game(game_id: UUID, db: Session = Depends(get_db), catalog: RegionCatalog = Depends(get_catalog)):
    """Delete a game"""
    services = GameServices(db, catalog)
    services.delete_game(game_id)
