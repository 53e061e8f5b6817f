from regionpath.engine.adjacency import AdjacencyGraph
from regionpath.engine.pathfinder import path_steps, shortest_path
from regionpath.schemas.game_schema import Challenge, GameSession, GuessOutcome, GuessResult, Score


def start_session(challenge: Challenge) -> GameSession:
    """New game positioned on the start region"""
    return GameSession(
        start_id=challenge.start_id,
        end_id=challenge.end_id,
        current_id=challenge.start_id,
        visited=(challenge.start_id, challenge.end_id),
    )


def apply_guess(session: GameSession, region_id: int, adjacency: AdjacencyGraph) -> GuessResult:
    """
    Add a region to the player's selection.

    The game is won as soon as start and target are connected using only
    selected regions. The returned result holds the new session; the given
    one is left as is.
    """
    if session.finished:
        return GuessResult(session=session, outcome=GuessOutcome.IGNORED, region_id=region_id)

    if region_id in session.visited:
        return GuessResult(session=session, outcome=GuessOutcome.ALREADY_SELECTED, region_id=region_id)

    visited = session.visited + (region_id,)
    selected_path = shortest_path(adjacency, session.start_id, session.end_id, set(visited))

    updated = session.model_copy(update={
        "current_id": region_id,
        "visited": visited,
        "moves": session.moves + 1,
        "finished": bool(selected_path),
    })

    if not selected_path:
        return GuessResult(session=updated, outcome=GuessOutcome.ADDED, region_id=region_id)

    return GuessResult(
        session=updated,
        outcome=GuessOutcome.FINISHED,
        region_id=region_id,
        path=selected_path,
        score=grade(selected_path, shortest_path(adjacency, session.start_id, session.end_id)),
    )


def grade(selected_path: list[int], optimal_path: list[int]) -> Score:
    player_steps = path_steps(selected_path)
    shortest_steps = path_steps(optimal_path)
    return Score(
        player_steps=player_steps,
        shortest_steps=shortest_steps,
        extra=max(0, player_steps - shortest_steps),
    )
