from regionpath.engine.adjacency import AdjacencyGraph, build_adjacency, is_adjacent
from regionpath.engine.pathfinder import shortest_path
from regionpath.engine.challenge import pick_challenge
from regionpath.engine.session import apply_guess, grade, start_session
