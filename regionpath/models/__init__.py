from regionpath.models.game_model import Game
