from .player import PlayerRepository
