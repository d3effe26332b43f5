from .player_service import PlayerService, PlayerStore
