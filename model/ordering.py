from enum import Enum
from typing import List, Optional, Sequence

from .player import Player


class PlayerOrder(Enum):
    ID = "ID"
    LEVEL = "LEVEL"
    EXPERIENCE = "EXPERIENCE"
    BIRTHDAY = "BIRTHDAY"

    @property
    def field_name(self) -> str:
        # Atributo de Player por el que se ordena
        return self.name.lower()


def sort_players(players: Sequence[Player], order: Optional[PlayerOrder]) -> List[Player]:
    """
    Ordena ascendente por el campo de `order`. Sin orden se devuelve tal cual.
    Los empates quedan en el orden de entrada (sorted es estable).
    """
    if order is None:
        return list(players)
    return sorted(players, key=lambda player: getattr(player, order.field_name))


def paginate(players: Sequence[Player], page_number: int, page_size: int) -> List[Player]:
    # page_number y page_size no negativos, lo controla quien llama
    start = page_number * page_size
    return list(players[start : start + page_size])
