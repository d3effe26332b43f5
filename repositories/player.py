from typing import List, Optional

from model import Player, Predicate
from model.exceptions import NotFound
from repositories.general import Repository


class PlayerRepository(Repository):

    def save(self, player: Player) -> Player:
        if player.id is None:
            self.db.add(player)
        else:
            # Sobrescribe por id, sea o no la instancia de esta sesion
            player = self.db.merge(player)
        self.db.commit()
        return player

    def delete(self, id: int):
        self.db.delete(self.get_by_id(id))
        self.db.commit()

    def get(self, id: int) -> Optional[Player]:
        return self.db.get(Player, id)

    def get_by_id(self, id: int) -> Player:
        player = self.get(id)
        if player is None:
            raise NotFound(id)
        return player

    def query(self, predicate: Predicate) -> List[Player]:
        # El filtrado se hace en memoria sobre todas las filas
        return [player for player in self.db.query(Player).all() if predicate(player)]
