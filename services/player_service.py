import logging
from typing import List, Optional, Protocol

from model import (Player, PlayerCriteria, PlayerOrder, Predicate, compose,
                   current_level, experience_until_next_level, paginate,
                   sort_players, validate_player)
from model.exceptions import InvalidField, InvalidPlayer
from model.validation import FIELD_VALIDATORS

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 3


class PlayerStore(Protocol):
    def save(self, player: Player) -> Player: ...

    def get_by_id(self, id: int) -> Player: ...

    def delete(self, id: int) -> None: ...

    def query(self, predicate: Predicate) -> List[Player]: ...


def set_progress(player: Player):
    player.level = current_level(player.experience)
    player.until_next_level = experience_until_next_level(
        player.experience, player.level
    )


class PlayerService:
    def __init__(self, store: PlayerStore):
        self.store = store

    def create(self, player: Optional[Player]) -> Player:
        validate_player(player)
        if player.banned is None:
            player.banned = False
        # El id lo asigna el store
        player.id = None
        set_progress(player)
        saved = self.store.save(player)
        logger.info("Created player %s (%s)", saved.id, saved.name)
        return saved

    def get_by_id(self, id: int) -> Player:
        return self.store.get_by_id(id)

    def update(self, id: int, changes: Optional[Player]) -> Player:
        """
        Update parcial: solo se tocan los campos presentes (no None) en `changes`.
        Todos se validan antes de escribir el primero, asi un campo invalido no
        deja el jugador a medio modificar.
        """
        if changes is None:
            raise InvalidPlayer("Invalid player")
        player = self.store.get_by_id(id)

        pending = {}
        for field, validator in FIELD_VALIDATORS.items():
            value = getattr(changes, field)
            if value is not None:
                validator(value)
                pending[field] = value
        if changes.banned is not None:
            pending["banned"] = changes.banned

        for field, value in pending.items():
            setattr(player, field, value)
        set_progress(player)
        saved = self.store.save(player)
        logger.info("Updated player %s: %s", id, sorted(pending))
        return saved

    def delete(self, id: int) -> Player:
        player = self.store.get_by_id(id)
        snapshot = player.copy()
        self.store.delete(id)
        logger.info("Deleted player %s", id)
        return snapshot

    def _filtered(self, criteria: Optional[PlayerCriteria]) -> List[Player]:
        players = self.store.query(compose(criteria or PlayerCriteria()))
        logger.debug("Query %s matched %d players", criteria, len(players))
        return players

    def list(
        self,
        criteria: Optional[PlayerCriteria] = None,
        order: Optional[PlayerOrder] = None,
        page_number: int = 0,
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> List[Player]:
        if page_number < 0:
            raise InvalidField("page_number", "must not be negative")
        if page_size < 0:
            raise InvalidField("page_size", "must not be negative")
        players = sort_players(self._filtered(criteria), order)
        return paginate(players, page_number, page_size)

    def count(self, criteria: Optional[PlayerCriteria] = None) -> int:
        return len(self._filtered(criteria))
