from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional

from .player import Player, Profession, Race

Predicate = Callable[[Player], bool]


def always(player: Player) -> bool:
    return True


@dataclass(frozen=True)
class PlayerCriteria:
    name: Optional[str] = None
    title: Optional[str] = None
    race: Optional[Race] = None
    profession: Optional[Profession] = None
    after: Optional[datetime] = None
    before: Optional[datetime] = None
    banned: Optional[bool] = None
    min_experience: Optional[int] = None
    max_experience: Optional[int] = None
    min_level: Optional[int] = None
    max_level: Optional[int] = None


def name_contains(name: Optional[str]) -> Optional[Predicate]:
    if name is None:
        return None
    return lambda player: name in player.name


def title_contains(title: Optional[str]) -> Optional[Predicate]:
    if title is None:
        return None
    return lambda player: title in player.title


def race_is(race: Optional[Race]) -> Optional[Predicate]:
    if race is None:
        return None
    return lambda player: player.race == race


def profession_is(profession: Optional[Profession]) -> Optional[Predicate]:
    if profession is None:
        return None
    return lambda player: player.profession == profession


def banned_is(banned: Optional[bool]) -> Optional[Predicate]:
    if banned is None:
        return None
    return lambda player: bool(player.banned) == banned


def _between(attribute: str, low, high) -> Optional[Predicate]:
    # Cotas inclusivas, cualquiera de las dos puede faltar
    if low is None and high is None:
        return None

    def predicate(player: Player) -> bool:
        value = getattr(player, attribute)
        if low is not None and value < low:
            return False
        if high is not None and value > high:
            return False
        return True

    return predicate


def born_between(
    after: Optional[datetime], before: Optional[datetime]
) -> Optional[Predicate]:
    return _between("birthday", after, before)


def experience_between(
    min_experience: Optional[int], max_experience: Optional[int]
) -> Optional[Predicate]:
    return _between("experience", min_experience, max_experience)


def level_between(
    min_level: Optional[int], max_level: Optional[int]
) -> Optional[Predicate]:
    return _between("level", min_level, max_level)


def all_of(*predicates: Optional[Predicate]) -> Predicate:
    """
    AND de todos los predicados que no sean None. Sin ninguno, acepta todo.
    """
    active = [p for p in predicates if p is not None]
    if not active:
        return always
    return lambda player: all(p(player) for p in active)


def compose(criteria: PlayerCriteria) -> Predicate:
    return all_of(
        name_contains(criteria.name),
        title_contains(criteria.title),
        race_is(criteria.race),
        profession_is(criteria.profession),
        born_between(criteria.after, criteria.before),
        banned_is(criteria.banned),
        experience_between(criteria.min_experience, criteria.max_experience),
        level_between(criteria.min_level, criteria.max_level),
    )
