from .exceptions import InvalidField, InvalidPlayer, NotFound
from .filters import PlayerCriteria, Predicate, compose
from .level import current_level, experience_until_next_level
from .ordering import PlayerOrder, paginate, sort_players
from .player import (Player, Profession, Race, birthday_from_millis,
                     millis_from_birthday)
from .validation import validate_player
