from datetime import datetime

from .exceptions import InvalidField, InvalidPlayer
from .player import (MAX_BIRTHDAY_YEAR, MAX_EXPERIENCE, MAX_LENGTH_NAME,
                     MAX_LENGTH_TITLE, MIN_BIRTHDAY_YEAR, Player, Profession,
                     Race)


def _validate_text(field: str, value, max_length: int):
    if value is None or not isinstance(value, str) or value == "":
        raise InvalidField(field, "must be a non-empty string")
    if len(value) > max_length:
        raise InvalidField(field, f"must be at most {max_length} characters")


def validate_name(value):
    _validate_text("name", value, MAX_LENGTH_NAME)


def validate_title(value):
    _validate_text("title", value, MAX_LENGTH_TITLE)


def validate_experience(value):
    if value is None or isinstance(value, bool) or not isinstance(value, int):
        raise InvalidField("experience", "must be an integer")
    if value < 0 or value > MAX_EXPERIENCE:
        raise InvalidField("experience", f"must be between 0 and {MAX_EXPERIENCE}")


def validate_race(value):
    if not isinstance(value, Race):
        raise InvalidField("race", "must be one of " + ", ".join(r.name for r in Race))


def validate_profession(value):
    if not isinstance(value, Profession):
        raise InvalidField(
            "profession", "must be one of " + ", ".join(p.name for p in Profession)
        )


def validate_birthday(value):
    if not isinstance(value, datetime):
        raise InvalidField("birthday", "must be a date")
    if not MIN_BIRTHDAY_YEAR <= value.year < MAX_BIRTHDAY_YEAR:
        raise InvalidField(
            "birthday",
            f"year must be in [{MIN_BIRTHDAY_YEAR}, {MAX_BIRTHDAY_YEAR})",
        )


# Orden en el que se chequean los campos; tambien lo usa el update parcial.
FIELD_VALIDATORS = {
    "name": validate_name,
    "title": validate_title,
    "race": validate_race,
    "profession": validate_profession,
    "birthday": validate_birthday,
    "experience": validate_experience,
}


def validate_player(player: Player | None):
    """
    Validacion completa, solo para crear jugadores. Corta en el primer campo
    invalido.
    """
    if player is None:
        raise InvalidPlayer("Invalid player")
    for field, validator in FIELD_VALIDATORS.items():
        validator(getattr(player, field))
