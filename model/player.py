from datetime import datetime, timezone
from enum import Enum

from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.types import Boolean, DateTime, Integer, String
from sqlalchemy.types import Enum as SqlEnum

from database import Base

from .exceptions import InvalidField

MAX_LENGTH_NAME = 12
MAX_LENGTH_TITLE = 30
MAX_EXPERIENCE = 10_000_000
MIN_BIRTHDAY_YEAR = 2000
MAX_BIRTHDAY_YEAR = 3000


class Race(Enum):
    HUMAN = "HUMAN"
    DWARF = "DWARF"
    ELF = "ELF"
    GIANT = "GIANT"
    ORC = "ORC"
    TROLL = "TROLL"
    HOBBIT = "HOBBIT"


class Profession(Enum):
    WARRIOR = "WARRIOR"
    ROGUE = "ROGUE"
    SORCERER = "SORCERER"
    CLERIC = "CLERIC"
    PALADIN = "PALADIN"
    NAZGUL = "NAZGUL"
    WARLOCK = "WARLOCK"
    DRUID = "DRUID"


def birthday_from_millis(millis: int, field: str = "birthday") -> datetime:
    """
    Convierte milisegundos desde epoch a un datetime UTC sin tzinfo, que es
    como se guardan los cumpleaños en la base. Valores fuera del rango de
    datetime se reportan como InvalidField sobre `field`.
    """
    try:
        moment = datetime.fromtimestamp(millis / 1000, tz=timezone.utc)
    except (OverflowError, OSError, ValueError):
        raise InvalidField(field, "timestamp out of range")
    return moment.replace(tzinfo=None)


def millis_from_birthday(birthday: datetime) -> int:
    return int(birthday.replace(tzinfo=timezone.utc).timestamp() * 1000)


class Player(Base):
    __tablename__ = "players"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(MAX_LENGTH_NAME))
    title: Mapped[str] = mapped_column(String(MAX_LENGTH_TITLE))
    race: Mapped[Race] = mapped_column(SqlEnum(Race))
    profession: Mapped[Profession] = mapped_column(SqlEnum(Profession))
    birthday: Mapped[datetime] = mapped_column(DateTime)
    banned: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    experience: Mapped[int] = mapped_column(Integer)
    level: Mapped[int] = mapped_column(Integer)
    until_next_level: Mapped[int] = mapped_column(Integer)

    def __repr__(self) -> str:
        return (
            f"<Player(id={self.id}, name='{self.name}', title='{self.title}', "
            f"race={self.race}, profession={self.profession}, birthday={self.birthday}, "
            f"banned={self.banned}, experience={self.experience}, level={self.level}, "
            f"until_next_level={self.until_next_level})>"
        )

    def copy(self) -> "Player":
        # Instancia nueva, fuera de la sesion
        return Player(**self.to_dict())

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "title": self.title,
            "race": self.race,
            "profession": self.profession,
            "birthday": self.birthday,
            "banned": self.banned,
            "experience": self.experience,
            "level": self.level,
            "until_next_level": self.until_next_level,
        }
