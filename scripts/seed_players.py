import argparse
import logging
from datetime import datetime

from database import Database
from model import Player, Profession, Race
from repositories import PlayerRepository
from services import PlayerService


def sample_players():
    return [
        Player(name="Ash", title="Novice", race=Race.HUMAN,
               profession=Profession.WARRIOR, birthday=datetime(2020, 1, 1),
               experience=100),
        Player(name="Gimli", title="Axe of Erebor", race=Race.DWARF,
               profession=Profession.WARRIOR, birthday=datetime(2004, 3, 12),
               experience=338_000),
        Player(name="Legolas", title="Prince of Mirkwood", race=Race.ELF,
               profession=Profession.ROGUE, birthday=datetime(2001, 7, 30),
               experience=1_200_000),
        Player(name="Azog", title="Defiler", race=Race.ORC,
               profession=Profession.WARLOCK, birthday=datetime(2010, 11, 2),
               experience=52_000, banned=True),
        Player(name="Bilbo", title="Burglar", race=Race.HOBBIT,
               profession=Profession.ROGUE, birthday=datetime(2011, 9, 22),
               experience=7_500),
        Player(name="Radagast", title="The Brown", race=Race.HUMAN,
               profession=Profession.DRUID, birthday=datetime(2002, 5, 5),
               experience=980_000),
        Player(name="Khamul", title="Shadow of the East", race=Race.HUMAN,
               profession=Profession.NAZGUL, birthday=datetime(2000, 1, 1),
               experience=10_000_000, banned=True),
    ]


def main():
    logging.basicConfig(level=logging.INFO)
    parser = argparse.ArgumentParser(
        description="Crea una base de datos con jugadores de juguete"
    )
    parser.add_argument(
        "--dbpath",
        type=str,
        required=True,
        help="La URL de la base de datos. Ej: sqlite:///./local.db",
    )
    args = parser.parse_args()
    logging.info("Conectando a la base de datos en %s", args.dbpath)
    db = Database(args.dbpath)
    service = PlayerService(PlayerRepository(db.get_session()))
    for player in sample_players():
        logging.info("Guardando jugador %s", player.name)
        service.create(player)
    logging.info("Se guardaron %d jugadores", service.count())
    db.close()


if __name__ == "__main__":
    main()
