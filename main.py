import logging
from os import getenv
from typing import List, Optional

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from database import Database
from model import (Player, PlayerCriteria, PlayerOrder, Profession, Race,
                   birthday_from_millis, millis_from_birthday)
from model.exceptions import InvalidField, InvalidPlayer, NotFound
from repositories import PlayerRepository
from services import PlayerService
from services.player_service import DEFAULT_PAGE_SIZE

logging.basicConfig(level=getenv("LOG_LEVEL", "INFO"))
logger = logging.getLogger(__name__)

db_uri = getenv("DB_URI")
if db_uri is not None:
    db = Database(db_uri=db_uri)
else:
    db = Database()

app = FastAPI()

session = db.get_session()

player_repo = PlayerRepository(session)
player_service = PlayerService(player_repo)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:5173", "http://localhost:8080"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def add_services_to_request(request: Request, call_next):
    request.state.player_service = player_service
    response = await call_next(request)
    return response


def get_player_service(request: Request) -> PlayerService:
    return request.state.player_service


class PlayerIn(BaseModel):
    name: Optional[str] = None
    title: Optional[str] = None
    race: Optional[Race] = None
    profession: Optional[Profession] = None
    birthday: Optional[int] = None
    banned: Optional[bool] = None
    experience: Optional[int] = None

    def to_player(self) -> Player:
        return Player(
            name=self.name,
            title=self.title,
            race=self.race,
            profession=self.profession,
            birthday=(
                birthday_from_millis(self.birthday)
                if self.birthday is not None
                else None
            ),
            banned=self.banned,
            experience=self.experience,
        )


class PlayerUpdate(PlayerIn):
    pass


class PlayerOut(BaseModel):
    id: int
    name: str
    title: str
    race: Race
    profession: Profession
    birthday: int
    banned: bool
    experience: int
    level: int
    until_next_level: int

    @staticmethod
    def from_player(player: Player) -> "PlayerOut":
        return PlayerOut(
            id=player.id,
            name=player.name,
            title=player.title,
            race=player.race,
            profession=player.profession,
            birthday=millis_from_birthday(player.birthday),
            banned=player.banned,
            experience=player.experience,
            level=player.level,
            until_next_level=player.until_next_level,
        )


def check_id(id: int):
    if id <= 0:
        raise HTTPException(status_code=400, detail="Invalid ID")


def bad_request(e: Exception) -> HTTPException:
    return HTTPException(status_code=400, detail=str(e))


def not_found(e: NotFound) -> HTTPException:
    return HTTPException(status_code=404, detail="Player not found")


def make_criteria(
    name: Optional[str] = None,
    title: Optional[str] = None,
    race: Optional[Race] = None,
    profession: Optional[Profession] = None,
    after: Optional[int] = None,
    before: Optional[int] = None,
    banned: Optional[bool] = None,
    min_experience: Optional[int] = None,
    max_experience: Optional[int] = None,
    min_level: Optional[int] = None,
    max_level: Optional[int] = None,
) -> PlayerCriteria:
    """
    Filtros del listado y del conteo; after/before llegan en milisegundos.
    """
    try:
        after_date = birthday_from_millis(after, "after") if after is not None else None
        before_date = (
            birthday_from_millis(before, "before") if before is not None else None
        )
    except InvalidField as e:
        raise bad_request(e)
    return PlayerCriteria(
        name=name,
        title=title,
        race=race,
        profession=profession,
        after=after_date,
        before=before_date,
        banned=banned,
        min_experience=min_experience,
        max_experience=max_experience,
        min_level=min_level,
        max_level=max_level,
    )


@app.post("/rest/players")
def create_player(
    player_in: PlayerIn,
    service: PlayerService = Depends(get_player_service),
) -> PlayerOut:
    """
    Crea un jugador nuevo
    """
    try:
        player = service.create(player_in.to_player())
    except (InvalidField, InvalidPlayer) as e:
        raise bad_request(e)
    return PlayerOut.from_player(player)


@app.get("/rest/players")
def list_players(
    criteria: PlayerCriteria = Depends(make_criteria),
    order: PlayerOrder = PlayerOrder.ID,
    page_number: int = 0,
    page_size: int = DEFAULT_PAGE_SIZE,
    service: PlayerService = Depends(get_player_service),
) -> List[PlayerOut]:
    """
    Lista paginada de jugadores que cumplen los filtros
    """
    try:
        players = service.list(criteria, order, page_number, page_size)
    except InvalidField as e:
        raise bad_request(e)
    return [PlayerOut.from_player(player) for player in players]


@app.get("/rest/players/count")
def count_players(
    criteria: PlayerCriteria = Depends(make_criteria),
    service: PlayerService = Depends(get_player_service),
) -> int:
    return service.count(criteria)


@app.get("/rest/players/{id}")
def get_player(
    id: int,
    service: PlayerService = Depends(get_player_service),
) -> PlayerOut:
    check_id(id)
    try:
        player = service.get_by_id(id)
    except NotFound as e:
        raise not_found(e)
    return PlayerOut.from_player(player)


@app.post("/rest/players/{id}")
def update_player(
    id: int,
    player_update: PlayerUpdate,
    service: PlayerService = Depends(get_player_service),
) -> PlayerOut:
    """
    Actualiza solo los campos enviados
    """
    check_id(id)
    try:
        player = service.update(id, player_update.to_player())
    except NotFound as e:
        raise not_found(e)
    except (InvalidField, InvalidPlayer) as e:
        raise bad_request(e)
    return PlayerOut.from_player(player)


@app.delete("/rest/players/{id}")
def delete_player(
    id: int,
    service: PlayerService = Depends(get_player_service),
) -> PlayerOut:
    check_id(id)
    try:
        player = service.delete(id)
    except NotFound as e:
        raise not_found(e)
    return PlayerOut.from_player(player)
