"""DTOs for player use cases (no dependency on ORM)."""

from dataclasses import dataclass
from datetime import date
from typing import Any


@dataclass(frozen=True)
class PlayerDTO:
    """Player record at the service boundary.

    id is assigned by the store on create and ignored if a caller sends one.
    squad_number is unique across all players.
    """

    id: int | None = None
    first_name: str | None = None
    middle_name: str | None = None
    last_name: str | None = None
    date_of_birth: date | None = None
    squad_number: int | None = None
    position: str | None = None
    abbr_position: str | None = None
    team: str | None = None
    league: str | None = None
    starting11: bool | None = None


def player_to_dict(dto: PlayerDTO) -> dict[str, Any]:
    """JSON-compatible dict for caching and responses (ISO dates)."""
    return {
        "id": dto.id,
        "first_name": dto.first_name,
        "middle_name": dto.middle_name,
        "last_name": dto.last_name,
        "date_of_birth": dto.date_of_birth.isoformat() if dto.date_of_birth else None,
        "squad_number": dto.squad_number,
        "position": dto.position,
        "abbr_position": dto.abbr_position,
        "team": dto.team,
        "league": dto.league,
        "starting11": dto.starting11,
    }


def player_from_dict(data: dict[str, Any]) -> PlayerDTO:
    """Build a PlayerDTO from player_to_dict output."""
    date_of_birth = data.get("date_of_birth")
    return PlayerDTO(
        id=data.get("id"),
        first_name=data.get("first_name"),
        middle_name=data.get("middle_name"),
        last_name=data.get("last_name"),
        date_of_birth=date.fromisoformat(date_of_birth) if date_of_birth else None,
        squad_number=data.get("squad_number"),
        position=data.get("position"),
        abbr_position=data.get("abbr_position"),
        team=data.get("team"),
        league=data.get("league"),
        starting11=data.get("starting11"),
    )
