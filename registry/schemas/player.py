"""Player API schemas."""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field

from registry.application.dtos.player import PlayerDTO


class PlayerRequest(BaseModel):
    """Request body for POST /players and PUT /players/{id}.

    id is ignored on create (the store assigns it); on update it must match
    the path id when present.
    """

    id: int | None = None
    first_name: str | None = None
    middle_name: str | None = None
    last_name: str | None = None
    date_of_birth: date | None = Field(default=None, description="Date of birth (past)")
    squad_number: int | None = Field(default=None, description="Unique jersey number")
    position: str | None = None
    abbr_position: str | None = None
    team: str | None = None
    league: str | None = None
    starting11: bool | None = None

    def to_dto(self, player_id: int | None = None) -> PlayerDTO:
        """Build the service DTO with the given id."""
        return PlayerDTO(
            id=player_id,
            first_name=self.first_name,
            middle_name=self.middle_name,
            last_name=self.last_name,
            date_of_birth=self.date_of_birth,
            squad_number=self.squad_number,
            position=self.position,
            abbr_position=self.abbr_position,
            team=self.team,
            league=self.league,
            starting11=self.starting11,
        )


class PlayerResponse(BaseModel):
    """Player in list/get responses."""

    id: int
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

    model_config = ConfigDict(from_attributes=True)
