"""Player API: thin routes delegating to PlayerService."""

from typing import Annotated

from fastapi import APIRouter, Depends, Response

from registry.api.v1.dependencies import get_player_service
from registry.application.dtos.results import Conflict, Rejected
from registry.application.services.player_service import PlayerService
from registry.application.services.player_validator import validate_player
from registry.domain.exceptions import (
    ConflictException,
    ResourceNotFoundException,
    ValidationException,
)
from registry.schemas.player import PlayerRequest, PlayerResponse

router = APIRouter()


@router.post("", response_model=PlayerResponse, status_code=201)
async def create_player(
    body: PlayerRequest,
    response: Response,
    service: Annotated[PlayerService, Depends(get_player_service)],
):
    """Create a player; the id is assigned by the store.

    409 when the squad number is taken (including a lost race), 400 when invalid.
    """
    result = await service.create(body.to_dto())
    if isinstance(result, Rejected):
        raise ValidationException("Player validation failed", errors=list(result.errors))
    if isinstance(result, Conflict):
        raise ConflictException("player", result.field, result.value)
    response.headers["Location"] = f"/api/v1/players/{result.value.id}"
    return PlayerResponse.model_validate(result.value)


@router.get("", response_model=list[PlayerResponse])
async def list_players(service: Annotated[PlayerService, Depends(get_player_service)]):
    """Return every player (cached collection)."""
    return [PlayerResponse.model_validate(p) for p in await service.retrieve_all()]


@router.get("/search/league/{league}", response_model=list[PlayerResponse])
async def search_players_by_league(
    league: str,
    service: Annotated[PlayerService, Depends(get_player_service)],
):
    """Players whose league contains the term (case-insensitive, uncached)."""
    return [PlayerResponse.model_validate(p) for p in await service.search(league)]


@router.get("/search/squadnumber/{squad_number}", response_model=PlayerResponse)
async def search_player_by_squad_number(
    squad_number: int,
    service: Annotated[PlayerService, Depends(get_player_service)],
):
    """Player wearing squad_number (uncached)."""
    player = await service.search_by_squad_number(squad_number)
    if player is None:
        raise ResourceNotFoundException("player", f"squad_number={squad_number}")
    return PlayerResponse.model_validate(player)


@router.get("/{player_id}", response_model=PlayerResponse)
async def get_player(
    player_id: int,
    service: Annotated[PlayerService, Depends(get_player_service)],
):
    """Get player by id."""
    player = await service.retrieve_by_id(player_id)
    if player is None:
        raise ResourceNotFoundException("player", player_id)
    return PlayerResponse.model_validate(player)


@router.put("/{player_id}", status_code=204)
async def update_player(
    player_id: int,
    body: PlayerRequest,
    service: Annotated[PlayerService, Depends(get_player_service)],
) -> Response:
    """Replace a player. Body id, when present, must match the path.

    404 when the player does not exist, 409 when the squad number belongs to
    another player.
    """
    if body.id is not None and body.id != player_id:
        raise ValidationException("Body id does not match path", field="id")
    dto = body.to_dto(player_id)
    errors = validate_player(dto)
    if errors:
        raise ValidationException("Player validation failed", errors=errors)
    if not await service.update(dto):
        # The body is valid, so an existing player means the store refused
        # the squad number.
        if await service.retrieve_by_id(player_id) is not None:
            raise ConflictException("player", "squad_number", dto.squad_number)
        raise ResourceNotFoundException("player", player_id)
    return Response(status_code=204)


@router.delete("/{player_id}", status_code=204)
async def delete_player(
    player_id: int,
    service: Annotated[PlayerService, Depends(get_player_service)],
) -> Response:
    """Delete player by id."""
    if not await service.delete(player_id):
        raise ResourceNotFoundException("player", player_id)
    return Response(status_code=204)
