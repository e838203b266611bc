"""Player repository integration tests. Require Postgres; session is rolled back after each test."""

from datetime import date

import pytest

from registry.application.dtos.results import Saved, UniqueViolation
from registry.infrastructure.persistence.models import Player
from registry.infrastructure.persistence.repositories import PlayerRepository


def _player(squad_number: int, **overrides) -> Player:
    values = {
        "first_name": "Test",
        "last_name": f"Player {squad_number}",
        "date_of_birth": date(1995, 1, 1),
        "squad_number": squad_number,
        "position": "Centre-Back",
        "team": "Repo FC",
        "league": "Repo Test League",
    }
    values.update(overrides)
    return Player(**values)


@pytest.mark.requires_db
async def test_create_assigns_id_and_get_by_squad_number(db_session) -> None:
    repo = PlayerRepository(db_session, commit=False)

    result = await repo.create(_player(9901))

    assert isinstance(result, Saved)
    assert result.entity.id is not None
    found = await repo.get_by_squad_number(9901)
    assert found is not None
    assert found.id == result.entity.id
    assert await repo.exists(result.entity.id)


@pytest.mark.requires_db
async def test_duplicate_squad_number_is_unique_violation(db_session) -> None:
    """The unique index reports a value; the session stays usable afterwards."""
    repo = PlayerRepository(db_session, commit=False)
    await repo.create(_player(9902))

    result = await repo.create(_player(9902, first_name="Other"))

    assert isinstance(result, UniqueViolation)
    assert await repo.get_by_squad_number(9902) is not None


@pytest.mark.requires_db
async def test_search_by_league_case_insensitive(db_session) -> None:
    repo = PlayerRepository(db_session, commit=False)
    await repo.create(_player(9903, league="Repo Search Liga"))

    found = await repo.search("repo search")

    assert [p.squad_number for p in found] == [9903]
    assert await repo.search("100%_repo") == []


@pytest.mark.requires_db
async def test_update_and_delete(db_session) -> None:
    repo = PlayerRepository(db_session, commit=False)
    created = await repo.create(_player(9904))
    assert isinstance(created, Saved)
    player_id = created.entity.id

    updated = await repo.update(_player(9905, id=player_id, team="Moved FC"))

    assert isinstance(updated, Saved)
    assert (await repo.get_by_id(player_id)).team == "Moved FC"
    assert await repo.delete_by_id(player_id) is True
    assert await repo.delete_by_id(player_id) is False
    assert await repo.get_by_id(player_id) is None
