"""Entity <-> DTO mappers copy every field explicitly."""

from datetime import date

from registry.application.dtos.book import BookDTO
from registry.application.dtos.player import PlayerDTO
from registry.infrastructure.persistence.mappers import BookMapper, PlayerMapper
from registry.infrastructure.persistence.models import Book, Player


def test_book_mapper_round_trip() -> None:
    dto = BookDTO(
        isbn="9781789613476",
        title="Hands-On Microservices with Spring Boot and Spring Cloud",
        subtitle="Build and deploy Java microservices",
        author="Magnus Larsson",
        publisher="Packt Publishing",
        published=date(2019, 9, 20),
        pages=668,
        description="Microservices with Spring Boot.",
        website="https://www.packtpub.com/",
    )
    entity = BookMapper().to_entity(dto)

    assert isinstance(entity, Book)
    assert entity.isbn == "9781789613476"
    assert entity.published == date(2019, 9, 20)
    assert BookMapper().to_dto(entity) == dto


def test_player_mapper_without_id_leaves_key_unset() -> None:
    entity = PlayerMapper().to_entity(PlayerDTO(first_name="Julián", squad_number=9))

    assert isinstance(entity, Player)
    assert entity.id is None
    assert entity.squad_number == 9


def test_player_mapper_copies_all_fields() -> None:
    entity = Player(
        id=24,
        first_name="Enzo",
        middle_name="Jeremías",
        last_name="Fernández",
        date_of_birth=date(2001, 1, 17),
        squad_number=24,
        position="Central Midfield",
        abbr_position="CM",
        team="SL Benfica",
        league="Liga Portugal",
        starting11=True,
    )
    dto = PlayerMapper().to_dto(entity)

    assert dto == PlayerDTO(
        id=24,
        first_name="Enzo",
        middle_name="Jeremías",
        last_name="Fernández",
        date_of_birth=date(2001, 1, 17),
        squad_number=24,
        position="Central Midfield",
        abbr_position="CM",
        team="SL Benfica",
        league="Liga Portugal",
        starting11=True,
    )
