"""Explicit field-by-field mapping between ORM entities and application DTOs."""

from registry.application.dtos.book import BookDTO
from registry.application.dtos.player import PlayerDTO
from registry.infrastructure.persistence.models.book import Book
from registry.infrastructure.persistence.models.player import Player


class BookMapper:
    """Stateless Book <-> BookDTO converter."""

    def to_dto(self, entity: Book) -> BookDTO:
        return BookDTO(
            isbn=entity.isbn,
            title=entity.title,
            subtitle=entity.subtitle,
            author=entity.author,
            publisher=entity.publisher,
            published=entity.published,
            pages=entity.pages,
            description=entity.description,
            website=entity.website,
        )

    def to_entity(self, dto: BookDTO) -> Book:
        return Book(
            isbn=dto.isbn,
            title=dto.title,
            subtitle=dto.subtitle,
            author=dto.author,
            publisher=dto.publisher,
            published=dto.published,
            pages=dto.pages,
            description=dto.description,
            website=dto.website,
        )


class PlayerMapper:
    """Stateless Player <-> PlayerDTO converter.

    A DTO without id maps to an entity without id, so the store assigns one.
    """

    def to_dto(self, entity: Player) -> PlayerDTO:
        return PlayerDTO(
            id=entity.id,
            first_name=entity.first_name,
            middle_name=entity.middle_name,
            last_name=entity.last_name,
            date_of_birth=entity.date_of_birth,
            squad_number=entity.squad_number,
            position=entity.position,
            abbr_position=entity.abbr_position,
            team=entity.team,
            league=entity.league,
            starting11=entity.starting11,
        )

    def to_entity(self, dto: PlayerDTO) -> Player:
        return Player(
            id=dto.id,
            first_name=dto.first_name,
            middle_name=dto.middle_name,
            last_name=dto.last_name,
            date_of_birth=dto.date_of_birth,
            squad_number=dto.squad_number,
            position=dto.position,
            abbr_position=dto.abbr_position,
            team=dto.team,
            league=dto.league,
            starting11=dto.starting11,
        )
