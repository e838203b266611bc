"""Player repository (SQLAlchemy). Returns ORM entities; the service maps them."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from registry.infrastructure.persistence.models.player import Player
from registry.infrastructure.persistence.repositories.base import BaseRepository


class PlayerRepository(BaseRepository[Player]):
    """Players keyed by surrogate id; squad_number is unique."""

    def __init__(self, db: AsyncSession, *, commit: bool = True) -> None:
        super().__init__(db, Player, commit=commit)

    async def get_by_squad_number(self, squad_number: int) -> Player | None:
        """Return the player wearing squad_number, or None."""
        result = await self.db.execute(
            select(Player).where(Player.squad_number == squad_number)
        )
        return result.scalar_one_or_none()

    async def search(self, term: str) -> list[Player]:
        """Players whose league contains term, case-insensitive."""
        result = await self.db.execute(
            select(Player)
            .where(Player.league.icontains(term, autoescape=True))
            .order_by(Player.id)
        )
        return list(result.scalars().all())
