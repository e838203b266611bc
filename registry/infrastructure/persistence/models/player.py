"""Player ORM model. Surrogate integer key; squad_number has a unique index."""

from datetime import date

from sqlalchemy import Boolean, Date, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from registry.infrastructure.persistence.database import Base


class Player(Base):
    """Roster record. Table: players.

    The unique index on squad_number is what makes concurrent creates with the
    same number safe; the service pre-check alone is not atomic.
    """

    __tablename__ = "players"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    first_name: Mapped[str | None] = mapped_column(String, nullable=True)
    middle_name: Mapped[str | None] = mapped_column(String, nullable=True)
    last_name: Mapped[str | None] = mapped_column(String, nullable=True)
    date_of_birth: Mapped[date | None] = mapped_column(Date, nullable=True)
    squad_number: Mapped[int] = mapped_column(
        Integer, nullable=False, unique=True, index=True
    )
    position: Mapped[str | None] = mapped_column(String, nullable=True)
    abbr_position: Mapped[str | None] = mapped_column(String, nullable=True)
    team: Mapped[str | None] = mapped_column(String, nullable=True)
    league: Mapped[str | None] = mapped_column(String, nullable=True, index=True)
    starting11: Mapped[bool | None] = mapped_column(Boolean, nullable=True)
