"""Initial schema: books, players

Revision ID: 3f1c9a2e7b40
Revises:
Create Date: 2026-10-19 09:12:41.508213

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "3f1c9a2e7b40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create books and players tables."""
    op.create_table(
        "books",
        sa.Column("isbn", sa.String(length=17), nullable=False),
        sa.Column("title", sa.String(), nullable=True),
        sa.Column("subtitle", sa.String(), nullable=True),
        sa.Column("author", sa.String(), nullable=True),
        sa.Column("publisher", sa.String(), nullable=True),
        sa.Column("published", sa.Date(), nullable=True),
        sa.Column("pages", sa.Integer(), nullable=True),
        sa.Column("description", sa.String(length=8192), nullable=True),
        sa.Column("website", sa.String(), nullable=True),
        sa.PrimaryKeyConstraint("isbn"),
    )

    op.create_table(
        "players",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("first_name", sa.String(), nullable=True),
        sa.Column("middle_name", sa.String(), nullable=True),
        sa.Column("last_name", sa.String(), nullable=True),
        sa.Column("date_of_birth", sa.Date(), nullable=True),
        sa.Column("squad_number", sa.Integer(), nullable=False),
        sa.Column("position", sa.String(), nullable=True),
        sa.Column("abbr_position", sa.String(), nullable=True),
        sa.Column("team", sa.String(), nullable=True),
        sa.Column("league", sa.String(), nullable=True),
        sa.Column("starting11", sa.Boolean(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    # Final arbiter for concurrent creates with the same squad number.
    op.create_index(
        op.f("ix_players_squad_number"), "players", ["squad_number"], unique=True
    )
    op.create_index(op.f("ix_players_league"), "players", ["league"], unique=False)


def downgrade() -> None:
    """Drop books and players tables."""
    op.drop_index(op.f("ix_players_league"), table_name="players")
    op.drop_index(op.f("ix_players_squad_number"), table_name="players")
    op.drop_table("players")
    op.drop_table("books")
