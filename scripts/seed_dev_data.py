"""Seed dev data from docs/seed-data.json into the database.

Creates books and players through the resource services, so validation,
uniqueness checks and cache reconciliation apply exactly as for API calls.
Existing records (same ISBN or squad number) are skipped.

Usage:
    python -m scripts.seed_dev_data [path/to/seed-data.json]

Default path: docs/seed-data.json (relative to project root).
Requires: DATABASE_URL and a migrated database (alembic upgrade head).
"""

from __future__ import annotations

import asyncio
import json
import sys
from datetime import date
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

from registry.application.dtos.book import BookDTO
from registry.application.dtos.player import PlayerDTO
from registry.application.dtos.results import Conflict, Created
from registry.application.services.book_service import BookService
from registry.application.services.player_service import PlayerService
from registry.core.config import get_settings
from registry.core.lifespan import build_cache
from registry.infrastructure.persistence import database
from registry.infrastructure.persistence.mappers import BookMapper, PlayerMapper
from registry.infrastructure.persistence.repositories import (
    BookRepository,
    PlayerRepository,
)


def _project_root() -> Path:
    return Path(__file__).resolve().parent.parent


def _parse_date(value: str | None) -> date | None:
    return date.fromisoformat(value) if value else None


def _book(data: dict[str, Any]) -> BookDTO:
    return BookDTO(**{**data, "published": _parse_date(data.get("published"))})


def _player(data: dict[str, Any]) -> PlayerDTO:
    return PlayerDTO(**{**data, "date_of_birth": _parse_date(data.get("date_of_birth"))})


def _report(label: str, result: Any) -> None:
    if isinstance(result, Created):
        print(f"  {label} -> created")
    elif isinstance(result, Conflict):
        print(f"  {label} already exists ({result.field}={result.value}), skip")
    else:
        print(f"  {label} rejected: {', '.join(result.errors)}", file=sys.stderr)


async def run(path: Path) -> None:
    seed = json.loads(path.read_text(encoding="utf-8"))
    database._ensure_engine()
    assert database.AsyncSessionLocal is not None
    cache = build_cache()
    await cache.connect()
    try:
        async with database.AsyncSessionLocal() as session:
            books = BookService(BookRepository(session), cache, BookMapper())
            print("Books")
            for data in seed.get("books", []):
                _report(data["isbn"], await books.create(_book(data)))

            players = PlayerService(PlayerRepository(session), cache, PlayerMapper())
            print("Players")
            for data in seed.get("players", []):
                label = f"#{data['squad_number']} {data['first_name']} {data['last_name']}"
                _report(label, await players.create(_player(data)))
    finally:
        await cache.disconnect()
        await database.dispose_engine()
    print("Seed completed.")


def main() -> None:
    load_dotenv(_project_root() / ".env", override=True)
    get_settings.cache_clear()
    path = Path(sys.argv[1]) if len(sys.argv) > 1 else _project_root() / "docs" / "seed-data.json"
    if not path.is_file():
        print(f"Seed file not found: {path}", file=sys.stderr)
        sys.exit(1)
    asyncio.run(run(path))


if __name__ == "__main__":
    main()
