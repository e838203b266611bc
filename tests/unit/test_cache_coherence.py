"""Cache coherence properties of the resource services.

After any successful mutation, the next read (single entry or collection)
reflects the store. Invalidation stays inside the mutated namespace.
"""

import asyncio
import dataclasses
from datetime import date

from registry.application.dtos.book import BookDTO
from registry.application.dtos.player import PlayerDTO
from registry.application.services.book_service import BookService
from registry.application.services.player_service import PlayerService
from registry.infrastructure.cache.keys import collection_key, entry_key
from registry.infrastructure.cache.memory_cache import MemoryCache
from registry.infrastructure.persistence.mappers import PlayerMapper
from registry.infrastructure.persistence.models.player import Player
from tests.fakes import InMemoryBookStore, InMemoryPlayerStore, book_row, player_row


async def test_repeated_reads_are_idempotent(
    player_service: PlayerService, player_store: InMemoryPlayerStore
) -> None:
    player_store.add(player_row(id=10, squad_number=10))

    reads = [await player_service.retrieve_by_id(10) for _ in range(3)]
    lists = [await player_service.retrieve_all() for _ in range(3)]

    assert reads[0] == reads[1] == reads[2]
    assert lists[0] == lists[1] == lists[2]
    assert player_store.calls["get_by_id"] == 1
    assert player_store.calls["get_all"] == 1


async def test_update_is_visible_in_single_and_collection_reads(
    player_service: PlayerService, player_store: InMemoryPlayerStore
) -> None:
    stored = player_store.add(player_row(id=7, squad_number=7, last_name="de Paul"))
    await player_service.retrieve_by_id(7)
    await player_service.retrieve_all()

    updated = PlayerDTO(
        id=stored.id,
        first_name="Rodrigo",
        middle_name="Javier",
        last_name="de Paul",
        date_of_birth=date(1994, 5, 24),
        squad_number=7,
        position="Central Midfield",
        abbr_position="CM",
        team="Atlético Madrid",
        league="La Liga",
        starting11=True,
    )
    assert await player_service.update(updated) is True

    assert await player_service.retrieve_by_id(7) == updated
    assert await player_service.retrieve_all() == [updated]


async def test_create_invalidates_cached_collection(
    book_service: BookService, book_store: InMemoryBookStore, cache: MemoryCache
) -> None:
    book_store.add(book_row())
    assert len(await book_service.retrieve_all()) == 1

    await book_service.create(
        BookDTO(
            isbn="9781838986698",
            title="The Java Workshop",
            author="David Cuartielles",
            description="A practical introduction to Java.",
        )
    )

    assert collection_key("books") not in cache
    assert entry_key("books", "9781838986698") in cache
    assert [b.isbn for b in await book_service.retrieve_all()] == [
        "9781484200773",
        "9781838986698",
    ]


async def test_full_invalidation_leaves_other_namespaces_alone(
    book_service: BookService,
    player_service: PlayerService,
    book_store: InMemoryBookStore,
    player_store: InMemoryPlayerStore,
    cache: MemoryCache,
) -> None:
    book_store.add(book_row())
    player_store.add(player_row(id=10, squad_number=10))
    await book_service.retrieve_by_id("9781484200773")
    await book_service.retrieve_all()
    await player_service.retrieve_by_id(10)
    await player_service.retrieve_all()

    assert await book_service.delete("9781484200773") is True

    assert entry_key("books", "9781484200773") not in cache
    assert collection_key("books") not in cache
    assert entry_key("players", 10) in cache
    assert collection_key("players") in cache


async def test_failed_mutations_leave_cache_untouched(
    player_service: PlayerService, player_store: InMemoryPlayerStore, cache: MemoryCache
) -> None:
    player_store.add(player_row(id=10, squad_number=10))
    await player_service.retrieve_by_id(10)
    await player_service.retrieve_all()
    snapshot = len(cache)

    assert await player_service.delete(99) is False
    assert await player_service.update(PlayerDTO(id=10)) is False

    assert len(cache) == snapshot
    assert entry_key("players", 10) in cache


class SlowReadPlayerStore(InMemoryPlayerStore):
    """Takes its snapshot, then yields before returning it, as a slow query would."""

    async def get_all(self) -> list[Player]:
        rows = await super().get_all()
        await asyncio.sleep(0.01)
        return rows

    async def get_by_id(self, entity_id: int) -> Player | None:
        row = await super().get_by_id(entity_id)
        await asyncio.sleep(0.01)
        return row


def _renumbered(player: PlayerDTO, squad_number: int) -> PlayerDTO:
    return dataclasses.replace(player, squad_number=squad_number)


async def test_slow_collection_read_does_not_recache_pre_update_list(
    cache: MemoryCache,
) -> None:
    store = SlowReadPlayerStore()
    store.add(player_row(id=10, squad_number=10))
    service = PlayerService(store, cache, PlayerMapper())
    current = await service.retrieve_by_id(10)

    reader = asyncio.create_task(service.retrieve_all())
    await asyncio.sleep(0)
    assert await service.update(_renumbered(current, 30)) is True
    stale = await reader

    assert [p.squad_number for p in stale] == [10]
    assert collection_key("players") not in cache
    assert [p.squad_number for p in await service.retrieve_all()] == [30]


async def test_slow_entry_read_does_not_recache_pre_update_record(
    cache: MemoryCache,
) -> None:
    store = SlowReadPlayerStore()
    store.add(player_row(id=10, squad_number=10))
    service = PlayerService(store, cache, PlayerMapper())
    current = (await service.retrieve_all())[0]

    reader = asyncio.create_task(service.retrieve_by_id(10))
    await asyncio.sleep(0)
    assert await service.update(_renumbered(current, 30)) is True
    await reader

    assert entry_key("players", 10) not in cache
    assert (await service.retrieve_by_id(10)).squad_number == 30


async def test_slow_read_racing_delete_does_not_resurrect_record(
    cache: MemoryCache,
) -> None:
    store = SlowReadPlayerStore()
    store.add(player_row(id=10, squad_number=10))
    service = PlayerService(store, cache, PlayerMapper())

    reader = asyncio.create_task(service.retrieve_by_id(10))
    await asyncio.sleep(0)
    assert await service.delete(10) is True
    await reader

    assert await service.retrieve_by_id(10) is None
    assert await service.retrieve_all() == []
