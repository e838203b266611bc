"""Redis CacheService with a mocked client: codec, TTL, reconnect and failure."""

from unittest.mock import AsyncMock, MagicMock

import pytest
import redis.asyncio as redis

from registry.domain.exceptions import CacheUnavailableException
from registry.infrastructure.cache.redis_cache import CacheService


async def _aiter(items):
    for item in items:
        yield item


@pytest.fixture
def client() -> AsyncMock:
    return AsyncMock()


async def test_get_decodes_json(client: AsyncMock) -> None:
    client.get.return_value = '{"isbn": "9781484200773"}'
    service = CacheService(redis_client=client)

    assert await service.get("books:id:9781484200773") == {"isbn": "9781484200773"}
    client.get.return_value = None
    assert await service.get("books:id:missing") is None


async def test_set_without_ttl_never_expires(client: AsyncMock) -> None:
    service = CacheService(redis_client=client)

    await service.set("players:id:10", {"id": 10})

    client.set.assert_awaited_once_with("players:id:10", '{"id": 10}', ex=None)


async def test_set_uses_default_ttl(client: AsyncMock) -> None:
    service = CacheService(redis_client=client, default_ttl=30)

    await service.set("players:all", [])
    await service.set("players:id:1", {}, ttl=5)

    assert client.set.await_args_list[0].kwargs == {"ex": 30}
    assert client.set.await_args_list[1].kwargs == {"ex": 5}


async def test_connection_loss_reconnects_once_and_retries(client: AsyncMock) -> None:
    client.delete.side_effect = redis.ConnectionError("reset")
    fresh = AsyncMock()
    service = CacheService(redis_client=client)

    async def reconnect() -> None:
        service.redis = fresh
        service._connected = True

    service.connect = AsyncMock(side_effect=reconnect)

    await service.delete("books:id:1")

    client.aclose.assert_awaited_once()
    fresh.delete.assert_awaited_once_with("books:id:1")


async def test_failed_reconnect_raises_cache_unavailable(client: AsyncMock) -> None:
    client.delete.side_effect = redis.ConnectionError("reset")
    service = CacheService(redis_client=client)
    service.connect = AsyncMock()

    with pytest.raises(CacheUnavailableException) as info:
        await service.delete("books:id:1")

    assert info.value.details == {"operation": "delete", "key": "books:id:1"}
    assert not service.is_available()


async def test_other_redis_errors_raise_without_reconnect(client: AsyncMock) -> None:
    client.get.side_effect = redis.ResponseError("WRONGTYPE")
    service = CacheService(redis_client=client)
    service.connect = AsyncMock()

    with pytest.raises(CacheUnavailableException):
        await service.get("books:all")

    service.connect.assert_not_awaited()


async def test_clear_namespace_unlinks_matching_keys(client: AsyncMock) -> None:
    keys = ["players:id:10", "players:all"]
    client.scan_iter = MagicMock(return_value=_aiter(keys))
    pipe = MagicMock()
    pipe.execute = AsyncMock(return_value=[2])
    pipe.__aenter__.return_value = pipe
    client.pipeline = MagicMock(return_value=pipe)
    service = CacheService(redis_client=client)

    removed = await service.clear_namespace("players")

    assert removed == 2
    client.scan_iter.assert_called_once_with(match="players:*")
    pipe.unlink.assert_called_once_with(*keys)


async def test_disconnect_closes_client(client: AsyncMock) -> None:
    service = CacheService(redis_client=client)

    await service.disconnect()

    client.aclose.assert_awaited_once()
    assert not service.is_available()


async def test_generation_defaults_to_zero(client: AsyncMock) -> None:
    service = CacheService(redis_client=client)
    client.get.return_value = None
    assert await service.generation("books") == 0

    client.get.return_value = "7"
    assert await service.generation("books") == 7
    client.get.assert_awaited_with("generation:books")


async def test_bump_generation_increments_counter(client: AsyncMock) -> None:
    client.incr.return_value = 3
    service = CacheService(redis_client=client)

    assert await service.bump_generation("players") == 3
    client.incr.assert_awaited_once_with("generation:players")


async def test_set_if_generation_runs_check_and_set_as_one_script(client: AsyncMock) -> None:
    client.eval.return_value = 1
    service = CacheService(redis_client=client, default_ttl=30)

    assert await service.set_if_generation("players:all", [], "players", 2) is True

    args = client.eval.await_args.args
    assert args[1:] == (2, "generation:players", "players:all", "2", "[]", "30")


async def test_set_if_generation_reports_stale_fill(client: AsyncMock) -> None:
    client.eval.return_value = 0
    service = CacheService(redis_client=client)

    assert await service.set_if_generation("players:id:10", {}, "players", 0) is False
    assert client.eval.await_args.args[-1] == ""
    client.set.assert_not_awaited()
