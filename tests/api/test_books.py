"""Book API tests over ASGI with an in-memory store."""

from unittest.mock import AsyncMock

from httpx import AsyncClient

from registry.domain.exceptions import CacheUnavailableException

from tests.fakes import InMemoryBookStore, book_row

PRO_GIT = {
    "isbn": "9781484200773",
    "title": "Pro Git",
    "subtitle": "Everything you need to know about Git",
    "author": "Scott Chacon, Ben Straub",
    "publisher": "Apress",
    "published": "2014-11-18",
    "pages": 456,
    "description": "The reference guide to Git version control.",
    "website": "https://git-scm.com/book/en/v2",
}


async def test_create_book_returns_201_with_location(client: AsyncClient) -> None:
    response = await client.post("/api/v1/books", json=PRO_GIT)

    assert response.status_code == 201
    assert response.headers["Location"] == "/api/v1/books/9781484200773"
    assert response.json() == PRO_GIT


async def test_create_duplicate_book_returns_409(
    client: AsyncClient, book_store: InMemoryBookStore
) -> None:
    book_store.add(book_row())

    response = await client.post("/api/v1/books", json=PRO_GIT)

    assert response.status_code == 409
    body = response.json()
    assert body["error"] == "CONFLICT"
    assert body["details"]["field"] == "isbn"


async def test_create_invalid_book_returns_400_with_errors(client: AsyncClient) -> None:
    response = await client.post(
        "/api/v1/books", json={**PRO_GIT, "isbn": "1234567890", "title": ""}
    )

    assert response.status_code == 400
    errors = response.json()["details"]["errors"]
    assert "isbn must be a valid ISBN-10 or ISBN-13" in errors
    assert "title must not be blank" in errors


async def test_malformed_body_returns_422(client: AsyncClient) -> None:
    response = await client.post("/api/v1/books", json={**PRO_GIT, "pages": "many"})
    assert response.status_code == 422


async def test_get_list_and_search(
    client: AsyncClient, book_store: InMemoryBookStore
) -> None:
    book_store.add(book_row())
    book_store.add(
        book_row(isbn="9781838986698", title="The Java Workshop", description="Learn Java")
    )

    got = await client.get("/api/v1/books/9781484200773")
    listed = await client.get("/api/v1/books")
    found = await client.get("/api/v1/books/search", params={"description": "JAVA"})

    assert got.status_code == 200
    assert got.json()["title"] == "Pro Git"
    assert [b["isbn"] for b in listed.json()] == ["9781484200773", "9781838986698"]
    assert [b["isbn"] for b in found.json()] == ["9781838986698"]


async def test_search_without_term_returns_422(client: AsyncClient) -> None:
    response = await client.get("/api/v1/books/search")
    assert response.status_code == 422


async def test_get_missing_book_returns_404(client: AsyncClient) -> None:
    response = await client.get("/api/v1/books/9781484200773")

    assert response.status_code == 404
    assert response.json()["error"] == "RESOURCE_NOT_FOUND"


async def test_update_book(client: AsyncClient, book_store: InMemoryBookStore) -> None:
    book_store.add(book_row())

    response = await client.put(
        "/api/v1/books/9781484200773", json={**PRO_GIT, "pages": 500}
    )

    assert response.status_code == 204
    assert (await client.get("/api/v1/books/9781484200773")).json()["pages"] == 500


async def test_hyphenated_isbn_paths_address_the_same_book(
    client: AsyncClient, book_store: InMemoryBookStore
) -> None:
    book_store.add(book_row())

    fetched = await client.get("/api/v1/books/978-1-4842-0077-3")
    updated = await client.put(
        "/api/v1/books/978-1-4842-0077-3",
        json={**PRO_GIT, "isbn": "978-1-4842-0077-3", "pages": 500},
    )
    duplicate = await client.post(
        "/api/v1/books", json={**PRO_GIT, "isbn": "978-1-4842-0077-3"}
    )

    assert fetched.status_code == 200
    assert fetched.json()["isbn"] == "9781484200773"
    assert updated.status_code == 204
    assert duplicate.status_code == 409
    assert list(book_store.rows) == ["9781484200773"]
    assert book_store.rows["9781484200773"].pages == 500


async def test_update_isbn_mismatch_returns_400(
    client: AsyncClient, book_store: InMemoryBookStore
) -> None:
    book_store.add(book_row())

    response = await client.put("/api/v1/books/9781838986698", json=PRO_GIT)

    assert response.status_code == 400
    assert response.json()["details"]["field"] == "isbn"


async def test_update_missing_book_returns_404(client: AsyncClient) -> None:
    response = await client.put("/api/v1/books/9781484200773", json=PRO_GIT)
    assert response.status_code == 404


async def test_delete_book(client: AsyncClient, book_store: InMemoryBookStore) -> None:
    book_store.add(book_row())

    first = await client.delete("/api/v1/books/9781484200773")
    second = await client.delete("/api/v1/books/9781484200773")

    assert first.status_code == 204
    assert second.status_code == 404
    assert (await client.get("/api/v1/books")).json() == []


async def test_cache_outage_returns_503(client: AsyncClient, cache, monkeypatch) -> None:
    monkeypatch.setattr(
        cache, "get", AsyncMock(side_effect=CacheUnavailableException("get", "books:all"))
    )

    response = await client.get("/api/v1/books")

    assert response.status_code == 503
    assert response.json()["error"] == "CACHE_UNAVAILABLE"


async def test_unknown_route_keeps_error_shape(client: AsyncClient) -> None:
    response = await client.get("/api/v1/magazines")

    assert response.status_code == 404
    assert response.json()["error"] == "HTTP_ERROR"
