"""HTTP-level tests for the /article surface."""

import pytest
from httpx import AsyncClient


async def _create(client: AsyncClient, title: str, content: str = "Body", published: bool = True) -> None:
    form = {"title": title, "content": content}
    if published:
        form["published"] = "on"
    response = await client.post("/article/new", data=form)
    assert response.status_code == 303
    assert response.headers["location"].endswith("/article/")


async def _ids(client: AsyncClient, path: str) -> list[int]:
    response = await client.get(path)
    assert response.status_code == 200
    return [a["id"] for a in response.json()]


@pytest.mark.asyncio
async def test_empty_index(client: AsyncClient):
    response = await client.get("/article/")

    assert response.status_code == 200
    assert response.json() == {
        "items": [],
        "search_term": None,
        "current_page": 1,
        "total_pages": 0,
        "total_count": 0,
    }


@pytest.mark.asyncio
async def test_new_form_is_blank(client: AsyncClient):
    response = await client.get("/article/new")
    assert response.status_code == 200
    assert response.json() == {"id": None, "title": "", "content": "", "published": False}


@pytest.mark.asyncio
async def test_create_rejects_invalid_form(client: AsyncClient):
    response = await client.post("/article/new", data={"title": "   ", "content": "Body"})

    assert response.status_code == 422
    assert [e["field"] for e in response.json()["errors"]] == ["title"]
    assert await _ids(client, "/article/admin") == []


@pytest.mark.asyncio
async def test_index_paginates_published_articles(client: AsyncClient):
    for i in range(7):
        await _create(client, f"Published {i}")
    await _create(client, "Draft", published=False)

    first = (await client.get("/article/")).json()
    second = (await client.get("/article/", params={"page": 2})).json()
    beyond = (await client.get("/article/", params={"page": 5})).json()

    assert len(first["items"]) == 6
    assert first["total_pages"] == 2
    assert first["total_count"] == 7
    assert [a["title"] for a in second["items"]] == ["Published 0"]
    assert beyond["items"] == []
    assert beyond["current_page"] == 5


@pytest.mark.asyncio
async def test_index_rejects_non_positive_page(client: AsyncClient):
    response = await client.get("/article/", params={"page": 0})
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_search_returns_all_matches_without_paging(client: AsyncClient):
    for i in range(8):
        await _create(client, f"Python note {i}")
    await _create(client, "Unrelated", content="mentions python in the body", published=False)
    await _create(client, "Rust")

    body = (await client.get("/article/", params={"q": "PYTHON", "page": 4})).json()

    assert body["search_term"] == "PYTHON"
    assert body["total_count"] == 9
    assert len(body["items"]) == 9
    assert body["total_pages"] == 2


@pytest.mark.asyncio
async def test_blank_search_falls_back_to_listing(client: AsyncClient):
    await _create(client, "Visible")
    await _create(client, "Hidden", published=False)

    body = (await client.get("/article/", params={"q": "   "})).json()

    assert body["search_term"] is None
    assert [a["title"] for a in body["items"]] == ["Visible"]


@pytest.mark.asyncio
async def test_search_escapes_like_wildcards(client: AsyncClient):
    await _create(client, "Discount 100% off")
    await _create(client, "Discount 1000 items")

    body = (await client.get("/article/", params={"q": "100%"})).json()

    assert [a["title"] for a in body["items"]] == ["Discount 100% off"]


@pytest.mark.asyncio
async def test_show_counts_views(client: AsyncClient):
    await _create(client, "Counted")
    article_id = (await _ids(client, "/article/admin"))[0]

    for expected in (1, 2, 3):
        response = await client.get(f"/article/{article_id}")
        assert response.status_code == 200
        assert response.json()["views"] == expected

    form = await client.get(f"/article/{article_id}/edit")
    assert form.status_code == 200
    admin = (await client.get("/article/admin")).json()
    assert admin[0]["views"] == 3


@pytest.mark.asyncio
async def test_missing_article_returns_404(client: AsyncClient):
    assert (await client.get("/article/999")).status_code == 404
    assert (await client.get("/article/999/edit")).status_code == 404
    assert (await client.post("/article/999/edit", data={"title": "x"})).status_code == 404
    assert (await client.post("/article/999/toggle")).status_code == 404
    assert (await client.post("/article/999", data={"_token": "x"})).status_code == 404


@pytest.mark.asyncio
async def test_edit_updates_submitted_fields(client: AsyncClient):
    await _create(client, "Before", content="Original body")
    article_id = (await _ids(client, "/article/admin"))[0]

    response = await client.post(
        f"/article/{article_id}/edit", data={"title": "After", "published": "on"}
    )
    assert response.status_code == 303

    form = (await client.get(f"/article/{article_id}/edit")).json()
    assert form == {"id": article_id, "title": "After", "content": "Original body", "published": True}


@pytest.mark.asyncio
async def test_edit_with_unchecked_published_box_unpublishes(client: AsyncClient):
    await _create(client, "Keep", content="Body")
    article_id = (await _ids(client, "/article/admin"))[0]

    response = await client.post(
        f"/article/{article_id}/edit", data={"title": "Keep", "content": "Body"}
    )

    assert response.status_code == 303
    assert (await client.get("/article/")).json()["items"] == []
    assert await _ids(client, "/article/historique") == [article_id]


@pytest.mark.asyncio
@pytest.mark.parametrize("cleared", ["title", "content"])
async def test_edit_rejects_cleared_field(client: AsyncClient, cleared: str):
    await _create(client, "Keep", content="Body")
    article_id = (await _ids(client, "/article/admin"))[0]
    data = {"title": "Keep", "content": "Body", "published": "on", cleared: ""}

    response = await client.post(f"/article/{article_id}/edit", data=data)

    assert response.status_code == 422
    assert [e["field"] for e in response.json()["errors"]] == [cleared]
    form = (await client.get(f"/article/{article_id}/edit")).json()
    assert form == {"id": article_id, "title": "Keep", "content": "Body", "published": True}


@pytest.mark.asyncio
async def test_edit_rejects_invalid_form(client: AsyncClient):
    await _create(client, "Stable")
    article_id = (await _ids(client, "/article/admin"))[0]

    response = await client.post(f"/article/{article_id}/edit", data={"title": "x" * 300})

    assert response.status_code == 422
    form = (await client.get(f"/article/{article_id}/edit")).json()
    assert form["title"] == "Stable"


@pytest.mark.asyncio
async def test_publish_lifecycle(client: AsyncClient):
    await _create(client, "A", content="B")
    article_id = (await _ids(client, "/article/admin"))[0]

    listing = (await client.get("/article/")).json()
    assert [a["id"] for a in listing["items"]] == [article_id]
    assert listing["total_count"] == 1

    response = await client.post(f"/article/{article_id}/toggle")
    assert response.status_code == 303
    assert (await client.get("/article/")).json()["items"] == []
    assert await _ids(client, "/article/historique") == [article_id]

    token = (await client.get(f"/article/{article_id}")).json()["delete_token"]
    response = await client.post(f"/article/{article_id}", data={"_token": token})
    assert response.status_code == 303
    assert await _ids(client, "/article/admin") == []


@pytest.mark.asyncio
async def test_toggle_twice_restores_state(client: AsyncClient):
    await _create(client, "Flip", published=False)
    article_id = (await _ids(client, "/article/admin"))[0]

    await client.post(f"/article/{article_id}/toggle")
    await client.post(f"/article/{article_id}/toggle")

    assert await _ids(client, "/article/historique") == [article_id]


@pytest.mark.asyncio
async def test_delete_with_bad_token_is_forbidden(client: AsyncClient):
    await _create(client, "Keep me")
    article_id = (await _ids(client, "/article/admin"))[0]
    await client.get(f"/article/{article_id}")

    forged = await client.post(f"/article/{article_id}", data={"_token": "forged"})
    missing = await client.post(f"/article/{article_id}")

    assert forged.status_code == 403
    assert missing.status_code == 403
    assert await _ids(client, "/article/admin") == [article_id]


@pytest.mark.asyncio
async def test_delete_token_from_another_session_is_forbidden(client: AsyncClient):
    await _create(client, "Keep me too")
    article_id = (await _ids(client, "/article/admin"))[0]
    token = (await client.get(f"/article/{article_id}")).json()["delete_token"]

    client.cookies.clear()
    await client.get(f"/article/{article_id}")
    response = await client.post(f"/article/{article_id}", data={"_token": token})

    assert response.status_code == 403
    assert await _ids(client, "/article/admin") == [article_id]
