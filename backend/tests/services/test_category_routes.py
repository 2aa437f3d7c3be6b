"""Category routes — categories inside the caller's learning languages.

Invariants tested:
    - A foreign learning language or category is indistinguishable from a
      missing one (404), for reads and writes alike
    - Names are unique per learning language, not globally (409)
    - Listing carries word counts, searches literally and pages with has_more
    - Deleting a category deletes its words
"""

from uuid import uuid4

from sqlalchemy import func, select

from wordbank.models.word import Word


def _categories_url(learning_language_id: str) -> str:
    return f"/api/v1/learning-languages/{learning_language_id}/categories"


async def test_create_category(client, register_user, auth_headers, enroll):
    token, _ = await register_user("ana@example.com")
    german = await enroll(token, "de")
    response = await client.post(
        _categories_url(german["id"]), json={"name": "Animals"},
        headers=auth_headers(token),
    )
    assert response.status_code == 201
    data = response.json()["data"]
    assert data["name"] == "Animals"
    assert data["learningLanguageId"] == german["id"]
    assert data["wordCount"] == 0


async def test_duplicate_name_is_conflict_per_language(
    client, register_user, auth_headers, enroll, add_category,
):
    token, _ = await register_user("ana@example.com")
    german = await enroll(token, "de")
    french = await enroll(token, "fr")
    await add_category(token, german["id"], "Animals")

    clash = await client.post(
        _categories_url(german["id"]), json={"name": "Animals"},
        headers=auth_headers(token),
    )
    assert clash.status_code == 409
    assert clash.json()["error"]["message"] == "A category with this name already exists"
    await add_category(token, french["id"], "Animals")


async def test_foreign_learning_language_is_not_found(
    client, register_user, auth_headers, enroll,
):
    ana, _ = await register_user("ana@example.com")
    ben, _ = await register_user("ben@example.com")
    german = await enroll(ana, "de")

    foreign_list = await client.get(
        _categories_url(german["id"]), headers=auth_headers(ben),
    )
    foreign_create = await client.post(
        _categories_url(german["id"]), json={"name": "Mine now"},
        headers=auth_headers(ben),
    )
    missing = await client.get(_categories_url(str(uuid4())), headers=auth_headers(ben))

    assert foreign_list.status_code == foreign_create.status_code == 404
    assert foreign_list.json()["error"]["message"] == missing.json()["error"]["message"]


async def test_list_counts_words_and_searches(
    client, register_user, auth_headers, enroll, add_category, add_word,
):
    token, _ = await register_user("ana@example.com")
    german = await enroll(token, "de")
    animals = await add_category(token, german["id"], "Animals")
    await add_category(token, german["id"], "Food 100%")
    await add_word(token, animals["id"], "Hund", "dog")
    await add_word(token, animals["id"], "Katze", "cat")

    response = await client.get(
        _categories_url(german["id"]),
        params={"orderBy": "name", "direction": "asc"},
        headers=auth_headers(token),
    )
    assert response.status_code == 200
    data = response.json()["data"]
    assert [(c["name"], c["wordCount"]) for c in data["categories"]] == [
        ("Animals", 2), ("Food 100%", 0),
    ]
    assert data["meta"] == {"page": 1, "pageSize": 10, "hasMore": False}

    search = await client.get(
        _categories_url(german["id"]), params={"search": "ANIM"},
        headers=auth_headers(token),
    )
    assert [c["name"] for c in search.json()["data"]["categories"]] == ["Animals"]

    wildcard = await client.get(
        _categories_url(german["id"]), params={"search": "%"},
        headers=auth_headers(token),
    )
    assert [c["name"] for c in wildcard.json()["data"]["categories"]] == ["Food 100%"]


async def test_list_pages(client, register_user, auth_headers, enroll, add_category):
    token, _ = await register_user("ana@example.com")
    german = await enroll(token, "de")
    for name in ("A", "B", "C"):
        await add_category(token, german["id"], name)

    first = await client.get(
        _categories_url(german["id"]),
        params={"pageSize": 2, "orderBy": "name", "direction": "asc"},
        headers=auth_headers(token),
    )
    second = await client.get(
        _categories_url(german["id"]),
        params={"page": 2, "pageSize": 2, "orderBy": "name", "direction": "asc"},
        headers=auth_headers(token),
    )
    assert [c["name"] for c in first.json()["data"]["categories"]] == ["A", "B"]
    assert first.json()["data"]["meta"]["hasMore"] is True
    assert [c["name"] for c in second.json()["data"]["categories"]] == ["C"]
    assert second.json()["data"]["meta"]["hasMore"] is False


async def test_rename_category(
    client, register_user, auth_headers, enroll, add_category, add_word,
):
    token, _ = await register_user("ana@example.com")
    german = await enroll(token, "de")
    animals = await add_category(token, german["id"], "Animals")
    await add_category(token, german["id"], "Food")
    await add_word(token, animals["id"], "Hund", "dog")

    response = await client.patch(
        f"/api/v1/categories/{animals['id']}", json={"name": "Pets"},
        headers=auth_headers(token),
    )
    assert response.status_code == 200
    assert response.json()["data"]["name"] == "Pets"
    assert response.json()["data"]["wordCount"] == 1

    clash = await client.patch(
        f"/api/v1/categories/{animals['id']}", json={"name": "Food"},
        headers=auth_headers(token),
    )
    assert clash.status_code == 409


async def test_foreign_category_update_and_delete_are_not_found(
    client, register_user, auth_headers, enroll, add_category,
):
    ana, _ = await register_user("ana@example.com")
    ben, _ = await register_user("ben@example.com")
    german = await enroll(ana, "de")
    animals = await add_category(ana, german["id"], "Animals")

    rename = await client.patch(
        f"/api/v1/categories/{animals['id']}", json={"name": "Taken"},
        headers=auth_headers(ben),
    )
    delete = await client.delete(
        f"/api/v1/categories/{animals['id']}", headers=auth_headers(ben),
    )
    assert rename.status_code == delete.status_code == 404

    listing = await client.get(_categories_url(german["id"]), headers=auth_headers(ana))
    assert [c["name"] for c in listing.json()["data"]["categories"]] == ["Animals"]


async def test_delete_category_deletes_words(
    client, test_db, register_user, auth_headers, enroll, add_category, add_word,
):
    token, _ = await register_user("ana@example.com")
    german = await enroll(token, "de")
    animals = await add_category(token, german["id"], "Animals")
    food = await add_category(token, german["id"], "Food")
    await add_word(token, animals["id"], "Hund", "dog")
    await add_word(token, food["id"], "Brot", "bread")

    response = await client.delete(
        f"/api/v1/categories/{animals['id']}", headers=auth_headers(token),
    )
    assert response.status_code == 204
    assert (await test_db.scalar(select(func.count(Word.id)))) == 1

    again = await client.delete(
        f"/api/v1/categories/{animals['id']}", headers=auth_headers(token),
    )
    assert again.status_code == 404


async def test_malformed_ids_are_400(client, register_user, auth_headers):
    token, _ = await register_user("ana@example.com")
    listing = await client.get(_categories_url("nope"), headers=auth_headers(token))
    rename = await client.patch(
        "/api/v1/categories/nope", json={"name": "x"}, headers=auth_headers(token),
    )
    assert listing.status_code == rename.status_code == 400
    assert listing.json()["error"]["details"][0]["field"] == "learningLanguageId"
    assert rename.json()["error"]["details"][0]["field"] == "categoryId"


async def test_categories_require_session(client):
    response = await client.get(_categories_url(str(uuid4())))
    assert response.status_code == 401
