"""Word routes — words in a category, global search, and words by id.

Invariants tested:
    - Foreign categories and words are indistinguishable from missing ones (404)
    - Terms are unique within a category (409)
    - Category listing honours view page-size caps, order and direction
    - Random order reshuffles a page but never changes which words are on it
    - Search matches term or translation and never crosses users
    - Update needs at least one field
"""

from uuid import uuid4

import pytest

WORDS = "/api/v1/words"


def _category_words(category_id: str) -> str:
    return f"/api/v1/categories/{category_id}/words"


@pytest.fixture
def vocabulary(register_user, enroll, add_category):
    """Ana learning German with an empty "Animals" category."""
    async def _build(email: str = "ana@example.com"):
        token, user_id = await register_user(email)
        german = await enroll(token, "de")
        animals = await add_category(token, german["id"], "Animals")
        return token, user_id, german, animals
    return _build


async def test_create_word(client, auth_headers, vocabulary):
    token, _, german, animals = await vocabulary()
    response = await client.post(
        _category_words(animals["id"]),
        json={"term": "Hund", "translation": "dog", "examplesMd": "*Der Hund* bellt."},
        headers=auth_headers(token),
    )
    assert response.status_code == 201
    data = response.json()["data"]
    assert data["categoryId"] == animals["id"]
    assert data["learningLanguageId"] == german["id"]
    assert data["examplesMd"] == "*Der Hund* bellt."


async def test_duplicate_term_is_conflict(client, auth_headers, vocabulary, add_word):
    token, _, _, animals = await vocabulary()
    await add_word(token, animals["id"], "Hund", "dog")
    response = await client.post(
        _category_words(animals["id"]),
        json={"term": "Hund", "translation": "hound"},
        headers=auth_headers(token),
    )
    assert response.status_code == 409
    assert response.json()["error"]["kind"] == "conflict"


async def test_foreign_category_is_not_found(client, auth_headers, vocabulary):
    _, _, _, animals = await vocabulary()
    ben, _, _, _ = await vocabulary("ben@example.com")

    listing = await client.get(_category_words(animals["id"]), headers=auth_headers(ben))
    create = await client.post(
        _category_words(animals["id"]),
        json={"term": "Hund", "translation": "dog"},
        headers=auth_headers(ben),
    )
    missing = await client.get(_category_words(str(uuid4())), headers=auth_headers(ben))
    assert listing.status_code == create.status_code == missing.status_code == 404


async def test_list_orders_by_term(client, auth_headers, vocabulary, add_word):
    token, _, _, animals = await vocabulary()
    for term, translation in (("Katze", "cat"), ("Hund", "dog"), ("Maus", "mouse")):
        await add_word(token, animals["id"], term, translation)

    response = await client.get(
        _category_words(animals["id"]),
        params={"orderBy": "term", "direction": "asc", "pageSize": 2},
        headers=auth_headers(token),
    )
    assert response.status_code == 200
    data = response.json()["data"]
    assert [w["term"] for w in data["words"]] == ["Hund", "Katze"]
    assert data["meta"] == {
        "page": 1, "pageSize": 2, "hasMore": True,
        "view": "table", "orderBy": "term", "direction": "asc",
    }


async def test_random_order_keeps_page_membership(
    client, auth_headers, vocabulary, add_word,
):
    token, _, _, animals = await vocabulary()
    for i in range(6):
        await add_word(token, animals["id"], f"term-{i}", f"translation-{i}")

    pages = []
    for _ in range(3):
        response = await client.get(
            _category_words(animals["id"]),
            params={"orderBy": "random", "pageSize": 3},
            headers=auth_headers(token),
        )
        pages.append({w["id"] for w in response.json()["data"]["words"]})
    assert pages[0] == pages[1] == pages[2]
    assert len(pages[0]) == 3


async def test_slider_view_allows_larger_pages(client, auth_headers, vocabulary):
    token, _, _, animals = await vocabulary()
    table = await client.get(
        _category_words(animals["id"]), params={"pageSize": 80},
        headers=auth_headers(token),
    )
    slider = await client.get(
        _category_words(animals["id"]), params={"view": "slider", "pageSize": 80},
        headers=auth_headers(token),
    )
    assert table.status_code == 400
    assert table.json()["error"]["details"][0]["field"] == "pageSize"
    assert slider.status_code == 200


async def test_search_matches_term_or_translation(
    client, auth_headers, vocabulary, add_word, add_category,
):
    token, _, german, animals = await vocabulary()
    food = await add_category(token, german["id"], "Food")
    await add_word(token, animals["id"], "Hund", "dog")
    await add_word(token, animals["id"], "Katze", "cat")
    await add_word(token, food["id"], "Hotdog", "hot dog")
    ben, _, _, ben_animals = await vocabulary("ben@example.com")
    await add_word(ben, ben_animals["id"], "Dogge", "great dane")

    response = await client.get(
        WORDS, params={"search": "DOG", "orderBy": "term", "direction": "asc"},
        headers=auth_headers(token),
    )
    assert response.status_code == 200
    assert [w["term"] for w in response.json()["data"]["words"]] == ["Hotdog", "Hund"]

    filtered = await client.get(
        WORDS, params={"search": "dog", "categoryId": food["id"]},
        headers=auth_headers(token),
    )
    assert [w["term"] for w in filtered.json()["data"]["words"]] == ["Hotdog"]

    foreign = await client.get(
        WORDS, params={"categoryId": ben_animals["id"]}, headers=auth_headers(token),
    )
    assert foreign.json()["data"]["words"] == []


async def test_get_word_includes_owner(client, auth_headers, vocabulary, add_word):
    token, user_id, _, animals = await vocabulary()
    word = await add_word(token, animals["id"], "Hund", "dog")

    response = await client.get(f"{WORDS}/{word['id']}", headers=auth_headers(token))
    assert response.status_code == 200
    assert response.json()["data"]["userId"] == user_id
    assert response.json()["data"]["term"] == "Hund"


async def test_update_word(client, auth_headers, vocabulary, add_word):
    token, _, _, animals = await vocabulary()
    word = await add_word(token, animals["id"], "Hund", "dog")
    await add_word(token, animals["id"], "Katze", "cat")

    response = await client.patch(
        f"{WORDS}/{word['id']}", json={"translation": "hound"},
        headers=auth_headers(token),
    )
    assert response.status_code == 200
    assert response.json()["data"]["translation"] == "hound"
    assert response.json()["data"]["term"] == "Hund"

    empty = await client.patch(
        f"{WORDS}/{word['id']}", json={}, headers=auth_headers(token),
    )
    assert empty.status_code == 400

    clash = await client.patch(
        f"{WORDS}/{word['id']}", json={"term": "Katze"}, headers=auth_headers(token),
    )
    assert clash.status_code == 409


async def test_foreign_word_is_not_found(client, auth_headers, vocabulary, add_word):
    token, _, _, animals = await vocabulary()
    word = await add_word(token, animals["id"], "Hund", "dog")
    ben, _, _, _ = await vocabulary("ben@example.com")

    url = f"{WORDS}/{word['id']}"
    read = await client.get(url, headers=auth_headers(ben))
    update = await client.patch(url, json={"term": "Mine"}, headers=auth_headers(ben))
    delete = await client.delete(url, headers=auth_headers(ben))
    assert read.status_code == update.status_code == delete.status_code == 404

    still_there = await client.get(url, headers=auth_headers(token))
    assert still_there.json()["data"]["term"] == "Hund"


async def test_delete_word(client, auth_headers, vocabulary, add_word):
    token, _, _, animals = await vocabulary()
    word = await add_word(token, animals["id"], "Hund", "dog")

    response = await client.delete(f"{WORDS}/{word['id']}", headers=auth_headers(token))
    assert response.status_code == 204
    gone = await client.get(f"{WORDS}/{word['id']}", headers=auth_headers(token))
    assert gone.status_code == 404


async def test_words_require_session(client):
    assert (await client.get(WORDS)).status_code == 401
    assert (await client.get(f"{WORDS}/not-a-uuid")).status_code == 400
