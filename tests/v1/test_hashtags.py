# mypy: ignore-errors
"""Tests for hashtag endpoints."""

from fastapi import status


def _post(client, headers, content: str, visibility: str = "PUBLIC") -> dict:
    response = client.post(
        "/api/v1/posts/", json={"content": content, "visibility": visibility}, headers=headers
    )
    assert response.status_code == status.HTTP_201_CREATED
    return response.json()


def test_trending(client, alice, auth_headers) -> None:
    headers = auth_headers(alice)
    _post(client, headers, "#python #sql")
    _post(client, headers, "#python")

    data = client.get("/api/v1/hashtags/trending").json()

    assert [(t["name"], t["usage_count"]) for t in data["items"]] == [("python", 2), ("sql", 1)]


def test_search(client, alice, auth_headers) -> None:
    _post(client, auth_headers(alice), "#seafood #travel")

    data = client.get("/api/v1/hashtags/search", params={"keyword": "food"}).json()

    assert [t["name"] for t in data["items"]] == ["seafood"]


def test_get_hashtag_by_name(client, alice, auth_headers) -> None:
    _post(client, auth_headers(alice), "#Food")

    response = client.get("/api/v1/hashtags/name/FOOD")

    assert response.status_code == status.HTTP_200_OK
    assert response.json()["name"] == "food"


def test_get_unknown_hashtag(client) -> None:
    response = client.get("/api/v1/hashtags/name/nothing")
    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json()["error"] == "not_found"


def test_hashtag_posts_are_public_only(client, alice, auth_headers) -> None:
    headers = auth_headers(alice)
    public = _post(client, headers, "#food open")
    _post(client, headers, "#food closed", "PRIVATE")

    data = client.get("/api/v1/hashtags/name/food/posts").json()

    assert [p["id"] for p in data["items"]] == [public["id"]]


def test_hashtags_of_post(client, alice, auth_headers) -> None:
    created = _post(client, auth_headers(alice), "#b #a")

    tags = client.get(f"/api/v1/hashtags/posts/{created['id']}").json()

    assert sorted(t["name"] for t in tags) == ["a", "b"]


def test_hashtags_of_private_post_hidden_from_others(client, alice, bob, auth_headers) -> None:
    created = _post(client, auth_headers(alice), "secret #plans", "PRIVATE")
    url = f"/api/v1/hashtags/posts/{created['id']}"

    anonymous = client.get(url)
    other = client.get(url, headers=auth_headers(bob))
    own = client.get(url, headers=auth_headers(alice))

    assert anonymous.status_code == status.HTTP_403_FORBIDDEN
    assert other.status_code == status.HTTP_403_FORBIDDEN
    assert own.status_code == status.HTTP_200_OK
    assert [t["name"] for t in own.json()] == ["plans"]


def test_hashtags_of_followers_post(client, alice, bob, carol, follow, auth_headers) -> None:
    follow(bob, alice)
    created = _post(client, auth_headers(alice), "#inner circle", "FOLLOWERS")
    url = f"/api/v1/hashtags/posts/{created['id']}"

    assert client.get(url, headers=auth_headers(bob)).status_code == status.HTTP_200_OK
    assert client.get(url, headers=auth_headers(carol)).status_code == status.HTTP_403_FORBIDDEN


def test_hashtags_of_missing_or_deleted_post(client, alice, auth_headers) -> None:
    assert client.get("/api/v1/hashtags/posts/999999").status_code == status.HTTP_404_NOT_FOUND

    created = _post(client, auth_headers(alice), "#gone")
    client.delete(f"/api/v1/posts/{created['id']}", headers=auth_headers(alice))

    response = client.get(f"/api/v1/hashtags/posts/{created['id']}", headers=auth_headers(alice))
    assert response.status_code == status.HTTP_404_NOT_FOUND


def test_hashtags_of_post_does_not_count_views(client, alice, bob, auth_headers) -> None:
    created = _post(client, auth_headers(alice), "#quiet")

    client.get(f"/api/v1/hashtags/posts/{created['id']}", headers=auth_headers(bob))

    post = client.get(f"/api/v1/posts/{created['id']}", headers=auth_headers(alice)).json()
    assert post["view_count"] == 0


def test_hashtags_named_like_list_routes(client, alice, auth_headers) -> None:
    _post(client, auth_headers(alice), "#trending #search")

    trending = client.get("/api/v1/hashtags/name/trending")
    search = client.get("/api/v1/hashtags/name/search/posts")

    assert trending.status_code == status.HTTP_200_OK
    assert trending.json()["name"] == "trending"
    assert search.json()["total"] == 1


def test_top_trending(client, alice, auth_headers) -> None:
    headers = auth_headers(alice)
    _post(client, headers, "#a #b #c")
    _post(client, headers, "#c")

    response = client.get("/api/v1/hashtags/trending/top", params={"limit": 2})

    assert response.status_code == status.HTTP_200_OK
    assert [t["name"] for t in response.json()] == ["c", "a"]


def test_top_trending_rejects_zero_limit(client) -> None:
    response = client.get("/api/v1/hashtags/trending/top", params={"limit": 0})
    assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
