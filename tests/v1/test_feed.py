# mypy: ignore-errors
"""Tests for feed endpoints."""

from fastapi import status

from content_graph.models import Visibility


def test_home_feed(client, alice, bob, carol, follow, make_post, auth_headers) -> None:
    follow(alice, bob)
    make_post(bob, content="bob")
    make_post(carol, content="carol")
    make_post(alice, content="mine", visibility=Visibility.PRIVATE)

    response = client.get("/api/v1/feed", headers=auth_headers(alice))
    assert response.status_code == status.HTTP_200_OK
    assert [p["content"] for p in response.json()["items"]] == ["bob"]

    with_self = client.get(
        "/api/v1/feed", params={"include_self": True}, headers=auth_headers(alice)
    )
    assert [p["content"] for p in with_self.json()["items"]] == ["mine", "bob"]


def test_home_feed_requires_token(client) -> None:
    response = client.get("/api/v1/feed")
    assert response.status_code in (status.HTTP_401_UNAUTHORIZED, status.HTTP_403_FORBIDDEN)


def test_explore_feed_page_shape(client, alice, make_post) -> None:
    for i in range(3):
        make_post(alice, content=f"p{i}")

    response = client.get("/api/v1/feed/explore", params={"page": 0, "size": 2})

    data = response.json()
    assert [p["content"] for p in data["items"]] == ["p2", "p1"]
    assert (data["total"], data["page"], data["size"], data["has_next"]) == (3, 0, 2, True)


def test_oversized_size_is_clamped(client, alice, make_post) -> None:
    make_post(alice)
    response = client.get("/api/v1/feed/explore", params={"size": 1000})
    assert response.status_code == status.HTTP_200_OK
    assert response.json()["size"] == 50


def test_invalid_page_parameters(client) -> None:
    assert client.get("/api/v1/feed/explore", params={"page": -1}).status_code == 422
    assert client.get("/api/v1/feed/explore", params={"size": 0}).status_code == 422


def test_popular_and_views_feeds(client, alice, make_post) -> None:
    make_post(alice, content="liked", like_count=5)
    make_post(alice, content="viewed", view_count=5)

    popular = client.get("/api/v1/feed/popular").json()
    views = client.get("/api/v1/feed/views").json()

    assert popular["items"][0]["content"] == "liked"
    assert views["items"][0]["content"] == "viewed"


def test_recommended_feed(client, alice, bob, carol, follow, make_post, auth_headers) -> None:
    follow(alice, bob)
    make_post(bob, content="followed")
    make_post(carol, content="new voice")

    response = client.get("/api/v1/feed/recommended", headers=auth_headers(alice))

    assert [p["content"] for p in response.json()["items"]] == ["new voice"]
