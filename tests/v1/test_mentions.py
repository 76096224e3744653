# mypy: ignore-errors
"""Tests for mention endpoints."""

from fastapi import status

from content_graph.models import MentionTarget
from content_graph.services import MentionService


def test_my_mentions(client, db_session, alice, bob, auth_headers) -> None:
    client.post("/api/v1/posts/", json={"content": "hi @bob"}, headers=auth_headers(alice))
    MentionService(db_session).reconcile_content(MentionTarget.COMMENT, 40, alice.id, "@bob")
    db_session.commit()

    response = client.get("/api/v1/mentions/me", headers=auth_headers(bob))

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["total"] == 2
    assert {m["target_type"] for m in data["items"]} == {"POST", "COMMENT"}
    assert all(m["author_id"] == alice.id for m in data["items"])


def test_my_mentions_filtered(client, db_session, alice, bob, auth_headers) -> None:
    client.post("/api/v1/posts/", json={"content": "hi @bob"}, headers=auth_headers(alice))
    MentionService(db_session).reconcile_content(MentionTarget.COMMENT, 40, alice.id, "@bob")
    db_session.commit()

    response = client.get(
        "/api/v1/mentions/me", params={"target_type": "COMMENT"}, headers=auth_headers(bob)
    )

    assert [m["target_id"] for m in response.json()["items"]] == [40]


def test_my_mention_count(client, alice, bob, carol, auth_headers) -> None:
    client.post("/api/v1/posts/", json={"content": "@bob @carol"}, headers=auth_headers(alice))
    client.post("/api/v1/posts/", json={"content": "@bob"}, headers=auth_headers(carol))

    response = client.get("/api/v1/mentions/me/count", headers=auth_headers(bob))

    assert response.json() == {"count": 2}
