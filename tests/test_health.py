# tests/test_health.py
from fastapi import status

from content_graph.core.errors import ConflictError, InvalidInputError, PostNotFoundError
from content_graph.main import ERROR_STATUS


def test_health(client) -> None:
    response = client.get("/health")
    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"status": "ok"}


def test_root(client) -> None:
    data = client.get("/").json()
    assert data["name"] == "Content Graph"
    assert data["docs"] == "/docs"


def test_error_kinds_map_to_statuses() -> None:
    assert ERROR_STATUS[PostNotFoundError(1).kind] == status.HTTP_404_NOT_FOUND
    assert ERROR_STATUS[InvalidInputError("x").kind] == status.HTTP_422_UNPROCESSABLE_ENTITY
    assert ERROR_STATUS[ConflictError("x").kind] == status.HTTP_409_CONFLICT
