"""Endpoints for "who mentioned me"."""

from fastapi import APIRouter, Query

from content_graph.api.v1.dependencies import CurrentUserIdDep, MentionServiceDep
from content_graph.models import MentionTarget
from content_graph.schemas.common import PageResponse
from content_graph.schemas.mention import MentionResponse

router = APIRouter(prefix="/mentions", tags=["mentions"])


@router.get("/me", response_model=PageResponse[MentionResponse])
def get_my_mentions(
    user_id: CurrentUserIdDep,
    service: MentionServiceDep,
    target_type: MentionTarget | None = Query(None),
    page: int = Query(0, ge=0),
    size: int = Query(10, ge=1),
) -> PageResponse[MentionResponse]:
    """Mentions of the caller, newest first."""
    result = service.mentions_of(user_id, target_type, page, size)
    return PageResponse[MentionResponse].model_validate(result, from_attributes=True)


@router.get("/me/count")
def get_my_mention_count(user_id: CurrentUserIdDep, service: MentionServiceDep) -> dict[str, int]:
    """How many times the caller has been mentioned."""
    return {"count": service.mention_count(user_id)}
