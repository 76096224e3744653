"""Feed endpoints for listing posts in various orders."""

from fastapi import APIRouter, Query

from content_graph.api.v1.dependencies import CurrentUserIdDep, FeedServiceDep
from content_graph.schemas.common import PageResponse
from content_graph.schemas.post import PostResponse

router = APIRouter(prefix="/feed", tags=["feed"])

PageQuery = Query(0, ge=0, description="Zero-based page index")
SizeQuery = Query(10, ge=1, description="Values above 50 are served as 50")


@router.get("", response_model=PageResponse[PostResponse])
def get_home_feed(
    user_id: CurrentUserIdDep,
    service: FeedServiceDep,
    include_self: bool = Query(False, description="Also include the caller's own posts"),
    page: int = PageQuery,
    size: int = SizeQuery,
) -> PageResponse[PostResponse]:
    """Posts from followed accounts, newest first."""
    result = service.home_feed(user_id, include_self, page, size)
    return PageResponse[PostResponse].model_validate(result, from_attributes=True)


@router.get("/explore", response_model=PageResponse[PostResponse])
def get_explore_feed(
    service: FeedServiceDep,
    page: int = PageQuery,
    size: int = SizeQuery,
) -> PageResponse[PostResponse]:
    """All public posts, newest first."""
    result = service.explore_feed(page, size)
    return PageResponse[PostResponse].model_validate(result, from_attributes=True)


@router.get("/popular", response_model=PageResponse[PostResponse])
def get_popular_feed(
    service: FeedServiceDep,
    page: int = PageQuery,
    size: int = SizeQuery,
) -> PageResponse[PostResponse]:
    """All public posts, most liked first."""
    result = service.popular_feed(page, size)
    return PageResponse[PostResponse].model_validate(result, from_attributes=True)


@router.get("/views", response_model=PageResponse[PostResponse])
def get_views_feed(
    service: FeedServiceDep,
    page: int = PageQuery,
    size: int = SizeQuery,
) -> PageResponse[PostResponse]:
    """All public posts, most viewed first."""
    result = service.views_feed(page, size)
    return PageResponse[PostResponse].model_validate(result, from_attributes=True)


@router.get("/recommended", response_model=PageResponse[PostResponse])
def get_recommended_feed(
    user_id: CurrentUserIdDep,
    service: FeedServiceDep,
    page: int = PageQuery,
    size: int = SizeQuery,
) -> PageResponse[PostResponse]:
    """Popular public posts from accounts the caller does not follow."""
    result = service.recommended_feed(user_id, page, size)
    return PageResponse[PostResponse].model_validate(result, from_attributes=True)
