"""Hashtag read endpoints."""

from fastapi import APIRouter, Query

from content_graph.api.v1.dependencies import (
    HashtagServiceDep,
    OptionalUserIdDep,
    PostServiceDep,
)
from content_graph.models import Hashtag
from content_graph.schemas.common import PageResponse
from content_graph.schemas.hashtag import HashtagResponse
from content_graph.schemas.post import PostResponse

router = APIRouter(prefix="/hashtags", tags=["hashtags"])


@router.get("/trending", response_model=PageResponse[HashtagResponse])
def get_trending(
    service: HashtagServiceDep,
    page: int = Query(0, ge=0),
    size: int = Query(10, ge=1),
) -> PageResponse[HashtagResponse]:
    """Hashtags ordered by how many live posts use them."""
    result = service.trending(page, size)
    return PageResponse[HashtagResponse].model_validate(result, from_attributes=True)


@router.get("/trending/top", response_model=list[HashtagResponse])
def get_top_trending(
    service: HashtagServiceDep,
    limit: int = Query(10, ge=1, description="Values above 50 are served as 50"),
) -> list[Hashtag]:
    """The ``limit`` most used hashtags, without paging metadata."""
    return service.top_trending(limit)


@router.get("/search", response_model=PageResponse[HashtagResponse])
def search_hashtags(
    service: HashtagServiceDep,
    keyword: str = Query(..., min_length=1, max_length=100),
    page: int = Query(0, ge=0),
    size: int = Query(10, ge=1),
) -> PageResponse[HashtagResponse]:
    """Hashtags whose name contains ``keyword``."""
    result = service.search(keyword, page, size)
    return PageResponse[HashtagResponse].model_validate(result, from_attributes=True)


@router.get("/posts/{post_id}", response_model=list[HashtagResponse])
def get_post_hashtags(
    post_id: int,
    viewer_id: OptionalUserIdDep,
    service: PostServiceDep,
) -> list[Hashtag]:
    """Hashtags linked to a post the caller may see."""
    return service.hashtags_of_post(viewer_id, post_id)


# Lookups by name live under /name so tags like #trending stay reachable.
@router.get("/name/{name}", response_model=HashtagResponse)
def get_hashtag(name: str, service: HashtagServiceDep) -> Hashtag:
    """Look up one hashtag by name."""
    return service.get_hashtag(name)


@router.get("/name/{name}/posts", response_model=PageResponse[PostResponse])
def get_hashtag_posts(
    name: str,
    service: HashtagServiceDep,
    page: int = Query(0, ge=0),
    size: int = Query(10, ge=1),
) -> PageResponse[PostResponse]:
    """Public posts tagged with ``name``, newest first."""
    result = service.posts_by_hashtag(name, page, size)
    return PageResponse[PostResponse].model_validate(result, from_attributes=True)
