"""Post lifecycle endpoints."""

from fastapi import APIRouter, Query, status

from content_graph.api.v1.dependencies import (
    CurrentUserIdDep,
    OptionalUserIdDep,
    PostServiceDep,
)
from content_graph.models import Post
from content_graph.schemas.common import PageResponse
from content_graph.schemas.post import PostCreate, PostResponse, PostUpdate

router = APIRouter(prefix="/posts", tags=["posts"])


@router.post("/", response_model=PostResponse, status_code=status.HTTP_201_CREATED)
def create_post(
    post_data: PostCreate,
    user_id: CurrentUserIdDep,
    service: PostServiceDep,
) -> Post:
    """Create a post and index its hashtags and mentions."""
    return service.create_post(user_id, post_data.content, post_data.visibility)


@router.get("/users/{author_id}", response_model=PageResponse[PostResponse])
def list_posts_by_author(
    author_id: int,
    viewer_id: OptionalUserIdDep,
    service: PostServiceDep,
    page: int = Query(0, ge=0),
    size: int = Query(10, ge=1, description="Values above 50 are served as 50"),
) -> PageResponse[PostResponse]:
    """List an author's posts visible to the caller, newest first."""
    result = service.list_posts_by_author(viewer_id, author_id, page, size)
    return PageResponse[PostResponse].model_validate(result, from_attributes=True)


@router.get("/{post_id}", response_model=PostResponse)
def get_post(
    post_id: int,
    viewer_id: OptionalUserIdDep,
    service: PostServiceDep,
) -> Post:
    """Return a post if the caller may see it, counting the view."""
    return service.get_post(viewer_id, post_id)


@router.patch("/{post_id}", response_model=PostResponse)
def edit_post(
    post_id: int,
    post_data: PostUpdate,
    user_id: CurrentUserIdDep,
    service: PostServiceDep,
) -> Post:
    """Partially update a post owned by the caller."""
    return service.edit_post(user_id, post_id, post_data.content, post_data.visibility)


@router.delete("/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_post(
    post_id: int,
    user_id: CurrentUserIdDep,
    service: PostServiceDep,
) -> None:
    """Soft-delete a post owned by the caller."""
    service.soft_delete_post(user_id, post_id)
