"""Post visibility policy."""
from __future__ import annotations

from content_graph.models.post import Post, Visibility
from content_graph.services.directory import FollowGraph

__all__ = ["VisibilityPolicy"]


class VisibilityPolicy:
    """Decides whether a viewer may read a post.

    ``viewer_id`` is None for anonymous viewers, who only see PUBLIC posts.
    """

    def __init__(self, follow_graph: FollowGraph) -> None:
        self.follow_graph = follow_graph

    def can_view(self, viewer_id: int | None, post: Post) -> bool:
        """Return True if ``viewer_id`` may read ``post``."""
        if viewer_id is not None and viewer_id == post.author_id:
            return True
        if post.visibility == Visibility.PUBLIC:
            return True
        if viewer_id is None or post.visibility == Visibility.PRIVATE:
            return False
        if post.visibility == Visibility.FOLLOWERS:
            return self.follow_graph.is_following(viewer_id, post.author_id)
        return False

    def visible_levels(self, viewer_id: int | None, author_id: int) -> tuple[Visibility, ...]:
        """Return the visibility levels of ``author_id``'s posts the viewer can see."""
        if viewer_id is not None and viewer_id == author_id:
            return tuple(Visibility)
        if viewer_id is not None and self.follow_graph.is_following(viewer_id, author_id):
            return (Visibility.PUBLIC, Visibility.FOLLOWERS)
        return (Visibility.PUBLIC,)
