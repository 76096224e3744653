"""Shared API dependencies for viewer identity and services."""

from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt
from sqlalchemy.orm import Session

from content_graph.core.settings import settings
from content_graph.db.session import get_db
from content_graph.services import FeedService, HashtagService, MentionService, PostService

# Tokens are issued by the auth service; this layer only validates them.
bearer_scheme = HTTPBearer()
optional_bearer_scheme = HTTPBearer(auto_error=False)

# Type alias for database session dependency
SessionDep = Annotated[Session, Depends(get_db)]


def _credentials_error() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
    )


def decode_user_id(token: str) -> int:
    """Return the user id carried in a bearer token's ``sub`` claim.

    Raises:
        HTTPException: 401 if the token is invalid or has no numeric subject.
    """
    try:
        payload = jwt.decode(token, settings.secret_key, algorithms=[settings.jwt_algorithm])
    except JWTError as err:
        raise _credentials_error() from err
    subject = payload.get("sub")
    if subject is None:
        raise _credentials_error()
    try:
        return int(subject)
    except (TypeError, ValueError) as err:
        raise _credentials_error() from err


def get_current_user_id(
    credentials: Annotated[HTTPAuthorizationCredentials, Depends(bearer_scheme)],
) -> int:
    """Return the authenticated viewer's id."""
    return decode_user_id(credentials.credentials)


def get_optional_user_id(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(optional_bearer_scheme)],
) -> int | None:
    """Return the viewer's id, or None for anonymous requests."""
    if credentials is None:
        return None
    return decode_user_id(credentials.credentials)


def get_post_service(db: SessionDep) -> PostService:
    return PostService(db)


def get_feed_service(db: SessionDep) -> FeedService:
    return FeedService(db)


def get_hashtag_service(db: SessionDep) -> HashtagService:
    return HashtagService(db)


def get_mention_service(db: SessionDep) -> MentionService:
    return MentionService(db)


CurrentUserIdDep = Annotated[int, Depends(get_current_user_id)]
OptionalUserIdDep = Annotated[int | None, Depends(get_optional_user_id)]
PostServiceDep = Annotated[PostService, Depends(get_post_service)]
FeedServiceDep = Annotated[FeedService, Depends(get_feed_service)]
HashtagServiceDep = Annotated[HashtagService, Depends(get_hashtag_service)]
MentionServiceDep = Annotated[MentionService, Depends(get_mention_service)]
