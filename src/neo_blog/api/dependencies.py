"""FastAPI dependencies: container access, authentication and authorization."""

import logging
from typing import Annotated, Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from ..application import CommandBus, QueryBus
from ..container import BlogContainer
from ..core.exceptions import AuthenticationError, ForbiddenError, InvalidTokenError
from ..features.auth.application import AuthService
from ..features.posts.application.dtos import PostDto
from ..features.posts.application.queries import GetPostByIdQuery
from ..features.posts.core.exceptions import PostNotFoundError
from ..features.users.application.dtos import UserDto
from ..features.users.application.queries import GetUserByIdQuery
from ..features.users.core.entities import UserRole

logger = logging.getLogger(__name__)

# Missing credentials are reported through AuthenticationError so every 401
# shares one error body.
security = HTTPBearer(auto_error=False)


def get_container(request: Request) -> BlogContainer:
    return request.app.state.container


def get_command_bus(container: Annotated[BlogContainer, Depends(get_container)]) -> CommandBus:
    return container.command_bus


def get_query_bus(container: Annotated[BlogContainer, Depends(get_container)]) -> QueryBus:
    return container.query_bus


def get_auth_service(container: Annotated[BlogContainer, Depends(get_container)]) -> AuthService:
    return container.auth_service


async def get_current_user(
    credentials: Annotated[Optional[HTTPAuthorizationCredentials], Depends(security)],
    container: Annotated[BlogContainer, Depends(get_container)],
) -> UserDto:
    """Resolve the bearer token to the stored user.

    The user is re-read on every request so a deleted account or a changed
    role takes effect immediately.
    """
    if credentials is None:
        raise AuthenticationError("Not authenticated.")

    claims = container.token_service.decode(credentials.credentials)
    user = await container.query_bus.execute(GetUserByIdQuery(claims.user_id))
    if user is None:
        logger.warning(f"Token presented for unknown user {claims.user_id}")
        raise InvalidTokenError("User not found.")

    logger.debug(f"Authenticated user {user.id}")
    return user


CurrentUser = Annotated[UserDto, Depends(get_current_user)]
Commands = Annotated[CommandBus, Depends(get_command_bus)]
Queries = Annotated[QueryBus, Depends(get_query_bus)]


def require_roles(*roles: UserRole):
    """Require the caller to hold one of ``roles``."""
    allowed = {UserRole(role).value for role in roles}

    async def dependency(current_user: CurrentUser) -> UserDto:
        if current_user.role not in allowed:
            logger.warning(f"User {current_user.id} lacks role: {', '.join(sorted(allowed))}")
            raise ForbiddenError("Insufficient role.")
        return current_user

    return dependency


AdminUser = Annotated[UserDto, Depends(require_roles(UserRole.ADMIN))]


async def ensure_post_owner(post_id: int, current_user: CurrentUser, query_bus: Queries) -> PostDto:
    """Allow admins and the post's author; returns the post."""
    post = await query_bus.execute(GetPostByIdQuery(post_id))
    if post is None:
        raise PostNotFoundError(f"ID: {post_id}")
    if current_user.is_admin or post.author_id == current_user.id:
        return post
    logger.warning(f"User {current_user.id} may not modify post {post_id}")
    raise ForbiddenError("You do not have permission to modify this resource.")


OwnedPost = Annotated[PostDto, Depends(ensure_post_owner)]
