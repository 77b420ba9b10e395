"""
Composition root: repositories, buses, handlers and services for one app.
"""
import logging
from typing import Optional

from .application import CommandBus, QueryBus
from .config import BlogSettings
from .core.exceptions import ConfigurationError
from .infrastructure.database import DatabaseManager
from .infrastructure.events import InMemoryEventBus
from .infrastructure.security import BcryptPasswordHasher

from .features.auth.application import AuthService, JwtTokenService
from .features.categories.application.commands import (
    CreateCategoryCommand,
    CreateCategoryCommandHandler,
    DeleteCategoryCommand,
    DeleteCategoryCommandHandler,
    UpdateCategoryCommand,
    UpdateCategoryCommandHandler,
)
from .features.categories.application.queries import (
    GetAllCategoriesQuery,
    GetAllCategoriesQueryHandler,
    GetCategoryByIdQuery,
    GetCategoryByIdQueryHandler,
)
from .features.categories.infrastructure.repositories import (
    AsyncPGCategoryRepository,
    InMemoryCategoryRepository,
)
from .features.comments.application.commands import (
    CreateCommentCommand,
    CreateCommentCommandHandler,
    CreateCommentResponseCommand,
    CreateCommentResponseCommandHandler,
    DeleteCommentCommand,
    DeleteCommentCommandHandler,
    DeleteCommentResponseCommand,
    DeleteCommentResponseCommandHandler,
    UpdateCommentCommand,
    UpdateCommentCommandHandler,
    UpdateCommentResponseCommand,
    UpdateCommentResponseCommandHandler,
)
from .features.comments.application.queries import (
    GetCommentByIdQuery,
    GetCommentByIdQueryHandler,
    GetCommentResponseByIdQuery,
    GetCommentResponseByIdQueryHandler,
    GetCommentsByPostQuery,
    GetCommentsByPostQueryHandler,
)
from .features.comments.infrastructure.repositories import (
    AsyncPGCommentRepository,
    AsyncPGCommentResponseRepository,
    InMemoryCommentRepository,
    InMemoryCommentResponseRepository,
)
from .features.posts.application.commands import (
    CreatePostCommand,
    CreatePostCommandHandler,
    DeletePostCommand,
    DeletePostCommandHandler,
    PublishPostCommand,
    PublishPostCommandHandler,
    UnpublishPostCommand,
    UnpublishPostCommandHandler,
    UpdatePostCommand,
    UpdatePostCommandHandler,
)
from .features.posts.application.handlers import LogPostCreatedHandler
from .features.posts.application.queries import (
    GetPostByIdQuery,
    GetPostByIdQueryHandler,
    GetPostsQuery,
    GetPostsQueryHandler,
)
from .features.posts.core.events import PostCreatedEvent
from .features.posts.infrastructure.repositories import (
    AsyncPGPostRepository,
    InMemoryPostRepository,
)
from .features.users.application.commands import (
    CreateUserCommand,
    CreateUserCommandHandler,
    DeleteUserCommand,
    DeleteUserCommandHandler,
    UpdateUserCommand,
    UpdateUserCommandHandler,
)
from .features.users.application.handlers import LogUserCreatedHandler
from .features.users.application.queries import (
    GetAllUsersQuery,
    GetAllUsersQueryHandler,
    GetUserByEmailQuery,
    GetUserByEmailQueryHandler,
    GetUserByIdQuery,
    GetUserByIdQueryHandler,
)
from .features.users.core.events import UserCreatedEvent
from .features.users.infrastructure.repositories import (
    AsyncPGUserRepository,
    InMemoryUserRepository,
)

logger = logging.getLogger(__name__)


class BlogContainer:
    """Builds and owns every collaborator of the application.

    ``storage_backend="memory"`` wires the in-memory repositories;
    ``"postgres"`` wires the asyncpg ones over a shared DatabaseManager whose
    pool is opened by ``startup`` and closed by ``shutdown``.
    """

    def __init__(self, settings: BlogSettings, database: Optional[DatabaseManager] = None):
        self.settings = settings
        self.database = database

        self.event_bus = InMemoryEventBus()
        self.command_bus = CommandBus()
        self.query_bus = QueryBus()
        self.password_hasher = BcryptPasswordHasher(settings.bcrypt_salt_rounds)
        self.token_service = JwtTokenService(
            secret=settings.jwt_secret.get_secret_value(),
            algorithm=settings.jwt_algorithm,
            expires_in=settings.jwt_expiration_time,
        )

        self._build_repositories()
        self._register_handlers()
        self._subscribe_event_handlers()

        self.auth_service = AuthService(
            user_repository=self.user_repository,
            password_hasher=self.password_hasher,
            token_service=self.token_service,
            command_bus=self.command_bus,
        )

    def _build_repositories(self) -> None:
        backend = self.settings.storage_backend
        if backend == "memory":
            # deletes cascade the way the postgres foreign keys do
            self.comment_response_repository = InMemoryCommentResponseRepository()
            self.comment_repository = InMemoryCommentRepository(self.comment_response_repository)
            self.post_repository = InMemoryPostRepository(self.comment_repository)
            self.user_repository = InMemoryUserRepository(self.post_repository, self.comment_repository)
            self.category_repository = InMemoryCategoryRepository()
        elif backend == "postgres":
            if self.database is None:
                if not self.settings.database_url:
                    raise ConfigurationError("DATABASE_URL is required when STORAGE_BACKEND=postgres")
                self.database = DatabaseManager(
                    self.settings.database_url,
                    application_name=self.settings.app_name,
                    min_size=self.settings.db_pool_min_size,
                    max_size=self.settings.db_pool_max_size,
                    command_timeout=self.settings.db_command_timeout,
                )
            self.user_repository = AsyncPGUserRepository(self.database)
            self.category_repository = AsyncPGCategoryRepository(self.database)
            self.post_repository = AsyncPGPostRepository(self.database)
            self.comment_response_repository = AsyncPGCommentResponseRepository(self.database)
            self.comment_repository = AsyncPGCommentRepository(self.database)
        else:
            raise ConfigurationError(f"Unknown storage backend: {backend}")
        logger.info(f"Using {backend} storage backend")

    def _register_handlers(self) -> None:
        commands = self.command_bus
        queries = self.query_bus
        events = self.event_bus

        # Users
        commands.register(
            CreateUserCommand,
            CreateUserCommandHandler(self.user_repository, self.password_hasher, events, queries),
        )
        commands.register(
            UpdateUserCommand,
            UpdateUserCommandHandler(self.user_repository, self.password_hasher, events, queries),
        )
        commands.register(DeleteUserCommand, DeleteUserCommandHandler(self.user_repository, events))
        queries.register(GetUserByIdQuery, GetUserByIdQueryHandler(self.user_repository))
        queries.register(GetUserByEmailQuery, GetUserByEmailQueryHandler(self.user_repository))
        queries.register(GetAllUsersQuery, GetAllUsersQueryHandler(self.user_repository))

        # Categories
        commands.register(
            CreateCategoryCommand,
            CreateCategoryCommandHandler(self.category_repository, events, queries),
        )
        commands.register(
            UpdateCategoryCommand,
            UpdateCategoryCommandHandler(self.category_repository, events, queries),
        )
        commands.register(
            DeleteCategoryCommand,
            DeleteCategoryCommandHandler(self.category_repository, self.post_repository, events),
        )
        queries.register(GetCategoryByIdQuery, GetCategoryByIdQueryHandler(self.category_repository))
        queries.register(GetAllCategoriesQuery, GetAllCategoriesQueryHandler(self.category_repository))

        # Posts
        commands.register(
            CreatePostCommand,
            CreatePostCommandHandler(
                self.post_repository, self.user_repository, self.category_repository, events, queries
            ),
        )
        commands.register(
            UpdatePostCommand,
            UpdatePostCommandHandler(self.post_repository, self.category_repository, events, queries),
        )
        commands.register(
            PublishPostCommand, PublishPostCommandHandler(self.post_repository, events, queries)
        )
        commands.register(
            UnpublishPostCommand, UnpublishPostCommandHandler(self.post_repository, events, queries)
        )
        commands.register(DeletePostCommand, DeletePostCommandHandler(self.post_repository, events))
        queries.register(GetPostByIdQuery, GetPostByIdQueryHandler(self.post_repository))
        queries.register(GetPostsQuery, GetPostsQueryHandler(self.post_repository))

        # Comments and replies
        commands.register(
            CreateCommentCommand,
            CreateCommentCommandHandler(
                self.comment_repository, self.user_repository, self.post_repository, events, queries
            ),
        )
        commands.register(
            UpdateCommentCommand,
            UpdateCommentCommandHandler(self.comment_repository, events, queries),
        )
        commands.register(
            DeleteCommentCommand, DeleteCommentCommandHandler(self.comment_repository, events)
        )
        commands.register(
            CreateCommentResponseCommand,
            CreateCommentResponseCommandHandler(
                self.comment_response_repository,
                self.comment_repository,
                self.user_repository,
                events,
                queries,
            ),
        )
        commands.register(
            UpdateCommentResponseCommand,
            UpdateCommentResponseCommandHandler(self.comment_response_repository, events, queries),
        )
        commands.register(
            DeleteCommentResponseCommand,
            DeleteCommentResponseCommandHandler(self.comment_response_repository, events),
        )
        queries.register(GetCommentByIdQuery, GetCommentByIdQueryHandler(self.comment_repository))
        queries.register(
            GetCommentsByPostQuery, GetCommentsByPostQueryHandler(self.comment_repository)
        )
        queries.register(
            GetCommentResponseByIdQuery,
            GetCommentResponseByIdQueryHandler(self.comment_response_repository),
        )

    def _subscribe_event_handlers(self) -> None:
        self.event_bus.subscribe(UserCreatedEvent, LogUserCreatedHandler())
        self.event_bus.subscribe(PostCreatedEvent, LogPostCreatedHandler())

    async def startup(self) -> None:
        if self.database is not None:
            await self.database.create_pool()
            await self.database.ensure_schema()

    async def shutdown(self) -> None:
        if self.database is not None:
            await self.database.close_pool()
