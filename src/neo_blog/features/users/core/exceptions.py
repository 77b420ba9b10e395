"""User errors."""

from ....core.exceptions import ConflictError, ResourceNotFoundError


class UserNotFoundError(ResourceNotFoundError):
    resource = "User"


class EmailAlreadyExistsError(ConflictError):
    def __init__(self, email: str):
        super().__init__(f'User with email "{email}" already exists.', details={"email": email})


class UsernameAlreadyExistsError(ConflictError):
    def __init__(self, username: str):
        super().__init__(
            f'User with username "{username}" already exists.', details={"username": username}
        )
