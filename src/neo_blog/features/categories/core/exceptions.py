"""Category errors."""

from ....core.exceptions import ConflictError, ResourceNotFoundError


class CategoryNotFoundError(ResourceNotFoundError):
    """Category lookup failed."""
    resource = "Category"


class CategoryNameAlreadyExistsError(ConflictError):
    """Another category already uses the name."""

    def __init__(self, name: str):
        super().__init__(
            f'Category name "{name}" is already in use.',
            details={"name": name},
        )


class CategoryInUseError(ConflictError):
    """Category is still referenced by at least one post."""

    def __init__(self, category_id: int):
        super().__init__(
            f"Category ID {category_id} cannot be deleted as it is currently associated with posts.",
            details={"category_id": category_id},
        )
