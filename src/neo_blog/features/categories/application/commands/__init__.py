"""Category commands."""

from .create_category import CreateCategoryCommand, CreateCategoryCommandHandler
from .update_category import UpdateCategoryCommand, UpdateCategoryCommandHandler
from .delete_category import DeleteCategoryCommand, DeleteCategoryCommandHandler

__all__ = [
    "CreateCategoryCommand",
    "CreateCategoryCommandHandler",
    "UpdateCategoryCommand",
    "UpdateCategoryCommandHandler",
    "DeleteCategoryCommand",
    "DeleteCategoryCommandHandler",
]
