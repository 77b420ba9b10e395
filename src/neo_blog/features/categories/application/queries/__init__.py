"""Category queries."""

from .get_category_by_id import GetCategoryByIdQuery, GetCategoryByIdQueryHandler
from .get_all_categories import GetAllCategoriesQuery, GetAllCategoriesQueryHandler

__all__ = [
    "GetCategoryByIdQuery",
    "GetCategoryByIdQueryHandler",
    "GetAllCategoriesQuery",
    "GetAllCategoriesQueryHandler",
]
