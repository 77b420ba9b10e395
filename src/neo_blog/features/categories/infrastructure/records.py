"""Row codec shared by the category repositories."""

from typing import Any, Dict, Mapping

from ....core.value_objects import Identifier
from ..core.entities import Category
from ..core.value_objects import CategoryName


def category_to_record(category: Category) -> Dict[str, Any]:
    return {"id": category.id.value, "name": category.name.value}


def category_from_record(row: Mapping[str, Any]) -> Category:
    return Category.create(CategoryName(row["name"]), Identifier(row["id"]))
