"""Category read models."""

from dataclasses import dataclass


@dataclass
class CategoryDto:
    id: int
    name: str
