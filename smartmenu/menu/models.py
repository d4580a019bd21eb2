from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _Record(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class Item(_Record):
    id: int
    name: str
    price: float
    description: str | None = None
    tags: list[str] = Field(default_factory=list)
    age_group: str
    rating: float


class Category(_Record):
    name: str
    items: list[Item] = Field(default_factory=list)


class Menu(_Record):
    id: int
    restaurant_id: int
    name: str
    cuisine: str
    rating: float
    num_ratings: int
    available_times: list[str] = Field(default_factory=list)
    categories: list[Category] = Field(default_factory=list)


class FilterOptions(BaseModel):
    include_tags: list[str] | None = None
    exclude_tags: list[str] | None = None
    min_price: float | None = None
    max_price: float | None = None
    menu_id: int | None = None
    age_group: str | None = None
