from typing import Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class PaginationMeta(BaseModel):
    total: int
    count: int
    per_page: int
    current_page: int
    total_pages: int


class ListMeta(BaseModel):
    pagination: PaginationMeta


class ItemEnvelope(BaseModel, Generic[T]):
    data: T


class ListEnvelope(BaseModel, Generic[T]):
    data: list[T]
    meta: ListMeta
