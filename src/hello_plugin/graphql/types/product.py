"""
Product GraphQL type definitions
"""

from collections.abc import Mapping
from typing import Any

import strawberry

from ...core.arguments import (
    get_array_arg,
    get_bool_arg,
    get_float_arg,
    get_int_arg,
    get_string_arg,
    get_string_list_arg,
)


@strawberry.type(description="A product in our catalog")
class Product:
    """Product type for GraphQL API."""

    id: str
    name: str
    description: str | None
    price: float
    stock: int
    tags: list[str] | None
    categories: list[str] | None

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "Product":
        return cls(
            id=get_string_arg(record, "id"),
            name=get_string_arg(record, "name"),
            description=get_string_arg(record, "description") or None,
            price=get_float_arg(record, "price"),
            stock=get_int_arg(record, "stock"),
            tags=get_string_list_arg(record, "tags"),
            categories=get_string_list_arg(record, "categories"),
        )


def _page_fields(envelope: Mapping[str, Any]) -> dict[str, Any]:
    return {
        "total_count": get_int_arg(envelope, "totalCount"),
        "page_size": get_int_arg(envelope, "pageSize"),
        "current_page": get_int_arg(envelope, "currentPage"),
        "total_pages": get_int_arg(envelope, "totalPages"),
        "has_next_page": get_bool_arg(envelope, "hasNextPage"),
        "has_previous_page": get_bool_arg(envelope, "hasPreviousPage"),
        "success": get_bool_arg(envelope, "success"),
        "message": get_string_arg(envelope, "message"),
    }


@strawberry.type(description="Paginated list of product summaries")
class PaginatedProducts:
    items: list[str]
    total_count: int
    page_size: int
    current_page: int
    total_pages: int
    has_next_page: bool
    has_previous_page: bool
    success: bool
    message: str

    @classmethod
    def from_envelope(cls, envelope: Mapping[str, Any]) -> "PaginatedProducts":
        return cls(items=get_string_list_arg(envelope, "items"), **_page_fields(envelope))


@strawberry.type(description="Paginated list of products")
class ProductPage:
    items: list[Product]
    total_count: int
    page_size: int
    current_page: int
    total_pages: int
    has_next_page: bool
    has_previous_page: bool
    success: bool
    message: str

    @classmethod
    def from_envelope(cls, envelope: Mapping[str, Any]) -> "ProductPage":
        items = [
            Product.from_record(item)
            for item in get_array_arg(envelope, "items")
            if isinstance(item, Mapping)
        ]
        return cls(items=items, **_page_fields(envelope))
