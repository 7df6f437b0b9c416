"""
Root GraphQL query definitions
"""

from typing import Annotated

import strawberry

from ...plugin import QUERY
from ..inputs import HelloObjectInput, OptionalUserInput, UserDataInput
from ..operations import resolve
from ..types.product import PaginatedProducts, Product, ProductPage
from ..types.user import User


@strawberry.type
class Query:
    """Root GraphQL query type."""

    @strawberry.field(description="Hello World Plugin Query with Arguments")
    def hello_world_query(
        self,
        info: strawberry.Info,
        name: str | None = None,
        obj: Annotated[HelloObjectInput | None, strawberry.argument(name="object")] = None,
        arrayof_objects: list[HelloObjectInput] | None = None,
    ) -> str:
        return resolve(
            info, QUERY, "helloWorldQuery", name=name, object=obj, arrayofObjects=arrayof_objects
        )

    @strawberry.field(description="Process user, tag, number and user list arguments")
    def process_complex_data(
        self,
        info: strawberry.Info,
        user: UserDataInput | None = None,
        tags: list[str] | None = None,
        numbers: list[int] | None = None,
        users: list[UserDataInput] | None = None,
        optional_users: list[OptionalUserInput | None] | None = None,
    ) -> str:
        return resolve(
            info,
            QUERY,
            "processComplexData",
            user=user,
            tags=tags,
            numbers=numbers,
            users=users,
            optionalUsers=optional_users,
        )

    @strawberry.field(description="Get user profile by ID")
    def get_user_profile(self, info: strawberry.Info, user_id: str | None = None) -> User:
        return User.from_record(resolve(info, QUERY, "getUserProfile", userId=user_id))

    @strawberry.field(description="Get a list of users")
    def get_users(
        self,
        info: strawberry.Info,
        limit: int | None = None,
        offset: int | None = None,
        active: bool | None = None,
    ) -> list[User]:
        records = resolve(info, QUERY, "getUsers", limit=limit, offset=offset, active=active)
        return [User.from_record(record) for record in records]

    @strawberry.field(description="Get product by ID")
    def get_product(self, info: strawberry.Info, product_id: str | None = None) -> Product:
        return Product.from_record(resolve(info, QUERY, "getProduct", productId=product_id))

    @strawberry.field(description="Get paginated list of products")
    def get_products_paginated(
        self,
        info: strawberry.Info,
        page: int | None = None,
        page_size: int | None = None,
        category: str | None = None,
    ) -> PaginatedProducts:
        envelope = resolve(
            info, QUERY, "getProductsPaginated", page=page, pageSize=page_size, category=category
        )
        return PaginatedProducts.from_envelope(envelope)

    @strawberry.field(description="Get paginated list of full product records")
    def search_products(
        self,
        info: strawberry.Info,
        page: int | None = None,
        page_size: int | None = None,
        category: str | None = None,
    ) -> ProductPage:
        envelope = resolve(
            info, QUERY, "searchProducts", page=page, pageSize=page_size, category=category
        )
        return ProductPage.from_envelope(envelope)
