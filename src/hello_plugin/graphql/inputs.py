"""
GraphQL input types for object arguments
"""

import strawberry


@strawberry.input(description="Object argument")
class HelloObjectInput:
    name: str | None = None
    age: int | None = None


@strawberry.input(description="User data for complex processing")
class UserDataInput:
    id: int | None = None
    name: str | None = None
    email: str | None = None
    age: int | None = None
    active: bool | None = None


@strawberry.input(description="User entry of an optional users list")
class OptionalUserInput:
    name: str | None = None
    email: str | None = None


@strawberry.input(description="User creation data")
class CreateUserInput:
    name: str | None = None
    email: str | None = None
    username: str | None = None


@strawberry.input(description="Tag object with structured data")
class TagInput:
    tag_id: str | None = strawberry.field(default=None, name="tag_id")
    name: str | None = None
    value: str | None = None
    weight: float | None = None
    active: bool | None = None
    metadata: str | None = None
