"""
User GraphQL type definitions
"""

from collections.abc import Mapping
from typing import Any

import strawberry

from ...core.arguments import get_array_object_arg, get_bool_arg, get_object_arg, get_string_arg


@strawberry.type(description="A user's address")
class Address:
    street: str | None = None
    city: str | None = None
    state: str | None = None
    zip: str | None = None

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "Address":
        return cls(
            street=get_string_arg(record, "street"),
            city=get_string_arg(record, "city"),
            state=get_string_arg(record, "state"),
            zip=get_string_arg(record, "zip"),
        )


@strawberry.type(description="A tag with key and value")
class Tag:
    key: str
    val: str


@strawberry.type(description="A user in the system")
class User:
    """User type for GraphQL API."""

    id: str
    name: str
    email: str | None
    username: str | None
    address: Address | None
    tags: list[Tag] | None
    active: bool
    created_at: str | None

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "User":
        """Convert a plain user record into the GraphQL type."""
        address = get_object_arg(record, "address")
        return cls(
            id=get_string_arg(record, "id"),
            name=get_string_arg(record, "name"),
            email=get_string_arg(record, "email") or None,
            username=get_string_arg(record, "username") or None,
            address=Address.from_record(address) if address else None,
            tags=[
                Tag(key=get_string_arg(tag, "key"), val=get_string_arg(tag, "val"))
                for tag in get_array_object_arg(record, "tags")
            ],
            active=get_bool_arg(record, "active"),
            created_at=get_string_arg(record, "createdAt") or None,
        )


@strawberry.type(description="A validation failure reported by a mutation")
class ValidationError:
    code: str
    message: str
    field: str
    details: list[str]


@strawberry.type(description="Response wrapper for user mutations")
class UserResponse:
    success: bool
    message: str
    data: User | None
    errors: list[ValidationError] | None

    @classmethod
    def from_envelope(cls, envelope: Mapping[str, Any]) -> "UserResponse":
        data = get_object_arg(envelope, "data")
        errors = envelope.get("errors")
        return cls(
            success=get_bool_arg(envelope, "success"),
            message=get_string_arg(envelope, "message"),
            data=User.from_record(data) if data else None,
            errors=[
                ValidationError(
                    code=get_string_arg(error, "code"),
                    message=get_string_arg(error, "message"),
                    field=get_string_arg(error, "field"),
                    details=[d for d in error.get("details") or [] if isinstance(d, str)],
                )
                for error in errors
                if isinstance(error, Mapping)
            ]
            if errors is not None
            else None,
        )
