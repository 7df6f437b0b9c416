"""
In-memory sample data served by the plugin.

Each builder returns a freshly constructed collection so resolvers can never
observe (or cause) mutations made by another request.
"""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import Any

# age_hours is how long before "now" the user was created
_USER_SEED: tuple[dict[str, Any], ...] = (
    {
        "id": "1",
        "name": "John Doe",
        "email": "john.doe@example.com",
        "username": "johndoe",
        "address": ("123 Main St", "New York", "NY", "10001"),
        "tags": (("department", "engineering"), ("level", "senior")),
        "active": True,
        "age_hours": 24,
    },
    {
        "id": "2",
        "name": "Jane Smith",
        "email": "jane.smith@example.com",
        "username": "janesmith",
        "address": ("456 Oak Ave", "Los Angeles", "CA", "90210"),
        "tags": (("department", "design"), ("level", "mid")),
        "active": False,
        "age_hours": 48,
    },
    {
        "id": "3",
        "name": "Bob Johnson",
        "email": "bob.johnson@example.com",
        "username": "bobjohnson",
        "address": ("789 Pine Rd", "Chicago", "IL", "60601"),
        "tags": (("department", "marketing"), ("level", "junior")),
        "active": True,
        "age_hours": 72,
    },
)

_PRODUCT_SEED: tuple[dict[str, Any], ...] = (
    {
        "id": "1",
        "name": "Laptop",
        "description": "High-performance laptop",
        "price": 999.99,
        "stock": 10,
        "tags": ("electronics", "computers"),
        "categories": ("electronics", "office"),
    },
    {
        "id": "2",
        "name": "Coffee Mug",
        "description": "Ceramic coffee mug",
        "price": 12.99,
        "stock": 50,
        "tags": ("kitchen", "drinkware"),
        "categories": ("home", "kitchen"),
    },
    {
        "id": "3",
        "name": "Book",
        "description": "Programming book",
        "price": 29.99,
        "stock": 25,
        "tags": ("education", "programming"),
        "categories": ("books", "education"),
    },
)


def format_timestamp(moment: datetime) -> str:
    """Format a timestamp as RFC 3339 with second precision."""
    return moment.astimezone(UTC).replace(microsecond=0).isoformat().replace("+00:00", "Z")


def _address(street: str, city: str, state: str, zip_code: str) -> dict[str, str]:
    return {"street": street, "city": city, "state": state, "zip": zip_code}


def _tags(pairs: tuple[tuple[str, str], ...]) -> list[dict[str, str]]:
    return [{"key": key, "val": val} for key, val in pairs]


def sample_users(now: datetime | None = None) -> list[dict[str, Any]]:
    """Build the three sample users, newest first.

    ``createdAt`` is derived from ``now`` (1, 2 and 3 days earlier).
    """
    now = now or datetime.now(UTC)
    return [
        {
            "id": seed["id"],
            "name": seed["name"],
            "email": seed["email"],
            "username": seed["username"],
            "address": _address(*seed["address"]),
            "tags": _tags(seed["tags"]),
            "active": seed["active"],
            "createdAt": format_timestamp(now - timedelta(hours=seed["age_hours"])),
        }
        for seed in _USER_SEED
    ]


def sample_products() -> list[dict[str, Any]]:
    """Build the sample product catalog."""
    return [
        {
            **product,
            "tags": list(product["tags"]),
            "categories": list(product["categories"]),
        }
        for product in _PRODUCT_SEED
    ]


def user_profile(user_id: str, now: datetime | None = None) -> dict[str, Any]:
    """Build the profile returned for any requested user id."""
    return {
        "id": user_id,
        "name": "John Doe",
        "email": "john.doe@example.com",
        "username": "johndoe",
        "address": _address("123 Main St", "New York", "NY", "10001"),
        "tags": _tags((("department", "engineering"), ("level", "senior"), ("team", "backend"))),
        "active": True,
        "createdAt": format_timestamp(now or datetime.now(UTC)),
    }


def sample_product(product_id: str) -> dict[str, Any]:
    """Build the product returned for any requested product id."""
    return {
        "id": product_id,
        "name": "Sample Product",
        "description": "This is a sample product from the plugin",
        "price": 29.99,
        "stock": 100,
        "tags": ["sample", "plugin", "demo"],
        "categories": ["electronics", "gadgets"],
    }
