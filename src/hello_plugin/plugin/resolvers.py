"""
GraphQL resolvers and custom functions of the Hello World plugin.

Every resolver has the host signature ``resolver(context, args)`` where
``args`` is the decoded argument mapping of the operation.
"""

from collections.abc import Mapping
from datetime import UTC, datetime
from typing import Any

from ..config import settings
from ..core.arguments import (
    get_all_context_data,
    get_array_arg,
    get_array_object_arg,
    get_bool_arg,
    get_float_arg,
    get_int_arg,
    get_int_list_arg,
    get_object_arg,
    get_plugin_id,
    get_project_id,
    get_string_arg,
    get_string_list_arg,
    get_tenant_id,
    get_user_id,
)
from ..core.dataset import (
    format_timestamp,
    sample_product,
    sample_products,
    sample_users,
    user_profile,
)
from ..core.filtering import Comparator, FilterSpec, contains, equals, filter_records
from ..core.pagination import paginate, slice_offset_limit
from ..core.responses import (
    MutationEnvelope,
    OutputMode,
    list_response,
    mutation_envelope,
    paginated_envelope,
)
from ..logging import get_logger, log_context_values

logger = get_logger(__name__)

Context = Mapping[str, Any]
Args = Mapping[str, Any]

CREATE_USER_REQUIRED_FIELDS = ("name", "email", "username")


# Queries


def hello_world(context: Context, args: Args) -> str:
    """Greet ``name`` and echo the object arguments and host context."""
    logger.info("helloWorld called", args=dict(args))
    log_context_values(logger, context)
    logger.debug("Context data from host", **get_all_context_data(context))

    lines = ["Hello World Plugin Response:"]

    for label, value in (
        ("Plugin ID", get_plugin_id(context)),
        ("Project ID", get_project_id(context)),
        ("User ID", get_user_id(context)),
        ("Tenant ID", get_tenant_id(context)),
    ):
        if value:
            lines.append(f"{label}: {value}")

    name = get_string_arg(args, "name", "World")
    lines.append(f"Hello, {name}!")

    obj = get_object_arg(args, "object")
    if obj:
        lines.append(
            f"Object received: name={get_string_arg(obj, 'name')} age={get_int_arg(obj, 'age')}"
        )

    # Entries keep their position in the array; non-objects are skipped
    objects = get_array_arg(args, "arrayofObjects")
    if objects:
        lines.append("Array of Objects received:")
        for i, item in enumerate(objects, start=1):
            if not isinstance(item, Mapping):
                continue
            lines.append(
                f"  Object {i}: name={get_string_arg(item, 'name')} age={get_int_arg(item, 'age')}"
            )

    return "\n".join(lines) + "\n"


def process_complex_data(context: Context, args: Args) -> str:
    """Summarize a user object plus tag, number and user arrays."""
    _ = context
    lines = ["Processing complex data:"]

    user = get_object_arg(args, "user")
    if user:
        lines.append(
            "User: ID={} Name={} Email={} Age={} Active={}".format(
                get_int_arg(user, "id"),
                get_string_arg(user, "name"),
                get_string_arg(user, "email"),
                get_int_arg(user, "age"),
                str(get_bool_arg(user, "active")).lower(),
            )
        )

    tags = get_string_list_arg(args, "tags")
    if tags:
        lines.append(f"Tags: {', '.join(tags)}")

    numbers = get_int_list_arg(args, "numbers")
    if numbers:
        lines.append(f"Numbers: {', '.join(str(n) for n in numbers)}")

    users = get_array_arg(args, "users")
    if users:
        lines.append("Users:")
        for i, item in enumerate(users, start=1):
            if not isinstance(item, Mapping):
                continue
            lines.append(
                f"  User {i}: ID={get_int_arg(item, 'id')} "
                f"Name={get_string_arg(item, 'name')} Email={get_string_arg(item, 'email')}"
            )

    optional_users = get_array_arg(args, "optionalUsers")
    if optional_users:
        lines.append("Optional Users:")
        for i, item in enumerate(optional_users, start=1):
            if isinstance(item, Mapping):
                lines.append(
                    f"  Optional User {i}: Name={get_string_arg(item, 'name')} "
                    f"Email={get_string_arg(item, 'email')}"
                )
            elif item is None:
                lines.append(f"  Optional User {i}: null")

    return "\n".join(lines) + "\n"


def get_user_profile(context: Context, args: Args) -> dict[str, Any]:
    """Return the profile of ``userId`` (sample data)."""
    _ = context
    user_id = get_string_arg(args, "userId", "default-user")
    logger.info("Fetching user profile", user_id=user_id)
    return user_profile(user_id)


def get_users(context: Context, args: Args) -> list[dict[str, Any]]:
    """List sample users filtered by ``active``, windowed by ``offset``/``limit``."""
    _ = context
    limit = get_int_arg(args, "limit", settings.users_default_limit)
    offset = get_int_arg(args, "offset", 0)
    active = get_bool_arg(args, "active", True)

    logger.info("Listing users", limit=limit, offset=offset, active=active)

    users = filter_records(sample_users(), equals("active", active))
    page = slice_offset_limit(users, offset, limit)

    logger.info("getUsers returning", count=len(page))
    return list_response(page)


def get_product(context: Context, args: Args) -> dict[str, Any]:
    """Return the product ``productId`` (sample data)."""
    _ = context
    product_id = get_string_arg(args, "productId", "default-product")
    logger.info("Fetching product", product_id=product_id)
    return sample_product(product_id)


def get_products_paginated(context: Context, args: Args) -> dict[str, Any]:
    """Page through the catalog, optionally restricted to one ``category``.

    Items are returned as one-line product summaries.
    """
    _ = context
    page = get_int_arg(args, "page", 1)
    page_size = get_int_arg(args, "pageSize", settings.products_default_page_size)
    category = get_string_arg(args, "category", "")

    logger.info("Paginating products", page=page, page_size=page_size, category=category)

    spec = FilterSpec().where("categories", Comparator.CONTAINS, category)
    result = paginate(spec.apply(sample_products()), page, page_size)

    return paginated_envelope(
        result,
        OutputMode.STRINGS,
        message=f"Retrieved {len(result.items)} products",
    )


def search_products(context: Context, args: Args) -> dict[str, Any]:
    """Like ``getProductsPaginated`` but returning full product records."""
    _ = context
    page = get_int_arg(args, "page", 1)
    page_size = get_int_arg(args, "pageSize", settings.products_default_page_size)
    category = get_string_arg(args, "category", "")

    products = filter_records(sample_products(), contains("categories", category))

    result = paginate(products, page, page_size)
    return paginated_envelope(
        result, OutputMode.RECORDS, message=f"Retrieved {len(result.items)} products"
    )


# Mutations


def say_hello(context: Context, args: Args) -> str:
    _ = context
    message = get_string_arg(args, "message", "Hello!")
    return f"Plugin says: {message} (from {settings.plugin_name})"


def create_user(context: Context, args: Args) -> dict[str, Any]:
    """Validate the ``input`` object and return the simulated new user."""
    _ = context
    payload = get_object_arg(args, "input")
    values = {name: get_string_arg(payload, name, "") for name in CREATE_USER_REQUIRED_FIELDS}

    logger.info("Creating user", **values)

    def build(user_id: str) -> dict[str, Any]:
        return {
            "id": user_id,
            **values,
            "active": True,
            "createdAt": format_timestamp(datetime.now(UTC)),
        }

    envelope: MutationEnvelope = mutation_envelope(
        values,
        CREATE_USER_REQUIRED_FIELDS,
        build,
        id_prefix="user",
        success_message="User created successfully",
        failure_message="Name, email, and username are required",
        failure_details=["All fields are required for user creation"],
    )

    if envelope.success:
        logger.info("User created", user_id=envelope.data["id"])
    else:
        logger.info("User creation rejected", missing=envelope.errors[0].field)

    return envelope.to_dict()


def process_bulk_tags(context: Context, args: Args) -> str:
    """Describe every tag object submitted for ``userId``."""
    _ = context
    user_id = get_string_arg(args, "userId", "default-user")
    tags = get_array_object_arg(args, "tags")

    logger.info("Processing tags", user_id=user_id, count=len(tags))

    lines = [f"Processing {len(tags)} tags for user: {user_id}", ""]
    for i, tag in enumerate(tags, start=1):
        weight = get_float_arg(tag, "weight", 0.0)
        active = get_bool_arg(tag, "active", False)
        lines.extend(
            [
                f"Tag {i}:",
                f"   ID: {get_string_arg(tag, 'tag_id')}",
                f"   Name: {get_string_arg(tag, 'name')}",
                f"   Value: {get_string_arg(tag, 'value')}",
                f"   Weight: {weight:.2f}",
                f"   Active: {str(active).lower()}",
                f"   Metadata: {get_string_arg(tag, 'metadata')}",
                "",
            ]
        )
        logger.debug("Processed tag", index=i, tag_id=get_string_arg(tag, "tag_id"), weight=weight)

    lines.append("Tag processing completed successfully!")
    return "\n".join(lines) + "\n"


# Functions


def custom_function(context: Context, args: Args) -> str:
    _ = context, args
    return "Custom function executed successfully"
