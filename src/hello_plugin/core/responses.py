"""
Response shapes returned to the transport layer.

Three shapes are produced:

- list responses: the records themselves;
- paginated envelopes: a page of items (full records or a string summary of
  each) together with the paging metadata;
- mutation envelopes: success/failure status, the created record and any
  validation errors.
"""

from __future__ import annotations

import secrets
import time
from collections.abc import Callable, Iterable, Mapping, Sequence
from enum import Enum
from typing import Any

from pydantic import BaseModel, model_validator

from .pagination import PageResult

Record = Mapping[str, Any]

VALIDATION_ERROR_CODE = "VALIDATION_ERROR"


class OutputMode(Enum):
    """Shape of the items in a paginated envelope."""

    RECORDS = "records"
    STRINGS = "strings"


class ValidationError(BaseModel):
    """A validation failure reported inside a mutation envelope."""

    code: str
    message: str
    field: str
    details: list[str] = []


class MutationEnvelope(BaseModel):
    """Outcome of a mutation.

    A successful envelope carries ``data`` and no errors; a failed one carries
    errors and no data.
    """

    success: bool
    message: str
    data: dict[str, Any] | None = None
    errors: list[ValidationError] | None = None

    @model_validator(mode="after")
    def _check_outcome(self) -> MutationEnvelope:
        if self.success and (self.errors is not None or self.data is None):
            raise ValueError("successful mutation must carry data and no errors")
        if not self.success and (self.data is not None or not self.errors):
            raise ValueError("failed mutation must carry errors and no data")
        return self

    @classmethod
    def ok(cls, data: Record, message: str) -> MutationEnvelope:
        return cls(success=True, message=message, data=dict(data), errors=None)

    @classmethod
    def failure(cls, message: str, errors: Sequence[ValidationError]) -> MutationEnvelope:
        return cls(success=False, message=message, data=None, errors=list(errors))

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump()


def product_summary(record: Record) -> str:
    """One-line summary of a product: ``"<name> - <description> ($<price>)"``."""
    price = record.get("price", 0.0)
    if isinstance(price, bool) or not isinstance(price, (int, float)):
        price = 0.0
    return f"{record.get('name', '')} - {record.get('description', '')} (${price:.2f})"


def list_response(items: Iterable[Record]) -> list[dict[str, Any]]:
    """Return the records as a plain list of dicts."""
    return [dict(item) for item in items]


def paginated_envelope(
    result: PageResult[Record],
    mode: OutputMode = OutputMode.RECORDS,
    projection: Callable[[Record], str] = product_summary,
    message: str | None = None,
) -> dict[str, Any]:
    """Wrap a page of records with its metadata.

    In ``OutputMode.STRINGS`` every record is reduced to a string by
    ``projection``; in ``OutputMode.RECORDS`` records are passed through.
    """
    if mode is OutputMode.STRINGS:
        items: list[Any] = [projection(item) for item in result.items]
    else:
        items = list_response(result.items)

    return {
        "items": items,
        "totalCount": result.total_count,
        "pageSize": result.page_size,
        "currentPage": result.current_page,
        "totalPages": result.total_pages,
        "hasNextPage": result.has_next_page,
        "hasPreviousPage": result.has_previous_page,
        "success": True,
        "message": message if message is not None else f"Retrieved {len(items)} items",
    }


def generate_id(prefix: str) -> str:
    """Generate a record identifier unique per call.

    Combines the current Unix time with random bits, e.g. ``user_1718000000_9f3a1c2b``.
    """
    return f"{prefix}_{int(time.time())}_{secrets.token_hex(4)}"


def missing_fields(values: Record, required: Sequence[str]) -> list[str]:
    """Names of ``required`` fields that are absent or empty in ``values``."""
    return [name for name in required if not values.get(name)]


def mutation_envelope(
    values: Record,
    required: Sequence[str],
    build: Callable[[str], Record],
    *,
    id_prefix: str,
    success_message: str,
    failure_message: str,
    failure_details: Sequence[str] = (),
) -> MutationEnvelope:
    """Validate ``values`` and build the created record.

    ``build`` receives the newly generated identifier and returns the record
    to place in ``data``. It is only called when every required field is
    present.
    """
    missing = missing_fields(values, required)
    if missing:
        error = ValidationError(
            code=VALIDATION_ERROR_CODE,
            message="Missing required fields",
            field=",".join(missing),
            details=list(failure_details),
        )
        return MutationEnvelope.failure(failure_message, [error])

    return MutationEnvelope.ok(build(generate_id(id_prefix)), success_message)
