"""
Filter, paginate and wrap pipeline used by the plugin resolvers
"""

from .filtering import Comparator, FilterSpec, contains, equals, filter_records
from .pagination import PageResult, paginate, slice_offset_limit
from .responses import (
    MutationEnvelope,
    OutputMode,
    ValidationError,
    list_response,
    mutation_envelope,
    paginated_envelope,
)

__all__ = [
    "Comparator",
    "FilterSpec",
    "MutationEnvelope",
    "OutputMode",
    "PageResult",
    "ValidationError",
    "contains",
    "equals",
    "filter_records",
    "list_response",
    "mutation_envelope",
    "paginate",
    "paginated_envelope",
    "slice_offset_limit",
]
