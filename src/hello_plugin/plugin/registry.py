"""
Registry of the operations a plugin exposes to its host.
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

from ..errors import DuplicateOperationError, OperationNotFoundError
from ..logging import get_logger

logger = get_logger(__name__)

Resolver = Callable[[Mapping[str, Any], Mapping[str, Any]], Any]

QUERY = "query"
MUTATION = "mutation"
FUNCTION = "function"
REST = "rest"


@dataclass(frozen=True)
class RESTEndpoint:
    """A REST route served by the plugin."""

    method: str
    path: str
    description: str = ""
    schema: dict[str, str] = field(default_factory=dict)

    @property
    def key(self) -> str:
        return f"{self.method.upper()} {self.path}"


class PluginRegistry:
    """
    Central registry for plugin operations.

    Queries, mutations, custom functions and REST handlers all share the
    resolver signature ``resolver(context, args)``. Names are unique per kind.
    """

    def __init__(self, name: str, version: str):
        self.name = name
        self.version = version
        self._operations: dict[str, dict[str, Resolver]] = {
            QUERY: {},
            MUTATION: {},
            FUNCTION: {},
            REST: {},
        }
        self._endpoints: dict[str, RESTEndpoint] = {}

    def _register(self, kind: str, name: str, resolver: Resolver) -> None:
        logger.info("Registering operation", kind=kind, name=name)
        if name in self._operations[kind]:
            raise DuplicateOperationError(kind, name)
        self._operations[kind][name] = resolver

    def register_query(self, name: str, resolver: Resolver) -> None:
        """
        Register a GraphQL query resolver.

        Raises:
            DuplicateOperationError: If a query with the same name is already registered
        """
        self._register(QUERY, name, resolver)

    def register_mutation(self, name: str, resolver: Resolver) -> None:
        """Register a GraphQL mutation resolver."""
        self._register(MUTATION, name, resolver)

    def register_function(self, name: str, resolver: Resolver) -> None:
        """Register a custom function callable by the host."""
        self._register(FUNCTION, name, resolver)

    def register_rest_api(self, endpoint: RESTEndpoint, handler: Resolver) -> None:
        """Register a REST handler for ``endpoint``."""
        self._register(REST, endpoint.key, handler)
        self._endpoints[endpoint.key] = endpoint

    def get(self, kind: str, name: str) -> Resolver:
        """
        Look up an operation.

        Raises:
            OperationNotFoundError: If nothing is registered under ``name``
        """
        try:
            return self._operations[kind][name]
        except KeyError:
            raise OperationNotFoundError(kind, name) from None

    def get_query(self, name: str) -> Resolver:
        return self.get(QUERY, name)

    def get_mutation(self, name: str) -> Resolver:
        return self.get(MUTATION, name)

    def get_function(self, name: str) -> Resolver:
        return self.get(FUNCTION, name)

    def get_rest_handler(self, method: str, path: str) -> Resolver:
        return self.get(REST, f"{method.upper()} {path}")

    def resolve(
        self, kind: str, name: str, context: Mapping[str, Any], args: Mapping[str, Any]
    ) -> Any:
        """Run the operation ``name`` with the given context and arguments."""
        resolver = self.get(kind, name)
        logger.debug("Resolving operation", kind=kind, name=name, args=dict(args))
        return resolver(context, args)

    def rest_endpoints(self) -> list[RESTEndpoint]:
        """List registered REST endpoints in registration order."""
        return list(self._endpoints.values())

    def list_names(self, kind: str) -> list[str]:
        """List the registered operation names of one kind."""
        return list(self._operations[kind].keys())

    def describe(self) -> dict[str, Any]:
        """Summary of the plugin and everything it registered."""
        return {
            "name": self.name,
            "version": self.version,
            "queries": self.list_names(QUERY),
            "mutations": self.list_names(MUTATION),
            "functions": self.list_names(FUNCTION),
            "rest": [
                {"method": e.method, "path": e.path, "description": e.description}
                for e in self.rest_endpoints()
            ],
        }

    def __len__(self) -> int:
        """Return the number of registered operations of every kind."""
        return sum(len(operations) for operations in self._operations.values())

    def __contains__(self, name: str) -> bool:
        """Check if any operation kind has ``name`` registered."""
        return any(name in operations for operations in self._operations.values())
