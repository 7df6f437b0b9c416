"""
REST endpoints exposing the plugin's registered operations.

Handlers registered with ``register_rest_api`` are mounted as routes of this
router; custom functions are callable through ``/functions/{name}``.
"""

from typing import Any

from fastapi import APIRouter, Body, HTTPException, Request

from ...context import build_plugin_context
from ...errors import OperationNotFoundError
from ...logging import get_logger
from ...plugin import FUNCTION, PluginRegistry, RESTEndpoint

logger = get_logger(__name__)


async def _request_args(request: Request) -> dict[str, Any]:
    """Query parameters merged with a JSON object body, body taking precedence."""
    args: dict[str, Any] = dict(request.query_params)
    if request.method in ("POST", "PUT", "PATCH"):
        try:
            body = await request.json()
        except ValueError:
            body = None
        if isinstance(body, dict):
            args.update(body)
    return args


def _make_route(plugin: PluginRegistry, endpoint: RESTEndpoint):
    handler = plugin.get_rest_handler(endpoint.method, endpoint.path)

    async def route(request: Request) -> Any:
        args = await _request_args(request)
        logger.info("REST handler called", method=endpoint.method, path=endpoint.path)
        return handler(build_plugin_context(request), args)

    route.__name__ = f"rest_{endpoint.method.lower()}_{endpoint.path.strip('/').replace('-', '_')}"
    return route


def create_router(plugin: PluginRegistry) -> APIRouter:
    """Create a router serving every operation ``plugin`` registered for REST."""
    router = APIRouter()

    @router.get("/operations")
    async def list_operations() -> dict[str, Any]:  # pyright: ignore [reportUnusedFunction]
        """Describe the plugin and its registered operations."""
        return plugin.describe()

    @router.post("/functions/{name}")
    async def call_function(  # pyright: ignore [reportUnusedFunction]
        name: str, request: Request, args: dict[str, Any] | None = Body(default=None)
    ) -> dict[str, Any]:
        """Run a registered custom function."""
        try:
            result = plugin.resolve(FUNCTION, name, build_plugin_context(request), args or {})
        except OperationNotFoundError as e:
            logger.info("Unknown function requested", name=name)
            raise HTTPException(status_code=404, detail=str(e)) from e
        return {"result": result}

    for endpoint in plugin.rest_endpoints():
        router.add_api_route(
            endpoint.path,
            _make_route(plugin, endpoint),
            methods=[endpoint.method.upper()],
            summary=endpoint.description or None,
        )

    return router
