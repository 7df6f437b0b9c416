"""
Host request context handed to plugin resolvers
"""

from typing import Any

from fastapi import Request

from .config import settings
from .logging import get_request_id

# Headers through which the host forwards its request context
CONTEXT_HEADERS = {
    "plugin_id": "x-plugin-id",
    "project_id": "x-project-id",
    "user_id": "x-user-id",
    "tenant_id": "x-tenant-id",
    "session_id": "x-session-id",
    "application_id": "x-application-id",
}


def build_plugin_context(request: Request) -> dict[str, Any]:
    """Collect the host context passed to plugin resolvers.

    The plugin id falls back to the configured plugin name.
    """
    context: dict[str, Any] = {"plugin_id": settings.plugin_name}
    for key, header in CONTEXT_HEADERS.items():
        value = request.headers.get(header)
        if value:
            context[key] = value

    request_id = get_request_id()
    if request_id:
        context["request_id"] = request_id
    return context
