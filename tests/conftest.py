"""
Shared pytest fixtures and configuration for all tests.
"""

from collections.abc import Generator
from typing import Any

import pytest
from fastapi.testclient import TestClient


@pytest.fixture
def plugin_context() -> dict[str, Any]:
    """Host context as forwarded with a GraphQL or REST request."""
    return {
        "plugin_id": "hc-hello-world-plugin",
        "project_id": "project-42",
        "user_id": "user-7",
        "tenant_id": "tenant-1",
    }


@pytest.fixture
def client() -> Generator[TestClient, None, None]:
    """HTTP client bound to a freshly created application."""
    from hello_plugin.api.app import create_app

    with TestClient(create_app()) as test_client:
        yield test_client
