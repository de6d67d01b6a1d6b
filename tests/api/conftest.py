"""API test fixtures: FastAPI test client with the agent runtime overridden.

Invariants:
    - get_run_query dependency overridden per test with a MockAgentRuntime
    - Settings cache cleared around each test so env overrides apply

Design Decisions:
    - httpx ASGITransport: in-process, streams the full SSE body
"""

import pytest
from httpx import ASGITransport, AsyncClient

from shopping_agent.api.routes.agent_stream import get_run_query
from shopping_agent.config import get_settings
from shopping_agent.main import app


@pytest.fixture
def set_runtime():
    """Install a run_query fake for the stream route."""
    def _set(runtime):
        app.dependency_overrides[get_run_query] = lambda: runtime
        return runtime
    return _set


@pytest.fixture
async def client():
    get_settings.cache_clear()
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
    app.dependency_overrides.clear()
    get_settings.cache_clear()
