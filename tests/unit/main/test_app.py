from __future__ import annotations

import pytest

from src.main import app as module_app
from src.main.app import create_app


@pytest.mark.asyncio
async def test_create_app_initializes_lifespan() -> None:
    app = create_app()
    assert app.title

    paths = {route.path for route in app.routes}
    assert {"/countries", "/forecasts", "/forecasts/state", "/timeline"} <= paths
    assert {"/health", "/info"} <= paths

    async with app.router.lifespan_context(app):
        assert app.state.started_at is not None
        assert app.state.container is not None

    assert isinstance(module_app.app, type(app))
