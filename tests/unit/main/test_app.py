from __future__ import annotations

import pytest
from fastapi.middleware.cors import CORSMiddleware

from src.main import app as module_app
from src.main.app import create_app
from src.main.config import AppSettings
from src.presentation.middleware import RequestLoggingMiddleware


class _StubMongoDatabase:
    async def create_indexes(self) -> None:
        pass

    def close(self) -> None:
        pass


@pytest.mark.asyncio
async def test_create_app_initializes_lifespan(monkeypatch) -> None:
    monkeypatch.setattr(
        "src.main.container.MongoDatabase",
        lambda *args, **kwargs: _StubMongoDatabase(),
    )

    app = create_app()
    assert app.title

    async with app.router.lifespan_context(app):
        assert app.state.container is not None

    # Ensure module-level app is instantiated
    assert isinstance(module_app.app, type(app))


def test_create_app_registers_routes_and_middleware(monkeypatch) -> None:
    monkeypatch.setenv("CORS_ALLOWED_ORIGINS", "http://localhost:5173")

    app = create_app(AppSettings())

    paths = {route.path for route in app.routes}
    assert "/api/weather" in paths
    assert "/api/energy-generation-records/solar-unit/{serial_number}" in paths
    assert "/health" in paths
    assert "/info" not in paths

    middleware = {entry.cls: entry for entry in app.user_middleware}
    assert RequestLoggingMiddleware in middleware
    cors_options = middleware[CORSMiddleware].kwargs
    assert cors_options["allow_origins"] == ["http://localhost:5173"]
    assert cors_options["allow_credentials"] is True


def test_main_runs_uvicorn(monkeypatch) -> None:
    calls = {}

    def _run(target, **kwargs):
        calls["target"] = target
        calls.update(kwargs)

    monkeypatch.setattr("src.main.app.uvicorn.run", _run)

    module_app.main()

    assert calls["target"] == "src.main.app:app"
    assert calls["port"] == module_app.settings.ge.port
