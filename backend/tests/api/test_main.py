"""Tests for application wiring: lifespan and CORS."""
from unittest.mock import AsyncMock, patch

from httpx import AsyncClient


async def test_lifespan_configures_logging_and_disposes_engine(client: AsyncClient) -> None:  # noqa: ARG001
    """Startup configures logging; shutdown releases the connection pool."""
    from api.main import app, lifespan

    with (
        patch("api.main.configure_logging") as mock_configure,
        patch("api.main.dispose_engine", new_callable=AsyncMock) as mock_dispose,
    ):
        async with lifespan(app):
            mock_configure.assert_called_once()
            mock_dispose.assert_not_awaited()

    mock_dispose.assert_awaited_once()


async def test_cors_allows_configured_origin(client: AsyncClient) -> None:
    """Default CORS origin is allowed."""
    response = await client.options(
        "/bookmarks",
        headers={
            "Origin": "http://localhost:5173",
            "Access-Control-Request-Method": "POST",
        },
    )
    assert response.headers.get("access-control-allow-origin") == "http://localhost:5173"
