"""Shared test fixtures and helpers."""

from typing import Any
from unittest.mock import AsyncMock, MagicMock

import httpx

from daynight_theme.core.config import Config, LocationConfig, NetworkConfig, ThemeConfig


def _create_test_config(
    latitude: float | None = 40.7,
    longitude: float | None = -74.0,
    public_ip: str | None = None,
    utc_offset_hours: float | None = -4,
    light: str | None = "light-theme",
    dark: str | None = "dark-theme",
) -> Config:
    """Create a minimal test config (New York, EDT by default)."""
    return Config(
        location=LocationConfig(
            latitude=latitude,
            longitude=longitude,
            public_ip=public_ip,
            utc_offset_hours=utc_offset_hours,
        ),
        theme=ThemeConfig(light=light, dark=dark),
        network=NetworkConfig(
            ip_service_url="https://ip.example.com",
            geolocation_url="https://geo.example.com/json",
            timeout_seconds=5,
        ),
    )


def make_response(
    status_code: int = 200,
    text: str = "",
    json_data: Any = None,
    json_error: Exception | None = None,
) -> MagicMock:
    """Create a mock httpx response."""
    response = MagicMock()
    response.status_code = status_code
    response.is_success = 200 <= status_code < 300
    response.text = text
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = json_data
    return response


def make_client(*responses: MagicMock | Exception) -> AsyncMock:
    """Create a mock httpx.AsyncClient returning responses in order."""
    mock_client = AsyncMock()
    mock_client.get = AsyncMock(side_effect=list(responses))
    mock_client.__aenter__ = AsyncMock(return_value=mock_client)
    mock_client.__aexit__ = AsyncMock(return_value=None)
    return mock_client


def connect_error(url: str = "https://ip.example.com") -> httpx.ConnectError:
    """Create an httpx connection error."""
    return httpx.ConnectError("connection refused", request=httpx.Request("GET", url))
