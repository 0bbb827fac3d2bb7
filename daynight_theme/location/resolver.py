"""Location resolution from configuration or IP geolocation.

The fallback chain is: configured coordinates, then a configured public IP,
then the public IP reported by the IP lookup service. Each network step runs
only when the previous one did not already give an answer.
"""

from typing import Any, NamedTuple

import httpx

from ..core.debug import debug_print
from ..core.errors import GeolocationError, NetworkError

USER_AGENT = "daynight-theme/1.0 (sunrise/sunset theme switcher)"

DEFAULT_IP_SERVICE_URL = "https://api.ipify.org"
DEFAULT_GEOLOCATION_URL = "http://ip-api.com/json"
DEFAULT_TIMEOUT_SECONDS = 10.0


class Coordinates(NamedTuple):
    """Latitude/longitude pair in degrees."""

    latitude: float
    longitude: float


async def _get(url: str, timeout_seconds: float) -> httpx.Response:
    """GET a URL, mapping transport failures and error statuses to NetworkError."""
    debug_print(f"Location request: {url}")
    try:
        async with httpx.AsyncClient(timeout=timeout_seconds) as client:
            response = await client.get(url, headers={"User-Agent": USER_AGENT})
    except httpx.TimeoutException as e:
        raise NetworkError(f"Request to {url} timed out after {timeout_seconds}s") from e
    except httpx.HTTPError as e:
        raise NetworkError(f"Request to {url} failed: {e}") from e

    debug_print(f"Location response: HTTP {response.status_code}")
    if not response.is_success:
        raise NetworkError(f"Request to {url} failed: HTTP {response.status_code}")
    return response


async def fetch_public_address(
    ip_service_url: str = DEFAULT_IP_SERVICE_URL,
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
) -> str:
    """Ask the IP lookup service for our public address (plain text body)."""
    response = await _get(ip_service_url, timeout_seconds)
    address = response.text.strip()
    if not address:
        raise NetworkError(f"Empty response from {ip_service_url}")
    return address


def _parse_coordinate(data: dict[str, Any], key: str, limit: float) -> float:
    value = data.get(key)
    # bool is an int subclass but never a coordinate
    if isinstance(value, bool) or not isinstance(value, int | float):
        raise GeolocationError(f"Geolocation response has no numeric '{key}' field")
    if not -limit <= value <= limit:
        raise GeolocationError(f"Geolocation '{key}' out of range: {value}")
    return float(value)


async def fetch_coordinates(
    address: str,
    geolocation_url: str = DEFAULT_GEOLOCATION_URL,
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
) -> Coordinates:
    """Look up coordinates for a public address.

    Args:
        address: Public IP address to geolocate
        geolocation_url: Service base URL, the address is appended as a path segment
        timeout_seconds: Request timeout

    Returns:
        Coordinates parsed from the response's ``lat``/``lon`` fields

    Raises:
        NetworkError: If the request fails or returns a non-success status
        GeolocationError: If the body is not usable JSON or lacks coordinates
    """
    url = f"{geolocation_url.rstrip('/')}/{address}"
    response = await _get(url, timeout_seconds)

    try:
        data = response.json()
    except ValueError as e:
        raise GeolocationError(f"Geolocation response is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise GeolocationError("Geolocation response is not a JSON object")

    # ip-api.com style failure report
    if data.get("status") == "fail":
        message = data.get("message", "unknown error")
        raise GeolocationError(f"Geolocation lookup failed for {address}: {message}")

    return Coordinates(
        latitude=_parse_coordinate(data, "lat", 90),
        longitude=_parse_coordinate(data, "lon", 180),
    )


async def resolve_location(
    configured_lat: float | None,
    configured_lon: float | None,
    configured_ip: str | None,
    *,
    ip_service_url: str = DEFAULT_IP_SERVICE_URL,
    geolocation_url: str = DEFAULT_GEOLOCATION_URL,
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
) -> Coordinates:
    """Resolve the caller's coordinates.

    Configured coordinates are returned unchanged without touching the
    network. Otherwise the public address (configured, or fetched from the IP
    lookup service) is geolocated. The two requests run in sequence.

    Caching the result is up to the caller (see ``Config.with_location``).
    """
    if configured_lat is not None and configured_lon is not None:
        return Coordinates(configured_lat, configured_lon)

    address = configured_ip
    if not address:
        address = await fetch_public_address(ip_service_url, timeout_seconds)
        debug_print(f"Public address: {address}")

    coordinates = await fetch_coordinates(address, geolocation_url, timeout_seconds)
    debug_print(f"Resolved location: {coordinates.latitude}, {coordinates.longitude}")
    return coordinates
