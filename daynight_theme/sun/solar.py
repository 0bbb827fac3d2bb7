"""Sunrise/sunset calculation in local civil time.

suncalc works in UTC. Results are shifted by the caller's UTC offset and
expressed as fractional hours of the local day.
"""

from dataclasses import dataclass
from datetime import UTC, date, datetime, time, timedelta

from suncalc import get_times  # type: ignore[import-untyped]

from ..core.errors import SolarComputationError


@dataclass(frozen=True)
class SolarTimes:
    """Sunrise and sunset as fractional local hours, each in [0, 24)."""

    sunrise: float
    sunset: float


def _to_local_hours(value: object, utc_offset: timedelta, name: str) -> float:
    # suncalc yields NaN/NaT when the sun never crosses the horizon
    if not isinstance(value, datetime) or value != value:
        raise SolarComputationError(f"No {name} for this date and location")
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    local = value.astimezone(UTC) + utc_offset
    return local.hour + local.minute / 60 + local.second / 3600


def get_sun_times(
    latitude: float, longitude: float, day: date, utc_offset: timedelta
) -> SolarTimes:
    """Get sunrise and sunset for a local date and location.

    Args:
        latitude: Latitude in degrees
        longitude: Longitude in degrees
        day: Local calendar date
        utc_offset: Local civil time offset from UTC

    Returns:
        SolarTimes in fractional local hours

    Raises:
        SolarComputationError: On out-of-range input, or when the formula
            cannot produce a sunrise/sunset (polar day or night)
    """
    if not isinstance(day, date):
        raise SolarComputationError(f"Invalid date: {day!r}")
    if not -90 <= latitude <= 90:
        raise SolarComputationError(f"Latitude out of range: {latitude}")
    if not -180 <= longitude <= 180:
        raise SolarComputationError(f"Longitude out of range: {longitude}")

    # Local noon picks the solar day suncalc computes events for
    local_noon = datetime.combine(day, time(12, 0), tzinfo=UTC) - utc_offset
    try:
        times = get_times(local_noon, longitude, latitude)
    except (ValueError, OverflowError) as e:
        raise SolarComputationError(f"Sun calculation failed: {e}") from e

    return SolarTimes(
        sunrise=_to_local_hours(times["sunrise"], utc_offset, "sunrise"),
        sunset=_to_local_hours(times["sunset"], utc_offset, "sunset"),
    )
