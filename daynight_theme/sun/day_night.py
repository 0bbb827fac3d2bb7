"""Day/night theme decision with debug override."""

import os
from datetime import date, datetime, time, timedelta

from ..core.config import Config
from ..core.errors import ConfigurationIncomplete
from .solar import get_sun_times


def fractional_hour(local_time: time | datetime) -> float:
    """Convert a clock time to fractional hours (seconds are ignored)."""
    return local_time.hour + local_time.minute / 60


def _resolve_utc_offset(day: date, local_time: time, utc_offset: timedelta | None) -> timedelta:
    if utc_offset is not None:
        return utc_offset
    moment = datetime.combine(day, local_time)
    if moment.tzinfo is None:
        # Naive times are system local time
        moment = moment.astimezone()
    offset = moment.utcoffset()
    return offset if offset is not None else timedelta(0)


def decide(
    latitude: float,
    longitude: float,
    day: date,
    local_time: time,
    light_choice: str | None,
    dark_choice: str | None,
    utc_offset: timedelta | None = None,
) -> str:
    """Choose the light or dark identifier for a local date and time.

    Before sunrise or after sunset the dark choice wins. Exactly at sunrise
    or sunset the light choice wins.

    Args:
        latitude: Latitude in degrees
        longitude: Longitude in degrees
        day: Local calendar date
        local_time: Local clock time
        light_choice: Identifier returned while the sun is up
        dark_choice: Identifier returned while the sun is down
        utc_offset: Local offset from UTC. Defaults to the offset of an aware
            ``local_time``, else the system's local offset on ``day``.

    Returns:
        Either ``light_choice`` or ``dark_choice``

    Raises:
        ConfigurationIncomplete: If either choice is missing
        SolarComputationError: If sun times cannot be computed
    """
    if not light_choice or not dark_choice:
        raise ConfigurationIncomplete("Both light and dark theme choices must be set")

    offset = _resolve_utc_offset(day, local_time, utc_offset)
    times = get_sun_times(latitude, longitude, day, offset)
    h = fractional_hour(local_time)
    if h < times.sunrise or h > times.sunset:
        return dark_choice
    return light_choice


def seconds_until_next_change(
    latitude: float,
    longitude: float,
    now: datetime,
    utc_offset: timedelta | None = None,
) -> int:
    """Seconds from ``now`` until the next sunrise or sunset.

    After today's sunset the next change is tomorrow's sunrise.
    """
    day = now.date()
    offset = _resolve_utc_offset(day, now.timetz(), utc_offset)
    times = get_sun_times(latitude, longitude, day, offset)
    h = now.hour + now.minute / 60 + now.second / 3600

    if h < times.sunrise:
        target = times.sunrise
    elif h <= times.sunset:
        target = times.sunset
    else:
        tomorrow = get_sun_times(latitude, longitude, day + timedelta(days=1), offset)
        target = tomorrow.sunrise + 24

    return max(0, round((target - h) * 3600))


def get_theme_choice(config: Config, now: datetime) -> str:
    """Get the theme for ``now`` from configuration with optional debug override.

    Checks DEBUG_THEME_MODE env var first. If set to "light" or "dark",
    returns that choice. Otherwise uses the actual sun calculation on the
    configured (or previously resolved) coordinates.

    Args:
        config: Configuration holding theme choices and coordinates
        now: Local datetime (aware, or naive in system local time)

    Returns:
        The chosen theme identifier
    """
    light, dark = config.theme.light, config.theme.dark
    if not light or not dark:
        raise ConfigurationIncomplete("Both theme.light and theme.dark must be configured")

    debug_mode = os.getenv("DEBUG_THEME_MODE", "").lower()
    if debug_mode == "light":
        return light
    if debug_mode == "dark":
        return dark

    coordinates = config.location.coordinates
    if coordinates is None:
        raise ConfigurationIncomplete("Location must be resolved before choosing a theme")

    utc_offset = None
    if config.location.utc_offset_hours is not None:
        utc_offset = timedelta(hours=config.location.utc_offset_hours)

    return decide(
        coordinates.latitude,
        coordinates.longitude,
        now.date(),
        now.timetz(),
        light,
        dark,
        utc_offset=utc_offset,
    )
