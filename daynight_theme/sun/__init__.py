"""Sun position and day/night theme decision."""

from .day_night import decide, fractional_hour, get_theme_choice, seconds_until_next_change
from .solar import SolarTimes, get_sun_times

__all__ = [
    "SolarTimes",
    "decide",
    "fractional_hour",
    "get_sun_times",
    "get_theme_choice",
    "seconds_until_next_change",
]
