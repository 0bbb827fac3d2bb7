"""Pick a light or dark theme from sunrise/sunset at your location."""

__version__ = "1.0.0"

from .core.config import Config, load_config, validate_config
from .core.debug import _is_debug_mode, debug_print
from .core.errors import (
    ConfigurationIncomplete,
    DayNightThemeError,
    GeolocationError,
    NetworkError,
    SolarComputationError,
)
from .core.main import main
from .location.resolver import (
    Coordinates,
    fetch_coordinates,
    fetch_public_address,
    resolve_location,
)
from .sun.day_night import decide, fractional_hour, get_theme_choice, seconds_until_next_change
from .sun.solar import SolarTimes, get_sun_times

__all__ = [
    "__version__",
    "Config",
    "load_config",
    "validate_config",
    "main",
    "debug_print",
    "_is_debug_mode",
    "DayNightThemeError",
    "ConfigurationIncomplete",
    "NetworkError",
    "GeolocationError",
    "SolarComputationError",
    "Coordinates",
    "resolve_location",
    "fetch_public_address",
    "fetch_coordinates",
    "SolarTimes",
    "get_sun_times",
    "decide",
    "fractional_hour",
    "seconds_until_next_change",
    "get_theme_choice",
]
