"""Error types raised while choosing a theme.

None of these are retried. They propagate to the caller, which reports them
and aborts the invocation without selecting a theme.
"""


class DayNightThemeError(Exception):
    """Base class for all daynight-theme errors."""


class ConfigurationIncomplete(DayNightThemeError):
    """Light/dark choices (or coordinates) have not been configured."""


class NetworkError(DayNightThemeError):
    """An HTTP request failed, timed out or returned a non-success status."""


class GeolocationError(DayNightThemeError):
    """The geolocation response did not contain usable coordinates."""


class SolarComputationError(DayNightThemeError):
    """Sunrise/sunset could not be computed for the given input."""
