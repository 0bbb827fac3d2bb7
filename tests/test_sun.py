"""Tests for sun module.

Sun times are fractional hours in local civil time.
"""

from datetime import UTC, date, datetime, timedelta
from unittest.mock import patch

import pytest

from daynight_theme.core.errors import SolarComputationError
from daynight_theme.sun.solar import SolarTimes, get_sun_times

EDT = timedelta(hours=-4)


def test_get_sun_times_new_york_summer() -> None:
    """Test New York sunrise/sunset in August (EDT)."""
    times = get_sun_times(40.7, -74.0, date(2021, 8, 17), EDT)

    assert isinstance(times, SolarTimes)
    assert 5.5 < times.sunrise < 6.5
    assert 19.5 < times.sunset < 20.2


def test_get_sun_times_utc_summer_solstice() -> None:
    """Test sun times at LFAS on the summer solstice, in UTC."""
    times = get_sun_times(48.9267952, -0.1477169, date(2026, 6, 21), timedelta(0))

    assert 3.5 < times.sunrise < 4.5
    assert 19.5 < times.sunset < 20.5


def test_get_sun_times_southern_hemisphere_winter() -> None:
    """Test Sydney in June has a short day."""
    times = get_sun_times(-33.87, 151.21, date(2021, 6, 21), timedelta(hours=10))

    assert 6.5 < times.sunrise < 7.5
    assert 16.5 < times.sunset < 17.2
    assert times.sunset - times.sunrise < 10.5


def test_get_sun_times_is_pure() -> None:
    """Test identical inputs give identical results."""
    first = get_sun_times(40.7, -74.0, date(2021, 8, 17), EDT)
    second = get_sun_times(40.7, -74.0, date(2021, 8, 17), EDT)
    assert first == second


def test_get_sun_times_in_day_range() -> None:
    """Test results stay within [0, 24)."""
    for lat, lon in [(0.0, 0.0), (51.5, -0.1), (-45.0, 170.0), (35.0, -179.9)]:
        times = get_sun_times(lat, lon, date(2021, 3, 20), timedelta(0))
        assert 0 <= times.sunrise < 24
        assert 0 <= times.sunset < 24


def test_get_sun_times_passes_local_noon_in_utc() -> None:
    """Test suncalc is asked about local noon, in UTC."""
    mock_times = {
        "sunrise": datetime(2021, 8, 17, 10, 13, 0),
        "sunset": datetime(2021, 8, 17, 23, 48, 0),
    }

    with patch("daynight_theme.sun.solar.get_times", return_value=mock_times) as mock_get:
        times = get_sun_times(40.7, -74.0, date(2021, 8, 17), EDT)

    mock_get.assert_called_once_with(datetime(2021, 8, 17, 16, 0, tzinfo=UTC), -74.0, 40.7)
    assert times.sunrise == pytest.approx(6 + 13 / 60)
    assert times.sunset == pytest.approx(19.8)


def test_get_sun_times_sunset_after_utc_midnight() -> None:
    """Test a sunset on the next UTC day maps back to the local evening."""
    mock_times = {
        "sunrise": datetime(2021, 8, 17, 10, 0, 0, tzinfo=UTC),
        "sunset": datetime(2021, 8, 18, 0, 30, 0, tzinfo=UTC),
    }

    with patch("daynight_theme.sun.solar.get_times", return_value=mock_times):
        times = get_sun_times(40.7, -74.0, date(2021, 8, 17), EDT)

    assert times.sunrise == pytest.approx(6.0)
    assert times.sunset == pytest.approx(20.5)


def test_get_sun_times_polar_nan_raises() -> None:
    """Test a NaN event (no sunrise) raises SolarComputationError."""
    mock_times = {"sunrise": float("nan"), "sunset": float("nan")}

    with patch("daynight_theme.sun.solar.get_times", return_value=mock_times):
        with pytest.raises(SolarComputationError, match="No sunrise"):
            get_sun_times(78.2, 15.6, date(2021, 6, 21), timedelta(hours=2))


def test_get_sun_times_suncalc_error_raises() -> None:
    """Test suncalc failures are wrapped in SolarComputationError."""
    with patch(
        "daynight_theme.sun.solar.get_times",
        side_effect=ValueError("cannot convert float NaN to integer"),
    ):
        with pytest.raises(SolarComputationError, match="Sun calculation failed") as exc_info:
            get_sun_times(78.2, 15.6, date(2021, 12, 21), timedelta(hours=1))

    assert isinstance(exc_info.value.__cause__, ValueError)


@pytest.mark.parametrize(("lat", "lon"), [(91.0, 0.0), (-91.0, 0.0), (0.0, 181.0), (0.0, -180.5)])
def test_get_sun_times_rejects_out_of_range(lat: float, lon: float) -> None:
    """Test out-of-range coordinates raise SolarComputationError."""
    with pytest.raises(SolarComputationError, match="out of range"):
        get_sun_times(lat, lon, date(2021, 8, 17), timedelta(0))


def test_get_sun_times_rejects_invalid_date() -> None:
    """Test a non-date raises SolarComputationError."""
    with pytest.raises(SolarComputationError, match="Invalid date"):
        get_sun_times(40.7, -74.0, "2021-08-17", EDT)  # type: ignore[arg-type]
