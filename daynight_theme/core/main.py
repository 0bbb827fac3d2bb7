"""Main entry point: print the theme for the current time of day."""

import argparse
import asyncio
import sys
from datetime import date, datetime, time, timedelta, timezone

from pydantic import ValidationError

from ..location.resolver import resolve_location
from ..sun.day_night import get_theme_choice, seconds_until_next_change
from ..sun.solar import get_sun_times
from .config import Config, format_validation_errors, load_config, validate_config
from .debug import _is_debug_mode, debug_print
from .errors import ConfigurationIncomplete, DayNightThemeError, SolarComputationError


def apply_overrides(config: Config, args: argparse.Namespace) -> Config:
    """Apply command-line values on top of the loaded configuration.

    The merged result is validated again so overrides obey the same rules as
    the file.
    """
    data = config.model_dump()
    overrides = {
        ("location", "latitude"): args.latitude,
        ("location", "longitude"): args.longitude,
        ("location", "public_ip"): args.ip,
        ("theme", "light"): args.light,
        ("theme", "dark"): args.dark,
    }
    for (section, key), value in overrides.items():
        if value is not None:
            data[section][key] = value

    try:
        return validate_config(data)
    except ValidationError as e:
        print(format_validation_errors(e), file=sys.stderr)
        raise


def _has_overrides(args: argparse.Namespace) -> bool:
    return any(
        value is not None
        for value in (args.latitude, args.longitude, args.ip, args.light, args.dark)
    )


def _load_base_config(args: argparse.Namespace) -> Config:
    """Load the config file, or start from defaults when flags stand in for it.

    A missing default config file is tolerated only when command-line
    overrides were given. An explicit --config path must exist.
    """
    try:
        return load_config(args.config)
    except FileNotFoundError:
        if args.config is None and _has_overrides(args):
            debug_print("No config file found, using command-line values only")
            return Config()
        raise


def _local_now(config: Config, on_date: date | None, at_time: time | None) -> datetime:
    """Current local datetime, with optional date/time replacements."""
    if config.location.utc_offset_hours is not None:
        tz = timezone(timedelta(hours=config.location.utc_offset_hours))
        now = datetime.now(tz)
    else:
        now = datetime.now()
    if on_date is not None:
        now = now.replace(year=on_date.year, month=on_date.month, day=on_date.day)
    if at_time is not None:
        now = now.replace(hour=at_time.hour, minute=at_time.minute, second=0, microsecond=0)
    return now


def _debug_sun_summary(config: Config, now: datetime) -> None:
    coordinates = config.location.coordinates
    if coordinates is None:
        return
    utc_offset = (
        timedelta(hours=config.location.utc_offset_hours)
        if config.location.utc_offset_hours is not None
        else None
    )
    try:
        wait = seconds_until_next_change(
            coordinates.latitude, coordinates.longitude, now, utc_offset=utc_offset
        )
        offset = utc_offset if utc_offset is not None else now.astimezone().utcoffset()
        times = get_sun_times(
            coordinates.latitude, coordinates.longitude, now.date(), offset or timedelta(0)
        )
    except SolarComputationError as e:
        debug_print(f"  Sun times unavailable: {e}")
        return
    debug_print(f"  Sunrise: {times.sunrise:.2f}h, sunset: {times.sunset:.2f}h")
    debug_print(f"  Next change in {wait // 3600}h{(wait % 3600) // 60:02d}m")


async def run(args: argparse.Namespace) -> str:
    """Run one invocation and return the chosen theme identifier.

    Raises:
        FileNotFoundError: If the config file does not exist
        ValidationError: If the configuration is invalid
        DayNightThemeError: If the location or theme cannot be determined
    """
    config = apply_overrides(_load_base_config(args), args)

    # Fail before any request leaves the machine
    if not config.theme.light or not config.theme.dark:
        raise ConfigurationIncomplete("Both theme.light and theme.dark must be configured")

    coordinates = await resolve_location(
        config.location.latitude,
        config.location.longitude,
        config.location.public_ip,
        ip_service_url=config.network.ip_service_url,
        geolocation_url=config.network.geolocation_url,
        timeout_seconds=config.network.timeout_seconds,
    )
    config = config.with_location(coordinates)

    now = _local_now(config, args.date, args.time)
    debug_print(f"Location: {coordinates.latitude}, {coordinates.longitude}")
    debug_print(f"Local time: {now.isoformat(timespec='minutes')}")

    choice = get_theme_choice(config, now)
    if _is_debug_mode():
        _debug_sun_summary(config, now)
    return choice


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line parser."""
    parser = argparse.ArgumentParser(
        description="Print the light or dark theme depending on whether the sun is up"
    )
    parser.add_argument(
        "--config",
        "-c",
        type=str,
        default=None,
        help="Path to configuration file (overrides CONFIG_PATH environment variable)",
    )
    parser.add_argument("--latitude", type=float, default=None, help="Latitude in degrees")
    parser.add_argument("--longitude", type=float, default=None, help="Longitude in degrees")
    parser.add_argument("--ip", type=str, default=None, help="Public IP to geolocate")
    parser.add_argument("--light", type=str, default=None, help="Theme used during the day")
    parser.add_argument("--dark", type=str, default=None, help="Theme used during the night")
    parser.add_argument(
        "--date",
        type=date.fromisoformat,
        default=None,
        help="Local date to evaluate (YYYY-MM-DD, default today)",
    )
    parser.add_argument(
        "--time",
        type=time.fromisoformat,
        default=None,
        help="Local time to evaluate (HH:MM, default now)",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    try:
        choice = asyncio.run(run(args))
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except ValidationError:
        # Details were already printed while validating
        print("Error: invalid configuration", file=sys.stderr)
        sys.exit(1)
    except DayNightThemeError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    print(choice)


if __name__ == "__main__":
    main()
