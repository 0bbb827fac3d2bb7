"""Configuration loading and validation using Pydantic."""

import os
import sys
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from ..location.resolver import Coordinates


class LocationConfig(BaseModel):
    """Location configuration for sun calculation.

    Latitude and longitude are optional. When either is missing the location
    is resolved over the network from the public IP address (or from
    ``public_ip`` when set).
    """

    latitude: float | None = Field(None, ge=-90, le=90, description="Latitude in degrees")
    longitude: float | None = Field(None, ge=-180, le=180, description="Longitude in degrees")
    public_ip: str | None = Field(
        None, min_length=1, description="Public IP override (skips the IP lookup service)"
    )
    utc_offset_hours: float | None = Field(
        None,
        ge=-14,
        le=14,
        description="Local civil time offset from UTC in hours (defaults to system offset)",
    )

    @property
    def coordinates(self) -> Coordinates | None:
        """Configured coordinates, or None unless both are set."""
        if self.latitude is None or self.longitude is None:
            return None
        return Coordinates(self.latitude, self.longitude)


class ThemeConfig(BaseModel):
    """The two theme identifiers to choose between."""

    light: str | None = Field(None, min_length=1, description="Theme used while the sun is up")
    dark: str | None = Field(None, min_length=1, description="Theme used while the sun is down")


class NetworkConfig(BaseModel):
    """Location lookup service configuration."""

    ip_service_url: str = Field(
        "https://api.ipify.org", description="Service returning the public IP as plain text"
    )
    geolocation_url: str = Field(
        "http://ip-api.com/json",
        description="IP geolocation base URL (the address is appended as a path segment)",
    )
    timeout_seconds: float = Field(10, ge=1, le=60, description="Request timeout in seconds")

    @field_validator("ip_service_url", "geolocation_url")
    @classmethod
    def validate_http_url(cls, v: str) -> str:
        """Validate service URL scheme."""
        if not v.startswith(("http://", "https://")):
            raise ValueError("Service URL must start with http:// or https://")
        return v


class Config(BaseModel):
    """Root configuration model."""

    location: LocationConfig = Field(default_factory=LocationConfig)
    theme: ThemeConfig = Field(default_factory=ThemeConfig)
    network: NetworkConfig = Field(default_factory=NetworkConfig)

    def with_location(self, coordinates: Coordinates) -> "Config":
        """Return a copy of this config holding resolved coordinates.

        Later lookups in the same run then skip the network.
        """
        location = self.location.model_copy(
            update={"latitude": coordinates.latitude, "longitude": coordinates.longitude}
        )
        return self.model_copy(update={"location": location})


def format_validation_errors(error: ValidationError) -> str:
    """Format Pydantic validation errors into user-friendly messages.

    Args:
        error: Pydantic ValidationError instance

    Returns:
        Formatted error message string
    """
    lines = ["Configuration validation failed:"]
    for err in error.errors():
        field_path = " -> ".join(str(loc) for loc in err["loc"])
        error_msg = err.get("msg", "")

        if field_path:
            lines.append(f"  • {field_path}: {error_msg}")
        else:
            lines.append(f"  • {error_msg}")

    lines.append("")
    lines.append("See config.example.yaml for a complete example configuration")

    return "\n".join(lines)


def load_config(config_path: str | None = None) -> Config:
    """Load and validate configuration from YAML file.

    Args:
        config_path: Path to configuration file. If None, uses CONFIG_PATH env var or default.

    Returns:
        Validated Config instance

    Raises:
        FileNotFoundError: If config file does not exist
        ValidationError: If config validation fails (formatted error message is printed)
    """
    if config_path is None:
        config_path = os.getenv("CONFIG_PATH", "config.yaml")

    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)

        # An empty file is a valid config with every section defaulted
        return Config.model_validate(data or {})
    except ValidationError as e:
        print(format_validation_errors(e), file=sys.stderr)
        raise


def validate_config(config: dict) -> Config:
    """Validate configuration dictionary."""
    return Config.model_validate(config)
