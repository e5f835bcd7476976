"""User-configurable settings loaded from config.yaml."""

from __future__ import annotations

import os
import re
from datetime import timedelta
from pathlib import Path
from typing import ClassVar, Literal

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator

from weatherbridge.imagery.timeline import TILE_BASE_URL
from weatherbridge.models import Location

# Load environment variables from .env file(s)
load_dotenv()


def _interpolate_env(content: str) -> str:
    return re.sub(r"\$\{(\w+)\}", lambda m: os.getenv(m.group(1), ""), content)


class BridgeSettings(BaseModel):
    """Credentials, endpoints and cache policy for the provider clients.

    Read once when the bridge is built; later edits to a settings object
    do not reach clients that already exist.
    """

    # Default search paths for configuration
    DEFAULT_CONFIG_PATHS: ClassVar[list[Path]] = [
        Path("config.yaml"),
        Path("~/.config/weatherbridge/config.yaml").expanduser(),
        Path("/etc/weatherbridge/config.yaml"),
    ]

    # Provider access
    api_key: str = Field(..., min_length=10, description="OpenWeather API key")
    relay_url: str = Field(
        "",
        description="Prefix prepended to every upstream URL (e.g. a CORS relay); "
        "empty for direct requests",
    )
    units: Literal["imperial", "metric", "standard"] = "imperial"
    exclude: list[str] = Field(
        default_factory=lambda: ["minutely"],
        description="One Call blocks to leave out of responses",
    )
    tile_base_url: str = Field(TILE_BASE_URL, description="Imagery tile host and version")

    # Cache and transport policy
    cache_ttl_minutes: float = Field(10, ge=0, description="Freshness of weather data")
    imagery_ttl_minutes: float = Field(5, ge=0, description="Freshness of the imagery manifest")
    timeout_seconds: float = Field(10.0, gt=0, description="Per-request timeout")

    # Locations for batch refreshes
    locations: list[Location] = Field(default_factory=list)

    # ---- validators ----
    @field_validator("relay_url")
    @classmethod
    def validate_relay(cls, v: str) -> str:
        v = v.strip()
        if v and not v.endswith("/"):
            v += "/"
        return v

    # ---- convenience methods ----
    @property
    def cache_ttl(self) -> timedelta:
        return timedelta(minutes=self.cache_ttl_minutes)

    @property
    def imagery_ttl(self) -> timedelta:
        return timedelta(minutes=self.imagery_ttl_minutes)

    @property
    def uses_relay(self) -> bool:
        """Whether requests are routed through a relay."""
        return bool(self.relay_url)

    @classmethod
    def load(cls, path: Path | None = None) -> BridgeSettings:
        """Load configuration from a YAML file.

        Args:
            path: Path to config file (optional, searches default locations if None)

        Returns:
            Validated BridgeSettings object

        Raises:
            FileNotFoundError: If no config file is found
            RuntimeError: If the config file cannot be parsed or is invalid
        """
        # Try to find config file
        if path is None:
            # Check environment variable first
            env_path = os.environ.get("WEATHERBRIDGE_CONFIG")
            if env_path:
                path = Path(env_path)
                if not path.exists():
                    raise FileNotFoundError(
                        f"Config file from WEATHERBRIDGE_CONFIG not found: {path}"
                    )
            else:
                # Try default paths
                for default_path in cls.DEFAULT_CONFIG_PATHS:
                    if default_path.exists():
                        path = default_path
                        break
                else:
                    raise FileNotFoundError(
                        "No configuration file found. Create config.yaml or set WEATHERBRIDGE_CONFIG."
                    )
        elif not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        # Load and parse config
        try:
            raw = _interpolate_env(path.read_text())
            data = yaml.safe_load(raw)
        except (OSError, yaml.YAMLError) as exc:
            raise RuntimeError(f"Unable to read config YAML: {exc}") from exc

        try:
            return cls.model_validate(data)
        except ValidationError as err:
            raise RuntimeError(f"Invalid configuration:\n{err}") from err
