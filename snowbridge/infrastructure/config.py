"""
Configuration Module

Architectural Intent:
- Centralized configuration loading from a JSON file
- Provides typed access to the ServiceNow connection and adapter settings
- Falls back to sensible defaults when config file is absent
- Environment variables override file-based config

Design Decisions:
- Config is a frozen dataclass for immutability after load
- Nested config sections map to sub-dataclasses
- Credentials are never included in repr output
"""

from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional
import dataclasses
import json
import logging
import os

from snowbridge.domain.exceptions import ConfigurationError
from snowbridge.domain.value_objects.connection_config import ConnectionConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ServiceNowConfig:
    """ServiceNow instance configuration."""
    url: str = ""
    username: str = ""
    password: str = field(default="", repr=False)
    table: str = "change_request"
    legacy_status_match: bool = False

    def to_connection_config(self) -> ConnectionConfig:
        if not self.url:
            raise ConfigurationError("servicenow.url is not configured")
        return ConnectionConfig(
            url=self.url,
            username=self.username,
            password=self.password,
            table=self.table,
        )


@dataclass(frozen=True)
class AdapterConfig:
    """Adapter instance configuration."""
    id: str = "servicenow-change"


@dataclass(frozen=True)
class HttpConfig:
    """HTTP transport configuration."""
    timeout: float = 30.0


@dataclass(frozen=True)
class TelemetryConfig:
    """OpenTelemetry configuration."""
    endpoint: str = ""
    insecure: bool = False


@dataclass(frozen=True)
class SnowbridgeConfig:
    """Root configuration for snowbridge."""
    servicenow: ServiceNowConfig = field(default_factory=ServiceNowConfig)
    adapter: AdapterConfig = field(default_factory=AdapterConfig)
    http: HttpConfig = field(default_factory=HttpConfig)
    telemetry: TelemetryConfig = field(default_factory=TelemetryConfig)
    log_level: str = "WARNING"
    log_json: bool = False


def _env_override(data: dict, prefix: str = "SNOWBRIDGE") -> dict:
    """Override config values with environment variables.

    Environment variables follow the pattern SNOWBRIDGE_SECTION_KEY.
    For example: SNOWBRIDGE_SERVICENOW_URL=https://dev1.service-now.com
    """
    sections = {f.name for f in dataclasses.fields(SnowbridgeConfig)}
    for key, value in os.environ.items():
        if not key.startswith(f"{prefix}_"):
            continue
        name = key[len(prefix) + 1:].lower()
        parts = name.split("_", 1)
        if len(parts) == 2 and parts[0] in sections and name not in sections:
            section, field_name = parts
            if not isinstance(data.get(section), dict):
                data[section] = {}
            data[section][field_name] = value
        else:
            data[name] = value
    return data


def _parse_config_file(path: Path) -> dict:
    """Parse a JSON config file. Returns empty dict on failure."""
    try:
        with open(path) as f:
            data = json.load(f)
    except FileNotFoundError:
        logger.debug("Config file not found: %s", path)
        return {}
    except json.JSONDecodeError as e:
        logger.warning("Invalid config file %s: %s", path, e)
        return {}
    if not isinstance(data, dict):
        logger.warning("Config file %s does not contain an object", path)
        return {}
    return data


def _to_bool(value) -> bool:
    if isinstance(value, str):
        return value.lower() in ("true", "1", "yes")
    return bool(value)


def _build_sub_config(cls, data: dict):
    """Build a sub-config dataclass from a dict, ignoring unknown keys."""
    valid_fields = {f.name for f in dataclasses.fields(cls)}
    filtered = {k: v for k, v in data.items() if k in valid_fields}

    # Convert string numbers to int/float/bool
    for f in dataclasses.fields(cls):
        if f.name in filtered and isinstance(filtered[f.name], str):
            if f.type == "int":
                filtered[f.name] = int(filtered[f.name])
            elif f.type == "float":
                filtered[f.name] = float(filtered[f.name])
            elif f.type == "bool":
                filtered[f.name] = _to_bool(filtered[f.name])

    return cls(**filtered)


def load_config(
    path: Optional[str] = None,
    env_prefix: str = "SNOWBRIDGE",
) -> SnowbridgeConfig:
    """Load configuration from file and environment variables.

    Priority (highest to lowest):
    1. Environment variables (SNOWBRIDGE_SECTION_KEY)
    2. Config file values
    3. Defaults

    Args:
        path: Path to config file (JSON). Defaults to snowbridge.json in CWD.
        env_prefix: Environment variable prefix. Defaults to SNOWBRIDGE.
    """
    config_path = Path(path) if path else Path("snowbridge.json")
    data = _parse_config_file(config_path)
    data = _env_override(data, env_prefix)

    return SnowbridgeConfig(
        servicenow=_build_sub_config(ServiceNowConfig, data.get("servicenow", {})),
        adapter=_build_sub_config(AdapterConfig, data.get("adapter", {})),
        http=_build_sub_config(HttpConfig, data.get("http", {})),
        telemetry=_build_sub_config(TelemetryConfig, data.get("telemetry", {})),
        log_level=data.get("log_level", "WARNING"),
        log_json=_to_bool(data.get("log_json", False)),
    )
