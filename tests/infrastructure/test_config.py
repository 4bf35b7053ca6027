"""Tests for configuration module."""

import json
import os
import pytest
from unittest.mock import patch

from snowbridge.domain.exceptions import ConfigurationError
from snowbridge.infrastructure.config import (
    AdapterConfig,
    HttpConfig,
    ServiceNowConfig,
    TelemetryConfig,
    load_config,
)


class TestDefaultConfig:
    def test_defaults(self):
        config = load_config(path="/nonexistent/snowbridge.json")
        assert config.log_level == "WARNING"
        assert config.log_json is False
        assert config.servicenow.table == "change_request"
        assert config.servicenow.legacy_status_match is False
        assert config.adapter.id == "servicenow-change"
        assert config.http.timeout == 30.0
        assert config.telemetry.endpoint == ""

    def test_all_sections_present(self):
        config = load_config(path="/nonexistent/snowbridge.json")
        assert isinstance(config.servicenow, ServiceNowConfig)
        assert isinstance(config.adapter, AdapterConfig)
        assert isinstance(config.http, HttpConfig)
        assert isinstance(config.telemetry, TelemetryConfig)


class TestFileConfig:
    def test_load_from_file(self, tmp_path):
        config_file = tmp_path / "snowbridge.json"
        config_file.write_text(json.dumps({
            "log_level": "DEBUG",
            "servicenow": {
                "url": "https://dev1.service-now.com",
                "username": "admin",
                "password": "pw",
                "table": "incident",
            },
            "adapter": {"id": "snow-prod"},
            "http": {"timeout": 5},
        }))

        config = load_config(path=str(config_file))
        assert config.log_level == "DEBUG"
        assert config.servicenow.url == "https://dev1.service-now.com"
        assert config.servicenow.table == "incident"
        assert config.adapter.id == "snow-prod"
        assert config.http.timeout == 5

    def test_invalid_json_returns_defaults(self, tmp_path):
        config_file = tmp_path / "snowbridge.json"
        config_file.write_text("not valid json{{{")

        config = load_config(path=str(config_file))
        assert config.servicenow.url == ""

    def test_non_object_returns_defaults(self, tmp_path):
        config_file = tmp_path / "snowbridge.json"
        config_file.write_text("[1, 2, 3]")

        config = load_config(path=str(config_file))
        assert config.adapter.id == "servicenow-change"

    def test_unknown_keys_ignored(self, tmp_path):
        config_file = tmp_path / "snowbridge.json"
        config_file.write_text(json.dumps({
            "servicenow": {"url": "https://x.service-now.com", "unknown_key": "ignored"},
        }))

        config = load_config(path=str(config_file))
        assert config.servicenow.url == "https://x.service-now.com"


class TestEnvOverride:
    def test_env_overrides_file(self, tmp_path):
        config_file = tmp_path / "snowbridge.json"
        config_file.write_text(json.dumps({"servicenow": {"table": "incident"}}))

        with patch.dict(os.environ, {"SNOWBRIDGE_SERVICENOW_TABLE": "change_request"}):
            config = load_config(path=str(config_file))

        assert config.servicenow.table == "change_request"

    def test_env_float_conversion(self):
        with patch.dict(os.environ, {"SNOWBRIDGE_HTTP_TIMEOUT": "2.5"}):
            config = load_config(path="/nonexistent/snowbridge.json")

        assert config.http.timeout == 2.5

    def test_env_bool_conversion(self):
        with patch.dict(os.environ, {"SNOWBRIDGE_SERVICENOW_LEGACY_STATUS_MATCH": "true"}):
            config = load_config(path="/nonexistent/snowbridge.json")

        assert config.servicenow.legacy_status_match is True

    def test_env_top_level_keys(self):
        with patch.dict(
            os.environ, {"SNOWBRIDGE_LOG_LEVEL": "INFO", "SNOWBRIDGE_LOG_JSON": "yes"}
        ):
            config = load_config(path="/nonexistent/snowbridge.json")

        assert config.log_level == "INFO"
        assert config.log_json is True

    def test_custom_prefix(self):
        with patch.dict(os.environ, {"MYAPP_ADAPTER_ID": "snow-2"}):
            config = load_config(path="/nonexistent/snowbridge.json", env_prefix="MYAPP")

        assert config.adapter.id == "snow-2"


class TestServiceNowConfig:
    def test_to_connection_config(self):
        config = ServiceNowConfig(
            url="https://dev1.service-now.com", username="u", password="p"
        )
        connection = config.to_connection_config()
        assert connection.url == "https://dev1.service-now.com"
        assert connection.auth == ("u", "p")
        assert connection.table == "change_request"

    def test_missing_url_raises(self):
        with pytest.raises(ConfigurationError):
            ServiceNowConfig().to_connection_config()

    def test_repr_hides_password(self):
        assert "hunter2" not in repr(ServiceNowConfig(password="hunter2"))


class TestConfigImmutability:
    def test_frozen(self):
        config = load_config(path="/nonexistent/snowbridge.json")
        with pytest.raises(AttributeError):
            config.log_level = "DEBUG"

    def test_sub_config_frozen(self):
        config = load_config(path="/nonexistent/snowbridge.json")
        with pytest.raises(AttributeError):
            config.servicenow.url = "https://other"
