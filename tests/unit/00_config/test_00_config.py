# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Tests for client configuration resolution."""

import pytest

from resend_client.config import (
    DEFAULT_BASE_URL,
    DEFAULT_RATE_LIMIT,
    DEFAULT_RATE_PERIOD,
    DEFAULT_TIMEOUT,
    load_client_config,
    parse_base_url,
    parse_rate_limit,
)
from resend_client.errors import ConfigurationError, ResendError


class TestLoadClientConfig:
    """Precedence and defaults."""

    def test_defaults_with_explicit_key(self):
        config = load_client_config(api_key="re_123", environ={})

        assert config.api_key == "re_123"
        assert parse_base_url(config.base_url) == parse_base_url(DEFAULT_BASE_URL)
        assert config.rate_limit == DEFAULT_RATE_LIMIT
        assert config.rate_period == DEFAULT_RATE_PERIOD
        assert config.timeout == DEFAULT_TIMEOUT

    def test_environment_values(self):
        environ = {
            "RESEND_API_KEY": "re_env",
            "RESEND_BASE_URL": "https://eu.example.com",
            "RESEND_RATE_LIMIT": "3",
            "RESEND_TIMEOUT": "5",
        }
        config = load_client_config(environ=environ)

        assert config.api_key == "re_env"
        assert parse_base_url(config.base_url).host == "eu.example.com"
        assert config.rate_limit == 3
        assert config.timeout == 5.0

    def test_explicit_arguments_override_environment(self):
        environ = {
            "RESEND_API_KEY": "re_env",
            "RESEND_BASE_URL": "https://eu.example.com",
            "RESEND_RATE_LIMIT": "3",
        }
        config = load_client_config(
            api_key="re_arg", base_url="https://us.example.com", rate_limit=7, environ=environ
        )

        assert config.api_key == "re_arg"
        assert parse_base_url(config.base_url).host == "us.example.com"
        assert config.rate_limit == 7

    def test_reads_process_environment(self, monkeypatch):
        monkeypatch.setenv("RESEND_API_KEY", "re_process")
        config = load_client_config()
        assert config.api_key == "re_process"

    def test_repr_masks_api_key(self):
        config = load_client_config(api_key="re_secret_value", environ={})
        assert "re_secret_value" not in repr(config)
        assert "re_*********" in repr(config)


class TestFatalMisconfiguration:
    """Missing or malformed settings fail at construction."""

    def test_missing_api_key(self):
        with pytest.raises(ConfigurationError, match="Missing API key"):
            load_client_config(environ={})

    def test_blank_api_key(self):
        with pytest.raises(ConfigurationError):
            load_client_config(api_key="   ", environ={})

    @pytest.mark.parametrize("url", ["not a url", "ftp://files.example.com", "https://", "/relative/path"])
    def test_malformed_base_url(self, url):
        with pytest.raises(ConfigurationError, match="Invalid base URL"):
            load_client_config(api_key="re_123", base_url=url, environ={})

    def test_malformed_base_url_from_environment(self):
        environ = {"RESEND_API_KEY": "re_123", "RESEND_BASE_URL": "nope"}
        with pytest.raises(ConfigurationError):
            load_client_config(environ=environ)

    @pytest.mark.parametrize("rate", ["abc", "-1", "1.5", "", "0"])
    def test_malformed_rate_from_environment(self, rate):
        environ = {"RESEND_API_KEY": "re_123", "RESEND_RATE_LIMIT": rate}
        with pytest.raises(ConfigurationError, match="Invalid rate limit"):
            load_client_config(environ=environ)

    @pytest.mark.parametrize("timeout", ["soon", "0", "-3"])
    def test_malformed_timeout(self, timeout):
        environ = {"RESEND_API_KEY": "re_123", "RESEND_TIMEOUT": timeout}
        with pytest.raises(ConfigurationError, match="Invalid timeout"):
            load_client_config(environ=environ)

    def test_non_positive_period(self):
        with pytest.raises(ConfigurationError, match="Invalid rate period"):
            load_client_config(api_key="re_123", rate_period=0, environ={})

    def test_configuration_error_is_not_a_call_error(self):
        assert not issubclass(ConfigurationError, ResendError)
        assert issubclass(ConfigurationError, ValueError)


class TestParseRateLimit:

    def test_accepts_integer_strings_with_whitespace(self):
        assert parse_rate_limit(" 12 ") == 12

    def test_accepts_int(self):
        assert parse_rate_limit(4) == 4

    def test_rejects_bool(self):
        with pytest.raises(ConfigurationError):
            parse_rate_limit(True)
