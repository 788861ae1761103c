from __future__ import annotations

from core.config import DEFAULT_BASE_URL, Settings
from main import parse_args


def test_settings_defaults_when_environment_is_empty():
    settings = Settings.from_env({})
    assert settings == Settings(api_key="", base_url=DEFAULT_BASE_URL, log_level="INFO")


def test_settings_read_from_environment():
    settings = Settings.from_env(
        {
            "INTERZOID_API_KEY": " abc123 ",
            "INTERZOID_BASE_URL": "https://staging.interzoid.test",
            "INTERZOID_LOG_LEVEL": "debug",
        }
    )
    assert settings.api_key == "abc123"
    assert settings.base_url == "https://staging.interzoid.test"
    assert settings.log_level == "DEBUG"


def test_cli_defaults():
    args = parse_args([])
    assert (args.transport, args.port, args.host) == ("stdio", 8080, "0.0.0.0")


def test_cli_http_transport():
    args = parse_args(["--transport", "http", "--port", "9000"])
    assert args.transport == "http"
    assert args.port == 9000
