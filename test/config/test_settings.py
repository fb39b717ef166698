"""Tests for settings, configuration validation and error mapping"""

import io
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

import pytest

from taskmaster.config import DEFAULT_ENCRYPTION_KEY, Settings
from taskmaster.config_docs import get_config_summary, log_config_summary, validate_configuration
from taskmaster.errors import map_error_for_mcp
from taskmaster.exceptions import (
    ConfigurationError,
    MissingCredentialError,
    TokenDecryptionError,
    UpstreamError,
)
from taskmaster.logger import ConsoleLogger


class TestSettingsFromEnv:
    def test_defaults(self):
        settings = Settings.from_env({})
        assert settings.api_url == "https://api.clickup.com/api/v2"
        assert settings.default_list_id == "176135389"
        assert settings.default_team_id == "8472392"
        assert settings.api_token is None
        assert settings.oauth_configured is False
        assert settings.request_timeout == 30.0
        assert settings.kv_store_path == Path("data") / "oauth" / "kv.json"

    def test_environment_values(self):
        settings = Settings.from_env(
            {
                "TASKMASTER_API_URL": "https://proxy.local/api/v2/",
                "TASKMASTER_DEFAULT_LIST_ID": "L1",
                "CLICKUP_API_TOKEN": " pk_abc ",
                "CLICKUP_CLIENT_ID": "id",
                "CLICKUP_CLIENT_SECRET": "secret",
                "TASKMASTER_REQUEST_TIMEOUT": "2.5",
                "TASKMASTER_DATA_DIR": "/var/lib/taskmaster",
            }
        )
        assert settings.api_url == "https://proxy.local/api/v2"
        assert settings.default_list_id == "L1"
        assert settings.api_token == "pk_abc"
        assert settings.oauth_configured is True
        assert settings.request_timeout == 2.5
        assert settings.kv_store_path == Path("/var/lib/taskmaster/oauth/kv.json")

    def test_blank_values_are_unset(self):
        settings = Settings.from_env({"CLICKUP_API_TOKEN": "  ", "TASKMASTER_DEFAULT_LIST_ID": ""})
        assert settings.api_token is None
        assert settings.default_list_id == "176135389"

    def test_overrides_win(self):
        settings = Settings.from_env({"TASKMASTER_PUBLIC_URL": "https://a"}, public_url="https://b")
        assert settings.public_url == "https://b"

    def test_authorization_header(self):
        assert Settings().authorization_header("tok") == "Bearer tok"
        assert Settings(auth_scheme="").authorization_header("tok") == "tok"


class TestValidateConfiguration:
    def test_defaults_are_valid(self):
        assert validate_configuration(Settings()) == (True, [])

    def test_half_configured_oauth(self):
        is_valid, errors = validate_configuration(Settings(client_id="id"))
        assert is_valid is False
        assert any("set together" in e for e in errors)

    def test_default_key_with_oauth(self):
        settings = Settings(client_id="id", client_secret="s", encryption_key=DEFAULT_ENCRYPTION_KEY)
        is_valid, errors = validate_configuration(settings)
        assert is_valid is False
        assert any("TASKMASTER_ENCRYPTION_KEY" in e for e in errors)

    def test_summary_hides_secrets(self):
        summary = get_config_summary(Settings(api_token="pk_secret", client_secret="cs"))
        assert summary["api_token_set"] is True
        assert "pk_secret" not in str(summary)
        assert "cs" not in summary.values()

    def test_summary_is_logged_without_secrets(self):
        stream = io.StringIO()
        settings = Settings(api_token="pk_secret", default_list_id="L9")

        log_config_summary(settings, ConsoleLogger(name="test", stream=stream))

        line = stream.getvalue()
        assert "Effective configuration" in line
        assert "default_list_id=L9" in line
        assert "api_token_set=True" in line
        assert "pk_secret" not in line


class TestErrorMapping:
    @pytest.mark.parametrize(
        "status,fragment",
        [(401, "Reconnect"), (404, "does not exist"), (429, "rate limit"), (None, "could not be reached")],
    )
    def test_upstream_recovery_depends_on_status(self, status, fragment):
        mapped = map_error_for_mcp(UpstreamError(status, "body"))
        assert mapped["error_code"] == "UPSTREAM_ERROR"
        assert fragment in mapped["recovery_strategy"]
        assert mapped["details"] == {"status_code": status, "body": "body"}

    def test_missing_credential(self):
        mapped = map_error_for_mcp(MissingCredentialError())
        assert mapped["error_code"] == "AUTH_REQUIRED"
        assert "CLICKUP_API_TOKEN" in mapped["recovery_strategy"]
        assert mapped["details"] is None

    def test_other_codes(self):
        assert map_error_for_mcp(ConfigurationError("x"))["error_code"] == "CONFIGURATION_ERROR"
        assert map_error_for_mcp(TokenDecryptionError("x"))["error_code"] == "DECRYPTION_FAILED"
