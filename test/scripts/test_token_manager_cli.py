"""Tests for the token manager CLI"""

import sys
from pathlib import Path

ROOT = Path(__file__).parent.parent.parent
sys.path.insert(0, str(ROOT))
sys.path.insert(0, str(ROOT / "scripts"))

import pytest

import token_manager
from taskmaster.auth import OAuthService
from taskmaster.config import Settings
from taskmaster.storage import create_store


@pytest.fixture
def data_dir(tmp_path, monkeypatch):
    monkeypatch.setenv("TASKMASTER_ENCRYPTION_KEY", "cli-test-key")
    return tmp_path


def _service(data_dir) -> OAuthService:
    settings = Settings(data_dir=data_dir, encryption_key="cli-test-key")
    return OAuthService(settings, create_store(settings))


def test_store_then_status_then_revoke(data_dir):
    assert token_manager.main(["--data-dir", str(data_dir), "store", "--token", "pk_cli"]) == 0
    assert _service(data_dir).get_stored_token() == "pk_cli"

    assert token_manager.main(["--data-dir", str(data_dir), "status"]) == 0

    assert token_manager.main(["--data-dir", str(data_dir), "revoke"]) == 0
    assert _service(data_dir).get_stored_token() is None


def test_store_for_named_user_also_sets_default(data_dir):
    args = ["--data-dir", str(data_dir), "--user", "4242", "store", "--token", "pk_user"]
    assert token_manager.main(args) == 0

    service = _service(data_dir)
    assert service.get_stored_token("4242") == "pk_user"
    assert service.get_stored_token() == "pk_user"


def test_status_without_token(data_dir):
    assert token_manager.main(["--data-dir", str(data_dir), "status"]) == 0


def test_no_command_prints_help(data_dir):
    assert token_manager.main([]) == 1
