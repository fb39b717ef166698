"""Tests for the server entrypoints"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from fastapi.testclient import TestClient

from taskmaster import main_mcp, main_web
from taskmaster.config import Settings
from taskmaster.storage import FileKeyValueStore


def test_mcp_parser_defaults(monkeypatch):
    monkeypatch.delenv("TASKMASTER_MCP_PORT", raising=False)
    args = main_mcp.build_parser().parse_args([])
    assert args.host == "0.0.0.0"
    assert args.port == 8010
    assert args.data_dir is None


def test_web_parser_reads_port_from_env(monkeypatch):
    monkeypatch.setenv("TASKMASTER_WEB_PORT", "9100")
    args = main_web.build_parser().parse_args(["--public-url", "https://tasks.example.com"])
    assert args.port == 9100
    assert args.public_url == "https://tasks.example.com"


def test_create_server_uses_file_store(tmp_path):
    server = main_web.create_server(Settings(data_dir=tmp_path))

    assert isinstance(server.oauth.store, FileKeyValueStore)
    assert server.oauth.store.path == tmp_path / "oauth" / "kv.json"
    assert TestClient(server.app).get("/oauth/status").json()["authenticated"] is False
