"""Tests for the server entry point."""

import socket
from unittest.mock import MagicMock

import pytest

from listing_scraper import main
from listing_scraper.config import settings


@pytest.fixture()
def uvicorn_run(monkeypatch):
    mock = MagicMock()
    monkeypatch.setattr(main.uvicorn, "run", mock)
    return mock


class TestRun:
    def test_refuses_when_port_in_use(self, monkeypatch, uvicorn_run, capsys):
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as holder:
            holder.bind(("127.0.0.1", 0))
            holder.listen()
            port = holder.getsockname()[1]
            monkeypatch.setattr(settings, "host", "127.0.0.1")
            monkeypatch.setattr(settings, "port", port)

            with pytest.raises(SystemExit) as exc_info:
                main.run()

        assert exc_info.value.code == 1
        assert f"port {port} is already in use" in capsys.readouterr().err
        uvicorn_run.assert_not_called()

    def test_serves_app_on_configured_port(self, monkeypatch, uvicorn_run):
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as spare:
            spare.bind(("127.0.0.1", 0))
            port = spare.getsockname()[1]
        monkeypatch.setattr(settings, "host", "127.0.0.1")
        monkeypatch.setattr(settings, "port", port)

        main.run()

        uvicorn_run.assert_called_once_with(main.app, host="127.0.0.1", port=port)

    def test_port_in_use_false_for_free_port(self):
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
            s.bind(("127.0.0.1", 0))
            port = s.getsockname()[1]
        assert main.port_in_use("127.0.0.1", port) is False
