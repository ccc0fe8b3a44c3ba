"""Tests for main application entry point."""

from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from hello_api.listener import ListenerStartupError


def test_main_app_serves_the_three_routes():
    """Test that main module exports a configured app."""
    from hello_api.main import app

    with TestClient(app) as client:
        for path in ("/", "/health", "/api/version"):
            assert client.get(path).status_code == 200
        assert client.get("/missing").status_code == 404


def test_run_serves_with_process_settings():
    import hello_api.main as main_module

    with patch("hello_api.main.Listener") as mock_listener:
        main_module.run()

    mock_listener.assert_called_once_with(main_module.app, main_module.settings)
    mock_listener.return_value.serve.assert_called_once_with()


def test_run_exits_when_port_is_taken():
    """Test a bind failure terminates the process with status 1."""
    import hello_api.main as main_module

    with patch("hello_api.main.Listener") as mock_listener:
        mock_listener.return_value.serve.side_effect = ListenerStartupError("in use")

        with pytest.raises(SystemExit) as exc_info:
            main_module.run()

    assert exc_info.value.code == 1
