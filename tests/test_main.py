"""Tests for process bootstrap."""

from unittest.mock import patch

import pytest

import main


@patch("main.load_dotenv")
def test_missing_key_exits_before_serving(mock_load_dotenv, monkeypatch, capsys):
    monkeypatch.delenv("UNSPLASH_ACCESS_KEY", raising=False)

    with patch("main.create_server") as mock_create_server:
        with pytest.raises(SystemExit) as exc_info:
            main.main()

    assert exc_info.value.code == 1
    assert "UNSPLASH_ACCESS_KEY environment variable is not set" in capsys.readouterr().err
    mock_create_server.assert_not_called()


@patch("main.load_dotenv")
@patch("main.create_server")
def test_serves_with_key(mock_create_server, mock_load_dotenv, monkeypatch):
    monkeypatch.setenv("UNSPLASH_ACCESS_KEY", "abc123")

    main.main()

    handler = mock_create_server.call_args[0][0]
    assert handler.client.access_key == "abc123"
    mock_create_server.return_value.run.assert_called_once_with()
