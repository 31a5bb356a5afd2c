"""Tests for the shared HTTP helper."""

from unittest.mock import MagicMock, patch

import pytest
import requests

from common.http_client import get_text
from common.logging_utils import safe_url
from constants import Constants
from errors import IndexIoError, RequestError

URL = "https://index.crates.io/se/rd/serde"


def _response(status_code=200, text=""):
    res = MagicMock()
    res.status_code = status_code
    res.ok = 200 <= status_code < 300
    res.text = text
    return res


class TestGetText:
    """Test get_text error mapping."""

    @patch("common.http_client.requests.get")
    def test_returns_body(self, mock_get):
        mock_get.return_value = _response(200, '{"name":"serde"}\n')

        assert get_text(URL, context="index") == '{"name":"serde"}\n'
        _, kwargs = mock_get.call_args
        assert kwargs["timeout"] == Constants.REQUEST_TIMEOUT
        assert kwargs["headers"]["User-Agent"] == Constants.USER_AGENT

    @patch("common.http_client.requests.get")
    def test_timeout_follows_configuration(self, mock_get, monkeypatch):
        monkeypatch.setattr(Constants, "REQUEST_TIMEOUT", 5)
        mock_get.return_value = _response(200, "")
        get_text(URL, context="index")
        assert mock_get.call_args.kwargs["timeout"] == 5

    @patch("common.http_client.requests.get")
    def test_not_found_status(self, mock_get):
        mock_get.return_value = _response(404, "not found")

        with pytest.raises(RequestError) as excinfo:
            get_text(URL, context="index")
        assert excinfo.value.status_code == 404

    @patch("common.http_client.requests.get", side_effect=requests.Timeout("slow"))
    def test_timeout(self, _mock_get):
        with pytest.raises(RequestError, match="timed out"):
            get_text(URL, context="index")

    @patch("common.http_client.requests.get", side_effect=requests.ConnectionError("refused"))
    def test_connection_error(self, _mock_get):
        with pytest.raises(RequestError) as excinfo:
            get_text(URL, context="index")
        assert excinfo.value.status_code is None

    @patch("common.http_client.requests.get",
           side_effect=requests.exceptions.ChunkedEncodingError("truncated"))
    def test_body_read_failure(self, _mock_get):
        with pytest.raises(IndexIoError):
            get_text(URL, context="index")


class TestSafeUrl:
    """Credentials and query strings never reach the logs."""

    def test_strips_userinfo_and_query(self):
        assert safe_url("https://user:pw@mirror.example:8443/idx/se/rd/serde?token=1") == (
            "https://mirror.example:8443/idx/se/rd/serde"
        )

    def test_invalid_port(self):
        assert safe_url("http://mirror.example:abc/se/rd/serde") == "<invalid url>"

    @patch("common.http_client.requests.get",
           side_effect=requests.exceptions.InvalidURL("bad port"))
    def test_invalid_port_surfaces_as_request_error(self, _mock_get):
        with pytest.raises(RequestError):
            get_text("http://mirror.example:abc/se/rd/serde", context="index")


class TestUserAgent:
    """The default agent names the tool and its version."""

    def test_default_user_agent(self):
        assert Constants.USER_AGENT == f"cratequery/{Constants.VERSION}"
