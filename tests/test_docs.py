"""
Tests for the documentation fetcher and the HTTP client wrapper.
"""

import json
from unittest.mock import MagicMock, patch

import pytest
import requests

from primevue_mcp.exceptions import HTTPConnectionError, HTTPRequestError, HTTPTimeoutError
from primevue_mcp.pipeline.docs import DocsFetcher, parse_component_page, run_docs_extraction
from primevue_mcp.utils.http_client import http_get, http_get_text

BUTTON_PAGE = """
<html><body>
  <nav><a href="/">Home</a></nav>
  <h1> Button </h1>
  <p>Button is an extension to standard input element with icons and theming.</p>
  <p>Second paragraph.</p>
  <pre><code>import Button from 'primevue/button';</code></pre>
  <pre><code>&lt;Button label="Submit" /&gt;</code></pre>
  <pre><code>&lt;Button icon="pi pi-check" /&gt;</code></pre>
</body></html>
"""


class TestParseComponentPage:
    """Test HTML extraction of title, description and examples."""

    def test_extracts_fields(self):
        page = parse_component_page(BUTTON_PAGE)
        assert page["title"] == "Button"
        assert page["description"].startswith("Button is an extension")
        assert page["examples"] == [
            '<Button label="Submit" />',
            '<Button icon="pi pi-check" />',
        ]

    def test_empty_fields_omitted(self):
        page = parse_component_page("<html><body><h1>  </h1><div>nothing</div></body></html>")
        assert "title" not in page
        assert "description" not in page
        assert page["examples"] == []


class TestDocsFetcher:
    """Test sequential, throttled fetching."""

    def test_page_url(self):
        fetcher = DocsFetcher(base_url="https://docs.example.com/", delay=0)
        assert fetcher.page_url("button") == "https://docs.example.com/button/"

    def test_fetch_all_sleeps_after_each_request(self):
        sleep = MagicMock()
        fetcher = DocsFetcher(base_url="https://docs.example.com", delay=0.3, sleep=sleep)

        with patch("primevue_mcp.pipeline.docs.http_get_text", return_value=BUTTON_PAGE) as mock_get:
            docs = fetcher.fetch_all(["button", "panel"])

        assert list(docs) == ["button", "panel"]
        assert [c.args[0] for c in mock_get.call_args_list] == [
            "https://docs.example.com/button/",
            "https://docs.example.com/panel/",
        ]
        assert sleep.call_count == 2
        sleep.assert_called_with(0.3)

    def test_failed_page_skipped(self):
        def fake_get(url, timeout=None):
            if "broken" in url:
                raise HTTPRequestError("HTTP 404: " + url, status_code=404)
            return BUTTON_PAGE

        fetcher = DocsFetcher(delay=0)
        with patch("primevue_mcp.pipeline.docs.http_get_text", side_effect=fake_get):
            docs = fetcher.fetch_all(["broken", "button"])

        assert list(docs) == ["button"]

    def test_network_error_skipped(self):
        fetcher = DocsFetcher(delay=0)
        with patch(
            "primevue_mcp.pipeline.docs.http_get_text",
            side_effect=HTTPConnectionError("Connection failed"),
        ):
            assert fetcher.fetch("button") is None

    def test_run_reads_component_names_from_api(self, temp_dir):
        api_path = temp_dir / "api.json"
        api_path.write_text(json.dumps({"button": {"props": {}}}))
        output = temp_dir / "docs.json"

        with patch("primevue_mcp.pipeline.docs.http_get_text", return_value=BUTTON_PAGE), \
                patch("primevue_mcp.pipeline.docs.time.sleep"):
            run_docs_extraction(api_path, output, base_url="https://docs.example.com", delay=0)

        written = json.loads(output.read_text())
        assert written["button"]["title"] == "Button"


class TestHttpClient:
    """Test requests error wrapping."""

    def test_connection_error(self):
        with patch("primevue_mcp.utils.http_client.requests.get", side_effect=requests.exceptions.ConnectionError()):
            with pytest.raises(HTTPConnectionError):
                http_get("https://docs.example.com/")

    def test_timeout(self):
        with patch("primevue_mcp.utils.http_client.requests.get", side_effect=requests.exceptions.Timeout()):
            with pytest.raises(HTTPTimeoutError):
                http_get("https://docs.example.com/")

    def test_bad_status(self):
        response = MagicMock()
        response.status_code = 503
        response.text = "unavailable"
        response.raise_for_status.side_effect = requests.exceptions.HTTPError(response=response)

        with patch("primevue_mcp.utils.http_client.requests.get", return_value=response):
            with pytest.raises(HTTPRequestError) as exc_info:
                http_get("https://docs.example.com/")

        assert exc_info.value.status_code == 503

    def test_get_text(self):
        response = MagicMock()
        response.text = "<html></html>"

        with patch("primevue_mcp.utils.http_client.requests.get", return_value=response) as mock_get:
            assert http_get_text("https://docs.example.com/", timeout=5) == "<html></html>"

        assert mock_get.call_args.kwargs["timeout"] == 5
        assert "User-Agent" in mock_get.call_args.kwargs["headers"]
