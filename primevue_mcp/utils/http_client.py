"""
Standardized HTTP Client Utilities

Provides a consistent interface for outbound HTTP requests.
Uses `requests` for synchronous calls with standardized error handling.

Usage:
    from primevue_mcp.utils.http_client import http_get_text

    html = http_get_text("https://www.primevue.org/button/", timeout=30)
"""

import requests

from primevue_mcp.configs.constants import get_timeout
from primevue_mcp.exceptions import HTTPConnectionError, HTTPRequestError, HTTPTimeoutError

# Default timeout for HTTP requests (seconds)
DEFAULT_TIMEOUT = get_timeout("http_default", 10)

DEFAULT_HEADERS = {"User-Agent": "primevue-mcp/1.0 (+documentation extractor)"}


def http_get(
    url: str,
    headers: dict[str, str] | None = None,
    timeout: float = DEFAULT_TIMEOUT,
    raise_for_status: bool = True,
) -> requests.Response:
    """
    Make a GET request with standardized error handling.

    Args:
        url: Request URL
        headers: Optional headers dict (merged over DEFAULT_HEADERS)
        timeout: Request timeout in seconds
        raise_for_status: Raise HTTPRequestError on 4xx/5xx responses

    Returns:
        requests.Response object

    Raises:
        HTTPConnectionError: Connection failed
        HTTPTimeoutError: Request timed out
        HTTPRequestError: Bad status code (if raise_for_status=True) or invalid request
    """
    merged_headers = {**DEFAULT_HEADERS, **(headers or {})}
    try:
        response = requests.get(url, headers=merged_headers, timeout=timeout)
        if raise_for_status:
            response.raise_for_status()
        return response
    except requests.exceptions.ConnectionError as e:
        raise HTTPConnectionError(f"Connection failed: {url}") from e
    except requests.exceptions.Timeout as e:
        raise HTTPTimeoutError(f"Request timed out: {url}") from e
    except requests.exceptions.HTTPError as e:
        raise HTTPRequestError(
            f"HTTP {e.response.status_code}: {url}",
            status_code=e.response.status_code,
            response_text=e.response.text[:500] if e.response.text else None,
        ) from e
    except requests.exceptions.RequestException as e:
        raise HTTPRequestError(f"Request failed: {url}: {e}") from e


def http_get_text(
    url: str,
    headers: dict[str, str] | None = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> str:
    """
    GET request that returns the decoded body text.

    Raises:
        HTTPConnectionError: Connection failed
        HTTPTimeoutError: Request timed out
        HTTPRequestError: Bad status code
    """
    return http_get(url, headers=headers, timeout=timeout).text
