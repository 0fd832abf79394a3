"""
PrimeVue MCP Exception Hierarchy

Centralized exception classes for structured error handling across the codebase.
All project-specific exceptions inherit from PrimeVueMCPError.

Usage:
    from primevue_mcp.exceptions import ComponentNotFoundError

    try:
        record = catalog.get_component(name)
    except ComponentNotFoundError as e:
        logger.warning(f"Lookup failed: {e}")
"""


class PrimeVueMCPError(Exception):
    """Base exception for all PrimeVue MCP errors."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} ({self.details})"
        return self.message


# =============================================================================
# Dataset Errors
# =============================================================================


class DatasetError(PrimeVueMCPError):
    """Base class for combined dataset errors."""

    pass


class DatasetLoadError(DatasetError):
    """The combined dataset could not be read or decoded."""

    def __init__(self, message: str, path: str | None = None):
        details = {"path": path} if path else {}
        super().__init__(message, details)
        self.path = path


class NotFoundError(DatasetError):
    """
    A requested entity does not exist.

    Carries the list of valid alternatives so callers can render
    a helpful not-found response.
    """

    def __init__(self, message: str, available: list[str] | None = None):
        super().__init__(message)
        self.available = list(available or [])


class ComponentNotFoundError(NotFoundError):
    """Component with given name not found."""

    def __init__(self, name: str, available: list[str] | None = None):
        super().__init__(f"Component '{name}' not found", available)
        self.name = name


class SectionNotFoundError(NotFoundError):
    """Section not present on a component."""

    def __init__(self, component: str, section: str, available: list[str] | None = None):
        super().__init__(f"Section '{section}' not found in '{component}'", available)
        self.component = component
        self.section = section


class ResourceNotFoundError(NotFoundError):
    """MCP resource URI does not resolve to anything."""

    def __init__(self, uri: str):
        super().__init__(f"Unknown resource: {uri}")
        self.uri = uri


# =============================================================================
# HTTP/Client Errors
# =============================================================================


class ClientError(PrimeVueMCPError):
    """Base class for HTTP client errors."""

    pass


class HTTPRequestError(ClientError):
    """HTTP request failed."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response_text: str | None = None,
    ):
        details = {}
        if status_code is not None:
            details["status_code"] = status_code
        if response_text:
            details["response_text"] = response_text[:200]
        super().__init__(message, details)
        self.status_code = status_code
        self.response_text = response_text


class HTTPConnectionError(ClientError):
    """Failed to connect to HTTP endpoint."""

    pass


class HTTPTimeoutError(ClientError):
    """HTTP request timed out."""

    pass


# =============================================================================
# Tool Errors
# =============================================================================


class ToolError(PrimeVueMCPError):
    """Base class for MCP tool errors."""

    pass


class InvalidArgumentError(ToolError):
    """Tool input validation failed."""

    pass
