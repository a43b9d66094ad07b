"""Error kinds surfaced by the proxy routes."""


class ValidationError(ValueError):
    """Raised when a required request parameter is missing."""


class UpstreamError(RuntimeError):
    """Raised when the Places API cannot be reached or its response cannot be read."""
