"""Error hierarchy shared by the store, the query engine and the HTTP layer.

Every error knows its HTTP status and how to render itself as a JSON body, so
the global handlers in ``main`` can map any of them without inspecting types.
"""


class F1ApiError(Exception):
    """Base exception for all API errors."""

    def __init__(self, message: str, http_status: int = 500):
        super().__init__(message)
        self.message = message
        self.http_status = http_status

    def to_response(self) -> dict:
        return {"error": self.message}


class NotFoundError(F1ApiError):
    """Requested collection or record does not exist."""

    def __init__(self, resource: str):
        super().__init__(f"{resource} not found", 404)
        self.resource = resource


class InvalidParameterError(F1ApiError):
    """Malformed parameter value or unknown field name."""

    def __init__(self, parameter: str, message: str | None = None):
        super().__init__(message or f"invalid parameter '{parameter}'", 400)
        self.parameter = parameter

    def to_response(self) -> dict:
        return {"error": self.message, "parameter": self.parameter}


class InternalFaultError(F1ApiError):
    """Unexpected failure. The public message never carries internal details."""

    def __init__(self, reason: str = ""):
        super().__init__("internal server error", 500)
        self.reason = reason
