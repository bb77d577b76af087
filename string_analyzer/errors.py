"""Error taxonomy shared by the store, the services and the HTTP layer.

Each error carries the HTTP status code it is rendered with; the app
registers a single handler for ``StringAnalyzerError`` that turns any of
them into an ``{"error": message}`` body.
"""


class StringAnalyzerError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(StringAnalyzerError):
    """Missing or malformed input."""

    status_code = 400


class InvalidTypeError(StringAnalyzerError):
    """Input present but of the wrong type."""

    status_code = 422


class ConflictError(StringAnalyzerError):
    """The string is already stored."""

    status_code = 409


class NotFoundError(StringAnalyzerError):
    status_code = 404
