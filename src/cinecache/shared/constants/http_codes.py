"""HTTP Status Code Constants.

HTTP status code constants for clear and type-safe handling of
API responses.
"""


class HTTPStatusCodes:
    """HTTP status code constants."""

    OK = 200

    UNAUTHORIZED = 401
    FORBIDDEN = 403
    NOT_FOUND = 404
    TOO_MANY_REQUESTS = 429

    INTERNAL_SERVER_ERROR = 500
    SERVICE_UNAVAILABLE = 503

    @staticmethod
    def is_success(code: int) -> bool:
        """Check if status code indicates success (2xx)."""
        return 200 <= code < 300

    @staticmethod
    def is_client_error(code: int) -> bool:
        """Check if status code indicates client error (4xx)."""
        return 400 <= code < 500

    @staticmethod
    def is_server_error(code: int) -> bool:
        """Check if status code indicates server error (5xx)."""
        return 500 <= code < 600


class HTTPHeaders:
    """Common HTTP header names."""

    ACCEPT = "Accept"
    USER_AGENT = "User-Agent"
