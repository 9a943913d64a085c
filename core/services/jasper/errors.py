"""
Report relay exceptions for consistent error handling.

Every failure of a report request is represented by one of these
exceptions. Each carries a stable ``kind`` identifier and a short
human-readable message, and knows the HTTP status the view layer should
answer with.

Design principles:
- Never include credentials in exception messages
- One exception class per failure kind
- Nothing is retried by the relay; retrying is the caller's decision
"""

# Maximum URL length to include in error messages and logs
MAX_ERROR_URL_LENGTH = 200


def truncate_url(url: str) -> str:
    """Truncate a URL for error messages."""
    if url and len(url) > MAX_ERROR_URL_LENGTH:
        return url[:MAX_ERROR_URL_LENGTH] + "..."
    return url


class ReportRelayError(Exception):
    """
    Base exception for all report relay errors.

    Attributes:
        kind: Stable identifier of the failure kind
        http_status: Status code used when answering an HTTP caller
    """

    kind = "ReportRelayError"
    http_status = 500

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        """Structured error payload for API responses."""
        return {"kind": self.kind, "message": self.message}


class InvalidInput(ReportRelayError):
    """Raised when a required identifier is missing or malformed."""

    kind = "InvalidInput"
    http_status = 400


class ReportNotFound(ReportRelayError):
    """
    Raised when no active report definition exists for the identifier.

    Inactive definitions are reported the same way as missing ones.
    """

    kind = "ReportNotFound"
    http_status = 404


class SettingsNotFound(ReportRelayError):
    """Raised when no active report server settings exist for the identifier."""

    kind = "SettingsNotFound"
    http_status = 404


class IntegrityViolation(ReportRelayError):
    """
    Raised when more than one active row matches a single identifier.

    Identifiers are primary keys, so this points to corrupted constraints
    in the configuration store.
    """

    kind = "IntegrityViolation"
    http_status = 500


class TransportError(ReportRelayError):
    """
    Raised when the report server could not be reached.

    Covers connection, DNS and TLS failures as well as timeouts.
    """

    kind = "TransportError"
    http_status = 502


class RemoteError(ReportRelayError):
    """
    Raised when the report server answers with a non-success status.

    Attributes:
        status_code: HTTP status returned by the report server
        url: Attempted URL, truncated for logging
    """

    kind = "RemoteError"
    http_status = 502

    def __init__(self, status_code: int, url: str, message: str = None):
        self.status_code = status_code
        self.url = truncate_url(url)
        super().__init__(
            message or f"Report server returned HTTP {status_code} for {self.url}"
        )


class EmptyOrInvalidArtifact(ReportRelayError):
    """Raised when the fetched payload is empty or too small to be a report."""

    kind = "EmptyOrInvalidArtifact"
    http_status = 502


class InternalError(ReportRelayError):
    """Raised in place of any unanticipated exception during a request."""

    kind = "InternalError"
    http_status = 500
