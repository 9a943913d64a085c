"""
HTTP client for fetching rendered reports from a JasperReports server.

Logging Guidelines:
- Logs method + host + path (no credentials, no query values)
- On transport errors: exception class + truncated message
- Never logs the Authorization header

Timeouts:
- The request timeout bounds every connect, read and write
- The same value also bounds the whole transfer, so a server trickling
  bytes cannot hold a request open past it

Retry Strategy:
- None. A failed fetch is reported once; the caller decides whether to
  resubmit the request.
"""

import logging
import time

import httpx

from .dto import FetchResult, ReportRequest
from .errors import TransportError
from .request_builder import safe_target

logger = logging.getLogger(__name__)


class ReportFetcher:
    """
    Performs the single authenticated GET for a report request.

    Non-success statuses are returned to the caller unchanged; only
    failures to obtain any response at all raise.
    """

    def _now(self) -> float:
        return time.monotonic()

    def fetch(self, request: ReportRequest) -> FetchResult:
        """
        Fetch the report described by ``request``.

        Args:
            request: Resolved report request

        Returns:
            FetchResult with the raw body and status code

        Raises:
            TransportError: On connection, DNS or TLS failure, or when the
                transfer does not complete within the timeout
        """
        target = safe_target(request.url)
        logger.info(f"GET {target} (timeout {request.timeout}s)")

        deadline = self._now() + request.timeout
        try:
            with httpx.Client(timeout=request.timeout) as client:
                with client.stream(
                    'GET',
                    request.url,
                    headers=request.headers,
                    auth=httpx.BasicAuth(request.username, request.password),
                ) as response:
                    chunks = []
                    for chunk in response.iter_bytes():
                        chunks.append(chunk)
                        if self._now() > deadline:
                            logger.warning(f"Transfer from {target} exceeded {request.timeout}s")
                            raise TransportError(
                                f"Report server did not deliver the report within {request.timeout} seconds"
                            )
                    status_code = response.status_code
        except httpx.TimeoutException as e:
            logger.warning(f"Timed out after {request.timeout}s fetching {target}")
            raise TransportError(
                f"Report server did not respond within {request.timeout} seconds"
            ) from e
        except httpx.TransportError as e:
            logger.warning(f"Transport failure fetching {target}: {e.__class__.__name__}: {str(e)[:200]}")
            raise TransportError(
                f"Could not reach report server: {e.__class__.__name__}"
            ) from e

        content = b''.join(chunks)
        logger.debug(f"GET {target} -> HTTP {status_code}, {len(content)} bytes")
        return FetchResult(content=content, status_code=status_code)
