"""
Classification of fetched report payloads.

A successful fetch must have status 200 and a body strictly longer than the
configured minimum size. Server-side error pages are short HTML documents,
so the size threshold rejects them without parsing. When enabled, the body
must additionally start with the ``%PDF-`` signature.
"""

from core.services import config as config_service
from .dto import FetchResult
from .errors import EmptyOrInvalidArtifact, RemoteError


SUCCESS_STATUS = 200
PDF_MAGIC = b'%PDF-'


def validate_fetch_result(result: FetchResult, url: str) -> bytes:
    """
    Return the payload of ``result`` if it is a plausible report.

    Raises:
        RemoteError: If the status is anything but 200
        EmptyOrInvalidArtifact: If the body is empty, too small, or fails
            the optional signature check
    """
    if result.status_code != SUCCESS_STATUS:
        raise RemoteError(result.status_code, url)

    min_bytes = config_service.get_min_artifact_bytes()
    if not result.content or result.content_length <= min_bytes:
        raise EmptyOrInvalidArtifact(
            f"Received empty response from server ({result.content_length} bytes)"
        )

    if config_service.is_pdf_magic_check_enabled() and not result.content.startswith(PDF_MAGIC):
        raise EmptyOrInvalidArtifact("Response from server is not a PDF document")

    return result.content
