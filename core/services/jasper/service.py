"""
Report relay service.

Resolves a logical report request into a JasperReports REST call, fetches
the rendered PDF, validates it and returns it as a ReportArtifact.

Pipeline for one request:
1. Resolve the report definition and the server settings (the settings id
   defaults to the definition's own server)
2. Resolve parameters and build the request URL
3. Fetch the report with Basic authentication
4. Validate status and payload
5. Package the payload with its filename and disposition

Any stage may fail. Failures are raised as ReportRelayError subclasses;
unanticipated exceptions are normalized to InternalError. Nothing is cached
and nothing is retried.
"""

import logging
from typing import Optional

from django.utils import timezone

from core.services import config as config_service
from .client import ReportFetcher
from .dto import ReportArtifact
from .emitter import make_filename
from .errors import InternalError, InvalidInput, ReportRelayError
from .request_builder import build_report_request
from .validation import validate_fetch_result

logger = logging.getLogger(__name__)


def coerce_identifier(value, name: str, *, required: bool = True) -> Optional[int]:
    """
    Convert a caller supplied identifier to an int.

    Blank values count as absent.

    Raises:
        InvalidInput: If a required identifier is absent or any value is
            not a positive integer
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        if required:
            raise InvalidInput(f"{name} is required")
        return None
    if isinstance(value, bool):
        raise InvalidInput(f"{name} must be an integer")
    if isinstance(value, float) and not value.is_integer():
        raise InvalidInput(f"{name} must be an integer")
    try:
        identifier = int(value)
    except (TypeError, ValueError):
        raise InvalidInput(f"{name} must be an integer")
    if identifier < 1:
        raise InvalidInput(f"{name} must be a positive integer")
    return identifier


class ReportRelayService:
    """
    Fetches reports from configured JasperReports servers.

    Usage:
        service = ReportRelayService()
        artifact = service.fetch_report(report_id=3, param_override="year=2024")
        response = build_pdf_response(artifact)
    """

    def __init__(self, fetcher: Optional[ReportFetcher] = None):
        """
        Initialize the service.

        Args:
            fetcher: Report fetcher. If None, a default ReportFetcher is used.
        """
        self.fetcher = fetcher or ReportFetcher()

    def fetch_report(
        self,
        report_id,
        settings_id=None,
        param_override: Optional[str] = None,
    ) -> ReportArtifact:
        """
        Fetch and validate one report.

        Args:
            report_id: Report definition identifier (required)
            settings_id: Server settings identifier; defaults to the
                definition's own server
            param_override: Parameter string replacing the definition's
                defaults when non-empty

        Returns:
            ReportArtifact with the PDF bytes, filename and disposition

        Raises:
            ReportRelayError: For every failure, including InternalError for
                unanticipated exceptions
        """
        try:
            return self._fetch_report(report_id, settings_id, param_override)
        except ReportRelayError:
            raise
        except Exception as e:
            logger.exception(f"Unexpected error fetching report {report_id}")
            raise InternalError(str(e) or e.__class__.__name__) from e

    def _fetch_report(self, report_id, settings_id, param_override) -> ReportArtifact:
        report_id = coerce_identifier(report_id, "Report ID")
        settings_id = coerce_identifier(settings_id, "Settings ID", required=False)

        server_settings, definition = config_service.resolve_configuration(report_id, settings_id)
        logger.debug(
            f"Resolved report {definition.pk} ({definition.display_name}) "
            f"on server settings {server_settings.pk}"
        )

        request = build_report_request(server_settings, definition, param_override)
        result = self.fetcher.fetch(request)
        content = validate_fetch_result(result, request.url)

        timestamp = timezone.now() if config_service.is_timestamp_filenames_enabled() else None
        artifact = ReportArtifact(
            content=content,
            filename=make_filename(definition.display_name, timestamp=timestamp),
            disposition=config_service.get_content_disposition(server_settings),
        )
        logger.info(f"Fetched report {definition.pk}: {len(artifact)} bytes as {artifact.filename}")
        return artifact
