"""
Builds the outbound JasperReports REST request for a report.

URL layout::

    {base_url}/rest_v2/reports/{report_path}.pdf[?query]

The base URL loses any trailing ``/``, the report path loses any leading
``/``, and ``.pdf`` is appended only when the path does not already end
with it.
"""

import logging
from typing import Optional
from urllib.parse import urlparse

from core.services import config as config_service
from .dto import ReportRequest
from .errors import InvalidInput
from .parameters import build_query_string

logger = logging.getLogger(__name__)

REST_REPORTS_SEGMENT = 'rest_v2/reports'
PDF_EXTENSION = '.pdf'
PDF_CONTENT_TYPE = 'application/pdf'


def safe_target(url: str) -> str:
    """Return scheme://host/path of ``url`` for logging, without the query."""
    parsed = urlparse(url)
    return f"{parsed.scheme}://{parsed.netloc}{parsed.path}"


def ensure_pdf_extension(name: str) -> str:
    """Append ``.pdf`` unless ``name`` already ends with it (case-sensitive)."""
    if name.endswith(PDF_EXTENSION):
        return name
    return name + PDF_EXTENSION


def build_report_url(base_url: str, report_path: str, query: str = '') -> str:
    """
    Build the absolute report URL.

    Args:
        base_url: Server URL with scheme, e.g. https://host:8443/jasperserver
        report_path: Repository path of the report unit
        query: Encoded query string without the leading ``?``

    Raises:
        InvalidInput: If the base URL or report path is empty
    """
    base = (base_url or '').strip().rstrip('/')
    path = (report_path or '').strip().lstrip('/')
    if not base:
        raise InvalidInput("Report server URL is not configured")
    if not path:
        raise InvalidInput("Report path is not configured")

    url = f"{base}/{REST_REPORTS_SEGMENT}/{ensure_pdf_extension(path)}"
    if query:
        url = f"{url}?{query}"
    return url


def build_report_request(
    server_settings,
    definition,
    param_override: Optional[str] = None,
) -> ReportRequest:
    """
    Combine server settings, report definition and parameters into a request.

    Args:
        server_settings: ReportServerSettings row
        definition: ReportDefinition row
        param_override: Caller supplied parameter string; replaces the
            definition's defaults entirely when non-empty

    Returns:
        ReportRequest ready for the fetcher
    """
    query = build_query_string(
        param_override,
        definition.default_params,
        skip_empty=config_service.is_skip_empty_params_enabled(),
    )
    url = build_report_url(server_settings.base_url, definition.report_path, query)
    logger.debug(f"Built report URL for report {definition.pk}: {safe_target(url)}")

    return ReportRequest(
        url=url,
        username=server_settings.username,
        password=server_settings.password or '',
        timeout=config_service.get_timeout(),
        headers={'Accept': PDF_CONTENT_TYPE},
    )
