"""
Output framing for validated reports.

Framing is only ever produced for an artifact that passed validation, so a
caller never receives PDF headers followed by an error.
"""

from datetime import datetime
from typing import Optional

from django.http import HttpResponse

from .dto import ReportArtifact
from .request_builder import PDF_CONTENT_TYPE, ensure_pdf_extension

TIMESTAMP_FORMAT = '%Y%m%d%H%M%S'


def make_filename(display_name: str, *, timestamp: Optional[datetime] = None) -> str:
    """
    Derive the download filename from a report's display name.

    Double quotes and path separators are replaced so the name is safe
    inside a Content-Disposition header. With ``timestamp`` the name gets a
    ``_YYYYmmddHHMMSS`` suffix before the extension.

    Example:
        >>> make_filename("Monthly Sales")
        'Monthly Sales.pdf'
    """
    name = (display_name or 'report').strip()
    for char in ('"', '/', '\\', '\r', '\n'):
        name = name.replace(char, '_')
    if name.endswith('.pdf'):
        name = name[:-len('.pdf')]
    if timestamp is not None:
        name = f"{name}_{timestamp.strftime(TIMESTAMP_FORMAT)}"
    return ensure_pdf_extension(name)


def build_pdf_response(artifact: ReportArtifact) -> HttpResponse:
    """
    Create the HTTP response carrying a validated report.

    Sets Content-Type, an exact Content-Length and Content-Disposition.
    """
    response = HttpResponse(artifact.content, content_type=PDF_CONTENT_TYPE)
    response['Content-Length'] = len(artifact)
    response['Content-Disposition'] = artifact.content_disposition
    return response
