from django.contrib.auth.decorators import login_required
from django.http import JsonResponse
from django.views.decorators.http import require_GET
import logging

from .services.jasper import (
    ReportRelayError,
    ReportRelayService,
    build_pdf_response,
)

# Configure logging
logger = logging.getLogger(__name__)


def _error_response(error: ReportRelayError) -> JsonResponse:
    """Convert a relay failure into a structured JSON error."""
    return JsonResponse(error.to_dict(), status=error.http_status)


def _relay_report(report_id, settings_id, param_override):
    """
    Run one report request and frame the result.

    The PDF response is only created once the report has been fully
    validated; every failure produces a JSON error instead.
    """
    service = ReportRelayService()
    try:
        artifact = service.fetch_report(
            report_id=report_id,
            settings_id=settings_id,
            param_override=param_override,
        )
    except ReportRelayError as e:
        logger.warning(f"Report request failed ({e.kind}): {e.message}")
        return _error_response(e)

    return build_pdf_response(artifact)


@login_required
@require_GET
def report_pdf(request, report_id):
    """Fetch a report by definition id; settings and params via query string."""
    return _relay_report(
        report_id,
        request.GET.get('settings_id'),
        request.GET.get('params'),
    )


@login_required
@require_GET
def report_fetch(request):
    """Fetch a report with every identifier supplied as a query parameter."""
    return _relay_report(
        request.GET.get('report_id'),
        request.GET.get('settings_id'),
        request.GET.get('params'),
    )
