"""
Core configuration service for the report relay.

This module provides a centralized configuration layer that:
- Resolves report definitions and report server settings by identifier
- Enforces the active flag on every lookup
- Exposes the relay's runtime knobs from Django settings with defaults

Lookups are never cached. Every report request reads the configuration
rows fresh, so a change made in the admin takes effect on the next request.
"""

from typing import Optional

from django.conf import settings

from core.models import ContentDisposition, ReportDefinition, ReportServerSettings
from core.services.jasper.errors import (
    IntegrityViolation,
    ReportNotFound,
    SettingsNotFound,
)


# Runtime defaults
DEFAULT_TIMEOUT = 300.0  # seconds
DEFAULT_MIN_ARTIFACT_BYTES = 100


def _get_unique_active(queryset, identifier):
    """
    Return the single active row in ``queryset`` or None.

    Raises:
        IntegrityViolation: If more than one active row matches
    """
    rows = list(queryset.filter(active=True)[:2])
    if len(rows) > 1:
        raise IntegrityViolation(
            f"Multiple active {queryset.model._meta.verbose_name} rows for id {identifier}"
        )
    return rows[0] if rows else None


def get_report_definition(report_id: int) -> ReportDefinition:
    """
    Get the active report definition for ``report_id``.

    Inactive definitions are treated exactly like missing ones.

    Raises:
        ReportNotFound: If no active definition exists
        IntegrityViolation: If the identifier is ambiguous
    """
    definition = _get_unique_active(
        ReportDefinition.objects.filter(pk=report_id), report_id
    )
    if definition is None:
        raise ReportNotFound(f"Invalid report ID specified: {report_id}")
    return definition


def get_server_settings(settings_id: int) -> ReportServerSettings:
    """
    Get the active report server settings for ``settings_id``.

    Raises:
        SettingsNotFound: If no active settings row exists
        IntegrityViolation: If the identifier is ambiguous
    """
    server_settings = _get_unique_active(
        ReportServerSettings.objects.filter(pk=settings_id), settings_id
    )
    if server_settings is None:
        raise SettingsNotFound(f"Invalid server settings ID specified: {settings_id}")
    return server_settings


def resolve_configuration(report_id: int, settings_id: Optional[int] = None):
    """
    Resolve the definition and the server settings for one request.

    When ``settings_id`` is not given, the definition's own server is used.

    Returns:
        Tuple of (ReportServerSettings, ReportDefinition)
    """
    definition = get_report_definition(report_id)
    if settings_id is None:
        settings_id = definition.settings_id
    return get_server_settings(settings_id), definition


def get_timeout() -> float:
    """Fetch timeout in seconds."""
    return float(getattr(settings, 'REPORT_RELAY_TIMEOUT', DEFAULT_TIMEOUT))


def get_min_artifact_bytes() -> int:
    """Payloads must be strictly longer than this to be forwarded."""
    return int(getattr(settings, 'REPORT_RELAY_MIN_ARTIFACT_BYTES', DEFAULT_MIN_ARTIFACT_BYTES))


def is_pdf_magic_check_enabled() -> bool:
    return bool(getattr(settings, 'REPORT_RELAY_CHECK_PDF_MAGIC', False))


def is_skip_empty_params_enabled() -> bool:
    return bool(getattr(settings, 'REPORT_RELAY_SKIP_EMPTY_PARAMS', False))


def is_timestamp_filenames_enabled() -> bool:
    return bool(getattr(settings, 'REPORT_RELAY_TIMESTAMP_FILENAMES', False))


def get_content_disposition(server_settings: Optional[ReportServerSettings] = None) -> str:
    """
    Resolve the Content-Disposition mode for a response.

    The server settings row wins; the project-wide default applies when the
    row carries no value.
    """
    if server_settings is not None and server_settings.content_disposition:
        return server_settings.content_disposition
    return getattr(settings, 'REPORT_RELAY_DEFAULT_DISPOSITION', ContentDisposition.INLINE)
