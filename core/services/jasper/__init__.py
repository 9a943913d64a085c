"""
JasperReports relay package.

Turns a report request into a JasperReports REST call and hands back the
validated PDF.

Key Components:
- errors.py: Failure kinds of a report request
- parameters.py: Parameter string parsing and query encoding
- request_builder.py: REST URL and request construction
- client.py: Authenticated HTTP fetch
- validation.py: Payload classification
- emitter.py: Filename and HTTP response framing
- service.py: ReportRelayService orchestrating the pipeline
"""

from .errors import (
    ReportRelayError,
    InvalidInput,
    ReportNotFound,
    SettingsNotFound,
    IntegrityViolation,
    TransportError,
    RemoteError,
    EmptyOrInvalidArtifact,
    InternalError,
)
from .dto import ReportRequest, FetchResult, ReportArtifact
from .client import ReportFetcher
from .emitter import build_pdf_response, make_filename
from .service import ReportRelayService

__all__ = [
    # Exceptions
    'ReportRelayError',
    'InvalidInput',
    'ReportNotFound',
    'SettingsNotFound',
    'IntegrityViolation',
    'TransportError',
    'RemoteError',
    'EmptyOrInvalidArtifact',
    'InternalError',
    # Data objects
    'ReportRequest',
    'FetchResult',
    'ReportArtifact',
    # Classes and helpers
    'ReportFetcher',
    'ReportRelayService',
    'build_pdf_response',
    'make_filename',
]
