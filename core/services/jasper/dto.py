"""
Data Transfer Objects for the report relay
"""

from dataclasses import dataclass, field
from typing import Dict

from django.utils.http import content_disposition_header


@dataclass
class ReportRequest:
    """
    Fully resolved outbound request for a single report.

    Credentials travel separately from the URL and are sent as HTTP Basic
    authentication.
    """

    url: str
    username: str
    password: str
    timeout: float
    headers: Dict[str, str] = field(default_factory=dict)

    def __repr__(self) -> str:
        return f"ReportRequest(url={self.url!r}, username={self.username!r}, timeout={self.timeout})"


@dataclass
class FetchResult:
    """Raw outcome of one fetch against the report server."""

    content: bytes
    status_code: int

    @property
    def content_length(self) -> int:
        return len(self.content) if self.content else 0


@dataclass
class ReportArtifact:
    """
    Validated report ready to be handed to the caller.

    Contains the PDF bytes and metadata for HTTP responses.
    """

    content: bytes
    filename: str
    disposition: str = "inline"
    content_type: str = "application/pdf"

    def __len__(self) -> int:
        """Return the size of the artifact in bytes"""
        return len(self.content)

    @property
    def content_disposition(self) -> str:
        return content_disposition_header(
            as_attachment=self.disposition == "attachment",
            filename=self.filename,
        )
