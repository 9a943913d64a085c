"""
Tests for the report relay service pipeline.
"""

from unittest.mock import Mock, patch

from django.test import TestCase, override_settings
import httpx
import respx

from core.models import ReportDefinition, ReportServerSettings
from core.services.jasper import (
    EmptyOrInvalidArtifact,
    InternalError,
    InvalidInput,
    RemoteError,
    ReportFetcher,
    ReportNotFound,
    ReportRelayService,
    SettingsNotFound,
    TransportError,
)


def pdf_bytes(size):
    """Build a PDF-looking payload of exactly ``size`` bytes."""
    header = b"%PDF-1.4\n"
    return header + b"0" * (size - len(header))


class ReportRelayServiceTestCase(TestCase):
    """Test cases for ReportRelayService.fetch_report."""

    def setUp(self):
        """Set up configuration rows and a mock report server."""
        self.router = respx.mock(assert_all_called=False)
        self.router.start()
        self.addCleanup(self.router.stop)

        self.home_server = ReportServerSettings.objects.create(
            name="Primary",
            base_url="https://primary.example.com/jasperserver/",
            username="jasperadmin",
            password="s3cret",
        )
        self.other_server = ReportServerSettings.objects.create(
            name="Secondary",
            base_url="https://secondary.example.com:8443/jasperserver",
            username="reporter",
            password="other",
            content_disposition="attachment",
        )
        self.definition = ReportDefinition.objects.create(
            settings=self.home_server,
            report_path="/reports/sales",
            display_name="Monthly Sales",
            default_params="a=1;b=2",
        )
        self.home_url = "https://primary.example.com/jasperserver/rest_v2/reports/reports/sales.pdf"
        self.other_url = "https://secondary.example.com:8443/jasperserver/rest_v2/reports/reports/sales.pdf"
        self.service = ReportRelayService()

    def test_fetches_report_from_home_server(self):
        """Test that the definition's own server is used by default."""
        content = pdf_bytes(5000)
        route = self.router.get(self.home_url).mock(return_value=httpx.Response(200, content=content))

        artifact = self.service.fetch_report(self.definition.pk)

        self.assertEqual(artifact.content, content)
        self.assertEqual(len(artifact), 5000)
        self.assertEqual(artifact.filename, "Monthly Sales.pdf")
        self.assertEqual(artifact.disposition, "inline")
        self.assertEqual(route.call_count, 1)
        self.assertEqual(route.calls.last.request.url.query, b"a=1&b=2")

    def test_settings_override(self):
        """Test that an explicit settings id overrides the home server."""
        route = self.router.get(self.other_url).mock(
            return_value=httpx.Response(200, content=pdf_bytes(5000))
        )

        artifact = self.service.fetch_report(self.definition.pk, settings_id=self.other_server.pk)

        self.assertEqual(route.call_count, 1)
        self.assertEqual(artifact.disposition, "attachment")

    def test_param_override_replaces_defaults(self):
        route = self.router.get(self.home_url).mock(
            return_value=httpx.Response(200, content=pdf_bytes(5000))
        )

        self.service.fetch_report(self.definition.pk, param_override="c=3")

        self.assertEqual(route.calls.last.request.url.query, b"c=3")

    def test_string_identifiers_are_accepted(self):
        self.router.get(self.home_url).mock(return_value=httpx.Response(200, content=pdf_bytes(5000)))

        artifact = self.service.fetch_report(str(self.definition.pk), settings_id="")

        self.assertEqual(artifact.filename, "Monthly Sales.pdf")

    def test_missing_report_never_calls_server(self):
        route = self.router.route().mock(return_value=httpx.Response(200, content=pdf_bytes(5000)))

        with self.assertRaises(ReportNotFound):
            self.service.fetch_report(9999)

        self.assertEqual(route.call_count, 0)

    def test_inactive_report_is_not_found(self):
        route = self.router.route().mock(return_value=httpx.Response(200, content=pdf_bytes(5000)))
        self.definition.active = False
        self.definition.save()

        with self.assertRaises(ReportNotFound):
            self.service.fetch_report(self.definition.pk)

        self.assertEqual(route.call_count, 0)

    def test_missing_settings(self):
        with self.assertRaises(SettingsNotFound):
            self.service.fetch_report(self.definition.pk, settings_id=9999)

    def test_inactive_home_settings(self):
        self.home_server.active = False
        self.home_server.save()

        with self.assertRaises(SettingsNotFound):
            self.service.fetch_report(self.definition.pk)

    def test_missing_report_id_is_invalid_input(self):
        with self.assertRaises(InvalidInput):
            self.service.fetch_report(None)

    def test_non_integer_report_id_is_invalid_input(self):
        with self.assertRaises(InvalidInput):
            self.service.fetch_report("abc")

    def test_fractional_report_id_is_invalid_input(self):
        """Test that a float is never truncated to another report id."""
        route = self.router.route().mock(return_value=httpx.Response(200, content=pdf_bytes(5000)))

        with self.assertRaises(InvalidInput):
            self.service.fetch_report(self.definition.pk + 0.9)

        self.assertEqual(route.call_count, 0)

    def test_integral_float_report_id_is_accepted(self):
        self.router.get(self.home_url).mock(return_value=httpx.Response(200, content=pdf_bytes(5000)))

        artifact = self.service.fetch_report(float(self.definition.pk))

        self.assertEqual(artifact.filename, "Monthly Sales.pdf")

    def test_non_integer_settings_id_is_invalid_input(self):
        with self.assertRaises(InvalidInput):
            self.service.fetch_report(self.definition.pk, settings_id="x1")

    def test_small_payload_is_rejected(self):
        self.router.get(self.home_url).mock(return_value=httpx.Response(200, content=b"x" * 50))

        with self.assertRaises(EmptyOrInvalidArtifact):
            self.service.fetch_report(self.definition.pk)

    def test_remote_404_is_remote_error(self):
        self.router.get(self.home_url).mock(return_value=httpx.Response(404, content=pdf_bytes(5000)))

        with self.assertRaises(RemoteError) as cm:
            self.service.fetch_report(self.definition.pk)

        self.assertEqual(cm.exception.status_code, 404)
        self.assertIn("primary.example.com", cm.exception.url)

    def test_timeout_is_transport_error(self):
        route = self.router.get(self.home_url).mock(side_effect=httpx.ConnectTimeout("timeout"))

        with self.assertRaises(TransportError):
            self.service.fetch_report(self.definition.pk)

        self.assertEqual(route.call_count, 1)

    def test_unexpected_error_is_normalized(self):
        fetcher = Mock(spec=ReportFetcher)
        fetcher.fetch.side_effect = RuntimeError("disk on fire")
        service = ReportRelayService(fetcher=fetcher)

        with self.assertRaises(InternalError) as cm:
            service.fetch_report(self.definition.pk)

        self.assertIn("disk on fire", cm.exception.message)
        self.assertEqual(cm.exception.to_dict()["kind"], "InternalError")

    def test_repeated_requests_are_identical_and_not_cached(self):
        content = pdf_bytes(5000)
        route = self.router.get(self.home_url).mock(return_value=httpx.Response(200, content=content))

        first = self.service.fetch_report(self.definition.pk, param_override="x=1;20")
        second = self.service.fetch_report(self.definition.pk, param_override="x=1;20")

        self.assertEqual(first, second)
        self.assertEqual(route.call_count, 2)
        self.assertEqual(route.calls[0].request.url, route.calls[1].request.url)

    def test_configuration_changes_apply_immediately(self):
        """Test that lookups are never cached between requests."""
        self.router.get(self.home_url).mock(return_value=httpx.Response(200, content=pdf_bytes(5000)))
        self.service.fetch_report(self.definition.pk)

        self.definition.display_name = "Renamed"
        self.definition.save()

        artifact = self.service.fetch_report(self.definition.pk)
        self.assertEqual(artifact.filename, "Renamed.pdf")

    @override_settings(REPORT_RELAY_TIMESTAMP_FILENAMES=True)
    def test_timestamped_filename(self):
        self.router.get(self.home_url).mock(return_value=httpx.Response(200, content=pdf_bytes(5000)))

        artifact = self.service.fetch_report(self.definition.pk)

        self.assertRegex(artifact.filename, r"^Monthly Sales_\d{14}\.pdf$")

    @patch('core.services.jasper.service.build_report_request')
    def test_request_built_from_resolved_rows(self, mock_build):
        mock_build.side_effect = InvalidInput("stop here")

        with self.assertRaises(InvalidInput):
            self.service.fetch_report(self.definition.pk, param_override="y=2")

        server_settings, definition, override = mock_build.call_args[0]
        self.assertEqual(server_settings.pk, self.home_server.pk)
        self.assertEqual(definition.pk, self.definition.pk)
        self.assertEqual(override, "y=2")
