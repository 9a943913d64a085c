"""
Django management command to fetch a report and save it as a PDF file.

Runs the same pipeline as the HTTP endpoints, without a web request.
"""

from pathlib import Path

from django.core.management.base import BaseCommand, CommandError

from core.services.jasper import ReportRelayError, ReportRelayService


class Command(BaseCommand):
    help = 'Fetch a report from its JasperReports server and write it to a PDF file'

    def add_arguments(self, parser):
        parser.add_argument('report_id', type=int, help='Report definition ID')
        parser.add_argument(
            '--settings-id',
            type=int,
            default=None,
            help="Report server settings ID (defaults to the report's own server)",
        )
        parser.add_argument(
            '--params',
            default=None,
            help='Parameter string replacing the stored defaults, e.g. "year=2024;EU"',
        )
        parser.add_argument(
            '--output',
            default=None,
            help='Output file path (defaults to the report file name in the current directory)',
        )

    def handle(self, *args, **options):
        """Execute the command."""
        report_id = options['report_id']
        self.stdout.write(f"Fetching report {report_id}...")

        try:
            artifact = ReportRelayService().fetch_report(
                report_id=report_id,
                settings_id=options['settings_id'],
                param_override=options['params'],
            )
        except ReportRelayError as e:
            raise CommandError(f"{e.kind}: {e.message}")

        output = Path(options['output'] or artifact.filename)
        try:
            output.write_bytes(artifact.content)
        except OSError as e:
            raise CommandError(f"Failed to write {output}: {e}")

        self.stdout.write(
            self.style.SUCCESS(f"Saved {len(artifact)} bytes to {output}")
        )
