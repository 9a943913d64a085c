from django.db import models
from django.utils.translation import gettext_lazy as _
from encrypted_model_fields.fields import EncryptedCharField


class ContentDisposition(models.TextChoices):
    INLINE = 'inline', _('Inline (display in browser)')
    ATTACHMENT = 'attachment', _('Attachment (download)')


class ReportServerSettings(models.Model):
    """Connection settings for a JasperReports server."""
    name = models.CharField(max_length=200, blank=True, help_text="Display name for this server")
    base_url = models.CharField(
        max_length=500,
        help_text="Server URL including scheme, e.g. https://reports.example.com/jasperserver"
    )
    username = models.CharField(max_length=100)
    password = EncryptedCharField(max_length=500, blank=True)
    content_disposition = models.CharField(
        max_length=20,
        choices=ContentDisposition.choices,
        default=ContentDisposition.INLINE,
        help_text="How browsers should present fetched reports"
    )
    active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['id']
        verbose_name = 'Report Server Settings'
        verbose_name_plural = 'Report Server Settings'

    def __str__(self):
        return self.name or self.base_url


class ReportDefinition(models.Model):
    """A logical report mapped to a server-side report unit."""
    settings = models.ForeignKey(
        ReportServerSettings,
        on_delete=models.PROTECT,
        related_name='reports',
        help_text="Default server used when a request does not name one"
    )
    report_path = models.CharField(
        max_length=500,
        help_text="Repository path of the report unit, e.g. /reports/finance/invoice"
    )
    display_name = models.CharField(max_length=200, help_text="Used as the downloaded file name")
    default_params = models.CharField(
        max_length=500,
        blank=True,
        help_text="Semicolon separated defaults, e.g. year=2024;region=EU or bare positional values"
    )
    active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['display_name']
        verbose_name = 'Report Definition'
        verbose_name_plural = 'Report Definitions'

    def __str__(self):
        return self.display_name
