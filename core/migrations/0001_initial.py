from django.db import migrations, models
import django.db.models.deletion
import encrypted_model_fields.fields


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='ReportServerSettings',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(blank=True, help_text='Display name for this server', max_length=200)),
                ('base_url', models.CharField(help_text='Server URL including scheme, e.g. https://reports.example.com/jasperserver', max_length=500)),
                ('username', models.CharField(max_length=100)),
                ('password', encrypted_model_fields.fields.EncryptedCharField(blank=True, max_length=500)),
                ('content_disposition', models.CharField(choices=[('inline', 'Inline (display in browser)'), ('attachment', 'Attachment (download)')], default='inline', help_text='How browsers should present fetched reports', max_length=20)),
                ('active', models.BooleanField(default=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'verbose_name': 'Report Server Settings',
                'verbose_name_plural': 'Report Server Settings',
                'ordering': ['id'],
            },
        ),
        migrations.CreateModel(
            name='ReportDefinition',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('report_path', models.CharField(help_text='Repository path of the report unit, e.g. /reports/finance/invoice', max_length=500)),
                ('display_name', models.CharField(help_text='Used as the downloaded file name', max_length=200)),
                ('default_params', models.CharField(blank=True, help_text='Semicolon separated defaults, e.g. year=2024;region=EU or bare positional values', max_length=500)),
                ('active', models.BooleanField(default=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('settings', models.ForeignKey(help_text='Default server used when a request does not name one', on_delete=django.db.models.deletion.PROTECT, related_name='reports', to='core.reportserversettings')),
            ],
            options={
                'verbose_name': 'Report Definition',
                'verbose_name_plural': 'Report Definitions',
                'ordering': ['display_name'],
            },
        ),
    ]
