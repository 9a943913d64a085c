from django.contrib import admin

from .models import ReportServerSettings, ReportDefinition


class EncryptedFieldsAdmin(admin.ModelAdmin):
    """Base admin class masking encrypted fields in change forms"""

    encrypted_fields = []

    def get_form(self, request, obj=None, **kwargs):
        form = super().get_form(request, obj, **kwargs)
        if obj:
            for field in self.encrypted_fields:
                if field in form.base_fields:
                    form.base_fields[field].widget.attrs['placeholder'] = '••••••••'
        return form


class ReportDefinitionInline(admin.TabularInline):
    model = ReportDefinition
    extra = 0
    fields = ['display_name', 'report_path', 'default_params', 'active']
    show_change_link = True


@admin.register(ReportServerSettings)
class ReportServerSettingsAdmin(EncryptedFieldsAdmin):
    encrypted_fields = ['password']
    list_display = ['id', 'name', 'base_url', 'username', 'content_disposition', 'active', 'updated_at']
    list_filter = ['active', 'content_disposition']
    search_fields = ['name', 'base_url', 'username']
    readonly_fields = ['created_at', 'updated_at']
    inlines = [ReportDefinitionInline]

    fieldsets = (
        (None, {'fields': ('name', 'active')}),
        ('JasperReports Server', {
            'fields': ('base_url', 'username', 'password'),
            'description': 'Base URL including the web application path, e.g. https://reports.example.com/jasperserver. Credentials are sent with HTTP Basic authentication.'
        }),
        ('Delivery', {'fields': ('content_disposition',)}),
        ('Timestamps', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )


@admin.register(ReportDefinition)
class ReportDefinitionAdmin(admin.ModelAdmin):
    list_display = ['id', 'display_name', 'report_path', 'settings', 'active', 'updated_at']
    list_filter = ['active', 'settings']
    search_fields = ['display_name', 'report_path']
    autocomplete_fields = ['settings']
    readonly_fields = ['created_at', 'updated_at']

    fieldsets = (
        (None, {'fields': ('display_name', 'settings', 'active')}),
        ('Report', {
            'fields': ('report_path', 'default_params'),
            'description': 'Default parameters are separated by semicolons. Use key=value for named parameters; bare values are sent as p1, p2, ... by position.'
        }),
        ('Timestamps', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )
