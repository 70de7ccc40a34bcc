from django.contrib import admin
from .models import SiteSettings


@admin.register(SiteSettings)
class SiteSettingsAdmin(admin.ModelAdmin):
    list_display = ('__str__', 'it_solutions_available', 'tshirt_page_available', 'updated_at')

    def has_add_permission(self, request):
        # Single row, created on first use
        return not SiteSettings.objects.exists()

    def has_delete_permission(self, request, obj=None):
        return False


admin.site.site_header = "InnovaCart administration"
admin.site.site_title = "InnovaCart admin"
admin.site.index_title = "Store management"
