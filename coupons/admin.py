from django.contrib import admin
from .models import Coupon


@admin.register(Coupon)
class CouponAdmin(admin.ModelAdmin):
    list_display = ('code', 'discount_display', 'used_count', 'max_usage', 'expiry_date', 'status_display', 'created_at')
    list_filter = ('discount_type', 'is_active', 'expiry_date')
    search_fields = ('code',)
    readonly_fields = ('used_count', 'last_used', 'created_at')

    def discount_display(self, obj):
        return obj.discount_display
    discount_display.short_description = 'Discount'

    def status_display(self, obj):
        return obj.status_label
    status_display.short_description = 'Status'
