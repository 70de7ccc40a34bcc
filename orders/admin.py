from django.contrib import admin
from django.utils.html import format_html
from .models import Order, OrderItem, OrderStatusHistory

STATUS_COLORS = {
    'pending': 'orange',
    'processing': 'blue',
    'shipped': 'teal',
    'delivered': 'green',
}


class OrderItemInline(admin.TabularInline):
    model = OrderItem
    extra = 0
    readonly_fields = ('line_total', 'created_at')
    fields = ('product', 'product_name', 'variant_name', 'quantity', 'unit_price', 'line_total')


class OrderStatusHistoryInline(admin.TabularInline):
    model = OrderStatusHistory
    extra = 0
    readonly_fields = ('created_at',)
    fields = ('previous_status', 'new_status', 'changed_by', 'notes', 'created_at')


@admin.register(Order)
class OrderAdmin(admin.ModelAdmin):
    list_display = ('order_number', 'customer_name', 'district', 'payment_method',
                    'status_display', 'grand_total_display', 'created_at')
    list_filter = ('status', 'payment_method', 'created_at')
    search_fields = ('order_number', 'customer_name', 'customer_email', 'customer_phone',
                     'transaction_id', 'user__email')
    readonly_fields = ('order_number', 'grand_total', 'created_at', 'updated_at')

    fieldsets = (
        ('Order', {
            'fields': ('order_number', 'user', 'status', 'tracking_id')
        }),
        ('Customer', {
            'fields': ('customer_name', 'customer_email', 'customer_phone', 'district', 'address')
        }),
        ('Payment', {
            'fields': ('payment_method', 'payment_number', 'transaction_id', 'last_three_digits')
        }),
        ('Totals', {
            'fields': ('subtotal', 'delivery_charge', 'discount', 'coupon_code', 'grand_total')
        }),
        ('Dates', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )

    inlines = [OrderItemInline, OrderStatusHistoryInline]

    def status_display(self, obj):
        return format_html(
            '<span style="color: {}; font-weight: bold;">{}</span>',
            STATUS_COLORS.get(obj.status, 'black'), obj.get_status_display()
        )
    status_display.short_description = 'Status'

    def grand_total_display(self, obj):
        return f"৳{obj.grand_total:,}"
    grand_total_display.short_description = 'Grand total'
