# orders/models.py
import random
import string
from decimal import Decimal
from django.conf import settings
from django.db import models
from django.urls import reverse
from django.utils import timezone
from users.validators import BangladeshPhoneValidator, LastThreeDigitsValidator
from .delivery import DISTRICT_CHOICES
from .managers import OrderManager, OrderStatusHistoryManager


class Order(models.Model):
    """Customer order"""
    STATUS_PENDING = 'pending'
    STATUS_PROCESSING = 'processing'
    STATUS_SHIPPED = 'shipped'
    STATUS_DELIVERED = 'delivered'

    ORDER_STATUS_CHOICES = [
        (STATUS_PENDING, 'Pending'),
        (STATUS_PROCESSING, 'Processing'),
        (STATUS_SHIPPED, 'Shipped'),
        (STATUS_DELIVERED, 'Delivered'),
    ]

    PAYMENT_BKASH = 'bKash'
    PAYMENT_NAGAD = 'Nagad'
    PAYMENT_ROCKET = 'Rocket'

    PAYMENT_METHOD_CHOICES = [
        (PAYMENT_BKASH, 'bKash'),
        (PAYMENT_NAGAD, 'Nagad'),
        (PAYMENT_ROCKET, 'Rocket'),
    ]

    # Order Identification
    order_number = models.CharField(max_length=20, unique=True, editable=False)
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.SET_NULL,
        null=True, blank=True, related_name='orders',
        help_text='Empty for guest orders'
    )

    status = models.CharField(max_length=20, choices=ORDER_STATUS_CHOICES, default=STATUS_PENDING)
    tracking_id = models.CharField(max_length=100, blank=True)

    # Customer Information
    customer_name = models.CharField(max_length=100)
    customer_email = models.EmailField()
    customer_phone = models.CharField(max_length=14, validators=[BangladeshPhoneValidator()])
    district = models.CharField(max_length=50, choices=DISTRICT_CHOICES)
    address = models.TextField()

    # Payment Information (mobile wallet transfer)
    payment_method = models.CharField(max_length=10, choices=PAYMENT_METHOD_CHOICES, default=PAYMENT_BKASH)
    payment_number = models.CharField(max_length=20, blank=True)
    transaction_id = models.CharField(max_length=50)
    last_three_digits = models.CharField(max_length=3, validators=[LastThreeDigitsValidator()])

    # Financial Information (Taka)
    subtotal = models.DecimalField(max_digits=12, decimal_places=2)
    delivery_charge = models.DecimalField(max_digits=10, decimal_places=2, default=0)
    discount = models.DecimalField(max_digits=12, decimal_places=2, default=0)
    coupon_code = models.CharField(max_length=30, blank=True)
    grand_total = models.DecimalField(max_digits=12, decimal_places=2)

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = OrderManager()

    class Meta:
        db_table = 'orders'
        ordering = ['-created_at', '-id']

    def save(self, *args, **kwargs):
        if not self.order_number:
            self.order_number = self.generate_order_number()

        # Grand total is always derived from its parts
        self.grand_total = self.calculate_grand_total(self.subtotal, self.delivery_charge, self.discount)
        super().save(*args, **kwargs)

    @staticmethod
    def calculate_grand_total(subtotal, delivery_charge, discount):
        return Decimal(subtotal) + Decimal(delivery_charge or 0) - Decimal(discount or 0)

    def generate_order_number(self):
        """Generate unique order number"""
        while True:
            date_part = timezone.localtime().strftime('%y%m%d')
            random_part = ''.join(random.choices(string.digits, k=4))
            order_number = f"ORD-{date_part}-{random_part}"

            if not Order.objects.filter(order_number=order_number).exists():
                return order_number

    def __str__(self):
        return f"Order {self.order_number}"

    def get_absolute_url(self):
        return reverse('orders:order_detail', kwargs={'order_number': self.order_number})

    @property
    def is_guest(self):
        return self.user_id is None

    @property
    def has_discount(self):
        return self.discount > 0

    @property
    def items_count(self):
        """Get total number of items in order"""
        return self.items.aggregate(
            total=models.Sum('quantity')
        )['total'] or 0

    def can_be_viewed_by(self, user):
        if not user.is_authenticated:
            return False
        return user.is_shop_admin or self.user_id == user.pk


class OrderItem(models.Model):
    """Individual item in an order"""
    order = models.ForeignKey(Order, on_delete=models.CASCADE, related_name='items')
    product = models.ForeignKey('products.Product', on_delete=models.SET_NULL, null=True, blank=True)
    variant = models.ForeignKey('products.ProductVariant', on_delete=models.SET_NULL, null=True, blank=True)

    # Product snapshot at time of order
    product_name = models.CharField(max_length=100)
    variant_name = models.CharField(max_length=50, blank=True)
    category = models.CharField(max_length=50, blank=True)
    image = models.URLField(max_length=500, blank=True)
    unit_price = models.DecimalField(max_digits=10, decimal_places=2)

    quantity = models.PositiveIntegerField()
    line_total = models.DecimalField(max_digits=12, decimal_places=2)

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'order_items'
        ordering = ['id']

    def save(self, *args, **kwargs):
        # Calculate line total
        self.line_total = self.unit_price * self.quantity

        # Store product snapshot
        if not self.product_name and self.product:
            self.product_name = self.product.name
        if not self.variant_name and self.variant:
            self.variant_name = self.variant.name

        super().save(*args, **kwargs)

    def __str__(self):
        label = f"{self.product_name} ({self.variant_name})" if self.variant_name else self.product_name
        return f"{self.quantity}x {label} - {self.order.order_number}"


class OrderStatusHistory(models.Model):
    """History of order status changes"""
    order = models.ForeignKey(Order, on_delete=models.CASCADE, related_name='status_history')
    previous_status = models.CharField(max_length=20, blank=True)
    new_status = models.CharField(max_length=20)
    changed_by = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.SET_NULL, null=True, blank=True)
    notes = models.TextField(blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    objects = OrderStatusHistoryManager()

    class Meta:
        db_table = 'order_status_history'
        ordering = ['-created_at', '-id']
        verbose_name_plural = 'order status history'

    def __str__(self):
        return f"{self.order.order_number}: {self.previous_status} → {self.new_status}"
