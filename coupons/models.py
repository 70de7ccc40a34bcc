# coupons/models.py
from decimal import Decimal
from django.core.validators import MinValueValidator
from django.db import models
from django.utils import timezone
from .managers import CouponManager


class Coupon(models.Model):
    PERCENTAGE = 'percentage'
    FIXED = 'fixed'

    DISCOUNT_TYPE_CHOICES = [
        (PERCENTAGE, 'Percentage'),
        (FIXED, 'Fixed amount'),
    ]

    code = models.CharField(max_length=30, unique=True)
    discount_type = models.CharField(max_length=10, choices=DISCOUNT_TYPE_CHOICES, default=PERCENTAGE)
    discount = models.DecimalField(
        max_digits=10, decimal_places=2,
        validators=[MinValueValidator(Decimal('0'))]
    )
    max_usage = models.PositiveIntegerField(default=1)
    used_count = models.PositiveIntegerField(default=0)
    is_active = models.BooleanField(default=True)
    expiry_date = models.DateTimeField()
    last_used = models.DateTimeField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    objects = CouponManager()

    class Meta:
        db_table = 'coupons'
        ordering = ['-created_at', '-id']

    def __str__(self):
        return self.code

    def save(self, *args, **kwargs):
        self.code = self.code.strip().upper()
        super().save(*args, **kwargs)

    @property
    def is_expired(self):
        return self.expiry_date < timezone.now()

    @property
    def is_used_up(self):
        return self.used_count >= self.max_usage

    @property
    def status_label(self):
        if not self.is_active:
            return 'Inactive'
        if self.is_expired:
            return 'Expired'
        if self.is_used_up:
            return 'Used Up'
        return 'Active'

    @property
    def discount_display(self):
        if self.discount_type == self.PERCENTAGE:
            return f"{self.discount.normalize():f}%"
        return f"৳{self.discount}"
