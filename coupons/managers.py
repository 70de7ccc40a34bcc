# coupons/managers.py
from django.db import models
from django.utils import timezone


class CouponManager(models.Manager):
    def get_by_code(self, code):
        """Case-insensitive lookup. Returns None when no coupon matches."""
        code = (code or '').strip()
        if not code:
            return None
        return self.filter(code__iexact=code).first()

    def active(self):
        return self.filter(is_active=True)

    def usable(self):
        """Active, unexpired coupons with uses left"""
        return self.active().filter(
            expiry_date__gte=timezone.now(),
            used_count__lt=models.F('max_usage')
        )
