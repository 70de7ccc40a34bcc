# coupons/services.py
import logging
import random
import string
from decimal import Decimal, ROUND_HALF_UP
from django.conf import settings
from django.db.models import F
from django.utils import timezone
from .models import Coupon

logger = logging.getLogger(__name__)

CODE_ALPHABET = string.ascii_uppercase + string.digits
CODE_LENGTH = 8


class CouponError(ValueError):
    """Raised when a coupon cannot be applied"""


def get_coupon_by_code(code):
    return Coupon.objects.get_by_code(code)


def validate_coupon(code):
    """
    Look up a coupon and check it can be used right now.

    Returns:
        The Coupon instance.

    Raises:
        CouponError: With the first failing check's message
    """
    code = (code or '').strip()
    if not code:
        raise CouponError("Please enter a coupon code")

    coupon = get_coupon_by_code(code)
    if coupon is None:
        raise CouponError("Coupon code not found")
    if not coupon.is_active:
        raise CouponError("This coupon is no longer active")
    if coupon.is_expired:
        raise CouponError("This coupon has expired")
    if coupon.is_used_up:
        raise CouponError("This coupon has reached its usage limit")

    return coupon


def calculate_discount(coupon, total):
    """Discount for a cart total, never more than the total itself."""
    total = Decimal(total)
    if coupon.discount_type == Coupon.PERCENTAGE:
        amount = total * coupon.discount / Decimal('100')
    else:
        amount = Decimal(coupon.discount)

    amount = min(amount, total)
    return amount.quantize(Decimal('0.01'), rounding=ROUND_HALF_UP)


def use_coupon(code):
    """
    Record one redemption of a coupon.

    Unknown codes are logged and ignored so an order is never lost because
    its coupon was deleted in the meantime.
    """
    updated = Coupon.objects.filter(code__iexact=code).update(
        used_count=F('used_count') + 1,
        last_used=timezone.now()
    )
    if not updated:
        logger.warning(f"Tried to use unknown coupon '{code}'")
        return False

    logger.info(f"Coupon '{code.upper()}' redeemed")
    return True


def redeem_coupon(coupon):
    """
    Record one redemption only while the coupon is still usable.

    The usage cap is checked in the same UPDATE, so concurrent checkouts
    cannot push used_count past max_usage.

    Returns:
        bool: False if the coupon was used up, disabled or expired meanwhile
    """
    now = timezone.now()
    updated = Coupon.objects.filter(
        pk=coupon.pk,
        is_active=True,
        expiry_date__gte=now,
        used_count__lt=F('max_usage'),
    ).update(used_count=F('used_count') + 1, last_used=now)
    if updated:
        logger.info(f"Coupon '{coupon.code}' redeemed")
    return bool(updated)


def generate_code(length=CODE_LENGTH):
    """Random coupon code that is not taken yet"""
    while True:
        code = ''.join(random.choices(CODE_ALPHABET, k=length))
        if not Coupon.objects.filter(code=code).exists():
            return code


def toggle_coupon(coupon):
    coupon.is_active = not coupon.is_active
    coupon.save(update_fields=['is_active'])
    logger.info(f"Coupon '{coupon.code}' {'activated' if coupon.is_active else 'deactivated'}")
    return coupon


class AppliedCoupon:
    """
    Coupon code remembered in the session until checkout.
    The discount is always recomputed from the current cart total.
    """

    def __init__(self, request):
        self.session = request.session
        self.session_key = getattr(settings, 'COUPON_SESSION_ID', 'applied_coupon')

    @property
    def code(self):
        return self.session.get(self.session_key)

    def apply(self, code, total):
        """
        Validate and remember a coupon for the cart.

        Returns:
            tuple: (coupon, discount)
        """
        try:
            coupon = validate_coupon(code)
        except CouponError as e:
            logger.info(f"Coupon '{code}' rejected: {e}")
            raise

        discount = calculate_discount(coupon, total)
        self.session[self.session_key] = coupon.code
        self.session.modified = True
        return coupon, discount

    def get(self, total):
        """
        Currently applied coupon and its discount, or (None, 0).
        A coupon that stopped being valid is dropped from the session.
        """
        if not self.code:
            return None, Decimal('0')

        try:
            coupon = validate_coupon(self.code)
        except CouponError as e:
            logger.info(f"Dropping applied coupon '{self.code}': {e}")
            self.clear()
            return None, Decimal('0')

        return coupon, calculate_discount(coupon, total)

    def clear(self):
        self.session.pop(self.session_key, None)
        self.session.modified = True
