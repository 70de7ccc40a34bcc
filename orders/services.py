# orders/services.py
import logging
from decimal import Decimal
from django.db import transaction
from django.db.models import F
from coupons.services import AppliedCoupon, CouponError, calculate_discount, redeem_coupon, validate_coupon
from core.services import payment_number_for
from products.models import Product, ProductVariant
from .delivery import calculate_delivery_charge
from .models import Order, OrderItem, OrderStatusHistory

logger = logging.getLogger(__name__)


class CheckoutError(ValueError):
    """Raised when an order cannot be placed"""


class CheckoutService:
    @staticmethod
    def get_summary(cart, district, coupon_code=None):
        """
        Price breakdown for the current cart.

        Returns:
            dict with lines, subtotal, delivery_charge, discount, coupon and grand_total
        """
        lines = list(cart)
        subtotal = sum((line['line_total'] for line in lines), Decimal('0'))
        delivery_charge = calculate_delivery_charge(district) if district else Decimal('0')

        coupon = None
        discount = Decimal('0')
        if coupon_code:
            coupon = validate_coupon(coupon_code)
            discount = calculate_discount(coupon, subtotal)

        return {
            'lines': lines,
            'subtotal': subtotal,
            'delivery_charge': delivery_charge,
            'discount': discount,
            'coupon': coupon,
            'grand_total': Order.calculate_grand_total(subtotal, delivery_charge, discount),
        }

    @staticmethod
    def place_order(request, cart, data):
        """
        Create an order from the cart inside one transaction.

        Stock is decremented, the applied coupon is redeemed and the cart and
        coupon are cleared from the session once the order is stored.

        Raises:
            CheckoutError: If the cart is empty, stock ran out or the coupon is no longer valid
        """
        if cart.is_empty:
            raise CheckoutError("Your cart is empty")

        applied_coupon = AppliedCoupon(request)
        user = request.user if request.user.is_authenticated else None

        with transaction.atomic():
            try:
                summary = CheckoutService.get_summary(cart, data['district'], applied_coupon.code)
            except CouponError as e:
                applied_coupon.clear()
                raise CheckoutError(f"{e}. The coupon has been removed from your order") from e

            if not summary['lines']:
                raise CheckoutError("Your cart is empty")

            CheckoutService._reserve_stock(summary['lines'])

            coupon = summary['coupon']
            if coupon and not redeem_coupon(coupon):
                applied_coupon.clear()
                raise CheckoutError(
                    "This coupon has reached its usage limit. The coupon has been removed from your order"
                )

            order = Order.objects.create(
                user=user,
                customer_name=data['name'],
                customer_email=data['email'],
                customer_phone=data['phone'],
                district=data['district'],
                address=data['address'],
                payment_method=data['payment_method'],
                payment_number=payment_number_for(data['payment_method']),
                transaction_id=data['transaction_id'],
                last_three_digits=data['last_three_digits'],
                subtotal=summary['subtotal'],
                delivery_charge=summary['delivery_charge'],
                discount=summary['discount'],
                coupon_code=coupon.code if coupon else '',
            )

            for line in summary['lines']:
                product = line['product']
                variant = line['variant']
                OrderItem.objects.create(
                    order=order,
                    product=product,
                    variant=variant,
                    product_name=product.name,
                    variant_name=variant.name if variant else '',
                    category=product.category.name if product.category else '',
                    image=product.image,
                    unit_price=line['unit_price'],
                    quantity=line['quantity'],
                )

            OrderStatusHistory.objects.create(
                order=order,
                new_status=order.status,
                changed_by=user,
                notes='Order placed',
            )

        cart.clear()
        applied_coupon.clear()
        logger.info(
            f"Order {order.order_number} placed ({'guest' if user is None else user.email}), "
            f"grand total {order.grand_total}"
        )
        return order

    @staticmethod
    def _reserve_stock(lines):
        """Decrement stock for each line, failing if any line is short."""
        for line in lines:
            product = line['product']
            variant = line['variant']
            quantity = line['quantity']

            if variant is not None:
                updated = ProductVariant.objects.filter(
                    pk=variant.pk, stock__gte=quantity
                ).update(stock=F('stock') - quantity)
            else:
                updated = Product.objects.filter(
                    pk=product.pk, stock__gte=quantity
                ).update(stock=F('stock') - quantity)

            if not updated:
                label = f"{product.name} ({variant.name})" if variant else product.name
                raise CheckoutError(f"Not enough stock for '{label}'. Please update your cart")


class OrderService:
    @staticmethod
    def update_status(order, status, changed_by=None, notes=''):
        """Change order status and record it in the status history."""
        valid_statuses = dict(Order.ORDER_STATUS_CHOICES)
        if status not in valid_statuses:
            raise ValueError(f"Invalid order status: {status}")

        previous_status = order.status
        if previous_status == status:
            return order

        with transaction.atomic():
            order.status = status
            order.save(update_fields=['status', 'updated_at'])
            OrderStatusHistory.objects.create(
                order=order,
                previous_status=previous_status,
                new_status=status,
                changed_by=changed_by,
                notes=notes,
            )

        logger.info(f"Order {order.order_number} status {previous_status} -> {status} by {changed_by}")
        return order

    @staticmethod
    def update_tracking_id(order, tracking_id):
        order.tracking_id = (tracking_id or '').strip()
        order.save(update_fields=['tracking_id', 'updated_at'])
        logger.info(f"Order {order.order_number} tracking id set to '{order.tracking_id}'")
        return order

    @staticmethod
    def delete_order(order):
        order_number = order.order_number
        order.delete()
        logger.info(f"Order {order_number} deleted")
        return order_number
