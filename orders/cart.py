import logging
from decimal import Decimal
from django.conf import settings
from products.models import Product, ProductVariant

logger = logging.getLogger(__name__)


class CartError(ValueError):
    """Raised when a cart operation cannot be applied"""


def make_item_id(product_id, variant_id=None):
    """Cart lines are keyed by product, or by product and variant."""
    if variant_id:
        return f"{product_id}-{variant_id}"
    return str(product_id)


class Cart:
    """
    Session-based shopping cart.
    Lines with the same product and variant are merged by summing quantities;
    prices are always read from the current product/variant records.
    """

    def __init__(self, request):
        """Initialize cart from session, discarding malformed data."""
        self.session = request.session
        self.session_key = getattr(settings, 'CART_SESSION_ID', 'cart')
        cart = self.session.get(self.session_key)
        if not self._is_valid(cart):
            if cart is not None:
                logger.warning("Discarding malformed cart data from session")
            cart = self.session[self.session_key] = {}
        self.cart = cart

    @staticmethod
    def _is_valid(cart):
        if not isinstance(cart, dict):
            return False
        for item in cart.values():
            if not isinstance(item, dict):
                return False
            if not isinstance(item.get('product_id'), int) or not isinstance(item.get('quantity'), int):
                return False
            variant_id = item.get('variant_id')
            if variant_id is not None and not isinstance(variant_id, int):
                return False
        return True

    def __iter__(self):
        """Iterate over cart lines with product and variant objects attached."""
        product_ids = {item['product_id'] for item in self.cart.values()}
        variant_ids = {item['variant_id'] for item in self.cart.values() if item.get('variant_id')}
        products = Product.objects.filter(id__in=product_ids, is_active=True).select_related('category').in_bulk()
        variants = ProductVariant.objects.filter(id__in=variant_ids).in_bulk()

        stale = []
        for item_id, item in self.cart.items():
            product = products.get(item['product_id'])
            variant = variants.get(item.get('variant_id')) if item.get('variant_id') else None
            if product is None or (item.get('variant_id') and variant is None):
                stale.append(item_id)
                continue

            unit_price = product.price_for(variant)
            yield {
                'id': item_id,
                'product': product,
                'variant': variant,
                'quantity': item['quantity'],
                'unit_price': unit_price,
                'line_total': unit_price * item['quantity'],
            }

        if stale:
            for item_id in stale:
                del self.cart[item_id]
            self.save()

    def __len__(self):
        """Return total quantity of items in cart."""
        return sum(item['quantity'] for item in self.cart.values())

    @property
    def is_empty(self):
        return not self.cart

    @property
    def item_count(self):
        """Number of distinct lines"""
        return len(self.cart)

    def add(self, product, quantity=1, variant=None):
        """
        Add product (and optional variant) to cart, merging with an existing line.

        Returns:
            The cart item id of the line that was created or updated.

        Raises:
            CartError: If the product is unavailable or stock is insufficient
        """
        if quantity < 1:
            raise CartError("Quantity must be at least 1")
        if not product.is_active:
            raise CartError(f"'{product.name}' is not available right now")
        if product.has_variants and variant is None:
            raise CartError(f"Please select an option for '{product.name}'")
        if variant is not None and variant.product_id != product.pk:
            raise CartError("Selected option does not belong to this product")

        item_id = make_item_id(product.pk, variant.pk if variant else None)
        current_quantity = self.cart.get(item_id, {}).get('quantity', 0)
        new_total = current_quantity + quantity

        available = variant.stock if variant is not None else product.stock
        if new_total > available:
            raise CartError(f"Not enough stock for '{product.name}'. Available: {available}")

        if item_id not in self.cart:
            self.cart[item_id] = {
                'product_id': product.pk,
                'variant_id': variant.pk if variant else None,
                'quantity': 0,
            }

        self.cart[item_id]['quantity'] = new_total
        self.save()
        return item_id

    def remove(self, item_id):
        """Remove a line completely from cart."""
        if item_id in self.cart:
            del self.cart[item_id]
            self.save()
            return True
        return False

    def update_quantity(self, item_id, quantity):
        """
        Set the quantity of a line. A quantity of zero or less removes it.

        Raises:
            CartError: If the line is unknown or stock is insufficient
        """
        if item_id not in self.cart:
            raise CartError("This item is no longer in your cart")

        if quantity <= 0:
            self.remove(item_id)
            return

        item = self.cart[item_id]
        if item.get('variant_id'):
            available = ProductVariant.objects.filter(pk=item['variant_id']).values_list('stock', flat=True).first()
        else:
            available = Product.objects.filter(pk=item['product_id']).values_list('stock', flat=True).first()

        if available is None:
            self.remove(item_id)
            raise CartError("This item is no longer available")
        if quantity > available:
            raise CartError(f"Not enough stock. Maximum: {available}")

        item['quantity'] = quantity
        self.save()

    def get_total(self):
        """Sum of unit price times quantity over all lines."""
        return sum((line['line_total'] for line in self), Decimal('0'))

    @property
    def total(self):
        return self.get_total()

    def to_json(self):
        """
        Convert cart to JSON-ready dictionary for AJAX responses.
        """
        items = []
        for line in self:
            product = line['product']
            variant = line['variant']
            items.append({
                'id': line['id'],
                'product_id': product.pk,
                'product_name': product.name,
                'product_image': product.image or None,
                'variant_id': variant.pk if variant else None,
                'variant_name': variant.name if variant else None,
                'unit_price': float(line['unit_price']),
                'quantity': line['quantity'],
                'line_total': float(line['line_total']),
            })

        return {
            'items': items,
            'count': len(self),
            'item_count': self.item_count,
            'has_items': not self.is_empty,
            'total': float(sum((Decimal(str(i['line_total'])) for i in items), Decimal('0'))),
        }

    def save(self):
        """Mark session as modified to ensure persistence."""
        self.session[self.session_key] = self.cart
        self.session.modified = True

    def clear(self):
        """Clear all items from cart."""
        self.cart = {}
        self.session.pop(self.session_key, None)
        self.session.modified = True
