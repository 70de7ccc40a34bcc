# orders/context_processors.py
from .cart import Cart


def cart(request):
    """Cart badge numbers for the navigation bar"""
    cart = Cart(request)
    return {
        'cart_count': len(cart),
        'cart_has_items': not cart.is_empty,
    }
