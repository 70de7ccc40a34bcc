# Admin views
from .admin_products import (
    AdminProductListView,
    AdminProductCreateView,
    AdminProductUpdateView,
    AdminProductDeleteView,
    AdminVariantCreateView,
    AdminVariantDeleteView,
    AdminReviewDeleteView,
)

# Public views
from .public_views import (
    StoreView,
    CategoryShopView,
    ProductDetailView,
    AddReviewView,
)

__all__ = [
    # Admin Product Views
    'AdminProductListView',
    'AdminProductCreateView',
    'AdminProductUpdateView',
    'AdminProductDeleteView',
    'AdminVariantCreateView',
    'AdminVariantDeleteView',
    'AdminReviewDeleteView',

    # Public Views
    'StoreView',
    'CategoryShopView',
    'ProductDetailView',
    'AddReviewView',
]
