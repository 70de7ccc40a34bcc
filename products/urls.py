from django.urls import path, include
from .views import admin_products, public_views

app_name = 'products'

# Admin Product URLs
admin_product_patterns = [
    path('', admin_products.AdminProductListView.as_view(), name='admin_product_list'),
    path('create/', admin_products.AdminProductCreateView.as_view(), name='admin_product_create'),
    path('<int:product_id>/edit/', admin_products.AdminProductUpdateView.as_view(), name='admin_product_edit'),
    path('<int:product_id>/delete/', admin_products.AdminProductDeleteView.as_view(), name='admin_product_delete'),
    path('<int:product_id>/variants/', admin_products.AdminVariantCreateView.as_view(), name='admin_variant_create'),
    path('<int:product_id>/variants/<int:variant_id>/delete/', admin_products.AdminVariantDeleteView.as_view(), name='admin_variant_delete'),
    path('<int:product_id>/reviews/<int:review_id>/delete/', admin_products.AdminReviewDeleteView.as_view(), name='admin_review_delete'),
]

urlpatterns = [
    path('', public_views.StoreView.as_view(), name='store'),
    path('shop/<slug:slug>/', public_views.CategoryShopView.as_view(), name='category'),
    path('<int:product_id>/', public_views.ProductDetailView.as_view(), name='product_detail'),
    path('<int:product_id>/reviews/', public_views.AddReviewView.as_view(), name='add_review'),

    # Admin routes - grouped under dashboard/
    path('dashboard/', include(admin_product_patterns)),
]
