# orders/urls.py
from django.urls import path
from . import views

app_name = 'orders'

urlpatterns = [
    # Cart URLs
    path('cart/', views.CartDetailView.as_view(), name='cart_detail'),
    path('cart/add/<int:product_id>/', views.AddToCartView.as_view(), name='add_to_cart'),
    path('cart/update/<str:item_id>/', views.UpdateCartItemView.as_view(), name='update_cart_item'),
    path('cart/remove/<str:item_id>/', views.RemoveCartItemView.as_view(), name='remove_cart_item'),
    path('cart/clear/', views.ClearCartView.as_view(), name='clear_cart'),

    # Checkout & Orders
    path('checkout/', views.CheckoutView.as_view(), name='checkout'),
    path('checkout/delivery-charge/', views.DeliveryChargeView.as_view(), name='delivery_charge'),
    path('my-orders/', views.MyOrdersView.as_view(), name='my_orders'),
    path('<str:order_number>/', views.OrderDetailView.as_view(), name='order_detail'),
    path('<str:order_number>/confirmation/', views.OrderConfirmationView.as_view(), name='order_confirmation'),
    path('<str:order_number>/invoice/', views.InvoiceView.as_view(), name='invoice'),

    # Admin
    path('dashboard/all/', views.AdminOrderListView.as_view(), name='admin_order_list'),
    path('dashboard/<str:order_number>/status/', views.AdminOrderStatusView.as_view(), name='admin_order_status'),
    path('dashboard/<str:order_number>/tracking/', views.AdminOrderTrackingView.as_view(), name='admin_order_tracking'),
    path('dashboard/<str:order_number>/delete/', views.AdminOrderDeleteView.as_view(), name='admin_order_delete'),
]
