# coupons/urls.py
from django.urls import path
from . import views

app_name = 'coupons'

urlpatterns = [
    path('apply/', views.ApplyCouponView.as_view(), name='apply'),
    path('remove/', views.RemoveCouponView.as_view(), name='remove'),

    # Admin
    path('dashboard/', views.AdminCouponListView.as_view(), name='admin_coupon_list'),
    path('dashboard/create/', views.AdminCouponCreateView.as_view(), name='admin_coupon_create'),
    path('dashboard/generate-code/', views.AdminCouponGenerateCodeView.as_view(), name='admin_coupon_generate_code'),
    path('dashboard/<int:coupon_id>/toggle/', views.AdminCouponToggleView.as_view(), name='admin_coupon_toggle'),
    path('dashboard/<int:coupon_id>/delete/', views.AdminCouponDeleteView.as_view(), name='admin_coupon_delete'),
]
