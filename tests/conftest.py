from datetime import timedelta
from decimal import Decimal

import pytest
from django.contrib.auth.models import AnonymousUser
from django.contrib.sessions.backends.db import SessionStore
from django.test import RequestFactory
from django.utils import timezone

from coupons.models import Coupon
from products.models import Category, Product, ProductVariant
from users.models import User


@pytest.fixture
def fruits(db):
    return Category.objects.create(name='Fruits', slug=Category.FRUITS)


@pytest.fixture
def tshirts(db):
    return Category.objects.create(name='T-Shirts', slug=Category.TSHIRTS)


@pytest.fixture
def mango(fruits):
    """Fruit sold by weight, variant prices override the product price"""
    product = Product.objects.create(
        name='Himsagar Mango', category=fruits, price=Decimal('150.00'), stock=0,
    )
    ProductVariant.objects.create(product=product, name='1 kg', price=Decimal('150.00'), stock=20)
    ProductVariant.objects.create(product=product, name='5 kg', price=Decimal('700.00'), stock=4)
    product.refresh_from_db()
    return product


@pytest.fixture
def tshirt(tshirts):
    """T-shirt without variants"""
    return Product.objects.create(
        name='Classic Tee', category=tshirts, price=Decimal('450.00'), stock=10,
    )


@pytest.fixture
def customer(db):
    return User.objects.create_user(
        email='customer@example.com', password='secret123',
        first_name='Rahim', last_name='Uddin', phone_number='01712345678',
        district='Gazipur', address='House 4, Road 2, Tongi',
    )


@pytest.fixture
def shop_admin(db):
    return User.objects.create_user(email='owner@example.com', password='secret123', is_staff=True)


@pytest.fixture
def make_coupon(db):
    def _make(code='SAVE10', discount_type=Coupon.PERCENTAGE, discount=Decimal('10'), **kwargs):
        kwargs.setdefault('max_usage', 5)
        kwargs.setdefault('expiry_date', timezone.now() + timedelta(days=7))
        return Coupon.objects.create(code=code, discount_type=discount_type, discount=discount, **kwargs)
    return _make


@pytest.fixture
def session_request(db):
    """Request with a real database session, for cart and coupon helpers"""
    request = RequestFactory().get('/')
    request.session = SessionStore()
    request.user = AnonymousUser()
    return request


@pytest.fixture
def checkout_data():
    return {
        'name': 'Karim Ahmed',
        'email': 'karim@example.com',
        'phone': '01812345678',
        'district': 'Dhaka',
        'address': 'Flat 3B, Dhanmondi 27',
        'payment_method': 'bKash',
        'transaction_id': 'TRX12345',
        'last_three_digits': '678',
    }
