"""
Order history, invoices and the admin side of orders:
status changes, tracking ids, deletion and dashboard numbers.
"""
from decimal import Decimal

import pytest

from orders.models import Order, OrderItem, OrderStatusHistory
from orders.services import OrderService
from users.models import User


@pytest.fixture
def make_order(db):
    def _make(user=None, status=Order.STATUS_PENDING, subtotal='900.00', **kwargs):
        defaults = {
            'customer_name': 'Karim Ahmed',
            'customer_email': 'karim@example.com',
            'customer_phone': '01812345678',
            'district': 'Dhaka',
            'address': 'Flat 3B, Dhanmondi 27',
            'transaction_id': 'TRX12345',
            'last_three_digits': '678',
            'delivery_charge': Decimal('60'),
        }
        defaults.update(kwargs)
        order = Order.objects.create(user=user, status=status, subtotal=Decimal(subtotal), **defaults)
        OrderItem.objects.create(
            order=order, product_name='Classic Tee', unit_price=Decimal(subtotal), quantity=1,
        )
        return order
    return _make


@pytest.mark.django_db
class TestOrderModel:
    def test_order_number_and_grand_total(self, make_order):
        order = make_order(subtotal='500.00', discount=Decimal('50'))

        assert order.order_number.startswith('ORD-')
        assert len(order.order_number) == len('ORD-250101-1234')
        assert order.grand_total == Decimal('510.00')
        assert order.is_guest is True
        assert order.has_discount is True

    def test_line_total(self, make_order):
        order = make_order()
        item = OrderItem.objects.create(order=order, product_name='Mango', unit_price=Decimal('150'), quantity=3)

        assert item.line_total == Decimal('450')
        assert order.items_count == 4

    def test_visibility(self, make_order, customer, shop_admin):
        order = make_order(user=customer)
        stranger = User.objects.create_user(email='stranger@example.com', password='secret123')

        assert order.can_be_viewed_by(customer)
        assert order.can_be_viewed_by(shop_admin)
        assert not order.can_be_viewed_by(stranger)


@pytest.mark.django_db
class TestOrderService:
    def test_update_status_records_history(self, make_order, shop_admin):
        order = make_order()

        OrderService.update_status(order, Order.STATUS_SHIPPED, shop_admin, 'Handed to courier')

        order.refresh_from_db()
        assert order.status == Order.STATUS_SHIPPED
        entry = OrderStatusHistory.objects.for_order(order).get()
        assert (entry.previous_status, entry.new_status, entry.changed_by, entry.notes) == (
            'pending', 'shipped', shop_admin, 'Handed to courier'
        )

    def test_same_status_is_a_no_op(self, make_order):
        order = make_order()

        OrderService.update_status(order, Order.STATUS_PENDING)

        assert not OrderStatusHistory.objects.exists()

    def test_unknown_status(self, make_order):
        with pytest.raises(ValueError, match='Invalid order status'):
            OrderService.update_status(make_order(), 'lost')

    def test_tracking_id_is_trimmed(self, make_order):
        order = OrderService.update_tracking_id(make_order(), '  PATHAO-991  ')

        order.refresh_from_db()
        assert order.tracking_id == 'PATHAO-991'

    def test_delete_removes_items(self, make_order):
        order = make_order()

        assert OrderService.delete_order(order) == order.order_number
        assert not Order.objects.exists()
        assert not OrderItem.objects.exists()


@pytest.mark.django_db
class TestOrderManager:
    def test_status_counts_include_every_status(self, make_order):
        make_order()
        make_order()
        make_order(status=Order.STATUS_DELIVERED)

        assert Order.objects.status_counts() == {
            'pending': 2, 'processing': 0, 'shipped': 0, 'delivered': 1,
        }

    def test_revenue_counts_delivered_orders_only(self, make_order):
        make_order(status=Order.STATUS_DELIVERED, subtotal='1000.00')
        make_order(status=Order.STATUS_DELIVERED, subtotal='440.00')
        make_order(status=Order.STATUS_SHIPPED, subtotal='5000.00')

        assert Order.objects.total_revenue() == Decimal('1560.00')

    def test_no_revenue(self):
        assert Order.objects.total_revenue() == Decimal('0')

    def test_for_user_and_total_spent(self, make_order, customer):
        mine = make_order(user=customer, subtotal='300.00')
        make_order()

        assert list(Order.objects.for_user(customer)) == [mine]
        assert Order.objects.user_total_spent(customer) == Decimal('360.00')

    def test_search(self, make_order):
        order = make_order(transaction_id='8N7A6D5C')
        make_order(customer_name='Someone Else')

        assert list(Order.objects.search('8n7a')) == [order]


@pytest.mark.django_db
class TestCustomerOrderPages:
    def test_my_orders(self, client, make_order, customer):
        mine = make_order(user=customer)
        make_order()
        client.force_login(customer)

        response = client.get('/orders/my-orders/')

        assert list(response.context['orders']) == [mine]

    def test_invoice_for_owner(self, client, make_order, customer):
        order = make_order(user=customer)
        client.force_login(customer)

        response = client.get(f'/orders/{order.order_number}/invoice/')

        assert response.status_code == 200
        assert order.order_number in response.content.decode()

    def test_invoice_for_admin(self, client, make_order, customer, shop_admin):
        order = make_order(user=customer)
        client.force_login(shop_admin)

        assert client.get(f'/orders/{order.order_number}/invoice/').status_code == 200

    def test_other_customers_get_404(self, client, make_order, customer):
        order = make_order(user=customer)
        stranger = User.objects.create_user(email='stranger@example.com', password='secret123')
        client.force_login(stranger)

        assert client.get(f'/orders/{order.order_number}/').status_code == 404
        assert client.get(f'/orders/{order.order_number}/invoice/').status_code == 404

    def test_guest_confirmation_needs_placing_session(self, client, make_order):
        order = make_order()

        assert client.get(f'/orders/{order.order_number}/confirmation/').status_code == 404


@pytest.mark.django_db
class TestAdminOrderViews:
    def test_list_filters_by_status(self, client, make_order, shop_admin):
        make_order()
        delivered = make_order(status=Order.STATUS_DELIVERED)
        client.force_login(shop_admin)

        response = client.get('/orders/dashboard/all/', {'status': 'delivered'})

        assert list(response.context['orders']) == [delivered]
        assert response.context['status_counts']['pending'] == 1

    def test_change_status_via_ajax(self, client, make_order, shop_admin):
        order = make_order()
        client.force_login(shop_admin)

        response = client.post(
            f'/orders/dashboard/{order.order_number}/status/',
            {'status': 'processing', 'notes': 'Payment verified'},
            HTTP_X_REQUESTED_WITH='XMLHttpRequest',
        )

        assert response.json()['status'] == 'processing'
        assert OrderStatusHistory.objects.get(order=order).changed_by == shop_admin

    def test_invalid_status_rejected(self, client, make_order, shop_admin):
        order = make_order()
        client.force_login(shop_admin)

        response = client.post(
            f'/orders/dashboard/{order.order_number}/status/', {'status': 'lost'},
            HTTP_X_REQUESTED_WITH='XMLHttpRequest',
        )

        assert response.status_code == 400
        order.refresh_from_db()
        assert order.status == Order.STATUS_PENDING

    def test_set_tracking_id(self, client, make_order, shop_admin):
        order = make_order()
        client.force_login(shop_admin)

        client.post(f'/orders/dashboard/{order.order_number}/tracking/', {'tracking_id': 'RDX-1002'})

        order.refresh_from_db()
        assert order.tracking_id == 'RDX-1002'

    def test_delete(self, client, make_order, shop_admin):
        order = make_order()
        client.force_login(shop_admin)

        response = client.post(f'/orders/dashboard/{order.order_number}/delete/')

        assert response.url == '/orders/dashboard/all/'
        assert not Order.objects.exists()

    def test_customers_cannot_change_orders(self, client, make_order, customer):
        order = make_order(user=customer)
        client.force_login(customer)

        client.post(f'/orders/dashboard/{order.order_number}/status/', {'status': 'delivered'})

        order.refresh_from_db()
        assert order.status == Order.STATUS_PENDING

    def test_dashboard(self, client, make_order, shop_admin):
        make_order(status=Order.STATUS_DELIVERED, subtotal='940.00')
        client.force_login(shop_admin)

        response = client.get('/dashboard/')

        stats = response.context['stats']
        assert stats['total_orders'] == 1
        assert stats['revenue'] == Decimal('1000.00')

    def test_dashboard_requires_sign_in(self, client):
        response = client.get('/dashboard/')

        assert response.url.startswith('/users/login/')
