"""
Session cart behaviour: merging lines, stock checks, quantity updates
and recovery from stale or malformed session data.
"""
from decimal import Decimal

import pytest

from orders.cart import Cart, CartError, make_item_id


class TestItemIds:
    def test_product_only(self):
        assert make_item_id(7) == '7'

    def test_product_and_variant(self):
        assert make_item_id(7, 3) == '7-3'


@pytest.mark.django_db
class TestAddToCart:
    def test_same_product_and_variant_merge_into_one_line(self, session_request, mango):
        cart = Cart(session_request)
        one_kg = mango.variants.get(name='1 kg')

        first_id = cart.add(mango, 2, variant=one_kg)
        second_id = cart.add(mango, 3, variant=one_kg)

        assert first_id == second_id == f'{mango.pk}-{one_kg.pk}'
        assert cart.item_count == 1
        assert len(cart) == 5

    def test_different_variants_are_separate_lines(self, session_request, mango):
        cart = Cart(session_request)
        cart.add(mango, 1, variant=mango.variants.get(name='1 kg'))
        cart.add(mango, 1, variant=mango.variants.get(name='5 kg'))

        assert cart.item_count == 2

    def test_variant_required_for_products_with_variants(self, session_request, mango):
        with pytest.raises(CartError):
            Cart(session_request).add(mango, 1)

    def test_inactive_product_rejected(self, session_request, tshirt):
        tshirt.is_active = False
        tshirt.save()

        with pytest.raises(CartError, match='not available'):
            Cart(session_request).add(tshirt, 1)

    def test_quantity_above_stock_rejected(self, session_request, tshirt):
        cart = Cart(session_request)
        cart.add(tshirt, 8)

        with pytest.raises(CartError, match='Not enough stock'):
            cart.add(tshirt, 3)
        assert len(cart) == 8

    def test_cart_is_persisted_in_session(self, session_request, tshirt):
        Cart(session_request).add(tshirt, 2)

        assert session_request.session['cart'] == {
            str(tshirt.pk): {'product_id': tshirt.pk, 'variant_id': None, 'quantity': 2}
        }


@pytest.mark.django_db
class TestUpdateAndRemove:
    def test_update_quantity(self, session_request, tshirt):
        cart = Cart(session_request)
        item_id = cart.add(tshirt, 1)

        cart.update_quantity(item_id, 4)

        assert len(cart) == 4

    def test_zero_quantity_removes_line(self, session_request, tshirt):
        cart = Cart(session_request)
        item_id = cart.add(tshirt, 1)

        cart.update_quantity(item_id, 0)

        assert cart.is_empty

    def test_update_unknown_line(self, session_request):
        with pytest.raises(CartError):
            Cart(session_request).update_quantity('999', 1)

    def test_update_above_stock(self, session_request, tshirt):
        cart = Cart(session_request)
        item_id = cart.add(tshirt, 1)

        with pytest.raises(CartError, match='Maximum: 10'):
            cart.update_quantity(item_id, 11)

    def test_remove(self, session_request, tshirt):
        cart = Cart(session_request)
        item_id = cart.add(tshirt, 1)

        assert cart.remove(item_id) is True
        assert cart.remove(item_id) is False
        assert cart.is_empty

    def test_clear(self, session_request, tshirt):
        cart = Cart(session_request)
        cart.add(tshirt, 1)

        cart.clear()

        assert cart.is_empty
        assert 'cart' not in session_request.session


@pytest.mark.django_db
class TestTotals:
    def test_total_uses_variant_price_when_set(self, session_request, mango, tshirt):
        cart = Cart(session_request)
        cart.add(mango, 2, variant=mango.variants.get(name='5 kg'))
        cart.add(tshirt, 1)

        assert cart.get_total() == Decimal('1850.00')

    def test_variant_without_price_falls_back_to_product_price(self, session_request, tshirt):
        size = tshirt.variants.create(name='XL', stock=5)
        cart = Cart(session_request)
        cart.add(tshirt, 2, variant=size)

        assert cart.total == Decimal('900.00')

    def test_deleted_products_are_dropped(self, session_request, tshirt, mango):
        cart = Cart(session_request)
        cart.add(tshirt, 1)
        cart.add(mango, 1, variant=mango.variants.first())
        tshirt.delete()

        lines = list(cart)

        assert [line['product'] for line in lines] == [mango]
        assert cart.item_count == 1

    def test_malformed_session_data_resets_cart(self, session_request):
        session_request.session['cart'] = ['not', 'a', 'cart']

        cart = Cart(session_request)

        assert cart.is_empty
        assert session_request.session['cart'] == {}

    def test_to_json(self, session_request, tshirt):
        cart = Cart(session_request)
        cart.add(tshirt, 2)

        data = cart.to_json()

        assert data['count'] == 2
        assert data['has_items'] is True
        assert data['total'] == 900.0
        assert data['items'][0]['product_name'] == 'Classic Tee'

    def test_non_integer_variant_resets_cart(self, session_request, tshirt):
        session_request.session['cart'] = {
            f'{tshirt.pk}-x': {'product_id': tshirt.pk, 'variant_id': 'x', 'quantity': 1},
        }

        cart = Cart(session_request)

        assert list(cart) == []
        assert session_request.session['cart'] == {}
