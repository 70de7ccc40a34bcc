from decimal import Decimal

import pytest

from orders.delivery import BANGLADESH_DISTRICTS, DHAKA_AREA_DISTRICTS, calculate_delivery_charge


class TestDeliveryCharge:
    @pytest.mark.parametrize('district', sorted(DHAKA_AREA_DISTRICTS))
    def test_dhaka_area(self, district):
        assert calculate_delivery_charge(district) == Decimal('60')

    @pytest.mark.parametrize('district', ['Chittagong', 'Sylhet', "Cox's Bazar", 'Panchagarh'])
    def test_outside_dhaka(self, district):
        assert calculate_delivery_charge(district) == Decimal('120')

    def test_district_table(self):
        assert len(BANGLADESH_DISTRICTS) == 64
        assert len(set(BANGLADESH_DISTRICTS)) == 64
        assert DHAKA_AREA_DISTRICTS <= set(BANGLADESH_DISTRICTS)

    def test_charges_come_from_settings(self, settings):
        settings.OUTSIDE_DHAKA_DELIVERY_CHARGE = 150

        assert calculate_delivery_charge('Khulna') == Decimal('150')


@pytest.mark.django_db
class TestDeliveryChargeEndpoint:
    def test_returns_charge_for_district(self, client):
        response = client.get('/orders/checkout/delivery-charge/', {'district': 'Narsingdi'})

        assert response.status_code == 200
        assert response.json() == {'success': True, 'district': 'Narsingdi', 'delivery_charge': 60.0}

    def test_unknown_district(self, client):
        response = client.get('/orders/checkout/delivery-charge/', {'district': 'Atlantis'})

        assert response.status_code == 400
        assert response.json()['success'] is False
