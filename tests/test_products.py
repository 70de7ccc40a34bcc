from decimal import Decimal

import pytest

from core.services import update_site_settings
from products.models import Product, ProductVariant, Review


@pytest.mark.django_db
class TestVariants:
    def test_first_variant_becomes_default(self, mango):
        variants = list(mango.variants.all())

        assert [v.is_default for v in variants] == [True, False]
        assert mango.has_variants is True
        assert mango.default_variant.name == '1 kg'

    def test_only_one_default_per_product(self, mango):
        ProductVariant.objects.create(product=mango, name='10 kg', price=Decimal('1300.00'), stock=2, is_default=True)

        defaults = mango.variants.filter(is_default=True)
        assert [v.name for v in defaults] == ['10 kg']

    def test_variant_price_overrides_product_price(self, mango, tshirt):
        five_kg = mango.variants.get(name='5 kg')
        size = tshirt.variants.create(name='M', stock=3)

        assert five_kg.effective_price == Decimal('700.00')
        assert size.effective_price == Decimal('450.00')

    def test_available_stock_sums_variants(self, mango, tshirt):
        assert mango.available_stock == 24
        assert tshirt.available_stock == 10
        assert mango.is_available is True

    def test_slug_is_unique(self, fruits):
        first = Product.objects.create(name='Litchi', category=fruits, price=Decimal('300'))
        second = Product.objects.create(name='Litchi', category=fruits, price=Decimal('320'))

        assert first.slug == 'litchi'
        assert second.slug == 'litchi-2'


@pytest.mark.django_db
class TestReviews:
    def test_rating_without_reviews(self, tshirt):
        assert tshirt.get_rating() == {'average': 0, 'count': 0}

    def test_rating_average_is_rounded(self, tshirt, customer, shop_admin):
        Review.objects.create(product=tshirt, user=customer, rating=5, comment='Great fit')
        Review.objects.create(product=tshirt, user=shop_admin, rating=4, comment='Good')
        Review.objects.create(product=tshirt, user=customer, rating=4, comment='Washed well')

        assert tshirt.get_rating() == {'average': 4.3, 'count': 3}

    def test_rating_half_rounds_up(self, tshirt, customer):
        for rating in (5, 4, 4, 4):
            Review.objects.create(product=tshirt, user=customer, rating=rating, comment='Fits well')

        assert tshirt.get_rating() == {'average': 4.3, 'count': 4}

    def test_reviews_newest_first(self, tshirt, customer):
        older = Review.objects.create(product=tshirt, user=customer, rating=3, comment='Okay')
        newer = Review.objects.create(product=tshirt, user=customer, rating=5, comment='Better after a wash')

        assert list(Review.objects.for_product(tshirt)) == [newer, older]

    def test_signed_in_user_can_review(self, client, customer, tshirt):
        client.force_login(customer)

        response = client.post(f'/products/{tshirt.pk}/reviews/', {'rating': '4', 'comment': 'Soft cotton'})

        assert response.status_code == 302
        review = Review.objects.get()
        assert (review.user, review.rating, review.comment) == (customer, 4, 'Soft cotton')

    def test_comment_is_required(self, client, customer, tshirt):
        client.force_login(customer)

        response = client.post(f'/products/{tshirt.pk}/reviews/', {'rating': '4', 'comment': '  '}, follow=True)

        assert Review.objects.count() == 0
        messages = [str(m) for m in response.context['messages']]
        assert 'Please write a comment for your review' in messages

    def test_guest_is_sent_to_login(self, client, tshirt):
        response = client.post(f'/products/{tshirt.pk}/reviews/', {'rating': '5', 'comment': 'Nice'})

        assert response.status_code == 302
        assert response.url.startswith('/users/login/')
        assert Review.objects.count() == 0


@pytest.mark.django_db
class TestCatalogPages:
    def test_product_detail_preselects_default_variant(self, client, mango):
        response = client.get(f'/products/{mango.pk}/')

        assert response.status_code == 200
        assert response.context['selected_variant'].name == '1 kg'
        assert response.context['rating'] == {'average': 0, 'count': 0}

    def test_inactive_product_is_hidden(self, client, tshirt):
        tshirt.is_active = False
        tshirt.save()

        assert client.get(f'/products/{tshirt.pk}/').status_code == 404

    def test_category_shop(self, client, mango, tshirt):
        response = client.get('/products/shop/fruits/')

        assert response.status_code == 200
        assert list(response.context['products']) == [mango]

    def test_tshirt_shop_can_be_switched_off(self, client, tshirt):
        update_site_settings(tshirt_page_available=False)

        response = client.get('/products/shop/t-shirts/')

        assert response.status_code == 302
        assert response.url == '/'

    def test_store_search(self, client, mango, tshirt):
        response = client.get('/products/', {'q': 'mango'})

        assert list(response.context['products']) == [mango]


@pytest.mark.django_db
class TestProductAdmin:
    def test_customers_are_turned_away(self, client, customer):
        client.force_login(customer)

        response = client.get('/products/dashboard/')

        assert response.status_code == 302
        assert response.url == '/'

    def test_create_product(self, client, shop_admin, fruits):
        client.force_login(shop_admin)

        response = client.post('/products/dashboard/create/', {
            'name': 'Green Guava',
            'description': 'Crunchy and sweet',
            'category': fruits.pk,
            'price': '120.00',
            'image': 'https://res.cloudinary.com/demo/image/upload/guava.jpg',
            'stock': '30',
            'is_active': 'on',
        })

        assert response.status_code == 302
        product = Product.objects.get(name='Green Guava')
        assert product.slug == 'green-guava'
        assert product.price == Decimal('120.00')

    def test_zero_price_rejected(self, client, shop_admin, fruits):
        client.force_login(shop_admin)

        response = client.post('/products/dashboard/create/', {
            'name': 'Free Guava', 'category': fruits.pk, 'price': '0', 'stock': '1',
        })

        assert response.status_code == 200
        assert 'price' in response.context['form'].errors

    def test_fruit_variant_needs_price(self, client, shop_admin, mango):
        client.force_login(shop_admin)

        client.post(f'/products/dashboard/{mango.pk}/variants/', {'name': '2 kg', 'stock': '5'})

        assert not mango.variants.filter(name='2 kg').exists()

    def test_duplicate_variant_name_rejected(self, client, shop_admin, mango):
        client.force_login(shop_admin)

        client.post(f'/products/dashboard/{mango.pk}/variants/', {'name': '5 KG', 'price': '690', 'stock': '5'})

        assert mango.variants.count() == 2

    def test_deleting_default_variant_promotes_next(self, client, shop_admin, mango):
        client.force_login(shop_admin)
        one_kg = mango.variants.get(name='1 kg')

        client.post(f'/products/dashboard/{mango.pk}/variants/{one_kg.pk}/delete/')

        assert mango.variants.get().is_default is True

    def test_deleting_last_variant_clears_flag(self, client, shop_admin, tshirt):
        client.force_login(shop_admin)
        size = tshirt.variants.create(name='L', stock=2)

        client.post(f'/products/dashboard/{tshirt.pk}/variants/{size.pk}/delete/')

        tshirt.refresh_from_db()
        assert tshirt.has_variants is False

    def test_delete_product_via_ajax(self, client, shop_admin, tshirt):
        client.force_login(shop_admin)

        response = client.post(
            f'/products/dashboard/{tshirt.pk}/delete/', HTTP_X_REQUESTED_WITH='XMLHttpRequest'
        )

        assert response.json() == {'success': True, 'message': 'Product "Classic Tee" deleted successfully'}
        assert not Product.objects.filter(pk=tshirt.pk).exists()
