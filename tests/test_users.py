import pytest

from users.models import User
from users.utils import validate_bangladesh_phone, validate_last_three_digits


class TestPhoneValidation:
    @pytest.mark.parametrize('phone', ['01712345678', '+8801712345678', '8801912345678', '0171-234 5678'])
    def test_valid_numbers(self, phone):
        assert validate_bangladesh_phone(phone) == (True, 'valid')

    @pytest.mark.parametrize('phone', ['', '0171234567', '01212345678', '+4401712345678', 'phone'])
    def test_invalid_numbers(self, phone):
        is_valid, message = validate_bangladesh_phone(phone)

        assert is_valid is False
        assert message.startswith('Phone number must look like')

    @pytest.mark.parametrize('value, expected', [('123', True), ('12', False), ('1234', False), ('1a3', False)])
    def test_last_three_digits(self, value, expected):
        assert validate_last_three_digits(value)[0] is expected


@pytest.mark.django_db
class TestUserModel:
    def test_email_is_lower_cased(self):
        user = User.objects.create_user(email='Someone@Example.COM', password='secret123')

        assert user.email == 'someone@example.com'

    def test_register_splits_name(self):
        user = User.objects.register('nadia@example.com', 'secret123', name='Nadia Islam Chowdhury')

        assert (user.first_name, user.last_name) == ('Nadia', 'Islam Chowdhury')
        assert user.check_password('secret123')

    def test_register_duplicate_email(self, customer):
        with pytest.raises(ValueError, match='already exists'):
            User.objects.register('CUSTOMER@example.com', 'secret123')

    def test_listed_admin_email(self, settings, customer):
        assert customer.is_shop_admin is False

        settings.ADMIN_EMAILS = ['customer@example.com']

        assert customer.is_shop_admin is True

    def test_staff_is_admin(self, shop_admin):
        assert shop_admin.is_shop_admin is True

    def test_complete_profile(self, customer):
        assert customer.has_complete_profile is True
        assert User(email='bare@example.com').has_complete_profile is False


@pytest.mark.django_db
class TestRegisterView:
    def test_register_signs_in(self, client):
        response = client.post('/users/register/', {
            'name': 'Tania Akter',
            'email': 'Tania@Example.com',
            'password': 'mango123',
            'confirm_password': 'mango123',
        })

        assert response.status_code == 302
        assert response.url == '/users/profile/'
        user = User.objects.get(email='tania@example.com')
        assert client.session['_auth_user_id'] == str(user.pk)

    def test_duplicate_email(self, client, customer):
        response = client.post('/users/register/', {
            'email': 'customer@example.com', 'password': 'mango123', 'confirm_password': 'mango123',
        })

        assert response.context['form'].errors['email'] == ['An account with this email already exists']

    def test_short_password(self, client):
        response = client.post('/users/register/', {
            'email': 'new@example.com', 'password': 'abc', 'confirm_password': 'abc',
        })

        assert response.context['form'].errors['password'] == ['Your password should be at least 6 characters long']

    def test_passwords_must_match(self, client):
        response = client.post('/users/register/', {
            'email': 'new@example.com', 'password': 'mango123', 'confirm_password': 'mango124',
        })

        assert response.context['form'].errors['confirm_password'] == ['Passwords do not match']
        assert not User.objects.filter(email='new@example.com').exists()


@pytest.mark.django_db
class TestLoginView:
    def test_login(self, client, customer):
        response = client.post('/users/login/', {'email': 'CUSTOMER@example.com', 'password': 'secret123'})

        assert response.status_code == 302
        assert response.url == '/users/profile/'

    def test_login_honours_safe_next(self, client, customer):
        response = client.post('/users/login/', {
            'email': 'customer@example.com', 'password': 'secret123', 'next': '/orders/checkout/',
        })

        assert response.url == '/orders/checkout/'

    def test_login_ignores_external_next(self, client, customer):
        response = client.post('/users/login/', {
            'email': 'customer@example.com', 'password': 'secret123', 'next': 'https://evil.example.com/',
        })

        assert response.url == '/users/profile/'

    def test_wrong_password(self, client, customer):
        response = client.post('/users/login/', {'email': 'customer@example.com', 'password': 'wrong'})

        assert response.status_code == 200
        assert response.context['form'].non_field_errors() == ['Invalid email or password. Please try again']

    def test_signed_in_user_skips_login_page(self, client, customer):
        client.force_login(customer)

        response = client.get('/users/login/')

        assert response.url == '/users/profile/'


@pytest.mark.django_db
class TestProfileView:
    def test_requires_login(self, client):
        response = client.get('/users/profile/')

        assert response.status_code == 302
        assert response.url.startswith('/users/login/')

    def test_phone_placeholder_matches_accepted_format(self, client, customer):
        client.force_login(customer)

        response = client.get('/users/profile/')

        assert response.status_code == 200
        assert 'placeholder="01XXXXXXXXX"' in response.content.decode()

    def test_update_delivery_details(self, client, customer):
        client.force_login(customer)

        response = client.post('/users/profile/', {
            'first_name': 'Rahim',
            'last_name': 'Uddin',
            'phone_number': '+8801712345678',
            'district': 'Sylhet',
            'address': 'Zindabazar, Sylhet',
        })

        assert response.status_code == 302
        customer.refresh_from_db()
        assert customer.district == 'Sylhet'
        assert customer.order_notifications is False

    def test_invalid_phone_rejected(self, client, customer):
        client.force_login(customer)

        response = client.post('/users/profile/', {'phone_number': '12345', 'district': 'Dhaka'})

        assert response.status_code == 200
        assert 'phone_number' in response.context['form'].errors
