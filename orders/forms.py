# orders/forms.py
from django import forms
from django.core.exceptions import ValidationError
from users.validators import BangladeshPhoneValidator, LastThreeDigitsValidator
from .delivery import DISTRICT_CHOICES
from .models import Order


class CartAddForm(forms.Form):
    quantity = forms.IntegerField(
        min_value=1,
        initial=1,
        widget=forms.NumberInput(attrs={
            'class': 'form-control',
            'min': '1',
        })
    )
    variant_id = forms.IntegerField(required=False, widget=forms.HiddenInput())

    def __init__(self, *args, **kwargs):
        self.product = kwargs.pop('product', None)
        self.variant = None
        super().__init__(*args, **kwargs)

        # Set max value based on available stock
        if self.product:
            self.fields['quantity'].widget.attrs['max'] = str(self.product.available_stock)
            if self.product.has_variants:
                self.fields['variant_id'].widget = forms.Select(
                    choices=[(v.pk, v.name) for v in self.product.variants.all()],
                    attrs={'class': 'form-select'}
                )

    def clean_variant_id(self):
        variant_id = self.cleaned_data.get('variant_id')

        if self.product is None:
            return variant_id

        if variant_id:
            self.variant = self.product.variants.filter(pk=variant_id).first()
            if self.variant is None:
                raise ValidationError("Selected option does not belong to this product")
        elif self.product.has_variants:
            raise ValidationError(f"Please select an option for '{self.product.name}'")

        return variant_id

    def clean(self):
        cleaned_data = super().clean()
        quantity = cleaned_data.get('quantity')

        if self.product and quantity and not self.errors:
            # Basic check - cart will do final validation
            if not self.product.is_active:
                raise ValidationError(f"'{self.product.name}' is not available right now")
            available = self.variant.stock if self.variant else self.product.stock
            if quantity > available:
                raise ValidationError(f"Not enough stock for '{self.product.name}'. Available: {available}")

        return cleaned_data


class CartUpdateForm(forms.Form):
    quantity = forms.IntegerField(min_value=0)


class CheckoutForm(forms.Form):
    name = forms.CharField(
        max_length=100,
        widget=forms.TextInput(attrs={'class': 'form-control'}),
        label='Full name'
    )
    email = forms.EmailField(
        widget=forms.EmailInput(attrs={'class': 'form-control'}),
        label='Email'
    )
    phone = forms.CharField(
        max_length=14,
        validators=[BangladeshPhoneValidator()],
        widget=forms.TextInput(attrs={
            'class': 'form-control',
            'placeholder': '01XXXXXXXXX'
        }),
        label='Phone number'
    )
    district = forms.ChoiceField(
        choices=[('', 'Select district')] + DISTRICT_CHOICES,
        widget=forms.Select(attrs={'class': 'form-select'}),
        label='District'
    )
    address = forms.CharField(
        widget=forms.Textarea(attrs={
            'class': 'form-control',
            'rows': 3,
            'placeholder': 'House, road, area'
        }),
        label='Delivery address'
    )
    payment_method = forms.ChoiceField(
        choices=Order.PAYMENT_METHOD_CHOICES,
        initial=Order.PAYMENT_BKASH,
        widget=forms.RadioSelect,
        label='Payment method'
    )
    transaction_id = forms.CharField(
        max_length=50,
        widget=forms.TextInput(attrs={'class': 'form-control'}),
        label='Transaction ID'
    )
    last_three_digits = forms.CharField(
        max_length=3,
        validators=[LastThreeDigitsValidator()],
        widget=forms.TextInput(attrs={
            'class': 'form-control',
            'placeholder': 'XXX',
            'inputmode': 'numeric'
        }),
        label='Last 3 digits of your number'
    )

    @classmethod
    def initial_for(cls, user, default_district=''):
        """Prefill checkout fields from a signed-in user's profile."""
        initial = {'district': default_district}
        if user.is_authenticated:
            initial.update({
                'name': user.get_full_name() if user.first_name else '',
                'email': user.email,
                'phone': user.phone_number,
                'address': user.address,
            })
            if user.district:
                initial['district'] = user.district
        return initial

    def clean_name(self):
        return self.cleaned_data['name'].strip()

    def clean_transaction_id(self):
        return self.cleaned_data['transaction_id'].strip()


class OrderStatusForm(forms.Form):
    status = forms.ChoiceField(choices=Order.ORDER_STATUS_CHOICES)
    notes = forms.CharField(required=False, max_length=500)


class TrackingIdForm(forms.Form):
    tracking_id = forms.CharField(max_length=100, required=False)
