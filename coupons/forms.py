# coupons/forms.py
from datetime import timedelta
from decimal import Decimal
from django import forms
from django.utils import timezone
from .models import Coupon


class CouponApplyForm(forms.Form):
    code = forms.CharField(
        max_length=30,
        required=False,
        widget=forms.TextInput(attrs={
            'class': 'form-control',
            'placeholder': 'Coupon code'
        })
    )


class CouponForm(forms.ModelForm):
    class Meta:
        model = Coupon
        fields = ['code', 'discount_type', 'discount', 'max_usage', 'expiry_date', 'is_active']
        widgets = {
            'code': forms.TextInput(attrs={'class': 'form-control', 'style': 'text-transform: uppercase'}),
            'discount_type': forms.Select(attrs={'class': 'form-select'}),
            'discount': forms.NumberInput(attrs={'class': 'form-control', 'step': '0.01', 'min': '0'}),
            'max_usage': forms.NumberInput(attrs={'class': 'form-control', 'min': '1'}),
            'expiry_date': forms.DateTimeInput(
                attrs={'class': 'form-control', 'type': 'datetime-local'},
                format='%Y-%m-%dT%H:%M'
            ),
            'is_active': forms.CheckboxInput(attrs={'class': 'form-check-input'}),
        }

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.fields['expiry_date'].input_formats = ['%Y-%m-%dT%H:%M', '%Y-%m-%d %H:%M:%S', '%Y-%m-%d']
        if not self.instance.pk:
            self.fields['expiry_date'].initial = timezone.now() + timedelta(days=30)

    def clean_code(self):
        code = self.cleaned_data['code'].strip().upper()
        if not code:
            raise forms.ValidationError("Please enter a coupon code")
        queryset = Coupon.objects.filter(code__iexact=code)
        if self.instance.pk:
            queryset = queryset.exclude(pk=self.instance.pk)
        if queryset.exists():
            raise forms.ValidationError("A coupon with this code already exists")
        return code

    def clean_max_usage(self):
        max_usage = self.cleaned_data['max_usage']
        if max_usage < 1:
            raise forms.ValidationError("Maximum usage must be at least 1")
        return max_usage

    def clean(self):
        cleaned_data = super().clean()
        discount_type = cleaned_data.get('discount_type')
        discount = cleaned_data.get('discount')

        if discount is not None:
            if discount <= 0:
                self.add_error('discount', "Discount must be greater than zero")
            elif discount_type == Coupon.PERCENTAGE and discount > Decimal('100'):
                self.add_error('discount', "A percentage discount cannot exceed 100")

        return cleaned_data
