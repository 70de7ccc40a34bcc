from django import forms
from django.core.exceptions import ValidationError
from .models import Product, ProductVariant, Category, Review


class ProductForm(forms.ModelForm):
    """
    Admin form for product creation and updates.
    """

    class Meta:
        model = Product
        fields = [
            'name', 'description', 'category', 'price',
            'image', 'stock', 'has_variants', 'is_active'
        ]
        widgets = {
            'name': forms.TextInput(attrs={
                'class': 'form-control',
                'placeholder': 'Product name'
            }),
            'description': forms.Textarea(attrs={
                'class': 'form-control',
                'rows': 4,
                'placeholder': 'Product description'
            }),
            'category': forms.Select(attrs={'class': 'form-select'}),
            'price': forms.NumberInput(attrs={
                'class': 'form-control',
                'min': '0',
                'step': '0.01'
            }),
            'image': forms.URLInput(attrs={
                'class': 'form-control',
                'placeholder': 'https://res.cloudinary.com/...'
            }),
            'stock': forms.NumberInput(attrs={
                'class': 'form-control',
                'min': '0'
            }),
            'has_variants': forms.CheckboxInput(attrs={'class': 'form-check-input'}),
            'is_active': forms.CheckboxInput(attrs={'class': 'form-check-input'}),
        }

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.fields['category'].required = True
        self.fields['category'].queryset = Category.objects.filter(is_active=True)

    def clean_price(self):
        price = self.cleaned_data.get('price')
        if price is not None and price <= 0:
            raise ValidationError('Price must be greater than zero')
        return price


class ProductVariantForm(forms.ModelForm):
    class Meta:
        model = ProductVariant
        fields = ['name', 'price', 'stock', 'is_default']
        widgets = {
            'name': forms.TextInput(attrs={
                'class': 'form-control',
                'placeholder': 'M, L, XL or 1kg, 5kg'
            }),
            'price': forms.NumberInput(attrs={'class': 'form-control', 'min': '0', 'step': '0.01'}),
            'stock': forms.NumberInput(attrs={'class': 'form-control', 'min': '0'}),
            'is_default': forms.CheckboxInput(attrs={'class': 'form-check-input'}),
        }

    def __init__(self, *args, product=None, **kwargs):
        self.product = product
        super().__init__(*args, **kwargs)
        if product is not None:
            self.instance.product = product

    def clean_name(self):
        name = self.cleaned_data['name'].strip()
        if self.product and self.product.variants.filter(name__iexact=name).exclude(pk=self.instance.pk).exists():
            raise ValidationError('This product already has a variant with that name')
        return name

    def clean(self):
        cleaned_data = super().clean()
        # Fruit amounts are priced individually; t-shirt sizes may inherit the product price
        category = getattr(self.product, 'category', None)
        if category and category.slug == Category.FRUITS and cleaned_data.get('price') is None:
            self.add_error('price', 'Price is required for fruit variants')
        return cleaned_data


class ReviewForm(forms.ModelForm):
    rating = forms.TypedChoiceField(
        choices=[(i, str(i)) for i in range(5, 0, -1)],
        coerce=int,
        initial=5,
        widget=forms.Select(attrs={'class': 'form-select'})
    )

    class Meta:
        model = Review
        fields = ['rating', 'comment']
        widgets = {
            'comment': forms.Textarea(attrs={
                'class': 'form-control',
                'rows': 3,
                'placeholder': 'Share your thoughts about this product'
            }),
        }
        error_messages = {
            'comment': {'required': 'Please write a comment for your review'},
        }

    def clean_comment(self):
        comment = (self.cleaned_data.get('comment') or '').strip()
        if not comment:
            raise ValidationError('Please write a comment for your review')
        return comment

