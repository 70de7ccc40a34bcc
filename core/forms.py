# core/forms.py
from django import forms
from .models import SiteSettings


class SiteSettingsForm(forms.ModelForm):
    class Meta:
        model = SiteSettings
        fields = [
            'it_solutions_available', 'tshirt_page_available',
            'bkash_number', 'nagad_number', 'rocket_number',
            'tshirts_thumbnail', 'fruits_thumbnail',
            'delivery_icon', 'quality_icon', 'support_icon',
        ]
        widgets = {
            'it_solutions_available': forms.CheckboxInput(attrs={'class': 'form-check-input'}),
            'tshirt_page_available': forms.CheckboxInput(attrs={'class': 'form-check-input'}),
            'bkash_number': forms.TextInput(attrs={'class': 'form-control'}),
            'nagad_number': forms.TextInput(attrs={'class': 'form-control'}),
            'rocket_number': forms.TextInput(attrs={'class': 'form-control'}),
            'tshirts_thumbnail': forms.URLInput(attrs={'class': 'form-control'}),
            'fruits_thumbnail': forms.URLInput(attrs={'class': 'form-control'}),
            'delivery_icon': forms.TextInput(attrs={'class': 'form-control'}),
            'quality_icon': forms.TextInput(attrs={'class': 'form-control'}),
            'support_icon': forms.TextInput(attrs={'class': 'form-control'}),
        }
