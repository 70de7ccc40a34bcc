# core/models.py
from django.db import models

DEFAULT_TSHIRTS_THUMBNAIL = 'https://images.unsplash.com/photo-1521572163474-6864f9cf17ab?w=400&h=400&fit=crop'
DEFAULT_FRUITS_THUMBNAIL = 'https://images.unsplash.com/photo-1619566636858-adf3ef46400b?w=400&h=400&fit=crop'
DEFAULT_DELIVERY_ICON = 'truck'
DEFAULT_QUALITY_ICON = 'shield-check'
DEFAULT_SUPPORT_ICON = 'zap'


class SiteSettings(models.Model):
    """Single row of storefront switches, payment numbers and artwork"""

    it_solutions_available = models.BooleanField(default=True)
    tshirt_page_available = models.BooleanField(default=True)

    # Mobile wallet numbers customers send payment to
    bkash_number = models.CharField(max_length=20, blank=True)
    nagad_number = models.CharField(max_length=20, blank=True)
    rocket_number = models.CharField(max_length=20, blank=True)

    tshirts_thumbnail = models.URLField(max_length=500, blank=True, default=DEFAULT_TSHIRTS_THUMBNAIL)
    fruits_thumbnail = models.URLField(max_length=500, blank=True, default=DEFAULT_FRUITS_THUMBNAIL)

    # Icon names shown on the home page feature cards
    delivery_icon = models.CharField(max_length=50, blank=True, default=DEFAULT_DELIVERY_ICON)
    quality_icon = models.CharField(max_length=50, blank=True, default=DEFAULT_QUALITY_ICON)
    support_icon = models.CharField(max_length=50, blank=True, default=DEFAULT_SUPPORT_ICON)

    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'site_settings'
        verbose_name = 'site settings'
        verbose_name_plural = 'site settings'

    def __str__(self):
        return 'Site settings'
