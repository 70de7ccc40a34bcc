# core/services.py
import logging
from django.conf import settings
from .models import (
    SiteSettings, DEFAULT_TSHIRTS_THUMBNAIL, DEFAULT_FRUITS_THUMBNAIL,
    DEFAULT_DELIVERY_ICON, DEFAULT_QUALITY_ICON, DEFAULT_SUPPORT_ICON,
)

logger = logging.getLogger(__name__)

SETTINGS_PK = 1

# Fields that fall back to a default whenever they are left blank
FALLBACKS = {
    'tshirts_thumbnail': DEFAULT_TSHIRTS_THUMBNAIL,
    'fruits_thumbnail': DEFAULT_FRUITS_THUMBNAIL,
    'delivery_icon': DEFAULT_DELIVERY_ICON,
    'quality_icon': DEFAULT_QUALITY_ICON,
    'support_icon': DEFAULT_SUPPORT_ICON,
}

PAYMENT_NUMBER_FIELDS = {
    'bKash': 'bkash_number',
    'Nagad': 'nagad_number',
    'Rocket': 'rocket_number',
}


def default_settings():
    payment_number = settings.DEFAULT_PAYMENT_NUMBER
    return {
        'it_solutions_available': True,
        'tshirt_page_available': True,
        'bkash_number': payment_number,
        'nagad_number': payment_number,
        'rocket_number': payment_number,
        **FALLBACKS,
    }


def get_site_settings():
    """
    Return the site settings row, creating it with defaults when missing.
    Blank artwork fields are filled in with their defaults.
    """
    site_settings, created = SiteSettings.objects.get_or_create(
        pk=SETTINGS_PK, defaults=default_settings()
    )
    if created:
        logger.info("Created default site settings")
        return site_settings

    for field, default in FALLBACKS.items():
        if not getattr(site_settings, field):
            setattr(site_settings, field, default)
    return site_settings


def update_site_settings(**fields):
    """
    Partially update site settings.

    Raises:
        ValueError: If an unknown field is given
    """
    site_settings = get_site_settings()
    allowed = set(default_settings())
    unknown = set(fields) - allowed
    if unknown:
        raise ValueError(f"Unknown site settings: {', '.join(sorted(unknown))}")

    for field, value in fields.items():
        setattr(site_settings, field, value)
    site_settings.save()

    logger.info(f"Site settings updated: {', '.join(sorted(fields))}")
    return site_settings


def payment_number_for(method, site_settings=None):
    """Wallet number customers pay to for a payment method (bKash by default)."""
    site_settings = site_settings or get_site_settings()
    field = PAYMENT_NUMBER_FIELDS.get(method, 'bkash_number')
    return getattr(site_settings, field) or settings.DEFAULT_PAYMENT_NUMBER
