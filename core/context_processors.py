# core/context_processors.py
from .services import get_site_settings


def site_settings(request):
    """Expose storefront switches and artwork to every template."""
    return {
        'site_settings': get_site_settings(),
    }
