# core/views.py
import logging

from django.contrib import messages
from django.shortcuts import redirect
from django.urls import reverse_lazy
from django.views.generic import TemplateView, UpdateView
from coupons.models import Coupon
from mixins import AdminRequiredMixin
from orders.models import Order
from products.models import Category, Product
from .forms import SiteSettingsForm
from .services import get_site_settings

logger = logging.getLogger(__name__)

IT_SOLUTIONS = [
    {
        'icon': 'palette',
        'title': 'Graphics Design',
        'description': 'Stunning visual designs that captivate and convert your audience',
        'features': ['Logo Design', 'Brand Identity', 'Print Design', 'Digital Art'],
    },
    {
        'icon': 'smartphone',
        'title': 'UI/UX Design',
        'description': 'User-centered designs that create exceptional digital experiences',
        'features': ['User Research', 'Wireframing', 'Prototyping', 'User Testing'],
    },
    {
        'icon': 'globe',
        'title': 'Website Development',
        'description': 'Modern, responsive websites built with cutting-edge technology',
        'features': ['Responsive Design', 'SEO Optimization', 'Performance', 'Security'],
    },
    {
        'icon': 'code',
        'title': 'App Development',
        'description': 'Native and cross-platform mobile applications',
        'features': ['iOS Development', 'Android Development', 'React Native', 'Flutter'],
    },
]


class HomeView(TemplateView):
    template_name = 'core/home.html'

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        site_settings = get_site_settings()

        category_cards = [
            {
                'title': 'Fresh Fruits',
                'slug': Category.FRUITS,
                'thumbnail': site_settings.fruits_thumbnail,
            },
        ]
        if site_settings.tshirt_page_available:
            category_cards.append({
                'title': 'T-Shirts',
                'slug': Category.TSHIRTS,
                'thumbnail': site_settings.tshirts_thumbnail,
            })

        context.update({
            'category_cards': category_cards,
            'featured_products': Product.objects.active().select_related('category')[:8],
        })
        return context


class ITSolutionsView(TemplateView):
    template_name = 'core/it_solutions.html'

    def dispatch(self, request, *args, **kwargs):
        if not get_site_settings().it_solutions_available:
            messages.info(request, 'IT solutions are not available right now')
            return redirect('core:home')
        return super().dispatch(request, *args, **kwargs)

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context['solutions'] = IT_SOLUTIONS
        return context


class AdminDashboardView(AdminRequiredMixin, TemplateView):
    """
    Shop admin overview: catalog size, coupons, orders per status,
    revenue from delivered orders and the latest orders.
    """
    template_name = 'core/dashboard.html'

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        status_counts = Order.objects.status_counts()

        context.update({
            'stats': {
                'total_products': Product.objects.count(),
                'active_products': Product.objects.active().count(),
                'total_coupons': Coupon.objects.count(),
                'usable_coupons': Coupon.objects.usable().count(),
                'total_orders': sum(status_counts.values()),
                'revenue': Order.objects.total_revenue(),
            },
            'status_counts': status_counts,
            'recent_orders': Order.objects.all()[:10],
        })
        return context


class SiteSettingsUpdateView(AdminRequiredMixin, UpdateView):
    form_class = SiteSettingsForm
    template_name = 'core/site_settings.html'
    success_url = reverse_lazy('core:site_settings')

    def get_object(self, queryset=None):
        return get_site_settings()

    def form_valid(self, form):
        response = super().form_valid(form)
        logger.info(f"Site settings updated by {self.request.user}: {', '.join(form.changed_data) or 'no changes'}")
        messages.success(self.request, 'Settings saved successfully')
        return response

    def form_invalid(self, form):
        messages.error(self.request, 'Please correct the errors below')
        return super().form_invalid(form)
