import logging

from django.contrib import messages
from django.contrib.auth.mixins import LoginRequiredMixin
from django.shortcuts import get_object_or_404, redirect
from django.views import View
from django.views.generic import ListView, DetailView
from core.services import get_site_settings
from orders.forms import CartAddForm
from products.forms import ReviewForm
from products.models import Category, Product, Review

logger = logging.getLogger(__name__)


class StoreView(ListView):
    """All active products, optionally filtered by a search query"""
    model = Product
    template_name = 'products/store.html'
    context_object_name = 'products'
    paginate_by = 24

    def get_queryset(self):
        query = self.request.GET.get('q', '').strip()
        queryset = Product.objects.search(query) if query else Product.objects.active()
        return queryset.select_related('category').prefetch_related('variants')

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context['categories'] = Category.objects.filter(is_active=True)
        context['current_search'] = self.request.GET.get('q', '')
        return context


class CategoryShopView(ListView):
    """Shop page for a single category (fruits, t-shirts)"""
    template_name = 'products/category_shop.html'
    context_object_name = 'products'

    def dispatch(self, request, *args, **kwargs):
        self.category = get_object_or_404(Category, slug=kwargs['slug'], is_active=True)
        if self.category.slug == Category.TSHIRTS and not get_site_settings().tshirt_page_available:
            messages.info(request, 'The t-shirt shop is not available right now')
            return redirect('core:home')
        return super().dispatch(request, *args, **kwargs)

    def get_queryset(self):
        return Product.objects.in_category(self.category.slug).prefetch_related('variants')

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context['category'] = self.category
        return context


class ProductDetailView(DetailView):
    model = Product
    template_name = 'products/product_detail.html'
    context_object_name = 'product'
    pk_url_kwarg = 'product_id'

    def get_queryset(self):
        """Get optimized queryset for active products only."""
        return Product.objects.with_related_data().filter(is_active=True)

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        product = self.object
        default_variant = product.default_variant

        context.update({
            'variants': product.variants.all(),
            'selected_variant': default_variant,
            'reviews': Review.objects.for_product(product),
            'rating': product.get_rating(),
            'cart_form': CartAddForm(
                product=product,
                initial={'variant_id': default_variant.pk if default_variant else None},
            ),
            'review_form': kwargs.get('review_form') or ReviewForm(),
        })
        return context


class AddReviewView(LoginRequiredMixin, View):
    """Post a review for a product"""

    def post(self, request, product_id):
        product = get_object_or_404(Product, pk=product_id, is_active=True)
        form = ReviewForm(request.POST)

        if not form.is_valid():
            for errors in form.errors.values():
                for error in errors:
                    messages.error(request, error)
            return redirect(product.get_absolute_url())

        review = form.save(commit=False)
        review.product = product
        review.user = request.user
        review.save()

        logger.info(f"Review {review.pk} ({review.rating}/5) added to product {product.pk}")
        messages.success(request, 'Thank you for your review!')
        return redirect(product.get_absolute_url())
