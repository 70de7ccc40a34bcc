import logging

from django.contrib import messages
from django.contrib.messages.views import SuccessMessageMixin
from django.http import JsonResponse
from django.shortcuts import get_object_or_404, redirect
from django.urls import reverse, reverse_lazy
from django.views import View
from django.views.generic import ListView, CreateView, UpdateView, DeleteView
from mixins import AdminRequiredMixin
from products.forms import ProductForm, ProductVariantForm
from products.models import Product, ProductVariant, Review

logger = logging.getLogger(__name__)


class AdminProductListView(AdminRequiredMixin, ListView):
    model = Product
    template_name = 'products/admin/product_list.html'
    context_object_name = 'products'
    paginate_by = 20

    def get_queryset(self):
        queryset = Product.objects.select_related('category').prefetch_related('variants')
        category = self.request.GET.get('category')
        if category:
            queryset = queryset.filter(category__slug=category)
        return queryset.order_by('-created_at')

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context.update({
            'total_products': Product.objects.count(),
            'active_products': Product.objects.filter(is_active=True).count(),
            'current_category': self.request.GET.get('category', ''),
        })
        return context


class AdminProductCreateView(AdminRequiredMixin, SuccessMessageMixin, CreateView):
    """
    Admin view for creating new products.
    """
    model = Product
    form_class = ProductForm
    template_name = 'products/admin/product_form.html'
    success_message = "Product \"%(name)s\" created successfully"

    def get_success_url(self):
        if self.object.has_variants:
            return reverse('products:admin_product_edit', kwargs={'product_id': self.object.pk})
        return reverse('products:admin_product_list')

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context['page_title'] = 'Add product'
        context['form_action'] = 'create'
        return context

    def form_valid(self, form):
        response = super().form_valid(form)
        logger.info(f"Product {self.object.pk} '{self.object.name}' created by {self.request.user}")
        return response

    def form_invalid(self, form):
        messages.error(self.request, "Please correct the errors below")
        return super().form_invalid(form)


class AdminProductUpdateView(AdminRequiredMixin, SuccessMessageMixin, UpdateView):
    """
    Admin view for updating products and managing their variants.
    """
    model = Product
    form_class = ProductForm
    template_name = 'products/admin/product_form.html'
    success_url = reverse_lazy('products:admin_product_list')
    success_message = "Product \"%(name)s\" updated successfully"
    pk_url_kwarg = 'product_id'

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context.update({
            'page_title': f'Edit product: {self.object.name}',
            'form_action': 'update',
            'variants': self.object.variants.all(),
            'variant_form': kwargs.get('variant_form') or ProductVariantForm(product=self.object),
        })
        return context

    def form_invalid(self, form):
        messages.error(self.request, "Failed to update product. Please try again")
        return super().form_invalid(form)


class AdminProductDeleteView(AdminRequiredMixin, DeleteView):
    """
    Admin view for deleting products with AJAX support.
    """
    model = Product
    success_url = reverse_lazy('products:admin_product_list')
    pk_url_kwarg = 'product_id'

    def post(self, request, *args, **kwargs):
        self.object = self.get_object()
        product_name = self.object.name
        is_ajax = request.headers.get('X-Requested-With') == 'XMLHttpRequest'
        self.object.delete()

        logger.info(f"Product '{product_name}' deleted by {request.user}")
        message = f'Product "{product_name}" deleted successfully'
        if is_ajax:
            return JsonResponse({'success': True, 'message': message})
        messages.success(request, message)
        return redirect(self.success_url)

    def get(self, request, *args, **kwargs):
        """Only allow POST deletes"""
        messages.error(request, "Invalid request method")
        return redirect(self.success_url)


class AdminVariantCreateView(AdminRequiredMixin, View):
    """Add a size/amount variant to a product"""

    def post(self, request, product_id):
        product = get_object_or_404(Product, pk=product_id)
        form = ProductVariantForm(request.POST, product=product)

        if form.is_valid():
            variant = form.save()
            messages.success(request, f'Variant "{variant.name}" added')
        else:
            for errors in form.errors.values():
                for error in errors:
                    messages.error(request, error)

        return redirect('products:admin_product_edit', product_id=product.pk)


class AdminVariantDeleteView(AdminRequiredMixin, View):
    def post(self, request, product_id, variant_id):
        variant = get_object_or_404(ProductVariant, pk=variant_id, product_id=product_id)
        product = variant.product
        was_default = variant.is_default
        variant.delete()

        remaining = product.variants.all()
        if not remaining.exists():
            product.has_variants = False
            product.save(update_fields=['has_variants'])
        elif was_default:
            replacement = remaining.first()
            replacement.is_default = True
            replacement.save()

        messages.success(request, f'Variant "{variant.name}" removed')
        return redirect('products:admin_product_edit', product_id=product.pk)


class AdminReviewDeleteView(AdminRequiredMixin, View):
    def post(self, request, product_id, review_id):
        review = get_object_or_404(Review, pk=review_id, product_id=product_id)
        review.delete()
        messages.success(request, 'Review deleted')
        return redirect('products:product_detail', product_id=product_id)
