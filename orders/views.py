# orders/views.py
import logging
from decimal import Decimal

from django.conf import settings
from django.contrib import messages
from django.contrib.auth.mixins import LoginRequiredMixin
from django.http import Http404, JsonResponse
from django.shortcuts import get_object_or_404, redirect, render
from django.views.generic import ListView, DetailView, TemplateView, View
from coupons.forms import CouponApplyForm
from coupons.services import AppliedCoupon, CouponError
from core.services import get_site_settings, payment_number_for
from mixins import AdminRequiredMixin
from products.models import Product
from .cart import Cart, CartError
from .delivery import BANGLADESH_DISTRICTS, calculate_delivery_charge
from .forms import CartAddForm, CartUpdateForm, CheckoutForm, OrderStatusForm, TrackingIdForm
from .models import Order
from .services import CheckoutError, CheckoutService, OrderService

logger = logging.getLogger(__name__)


def is_ajax(request):
    return request.headers.get('X-Requested-With') == 'XMLHttpRequest'


def first_form_error(form):
    for errors in form.errors.values():
        return errors[0]
    return 'Invalid request'


class AddToCartView(View):
    """Add product (and selected variant) to the session cart"""

    def post(self, request, product_id):
        product = get_object_or_404(Product, id=product_id, is_active=True)
        form = CartAddForm(request.POST, product=product)
        cart = Cart(request)

        try:
            if not form.is_valid():
                raise CartError(first_form_error(form))
            cart.add(product, quantity=form.cleaned_data['quantity'], variant=form.variant)
        except CartError as e:
            if is_ajax(request):
                return JsonResponse({'success': False, 'message': str(e)}, status=400)
            messages.error(request, str(e))
            return redirect(product.get_absolute_url())

        message = f'"{product.name}" added to your cart'
        if is_ajax(request):
            return JsonResponse({'success': True, 'message': message, 'cart': cart.to_json()})
        messages.success(request, message)
        return redirect('orders:cart_detail')


class CartDetailView(TemplateView):
    """Display session cart contents"""
    template_name = 'orders/cart_detail.html'

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        cart = Cart(self.request)
        lines = list(cart)
        subtotal = sum((line['line_total'] for line in lines), Decimal('0'))
        coupon, discount = AppliedCoupon(self.request).get(subtotal)

        context.update({
            'cart_items': lines,
            'has_items': bool(lines),
            'subtotal': subtotal,
            'applied_coupon': coupon,
            'discount': discount,
            'coupon_form': CouponApplyForm(),
        })
        return context


class UpdateCartItemView(View):
    """Update quantity of cart item (zero removes it)"""

    def post(self, request, item_id):
        cart = Cart(request)
        form = CartUpdateForm(request.POST)

        try:
            if not form.is_valid():
                raise CartError(first_form_error(form))
            cart.update_quantity(item_id, form.cleaned_data['quantity'])
        except CartError as e:
            if is_ajax(request):
                return JsonResponse({'success': False, 'message': str(e)}, status=400)
            messages.error(request, str(e))
            return redirect('orders:cart_detail')

        if is_ajax(request):
            return JsonResponse({'success': True, 'cart': cart.to_json()})
        messages.success(request, 'Cart updated')
        return redirect('orders:cart_detail')


class RemoveCartItemView(View):
    """Remove item from cart completely"""

    def post(self, request, item_id):
        cart = Cart(request)
        removed = cart.remove(item_id)

        if is_ajax(request):
            return JsonResponse({'success': removed, 'cart': cart.to_json()})
        if removed:
            messages.success(request, 'Item removed from your cart')
        return redirect('orders:cart_detail')


class ClearCartView(View):
    def post(self, request):
        cart = Cart(request)
        if cart.is_empty:
            messages.info(request, 'Your cart is already empty')
        else:
            cart.clear()
            AppliedCoupon(request).clear()
            messages.success(request, 'Your cart has been cleared')
        return redirect('orders:cart_detail')


class DeliveryChargeView(View):
    """Delivery charge for a district, used by the checkout page"""

    def get(self, request):
        district = request.GET.get('district', '')
        if district not in BANGLADESH_DISTRICTS:
            return JsonResponse({'success': False, 'message': 'Please select a valid district'}, status=400)
        return JsonResponse({'success': True, 'district': district, 'delivery_charge': float(calculate_delivery_charge(district))})


class CheckoutView(View):
    """Collect customer, delivery and payment details and place the order"""
    template_name = 'orders/checkout.html'

    def dispatch(self, request, *args, **kwargs):
        self.cart = Cart(request)
        if self.cart.is_empty:
            messages.error(request, 'Your cart is empty')
            return redirect('orders:cart_detail')
        return super().dispatch(request, *args, **kwargs)

    def get(self, request):
        default_district = request.GET.get('district') or settings.DEFAULT_DELIVERY_DISTRICT
        form = CheckoutForm(initial=CheckoutForm.initial_for(request.user, default_district))
        return self.render_checkout(form, form.initial.get('district'))

    def post(self, request):
        form = CheckoutForm(request.POST)
        if not form.is_valid():
            messages.error(request, 'Please fill in all required fields')
            return self.render_checkout(form, request.POST.get('district'))

        try:
            order = CheckoutService.place_order(request, self.cart, form.cleaned_data)
        except CheckoutError as e:
            messages.error(request, str(e))
            return self.render_checkout(form, form.cleaned_data['district'])
        except Exception:
            logger.exception("Unexpected error while placing order")
            messages.error(request, 'Failed to place order. Please try again')
            return self.render_checkout(form, form.cleaned_data['district'])

        messages.success(request, f'Order {order.order_number} placed successfully! You will receive a confirmation shortly')
        if request.user.is_authenticated:
            return redirect('orders:my_orders')
        placed = request.session.get('placed_orders', [])
        request.session['placed_orders'] = (placed + [order.order_number])[-10:]
        return redirect('orders:order_confirmation', order_number=order.order_number)

    def render_checkout(self, form, district):
        if district not in BANGLADESH_DISTRICTS:
            district = None

        applied_coupon = AppliedCoupon(self.request)
        try:
            summary = CheckoutService.get_summary(self.cart, district, applied_coupon.code)
        except CouponError as e:
            applied_coupon.clear()
            messages.warning(self.request, str(e))
            summary = CheckoutService.get_summary(self.cart, district)

        site_settings = get_site_settings()
        context = {
            'form': form,
            'summary': summary,
            'coupon_form': CouponApplyForm(),
            'payment_numbers': {
                method: payment_number_for(method, site_settings)
                for method, _ in Order.PAYMENT_METHOD_CHOICES
            },
        }
        return render(self.request, self.template_name, context)


class OrderConfirmationView(DetailView):
    """Thank-you page shown right after a guest places an order"""
    model = Order
    template_name = 'orders/order_confirmation.html'
    context_object_name = 'order'
    slug_field = 'order_number'
    slug_url_kwarg = 'order_number'

    def get_object(self, queryset=None):
        order = super().get_object(queryset)
        # Only reachable from the session that placed it
        if order.order_number not in self.request.session.get('placed_orders', []):
            if not order.can_be_viewed_by(self.request.user):
                raise Http404
        return order


class MyOrdersView(LoginRequiredMixin, ListView):
    template_name = 'orders/my_orders.html'
    context_object_name = 'orders'
    paginate_by = 10

    def get_queryset(self):
        return Order.objects.for_user(self.request.user).with_items()


class OrderDetailView(LoginRequiredMixin, DetailView):
    model = Order
    template_name = 'orders/order_detail.html'
    context_object_name = 'order'
    slug_field = 'order_number'
    slug_url_kwarg = 'order_number'

    def get_queryset(self):
        return Order.objects.prefetch_related('items', 'status_history')

    def get_object(self, queryset=None):
        order = super().get_object(queryset)
        if not order.can_be_viewed_by(self.request.user):
            raise Http404
        return order


class InvoiceView(OrderDetailView):
    """Printable invoice for an order"""
    template_name = 'orders/invoice.html'


class AdminOrderListView(AdminRequiredMixin, ListView):
    template_name = 'orders/admin/order_list.html'
    context_object_name = 'orders'
    paginate_by = 25

    def get_queryset(self):
        queryset = Order.objects.with_items()
        status = self.request.GET.get('status')
        query = self.request.GET.get('q', '').strip()
        if status in dict(Order.ORDER_STATUS_CHOICES):
            queryset = queryset.filter(status=status)
        if query:
            queryset = queryset.filter(pk__in=Order.objects.search(query).values('pk'))
        return queryset

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context.update({
            'status_counts': Order.objects.status_counts(),
            'status_choices': Order.ORDER_STATUS_CHOICES,
            'current_status': self.request.GET.get('status', ''),
            'current_search': self.request.GET.get('q', ''),
        })
        return context


class AdminOrderStatusView(AdminRequiredMixin, View):
    def post(self, request, order_number):
        order = get_object_or_404(Order, order_number=order_number)
        form = OrderStatusForm(request.POST)

        if not form.is_valid():
            message = first_form_error(form)
            if is_ajax(request):
                return JsonResponse({'success': False, 'message': message}, status=400)
            messages.error(request, message)
            return redirect('orders:admin_order_list')

        OrderService.update_status(order, form.cleaned_data['status'], request.user, form.cleaned_data['notes'])
        message = f'Order {order.order_number} marked as {order.get_status_display()}'
        if is_ajax(request):
            return JsonResponse({'success': True, 'message': message, 'status': order.status})
        messages.success(request, message)
        return redirect('orders:admin_order_list')


class AdminOrderTrackingView(AdminRequiredMixin, View):
    def post(self, request, order_number):
        order = get_object_or_404(Order, order_number=order_number)
        form = TrackingIdForm(request.POST)

        if not form.is_valid():
            messages.error(request, first_form_error(form))
            return redirect('orders:admin_order_list')

        OrderService.update_tracking_id(order, form.cleaned_data['tracking_id'])
        message = f'Tracking ID for {order.order_number} updated'
        if is_ajax(request):
            return JsonResponse({'success': True, 'message': message, 'tracking_id': order.tracking_id})
        messages.success(request, message)
        return redirect('orders:admin_order_list')


class AdminOrderDeleteView(AdminRequiredMixin, View):
    def post(self, request, order_number):
        order = get_object_or_404(Order, order_number=order_number)
        OrderService.delete_order(order)

        message = f'Order {order_number} deleted'
        if is_ajax(request):
            return JsonResponse({'success': True, 'message': message})
        messages.success(request, message)
        return redirect('orders:admin_order_list')
