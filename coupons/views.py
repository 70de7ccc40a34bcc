# coupons/views.py
import logging

from django.contrib import messages
from django.contrib.messages.views import SuccessMessageMixin
from django.http import JsonResponse
from django.shortcuts import get_object_or_404, redirect
from django.urls import reverse_lazy
from django.utils.http import url_has_allowed_host_and_scheme
from django.views import View
from django.views.generic import ListView, CreateView
from mixins import AdminRequiredMixin
from orders.cart import Cart
from .forms import CouponApplyForm, CouponForm
from .models import Coupon
from .services import AppliedCoupon, CouponError, generate_code, toggle_coupon

logger = logging.getLogger(__name__)


def is_ajax(request):
    return request.headers.get('X-Requested-With') == 'XMLHttpRequest'


def get_next_url(request, default='orders:checkout'):
    next_url = request.POST.get('next')
    if next_url and url_has_allowed_host_and_scheme(next_url, allowed_hosts={request.get_host()}):
        return next_url
    return default


class ApplyCouponView(View):
    """Apply a coupon code to the current cart"""

    def post(self, request):
        form = CouponApplyForm(request.POST)
        code = form.cleaned_data['code'] if form.is_valid() else ''
        cart = Cart(request)
        subtotal = cart.get_total()

        try:
            coupon, discount = AppliedCoupon(request).apply(code, subtotal)
        except CouponError as e:
            if is_ajax(request):
                return JsonResponse({'success': False, 'message': str(e)}, status=400)
            messages.error(request, str(e))
            return redirect(get_next_url(request))

        message = f"Coupon applied! You saved ৳{discount:.2f}"
        if is_ajax(request):
            return JsonResponse({
                'success': True,
                'message': message,
                'code': coupon.code,
                'discount': float(discount),
                'subtotal': float(subtotal),
            })
        messages.success(request, message)
        return redirect(get_next_url(request))


class RemoveCouponView(View):
    def post(self, request):
        AppliedCoupon(request).clear()
        message = "Coupon has been removed from your order"
        if is_ajax(request):
            return JsonResponse({'success': True, 'message': message})
        messages.info(request, message)
        return redirect(get_next_url(request))


class AdminCouponListView(AdminRequiredMixin, ListView):
    model = Coupon
    template_name = 'coupons/admin/coupon_list.html'
    context_object_name = 'coupons'
    paginate_by = 30

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context['total_coupons'] = Coupon.objects.count()
        context['usable_coupons'] = Coupon.objects.usable().count()
        return context


class AdminCouponCreateView(AdminRequiredMixin, SuccessMessageMixin, CreateView):
    model = Coupon
    form_class = CouponForm
    template_name = 'coupons/admin/coupon_form.html'
    success_url = reverse_lazy('coupons:admin_coupon_list')
    success_message = "Coupon %(code)s created successfully"

    def get_initial(self):
        initial = super().get_initial()
        initial['code'] = generate_code()
        return initial

    def form_valid(self, form):
        response = super().form_valid(form)
        logger.info(f"Coupon '{self.object.code}' created by {self.request.user}")
        return response


class AdminCouponGenerateCodeView(AdminRequiredMixin, View):
    def get(self, request):
        return JsonResponse({'code': generate_code()})


class AdminCouponToggleView(AdminRequiredMixin, View):
    def post(self, request, coupon_id):
        coupon = toggle_coupon(get_object_or_404(Coupon, pk=coupon_id))
        state = 'activated' if coupon.is_active else 'deactivated'
        message = f"Coupon {coupon.code} {state}"

        if is_ajax(request):
            return JsonResponse({
                'success': True,
                'message': message,
                'is_active': coupon.is_active,
                'status': coupon.status_label,
            })
        messages.success(request, message)
        return redirect('coupons:admin_coupon_list')


class AdminCouponDeleteView(AdminRequiredMixin, View):
    def post(self, request, coupon_id):
        coupon = get_object_or_404(Coupon, pk=coupon_id)
        code = coupon.code
        coupon.delete()
        logger.info(f"Coupon '{code}' deleted by {request.user}")

        message = f"Coupon {code} deleted"
        if is_ajax(request):
            return JsonResponse({'success': True, 'message': message})
        messages.success(request, message)
        return redirect('coupons:admin_coupon_list')
