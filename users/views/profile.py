from django.contrib.auth.mixins import LoginRequiredMixin
from django.views.generic import UpdateView
from django.contrib import messages
from django.urls import reverse_lazy
from orders.models import Order
from users.forms import UserProfileForm


class ProfileView(LoginRequiredMixin, UpdateView):
    """
    Account page: personal and delivery details plus the user's order history.
    """
    template_name = 'users/profile.html'
    form_class = UserProfileForm
    success_url = reverse_lazy('users:profile')

    def get_object(self, queryset=None):
        return self.request.user

    def form_valid(self, form):
        messages.success(self.request, 'Profile updated successfully')
        return super().form_valid(form)

    def form_invalid(self, form):
        messages.error(self.request, 'Please correct the errors below')
        return super().form_invalid(form)

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        user = self.request.user
        orders = Order.objects.for_user(user).with_items()

        context.update({
            'orders': orders,
            'quick_stats': {
                'total_orders': orders.count(),
                'total_spent': Order.objects.user_total_spent(user),
                'pending_orders': orders.filter(status=Order.STATUS_PENDING).count(),
            },
        })
        return context
