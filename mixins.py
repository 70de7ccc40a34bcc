# mixins.py
from django.contrib import messages
from django.contrib.auth.mixins import UserPassesTestMixin
from django.shortcuts import redirect


class AdminRequiredMixin(UserPassesTestMixin):
    """Restrict a view to shop administrators (staff or listed admin emails)."""

    def test_func(self):
        user = self.request.user
        return user.is_authenticated and user.is_shop_admin

    def handle_no_permission(self):
        if not self.request.user.is_authenticated:
            return super().handle_no_permission()
        messages.error(self.request, 'You do not have permission to access the admin dashboard')
        return redirect('core:home')
