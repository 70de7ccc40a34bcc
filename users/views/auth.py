import logging

from django.shortcuts import redirect
from django.views.generic import FormView
from django.contrib import messages
from django.urls import reverse_lazy
from django.utils.http import url_has_allowed_host_and_scheme
from django.contrib.auth import login, logout
from django.views import View
from users.forms import LoginForm, RegisterForm
from users.models import User

logger = logging.getLogger(__name__)


class RedirectAuthenticatedMixin:
    """Send users who are already signed in to their profile"""

    def dispatch(self, request, *args, **kwargs):
        if request.user.is_authenticated:
            messages.info(request, 'You are already signed in')
            return redirect('users:profile')
        return super().dispatch(request, *args, **kwargs)

    def get_next_url(self):
        next_url = self.request.POST.get('next') or self.request.GET.get('next')
        if next_url and url_has_allowed_host_and_scheme(
            next_url, allowed_hosts={self.request.get_host()}
        ):
            return next_url
        return None


class LoginView(RedirectAuthenticatedMixin, FormView):
    """Email and password sign in"""
    template_name = 'users/login.html'
    form_class = LoginForm
    success_url = reverse_lazy('users:profile')

    def get_form_kwargs(self):
        kwargs = super().get_form_kwargs()
        kwargs['request'] = self.request
        return kwargs

    def form_valid(self, form):
        user = form.get_user()
        login(self.request, user)
        logger.info(f"User {user.email} signed in")
        messages.success(self.request, f'Welcome back, {user.get_short_name()}!')
        return redirect(self.get_next_url() or self.get_success_url())

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context.update({
            'page_title': 'Sign in',
            'next': self.get_next_url() or '',
        })
        return context


class RegisterView(RedirectAuthenticatedMixin, FormView):
    """Create a customer account and sign it in"""
    template_name = 'users/register.html'
    form_class = RegisterForm
    success_url = reverse_lazy('users:profile')

    def form_valid(self, form):
        try:
            user = User.objects.register(
                email=form.cleaned_data['email'],
                password=form.cleaned_data['password'],
                name=form.cleaned_data.get('name', ''),
            )
        except ValueError as e:
            form.add_error('email', str(e))
            return self.form_invalid(form)

        login(self.request, user, backend='django.contrib.auth.backends.ModelBackend')
        logger.info(f"Registered new user {user.email}")
        messages.success(self.request, f'Welcome {user.get_full_name()}! Your account has been created')
        return redirect(self.get_next_url() or self.get_success_url())

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context.update({
            'page_title': 'Create account',
            'next': self.get_next_url() or '',
        })
        return context


class UserLogoutView(View):
    def post(self, request):
        logout(request)
        messages.success(request, 'You have been signed out')
        return redirect('core:home')

    def get(self, request):
        return self.post(request)
