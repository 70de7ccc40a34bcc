from django.conf import settings
from django.contrib.auth.models import AbstractBaseUser, PermissionsMixin
from django.db import models
from django.utils import timezone
from .managers import UserManager
from .validators import BangladeshPhoneValidator


class User(AbstractBaseUser, PermissionsMixin):
    email = models.EmailField(unique=True)
    first_name = models.CharField(max_length=50, blank=True)
    last_name = models.CharField(max_length=50, blank=True)
    phone_number = models.CharField(
        max_length=14,
        blank=True,
        validators=[BangladeshPhoneValidator()],
    )

    # Default delivery details used to pre-fill checkout
    address = models.TextField(blank=True)
    district = models.CharField(max_length=50, blank=True)

    is_active = models.BooleanField(default=True)
    is_staff = models.BooleanField(default=False)
    order_notifications = models.BooleanField(
        default=True,
        help_text='Receive updates about your orders'
    )

    date_joined = models.DateTimeField(default=timezone.now)

    objects = UserManager()

    USERNAME_FIELD = 'email'
    EMAIL_FIELD = 'email'
    REQUIRED_FIELDS = []

    class Meta:
        db_table = 'users'
        verbose_name = 'User'
        verbose_name_plural = 'Users'

    def __str__(self):
        return self.email

    def get_full_name(self):
        return f"{self.first_name} {self.last_name}".strip() or self.email

    def get_short_name(self):
        return self.first_name or self.email.split('@')[0]

    @property
    def initial(self):
        return (self.first_name or self.email or 'U')[0].upper()

    @property
    def is_shop_admin(self):
        """Staff users and the configured admin emails manage the shop."""
        if self.is_staff or self.is_superuser:
            return True
        return self.email.lower() in getattr(settings, 'ADMIN_EMAILS', [])

    @property
    def has_complete_profile(self):
        return all([
            self.first_name,
            self.phone_number,
            self.address,
            self.district,
        ])
