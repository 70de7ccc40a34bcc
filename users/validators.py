# users/validators.py
from django.core.exceptions import ValidationError
from django.utils.deconstruct import deconstructible
from .utils import validate_bangladesh_phone, validate_last_three_digits


@deconstructible
class BangladeshPhoneValidator:
    def __call__(self, value):
        if not value:  # Allow blank
            return
        is_valid, message = validate_bangladesh_phone(value)
        if not is_valid:
            raise ValidationError(message)

    def __eq__(self, other):
        return isinstance(other, BangladeshPhoneValidator)


@deconstructible
class LastThreeDigitsValidator:
    def __call__(self, value):
        is_valid, message = validate_last_three_digits(value)
        if not is_valid:
            raise ValidationError(message)

    def __eq__(self, other):
        return isinstance(other, LastThreeDigitsValidator)
