import re

PHONE_PATTERN = re.compile(r'^(?:\+?88)?01[3-9]\d{8}$')


def normalize_bangladesh_phone(phone_number):
    """Strip spaces and dashes from a phone number"""
    return (phone_number or '').replace(' ', '').replace('-', '')


def validate_bangladesh_phone(phone_number):
    """Validate Bangladeshi mobile phone number"""
    if not PHONE_PATTERN.match(normalize_bangladesh_phone(phone_number)):
        return False, 'Phone number must look like 01XXXXXXXXX or +8801XXXXXXXXX'
    return True, 'valid'


def validate_last_three_digits(value):
    """Validate the last three digits of the paying phone number"""
    if not re.match(r'^\d{3}$', value or ''):
        return False, 'Enter exactly 3 digits'
    return True, 'valid'
