# orders/delivery.py
from decimal import Decimal
from django.conf import settings

BANGLADESH_DISTRICTS = [
    "Dhaka", "Chittagong", "Rajshahi", "Khulna", "Bagerhat", "Barisal", "Sylhet", "Rangpur",
    "Mymensingh", "Comilla", "Narayanganj", "Gazipur", "Tangail", "Jamalpur",
    "Sherpur", "Netrokona", "Kishoreganj", "Manikganj", "Munshiganj", "Narsingdi",
    "Faridpur", "Gopalganj", "Madaripur", "Rajbari", "Shariatpur", "Brahmanbaria",
    "Chandpur", "Lakshmipur", "Noakhali", "Feni", "Cox's Bazar", "Bandarban",
    "Rangamati", "Khagrachhari", "Patuakhali", "Pirojpur", "Jhalokati", "Barguna",
    "Bhola", "Jessore", "Narail", "Magura", "Satkhira", "Meherpur", "Chuadanga",
    "Kushtia", "Jhenaidah", "Bogra", "Joypurhat", "Naogaon", "Natore",
    "Chapainawabganj", "Pabna", "Sirajganj", "Habiganj", "Moulvibazar",
    "Sunamganj", "Kurigram", "Lalmonirhat", "Nilphamari", "Panchagarh",
    "Thakurgaon", "Dinajpur", "Gaibandha",
]

DHAKA_AREA_DISTRICTS = frozenset([
    "Dhaka", "Narayanganj", "Gazipur", "Manikganj", "Munshiganj", "Narsingdi",
])

DISTRICT_CHOICES = [(district, district) for district in BANGLADESH_DISTRICTS]


def is_dhaka_area(district):
    return district in DHAKA_AREA_DISTRICTS


def calculate_delivery_charge(district):
    """Flat delivery charge: inside the Dhaka area or anywhere else."""
    if is_dhaka_area(district):
        return Decimal(settings.DHAKA_AREA_DELIVERY_CHARGE)
    return Decimal(settings.OUTSIDE_DHAKA_DELIVERY_CHARGE)
