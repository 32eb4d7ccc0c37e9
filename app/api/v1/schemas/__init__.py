from .profiles import ProfileCreate, ProfileUpdate, Profile
from .clinics import ClinicCreate, ClinicUpdate, Clinic
from .subscriptions import SubscriptionCreate, SubscriptionUpdate, Subscription

__all__ = [
    "ProfileCreate",
    "ProfileUpdate",
    "Profile",
    "ClinicCreate",
    "ClinicUpdate",
    "Clinic",
    "SubscriptionCreate",
    "SubscriptionUpdate",
    "Subscription",
]
