from .profile import Profile
from .clinic import Clinic
from .subscription import Subscription


__all__ = [
    "Profile",
    "Clinic",
    "Subscription",
]
