from commentdeck.users.models import Address, Company, Geo, User
from commentdeck.users.profile import format_address, format_user_id, select_profile_user, user_initials

__all__ = [
    "Address",
    "Company",
    "Geo",
    "User",
    "format_address",
    "format_user_id",
    "select_profile_user",
    "user_initials",
]
