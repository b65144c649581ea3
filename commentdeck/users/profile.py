"""Display helpers for the profile page."""

from typing import Optional, Sequence

from commentdeck.users.models import Address, User

USER_ID_WIDTH = 8


def select_profile_user(users: Sequence[User]) -> Optional[User]:
    """The profile page shows the first user returned by the endpoint."""
    return users[0] if users else None


def user_initials(name: str) -> str:
    """First letter of each space-separated word, e.g. "Leanne Graham" -> "LG"."""
    initials = "".join(word[0] for word in name.split(" ") if word)
    return initials or "?"


def format_user_id(user_id: int) -> str:
    return str(user_id).zfill(USER_ID_WIDTH)


def format_address(address: Address) -> str:
    return f"{address.street}, {address.suite}, {address.city}"
