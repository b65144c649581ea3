import reflex as rx

from commentdeck.comments import RecordSource
from commentdeck.ui.controllers import LoadGuard, ProfileController


class ProfileState(rx.State):
    """The first user returned by the users endpoint."""

    loading: bool = True
    error: str = ""
    has_user: bool = False

    initials: str = "..."
    name: str = ""
    email: str = ""
    user_id: str = ""
    address: str = ""
    phone: str = ""

    _loading_token: int = 0  # prevents stale writes

    @rx.var
    def header_name(self) -> str:
        if self.loading:
            return "Loading..."
        return self.name if self.has_user else "No Data"

    @rx.var
    def header_status(self) -> str:
        if self.loading:
            return "Please wait"
        return "Administrator" if self.has_user else "User not found"

    @rx.event(background=True)
    async def load_profile(self):
        async with self:
            token = ProfileController(self).begin_load()

        result = await RecordSource().fetch_users()

        async with self:
            ProfileController(self).finish_load(token, result)

    def release(self):
        LoadGuard(self).release()
