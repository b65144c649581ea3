from commentdeck.ui.pages import dashboard, profile
from commentdeck.ui.pages.dashboard import dashboard_page
from commentdeck.ui.pages.profile import profile_page

__all__ = ["dashboard", "dashboard_page", "profile", "profile_page"]
