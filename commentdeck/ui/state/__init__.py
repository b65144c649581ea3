from commentdeck.ui.state.dashboard import DashboardState
from commentdeck.ui.state.profile import ProfileState

__all__ = ["DashboardState", "ProfileState"]
