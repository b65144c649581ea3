"""Main Reflex application configuration.

Routes:
- ``/`` and ``/dashboard``: comments dashboard
- ``/profile``: user profile
"""

import reflex as rx

from commentdeck.ui.pages import dashboard, profile
from commentdeck.ui.styles import styles, theme_config

app = rx.App(
    theme=theme_config,
    style=styles,
)

app.add_page(dashboard.dashboard_page, route="/", title="CommentDeck - Dashboard", on_load=dashboard.on_load)
app.add_page(dashboard.dashboard_page, route="/dashboard", title="CommentDeck - Dashboard", on_load=dashboard.on_load)
app.add_page(profile.profile_page, route="/profile", title="CommentDeck - Profile", on_load=profile.on_load)
