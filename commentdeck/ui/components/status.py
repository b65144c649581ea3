import reflex as rx

from commentdeck.ui.styles import COLORS, CSS_SPACING, SPACING, TYPOGRAPHY


def loading_state(message: str = "Loading...") -> rx.Component:
    """Centered spinner with a caption."""
    return rx.center(
        rx.vstack(
            rx.spinner(size="3"),
            rx.text(message, color=COLORS["text_muted"]),
            spacing=SPACING["md"],
            align="center",
        ),
        padding_y="5rem",
        width="100%",
    )


def error_state(title: str, message) -> rx.Component:
    """Centered error title with the failure message below it."""
    return rx.center(
        rx.vstack(
            rx.text(title, color=COLORS["error"], font_size=TYPOGRAPHY["font_sizes"]["xl"]),
            rx.text(message, color=COLORS["text_muted"]),
            spacing=SPACING["md"],
            align="center",
        ),
        padding_y="5rem",
        width="100%",
    )


def empty_state(message: str, action_label: str | None = None, on_action=None, detail=None) -> rx.Component:
    """
    Centered message with an optional action button.

    Args:
        message (str): Text shown to the user.
        action_label (str | None, optional): Label for the action button. If None, no button is shown.
        on_action (callable, optional): Event triggered by the action button.
        detail (str | Var, optional): Secondary line under the message, hidden when empty.

    Returns:
        rx.Component: The empty state component.
    """
    children = [rx.text(message, color=COLORS["text_muted"], font_size=TYPOGRAPHY["font_sizes"]["xl"])]
    if detail is not None:
        children.append(
            rx.cond(detail != "", rx.text(detail, color=COLORS["error"], font_size=TYPOGRAPHY["font_sizes"]["sm"]))
        )
    if action_label is not None:
        children.append(rx.button(action_label, on_click=on_action, cursor="pointer"))
    return rx.center(
        rx.vstack(*children, spacing=SPACING["md"], align="center"),
        padding=CSS_SPACING["2xl"],
        width="100%",
    )
