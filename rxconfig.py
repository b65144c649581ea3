import reflex as rx

APP_MODULE = "commentdeck.commentdeck:app"

config = rx.Config(
    app_name="commentdeck",
    env=rx.Env.DEV,  # or rx.Env.PROD for production
)
