import reflex as rx

# Run `reflex run` from this directory; the app lives in app/app.py.
config = rx.Config(
    app_name="app",
    env=rx.Env.DEV,
)
