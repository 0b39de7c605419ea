import reflex as rx

from tessera.ui.playground.storybook import storybook_page


def index() -> rx.Component:
    """Landing page linking to the storybook."""
    return rx.center(
        rx.vstack(
            rx.heading("Tessera UI"),
            rx.text("Tailwind-styled components for Reflex"),
            rx.link("Open Storybook", href="/storybook"),
            spacing="4",
            align="center",
        ),
        min_height="100vh",
        padding="2rem",
    )


# ---- App ----
app = rx.App()
app.add_page(index, route="/", title="Tessera UI")
app.add_page(storybook_page, route="/storybook", title="Tessera UI | Storybook")
