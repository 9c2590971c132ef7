import reflex as rx

from ..models import AlertCategory, StationStatus, category_style, status_style


def _badge(status: StationStatus):
    style = status_style(status)
    return rx.badge(
        rx.el.span(
            class_name="w-2 h-2 rounded-full bg-current" + (" animate-pulse" if style.pulse else ""),
        ),
        style.label,
        color_scheme=style.color_scheme,
        radius="full",
        variant="solid",
        size="1",
    )


def status_badge(status):
    # Use rx.match to avoid Python truthiness on Vars
    return rx.match(
        status,
        *[(s.value, _badge(s)) for s in StationStatus],
        rx.badge(status, color_scheme="gray", radius="full", size="1"),
    )


def category_badge(category):
    return rx.match(
        category,
        *[
            (c.value, rx.badge(c.value, color_scheme=category_style(c).color_scheme, variant="outline"))
            for c in AlertCategory
        ],
        rx.badge(category, color_scheme="gray", variant="outline"),
    )
