import reflex as rx
from typing import Optional


def _trend_row(trend_value: str, trend_label: str, is_positive: bool) -> rx.Component:
    return rx.el.div(
        rx.el.span("↑" if is_positive else "↓", class_name="mr-1"),
        trend_value,
        trend_label,
        class_name=(
            "inline-flex items-center ml-auto text-xs font-medium "
            + ("text-emerald-600" if is_positive else "text-red-600")
        ),
    )


def stat_card(
    title: str,
    value: rx.Var | str | int,
    icon: str,
    color: str = "#3b82f6",
    unit: Optional[str] = None,
    description: Optional[str] = None,
    secondary_label: Optional[str] = None,
    secondary_value: rx.Var | str | None = None,
    secondary_unit: Optional[str] = None,
    trend_value: Optional[str] = None,
    trend_label: str = "",
    trend_positive: bool = True,
    highlight: rx.Var | bool = False,
    class_name: str = "",
) -> rx.Component:
    """Titled value card with optional unit, secondary value and trend footer"""
    secondary = rx.fragment()
    if secondary_value is not None:
        secondary = rx.el.div(
            rx.el.span(
                f"{secondary_label}: " if secondary_label else "",
                secondary_value,
                class_name="font-medium",
            ),
            rx.el.span(secondary_unit, class_name="ml-1 text-xs text-gray-500") if secondary_unit else rx.fragment(),
            class_name="flex items-baseline text-sm",
        )

    footer = rx.fragment()
    if description or trend_value is not None:
        footer = rx.el.div(
            rx.el.p(description, class_name="text-xs text-gray-500") if description else rx.fragment(),
            _trend_row(trend_value, trend_label, trend_positive) if trend_value is not None else rx.fragment(),
            class_name="flex items-center pt-1 border-t border-gray-100",
        )

    return rx.card(
        rx.vstack(
            rx.hstack(
                rx.text(title, class_name="text-sm font-medium text-gray-500"),
                rx.center(
                    rx.icon(icon, size=20, color=color),
                    class_name="rounded-full h-9 w-9",
                    style={"background_color": f"{color}15"},
                ),
                justify="between",
                align="start",
                width="100%",
            ),
            rx.el.div(
                rx.el.div(
                    value,
                    class_name=rx.cond(
                        highlight,
                        "text-2xl font-bold transition-transform duration-300 scale-110",
                        "text-2xl font-bold transition-transform duration-300",
                    ),
                    style={"color": color},
                ),
                rx.el.div(unit, class_name="ml-1 text-sm text-gray-500") if unit else rx.fragment(),
                class_name="flex items-baseline mb-1",
            ),
            secondary,
            footer,
            spacing="2",
            width="100%",
        ),
        class_name=f"overflow-hidden transition-all duration-200 border rounded-xl shadow-sm hover:shadow-lg {class_name}",
    )
