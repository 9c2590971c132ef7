import reflex as rx
from typing import Any, Dict, List, Optional


def _create_gradient(color: str, gradient_id: str):
    """Vertical fade used as the area fill"""
    return rx.el.defs(
        rx.el.linear_gradient(
            rx.el.stop(offset="5%", stop_color=color, stop_opacity=0.7),
            rx.el.stop(offset="60%", stop_color=color, stop_opacity=0.3),
            rx.el.stop(offset="95%", stop_color=color, stop_opacity=0.1),
            id=gradient_id,
            x1="0", y1="0", x2="0", y2="1"
        )
    )


def _summary_item(label: str, value: rx.Var | str, unit: str, dot_class: str, dot_style: Optional[dict] = None) -> rx.Component:
    return rx.hstack(
        rx.el.span(class_name=f"h-2 w-2 rounded-full {dot_class}", style=dot_style or {}),
        rx.text(label, class_name="text-xs text-gray-500"),
        rx.text(value, " ", unit, class_name="text-xs font-medium"),
        spacing="1",
        align="center",
    )


def trend_chart(
    data: rx.Var | List[Dict[str, Any]],
    chart_id: str,
    color: str = "#3b82f6",
    unit: str = "",
    height: int = 200,
    title: str = "",
    icon: Optional[str] = None,
    latest: rx.Var | str | None = None,
    average: rx.Var | str | None = None,
    show_header: bool = True,
) -> rx.Component:
    """Area trend chart over {"date", "value"} rows.

    Rows whose value is None are bridged (connect_nulls) rather than
    breaking the line. The header, shown only with a title, displays the
    latest and average values computed by services.trend_service.
    """
    gradient_id = f"chart-gradient-{chart_id}"

    header = rx.fragment()
    if show_header and title:
        header = rx.hstack(
            rx.hstack(
                rx.center(rx.icon(icon, size=14), class_name="h-6 w-6 rounded-full bg-blue-50 text-blue-600")
                if icon else rx.fragment(),
                rx.text(title, class_name="text-sm font-medium"),
                spacing="2",
                align="center",
            ),
            rx.hstack(
                _summary_item("Latest:", latest if latest is not None else "0.00", unit, "", {"background_color": color}),
                _summary_item("Avg:", average if average is not None else "0.00", unit, "bg-blue-300"),
                spacing="3",
            ),
            justify="between",
            align="center",
            width="100%",
            class_name="px-4 pt-4",
        )

    return rx.card(
        header,
        rx.box(
            rx.recharts.area_chart(
                _create_gradient(color, gradient_id),
                rx.recharts.cartesian_grid(
                    stroke_dasharray="3 3",
                    vertical=False,
                    stroke="rgba(0,0,0,0.075)",
                ),
                rx.recharts.x_axis(
                    data_key="date",
                    tick={"fontSize": 10},
                    tick_line=False,
                    axis_line={"stroke": "rgba(0,0,0,0.075)"},
                ),
                rx.recharts.y_axis(
                    tick={"fontSize": 10},
                    tick_line=False,
                    axis_line={"stroke": "rgba(0,0,0,0.075)"},
                    width=40,
                ),
                rx.recharts.tooltip(
                    cursor={"stroke": "rgba(0,0,0,0.1)", "strokeWidth": 1},
                    content_style={
                        "borderRadius": "8px",
                        "border": "1px solid #e5e7eb",
                        "backgroundColor": "rgba(255,255,255,0.95)",
                        "fontSize": "12px",
                    },
                ),
                rx.recharts.area(
                    data_key="value",
                    name=unit or "value",
                    type_="monotone",
                    stroke=color,
                    stroke_width=2,
                    fill_opacity=1,
                    fill=f"url(#{gradient_id})",
                    active_dot={"r": 4, "strokeWidth": 1, "stroke": "#fff"},
                    is_animation_active=True,
                    animation_duration=1000,
                    connect_nulls=True,
                ),
                data=data,
                width="100%",
                height=height,
                margin={"top": 10, "right": 10, "left": 0, "bottom": 0},
            ),
            width="100%",
            class_name="pt-4" if show_header and title else "pt-0",
        ),
        class_name="overflow-hidden border rounded-lg shadow-sm transition-shadow hover:shadow-md",
        width="100%",
    )
