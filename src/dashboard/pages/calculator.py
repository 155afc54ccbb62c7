"""Mortgage calculator page: loan form, payment result, schedule comparison."""

import dash
from dash import html, dcc, callback, Input, Output, State

from src.dashboard.components import (
    SCHEDULE_LABELS,
    breakdown_rows,
    format_payment,
    run_calculation,
    schedule_comparison_figure,
)
from src.models.loan import AMORTIZATION_PERIODS, PaymentSchedule

dash.register_page(__name__, path="/", name="Calculator")

BTN_STYLE = {
    "padding": "0.75rem 2rem",
    "fontSize": "1rem",
    "backgroundColor": "#1a1a2e",
    "color": "white",
    "border": "none",
    "cursor": "pointer",
    "width": "100%",
}

FIELD_STYLE = {"width": "100%", "padding": "0.5rem", "fontSize": "0.95rem"}

ERROR_STYLE = {
    "color": "#e94560",
    "backgroundColor": "#fdecea",
    "padding": "1rem",
    "borderRadius": "4px",
}

SUCCESS_STYLE = {
    "color": "#1e4620",
    "backgroundColor": "#edf7ed",
    "padding": "1rem",
    "borderRadius": "4px",
    "fontWeight": "bold",
}


def _field(label, component):
    return html.Div([
        html.Label(label, style={"fontSize": "0.85rem", "marginBottom": "0.25rem", "display": "block"}),
        component,
    ], style={"marginBottom": "0.75rem"})


layout = html.Div([
    html.H2("BC Mortgage Calculator"),

    _field("Property Price ($)", dcc.Input(id="property-price", type="number", min=0, placeholder="0", style=FIELD_STYLE)),
    _field("Down Payment ($)", dcc.Input(id="down-payment", type="number", min=0, placeholder="0", style=FIELD_STYLE)),
    _field("Annual Interest Rate (%)", dcc.Input(id="interest-rate", type="number", min=0, step=0.01, placeholder="0", style=FIELD_STYLE)),
    _field("Amortization Period", dcc.Dropdown(
        id="amortization-period",
        options=[{"label": f"{p} years", "value": p} for p in AMORTIZATION_PERIODS],
        value=AMORTIZATION_PERIODS[0],
        clearable=False,
    )),
    _field("Payment Schedule", dcc.Dropdown(
        id="payment-schedule",
        options=[{"label": SCHEDULE_LABELS[s], "value": s.value} for s in PaymentSchedule],
        value=PaymentSchedule.MONTHLY.value,
        clearable=False,
    )),

    html.Button("Calculate", id="calculate-btn", n_clicks=0, style=BTN_STYLE),

    dcc.Loading(html.Div(id="calculator-results", style={"marginTop": "1.5rem"})),
], style={"maxWidth": "600px", "margin": "0 auto"})


@callback(
    Output("calculator-results", "children"),
    Input("calculate-btn", "n_clicks"),
    [
        State("property-price", "value"),
        State("down-payment", "value"),
        State("interest-rate", "value"),
        State("amortization-period", "value"),
        State("payment-schedule", "value"),
    ],
    prevent_initial_call=True,
)
def calculate(n_clicks, price, down_payment, rate, period, schedule):
    view = run_calculation(price, down_payment, rate, period, schedule)

    if view.error:
        return html.Div(view.error, style=ERROR_STYLE)

    children = [html.Div(format_payment(view.payment), style=SUCCESS_STYLE)]

    if view.breakdown is not None:
        children.append(html.Table([
            html.Tr([html.Td(label), html.Td(value, style={"textAlign": "right"})])
            for label, value in breakdown_rows(view.breakdown)
        ], style={"width": "100%", "marginTop": "1rem"}))

    if view.comparison:
        children.append(dcc.Graph(figure=schedule_comparison_figure(view.comparison)))

    return html.Div(children)
