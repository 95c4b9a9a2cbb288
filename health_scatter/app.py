# =============================================================================
# Health vs Poverty - Dash application
# =============================================================================
"""
Page shell and callbacks for the scatter chart.

Two callbacks drive the chart:

- a window resize replaces everything inside ``#scatter`` (graph and labels)
  with a surface laid out for the new viewport;
- an axis-label click only swaps the figure of the existing graph, which
  Plotly animates, and restyles the labels.

The browser keeps the selection and the viewport in ``dcc.Store``s; each
callback rebuilds a ``ChartController`` from them.
"""
# =============================================================================

import logging

from dash import ALL, Dash, Input, Output, State, ctx, dcc, html
from dash.exceptions import PreventUpdate

from . import APP_NAME
from .config import DEFAULT_VIEWPORT, TRANSITION_MS, default_data_path
from .controller import ChartController
from .data import load_dataset
from .figures import build_figure
from .selection import Selection
from .theme import BG, CARD_STYLE, FONT_FAMILY, INDEX_STRING, NAV_STYLE, TEXT, TEXT_BRIGHT, TEXT_DIM, external_css

logger = logging.getLogger(__name__)

LABEL_TYPE = "axis-label"


# -----------------------------
# HELPERS
# -----------------------------
def label_id(axis, value):
    return {"type": LABEL_TYPE, "axis": axis, "value": value}


def label_class(label):
    return f"aText {label.axis}-label {label.css_class}"


def animation_options(duration_ms=TRANSITION_MS):
    # passed to Plotly.animate by dcc.Graph(animate=True)
    return {"frame": {"redraw": False}, "transition": {"duration": duration_ms, "easing": "cubic-in-out"}}


def viewport_size(viewport):
    if not viewport:
        return DEFAULT_VIEWPORT
    return float(viewport.get("width", DEFAULT_VIEWPORT[0])), float(viewport.get("height", DEFAULT_VIEWPORT[1]))


def render_surface(model):
    """Fresh graph + label overlay for ``model``; replaces whatever was there."""
    surface = model.surface
    labels = [
        html.Div(lab.text, id=label_id(lab.axis, lab.value), n_clicks=0, className=label_class(lab),
                 style={"left": f"{lab.left}px", "top": f"{lab.top}px"})
        for lab in model.labels
    ]
    graph = dcc.Graph(
        id="chart",
        figure=build_figure(model),
        animate=True,
        animation_options=animation_options(),
        config={"displayModeBar": False, "responsive": False},
        style={"width": f"{surface.width}px", "height": f"{surface.height}px"},
    )
    return html.Div(
        style={"position": "relative", "width": f"{surface.width}px", "height": f"{surface.height}px"},
        children=[graph] + labels,
    )


# -----------------------------
# CALLBACK BODIES
# -----------------------------
def rebuild_surface(dataset, viewport, selection_data):
    controller = ChartController(dataset, Selection.from_dict(selection_data), viewport_size(viewport))
    return render_surface(controller.model())


def apply_label_click(dataset, clicked, selection_data, viewport, label_ids):
    """Figure, label classes (in ``label_ids`` order) and stored selection after a click.

    Raises ``PreventUpdate`` when the clicked label is already active.
    """
    controller = ChartController(dataset, Selection.from_dict(selection_data), viewport_size(viewport))
    update = controller.click_label(clicked["axis"], clicked["value"])
    if update is None:
        raise PreventUpdate
    logger.info("Selection %s/%s -> %s/%s", update.previous.x, update.previous.y,
                update.selection.x, update.selection.y)
    classes = [label_class(update.model.label(i["axis"], i["value"])) for i in label_ids]
    return build_figure(update.model), classes, update.selection.to_dict()


# -----------------------------
# LAYOUT
# -----------------------------
def build_layout():
    return html.Div(style={"background": BG, "color": TEXT, "minHeight": "100vh", "fontFamily": FONT_FAMILY}, children=[
        dcc.Store(id="resize-hook", data=0),                          # fires the resize listener setup once
        dcc.Store(id="viewport", data=None),                          # {width, height} from the browser
        dcc.Store(id="selection", data=Selection().to_dict()),        # active x / y field

        html.Div(style=NAV_STYLE, children=[
            html.Div(style={"textAlign": "center"}, children=[
                html.Div(APP_NAME, style={"fontWeight": 700, "fontSize": "28px", "color": TEXT_BRIGHT, "letterSpacing": "-0.5px"}),
                html.Div("Health risks vs. demographics by state", style={"fontSize": "14px", "color": TEXT_DIM}),
            ]),
        ]),

        html.Div(style={"padding": "24px 32px"}, children=[
            html.P("Click an axis title to change what it shows. Hover a state for its values.",
                   style={"fontSize": "12px", "color": TEXT_DIM, "margin": "0 0 16px 0"}),
            html.Div(style=CARD_STYLE, children=[
                html.Div(id="scatter"),
            ]),
        ]),
    ])


def register_callbacks(app, dataset):
    # Report the viewport once on load, then on every window resize
    app.clientside_callback(
        """
        function(_) {
            const size = () => ({width: window.innerWidth, height: window.innerHeight});
            if (!window._scatterResizeBound) {
                window._scatterResizeBound = true;
                window.addEventListener("resize", function() {
                    window.dash_clientside.set_props("viewport", {data: size()});
                });
            }
            return size();
        }
        """,
        Output("viewport", "data"),
        Input("resize-hook", "data"),
    )

    @app.callback(
        Output("scatter", "children"),
        Input("viewport", "data"),
        State("selection", "data"),
    )
    def on_viewport(viewport, selection_data):
        if not viewport:
            raise PreventUpdate
        logger.debug("Viewport %sx%s", viewport.get("width"), viewport.get("height"))
        return rebuild_surface(dataset, viewport, selection_data)

    @app.callback(
        Output("chart", "figure"),
        Output({"type": LABEL_TYPE, "axis": ALL, "value": ALL}, "className"),
        Output("selection", "data"),
        Input({"type": LABEL_TYPE, "axis": ALL, "value": ALL}, "n_clicks"),
        State("selection", "data"),
        State("viewport", "data"),
        prevent_initial_call=True,
    )
    def on_label_click(_clicks, selection_data, viewport):
        clicked = ctx.triggered_id
        # a rebuilt surface re-registers its labels with n_clicks=0
        if not clicked or not any(t.get("value") for t in ctx.triggered):
            raise PreventUpdate
        label_ids = [o["id"] for o in ctx.outputs_list[1]]
        return apply_label_click(dataset, clicked, selection_data, viewport, label_ids)


# -----------------------------
# APP FACTORY
# -----------------------------
def create_app(dataset=None):
    if dataset is None:
        dataset = load_dataset(default_data_path())
    app = Dash(__name__, external_stylesheets=external_css, suppress_callback_exceptions=True)
    app.title = APP_NAME
    app.index_string = INDEX_STRING
    app.layout = build_layout()
    register_callbacks(app, dataset)
    return app
