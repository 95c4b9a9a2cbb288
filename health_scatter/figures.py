import plotly.graph_objects as go

from .controller import ChartModel
from .theme import BORDER, FONT_FAMILY, GRID_LINE, MARKER_FILL, MARKER_LINE, PANEL, TEXT, TEXT_DIM

MARKER_TRACE = "states"
TEXT_TRACE = "abbr"


def _axis_layout(axis_model):
    return dict(
        range=list(axis_model.scale.domain),
        tickmode="array",
        tickvals=axis_model.ticks,
        showgrid=True, gridcolor=GRID_LINE,
        zeroline=False, showline=True, linecolor=TEXT_DIM,
        ticks="outside", tickcolor=TEXT_DIM,
        tickfont=dict(color=TEXT, size=11),
        fixedrange=True,
    )


def _text_y(scale, text):
    if scale.range[0] == scale.range[1]:
        return text.y_value
    return scale.invert(text.y)


def build_figure(model: ChartModel) -> go.Figure:
    """Plotly rendering of a chart model.

    Markers sit at their data values. Abbreviations take the pixel offset
    back through the y scale, unless the plot has no height to invert. Every
    point carries its row id so Plotly moves the same point when the figure
    is animated to a new selection.
    """
    ys = model.y_axis.scale
    keys = [m.key for m in model.markers]

    fig = go.Figure()
    fig.add_trace(go.Scatter(
        name=MARKER_TRACE,
        ids=keys,
        x=[m.x_value for m in model.markers],
        y=[m.y_value for m in model.markers],
        mode="markers",
        marker=dict(size=[2 * m.r for m in model.markers], color=MARKER_FILL, opacity=0.85,
                    line=dict(color=MARKER_LINE, width=1)),
        customdata=[model.tooltips[k] for k in keys],
        hovertemplate="%{customdata}<extra></extra>",
    ))
    fig.add_trace(go.Scatter(
        name=TEXT_TRACE,
        ids=[t.key for t in model.texts],
        x=[t.x_value for t in model.texts],
        y=[_text_y(ys, t) for t in model.texts],
        text=[t.text for t in model.texts],
        mode="text",
        textposition="middle center",
        textfont=dict(color="white", size=10, family=FONT_FAMILY),
        hoverinfo="skip",
    ))

    m = model.surface.margin
    fig.update_layout(
        width=model.surface.width, height=model.surface.height, autosize=False,
        margin=dict(l=m.left, r=m.right, t=m.top, b=m.bottom, pad=0),
        paper_bgcolor="rgba(0,0,0,0)", plot_bgcolor="rgba(0,0,0,0)",
        font=dict(family=FONT_FAMILY, color=TEXT),
        showlegend=False, dragmode=False, hovermode="closest",
        hoverlabel=dict(bgcolor=PANEL, bordercolor=BORDER, font=dict(color=TEXT, size=12)),
        xaxis=_axis_layout(model.x_axis),
        yaxis=_axis_layout(model.y_axis),
    )
    if model.transition_ms:
        fig.update_layout(transition=dict(duration=model.transition_ms, easing="cubic-in-out"))
    return fig
