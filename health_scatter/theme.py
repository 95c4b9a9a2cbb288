import plotly.io as pio

# -----------------------------
# THEME CONSTANTS - Health Dashboard
# -----------------------------
BG          = "#0a0b0d"          # Deep dark background
PANEL       = "#12141a"          # Slightly lighter panels
BORDER      = "rgba(255,255,255,0.06)"
TEXT        = "#f4f4f5"          # Crisp white text
TEXT_DIM    = "#71717a"          # Muted gray
TEXT_BRIGHT = "#fafafa"          # Bright accent text

ACCENT      = "#10b981"          # Emerald green (active label)
MARKER_FILL = "#3b82f6"          # State circles
MARKER_LINE = "rgba(255,255,255,0.35)"
GRID_LINE   = "rgba(255,255,255,0.08)"

CARD_SHADOW = "0 4px 24px rgba(0,0,0,0.4)"
FONT_FAMILY = "'Inter', system-ui, -apple-system, Segoe UI, Roboto, Arial, sans-serif"

pio.templates.default = "plotly_dark"

external_css = ['https://fonts.googleapis.com/css2?family=Inter:wght@300;400;500;600;700;800&display=swap']

NAV_STYLE = {
    "height": "70px", "display": "flex", "alignItems": "center",
    "justifyContent": "center", "padding": "0 32px",
    "background": "linear-gradient(180deg, #12141a 0%, #0d0e12 100%)",
    "borderBottom": f"1px solid {BORDER}",
}
CARD_STYLE = {
    "background": "linear-gradient(180deg, #15171c 0%, #12141a 100%)",
    "border": f"1px solid {BORDER}",
    "borderRadius": "16px",
    "padding": "20px 24px",
    "boxShadow": CARD_SHADOW,
    "display": "inline-block",
}

INDEX_STRING = """
<!DOCTYPE html>
<html>
<head>
    {%metas%}
    <title>{%title%}</title>
    {%css%}
    <style>
    * { box-sizing: border-box; }
    body { margin: 0; padding: 0; background: #0a0b0d; }

    /* Axis labels: bold when driving the axis, dim and clickable otherwise */
    .aText {
        position: absolute;
        white-space: nowrap;
        font-size: 15px;
        user-select: none;
        transition: color 0.2s ease;
    }
    .aText.x-label { transform: translate(-50%, -100%); }
    .aText.y-label { transform: translate(-50%, -50%) rotate(-90deg); margin-left: 10px; }
    .active { font-weight: 700; color: #10b981; cursor: default; }
    .inactive { font-weight: 300; color: #71717a; cursor: pointer; }
    .inactive:hover { color: #f4f4f5; }

    /* Hover box */
    .hoverlayer .hovertext path { stroke: rgba(16,185,129,0.6) !important; }
    </style>
    {%favicon%}
</head>
<body>
    {%app_entry%}
    <footer>
        {%config%}
        {%scripts%}
        {%renderer%}
    </footer>
</body>
</html>
"""
