"""
Health vs Poverty Scatter

Interactive scatter plot of US state health-risk and demographic indicators.
Click an axis label to re-bind the X axis (poverty, age, income) or the Y axis
(obesity, smokes, healthcare); circles and state abbreviations glide to their
new positions.

USAGE:
    python -m health_scatter --data path/to/data.csv
    Open browser to http://127.0.0.1:8050/
"""

APP_NAME = "Health vs Poverty"
APP_VERSION = "1.0.0"
__version__ = APP_VERSION
