import os
from pathlib import Path

# -----------------------------
# DATASET CONFIG
# -----------------------------
BASE_DIR = Path(__file__).resolve().parent
SAMPLE_DATASET = BASE_DIR / "data" / "sample_states.csv"
DATA_ENV_VAR = "HEALTH_SCATTER_DATA"

ID_COL = "id"
STATE_COL = "state"
ABBR_COL = "abbr"

X_FIELDS = ["poverty", "age", "income"]
Y_FIELDS = ["obesity", "smokes", "healthcare"]
NUMERIC_COLUMNS = X_FIELDS + Y_FIELDS

DEFAULT_X = "poverty"
DEFAULT_Y = "obesity"

# -----------------------------
# LAYOUT
# -----------------------------
VIEWPORT_FRACTION = 0.75
MARGIN_TOP = 20
MARGIN_RIGHT = 40
MARGIN_BOTTOM = 80
MARGIN_LEFT = 100

# Used until the browser reports its real size
DEFAULT_VIEWPORT = (1280, 800)

# X labels sit below the plot, Y labels left of it (rotated)
X_LABEL_GAP = 20
LABEL_STEP = 20

# -----------------------------
# SCALES & RENDERING
# -----------------------------
DOMAIN_LOW_PAD = 0.8
DOMAIN_HIGH_PAD = 1.2
TICK_COUNT = 10

TRANSITION_MS = 1000
MARKER_RADIUS = 10
TEXT_OFFSET = 4


def default_data_path() -> Path:
    """Dataset location: $HEALTH_SCATTER_DATA, else the bundled sample."""
    env = os.environ.get(DATA_ENV_VAR)
    return Path(env) if env else SAMPLE_DATASET
