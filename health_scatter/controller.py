"""
Chart state and the two ways it changes.

``ChartController.rebuild`` throws the whole surface away and lays it out again
for a new viewport. ``ChartController.click_label`` re-binds one axis and moves
the existing markers; nothing is recreated, and the returned update says which
parts changed, in the order they were changed.
"""

import logging
import math
from dataclasses import dataclass, replace
from typing import Dict, Optional, Tuple

from .config import DEFAULT_VIEWPORT, MARKER_RADIUS, TEXT_OFFSET, TRANSITION_MS
from .data import DataRow, Dataset
from .layout import Surface, compute_surface
from .scales import X_AXIS, Y_AXIS, LinearScale, make_scale
from .selection import ACTIVE, AXIS_LABELS, Selection, check_field, tooltip_label

logger = logging.getLogger(__name__)

AXES = (X_AXIS, Y_AXIS)

# Steps of a selection change, in execution order
STEP_SCALE = "scale"
STEP_AXIS = "axis"
STEP_MARKERS = "markers"
STEP_TEXTS = "texts"
STEP_TOOLTIP = "tooltip"
STEP_LABELS = "labels"


@dataclass(frozen=True)
class AxisModel:
    axis: str
    field: str
    scale: LinearScale

    @property
    def title(self) -> str:
        return AXIS_LABELS[self.axis][self.field].text

    @property
    def ticks(self):
        return self.scale.ticks()


@dataclass(frozen=True)
class Marker:
    key: str
    x_value: float
    y_value: float
    cx: float
    cy: float
    r: float = MARKER_RADIUS


@dataclass(frozen=True)
class MarkerText:
    key: str
    x_value: float
    y_value: float
    x: float
    y: float
    text: str


@dataclass(frozen=True)
class AxisLabel:
    axis: str
    value: str
    text: str
    css_class: str
    left: float
    top: float


def format_number(value: float) -> str:
    """Print a number the way a browser would: 10, 19.3, 50000."""
    if value is None or (isinstance(value, float) and math.isnan(value)):
        return "NaN"
    return f"{value:.15g}"


@dataclass(frozen=True)
class TooltipBinding:
    field_x: str
    field_y: str

    @property
    def label_x(self) -> str:
        return tooltip_label(X_AXIS, self.field_x)

    @property
    def label_y(self) -> str:
        return tooltip_label(Y_AXIS, self.field_y)

    def content(self, row: DataRow) -> str:
        return (f"{row.name}<br>{self.label_x} {format_number(row.value(self.field_x))}"
                f"<br>{self.label_y} {format_number(row.value(self.field_y))}")

    def bind(self, dataset: Dataset) -> Dict[str, str]:
        return {row.id: self.content(row) for row in dataset}


@dataclass(frozen=True)
class ChartModel:
    surface: Surface
    selection: Selection
    x_axis: AxisModel
    y_axis: AxisModel
    markers: Tuple[Marker, ...]
    texts: Tuple[MarkerText, ...]
    tooltip: TooltipBinding
    tooltips: Dict[str, str]
    labels: Tuple[AxisLabel, ...]
    transition_ms: int = 0

    def axis(self, axis: str) -> AxisModel:
        return self.x_axis if axis == X_AXIS else self.y_axis

    def label(self, axis: str, value: str) -> AxisLabel:
        for lab in self.labels:
            if lab.axis == axis and lab.value == value:
                return lab
        raise KeyError((axis, value))

    def active_labels(self, axis: str):
        return [lab for lab in self.labels if lab.axis == axis and lab.css_class == ACTIVE]


@dataclass(frozen=True)
class SelectionUpdate:
    axis: str
    previous: Selection
    selection: Selection
    steps: Tuple[str, ...]
    model: ChartModel


class ChartController:
    def __init__(self, dataset: Dataset, selection: Optional[Selection] = None,
                 viewport: Tuple[float, float] = DEFAULT_VIEWPORT):
        self.dataset = dataset
        self._selection = selection or Selection()
        self._surface: Optional[Surface] = None
        self._scales: Dict[str, LinearScale] = {}
        self._axes: Dict[str, AxisModel] = {}
        self._markers: Tuple[Marker, ...] = ()
        self._texts: Tuple[MarkerText, ...] = ()
        self._tooltip: Optional[TooltipBinding] = None
        self._tooltips: Dict[str, str] = {}
        self._labels: Dict[Tuple[str, str], AxisLabel] = {}
        self.rebuild(*viewport)

    # -----------------------------
    # STATE
    # -----------------------------
    @property
    def selection(self) -> Selection:
        return self._selection

    @property
    def surface(self) -> Surface:
        return self._surface

    @property
    def x_scale(self) -> LinearScale:
        return self._scales[X_AXIS]

    @property
    def y_scale(self) -> LinearScale:
        return self._scales[Y_AXIS]

    def scale(self, axis: str) -> LinearScale:
        return self._scales[axis]

    def model(self, transition_ms: int = 0) -> ChartModel:
        return ChartModel(
            surface=self._surface,
            selection=self._selection,
            x_axis=self._axes[X_AXIS],
            y_axis=self._axes[Y_AXIS],
            markers=self._markers,
            texts=self._texts,
            tooltip=self._tooltip,
            tooltips=dict(self._tooltips),
            labels=tuple(self._labels.values()),
            transition_ms=transition_ms,
        )

    # -----------------------------
    # FULL REBUILD (initial load, window resize)
    # -----------------------------
    def rebuild(self, viewport_width: float, viewport_height: float) -> ChartModel:
        self._surface = compute_surface(viewport_width, viewport_height)
        for axis in AXES:
            self._rescale(axis)
            self._render_axis(axis)
        self._markers = self._position_markers()
        self._texts = self._position_texts()
        self._bind_tooltips()
        self._labels = {}
        for axis in AXES:
            classes = self._selection.label_classes(axis)
            for slot, (value, info) in enumerate(AXIS_LABELS[axis].items()):
                left, top = self._surface.label_anchor(axis, slot)
                self._labels[(axis, value)] = AxisLabel(axis, value, info.text, classes[value], left, top)
        logger.debug("Rebuilt %.0fx%.0f surface for %s/%s",
                     self._surface.width, self._surface.height, self._selection.x, self._selection.y)
        return self.model()

    # -----------------------------
    # SELECTION CHANGE (axis label click)
    # -----------------------------
    def click_label(self, axis: str, value: str) -> Optional[SelectionUpdate]:
        value = check_field(axis, value)
        previous = self._selection
        if value == previous.field(axis):
            return None

        self._selection = previous.with_field(axis, value)
        logger.debug("%s axis: %s -> %s", axis.upper(), previous.field(axis), value)

        steps = []
        self._rescale(axis)
        steps.append(STEP_SCALE)
        self._render_axis(axis)
        steps.append(STEP_AXIS)
        # both coordinates move: position depends on both scales
        self._markers = self._position_markers()
        steps.append(STEP_MARKERS)
        self._texts = self._position_texts()
        steps.append(STEP_TEXTS)
        self._bind_tooltips()
        steps.append(STEP_TOOLTIP)
        self._restyle_labels(axis)
        steps.append(STEP_LABELS)

        return SelectionUpdate(
            axis=axis,
            previous=previous,
            selection=self._selection,
            steps=tuple(steps),
            model=self.model(transition_ms=TRANSITION_MS),
        )

    # -----------------------------
    # HELPERS
    # -----------------------------
    def _rescale(self, axis):
        field = self._selection.field(axis)
        self._scales[axis] = make_scale(self.dataset, field, self._surface.extent(axis), axis)

    def _render_axis(self, axis):
        self._axes[axis] = AxisModel(axis, self._selection.field(axis), self._scales[axis])

    def _position_markers(self):
        xs, ys = self.x_scale, self.y_scale
        fx, fy = self._selection.x, self._selection.y
        markers = []
        for row in self.dataset:
            vx, vy = row.value(fx), row.value(fy)
            markers.append(Marker(row.id, vx, vy, xs(vx), ys(vy)))
        return tuple(markers)

    def _position_texts(self):
        xs, ys = self.x_scale, self.y_scale
        fx, fy = self._selection.x, self._selection.y
        texts = []
        for row in self.dataset:
            vx, vy = row.value(fx), row.value(fy)
            texts.append(MarkerText(row.id, vx, vy, xs(vx), ys(vy) + TEXT_OFFSET, row.abbr))
        return tuple(texts)

    def _bind_tooltips(self):
        self._tooltip = TooltipBinding(self._selection.x, self._selection.y)
        self._tooltips = self._tooltip.bind(self.dataset)

    def _restyle_labels(self, axis):
        classes = self._selection.label_classes(axis)
        for value, css_class in classes.items():
            self._labels[(axis, value)] = replace(self._labels[(axis, value)], css_class=css_class)
