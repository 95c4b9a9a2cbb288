from dataclasses import dataclass
from typing import NamedTuple

from .config import (
    LABEL_STEP,
    MARGIN_BOTTOM,
    MARGIN_LEFT,
    MARGIN_RIGHT,
    MARGIN_TOP,
    VIEWPORT_FRACTION,
    X_LABEL_GAP,
)
from .scales import X_AXIS, Y_AXIS


class Margin(NamedTuple):
    top: float
    right: float
    bottom: float
    left: float


MARGIN = Margin(MARGIN_TOP, MARGIN_RIGHT, MARGIN_BOTTOM, MARGIN_LEFT)


@dataclass(frozen=True)
class Surface:
    """Drawing surface sized from the viewport; plot area is what the margins leave."""

    width: float
    height: float
    margin: Margin = MARGIN

    @property
    def plot_width(self) -> float:
        return max(self.width - self.margin.left - self.margin.right, 0.0)

    @property
    def plot_height(self) -> float:
        return max(self.height - self.margin.top - self.margin.bottom, 0.0)

    def extent(self, axis: str) -> float:
        if axis == X_AXIS:
            return self.plot_width
        if axis == Y_AXIS:
            return self.plot_height
        raise ValueError(f"Unknown axis: {axis!r}")

    def label_anchor(self, axis: str, slot: int):
        """Surface-pixel anchor (left, top) of the ``slot``-th label on ``axis``.

        X labels stack downwards below the plot, centred on it; Y labels stack
        rightwards from the surface edge, rotated, centred on the plot height.
        """
        if axis == X_AXIS:
            return (
                self.margin.left + self.plot_width / 2,
                self.margin.top + self.plot_height + X_LABEL_GAP + LABEL_STEP * (slot + 1),
            )
        if axis == Y_AXIS:
            return (
                LABEL_STEP * slot,
                self.margin.top + self.plot_height / 2,
            )
        raise ValueError(f"Unknown axis: {axis!r}")


def compute_surface(viewport_width: float, viewport_height: float) -> Surface:
    return Surface(
        width=float(viewport_width) * VIEWPORT_FRACTION,
        height=float(viewport_height) * VIEWPORT_FRACTION,
    )
