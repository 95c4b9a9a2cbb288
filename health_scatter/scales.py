import math
from dataclasses import dataclass
from typing import List, Tuple

import numpy as np

from .config import DOMAIN_HIGH_PAD, DOMAIN_LOW_PAD, TICK_COUNT

X_AXIS = "x"
Y_AXIS = "y"


@dataclass(frozen=True)
class LinearScale:
    """Maps a data value to a pixel coordinate by linear interpolation."""

    domain: Tuple[float, float]
    range: Tuple[float, float]

    def __call__(self, value: float) -> float:
        d0, d1 = self.domain
        r0, r1 = self.range
        if d1 == d0:
            return (r0 + r1) / 2
        return r0 + (value - d0) / (d1 - d0) * (r1 - r0)

    def invert(self, pixel: float) -> float:
        d0, d1 = self.domain
        r0, r1 = self.range
        if r1 == r0:
            return (d0 + d1) / 2
        return d0 + (pixel - r0) / (r1 - r0) * (d1 - d0)

    def ticks(self, count: int = TICK_COUNT) -> List[float]:
        return tick_values(self.domain[0], self.domain[1], count)


def _tick_increment(start: float, stop: float, count: int) -> float:
    # Negative result n means a step of 1/n; keeps ticks like 0.1 exact.
    step = (stop - start) / max(count, 1)
    power = math.floor(math.log10(step))
    error = step / 10 ** power
    if error >= math.sqrt(50):
        factor = 10
    elif error >= math.sqrt(10):
        factor = 5
    elif error >= math.sqrt(2):
        factor = 2
    else:
        factor = 1
    if power >= 0:
        return factor * 10 ** power
    return -(10 ** -power) / factor


def tick_values(start: float, stop: float, count: int = TICK_COUNT) -> List[float]:
    """Round tick values (1, 2 or 5 times a power of ten) covering [start, stop]."""
    if not (np.isfinite(start) and np.isfinite(stop)) or count <= 0:
        return []
    if start == stop:
        return [float(start)]
    reverse = stop < start
    lo, hi = (stop, start) if reverse else (start, stop)
    inc = _tick_increment(lo, hi, count)
    if inc > 0:
        i0, i1 = math.ceil(lo / inc), math.floor(hi / inc)
        ticks = [float(i * inc) for i in range(i0, i1 + 1)]
    else:
        inc = -inc
        i0, i1 = math.ceil(lo * inc), math.floor(hi * inc)
        ticks = [i / inc for i in range(i0, i1 + 1)]
    return ticks[::-1] if reverse else ticks


def padded_domain(values: np.ndarray) -> Tuple[float, float]:
    # NaN cells are skipped, so a single bad value does not blank the axis
    return float(np.nanmin(values)) * DOMAIN_LOW_PAD, float(np.nanmax(values)) * DOMAIN_HIGH_PAD


def make_scale(dataset, field: str, extent: float, axis: str) -> LinearScale:
    """Build the scale for ``field`` over a plot extent of ``extent`` pixels.

    X runs left to right; Y is inverted because pixel rows grow downwards.
    """
    domain = padded_domain(dataset.column(field))
    if axis == X_AXIS:
        return LinearScale(domain, (0.0, float(extent)))
    if axis == Y_AXIS:
        return LinearScale(domain, (float(extent), 0.0))
    raise ValueError(f"Unknown axis: {axis!r}")
