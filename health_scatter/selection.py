"""Axis field selection and the label lookup tables that hang off it."""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Dict, List, NamedTuple

from .config import DEFAULT_X, DEFAULT_Y
from .scales import X_AXIS, Y_AXIS

ACTIVE = "active"
INACTIVE = "inactive"


class XField(str, Enum):
    POVERTY = "poverty"
    AGE = "age"
    INCOME = "income"


class YField(str, Enum):
    OBESITY = "obesity"
    SMOKES = "smokes"
    HEALTHCARE = "healthcare"


AXIS_FIELDS = {X_AXIS: XField, Y_AXIS: YField}


class LabelInfo(NamedTuple):
    text: str       # clickable axis title
    tooltip: str    # prefix shown in the hover box


# Order matters: it is the stacking order of the labels on screen
AXIS_LABELS: Dict[str, Dict[str, LabelInfo]] = {
    X_AXIS: {
        XField.POVERTY.value: LabelInfo("In Poverty (%)", "Poverty:"),
        XField.AGE.value: LabelInfo("Age (Median)", "Age:"),
        XField.INCOME.value: LabelInfo("Household Income (Median)", "Income:"),
    },
    Y_AXIS: {
        YField.OBESITY.value: LabelInfo("Obese (%)", "Obesity:"),
        YField.SMOKES.value: LabelInfo("Smokes (%)", "Smokes:"),
        YField.HEALTHCARE.value: LabelInfo("Lacks Healthcare (%)", "Healthcare:"),
    },
}

# Anything not listed falls through to the last entry of the axis
DEFAULT_TOOLTIP = {X_AXIS: "Income:", Y_AXIS: "Healthcare:"}


def tooltip_label(axis: str, field: str) -> str:
    info = AXIS_LABELS[axis].get(field)
    return info.tooltip if info else DEFAULT_TOOLTIP[axis]


def axis_values(axis: str) -> List[str]:
    return list(AXIS_LABELS[axis])


def check_field(axis: str, value: str) -> str:
    if axis not in AXIS_FIELDS:
        raise ValueError(f"Unknown axis: {axis!r}")
    try:
        return AXIS_FIELDS[axis](value).value
    except ValueError:
        raise ValueError(f"{value!r} is not a {axis.upper()} field; expected one of {axis_values(axis)}") from None


@dataclass(frozen=True)
class Selection:
    x: str = DEFAULT_X
    y: str = DEFAULT_Y

    def __post_init__(self):
        object.__setattr__(self, "x", check_field(X_AXIS, self.x))
        object.__setattr__(self, "y", check_field(Y_AXIS, self.y))

    def field(self, axis: str) -> str:
        if axis == X_AXIS:
            return self.x
        if axis == Y_AXIS:
            return self.y
        raise ValueError(f"Unknown axis: {axis!r}")

    def with_field(self, axis: str, value: str) -> "Selection":
        check_field(axis, value)
        return replace(self, **{axis: value})

    def label_classes(self, axis: str) -> Dict[str, str]:
        """``active`` for the selected field of ``axis``, ``inactive`` for its peers."""
        current = self.field(axis)
        return {v: ACTIVE if v == current else INACTIVE for v in axis_values(axis)}

    def to_dict(self) -> Dict[str, str]:
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data) -> "Selection":
        if not data:
            return cls()
        return cls(x=data.get("x", DEFAULT_X), y=data.get("y", DEFAULT_Y))
