from __future__ import annotations

import pytest

from health_scatter.scales import X_AXIS, Y_AXIS
from health_scatter.selection import ACTIVE, INACTIVE, AXIS_LABELS, Selection, XField, tooltip_label


def test_default_selection_is_poverty_vs_obesity() -> None:
    sel = Selection()
    assert (sel.x, sel.y) == ("poverty", "obesity")


def test_with_field_returns_new_selection() -> None:
    sel = Selection()
    moved = sel.with_field(X_AXIS, "age")

    assert moved == Selection("age", "obesity")
    assert sel.x == "poverty"


def test_enum_members_are_normalised_to_strings() -> None:
    assert Selection(XField.INCOME).x == "income"


@pytest.mark.parametrize("axis,value", [(X_AXIS, "obesity"), (Y_AXIS, "age"), (X_AXIS, "height")])
def test_fields_are_restricted_to_their_axis(axis, value) -> None:
    with pytest.raises(ValueError):
        Selection().with_field(axis, value)


def test_label_classes_mark_exactly_one_active() -> None:
    classes = Selection("income", "smokes").label_classes(X_AXIS)
    assert classes == {"poverty": INACTIVE, "age": INACTIVE, "income": ACTIVE}


def test_tooltip_labels_fall_back_to_last_entry() -> None:
    assert tooltip_label(X_AXIS, "poverty") == "Poverty:"
    assert tooltip_label(X_AXIS, "age") == "Age:"
    assert tooltip_label(X_AXIS, "income") == "Income:"
    assert tooltip_label(X_AXIS, "anything") == "Income:"
    assert tooltip_label(Y_AXIS, "obesity") == "Obesity:"
    assert tooltip_label(Y_AXIS, "smokes") == "Smokes:"
    assert tooltip_label(Y_AXIS, "anything") == "Healthcare:"


def test_axis_label_texts() -> None:
    assert [i.text for i in AXIS_LABELS[X_AXIS].values()] == [
        "In Poverty (%)", "Age (Median)", "Household Income (Median)"]
    assert [i.text for i in AXIS_LABELS[Y_AXIS].values()] == [
        "Obese (%)", "Smokes (%)", "Lacks Healthcare (%)"]


def test_store_round_trip_and_empty_store() -> None:
    sel = Selection("age", "healthcare")
    assert Selection.from_dict(sel.to_dict()) == sel
    assert Selection.from_dict(None) == Selection()
