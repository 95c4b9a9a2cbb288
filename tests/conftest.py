"""Pytest fixtures shared across the chart tests."""

from __future__ import annotations

import pytest

from health_scatter.data import DataRow, Dataset


@pytest.fixture
def two_rows() -> Dataset:
    """The two-state dataset used by the end-to-end scenario."""

    return Dataset([
        DataRow(id="A", abbr="AA", poverty=10, age=30, income=50000, obesity=20, smokes=15, healthcare=8),
        DataRow(id="B", abbr="BB", poverty=20, age=40, income=40000, obesity=30, smokes=25, healthcare=12),
    ])


@pytest.fixture
def three_rows() -> Dataset:
    return Dataset([
        DataRow(id="1", state="Alabama", abbr="AL", poverty=19.3, age=38.6, income=42830,
                obesity=33.5, smokes=21.1, healthcare=13.9),
        DataRow(id="2", state="Alaska", abbr="AK", poverty=11.2, age=33.3, income=71583,
                obesity=29.7, smokes=19.9, healthcare=15),
        DataRow(id="4", state="Arizona", abbr="AZ", poverty=18.2, age=36.9, income=50068,
                obesity=28.9, smokes=16.5, healthcare=14.4),
    ])


@pytest.fixture
def write_csv(tmp_path):
    """Return a helper writing ``text`` to a CSV file under ``tmp_path``."""

    def _write(text: str, name: str = "data.csv"):
        path = tmp_path / name
        path.write_text(text.strip() + "\n")
        return path

    return _write
