"""Dataset loading: one row per state, six numeric observations each."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional, Tuple, Union

import numpy as np
import pandas as pd

from .config import ABBR_COL, ID_COL, NUMERIC_COLUMNS, STATE_COL

logger = logging.getLogger(__name__)


class DatasetError(Exception):
    """Base class for dataset precondition failures."""


class MissingColumnsError(DatasetError):
    def __init__(self, missing):
        self.missing = list(missing)
        super().__init__(f"Dataset is missing required columns: {', '.join(self.missing)}")


class EmptyDatasetError(DatasetError):
    def __init__(self):
        super().__init__("Dataset has no rows; scale domains are undefined")


class DuplicateIdError(DatasetError):
    def __init__(self, duplicates):
        self.duplicates = list(duplicates)
        super().__init__(f"Row ids must be unique; repeated: {', '.join(self.duplicates)}")


@dataclass(frozen=True)
class DataRow:
    id: str
    abbr: str
    poverty: float
    age: float
    income: float
    obesity: float
    smokes: float
    healthcare: float
    state: Optional[str] = None

    @property
    def name(self) -> str:
        return self.state or self.id

    def value(self, field: str) -> float:
        if field not in NUMERIC_COLUMNS:
            raise ValueError(f"Unknown field: {field!r}")
        return getattr(self, field)


class Dataset:
    """Ordered, read-only collection of :class:`DataRow`.

    Fixed for the lifetime of the app; columns are cached as float arrays
    so scale computation does not walk the rows again.
    """

    def __init__(self, rows: Iterable[DataRow]):
        self._rows: Tuple[DataRow, ...] = tuple(rows)
        if not self._rows:
            raise EmptyDatasetError()
        seen, dupes = set(), []
        for r in self._rows:
            if r.id in seen and r.id not in dupes:
                dupes.append(r.id)
            seen.add(r.id)
        if dupes:
            raise DuplicateIdError(dupes)
        self._columns = {
            f: np.array([r.value(f) for r in self._rows], dtype=float) for f in NUMERIC_COLUMNS
        }
        for arr in self._columns.values():
            arr.setflags(write=False)

    def __len__(self):
        return len(self._rows)

    def __iter__(self):
        return iter(self._rows)

    def __getitem__(self, i):
        return self._rows[i]

    @property
    def rows(self) -> Tuple[DataRow, ...]:
        return self._rows

    @property
    def keys(self) -> Tuple[str, ...]:
        return tuple(r.id for r in self._rows)

    def column(self, field: str) -> np.ndarray:
        try:
            return self._columns[field]
        except KeyError:
            raise ValueError(f"Unknown field: {field!r}") from None

    @classmethod
    def from_frame(cls, df: pd.DataFrame) -> "Dataset":
        has_state = STATE_COL in df.columns
        rows = []
        for rec in df.to_dict("records"):
            rows.append(DataRow(
                id=str(rec[ID_COL]),
                abbr=str(rec[ABBR_COL]),
                state=str(rec[STATE_COL]) if has_state else None,
                **{f: float(rec[f]) for f in NUMERIC_COLUMNS},
            ))
        return cls(rows)


# -----------------------------
# HELPERS
# -----------------------------
def clean_numeric_column(series: pd.Series) -> pd.Series:
    # No unit or separator stripping: "42,830" and "19.3%" are not numbers
    s = series.astype(str).str.strip().replace({"NA": np.nan, "": np.nan, "nan": np.nan})
    return pd.to_numeric(s, errors="coerce")


def prepare_frame(df: pd.DataFrame) -> pd.DataFrame:
    """Check the schema and coerce the six observation columns to floats.

    Non-numeric cells become NaN; they are reported, not rejected.
    """
    required = [ABBR_COL] + NUMERIC_COLUMNS
    missing = [c for c in required if c not in df.columns]
    if ID_COL not in df.columns and STATE_COL not in df.columns:
        missing.append(f"{ID_COL} or {STATE_COL}")
    if missing:
        raise MissingColumnsError(missing)

    out = df.copy()
    if ID_COL not in out.columns:
        out[ID_COL] = out[STATE_COL]
    out[ID_COL] = out[ID_COL].astype(str).str.strip()
    out[ABBR_COL] = out[ABBR_COL].astype(str).str.strip()
    if STATE_COL in out.columns:
        out[STATE_COL] = out[STATE_COL].astype(str).str.strip()

    for c in NUMERIC_COLUMNS:
        col = clean_numeric_column(out[c])
        bad = int(col.isna().sum())
        if bad:
            logger.warning("Column %s: %d non-numeric value(s) coerced to NaN", c, bad)
        out[c] = col.astype(float)

    keep = [ID_COL, ABBR_COL] + ([STATE_COL] if STATE_COL in out.columns else []) + NUMERIC_COLUMNS
    return out[keep].reset_index(drop=True)


def load_dataset(path: Union[str, Path]) -> Dataset:
    path = Path(path)
    df = pd.read_csv(path)
    df = prepare_frame(df)
    dataset = Dataset.from_frame(df)
    logger.info("Loaded %s: %d rows, %d indicators", path.name, len(dataset), len(NUMERIC_COLUMNS))
    return dataset
