"""Tabular export of frequency bins.

Functions
---------
build_bin_rows
    One dict per bin, ready for ``pd.DataFrame()``.
bins_to_frame
    DataFrame with columns ``freq``, ``amplitude``, ``phase`` in emission order.
frame_to_bins
    Rebuild FrequencyBin records from such a DataFrame.
"""

from __future__ import annotations

from typing import Any, Dict, List, Sequence

import numpy as np
import pandas as pd

from epicycle_fourier.models.bins import FrequencyBin

BIN_COLUMNS = ("freq", "amplitude", "phase")


def build_bin_rows(bins: Sequence[FrequencyBin]) -> List[Dict[str, Any]]:
    return [b.to_dict() for b in bins]


def bins_to_frame(bins: Sequence[FrequencyBin]) -> pd.DataFrame:
    """DataFrame view of ``bins``; row order is emission order."""
    df = pd.DataFrame(build_bin_rows(bins), columns=list(BIN_COLUMNS))
    return df.astype({"freq": np.int64, "amplitude": np.float64, "phase": np.float64})


def frame_to_bins(df: pd.DataFrame) -> List[FrequencyBin]:
    missing = [c for c in BIN_COLUMNS if c not in df.columns]
    if missing:
        raise KeyError(f"Missing required columns in bins DataFrame: {missing}")
    return [
        FrequencyBin(freq=int(f), amplitude=float(a), phase=float(p))
        for f, a, p in zip(df["freq"].to_numpy(), df["amplitude"].to_numpy(), df["phase"].to_numpy())
    ]
