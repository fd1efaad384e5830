# Median trend line for LRR tracks: sort by Start, cut into runs of
# `bin_size` consecutive points, and report the median Start and median LRR
# of every run.

from __future__ import annotations

from typing import Iterator, NamedTuple

import numpy as np
import pandas as pd

from bafplot.config import SMOOTH_BIN_SIZE


class SmoothedPoint(NamedTuple):
    position: float
    value: float


def bin_assignments(n: int, bin_size: int = SMOOTH_BIN_SIZE) -> np.ndarray:
    if bin_size < 1:
        raise ValueError(f"bin_size must be >= 1, got {bin_size}")
    return np.arange(n) // bin_size


def smooth_lrr(lrr: pd.DataFrame, bin_size: int = SMOOTH_BIN_SIZE) -> Iterator[SmoothedPoint]:
    """Yield one SmoothedPoint per group of `bin_size` rows of the Start-sorted track.

    The last group may be short. Even-sized groups use the mean of the two
    middle values.
    """
    ordered = lrr.sort_values("Start", kind="mergesort")
    starts = ordered["Start"].to_numpy(dtype=float)
    values = ordered["Value"].to_numpy(dtype=float)
    groups = bin_assignments(starts.size, bin_size)
    if groups.size == 0:
        return
    splits = np.flatnonzero(np.diff(groups)) + 1
    for group_starts, group_values in zip(np.split(starts, splits), np.split(values, splits)):
        yield SmoothedPoint(float(np.median(group_starts)), float(np.median(group_values)))


def smoothed_frame(lrr: pd.DataFrame, bin_size: int = SMOOTH_BIN_SIZE) -> pd.DataFrame:
    points = list(smooth_lrr(lrr, bin_size))
    return pd.DataFrame(
        {
            "Pos": [point.position for point in points],
            "Value": [point.value for point in points],
        },
        dtype=float,
    )
