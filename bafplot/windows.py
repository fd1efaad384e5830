# Padded windows around regions of interest and the track filters that use
# them. Only Start is tested against the window: a point that starts inside
# and ends outside is kept, one that starts before the window is dropped.

from __future__ import annotations

from typing import Tuple

import pandas as pd

from bafplot.config import MIN_PADDING, REGION_FILENAME
from bafplot.tracks import Region


def region_padding(region: Region, min_padding: int = MIN_PADDING) -> int:
    if min_padding < 0:
        raise ValueError(f"min_padding must be >= 0, got {min_padding}")
    return max(region.end - region.start, min_padding)


def padded_window(region: Region, min_padding: int = MIN_PADDING) -> Tuple[int, int]:
    padding = region_padding(region, min_padding)
    return region.start - padding, region.end + padding


def filter_track(track: pd.DataFrame, chrom: str, window: Tuple[int, int]) -> pd.DataFrame:
    lo, hi = window
    mask = (track["Chr"] == chrom) & (track["Start"] >= lo) & (track["Start"] <= hi)
    return track.loc[mask].copy()


def region_filename(region: Region) -> str:
    return REGION_FILENAME.format(chrom=region.chrom, start=int(region.start), end=int(region.end))
