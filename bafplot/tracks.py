# Readers for the BAF / LRR signal tracks and the tab-delimited region list.
# Tracks are gzip-compressed tables with a header row; regions are headerless
# `Chr Start End Type` rows.

from __future__ import annotations

from pathlib import Path
from typing import List, NamedTuple, Optional, Union

import pandas as pd

from bafplot.config import DEFAULT_REGION_TYPE, REGION_COLUMNS, TRACK_COLUMNS

GZIP_MAGIC = b"\x1f\x8b"
EMPTY_REGIONS_MESSAGE = "Region file is empty. No regions to plot."

PathLike = Union[str, Path]


class Region(NamedTuple):
    chrom: str
    start: int
    end: int
    type: str = DEFAULT_REGION_TYPE


class RegionLoad(NamedTuple):
    regions: List[Region]
    message: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.message is None


def _compression(path: Path) -> Optional[str]:
    with path.open("rb") as handle:
        magic = handle.read(2)
    return "gzip" if magic == GZIP_MAGIC else None


def load_track(path: PathLike) -> pd.DataFrame:
    """Read a signal track and remap its first four columns to Chr/Start/End/Value."""
    path = Path(path)
    frame = pd.read_csv(
        path,
        sep="\t",
        header=0,
        comment="#",
        dtype=str,
        compression=_compression(path),
    )
    if frame.shape[1] < len(TRACK_COLUMNS):
        raise ValueError(
            f"{path} has {frame.shape[1]} columns; expected at least {len(TRACK_COLUMNS)}"
        )

    track = frame.iloc[:, : len(TRACK_COLUMNS)].copy()
    track.columns = TRACK_COLUMNS
    track["Start"] = pd.to_numeric(track["Start"]).astype("int64")
    track["End"] = pd.to_numeric(track["End"]).astype("int64")
    track["Value"] = pd.to_numeric(track["Value"]).astype(float)
    print(f"Loaded {len(track)} rows from {path}")
    return track


def load_regions(path: PathLike) -> RegionLoad:
    path = Path(path)
    try:
        frame = pd.read_csv(path, sep="\t", header=None, comment="#", dtype=str)
    except pd.errors.EmptyDataError:
        return RegionLoad([], EMPTY_REGIONS_MESSAGE)
    except (OSError, ValueError) as exc:
        return RegionLoad([], f"Error reading region file: {exc}")

    if frame.empty:
        return RegionLoad([], EMPTY_REGIONS_MESSAGE)
    if frame.shape[1] < 3:
        return RegionLoad(
            [], f"Error reading region file: expected at least 3 columns, found {frame.shape[1]}"
        )

    frame = frame.iloc[:, : len(REGION_COLUMNS)].copy()
    frame.columns = REGION_COLUMNS[: frame.shape[1]]
    if "Type" not in frame.columns:
        frame["Type"] = DEFAULT_REGION_TYPE
    frame["Type"] = frame["Type"].fillna(DEFAULT_REGION_TYPE)

    try:
        # 1e6 and 1000000.0 are valid coordinates.
        for column in ("Start", "End"):
            frame[column] = pd.to_numeric(frame[column]).astype("int64")
    except (TypeError, ValueError) as exc:
        return RegionLoad([], f"Error reading region file: {exc}")

    regions = [
        Region(str(chrom), int(start), int(end), str(kind))
        for chrom, start, end, kind in frame[REGION_COLUMNS].itertuples(index=False, name=None)
    ]
    return RegionLoad(regions)
