# Paired LRR-above-BAF charts. Building a ChartPair selects the data and the
# highlight bands; drawing it places both panels into one cell of a figure
# grid with shared x axes.

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Tuple, Union

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib.axes import Axes
from matplotlib.figure import Figure
from matplotlib.gridspec import GridSpec, SubplotSpec
from matplotlib.ticker import FuncFormatter
import pandas as pd
import seaborn as sns

from bafplot.config import (
    BAF_REFERENCE,
    BAF_YLIM,
    BAND_ALPHA,
    BAND_COLOR,
    DPI,
    EDGE_SIZE,
    GENOME_POINT_SIZE,
    LRR_REFERENCE,
    LRR_YLIM,
    MIN_PADDING,
    POINT_COLOR,
    REFERENCE_COLOR,
    REGION_FIGSIZE,
    REGION_POINT_SIZE,
    SMOOTH_BIN_SIZE,
    TREND_COLOR,
)
from bafplot.smoothing import smoothed_frame
from bafplot.tracks import Region
from bafplot.windows import filter_track, padded_window

Band = Tuple[float, float]


@dataclass
class ChartPair:
    title: str
    lrr: pd.DataFrame
    baf: pd.DataFrame
    trend: pd.DataFrame
    lrr_bands: List[Band] = field(default_factory=list)
    baf_bands: List[Band] = field(default_factory=list)
    point_size: float = GENOME_POINT_SIZE


def chromosome_title(chrom: str) -> str:
    return chrom if chrom.startswith("chr") else f"chr{chrom}"


def edge_bands(lrr: pd.DataFrame, edge: int = EDGE_SIZE) -> List[Band]:
    if lrr.empty:
        return []
    lo = float(lrr["Start"].min())
    hi = float(lrr["Start"].max())
    return [(lo, lo + edge), (hi - edge, hi)]


def build_genome_pairs(
    baf: pd.DataFrame,
    lrr: pd.DataFrame,
    bin_size: int = SMOOTH_BIN_SIZE,
) -> Dict[str, ChartPair]:
    """One ChartPair per LRR chromosome, keyed in first-seen order."""
    pairs: Dict[str, ChartPair] = {}
    for chrom in lrr["Chr"].dropna().unique():
        lrr_chr = lrr.loc[lrr["Chr"] == chrom]
        baf_chr = baf.loc[baf["Chr"] == chrom]
        pairs[chrom] = ChartPair(
            title=chromosome_title(chrom),
            lrr=lrr_chr,
            baf=baf_chr,
            trend=smoothed_frame(lrr_chr, bin_size),
            lrr_bands=edge_bands(lrr_chr),
        )
    return pairs


def build_region_pair(
    baf: pd.DataFrame,
    lrr: pd.DataFrame,
    region: Region,
    min_padding: int = MIN_PADDING,
    bin_size: int = SMOOTH_BIN_SIZE,
) -> ChartPair:
    if region.start > region.end:
        raise ValueError(f"region start {region.start} exceeds end {region.end}")

    window = padded_window(region, min_padding)
    region_lrr = filter_track(lrr, region.chrom, window)
    region_baf = filter_track(baf, region.chrom, window)
    # Highlight the requested interval, not the padded window.
    band = (float(region.start), float(region.end))
    return ChartPair(
        title=f"{region.chrom}:{region.start}-{region.end}",
        lrr=region_lrr,
        baf=region_baf,
        trend=smoothed_frame(region_lrr, bin_size),
        lrr_bands=[band],
        baf_bands=[band],
        point_size=REGION_POINT_SIZE,
    )


def _format_position(x: float, _pos: int) -> str:
    return f"{x:,.0f}"


def _draw_points(ax: Axes, data: pd.DataFrame, bands: List[Band], point_size: float) -> None:
    for band_start, band_end in bands:
        ax.axvspan(band_start, band_end, color=BAND_COLOR, alpha=BAND_ALPHA, linewidth=0, zorder=0)
    ax.scatter(data["Start"], data["Value"], s=point_size, color=POINT_COLOR, linewidths=0, zorder=2)


def draw_pair(fig: Figure, cell: SubplotSpec, pair: ChartPair) -> Tuple[Axes, Axes]:
    inner = cell.subgridspec(2, 1, hspace=0.08)
    with sns.axes_style("whitegrid"):
        ax_lrr = fig.add_subplot(inner[0])
        ax_baf = fig.add_subplot(inner[1], sharex=ax_lrr)

    _draw_points(ax_lrr, pair.lrr, pair.lrr_bands, pair.point_size)
    ax_lrr.plot(pair.trend["Pos"], pair.trend["Value"], color=TREND_COLOR, linewidth=1.0, zorder=3)
    ax_lrr.axhline(LRR_REFERENCE, linestyle=":", color=REFERENCE_COLOR, linewidth=1.0)
    ax_lrr.set_ylim(*LRR_YLIM)
    ax_lrr.set_ylabel("LRR")
    ax_lrr.set_title(pair.title)
    ax_lrr.tick_params(axis="x", labelbottom=False)

    _draw_points(ax_baf, pair.baf, pair.baf_bands, pair.point_size)
    ax_baf.axhline(BAF_REFERENCE, linestyle=":", color=REFERENCE_COLOR, linewidth=1.0)
    ax_baf.set_ylim(*BAF_YLIM)
    ax_baf.set_ylabel("BAF")
    ax_baf.set_xlabel("Position")
    ax_baf.xaxis.set_major_formatter(FuncFormatter(_format_position))

    for ax in (ax_lrr, ax_baf):
        sns.despine(ax=ax, left=True, bottom=True)
    return ax_lrr, ax_baf


def render_region(pair: ChartPair, output_path: Union[str, Path], dpi: int = DPI) -> Path:
    output_path = Path(output_path)
    fig = plt.figure(figsize=REGION_FIGSIZE)
    try:
        grid = GridSpec(1, 1, figure=fig)
        draw_pair(fig, grid[0, 0], pair)
        fig.savefig(output_path, dpi=dpi)
    finally:
        plt.close(fig)
    print(f"Wrote region plot to {output_path}")
    return output_path
