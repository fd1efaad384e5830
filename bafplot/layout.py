# Genome-wide layout: chart pairs are grouped into chunks of CHUNK_SIZE, the
# chunks are concatenated back in order, and everything is drawn into a single
# image on a GRID_COLUMNS-wide grid, filling rows left to right.

from __future__ import annotations

import math
from pathlib import Path
from typing import List, Mapping, Sequence, Tuple, TypeVar, Union

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib.gridspec import GridSpec

from bafplot.charts import ChartPair, draw_pair
from bafplot.config import CHUNK_SIZE, DPI, GENOME_FIGSIZE, GRID_COLUMNS

T = TypeVar("T")


def chunk_pairs(pairs: Sequence[T], chunk_size: int = CHUNK_SIZE) -> List[List[T]]:
    if chunk_size < 1:
        raise ValueError(f"chunk_size must be >= 1, got {chunk_size}")
    items = list(pairs)
    return [items[i : i + chunk_size] for i in range(0, len(items), chunk_size)]


def grid_positions(count: int, ncols: int = GRID_COLUMNS) -> List[Tuple[int, int]]:
    if ncols < 1:
        raise ValueError(f"ncols must be >= 1, got {ncols}")
    return [divmod(i, ncols) for i in range(count)]


def arrange_pairs(
    pairs: Mapping[str, ChartPair],
    chunk_size: int = CHUNK_SIZE,
    ncols: int = GRID_COLUMNS,
) -> List[Tuple[str, int, int]]:
    """Return (chromosome, row, column) for every pair in drawing order."""
    chunks = chunk_pairs(list(pairs), chunk_size)
    ordered = [chrom for chunk in chunks for chrom in chunk]
    return [(chrom, row, col) for chrom, (row, col) in zip(ordered, grid_positions(len(ordered), ncols))]


def render_genome(
    pairs: Mapping[str, ChartPair],
    output_path: Union[str, Path],
    dpi: int = DPI,
    chunk_size: int = CHUNK_SIZE,
    ncols: int = GRID_COLUMNS,
) -> Path:
    output_path = Path(output_path)
    placements = arrange_pairs(pairs, chunk_size, ncols)
    nrows = max(1, math.ceil(len(placements) / ncols))
    n_chunks = len(chunk_pairs(list(pairs), chunk_size))
    print(f"Laying out {len(placements)} chromosomes in {n_chunks} chunks on a {nrows}x{ncols} grid")

    fig = plt.figure(figsize=GENOME_FIGSIZE)
    try:
        grid = GridSpec(nrows, ncols, figure=fig, wspace=0.25, hspace=0.3)
        for chrom, row, col in placements:
            draw_pair(fig, grid[row, col], pairs[chrom])
        fig.savefig(output_path, dpi=dpi)
    finally:
        plt.close(fig)
    print(f"Wrote genome plot to {output_path}")
    return output_path
