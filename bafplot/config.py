# Shared constants for track loading, smoothing, region padding, and chart
# layout. CLI flags override MIN_PADDING, SMOOTH_BIN_SIZE and DPI per run.

from __future__ import annotations

# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------
GENOME_MODE = "genome_plot"
REGION_MODE = "region_plot"
MODES = (GENOME_MODE, REGION_MODE)

TRACK_COLUMNS = ["Chr", "Start", "End", "Value"]
REGION_COLUMNS = ["Chr", "Start", "End", "Type"]
DEFAULT_REGION_TYPE = "."

SMOOTH_BIN_SIZE = 10  # Consecutive LRR points collapsed into one trend point.
MIN_PADDING = 600_000  # Floor on the flank added to each side of a region.
EDGE_SIZE = 100_000  # Width of the chromosome edge bands in genome mode.

CHUNK_SIZE = 12  # Chart pairs per chunk in the genome-wide layout.
GRID_COLUMNS = 4

LRR_YLIM = (-1.0, 1.0)
BAF_YLIM = (0.0, 1.0)
LRR_REFERENCE = 0.0
BAF_REFERENCE = 0.5

POINT_COLOR = "#2a2a2a"
TREND_COLOR = "#ff3333"
REFERENCE_COLOR = "#555555"
BAND_COLOR = "yellow"
BAND_ALPHA = 0.25
GENOME_POINT_SIZE = 4.0
REGION_POINT_SIZE = 0.8

GENOME_FIGSIZE = (30, 40)
REGION_FIGSIZE = (10, 8)
DPI = 300

GENOME_FILENAME = "plot_genome.png"
REGION_FILENAME = "plot_{chrom}_{start}_{end}.png"
