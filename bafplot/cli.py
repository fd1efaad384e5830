# Command-line front end: load the BAF and LRR tracks, then write either one
# genome-wide image or one image per region of interest.
#
#   bafplot genome_plot <BAF file> <LRR file> <output dir>
#   bafplot region_plot <BAF file> <LRR file> <region file> <output dir>

from __future__ import annotations

import argparse
from pathlib import Path
from typing import List, Optional, Sequence, Union

import pandas as pd

from bafplot.charts import build_genome_pairs, build_region_pair, render_region
from bafplot.config import (
    DPI,
    GENOME_FILENAME,
    GENOME_MODE,
    MIN_PADDING,
    MODES,
    REGION_MODE,
    SMOOTH_BIN_SIZE,
)
from bafplot.layout import render_genome
from bafplot.tracks import load_regions, load_track
from bafplot.windows import region_filename

PathLike = Union[str, Path]


def genome_plot(
    baf: pd.DataFrame,
    lrr: pd.DataFrame,
    output_dir: PathLike,
    bin_size: int = SMOOTH_BIN_SIZE,
    dpi: int = DPI,
) -> Path:
    pairs = build_genome_pairs(baf, lrr, bin_size)
    return render_genome(pairs, Path(output_dir) / GENOME_FILENAME, dpi=dpi)


def region_plot(
    baf: pd.DataFrame,
    lrr: pd.DataFrame,
    region_file: PathLike,
    output_dir: PathLike,
    min_padding: int = MIN_PADDING,
    bin_size: int = SMOOTH_BIN_SIZE,
    dpi: int = DPI,
) -> List[Path]:
    loaded = load_regions(region_file)
    if not loaded.ok:
        print(loaded.message)
        return []

    written: List[Path] = []
    for region in loaded.regions:
        output_path = Path(output_dir) / region_filename(region)
        try:
            pair = build_region_pair(baf, lrr, region, min_padding, bin_size)
            written.append(render_region(pair, output_path, dpi=dpi))
        except (OSError, ValueError) as exc:
            print(f"Skipping region {region.chrom}:{region.start}-{region.end}: {exc}")
    print(f"Wrote {len(written)} of {len(loaded.regions)} region plots to {output_dir}")
    return written


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bafplot",
        description="Plot BAF and LRR tracks genome-wide or around regions of interest.",
    )
    parser.add_argument("mode", choices=MODES, help="Plotting mode.")
    parser.add_argument("baf_file", type=Path, help="gzip-compressed BAF table with a header row.")
    parser.add_argument("lrr_file", type=Path, help="gzip-compressed LRR table with a header row.")
    parser.add_argument(
        "paths",
        nargs="+",
        metavar="PATH",
        help="Region file (region_plot only) followed by the output directory.",
    )
    parser.add_argument(
        "--min-padding",
        type=int,
        default=MIN_PADDING,
        help=f"Minimum flank added on each side of a region (default: {MIN_PADDING}).",
    )
    parser.add_argument(
        "--smooth-bins",
        type=int,
        default=SMOOTH_BIN_SIZE,
        help=f"LRR points per smoothing bin (default: {SMOOTH_BIN_SIZE}).",
    )
    parser.add_argument("--dpi", type=int, default=DPI, help=f"Output resolution (default: {DPI}).")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    region_file: Optional[Path] = None
    if args.mode == REGION_MODE:
        if len(args.paths) != 2:
            parser.error("region_plot requires <region file> <output dir>")
        region_file, output_dir = Path(args.paths[0]), Path(args.paths[1])
    else:
        # A region file given in genome mode is ignored.
        if len(args.paths) > 2:
            parser.error("genome_plot takes <output dir> as its last argument")
        output_dir = Path(args.paths[-1])

    if args.smooth_bins < 1:
        parser.error("--smooth-bins must be at least 1")
    if args.min_padding < 0:
        parser.error("--min-padding must not be negative")
    if args.dpi < 1:
        parser.error("--dpi must be at least 1")
    for label, path in (("BAF", args.baf_file), ("LRR", args.lrr_file)):
        if not path.is_file():
            parser.error(f"{label} file not found: {path}")

    output_dir.mkdir(parents=True, exist_ok=True)
    try:
        baf = load_track(args.baf_file)
        lrr = load_track(args.lrr_file)
    except (OSError, ValueError) as exc:
        parser.error(str(exc))

    if args.mode == GENOME_MODE:
        genome_plot(baf, lrr, output_dir, bin_size=args.smooth_bins, dpi=args.dpi)
    else:
        region_plot(
            baf,
            lrr,
            region_file,
            output_dir,
            min_padding=args.min_padding,
            bin_size=args.smooth_bins,
            dpi=args.dpi,
        )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
