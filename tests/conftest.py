import numpy as np
import pandas as pd
import pytest
from pathlib import Path


def make_track(chroms, n_points=30, start=1_000_000, step=10_000, values=None):
    rows = []
    for chrom in chroms:
        starts = start + np.arange(n_points) * step
        vals = values if values is not None else np.linspace(-0.5, 0.5, n_points)
        for s, v in zip(starts, vals):
            rows.append((chrom, int(s), int(s) + 1, float(v)))
    return pd.DataFrame(rows, columns=["Chr", "Start", "End", "Value"])


def write_track(path, track, value_name, compression="gzip"):
    out = track.rename(columns={"Value": value_name})
    out.to_csv(path, sep="\t", index=False, compression=compression)
    return Path(path)


@pytest.fixture
def lrr_track():
    # chromosomes deliberately out of lexical order
    return make_track(["chr2", "chr1", "chr10"])


@pytest.fixture
def baf_track():
    return make_track(["chr2", "chr1", "chr10"], values=np.linspace(0.0, 1.0, 30))


@pytest.fixture
def track_files(tmp_path, baf_track, lrr_track):
    baf_path = write_track(tmp_path / "sample.baf.tsv.gz", baf_track, "BAF")
    lrr_path = write_track(tmp_path / "sample.lrr.tsv.gz", lrr_track, "LRR")
    return baf_path, lrr_path


@pytest.fixture
def region_file(tmp_path):
    path = tmp_path / "regions.bed"
    path.write_text("chr1\t1100000\t1150000\tDEL\nchr2\t1000000\t1050000\tDUP\n")
    return path
