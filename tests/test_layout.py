import matplotlib.image as mpimg
import pytest

from bafplot.charts import build_genome_pairs
from bafplot.layout import arrange_pairs, chunk_pairs, grid_positions, render_genome
from tests.conftest import make_track


def _chroms(n):
    # reverse numeric order so that sorting would change the layout
    return [f"chr{i}" for i in range(n, 0, -1)]


def test_twenty_five_pairs_make_three_chunks():
    chunks = chunk_pairs(list(range(25)))
    assert [len(chunk) for chunk in chunks] == [12, 12, 1]
    assert [item for chunk in chunks for item in chunk] == list(range(25))


def test_chunk_pairs_empty_and_invalid():
    assert chunk_pairs([]) == []
    with pytest.raises(ValueError):
        chunk_pairs([1, 2], 0)


def test_grid_positions_fill_rows_of_four():
    assert grid_positions(6) == [(0, 0), (0, 1), (0, 2), (0, 3), (1, 0), (1, 1)]
    with pytest.raises(ValueError):
        grid_positions(3, 0)


def test_arrange_pairs_keeps_first_seen_order():
    chroms = ["chr2", "chr1", "chr10"]
    track = make_track(chroms, n_points=12)
    pairs = build_genome_pairs(track, track)
    assert arrange_pairs(pairs) == [("chr2", 0, 0), ("chr1", 0, 1), ("chr10", 0, 2)]


def test_arrange_pairs_spans_chunks_in_one_grid():
    chroms = _chroms(25)
    track = make_track(chroms, n_points=3)
    placements = arrange_pairs(build_genome_pairs(track, track))
    assert [chrom for chrom, _, _ in placements] == chroms
    assert placements[12] == ("chr13", 3, 0)
    assert placements[-1] == ("chr1", 6, 0)


def test_render_genome_writes_single_canvas(tmp_path):
    track = make_track(_chroms(25), n_points=3)
    out = render_genome(build_genome_pairs(track, track), tmp_path / "plot_genome.png", dpi=10)
    assert out.exists()
    height, width = mpimg.imread(out).shape[:2]
    assert (width, height) == (300, 400)
    assert list(tmp_path.iterdir()) == [out]


def test_render_genome_without_chromosomes(tmp_path):
    out = render_genome({}, tmp_path / "plot_genome.png", dpi=5)
    assert out.exists()
