import pandas as pd
import pytest

from bafplot.tracks import Region
from bafplot.windows import filter_track, padded_window, region_filename, region_padding


def test_narrow_region_uses_padding_floor():
    region = Region("chr1", 1_000_000, 1_050_000, "DEL")
    assert region_padding(region) == 600_000
    assert padded_window(region) == (400_000, 1_650_000)
    assert region_filename(region) == "plot_chr1_1000000_1050000.png"


def test_wide_region_pads_by_its_own_span():
    region = Region("chr1", 1_000_000, 2_000_000)
    assert region_padding(region) == 1_000_000
    assert padded_window(region) == (0, 3_000_000)


def test_padding_equals_floor_when_span_matches():
    region = Region("chr1", 0, 600_000)
    assert region_padding(region) == 600_000


@pytest.mark.parametrize("span", [0, 1, 599_999, 600_000, 600_001, 5_000_000])
def test_padding_never_below_floor(span):
    region = Region("chr3", 10_000_000, 10_000_000 + span)
    padding = region_padding(region, 600_000)
    assert padding >= 600_000
    if span <= 600_000:
        assert padding == 600_000


def test_padded_start_is_not_clamped():
    region = Region("chr1", 100_000, 150_000)
    assert padded_window(region, 600_000) == (-500_000, 750_000)


def test_negative_floor_rejected():
    with pytest.raises(ValueError):
        region_padding(Region("chr1", 0, 10), -1)


def _track():
    return pd.DataFrame(
        [
            ("chr1", 399_999, 500_000, 0.1),  # starts before the window, ends inside
            ("chr1", 400_000, 400_001, 0.2),  # lower bound
            ("chr1", 1_000_000, 1_000_001, 0.3),
            ("chr1", 1_650_000, 1_700_000, 0.4),  # upper bound, ends outside
            ("chr1", 1_650_001, 1_650_002, 0.5),
            ("chr2", 1_000_000, 1_000_001, 0.6),
        ],
        columns=["Chr", "Start", "End", "Value"],
    )


def test_filter_checks_only_start_against_window():
    kept = filter_track(_track(), "chr1", (400_000, 1_650_000))
    assert kept["Start"].tolist() == [400_000, 1_000_000, 1_650_000]


def test_filter_is_order_independent():
    track = _track()
    shuffled = track.sample(frac=1.0, random_state=7)
    window = (400_000, 1_650_000)
    a = filter_track(track, "chr1", window).sort_values("Start").reset_index(drop=True)
    b = filter_track(shuffled, "chr1", window).sort_values("Start").reset_index(drop=True)
    pd.testing.assert_frame_equal(a, b)


def test_filter_returns_empty_frame_for_unknown_chromosome():
    kept = filter_track(_track(), "chrX", (0, 10_000_000))
    assert kept.empty
    assert list(kept.columns) == ["Chr", "Start", "End", "Value"]
