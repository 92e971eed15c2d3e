from broll_organizer.application.selector import select_best
from broll_organizer.domain.models import AssetCandidate, QualityTier

from conftest import hd, sd


def test_hd_wide_enough_beats_earlier_sd():
    best = select_best([sd(640), hd(1920)])
    assert best.quality is QualityTier.HD
    assert best.width == 1920


def test_first_sd_wins_among_sd():
    first = sd(640)
    assert select_best([first, sd(800)]) is first


def test_empty_returns_none():
    assert select_best([]) is None


def test_narrow_hd_falls_back_to_sd():
    narrow = hd(960)
    standard = sd(640)
    assert select_best([narrow, standard]) is standard


def test_first_candidate_is_last_resort():
    odd = AssetCandidate(QualityTier.UNKNOWN, 4096, 2160, "https://cdn.test/uhd.mp4")
    narrow = hd(960)
    assert select_best([odd, narrow]) is odd


def test_exactly_1280_counts_as_hd():
    edge = hd(1280)
    assert select_best([sd(640), edge]) is edge
