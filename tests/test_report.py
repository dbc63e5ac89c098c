import math

import pytest

from anneal import SAConfig, SAResult, read_solutions
from anneal.report import format_report, gap_percent, lookup_reference, plot_tour


def _result(tour, length, initial=60.0):
    return SAResult(best_tour=tour, best_length=length, initial_length=initial,
                    config=SAConfig(), elapsed_sec=0.0)


def test_reference_lookup_for_square(tmp_path):
    path = tmp_path / "solutions.txt"
    path.write_text("square: 40.0\n")
    table = read_solutions(path)
    assert lookup_reference(table, "square.tsp") == 40.0
    assert lookup_reference(table, str(tmp_path / "square.tsp")) == 40.0
    assert lookup_reference(table, "circle.tsp") is None


def test_report_with_reference(square):
    text = format_report(square, _result([0, 1, 2, 3], 40.0), 40.0)
    assert "Initial distance: 60" in text
    assert "Final distance: 40" in text
    assert "Tour: 0 1 2 3" in text
    assert "Correct Answer: 40" in text
    assert "Gap: 0.00%" in text


def test_report_uses_external_ids(square_file):
    from anneal import parse_tsp_file
    inst = parse_tsp_file(square_file)
    text = format_report(inst, _result([2, 3, 0, 1], 40.0), None)
    assert "Tour: 3 4 1 2" in text
    assert "Correct Answer: Not available in solutions.txt" in text
    assert "Gap" not in text


def test_gap_percent():
    assert gap_percent(44.0, 40.0) == pytest.approx(10.0)
    assert math.isnan(gap_percent(1.0, 0.0))


def test_plot_tour_writes_png(square, tmp_path):
    out = tmp_path / "tour.png"
    plot_tour(square, [0, 1, 2, 3], str(out))
    assert out.exists() and out.stat().st_size > 0
