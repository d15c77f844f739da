# tests/test_diagnostics.py

import pytest

from coptcal.core.types import CivilDate
from coptcal.diagnostics import round_trip

def test_continuity_across_century():
    assert round_trip.continuity_test(CivilDate(2098, 1, 1), CivilDate(2101, 12, 31), max_failures=1) == 0

def test_nayrouz_series():
    np = pytest.importorskip("numpy")
    from coptcal.diagnostics.nayrouz_scatter import build_series

    years, day, length = build_series(np, 2094, 2101)
    assert list(years) == list(range(2094, 2102))
    # 2096 is a leap year, 2100 is not; only the year opening in 2094 spans 366 days
    assert list(day) == [11, 12, 11, 11, 11, 11, 11, 11]
    assert list(length) == [366, 365, 365, 365, 365, 365, 365, 365]

def test_nayrouz_scatter_writes_png(tmp_path, capsys):
    pytest.importorskip("numpy")
    mpl = pytest.importorskip("matplotlib")
    mpl.use("Agg")
    from coptcal.diagnostics import nayrouz_scatter

    outbase = str(tmp_path / "scatter")
    assert nayrouz_scatter.main(["--start-year", "2090", "--end-year", "2110", "--outbase", outbase]) == 0
    assert (tmp_path / "scatter.png").exists()
    out = capsys.readouterr().out
    # leap-labelled 1815 (Nayrouz 2098) spans only 365 days
    assert "1815" in out
