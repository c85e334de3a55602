import importlib.util
import os

import pytest

EXAMPLE = os.path.join(os.path.dirname(__file__), '..', 'examples', 'count_inversions.py')


@pytest.fixture
def count_inversions():
    spec = importlib.util.spec_from_file_location("count_inversions", EXAMPLE)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


class TestCountInversions:

    def test_known_counts(self, count_inversions):
        assert count_inversions.count_inversions([]) == 0
        assert count_inversions.count_inversions([1, 2, 3]) == 0
        assert count_inversions.count_inversions([3, 2, 1]) == 3
        assert count_inversions.count_inversions([2, 4, 1, 3, 5]) == 3
        assert count_inversions.count_inversions([2, 2, 1]) == 2

    def test_main_reports_match(self, count_inversions, capsys):
        count_inversions.main()
        assert "Counts match." in capsys.readouterr().out

    def test_main_exits_on_mismatch(self, count_inversions, monkeypatch):
        monkeypatch.setattr(count_inversions, "count_inversions_naive", lambda values: -1)
        with pytest.raises(SystemExit, match="Mismatch"):
            count_inversions.main()
