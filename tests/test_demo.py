import pytest

from ftree.demo import main, run


class TestDemo:

    def test_run_prints_state(self, capsys):
        f = run()
        out = capsys.readouterr().out.splitlines()
        assert out[0] == f"f: {f!r}"
        assert out[0].startswith("f: FenwickTree(n=10, a=[0, 1, 4, 10, 14, 0, 0, 0, 14, 0, 0])")
        assert out[1] == "f.query(3): 14"

    def test_run_small_capacity(self):
        with pytest.raises(ValueError):
            run(2)

    def test_main_default(self, capsys):
        assert main([]) == 0
        assert "f.query(3): 14" in capsys.readouterr().out

    def test_main_rejects_capacity(self):
        with pytest.raises(SystemExit) as excinfo:
            main(["--capacity", "1"])
        assert excinfo.value.code == 2

    def test_main_plot(self, tmp_path, capsys):
        target = tmp_path / "demo.png"
        assert main(["--capacity", "5", "--plot", str(target)]) == 0
        assert target.exists()
        assert "Plot saved to" in capsys.readouterr().out
