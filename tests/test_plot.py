import io

from matplotlib import pyplot as plt
import pytest

from csim import plot


RUNS = """\
hits:9 misses:8 evictions:6
hits:4 misses:5 evictions:3
L 10,1 miss
hits:0 misses:0 evictions:0
"""


@pytest.fixture(autouse=True)
def closeFigures():
    yield
    plt.close("all")


def test_read_summaries():
    assert plot.readSummaries(io.StringIO(RUNS)) == [(9, 8, 6), (4, 5, 3), (0, 0, 0)]


def test_plot_summaries():
    summaries = plot.readSummaries(io.StringIO(RUNS))
    fig = plot.plotSummaries(summaries, ["s1E1b1", "s4E1b4"])
    fig.canvas.draw()
    counts, rates = fig.axes
    assert len(counts.patches) == 9
    assert [t.get_text() for t in counts.get_xticklabels()] == ["s1E1b1", "s4E1b4", "2"]
    heights = [p.get_height() for p in rates.patches]
    assert heights == pytest.approx([800 / 17, 500 / 9, 0.0])


def test_plot_no_runs():
    fig = plot.plotSummaries([])
    assert len(fig.axes) == 2


def test_main(monkeypatch):
    shown = []
    monkeypatch.setattr("sys.stdin", io.StringIO(RUNS))
    monkeypatch.setattr("sys.argv", ["csim-plot", "a", "b", "c"])
    monkeypatch.setattr(plt, "show", lambda: shown.append(True))
    plot.main()
    assert shown == [True]
