from csim.simulator import Simulator
from csim.summary import formatSummary, parseSummary, printSummary


def test_format_summary():
    assert formatSummary(9, 8, 6) == "hits:9 misses:8 evictions:6"


def test_print_summary(tmp_path, capsys):
    sim = Simulator(1, 1, 1)
    for address in (0x10, 0x20, 0x10, 0x10):
        sim.access(address)
    results = tmp_path / "results"
    printSummary(sim.stats, results)
    assert capsys.readouterr().out == "hits:1 misses:3 evictions:2\n"
    assert results.read_text() == "1 3 2\n"


def test_parse_summary():
    assert parseSummary("hits:4 misses:5 evictions:3\n") == (4, 5, 3)
    assert parseSummary("L 10,1 miss") is None
    assert parseSummary("") is None
