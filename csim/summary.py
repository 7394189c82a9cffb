import re

RESULTS_FILE = ".csim_results"

_SUMMARY = re.compile(r"hits:(\d+) misses:(\d+) evictions:(\d+)")


def formatSummary(hits, misses, evictions):
    return "hits:%d misses:%d evictions:%d"%(hits, misses, evictions)


def printSummary(stats, resultsPath=RESULTS_FILE):
    """Print the hit, miss and eviction counts and save them for the grading driver.

    The results file holds the three counts on one line, space separated.
    """
    hits, misses, evictions = stats.asTuple()
    print(formatSummary(hits, misses, evictions))
    with open(resultsPath, "w") as f:
        f.write("%d %d %d\n"%(hits, misses, evictions))


def parseSummary(line):
    match = _SUMMARY.search(line)
    if match is None:
        return None
    return tuple(int(g) for g in match.groups())
