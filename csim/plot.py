#! /usr/bin/env python3

from matplotlib import pyplot as plt
from matplotlib.gridspec import GridSpec
import sys
import numpy as np

from csim.summary import parseSummary


def readSummaries(lines):
    summaries = []
    for line in lines:
        summary = parseSummary(line)
        if summary is not None:
            summaries.append(summary)
    return summaries


def plotSummaries(summaries, labels=()):
    """Compare the results of several csim runs.

    Parameters
    ----------
    summaries (list):
        (hits, misses, evictions) per run, in the order they were produced.
    labels (sequence of str):
        Name of each run (e.g. its configuration), missing labels are numbered.

    Returns the matplotlib figure, top: access counts, bottom: miss rate.
    """
    counts = np.asarray(summaries, dtype=float).reshape(-1, 3)
    labels = list(labels) + [str(i) for i in range(len(labels), len(counts))]
    labels = labels[:len(counts)]

    bar_width = 0.25
    index = np.arange(len(counts))
    gs = GridSpec(2,1)
    fig = plt.figure()

    ax = fig.add_subplot(gs[0,0])
    ax.bar(index, counts[:,0], width=bar_width, color='C2', label='Hits')
    ax.bar(index + bar_width, counts[:,1], width=bar_width, color='C3', label='Misses')
    ax.bar(index + 2*bar_width, counts[:,2], width=bar_width, color='C7', label='Evictions')
    ax.set_ylabel("Accesses")
    ax.set_xticks(index + bar_width)
    ax.set_xticklabels(labels)
    ax.legend()

    # Every access is exactly one hit or one miss
    total = counts[:,0] + counts[:,1]
    missRate = np.divide(counts[:,1], total, out=np.zeros_like(total), where=total > 0)

    ax = fig.add_subplot(gs[1,0])
    ax.bar(index + bar_width, missRate * 100, width=bar_width, color='C3')
    ax.set_ylabel("Miss rate (%)")
    ax.set_xticks(index + bar_width)
    ax.set_xticklabels(labels)
    return fig


def main():
    summaries = readSummaries(sys.stdin)
    plotSummaries(summaries, sys.argv[1:])
    plt.show()


if __name__ == '__main__':
    main()
