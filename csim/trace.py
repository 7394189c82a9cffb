import collections
import logging
import re

log = logging.getLogger(__name__)

OPERATIONS = "ILSM"

TraceRecord = collections.namedtuple("TraceRecord", "op address size")

_RECORD = re.compile(r"^\s*(?:0[xX])?([0-9a-fA-F]+),(\d+)\s*$")


class TraceError(IOError):
    pass


def parseLine(line):
    """Parse one Valgrind trace line such as `` L 7ff000108,8``.

    Returns a TraceRecord, or None if the line is not a record.
    """
    if len(line) < 3 or line[1] not in OPERATIONS or line[2] != ' ':
        return None
    match = _RECORD.match(line[3:])
    if match is None:
        return None
    return TraceRecord(line[1], int(match.group(1), 16), int(match.group(2)))


def parseTrace(lines):
    for i, line in enumerate(lines):
        record = parseLine(line)
        if record is None:
            log.debug("skipping line %d: %r", i + 1, line)
            continue
        yield record


def openTrace(path):
    try:
        return open(path, "r", encoding="latin-1")
    except OSError as e:
        raise TraceError("%s: %s"%(path, e.strerror or e)) from e


def replay(simulator, records, callback=None):
    """Replay trace records, in order, against a simulator.

    Parameters
    ----------
    simulator (Simulator):
        The simulation the accesses are made against.
    records (iterable of TraceRecord):
        Consumed once, in order.
    callback (callable):
        Optional, called as callback(record, outcomes) after each replayed record.

    Instruction loads (I) are ignored. Loads (L) and stores (S) access the address once,
    a modify (M) is a load followed by a store to the same address.
    """
    for record in records:
        if record.op in ("L", "S"):
            outcomes = [simulator.access(record.address)]
        elif record.op == "M":
            outcomes = [simulator.access(record.address)]
            outcomes.append(simulator.access(record.address))
        else:
            continue
        if callback is not None:
            callback(record, outcomes)
    return simulator.stats
